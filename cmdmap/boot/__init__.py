#!/usr/bin/env python3
# cmdmap/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: startup pipeline with [  OK  ] / [FAILED] lines.
- ServerContext: config, logger, command registry, dispatcher and load report.
"""


from .boot import ServerContext, boot_sequence

__all__ = ["boot_sequence", "ServerContext"]
