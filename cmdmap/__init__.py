#!/usr/bin/env python3
# cmdmap/__init__.py
from __future__ import annotations
"""
cmdmap: command registry and dispatch engine for server consoles and in-game chat.

Subpackages:
- commands: descriptors, handler base class, registry, built-ins.
- interface: parsing, dispatch, plugin loading, console frontends.
- security: accounts and players.
- boot: startup sequence producing a ServerContext.
"""

__version__ = "0.1.0"
