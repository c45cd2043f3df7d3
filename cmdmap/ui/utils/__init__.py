#!/usr/bin/env python3
# cmdmap/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    strip_ansi,
    ansi_supported,
    colorize,
)
from .console import PRINT_MUTEX, print_line

__all__ = [
    "ANSI",
    "strip_ansi",
    "ansi_supported",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
]
