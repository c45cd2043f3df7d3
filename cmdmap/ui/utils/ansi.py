#!/usr/bin/env python3
# cmdmap/ui/utils/ansi.py
from __future__ import annotations

import os
import re
import sys
from typing import Optional

# ---- Core SGR maps ----------------------------------------------------------

ANSI = {
    "reset": "\x1b[0m",

    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "underline": "\x1b[4m",

    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",

    "bright_black": "\x1b[90m",
    "bright_red": "\x1b[91m",
    "bright_green": "\x1b[92m",
    "bright_yellow": "\x1b[93m",
}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

_ansi_supported_cache: Optional[bool] = None

def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)

def ansi_supported() -> bool:
    """
    Return True if ANSI colors should be emitted on stdout.

    Honors NO_COLOR (https://no-color.org) and disables colors when stdout is not a TTY.
    """
    global _ansi_supported_cache
    if _ansi_supported_cache is not None:
        return _ansi_supported_cache

    if os.environ.get("NO_COLOR"):
        _ansi_supported_cache = False
    elif os.name == "nt":
        _ansi_supported_cache = bool(
            os.environ.get("WT_SESSION")
            or os.environ.get("ANSICON")
            or os.environ.get("TERM", "").startswith(("xterm", "vt100"))
        )
    else:
        _ansi_supported_cache = bool(getattr(sys.stdout, "isatty", lambda: False)())
    return _ansi_supported_cache

def colorize(text: str, *styles: str) -> str:
    """
    Wrap text with one or more SGR styles from ANSI (e.g., 'red', 'bold').
    Always auto-resets at the end. Returns text unchanged when colors are off.
    """
    if not ansi_supported():
        return text
    seq = "".join(ANSI[s] for s in styles if s in ANSI)
    return f"{seq}{text}{ANSI['reset']}" if seq else text
