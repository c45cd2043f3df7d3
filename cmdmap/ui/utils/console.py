#!/usr/bin/env python3
# cmdmap/ui/utils/console.py
from __future__ import annotations

import sys
import threading
from typing import TextIO

# Single shared print mutex for console output and logging; the console thread
# and actor threads print concurrently.
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file: TextIO | None = None, flush: bool = False) -> None:
    """Thread-safe single-line print."""
    # Resolve stdout at call time so redirection (and pytest capture) is honored.
    out = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        out.write(f"{text}\n")
        if flush:
            out.flush()
