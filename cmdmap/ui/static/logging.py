#!/usr/bin/env python3
# cmdmap/ui/static/logging.py
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from cmdmap.ui.utils import ANSI, PRINT_MUTEX, strip_ansi


class ColorizingStreamHandler(logging.StreamHandler):
    """
    StreamHandler that colors records by level when the stream is a TTY.
    Writes are serialized with the console print mutex.
    """

    _LEVEL_COLORS = {
        logging.DEBUG: ANSI["bright_black"],
        logging.INFO: "",
        logging.WARNING: ANSI["yellow"],
        logging.ERROR: ANSI["red"],
        logging.CRITICAL: ANSI["magenta"],
    }

    def __init__(self, stream=None) -> None:
        super().__init__(stream)
        self._use_ansi = bool(getattr(self.stream, "isatty", lambda: False)())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if self._use_ansi:
                color = self._LEVEL_COLORS.get(record.levelno, "")
                if color:
                    message = f"{color}{message}{ANSI['reset']}"
            else:
                message = strip_ansi(message)
            with PRINT_MUTEX:
                self.stream.write(message + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


class PlainFormatter(logging.Formatter):
    """Formatter that strips ANSI (good for log files)."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(super().format(record))


def init_logger(
    name: str = "cmdmap",
    level: int | str = logging.INFO,
    logfile: Optional[str | Path] = None,
) -> logging.Logger:
    """
    Initialize the application logger.

    Console: colored on a TTY, plain otherwise (stderr).
    File (optional): rotating, plain text, UTF-8, always at DEBUG.
    Calling it again only adjusts the level; handlers are added once.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers:
        if isinstance(handler, ColorizingStreamHandler):
            handler.setLevel(level)

    if not any(isinstance(h, ColorizingStreamHandler) for h in logger.handlers):
        console_handler = ColorizingStreamHandler(stream=sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(console_handler)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        Path(logfile).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            logfile, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            PlainFormatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        # File handler wants DEBUG records; console handler filters its own level.
        logger.setLevel(logging.DEBUG)

    return logger
