#!/usr/bin/env python3
# cmdmap/boot/boot.py
from __future__ import annotations
"""
Boot sequence.

Builds the ServerContext that owns the command registry and dispatcher. The
context is handed to whatever needs to dispatch (console loop, chat handling);
nothing is reachable through module globals.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional
import logging
import platform

from cmdmap.commands import CommandRegistry
from cmdmap.commands.builtin import register_builtins
from cmdmap.config import AppConfig, load_config
from cmdmap.interface import CommandDispatcher, LoadReport, load_commands
from cmdmap.ui import colorize, init_logger, print_line


@dataclass(slots=True)
class ServerContext:
    config: AppConfig
    logger: logging.Logger
    registry: CommandRegistry
    dispatcher: CommandDispatcher
    report: LoadReport = field(default_factory=LoadReport)

    @property
    def loaded_count(self) -> int:
        return len(self.registry)


def _step(label: str, fn: Callable[[], Any], *, quiet: bool = False) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        print_line(
            colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
        )
        raise
    if not quiet:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def boot_sequence(config: Optional[AppConfig] = None, *, quiet: bool = False) -> ServerContext:
    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
        quiet=quiet,
    )

    # ---------- config ----------
    if config is None:
        config = _step("Load configuration", load_config, quiet=quiet)
    cfg = config

    # ---------- logging ----------
    logger = _step(
        "Initialize logger",
        lambda: init_logger("cmdmap", level=cfg.log_level, logfile=cfg.log_file_path),
        quiet=quiet,
    )

    # ---------- commands ----------
    registry = CommandRegistry(strict=cfg.strict_registration)
    dispatcher = CommandDispatcher(registry)
    _step("Register built-in commands", lambda: register_builtins(registry), quiet=quiet)

    report = _step(
        f"Load commands package '{cfg.commands_package}'",
        lambda: load_commands(registry, cfg.commands_package),
        quiet=quiet,
    )
    for failure in report.failures:
        if not quiet:
            print_line(colorize(f"[ WARN ] Skipped {failure}", "yellow"))

    context = ServerContext(
        config=cfg,
        logger=logger,
        registry=registry,
        dispatcher=dispatcher,
        report=report,
    )
    _step(f"Boot complete ({context.loaded_count} commands)", lambda: None, quiet=quiet)
    return context
