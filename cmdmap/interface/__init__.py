#!/usr/bin/env python3
# cmdmap/interface/__init__.py
from __future__ import annotations

"""
Package for console interface and command dispatch.

Provides:
- Line parsing (trigger symbol stripping, label/argument split).
- Command dispatcher with permission and execution scope checks.
- Command loader for the plugins package.
- Label completion.
- Console frontends (prompt_toolkit / piped input) and the console read loop.
"""


from .parser import ParsedLine, parse_line, strip_trigger

from .handler import (
    CommandDispatcher,
    DispatchStatus,
    MSG_CONSOLE_ONLY,
    MSG_NO_COMMAND,
    MSG_NO_PERMISSION,
    MSG_PLAYER_ONLY,
    MSG_UNKNOWN,
)

from .loader import LoadReport, load_commands, register_handlers

from .completion import suggest, BUILT_IN_COMMANDS

from .cli import (
    BaseCLI,
    PromptToolkitCLI,
    StreamCLI,
    make_cli,
    run_console,
)

__all__ = [
    # parser
    "ParsedLine",
    "parse_line",
    "strip_trigger",
    # handler
    "CommandDispatcher",
    "DispatchStatus",
    "MSG_CONSOLE_ONLY",
    "MSG_NO_COMMAND",
    "MSG_NO_PERMISSION",
    "MSG_PLAYER_ONLY",
    "MSG_UNKNOWN",
    # loader
    "LoadReport",
    "load_commands",
    "register_handlers",
    # completion
    "suggest",
    "BUILT_IN_COMMANDS",
    # cli
    "BaseCLI",
    "PromptToolkitCLI",
    "StreamCLI",
    "make_cli",
    "run_console",
]
