#!/usr/bin/env python3
# cmdmap/commands/__init__.py
from __future__ import annotations

"""
Package for command management and registration.

Provides:
- Data structures and protocols (`CommandDescriptor`, `ExecutionScope`,
  `CommandHandler`, `RegistryEntry`, `Actor`, `Account`).
- Thread-safe registry and the class decorator (`CommandRegistry`, `command`).
- Errors raised by registration and loading.

This package re-exports public APIs from:
- command_types.py
- commands.py
- errors.py
"""


# Re-export from submodules
from .command_types import (
    Account,
    Actor,
    CommandDescriptor,
    CommandHandler,
    ExecutionScope,
    RegistryEntry,
    send_message,
)
from .commands import CommandRegistry, command, descriptor_of
from .errors import CommandConflictError, CommandError, CommandLoadError

__all__ = [
    "Account",
    "Actor",
    "CommandDescriptor",
    "CommandHandler",
    "ExecutionScope",
    "RegistryEntry",
    "send_message",
    "CommandRegistry",
    "command",
    "descriptor_of",
    "CommandError",
    "CommandConflictError",
    "CommandLoadError",
]
