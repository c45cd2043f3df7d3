#!/usr/bin/env python3
# cmdmap/commands/errors.py
from __future__ import annotations

"""Exceptions raised by the command registry and loader."""


class CommandError(Exception):
    """Base class for command registry errors."""


class CommandConflictError(CommandError):
    """A strict registry refused a key already bound to another command."""

    def __init__(self, key: str, existing_label: str, new_label: str) -> None:
        super().__init__(
            f"Key '{key}' for '{new_label}' is already bound to '{existing_label}'.")
        self.key = key
        self.existing_label = existing_label
        self.new_label = new_label


class CommandLoadError(CommandError):
    """A command candidate could not be imported, constructed or registered."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
