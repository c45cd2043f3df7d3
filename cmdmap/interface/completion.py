#!/usr/bin/env python3
# cmdmap/interface/completion.py
from __future__ import annotations

"""
Command line completion utilities.

Only the first token is completed: built-in console verbs plus every registered
label and alias. A leading trigger symbol ('/', '!') is kept in the suggestion.
"""

from cmdmap.commands import CommandRegistry

# Console verbs handled by the read loop itself
BUILT_IN_COMMANDS: tuple[str, ...] = ("exit", "quit")


def current_prefix(text_before_cursor: str) -> str:
    """Return the token being typed (the whole buffer while on the first token)."""
    return text_before_cursor.lstrip()


def suggest(registry: CommandRegistry, text_before_cursor: str) -> list[str]:
    """Produce label suggestions for the current buffer content."""
    raw_buffer = current_prefix(text_before_cursor)
    if " " in raw_buffer:
        # Arguments are parsed by each command; nothing to suggest.
        return []

    trigger = ""
    if raw_buffer and not raw_buffer[0].isalpha():
        trigger, raw_buffer = raw_buffer[0], raw_buffer[1:]

    universe = set(registry.names())
    if not trigger:
        universe.update(BUILT_IN_COMMANDS)
    return [f"{trigger}{w}" for w in sorted(universe) if w.startswith(raw_buffer)]
