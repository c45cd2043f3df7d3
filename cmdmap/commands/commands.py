#!/usr/bin/env python3
# cmdmap/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: thread-safe index of labels and aliases to registry entries.
- command: class decorator attaching a CommandDescriptor to a handler class.
- descriptor_of: read the descriptor attached by `command`.
"""

import logging
import threading
from typing import Any, Callable, Dict, Iterable, Optional

from cmdmap.commands.command_types import (
    CommandDescriptor,
    CommandHandler,
    ExecutionScope,
    RegistryEntry,
)
from cmdmap.commands.errors import CommandConflictError

_DESCRIPTOR_ATTR = "__command_descriptor__"

logger = logging.getLogger("cmdmap.commands")


class CommandRegistry:
    """
    Holds all registered commands and resolves labels and aliases.

    Every key of one registration maps to the same RegistryEntry object, and all
    keys of an entry are added or removed together under a single lock.
    """

    def __init__(self, *, strict: bool = False) -> None:
        # Label or alias -> entry (several keys share one entry)
        self._index: Dict[str, RegistryEntry] = {}
        self._lock = threading.RLock()
        self.strict = strict

    # ---------------- Registration ----------------

    def register(self, descriptor: CommandDescriptor, handler: CommandHandler) -> None:
        """
        Bind the descriptor's label and aliases to `handler`.

        An entry previously registered under the same label is replaced together
        with all of its aliases. Keys bound to a different command are rebound
        (last write wins) unless the registry is strict.
        """
        entry = RegistryEntry(handler=handler, descriptor=descriptor)
        with self._lock:
            previous = self._index.get(descriptor.label)
            if previous is not None and previous.label != descriptor.label:
                previous = None

            if self.strict:
                for key in descriptor.keys:
                    bound = self._index.get(key)
                    if bound is not None and bound is not previous:
                        raise CommandConflictError(key, bound.label, descriptor.label)

            if previous is not None:
                self._drop(previous)

            for key in descriptor.keys:
                bound = self._index.get(key)
                if bound is not None and bound is not previous:
                    logger.debug("Key '%s' rebound from '%s' to '%s'",
                                 key, bound.label, descriptor.label)
                self._index[key] = entry

        logger.debug("Registered command: %s", descriptor.label)

    def unregister(self, label: str) -> None:
        """Remove the command resolved by `label` (label or alias) and all of its keys."""
        with self._lock:
            entry = self._index.get(label)
            if entry is None:
                return
            self._drop(entry)
        logger.debug("Unregistered command: %s", entry.label)

    def _drop(self, entry: RegistryEntry) -> None:
        # Caller holds the lock.
        for key in [k for k, bound in self._index.items() if bound is entry]:
            del self._index[key]

    # ---------------- Lookup ----------------

    def lookup(self, label: str) -> Optional[RegistryEntry]:
        """Return the entry for a label or alias, or None if not found."""
        with self._lock:
            return self._index.get(label)

    def get_handler(self, label: str) -> Optional[CommandHandler]:
        entry = self.lookup(label)
        return entry.handler if entry is not None else None

    def keys_of(self, label: str) -> list[str]:
        """Return every key currently bound to the entry resolved by `label`."""
        with self._lock:
            entry = self._index.get(label)
            if entry is None:
                return []
            return [k for k, bound in self._index.items() if bound is entry]

    def snapshot(self) -> list[CommandHandler]:
        """Return a copy of the handler bound to each key (aliases included)."""
        with self._lock:
            return [entry.handler for entry in self._index.values()]

    def snapshot_map(self) -> dict[str, CommandHandler]:
        """Return a copy of the key -> handler mapping."""
        with self._lock:
            return {key: entry.handler for key, entry in self._index.items()}

    def entries(self) -> list[RegistryEntry]:
        """Return distinct entries sorted by label (avoid alias duplicates in UIs)."""
        with self._lock:
            unique = {id(entry): entry for entry in self._index.values()}
        return sorted(unique.values(), key=lambda e: e.label)

    def names(self) -> list[str]:
        """Return all labels and aliases for completion."""
        with self._lock:
            return list(self._index.keys())

    def __contains__(self, label: object) -> bool:
        with self._lock:
            return label in self._index

    def __len__(self) -> int:
        return len(self.entries())


def command(
    *,
    label: str,
    aliases: Iterable[str] | None = None,
    permission: str = "",
    execution: ExecutionScope = ExecutionScope.ANY,
    description: str | None = None,
    usage: str | None = None,
) -> Callable[[type], type]:
    """
    Class decorator attaching command metadata to a CommandHandler subclass.

    - `description` falls back to the first line of the class docstring.
    - `usage` falls back to the label.
    The class is not registered here; plugin modules list it in COMMANDS and the
    loader registers it into the registry it is given.
    """

    def wrapper(cls: type) -> type:
        doc = (cls.__doc__ or "").strip().splitlines()
        descriptor = CommandDescriptor(
            label=label,
            aliases=frozenset(aliases or ()),
            permission=permission,
            execution=execution,
            description=(description or (doc[0] if doc else "")).strip(),
            usage=usage or label,
        )
        setattr(cls, _DESCRIPTOR_ATTR, descriptor)
        return cls

    return wrapper


def descriptor_of(obj: Any) -> Optional[CommandDescriptor]:
    """Return the descriptor attached by `command` to a class or instance."""
    descriptor = getattr(obj, _DESCRIPTOR_ATTR, None)
    return descriptor if isinstance(descriptor, CommandDescriptor) else None
