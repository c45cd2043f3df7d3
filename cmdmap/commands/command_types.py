#!/usr/bin/env python3
# cmdmap/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- ExecutionScope: who may invoke a command (anyone, players only, console only).
- CommandDescriptor: immutable metadata (label, aliases, permission, scope).
- RegistryEntry: one (handler, descriptor) pair owned by the registry.
- CommandHandler: base class for command implementations with the console
  and actor calling conventions.
- Actor / Account: the boundary protocols used for authorization and replies.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol, runtime_checkable

from cmdmap.ui import print_line


class ExecutionScope(Enum):
    """Which callers may run a command."""

    ANY = "any"
    PLAYER = "player"
    CONSOLE = "console"


@runtime_checkable
class Account(Protocol):
    """Permission holder behind an actor."""

    def has_permission(self, node: str) -> bool:  # pragma: no cover - signature only
        ...


@runtime_checkable
class Actor(Protocol):
    """An interactive, authenticated invoker (as opposed to the console)."""

    @property
    def account(self) -> Account:  # pragma: no cover - signature only
        ...

    def send_message(self, text: str) -> None:  # pragma: no cover - signature only
        ...


def _normalize_aliases(aliases: Iterable[str] | str | None) -> frozenset[str]:
    if aliases is None:
        return frozenset()
    if isinstance(aliases, str):
        aliases = [aliases]
    normalized = frozenset(str(a) for a in aliases)
    if any(not a for a in normalized):
        raise ValueError("Command aliases must be non-empty strings.")
    return normalized


@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    """
    Static metadata for one command.

    Attributes:
        label: Canonical key typed by users. Must be non-empty.
        aliases: Extra keys resolving to the same handler.
        permission: Permission node checked for actors; "" means none required.
        execution: Which callers may run the command.
        description: Short, user-facing description for help output.
        usage: One-line usage string for help output.
    """

    label: str
    aliases: frozenset[str] = field(default_factory=frozenset)
    permission: str = ""
    execution: ExecutionScope = ExecutionScope.ANY
    description: str = ""
    usage: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.label, str) or not self.label:
            raise ValueError("Command label must be a non-empty string.")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "aliases", _normalize_aliases(self.aliases))
        object.__setattr__(self, "permission", self.permission or "")
        if not isinstance(self.execution, ExecutionScope):
            object.__setattr__(self, "execution", ExecutionScope(self.execution))

    @property
    def keys(self) -> tuple[str, ...]:
        """Every index key of this command: the label first, then sorted aliases."""
        return (self.label, *sorted(self.aliases - {self.label}))


@dataclass(frozen=True, slots=True, eq=False)
class RegistryEntry:
    """
    A registered (handler, descriptor) pair.

    Entries compare by identity: the registry relies on `is` to find every key
    bound to the same entry.
    """

    handler: "CommandHandler"
    descriptor: CommandDescriptor

    @property
    def label(self) -> str:
        return self.descriptor.label


def send_message(actor: Actor | None, message: str) -> None:
    """Deliver a message to an actor, or print it on the console when actor is None."""
    if actor is None:
        print_line(message)
        return
    actor.send_message(message)


class CommandHandler:
    """
    Base class for command implementations.

    Subclasses override one or both calling conventions:
        - execute(args): invoked from the server console.
        - execute_as(actor, args): invoked by an in-game actor.

    The dispatcher selects the convention matching the caller.
    """

    def execute(self, args: list[str]) -> None:
        """Console calling convention."""
        send_message(None, "This command does not support console execution.")

    def execute_as(self, actor: Actor, args: list[str]) -> None:
        """Actor calling convention."""
        send_message(actor, "This command does not support in-game execution.")

    @classmethod
    def supports_console(cls) -> bool:
        return cls.execute is not CommandHandler.execute

    @classmethod
    def supports_actor(cls) -> bool:
        return cls.execute_as is not CommandHandler.execute_as
