#!/usr/bin/env python3
# cmdmap/interface/handler.py
from __future__ import annotations

"""
Command dispatch.

CommandDispatcher.invoke resolves a raw line against a registry, applies the
permission check and then the execution scope check, and calls the handler
with the calling convention matching the caller (console or actor).

Policy failures are answered with a message and a DispatchStatus. Exceptions
raised by the handler itself propagate to the caller.
"""

import logging
from enum import Enum

from cmdmap.commands import (
    Actor,
    CommandRegistry,
    ExecutionScope,
    send_message,
)
from cmdmap.interface.parser import parse_line

MSG_NO_COMMAND = "No command specified."
MSG_UNKNOWN = "Unknown command: {label}"
MSG_NO_PERMISSION = "You do not have permission to run this command."
MSG_PLAYER_ONLY = "Run this command in-game."
MSG_CONSOLE_ONLY = "This command can only be run from the console."

logger = logging.getLogger("cmdmap.dispatch")


class DispatchStatus(Enum):
    """Outcome of one dispatch."""

    OK = "ok"
    EMPTY_INPUT = "empty_input"
    UNKNOWN_COMMAND = "unknown_command"
    PERMISSION_DENIED = "permission_denied"
    WRONG_SCOPE = "wrong_scope"


class CommandDispatcher:
    """Parses command lines and invokes registered handlers."""

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    def invoke(self, actor: Actor | None, raw_line: str) -> DispatchStatus:
        """
        Invoke the command named by `raw_line` on behalf of `actor`.

        Args:
            actor: The invoking actor, or None for the server console.
            raw_line: The text used to invoke the command.
        """
        parsed = parse_line(raw_line)
        if parsed is None:
            send_message(actor, MSG_NO_COMMAND)
            return DispatchStatus.EMPTY_INPUT

        entry = self.registry.lookup(parsed.label)
        if entry is None:
            send_message(actor, MSG_UNKNOWN.format(label=parsed.label))
            return DispatchStatus.UNKNOWN_COMMAND

        descriptor = entry.descriptor

        # Permission first, only for actors.
        if actor is not None and descriptor.permission:
            if not actor.account.has_permission(descriptor.permission):
                logger.debug("Denied '%s' (%s) for %r",
                             descriptor.label, descriptor.permission, actor)
                send_message(actor, MSG_NO_PERMISSION)
                return DispatchStatus.PERMISSION_DENIED

        if actor is None and descriptor.execution is ExecutionScope.PLAYER:
            send_message(None, MSG_PLAYER_ONLY)
            return DispatchStatus.WRONG_SCOPE
        if actor is not None and descriptor.execution is ExecutionScope.CONSOLE:
            send_message(actor, MSG_CONSOLE_ONLY)
            return DispatchStatus.WRONG_SCOPE

        if actor is None:
            entry.handler.execute(parsed.args)
        else:
            entry.handler.execute_as(actor, parsed.args)
        return DispatchStatus.OK
