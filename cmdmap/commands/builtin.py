#!/usr/bin/env python3
# cmdmap/commands/builtin.py
from __future__ import annotations

"""
Commands owned by the server itself rather than a plugin.

They need the registry, so boot constructs and registers them explicitly
instead of going through the plugin loader.
"""

from cmdmap.commands.command_types import (
    Actor,
    CommandHandler,
    ExecutionScope,
    RegistryEntry,
    send_message,
)
from cmdmap.commands.commands import CommandRegistry, command, descriptor_of
from cmdmap.ui import format_table

_SCOPE_TEXT = {
    ExecutionScope.ANY: "console, in-game",
    ExecutionScope.PLAYER: "in-game",
    ExecutionScope.CONSOLE: "console",
}


@command(
    label="help",
    aliases=["?"],
    usage="help [command]",
)
class HelpCommand(CommandHandler):
    """List available commands or describe one."""

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    def execute(self, args: list[str]) -> None:
        send_message(None, self.render(None, args))

    def execute_as(self, actor: Actor, args: list[str]) -> None:
        send_message(actor, self.render(actor, args))

    def render(self, actor: Actor | None, args: list[str]) -> str:
        target = next((a for a in args if a), "")
        if target:
            return self._describe(actor, target)
        return self._overview(actor)

    def _visible(self, actor: Actor | None, entry: RegistryEntry) -> bool:
        descriptor, handler = entry.descriptor, entry.handler
        if actor is None:
            return descriptor.execution is not ExecutionScope.PLAYER and handler.supports_console()
        if descriptor.execution is ExecutionScope.CONSOLE or not handler.supports_actor():
            return False
        return not descriptor.permission or actor.account.has_permission(descriptor.permission)

    def _overview(self, actor: Actor | None) -> str:
        rows = []
        for entry in self.registry.entries():
            if not self._visible(actor, entry):
                continue
            descriptor = entry.descriptor
            alias_display = ", ".join(sorted(descriptor.aliases)) or "-"
            rows.append([descriptor.label, alias_display, descriptor.description])
        if not rows:
            return "No commands available."
        return format_table(rows, headers=["Command", "Aliases", "Description"])

    def _describe(self, actor: Actor | None, name: str) -> str:
        # The console may describe anything; actors only what they can run.
        entry = self.registry.lookup(name)
        if entry is None or (actor is not None and not self._visible(actor, entry)):
            return f"No such command: {name}"
        descriptor = entry.descriptor
        lines = [
            f"Name:        {descriptor.label}",
            f"Aliases:     {', '.join(sorted(descriptor.aliases)) or '(none)'}",
            f"Permission:  {descriptor.permission or '(none)'}",
            f"Runs from:   {_SCOPE_TEXT[descriptor.execution]}",
            f"Description: {descriptor.description or '(none)'}",
            f"Usage:       {descriptor.usage or descriptor.label}",
        ]
        return "\n".join(lines)


def register_builtins(registry: CommandRegistry) -> list[str]:
    """Register the built-in commands. Returns their labels."""
    help_command = HelpCommand(registry)
    descriptor = descriptor_of(help_command)
    registry.register(descriptor, help_command)  # type: ignore[arg-type]
    return [descriptor.label]  # type: ignore[union-attr]
