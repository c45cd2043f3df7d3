# plugins/general/entrypoint.py
from __future__ import annotations

from cmdmap.commands import (
    Actor,
    CommandHandler,
    ExecutionScope,
    command,
    send_message,
)


# ---------- echo ----------
@command(
    label="echo",
    aliases=["say"],
    description="Repeat the given text back to the caller.",
    usage="echo <text...>",
)
class EchoCommand(CommandHandler):
    def execute(self, args: list[str]) -> None:
        send_message(None, " ".join(args))

    def execute_as(self, actor: Actor, args: list[str]) -> None:
        send_message(actor, " ".join(args))


# ---------- whoami ----------
@command(
    label="whoami",
    execution=ExecutionScope.PLAYER,
    description="Show your player name and account.",
)
class WhoAmICommand(CommandHandler):
    def execute_as(self, actor: Actor, args: list[str]) -> None:
        name = getattr(actor, "name", "?")
        username = getattr(actor.account, "username", "?")
        send_message(actor, f"You are {name} (account: {username}).")


# ---------- stop ----------
@command(
    label="stop",
    aliases=["shutdown"],
    execution=ExecutionScope.CONSOLE,
    description="Stop the server console.",
)
class StopCommand(CommandHandler):
    def execute(self, args: list[str]) -> None:
        send_message(None, "Stopping...")
        raise SystemExit(0)


COMMANDS = [EchoCommand, WhoAmICommand, StopCommand]
