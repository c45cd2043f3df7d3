# plugins/admin/entrypoint.py
from __future__ import annotations

import logging

from cmdmap.commands import (
    Actor,
    CommandHandler,
    ExecutionScope,
    command,
    send_message,
)

logger = logging.getLogger("cmdmap.broadcast")


# ---------- permission ----------
@command(
    label="permission",
    aliases=["perm"],
    permission="server.permission",
    execution=ExecutionScope.PLAYER,
    description="Add, remove or list permission nodes on your account.",
    usage="permission [list | add <node> | remove <node>]",
)
class PermissionCommand(CommandHandler):
    USAGE = "Usage: permission [list | add <node> | remove <node>]"

    def execute_as(self, actor: Actor, args: list[str]) -> None:
        account = actor.account
        action = args[0].lower() if args and args[0] else "list"
        node = args[1] if len(args) >= 2 else ""

        if action == "list":
            nodes = getattr(account, "permissions", [])
            send_message(actor, "Permissions: " + (", ".join(nodes) if nodes else "(none)"))
        elif action == "add" and node:
            if account.add_permission(node):
                send_message(actor, f"Added {node}.")
            else:
                send_message(actor, f"You already have {node}.")
        elif action == "remove" and node:
            if account.remove_permission(node):
                send_message(actor, f"Removed {node}.")
            else:
                send_message(actor, f"You do not have {node}.")
        else:
            send_message(actor, self.USAGE)


# ---------- broadcast ----------
@command(
    label="broadcast",
    aliases=["bc"],
    permission="server.broadcast",
    description="Announce a message to the server log.",
    usage="broadcast <message...>",
)
class BroadcastCommand(CommandHandler):
    def _announce(self, sender: str, args: list[str]) -> str | None:
        text = " ".join(args).strip()
        if not text:
            return None
        logger.info("[Broadcast] %s: %s", sender, text)
        return text

    def execute(self, args: list[str]) -> None:
        if self._announce("Console", args) is None:
            send_message(None, "Usage: broadcast <message...>")
            return
        send_message(None, "Broadcast sent.")

    def execute_as(self, actor: Actor, args: list[str]) -> None:
        if self._announce(getattr(actor, "name", "?"), args) is None:
            send_message(actor, "Usage: broadcast <message...>")
            return
        send_message(actor, "Broadcast sent.")


COMMANDS = [PermissionCommand, BroadcastCommand]
