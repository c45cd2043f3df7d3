#!/usr/bin/env python3
# cmdmap/security/accounts.py
from __future__ import annotations

"""
Accounts and in-game actors.

Permission nodes are dotted strings ("server.permission"). An account grants a
node when it holds:
  - the exact node,
  - the global wildcard "*", or
  - a prefix wildcard covering it ("server.*" grants "server.permission").
"""

import threading
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional


def _covers(granted: str, node: str) -> bool:
    if granted == "*" or granted == node:
        return True
    if granted.endswith(".*"):
        prefix = granted[:-1]  # keep the trailing dot
        return node.startswith(prefix)
    return False


class Account:
    """A user account holding permission nodes."""

    def __init__(self, username: str, permissions: Iterable[str] = ()) -> None:
        self.username = username
        self._permissions: set[str] = {p for p in permissions if p}
        self._lock = threading.Lock()

    def has_permission(self, node: str) -> bool:
        with self._lock:
            return any(_covers(granted, node) for granted in self._permissions)

    def add_permission(self, node: str) -> bool:
        """Grant a node. Returns False if it was already held."""
        with self._lock:
            if node in self._permissions:
                return False
            self._permissions.add(node)
            return True

    def remove_permission(self, node: str) -> bool:
        """Revoke a node. Returns False if it was not held."""
        with self._lock:
            if node not in self._permissions:
                return False
            self._permissions.discard(node)
            return True

    @property
    def permissions(self) -> list[str]:
        with self._lock:
            return sorted(self._permissions)

    def __repr__(self) -> str:
        return f"Account(username={self.username!r})"


@dataclass
class Player:
    """
    An in-game actor bound to an account.

    Messages are delivered to `sink` when set. Without a sink they are recorded
    in `inbox` so chat frontends can drain them.
    """

    name: str
    account: Account
    sink: Optional[Callable[[str], None]] = field(default=None, repr=False)
    inbox: list[str] = field(default_factory=list, repr=False)

    def send_message(self, text: str) -> None:
        if self.sink is not None:
            self.sink(text)
        else:
            self.inbox.append(text)
