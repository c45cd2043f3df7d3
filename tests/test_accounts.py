"""
Account Tests
-------------
Tests cover permission node matching and grant/revoke.
"""

import pytest

from cmdmap.commands import Account as AccountProtocol, Actor
from cmdmap.security import Account, Player


class TestAccountPermissions:
    """Tests for Account.has_permission."""

    @pytest.mark.parametrize("granted,node,expected", [
        ("server.kick", "server.kick", True),
        ("server.kick", "server.ban", False),
        ("*", "anything.at.all", True),
        ("server.*", "server.kick", True),
        ("server.*", "server.player.kick", True),
        ("server.*", "serverx.kick", False),
        ("server.*", "server", False),
    ])
    def test_matching(self, granted, node, expected):
        assert Account("a", [granted]).has_permission(node) is expected

    def test_no_permissions(self):
        assert not Account("a").has_permission("x")

    def test_add_and_remove(self):
        account = Account("a")
        assert account.add_permission("x")
        assert not account.add_permission("x")
        assert account.has_permission("x")
        assert account.remove_permission("x")
        assert not account.remove_permission("x")
        assert not account.has_permission("x")

    def test_permissions_sorted_copy(self):
        account = Account("a", ["b", "a"])
        nodes = account.permissions
        nodes.append("z")
        assert account.permissions == ["a", "b"]


class TestPlayer:
    """Tests for Player."""

    def test_satisfies_protocols(self):
        player = Player("alice", Account("alice"))
        assert isinstance(player, Actor)
        assert isinstance(player.account, AccountProtocol)

    def test_messages_recorded_without_sink(self):
        player = Player("alice", Account("alice"))
        player.send_message("hi")
        assert player.inbox == ["hi"]

    def test_sink_receives_messages_and_inbox_stays_empty(self):
        seen = []
        player = Player("alice", Account("alice"), sink=seen.append)
        for n in range(1000):
            player.send_message(f"line {n}")
        assert len(seen) == 1000
        assert seen[-1] == "line 999"
        assert player.inbox == []
