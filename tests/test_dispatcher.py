"""
Command Dispatcher Tests
------------------------
Tests cover:
- Line parsing (trim, trigger symbol, single-space split)
- Empty and unknown input
- Permission check for actors (skipped for the console)
- Execution scope checks and their ordering after the permission check
- Calling convention selection
- Handler exceptions propagating to the caller
"""

import pytest

from cmdmap.commands import CommandDescriptor, CommandHandler, ExecutionScope
from cmdmap.interface import (
    DispatchStatus,
    MSG_CONSOLE_ONLY,
    MSG_NO_COMMAND,
    MSG_NO_PERMISSION,
    MSG_PLAYER_ONLY,
    parse_line,
)


class TestParseLine:
    """Tests for parse_line."""

    def test_blank_is_none(self):
        assert parse_line("") is None
        assert parse_line("   \t ") is None

    def test_strips_one_trigger_symbol(self):
        parsed = parse_line("/foo bar baz")
        assert parsed.label == "foo"
        assert parsed.args == ["bar", "baz"]

    def test_strips_only_first_symbol(self):
        assert parse_line("!!foo").label == "!foo"

    def test_letter_start_untouched(self):
        assert parse_line("foo").label == "foo"

    def test_consecutive_spaces_keep_empty_tokens(self):
        assert parse_line("say a  b").args == ["a", "", "b"]

    def test_surrounding_whitespace_trimmed(self):
        parsed = parse_line("  /give 1  ")
        assert parsed.label == "give"
        assert parsed.args == ["1"]

    def test_lone_symbol_gives_empty_label(self):
        assert parse_line("/").label == ""


class TestEmptyAndUnknown:
    """Blank and unresolved lines never reach a handler."""

    @pytest.mark.parametrize("line", ["", "   "])
    def test_empty_input_actor(self, dispatcher, make_handler, make_player, line):
        handler = make_handler("foo")
        player = make_player()
        assert dispatcher.invoke(player, line) is DispatchStatus.EMPTY_INPUT
        assert player.inbox == [MSG_NO_COMMAND]
        assert not handler.called

    def test_empty_input_console(self, dispatcher, capsys):
        assert dispatcher.invoke(None, "  ") is DispatchStatus.EMPTY_INPUT
        assert MSG_NO_COMMAND in capsys.readouterr().out

    def test_unknown_command(self, dispatcher, make_player):
        player = make_player()
        assert dispatcher.invoke(player, "/nope 1") is DispatchStatus.UNKNOWN_COMMAND
        assert player.inbox == ["Unknown command: nope"]


class TestConventions:
    """The caller decides which convention is used."""

    def test_console_convention(self, dispatcher, make_handler):
        handler = make_handler("foo")
        assert dispatcher.invoke(None, "/foo bar baz") is DispatchStatus.OK
        assert handler.console_calls == [["bar", "baz"]]
        assert handler.actor_calls == []

    def test_actor_convention(self, dispatcher, make_handler, make_player):
        handler = make_handler("foo")
        player = make_player()
        assert dispatcher.invoke(player, "foo x") is DispatchStatus.OK
        assert handler.actor_calls == [(player, ["x"])]
        assert handler.console_calls == []

    def test_alias_dispatches_to_same_handler(self, dispatcher, make_handler):
        handler = make_handler("give", aliases=["g"])
        dispatcher.invoke(None, "g 1")
        dispatcher.invoke(None, "give 2")
        assert handler.console_calls == [["1"], ["2"]]

    def test_no_args(self, dispatcher, make_handler):
        handler = make_handler("foo")
        dispatcher.invoke(None, "foo")
        assert handler.console_calls == [[]]

    def test_unimplemented_convention_replies(self, dispatcher, registry, make_player):
        class ConsoleOnlyImpl(CommandHandler):
            def execute(self, args):
                pass

        registry.register(CommandDescriptor(label="c"), ConsoleOnlyImpl())
        player = make_player()
        assert dispatcher.invoke(player, "c") is DispatchStatus.OK
        assert player.inbox == ["This command does not support in-game execution."]
        assert ConsoleOnlyImpl.supports_console()
        assert not ConsoleOnlyImpl.supports_actor()


class TestPermission:
    """Permission nodes are checked for actors only."""

    def test_denied_without_node(self, dispatcher, make_handler, make_player):
        handler = make_handler("x", permission="p")
        player = make_player()
        assert dispatcher.invoke(player, "x") is DispatchStatus.PERMISSION_DENIED
        assert player.inbox == [MSG_NO_PERMISSION]
        assert not handler.called

    def test_allowed_with_node(self, dispatcher, make_handler, make_player):
        handler = make_handler("x", permission="p")
        assert dispatcher.invoke(make_player(permissions=["p"]), "x") is DispatchStatus.OK
        assert handler.called

    def test_allowed_with_wildcard(self, dispatcher, make_handler, make_player):
        handler = make_handler("x", permission="server.kick")
        assert dispatcher.invoke(make_player(permissions=["server.*"]), "x") is DispatchStatus.OK
        assert handler.called

    def test_console_skips_permission(self, dispatcher, make_handler):
        handler = make_handler("x", permission="p")
        assert dispatcher.invoke(None, "x") is DispatchStatus.OK
        assert handler.console_calls == [[]]

    def test_no_node_means_open(self, dispatcher, make_handler, make_player):
        handler = make_handler("x")
        assert dispatcher.invoke(make_player(), "x") is DispatchStatus.OK
        assert handler.called


class TestExecutionScope:
    """Scope checks run after the permission check."""

    def test_console_on_player_only(self, dispatcher, make_handler, capsys):
        handler = make_handler("x", execution=ExecutionScope.PLAYER)
        assert dispatcher.invoke(None, "x") is DispatchStatus.WRONG_SCOPE
        assert MSG_PLAYER_ONLY in capsys.readouterr().out
        assert not handler.called

    def test_actor_on_console_only(self, dispatcher, make_handler, make_player):
        handler = make_handler("x", execution=ExecutionScope.CONSOLE)
        player = make_player()
        assert dispatcher.invoke(player, "x") is DispatchStatus.WRONG_SCOPE
        assert player.inbox == [MSG_CONSOLE_ONLY]
        assert not handler.called

    def test_permission_reported_before_scope(self, dispatcher, make_handler, make_player):
        make_handler("x", permission="p", execution=ExecutionScope.CONSOLE)
        player = make_player()
        assert dispatcher.invoke(player, "x") is DispatchStatus.PERMISSION_DENIED
        assert player.inbox == [MSG_NO_PERMISSION]

    def test_scope_reported_when_permitted(self, dispatcher, make_handler, make_player):
        make_handler("x", permission="p", execution=ExecutionScope.CONSOLE)
        player = make_player(permissions=["p"])
        assert dispatcher.invoke(player, "x") is DispatchStatus.WRONG_SCOPE
        assert player.inbox == [MSG_CONSOLE_ONLY]

    def test_actor_on_player_only(self, dispatcher, make_handler, make_player):
        handler = make_handler("x", execution=ExecutionScope.PLAYER)
        assert dispatcher.invoke(make_player(), "x") is DispatchStatus.OK
        assert handler.called


class TestHandlerFailure:
    """Handler exceptions cross the dispatch boundary."""

    def test_exception_propagates(self, dispatcher, make_handler):
        make_handler("boom", fail_with=RuntimeError("kaput"))
        with pytest.raises(RuntimeError, match="kaput"):
            dispatcher.invoke(None, "boom")

    def test_dispatcher_usable_after_failure(self, dispatcher, make_handler):
        make_handler("boom", fail_with=RuntimeError("kaput"))
        ok = make_handler("ok")
        with pytest.raises(RuntimeError):
            dispatcher.invoke(None, "boom")
        assert dispatcher.invoke(None, "ok") is DispatchStatus.OK
        assert ok.called
