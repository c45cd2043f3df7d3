"""
Test Configuration
------------------
Shared fixtures: a fresh registry/dispatcher per test, recording handlers and
players with inspectable inboxes.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from cmdmap.commands import CommandDescriptor, CommandHandler, CommandRegistry, ExecutionScope
from cmdmap.interface import CommandDispatcher
from cmdmap.security import Account, Player


class RecordingHandler(CommandHandler):
    """Handler that records every call instead of doing work."""

    def __init__(self, fail_with: Exception | None = None):
        self.console_calls: list[list[str]] = []
        self.actor_calls: list[tuple[object, list[str]]] = []
        self.fail_with = fail_with

    def execute(self, args):
        self.console_calls.append(list(args))
        if self.fail_with is not None:
            raise self.fail_with

    def execute_as(self, actor, args):
        self.actor_calls.append((actor, list(args)))
        if self.fail_with is not None:
            raise self.fail_with

    @property
    def called(self) -> bool:
        return bool(self.console_calls or self.actor_calls)


@pytest.fixture(autouse=True)
def restore_cmdmap_logger():
    """init_logger() detaches the 'cmdmap' logger from root; undo that after each test."""
    logger = logging.getLogger("cmdmap")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def registry():
    return CommandRegistry()


@pytest.fixture
def dispatcher(registry):
    return CommandDispatcher(registry)


@pytest.fixture
def make_handler(registry):
    """Register a RecordingHandler and return it."""

    def _make(label, aliases=(), permission="", execution=ExecutionScope.ANY, fail_with=None):
        handler = RecordingHandler(fail_with=fail_with)
        descriptor = CommandDescriptor(
            label=label,
            aliases=frozenset(aliases),
            permission=permission,
            execution=execution,
        )
        registry.register(descriptor, handler)
        return handler

    return _make


@pytest.fixture
def make_player():
    def _make(name="alice", permissions=()):
        return Player(name=name, account=Account(name, permissions))

    return _make
