#!/usr/bin/env python3
# cmdmap/interface/cli.py
from __future__ import annotations

"""
Console input frontends and the console read loop.

Selection order:
    1) prompt_toolkit on an interactive terminal (completion + history)
    2) plain line reader on piped or redirected input
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from cmdmap.commands import CommandRegistry
from cmdmap.interface.completion import BUILT_IN_COMMANDS, current_prefix, suggest
from cmdmap.interface.handler import CommandDispatcher

logger = logging.getLogger("cmdmap.console")

DEFAULT_PROMPT = "> "


class BaseCLI:
    """
    Base interface for CLI frontends.

    Subclasses should implement:
        - setup()
        - get_line()   (raises EOFError when input is exhausted)
        - teardown()

    This base also provides context manager support to guarantee teardown.
    """

    def setup(self) -> None:  # pragma: no cover - interface
        ...

    def get_line(self) -> str:  # pragma: no cover - interface
        raise EOFError

    def teardown(self) -> None:  # pragma: no cover - interface
        ...

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Line editor with persistent history and live label completion."""

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        history_path: Path,
        prompt_text: str = DEFAULT_PROMPT,
        enable_completion: bool = True,
    ) -> None:
        from prompt_toolkit import PromptSession
        from prompt_toolkit.completion import Completer, Completion
        from prompt_toolkit.history import FileHistory

        self.history_path = history_path
        self.prompt_text = prompt_text

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                replace_len = len(current_prefix(text_before_cursor))
                for word in suggest(registry, text_before_cursor):
                    # replace exactly the current token
                    yield Completion(word, start_position=-replace_len)

        self.history_path.parent.mkdir(parents=True, exist_ok=True)
        self.history_path.touch(exist_ok=True)
        self._session = PromptSession(
            history=FileHistory(str(self.history_path)),
            completer=_Completer() if enable_completion else None,
            complete_while_typing=enable_completion,
        )

    def get_line(self) -> str:
        return self._session.prompt(self.prompt_text)

    def teardown(self) -> None:
        # prompt_toolkit flushes history automatically
        pass


# ===== Fallback: piped input =====
class StreamCLI(BaseCLI):
    """Reads one command per line from a text stream (stdin by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin

    def get_line(self) -> str:
        line = self.stream.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")


def make_cli(
    registry: CommandRegistry,
    *,
    history_path: Path,
    prompt_text: str = DEFAULT_PROMPT,
    enable_completion: bool = True,
    stream: Optional[TextIO] = None,
) -> BaseCLI:
    """
    Select the console frontend: prompt_toolkit when attached to a terminal,
    a plain stream reader otherwise.
    """
    source = stream if stream is not None else sys.stdin
    if getattr(source, "isatty", lambda: False)():
        return PromptToolkitCLI(
            registry,
            history_path=history_path,
            prompt_text=prompt_text,
            enable_completion=enable_completion,
        )
    return StreamCLI(source)


def run_console(dispatcher: CommandDispatcher, cli: BaseCLI) -> int:
    """
    Read lines from `cli` and dispatch each one as the console.

    A handler raising an exception is logged and the loop keeps reading.
    End of input, Ctrl+C, 'exit'/'quit' (unless a command holds that label)
    or a command raising SystemExit stop the loop. Returns the number of
    dispatched lines.
    """
    dispatched = 0
    with cli:
        while True:
            try:
                line = cli.get_line()
            except (EOFError, KeyboardInterrupt):
                break

            word = line.strip()
            if word.lower() in BUILT_IN_COMMANDS and word not in dispatcher.registry:
                break

            try:
                dispatcher.invoke(None, line)
            except SystemExit:
                logger.info("Console stopped by command.")
                dispatched += 1
                break
            except Exception as exc:  # noqa: BLE001
                logger.error("Command error: %s", exc)
                logger.debug("Command '%s' raised", line, exc_info=True)
            dispatched += 1
    return dispatched
