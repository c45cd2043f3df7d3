#!/usr/bin/env python3
# cmdmap/interface/parser.py
from __future__ import annotations

"""
Command line parsing helpers.

Rules:
- Surrounding whitespace is trimmed.
- A single leading non-letter (the trigger symbol, e.g. '/' or '!') is dropped.
- The rest is split on single spaces; consecutive spaces yield empty arguments.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """A command line split into its label and argument tokens."""

    label: str
    args: list[str]


def strip_trigger(text: str) -> str:
    """Drop exactly one leading non-letter character, if present."""
    if text and not text[0].isalpha():
        return text[1:]
    return text


def parse_line(raw_line: str) -> ParsedLine | None:
    """
    Parse a raw command line. Returns None for blank input.

    Examples:
        "/give 1 2"  -> ParsedLine("give", ["1", "2"])
        "!!x"        -> ParsedLine("!x", [])
        "say a  b"   -> ParsedLine("say", ["a", "", "b"])
    """
    line = raw_line.strip()
    if not line:
        return None
    label, *args = strip_trigger(line).split(" ")
    return ParsedLine(label=label, args=args)
