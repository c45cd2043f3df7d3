#!/usr/bin/env python3
# cmdmap/__main__.py
from __future__ import annotations
"""Entry point: boot, then read console commands until exit."""

import sys

from cmdmap.boot import boot_sequence
from cmdmap.interface import make_cli, run_console


def main() -> int:
    try:
        context = boot_sequence()
    except Exception:
        return 1

    cfg = context.config
    cli = make_cli(
        context.registry,
        history_path=cfg.history_file_path,
        prompt_text=cfg.prompt,
        enable_completion=cfg.enable_completion,
    )
    run_console(context.dispatcher, cli)
    context.logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
