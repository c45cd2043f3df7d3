# plugins/__init__.py
"""Command plugins loaded at boot. Each group exports COMMANDS from its entrypoint."""
