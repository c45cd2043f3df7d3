#!/usr/bin/env python3
# cmdmap/security/__init__.py
from __future__ import annotations

"""
Package for accounts and permission checks.

Provides:
- Account: permission holder with exact, prefix-wildcard and global-wildcard grants.
- Player: in-game actor bound to an Account.
"""

from .accounts import Account, Player

__all__ = ["Account", "Player"]
