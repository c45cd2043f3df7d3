# plugins/admin/__init__.py
from __future__ import annotations

"""
Administration command group:
- permission / perm (add, remove or list nodes on your own account)
- broadcast / bc (server-wide announcement, needs server.broadcast)
"""
