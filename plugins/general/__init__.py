# plugins/general/__init__.py
from __future__ import annotations

"""
General command group:
- echo / say
- whoami
- stop / shutdown
"""
