"""Silverblue workstation bootstrap (Python-first, check-driven).

Core design goals:
- Idempotent steps: each one checks whether its outcome already exists
- Explicit confirmation before any mutating action
- Fail fast, except where a step declares a batch policy
- Phase-aware: reboot-requiring steps run once, before the first reboot
- Centralized logging
"""

__all__ = []
