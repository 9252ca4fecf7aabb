"""Core interfaces.

Protocols implemented by concrete adapters, so the core depends on
abstractions only.
"""

from core.interfaces.capsule_api import CapsuleApi

__all__ = ["CapsuleApi"]
