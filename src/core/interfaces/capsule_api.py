"""Contract for the Capsule API.

A structural Protocol: the HTTP client and test doubles are interchangeable
without sharing a base class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ApplicationCreateResponse


@runtime_checkable
class CapsuleApi(Protocol):
    """Minimal API surface used by the CLI."""

    def create_application(self, name: str | None) -> ApplicationCreateResponse:
        """Create an application; raises `CliError` on any failure."""

        ...
