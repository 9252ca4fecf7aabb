"""The single error type surfaced to the user.

Every failure (network, payload decoding, local git access) is converted into
a `CliError` at the boundary where it happens. Adapters expose explicit
mapping functions for that instead of subclassing.
"""

from __future__ import annotations


class CliError(Exception):
    """A failure carrying only a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CliError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)
