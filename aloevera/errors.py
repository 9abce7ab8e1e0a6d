"""Error types raised by the aloevera command layer.

WHY: Every way a command can be rejected (missing flag, unknown format,
badly sized address, no project configured) is the user's to fix, and the
CLI reports all of them the same way. One error type keeps that contract
simple for callers.

RULES:
- ArgumentError is a ValueError, so callers that already treat bad input
  as ValueError keep working
- str(error) is the user-facing message, printed as-is
"""

from __future__ import annotations


class AloeveraError(Exception):
    """Base class for errors raised by this package."""


class ArgumentError(AloeveraError, ValueError):
    """A command-line argument failed validation.

    Attributes:
        message: Human-readable description of what was wrong.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
