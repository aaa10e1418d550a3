# src/wall_clock/core/errors.py
"""Exceptions raised by wall-clock time construction and parsing."""

from __future__ import annotations


class WallClockError(Exception):
    """Base exception for wall-clock time failures."""


class OutOfBoundsError(WallClockError, ValueError):
    """Raised when a constructor receives a component a wall clock cannot show.

    The numeric constructors are meant for constants and already-validated
    data, so this signals a programming error rather than bad user input.
    Untrusted text should go through parsing instead.
    """


class WallClockParseError(WallClockError, ValueError):
    """Raised when text cannot be read as a wall-clock time.

    Attributes:
        reason: Human-readable explanation of what was wrong.
        text: The rejected input, when available.
    """

    def __init__(self, reason: str, text: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.text = text
