# src/wall_clock/core/text.py
"""Canonical text form of wall-clock times.

The grammar is ``HH:MM:SS`` or ``HH:MM:SS.FFFFFF``: two zero-padded digits per
clock field and exactly six fraction digits. The fraction, and the dot in front
of it, only appear when the microseconds are non-zero.
"""

from __future__ import annotations

import logging
import re

from wall_clock.core.errors import WallClockParseError
from wall_clock.core.settings import settings
from wall_clock.core.time import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    WallClockTime,
)

logger = logging.getLogger(__name__)

FRACTION_SEPARATOR = "."
FIELD_SEPARATOR = ":"
FRACTION_DIGITS = 6

# Unsigned 32-bit field: one optional leading "+", then digits.
MAX_FIELD_VALUE = 2**32 - 1
_MAX_FIELD_DIGITS = len(str(MAX_FIELD_VALUE))

_UNSIGNED = re.compile(r"\+?([0-9]+)")
_DIGITS = re.compile(r"[0-9]+")


def format_wall_clock_time(value: WallClockTime) -> str:
    """Return the canonical ``HH:MM:SS[.FFFFFF]`` string for ``value``."""
    text = f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if value.microsecond:
        text += f"{FRACTION_SEPARATOR}{value.microsecond:06d}"
    return text


def _parse_unsigned(field: str, reason: str, text: str) -> int:
    match = _UNSIGNED.fullmatch(field)
    if match is None:
        raise WallClockParseError(reason, text)
    digits = match.group(1).lstrip("0")
    if len(digits) > _MAX_FIELD_DIGITS:
        raise WallClockParseError(reason, text)
    value = int(digits or "0")
    if value > MAX_FIELD_VALUE:
        raise WallClockParseError(reason, text)
    return value


def _check_field(value: int, limit: int, reason: str, text: str) -> None:
    if value >= limit:
        raise WallClockParseError(reason, text)


def _parse(text: str, strict: bool) -> WallClockTime:
    segments = text.split(FRACTION_SEPARATOR)
    if len(segments) > 2:
        raise WallClockParseError("Too many fractional separators; only one `.` allowed", text)

    micros = 0
    if len(segments) == 2:
        fraction = segments[1]
        if strict and (len(fraction) != FRACTION_DIGITS or not _DIGITS.fullmatch(fraction)):
            raise WallClockParseError(
                f"Invalid microseconds: expected {FRACTION_DIGITS} digits, got {len(fraction)}",
                text,
            )
        micros = _parse_unsigned(fraction, "Invalid microseconds", text)

    fields = segments[0].split(FIELD_SEPARATOR)
    if len(fields) != 3:
        raise WallClockParseError("Invalid HH:MM:SS specified", text)
    hours = _parse_unsigned(fields[0], "Invalid HH", text)
    minutes = _parse_unsigned(fields[1], "Invalid MM", text)
    seconds = _parse_unsigned(fields[2], "Invalid SS", text)

    if strict:
        _check_field(hours, HOURS_PER_DAY, "Invalid HH: hours must be below 24", text)
        _check_field(minutes, MINUTES_PER_HOUR, "Invalid MM: minutes must be below 60", text)
        _check_field(seconds, SECONDS_PER_MINUTE, "Invalid SS: seconds must be below 60", text)
        return WallClockTime.new_with_micros(hours, minutes, seconds, micros)

    # Permissive mode keeps whatever magnitudes were parsed.
    return WallClockTime._trusted(
        hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds,
        micros,
    )


def parse_wall_clock_time(text: str, *, strict: bool | None = None) -> WallClockTime:
    """Parse a ``HH:MM:SS[.FFFFFF]`` string.

    Args:
        text: The string to parse.
        strict: Range-check the clock fields and require a six-digit
            fraction. Defaults to the ``strict_parsing`` setting. When false,
            each field, and the fraction read as a plain integer count of
            microseconds, is accepted up to 4294967295. Both modes allow a
            single leading ``+`` on HH, MM and SS.

    Returns:
        The parsed wall-clock time.

    Raises:
        WallClockParseError: If the text does not follow the grammar.
    """
    if strict is None:
        strict = settings.strict_parsing
    try:
        return _parse(text, strict)
    except WallClockParseError as exc:
        logger.debug("Rejected wall-clock time %r: %s", text, exc.reason)
        raise


def hms(literal: str) -> WallClockTime:
    """Build a time from an ``HH:MM:SS`` literal such as ``hms("15:30:45")``.

    Meant for constants in source code. Components go through
    `WallClockTime.new`, so an impossible clock reading raises
    `OutOfBoundsError`; a string that is not three digit groups raises
    `ValueError`.
    """
    parts = literal.split(FIELD_SEPARATOR)
    if len(parts) != 3 or not all(_DIGITS.fullmatch(part) for part in parts):
        raise ValueError(f"Expected an HH:MM:SS literal, got {literal!r}")
    hours, minutes, seconds = (int(part) for part in parts)
    return WallClockTime.new(hours, minutes, seconds)
