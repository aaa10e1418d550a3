# src/wall_clock/db/offset.py
"""Microseconds-since-midnight encoding used for SQL ``TIME`` columns.

PostgreSQL stores ``TIME`` as a signed 64-bit count of microseconds since
midnight; the column adapters convert through this integer.
"""

from __future__ import annotations

from wall_clock.core.time import MICROS_PER_SECOND, WallClockTime


def encode_midnight_offset(value: WallClockTime) -> int:
    """Return microseconds since midnight for ``value``."""
    return value.seconds_since_midnight * MICROS_PER_SECOND + value.microsecond


def decode_midnight_offset(offset: int) -> WallClockTime:
    """Rebuild a wall-clock time from a stored microsecond offset.

    The offset is trusted to lie within a day, as the database guarantees for
    its ``TIME`` type; no bounds checks are applied.
    """
    seconds, micros = divmod(offset, MICROS_PER_SECOND)
    return WallClockTime._trusted(seconds, micros)
