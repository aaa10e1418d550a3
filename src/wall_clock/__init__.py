# src/wall_clock/__init__.py
"""Time as read off a wall clock, without date or time zone.

The pydantic integration lives in `wall_clock.schemas` and the database
column adapters in `wall_clock.db`; the latter needs the ``sqlalchemy`` (and,
for the psycopg codec, ``postgres``) extra.
"""

from .core.errors import OutOfBoundsError, WallClockError, WallClockParseError
from .core.text import format_wall_clock_time, hms, parse_wall_clock_time
from .core.time import WallClockTime

__all__ = [
    "WallClockTime",
    "format_wall_clock_time", "parse_wall_clock_time", "hms",
    "WallClockError", "OutOfBoundsError", "WallClockParseError",
]
