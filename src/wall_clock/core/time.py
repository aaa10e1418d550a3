# src/wall_clock/core/time.py
"""The wall-clock time value type.

A `WallClockTime` is a time of day as one reads it off a clock on the wall:
no date, no time zone, no leap seconds. It is stored as whole seconds since
midnight plus a microsecond fraction, and every public constructor validates
its input before the value exists.

Example:
    from wall_clock import WallClockTime
    opening = WallClockTime.new(9, 30, 0)
    print(opening.hour, opening.minute)  # 9 30
"""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, Any, NoReturn

from wall_clock.core.errors import OutOfBoundsError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400
MICROS_PER_SECOND = 1_000_000


def _check_bound(name: str, value: int, limit: int) -> None:
    """Raise unless ``0 <= value < limit``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value < limit:
        raise OutOfBoundsError(
            f"{name} out of bounds: expected 0 <= {name.lower()} < {limit}, got {value}"
        )


@total_ordering
class WallClockTime:
    """A time of day, independent of date or time zone.

    Attributes:
        hour (int): Hours since midnight (0-23).
        minute (int): Minutes since the last hour (0-59).
        second (int): Seconds since the last minute (0-59).
        microsecond (int): Microseconds since the last second (0-999999).
        seconds_since_midnight (int): Whole seconds since 00:00:00.

    Notes:
        - The default value is midnight.
        - Instances are immutable, hashable and ordered chronologically.
    """

    __slots__ = ("_seconds", "_micros")

    _seconds: int
    _micros: int

    def __init__(
        self,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        micros: int = 0,
    ) -> None:
        """Create a wall-clock time from its clock-face components.

        Raises:
            OutOfBoundsError: If hours >= 24, minutes >= 60, seconds >= 60,
                micros >= 1,000,000, or any component is negative.
            TypeError: If a component is not an int.
        """
        _check_bound("Hours", hours, HOURS_PER_DAY)
        _check_bound("Minutes", minutes, MINUTES_PER_HOUR)
        _check_bound("Seconds", seconds, SECONDS_PER_MINUTE)
        _check_bound("Microseconds", micros, MICROS_PER_SECOND)
        self._set(hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds, micros)

    def _set(self, seconds: int, micros: int) -> None:
        object.__setattr__(self, "_seconds", seconds)
        object.__setattr__(self, "_micros", micros)

    @classmethod
    def new(cls, hours: int, minutes: int, seconds: int) -> WallClockTime:
        """Return the time at ``hours:minutes:seconds`` with no fraction."""
        return cls(hours, minutes, seconds)

    @classmethod
    def new_with_micros(
        cls,
        hours: int,
        minutes: int,
        seconds: int,
        micros: int,
    ) -> WallClockTime:
        """Return the time at ``hours:minutes:seconds.micros``."""
        return cls(hours, minutes, seconds, micros)

    @classmethod
    def from_midnight_offset(cls, seconds: int, micros: int = 0) -> WallClockTime:
        """Return the time ``seconds`` and ``micros`` after midnight.

        Raises:
            OutOfBoundsError: If seconds >= 86,400 or micros >= 1,000,000.
        """
        _check_bound("Seconds", seconds, SECONDS_PER_DAY)
        _check_bound("Microseconds", micros, MICROS_PER_SECOND)
        return cls._trusted(seconds, micros)

    @classmethod
    def _trusted(cls, seconds: int, micros: int) -> WallClockTime:
        """Build an instance without bounds checks.

        Used by the permissive parser and by storage decoders, which take
        their input as already valid.
        """
        instance = object.__new__(cls)
        instance._set(seconds, micros)
        return instance

    @classmethod
    def midnight(cls) -> WallClockTime:
        """Return 00:00:00."""
        return cls._trusted(0, 0)

    @classmethod
    def parse(cls, text: str, *, strict: bool | None = None) -> WallClockTime:
        """Parse ``HH:MM:SS[.FFFFFF]``; see `parse_wall_clock_time`."""
        from wall_clock.core.text import parse_wall_clock_time

        return parse_wall_clock_time(text, strict=strict)

    @property
    def hour(self) -> int:
        return self._seconds // SECONDS_PER_HOUR

    @property
    def minute(self) -> int:
        return self._seconds % SECONDS_PER_HOUR // SECONDS_PER_MINUTE

    @property
    def second(self) -> int:
        return self._seconds % SECONDS_PER_MINUTE

    @property
    def microsecond(self) -> int:
        return self._micros

    @property
    def seconds_since_midnight(self) -> int:
        return self._seconds

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._micros)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WallClockTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, WallClockTime):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, tuple[int, int]]:
        return (type(self)._trusted, self._key())

    def __str__(self) -> str:
        from wall_clock.core.text import format_wall_clock_time

        return format_wall_clock_time(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        from wall_clock.schemas.time import wall_clock_time_core_schema

        return wall_clock_time_core_schema()

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        core_schema: CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        from wall_clock.schemas.time import wall_clock_time_json_schema

        return wall_clock_time_json_schema()
