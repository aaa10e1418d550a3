# src/wall_clock/db/types.py
"""SQLAlchemy column type for wall-clock times."""

from __future__ import annotations

import datetime
from typing import Any

from sqlalchemy.dialects import postgresql
from sqlalchemy.engine import Dialect
from sqlalchemy.types import Time, TypeDecorator

from wall_clock.core.time import (
    MICROS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    WallClockTime,
)
from wall_clock.db.offset import decode_midnight_offset, encode_midnight_offset

# PostgreSQL TIME keeps microsecond precision at most.
POSTGRES_TIME_PRECISION = 6


def _offset_to_time(offset: int) -> datetime.time:
    seconds, micros = divmod(offset, MICROS_PER_SECOND)
    hours, seconds = divmod(seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(seconds, SECONDS_PER_MINUTE)
    return datetime.time(hours, minutes, seconds, micros)


def _time_to_offset(value: datetime.time) -> int:
    seconds = value.hour * SECONDS_PER_HOUR + value.minute * SECONDS_PER_MINUTE + value.second
    return seconds * MICROS_PER_SECOND + value.microsecond


class WallClockTimeType(TypeDecorator[WallClockTime]):
    """Store a `WallClockTime` in a ``TIME`` column.

    Values cross the driver boundary as the microsecond offset since midnight;
    on PostgreSQL the column is ``TIME(6) WITHOUT TIME ZONE``.

    Example:
        opens_at: Mapped[WallClockTime] = mapped_column(WallClockTimeType, nullable=False)
    """

    impl = Time
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> Any:
        if dialect.name == "postgresql":
            return dialect.type_descriptor(
                postgresql.TIME(timezone=False, precision=POSTGRES_TIME_PRECISION)
            )
        return dialect.type_descriptor(Time())

    def process_bind_param(
        self,
        value: WallClockTime | None,
        dialect: Dialect,
    ) -> datetime.time | None:
        if value is None:
            return None
        return _offset_to_time(encode_midnight_offset(value))

    def process_result_value(
        self,
        value: datetime.time | None,
        dialect: Dialect,
    ) -> WallClockTime | None:
        if value is None:
            return None
        return decode_midnight_offset(_time_to_offset(value))

    @property
    def python_type(self) -> type[WallClockTime]:
        return WallClockTime
