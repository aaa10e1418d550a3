# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING

import pytest

from wall_clock import WallClockTime

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from sqlalchemy.engine import Engine

MIDNIGHT = WallClockTime()
NOON = WallClockTime.new(12, 0, 0)
LAST_MICROSECOND_OF_DAY = WallClockTime.new_with_micros(23, 59, 59, 999_999)


@pytest.fixture(params=[MIDNIGHT, NOON, LAST_MICROSECOND_OF_DAY], ids=["midnight", "noon", "eod"])
def boundary_time(request: pytest.FixtureRequest) -> WallClockTime:
    """Times spanning the day: midnight, noon and the last microsecond."""
    return request.param


@pytest.fixture()
def sqlite_engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine shared across connections."""
    sqlalchemy = pytest.importorskip("sqlalchemy")
    from sqlalchemy.pool import StaticPool

    engine = sqlalchemy.create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield engine
    finally:
        engine.dispose()
