# src/wall_clock/db/psycopg_codec.py
"""psycopg 3 adapters for PostgreSQL ``TIME`` in binary format.

The server's binary ``TIME`` representation is a big-endian signed 64-bit
count of microseconds since midnight, which is exactly the offset produced by
`wall_clock.db.offset`.

Example:
    import psycopg
    from wall_clock.db.psycopg_codec import register_wall_clock_time

    with psycopg.connect(dsn) as conn:
        register_wall_clock_time(conn)
        with conn.cursor(binary=True) as cur:
            cur.execute("SELECT %s::time", [WallClockTime.new(9, 30, 0)])
"""

from __future__ import annotations

import logging
import struct

from psycopg import adapt, adapters, postgres
from psycopg.pq import Format

from wall_clock.core.time import WallClockTime
from wall_clock.db.offset import decode_midnight_offset, encode_midnight_offset

logger = logging.getLogger(__name__)

TIME_OID = postgres.types["time"].oid

_int8 = struct.Struct("!q")


class WallClockTimeBinaryDumper(adapt.Dumper):
    """Dump a `WallClockTime` as a binary ``TIME`` parameter."""

    format = Format.BINARY
    oid = TIME_OID

    def dump(self, obj: WallClockTime) -> bytes:
        return _int8.pack(encode_midnight_offset(obj))


class WallClockTimeBinaryLoader(adapt.Loader):
    """Load a binary ``TIME`` result as a `WallClockTime`."""

    format = Format.BINARY

    def load(self, data: adapt.Buffer) -> WallClockTime:
        (offset,) = _int8.unpack(data)
        return decode_midnight_offset(offset)


def register_wall_clock_time(context: adapt.AdaptContext | None = None) -> None:
    """Install the binary dumper and loader.

    Args:
        context: A connection, cursor or adapters map. Defaults to the global
            ``psycopg.adapters`` map, affecting connections created afterwards.
    """
    target = context.adapters if context is not None else adapters
    target.register_dumper(WallClockTime, WallClockTimeBinaryDumper)
    target.register_loader(TIME_OID, WallClockTimeBinaryLoader)
    logger.debug("Registered WallClockTime binary adapters on %r", context or "global adapters")
