# src/wall_clock/db/__init__.py
"""Database column adapters for wall-clock times.

The offset codec has no third-party dependencies. `wall_clock.db.types`
needs SQLAlchemy and `wall_clock.db.psycopg_codec` needs psycopg; import
them directly.
"""

from .offset import decode_midnight_offset, encode_midnight_offset

__all__ = ["decode_midnight_offset", "encode_midnight_offset"]
