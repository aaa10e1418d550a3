# src/wall_clock/schemas/time.py
"""Pydantic schema for `WallClockTime`.

On the wire a wall-clock time is a single string in the canonical
``HH:MM:SS[.FFFFFF]`` form. `WallClockTime` resolves its pydantic schema from
this module, so it can be used directly as a model field type:

Example:
    from pydantic import BaseModel
    from wall_clock import WallClockTime

    class Opening(BaseModel):
        opens_at: WallClockTime

    Opening.model_validate_json('{"opens_at": "09:30:00"}')
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter
from pydantic_core import core_schema

from wall_clock.core.text import format_wall_clock_time, parse_wall_clock_time
from wall_clock.core.time import WallClockTime

CANONICAL_PATTERN = r"^([01][0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9](\.[0-9]{6})?$"


def _validate_python(value: Any) -> WallClockTime:
    if isinstance(value, WallClockTime):
        return value
    if isinstance(value, str):
        return parse_wall_clock_time(value)
    raise ValueError(
        f"Expected an HH:MM:SS wall-clock time string, got {type(value).__name__}"
    )


def wall_clock_time_core_schema() -> core_schema.CoreSchema:
    """Return the core schema: accept one string, emit one string."""
    return core_schema.json_or_python_schema(
        json_schema=core_schema.no_info_after_validator_function(
            parse_wall_clock_time,
            core_schema.str_schema(),
        ),
        python_schema=core_schema.no_info_plain_validator_function(_validate_python),
        serialization=core_schema.plain_serializer_function_ser_schema(
            format_wall_clock_time,
            return_schema=core_schema.str_schema(),
        ),
    )


def wall_clock_time_json_schema() -> dict[str, Any]:
    """Return the JSON schema describing the canonical grammar."""
    return {
        "type": "string",
        "format": "time",
        "pattern": CANONICAL_PATTERN,
        "examples": ["09:30:00", "17:15:30.600000"],
    }


wall_clock_time_adapter: TypeAdapter[WallClockTime] = TypeAdapter(WallClockTime)


def dump_wall_clock_time(value: WallClockTime) -> str:
    """Serialize ``value`` to its wire string."""
    return wall_clock_time_adapter.dump_python(value, mode="json")


def load_wall_clock_time(data: Any) -> WallClockTime:
    """Deserialize a wire value.

    Raises:
        pydantic.ValidationError: If ``data`` is not a string or does not parse.
    """
    return wall_clock_time_adapter.validate_python(data)
