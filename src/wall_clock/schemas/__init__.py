# src/wall_clock/schemas/__init__.py
"""Pydantic integration for wall-clock times."""

from .time import dump_wall_clock_time, load_wall_clock_time, wall_clock_time_adapter

__all__ = ["dump_wall_clock_time", "load_wall_clock_time", "wall_clock_time_adapter"]
