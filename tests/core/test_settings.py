"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from wall_clock.core.settings import Settings


def test_strict_parsing_defaults_on(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WALL_CLOCK_STRICT_PARSING", raising=False)
    assert Settings().strict_parsing is True


@pytest.mark.parametrize(("raw", "expected"), [("false", False), ("0", False), ("true", True)])
def test_strict_parsing_from_environment(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("WALL_CLOCK_STRICT_PARSING", raw)
    assert Settings().strict_parsing is expected


def test_strict_parsing_by_field_name() -> None:
    assert Settings(strict_parsing=False).strict_parsing is False
