"""Tests for configuration helpers."""

import pytest

from meal_planner.config import Settings, parse_range_days
from meal_planner.services.stats import DEFAULT_RANGE_DAYS


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(7, 7), (14, 14), (90, 90), (None, 30), (5, 30), (365, 30)],
)
def test_parse_range_days(raw: int | None, expected: int) -> None:
    assert parse_range_days(raw) == expected


def test_parse_range_days_uses_supported_default() -> None:
    assert parse_range_days(None, default=14) == 14
    assert parse_range_days(None, default=3) == DEFAULT_RANGE_DAYS


def test_settings_defaults(settings: Settings) -> None:
    assert settings.cache_ttl_seconds == 300
    assert settings.summary_default_days == 30
