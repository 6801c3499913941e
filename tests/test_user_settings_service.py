"""Tests for the user settings service."""

import pytest

from meal_planner.domain.settings import NutritionTargets
from meal_planner.services.user_settings import UserSettingsService
from tests.conftest import InMemoryUserSettingsRepository


def test_defaults_when_unset(user_settings_service: UserSettingsService) -> None:
    assert user_settings_service.get_targets() == NutritionTargets(
        calories=2000, protein=150, carbs=200, fat=65
    )


def test_partial_update_keeps_other_targets(
    user_settings_service: UserSettingsService,
    user_settings_repository: InMemoryUserSettingsRepository,
) -> None:
    updated = user_settings_service.update_targets({"calories": 1800, "fat": 60})

    assert updated == NutritionTargets(calories=1800, protein=150, carbs=200, fat=60)
    assert user_settings_repository.targets == updated


def test_update_rejects_unknown_or_negative_fields(
    user_settings_service: UserSettingsService,
) -> None:
    with pytest.raises(ValueError):
        user_settings_service.update_targets({"sugar": 10})
    with pytest.raises(ValueError):
        user_settings_service.update_targets({"protein": -1})
