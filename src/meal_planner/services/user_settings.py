"""User settings service."""

from dataclasses import dataclass, fields, replace
from typing import Protocol

from meal_planner.domain.settings import NutritionTargets

TARGET_FIELDS = tuple(item.name for item in fields(NutritionTargets))


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_targets(self) -> NutritionTargets | None:
        """Return stored nutrition targets, if any."""

    def update_targets(self, targets: NutritionTargets) -> NutritionTargets:
        """Persist nutrition targets and return them."""


@dataclass
class UserSettingsService:
    """Service for daily nutrition targets."""

    repository: UserSettingsRepository

    def get_targets(self) -> NutritionTargets:
        """Return stored targets or the defaults."""
        return self.repository.get_targets() or NutritionTargets()

    def update_targets(self, changes: dict[str, int]) -> NutritionTargets:
        """Apply partial target changes and persist the result."""
        unknown = set(changes) - set(TARGET_FIELDS)
        if unknown:
            raise ValueError(f"Unknown target fields: {', '.join(sorted(unknown))}")
        if any(value < 0 for value in changes.values()):
            raise ValueError("Targets must not be negative")
        return self.repository.update_targets(replace(self.get_targets(), **changes))
