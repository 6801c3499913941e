"""Domain models for user settings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionTargets:
    """Daily nutrition targets."""

    calories: int = 2000
    protein: int = 150
    carbs: int = 200
    fat: int = 65
