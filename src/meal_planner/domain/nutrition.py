"""Nutrition domain models."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionTotals:
    """Absolute calories, macros and price."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    price: float = 0.0

    def __add__(self, other: "NutritionTotals") -> "NutritionTotals":
        return NutritionTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            price=self.price + other.price,
        )

    def __sub__(self, other: "NutritionTotals") -> "NutritionTotals":
        return NutritionTotals(
            calories=self.calories - other.calories,
            protein=self.protein - other.protein,
            carbs=self.carbs - other.carbs,
            fat=self.fat - other.fat,
            price=self.price - other.price,
        )

    def scaled(self, factor: float) -> "NutritionTotals":
        """Return totals multiplied by a factor."""
        return NutritionTotals(
            calories=self.calories * factor,
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fat=self.fat * factor,
            price=self.price * factor,
        )

    def rounded(self) -> "NutritionTotals":
        """Return display values: whole kcal/grams and price in cents."""
        return NutritionTotals(
            calories=round_half_up(self.calories),
            protein=round_half_up(self.protein),
            carbs=round_half_up(self.carbs),
            fat=round_half_up(self.fat),
            price=round_price(self.price),
        )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def round_price(value: float) -> float:
    """Round a price to two decimal places, halves up."""
    return math.floor(value * 100 + 0.5) / 100
