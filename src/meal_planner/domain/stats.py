"""Domain models for plan statistics."""

from dataclasses import dataclass
from datetime import date

from meal_planner.domain.meals import MealEntry
from meal_planner.domain.nutrition import NutritionTotals
from meal_planner.domain.settings import NutritionTargets


@dataclass(frozen=True)
class DailyTotals:
    """Rounded totals for one day."""

    day: date
    totals: NutritionTotals


@dataclass(frozen=True)
class PersonDaySummary:
    """Planned and eaten totals for one person on one day."""

    person: str
    planned: NutritionTotals
    consumed: NutritionTotals
    remaining: NutritionTotals
    entries: list[MealEntry]


@dataclass(frozen=True)
class DaySummary:
    """Totals of every entry on a day, split per person."""

    day: date
    totals: NutritionTotals
    consumed: NutritionTotals
    targets: NutritionTargets
    people: list[PersonDaySummary]
    entries: list[MealEntry]


@dataclass(frozen=True)
class IngredientUsage:
    """How much of an ingredient a date range uses."""

    ingredient_id: int
    name: str
    total_amount: int
    used_days_count: int


@dataclass(frozen=True)
class RecipeUsage:
    """How many entries in a date range use a recipe."""

    recipe_id: int
    name: str
    count: int


@dataclass(frozen=True)
class RangeSummary:
    """Cost and consumption analytics for a date range."""

    start: date
    end: date
    total_cost: float
    total_calories_planned: int
    total_calories_eaten: int
    daily: list[DailyTotals]
    most_used_ingredients: list[IngredientUsage]
    most_cooked_recipes: list[RecipeUsage]
