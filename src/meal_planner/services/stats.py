"""Range statistics for the meal plan."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol

from meal_planner.domain.meals import MealEntry
from meal_planner.domain.nutrition import round_half_up, round_price
from meal_planner.domain.stats import (
    DailyTotals,
    IngredientUsage,
    RangeSummary,
    RecipeUsage,
)
from meal_planner.services.nutrition import sum_entries
from meal_planner.services.resolution import resolve_ingredients_for_entry

RANGE_OPTIONS = (7, 14, 30, 90)
DEFAULT_RANGE_DAYS = 30
TOP_LIMIT = 8


class StatsEntrySource(Protocol):
    """Source of planned entries for a date range."""

    def list_entries(self, start: date, end: date) -> list[MealEntry]:
        """Return entries within an inclusive date range."""


@dataclass
class _IngredientTally:
    name: str
    total_amount: float
    days: set[date]


def summarize_range(entries: list[MealEntry], start: date, end: date) -> RangeSummary:
    """Compute cost, calories and top ingredients/recipes for a date range."""
    in_range = [entry for entry in entries if start <= entry.day <= end]
    daily = []
    day = start
    while day <= end:
        day_entries = [entry for entry in in_range if entry.day == day]
        daily.append(DailyTotals(day=day, totals=sum_entries(day_entries).rounded()))
        day += timedelta(days=1)

    ingredients: dict[int, _IngredientTally] = {}
    recipes: dict[int, RecipeUsage] = {}
    for entry in in_range:
        if entry.recipe is not None:
            usage = recipes.get(entry.recipe.id)
            recipes[entry.recipe.id] = RecipeUsage(
                recipe_id=entry.recipe.id,
                name=entry.recipe.name,
                count=(usage.count if usage else 0) + 1,
            )
        resolved = resolve_ingredients_for_entry(entry)
        for line in resolved.lines:
            if line.ingredient is None:
                continue
            tally = ingredients.setdefault(
                line.ingredient_id, _IngredientTally(line.ingredient.name, 0.0, set())
            )
            tally.total_amount += line.amount * resolved.scale_factor
            tally.days.add(entry.day)

    most_used = sorted(
        (
            IngredientUsage(
                ingredient_id=ingredient_id,
                name=tally.name,
                total_amount=round_half_up(tally.total_amount),
                used_days_count=len(tally.days),
            )
            for ingredient_id, tally in ingredients.items()
        ),
        key=lambda usage: usage.total_amount,
        reverse=True,
    )
    most_cooked = sorted(recipes.values(), key=lambda usage: usage.count, reverse=True)
    eaten = sum_entries(entry for entry in in_range if entry.is_eaten)
    return RangeSummary(
        start=start,
        end=end,
        total_cost=round_price(sum(item.totals.price for item in daily)),
        total_calories_planned=int(sum(item.totals.calories for item in daily)),
        total_calories_eaten=round_half_up(eaten.calories),
        daily=daily,
        most_used_ingredients=most_used[:TOP_LIMIT],
        most_cooked_recipes=most_cooked[:TOP_LIMIT],
    )


@dataclass
class StatsService:
    """Service for plan analytics over recent days."""

    repository: StatsEntrySource

    def get_summary(self, days: int, today: date | None = None) -> RangeSummary:
        """Return analytics for the `days` days ending today."""
        end = today or date.today()
        start = end - timedelta(days=days - 1)
        return summarize_range(self.repository.list_entries(start, end), start, end)
