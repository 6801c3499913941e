"""Nutrition aggregation for entries, days and date ranges."""

import logging
from collections.abc import Iterable
from datetime import date

from meal_planner.domain.ingredients import IngredientLine
from meal_planner.domain.meals import DEFAULT_PERSON, MealEntry
from meal_planner.domain.nutrition import NutritionTotals
from meal_planner.services.resolution import (
    custom_totals,
    resolve_ingredients_for_entry,
)
from meal_planner.services.units import absolute_nutrition

_logger = logging.getLogger(__name__)


def aggregate(lines: Iterable[IngredientLine], scale_factor: float) -> NutritionTotals:
    """Sum absolute nutrition of ingredient lines and apply a scale factor."""
    total = NutritionTotals()
    for line in lines:
        if line.ingredient is None:
            _logger.debug(
                "Skipping line with missing ingredient: ingredient_id=%s",
                line.ingredient_id,
            )
            continue
        total = total + absolute_nutrition(line.ingredient, line.amount)
    return total.scaled(scale_factor)


def entry_totals(entry: MealEntry) -> NutritionTotals:
    """Return unrounded totals for one meal entry."""
    resolved = resolve_ingredients_for_entry(entry)
    if resolved.is_custom:
        return custom_totals(entry)
    return aggregate(resolved.lines, resolved.scale_factor)


def entry_person(entry: MealEntry) -> str:
    """Return the entry's person, defaulting when unset."""
    return entry.person or DEFAULT_PERSON


def sum_entries(entries: Iterable[MealEntry]) -> NutritionTotals:
    """Return unrounded totals across entries."""
    total = NutritionTotals()
    for entry in entries:
        total = total + entry_totals(entry)
    return total


def day_totals(
    entries: Iterable[MealEntry],
    day: date,
    *,
    person: str | None = None,
    eaten_only: bool = False,
) -> NutritionTotals:
    """Return rounded totals for a day, optionally per person or eaten only."""
    selected = [
        entry
        for entry in entries
        if entry.day == day
        and (person is None or entry_person(entry) == person)
        and (not eaten_only or entry.is_eaten)
    ]
    return sum_entries(selected).rounded()


def range_totals(
    entries: Iterable[MealEntry], start: date, end: date
) -> NutritionTotals:
    """Return rounded totals for entries in an inclusive date range."""
    return sum_entries(
        entry for entry in entries if start <= entry.day <= end
    ).rounded()
