"""Resolve which ingredient list a meal entry is computed from."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from meal_planner.domain.ingredients import IngredientLine
from meal_planner.domain.meals import MealEntry
from meal_planner.domain.nutrition import NutritionTotals, round_half_up
from meal_planner.domain.recipes import Recipe
from meal_planner.services.units import normalize_servings, serving_scale_factor

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedIngredients:
    """Ingredient lines for an entry and the factor to apply to them.

    Custom entries have no lines; their scale factor is the entry's servings.
    """

    lines: tuple[IngredientLine, ...]
    scale_factor: float
    is_custom: bool


def resolve_ingredients_for_entry(
    entry: MealEntry, recipe: Recipe | None = None
) -> ResolvedIngredients:
    """Pick the entry override, the recipe list, or mark the entry as custom."""
    recipe = recipe or entry.recipe
    factor = serving_scale_factor(
        entry.servings, recipe.servings if recipe is not None else None
    )
    if entry.ingredients:
        return ResolvedIngredients(
            lines=tuple(entry.ingredients), scale_factor=factor, is_custom=False
        )
    if recipe is not None and recipe.ingredients:
        return ResolvedIngredients(
            lines=tuple(recipe.ingredients), scale_factor=factor, is_custom=False
        )
    return ResolvedIngredients(
        lines=(), scale_factor=normalize_servings(entry.servings), is_custom=True
    )


def custom_totals(entry: MealEntry) -> NutritionTotals:
    """Return an entry's custom macros multiplied by its servings."""
    return NutritionTotals(
        calories=entry.custom_calories or 0.0,
        protein=entry.custom_protein or 0.0,
        carbs=entry.custom_carbs or 0.0,
        fat=entry.custom_fat or 0.0,
    ).scaled(normalize_servings(entry.servings))


def editable_lines(entry: MealEntry) -> list[IngredientLine]:
    """Return the entry's ingredient lines expressed in consumed grams."""
    resolved = resolve_ingredients_for_entry(entry)
    return [
        IngredientLine(
            ingredient_id=line.ingredient_id,
            amount=round_half_up(line.amount * resolved.scale_factor),
            ingredient=line.ingredient,
        )
        for line in resolved.lines
    ]


def lines_from_edit(
    entry: MealEntry, edited: Iterable[IngredientLine]
) -> list[IngredientLine]:
    """Convert consumed-gram lines back into recipe-basis override lines.

    Lines without a valid ingredient id are dropped. Raises ValueError when
    nothing remains.
    """
    factor = resolve_ingredients_for_entry(entry).scale_factor
    lines = [
        IngredientLine(
            ingredient_id=line.ingredient_id,
            amount=round_half_up(line.amount / factor),
            ingredient=line.ingredient,
        )
        for line in edited
        if line.ingredient_id > 0
    ]
    if not lines:
        raise ValueError("At least one ingredient is required")
    _logger.debug(
        "Edited entry ingredients: entry_id=%s lines=%s", entry.id, len(lines)
    )
    return lines
