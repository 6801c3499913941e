"""Recipe listing and per-serving statistics."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from meal_planner.domain.meals import MealEntry
from meal_planner.domain.recipes import Recipe, RecipeStats, RecipeWithStats
from meal_planner.services.nutrition import aggregate
from meal_planner.services.units import per_serving_factor

HISTORY_START = date(2000, 1, 1)
HISTORY_END = date(2100, 1, 1)


class RecipeRepository(Protocol):
    """Persistence interface for recipes with their ingredient lines."""

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes with ingredients and frequent addons."""

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Return a recipe by id, if present."""


class EntryHistory(Protocol):
    """Source of planned entries used to count recipe usage."""

    def list_entries(self, start: date, end: date) -> list[MealEntry]:
        """Return entries within an inclusive date range."""


def recipe_stats(recipe: Recipe, entries: Iterable[MealEntry]) -> RecipeStats:
    """Return rounded per-serving macros and the number of entries using a recipe."""
    totals = aggregate(recipe.ingredients, per_serving_factor(recipe.servings))
    rounded = totals.rounded()
    eat_count = sum(1 for entry in entries if entry.recipe_id == recipe.id)
    return RecipeStats(
        calories=int(rounded.calories),
        protein=int(rounded.protein),
        carbs=int(rounded.carbs),
        fat=int(rounded.fat),
        eat_count=eat_count,
    )


def matches_search(recipe: Recipe, query: str) -> bool:
    """Return True when the query matches the name, a tag or an ingredient name."""
    needle = query.strip().lower()
    if not needle:
        return True
    if needle in recipe.name.lower():
        return True
    if any(needle in tag.lower() for tag in recipe.tags):
        return True
    return any(
        line.ingredient is not None and needle in line.ingredient.name.lower()
        for line in recipe.ingredients
    )


def uses_ingredient(recipe: Recipe, ingredient_id: int) -> bool:
    """Return True when a recipe lists an ingredient."""
    return any(line.ingredient_id == ingredient_id for line in recipe.ingredients)


@dataclass
class RecipeService:
    """Service for browsing recipes."""

    repository: RecipeRepository
    history: EntryHistory

    def list_recipes(
        self, search: str | None = None, ingredient_id: int | None = None
    ) -> list[RecipeWithStats]:
        """Return recipes matching the filters, each with its stats."""
        recipes = self.repository.list_recipes()
        if search:
            recipes = [recipe for recipe in recipes if matches_search(recipe, search)]
        if ingredient_id is not None:
            recipes = [
                recipe for recipe in recipes if uses_ingredient(recipe, ingredient_id)
            ]
        entries = self.history.list_entries(HISTORY_START, HISTORY_END)
        return [
            RecipeWithStats(recipe=recipe, stats=recipe_stats(recipe, entries))
            for recipe in recipes
        ]

    def get_recipe(self, recipe_id: int) -> RecipeWithStats | None:
        """Return a recipe with stats, if present."""
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            return None
        entries = self.history.list_entries(HISTORY_START, HISTORY_END)
        return RecipeWithStats(recipe=recipe, stats=recipe_stats(recipe, entries))
