"""Ingredient catalogue service."""

from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.ingredients import Ingredient


class IngredientRepository(Protocol):
    """Persistence interface for ingredients."""

    def list_ingredients(self, search: str | None = None) -> list[Ingredient]:
        """Return ingredients, optionally filtered by name or category."""

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def get_ingredients(self, ingredient_ids: list[int]) -> dict[int, Ingredient]:
        """Return ingredients keyed by id for the given ids."""


@dataclass
class IngredientService:
    """Service for browsing ingredients."""

    repository: IngredientRepository

    def list_ingredients(self, search: str | None = None) -> list[Ingredient]:
        """Return ingredients sorted by name."""
        query = search.strip() if search else None
        ingredients = self.repository.list_ingredients(query or None)
        return sorted(ingredients, key=lambda ingredient: ingredient.name.lower())

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        """Return an ingredient by id."""
        return self.repository.get_ingredient(ingredient_id)
