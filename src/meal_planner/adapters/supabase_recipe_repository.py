"""Supabase implementation for recipes."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.adapters.supabase_rows import fetch_recipes
from meal_planner.domain.recipes import Recipe
from meal_planner.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes with their lines."""

    client: Client

    def list_recipes(self) -> list[Recipe]:
        """Return every recipe, hydrated."""
        return fetch_recipes(self.client)

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Return a hydrated recipe by id, if present."""
        recipes = fetch_recipes(self.client, [recipe_id])
        return recipes[0] if recipes else None
