"""Supabase implementation for the ingredient catalogue."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.adapters.supabase_rows import fetch_ingredients, parse_ingredient
from meal_planner.domain.ingredients import Ingredient
from meal_planner.services.ingredients import IngredientRepository


@dataclass
class SupabaseIngredientRepository(IngredientRepository):
    """Supabase-backed repository for ingredients."""

    client: Client

    def list_ingredients(self, search: str | None = None) -> list[Ingredient]:
        """Return ingredients matching a name or category substring."""
        query = self.client.table("ingredients").select("*")
        if search:
            pattern = f"%{search}%"
            query = query.or_(f"name.ilike.{pattern},category.ilike.{pattern}")
        response = query.order("name").execute()
        return [parse_ingredient(row) for row in response.data or []]

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        """Return an ingredient by id, if present."""
        response = (
            self.client.table("ingredients")
            .select("*")
            .eq("id", ingredient_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_ingredient(response.data[0])

    def get_ingredients(self, ingredient_ids: list[int]) -> dict[int, Ingredient]:
        """Return ingredients keyed by id."""
        return fetch_ingredients(self.client, ingredient_ids)
