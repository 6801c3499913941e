"""Supabase implementation for meal plan entries."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from meal_planner.adapters.supabase_rows import (
    fetch_ingredients,
    fetch_recipes,
    parse_entry,
    parse_line,
)
from meal_planner.domain.ingredients import IngredientLine
from meal_planner.domain.meals import MealEntry, MealEntryDraft
from meal_planner.services.plan import MealPlanRepository


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase-backed repository for meal entries and override lines."""

    client: Client

    def list_entries(self, start: date, end: date) -> list[MealEntry]:
        """Return hydrated entries within an inclusive date range."""
        response = (
            self.client.table("meal_entries")
            .select("*")
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("id")
            .execute()
        )
        return self._hydrate(response.data or [])

    def get_entry(self, entry_id: int) -> MealEntry | None:
        """Return a hydrated entry by id, if present."""
        response = (
            self.client.table("meal_entries")
            .select("*")
            .eq("id", entry_id)
            .limit(1)
            .execute()
        )
        entries = self._hydrate(response.data or [])
        return entries[0] if entries else None

    def create_entry(self, draft: MealEntryDraft) -> int:
        """Insert an entry and its override lines, returning the new id."""
        response = (
            self.client.table("meal_entries")
            .insert(
                {
                    "date": draft.day.isoformat(),
                    "meal_type": draft.meal_type,
                    "person": draft.person,
                    "recipe_id": draft.recipe_id,
                    "custom_name": draft.custom_name,
                    "custom_calories": draft.custom_calories,
                    "custom_protein": draft.custom_protein,
                    "custom_carbs": draft.custom_carbs,
                    "custom_fat": draft.custom_fat,
                    "servings": draft.servings,
                    "is_eaten": draft.is_eaten,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal entry")
        entry_id = int(response.data[0]["id"])
        if draft.ingredients:
            self._insert_lines(entry_id, list(draft.ingredients))
        return entry_id

    def update_entry(self, entry_id: int, changes: dict[str, object]) -> None:
        """Update scalar fields of an entry."""
        payload = {
            ("date" if key == "day" else key): (
                value.isoformat() if isinstance(value, date) else value
            )
            for key, value in changes.items()
        }
        self.client.table("meal_entries").update(payload).eq("id", entry_id).execute()

    def replace_entry_ingredients(
        self, entry_id: int, lines: list[IngredientLine]
    ) -> None:
        """Delete and re-insert the override lines of an entry."""
        (
            self.client.table("meal_entry_ingredients")
            .delete()
            .eq("meal_entry_id", entry_id)
            .execute()
        )
        if lines:
            self._insert_lines(entry_id, lines)

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry and its override lines."""
        self.delete_entries([entry_id])

    def delete_entries(self, entry_ids: list[int]) -> None:
        """Delete entries and their override lines."""
        if not entry_ids:
            return
        (
            self.client.table("meal_entry_ingredients")
            .delete()
            .in_("meal_entry_id", entry_ids)
            .execute()
        )
        self.client.table("meal_entries").delete().in_("id", entry_ids).execute()

    def _insert_lines(self, entry_id: int, lines: list[IngredientLine]) -> None:
        self.client.table("meal_entry_ingredients").insert(
            [
                {
                    "meal_entry_id": entry_id,
                    "ingredient_id": line.ingredient_id,
                    "amount": line.amount,
                }
                for line in lines
            ]
        ).execute()

    def _hydrate(self, rows: list[dict[str, object]]) -> list[MealEntry]:
        if not rows:
            return []
        entry_ids = [int(row["id"]) for row in rows]
        line_rows = (
            self.client.table("meal_entry_ingredients")
            .select("*")
            .in_("meal_entry_id", entry_ids)
            .order("id")
            .execute()
            .data
            or []
        )
        recipe_ids = [
            int(row["recipe_id"]) for row in rows if row.get("recipe_id") is not None
        ]
        recipes = {
            recipe.id: recipe
            for recipe in (fetch_recipes(self.client, recipe_ids) if recipe_ids else [])
        }
        ingredients = fetch_ingredients(
            self.client, [int(row["ingredient_id"]) for row in line_rows]
        )
        lines: dict[int, list[IngredientLine]] = {}
        for row in line_rows:
            lines.setdefault(int(row["meal_entry_id"]), []).append(
                parse_line(row, ingredients)
            )
        return [
            parse_entry(
                row,
                recipes.get(int(row["recipe_id"]))
                if row.get("recipe_id") is not None
                else None,
                lines.get(int(row["id"]), []),
            )
            for row in rows
        ]
