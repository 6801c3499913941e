"""Supabase implementation for shopping list check marks."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from meal_planner.services.shopping import ShoppingCheckRepository


@dataclass
class SupabaseShoppingCheckRepository(ShoppingCheckRepository):
    """Supabase-backed repository for shopping list check marks."""

    client: Client

    def get_checks(self) -> dict[int, bool]:
        """Return check marks keyed by ingredient id."""
        response = self.client.table("shopping_list_checks").select("*").execute()
        return {
            int(row["ingredient_id"]): bool(row.get("is_checked"))
            for row in response.data or []
        }

    def set_check(self, ingredient_id: int, is_checked: bool) -> None:
        """Upsert a check mark for an ingredient."""
        self.client.table("shopping_list_checks").upsert(
            {
                "ingredient_id": ingredient_id,
                "is_checked": is_checked,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="ingredient_id",
        ).execute()
