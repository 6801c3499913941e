"""Supabase implementation for user settings."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.domain.settings import NutritionTargets
from meal_planner.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase-backed repository for the single settings row."""

    client: Client

    def get_targets(self) -> NutritionTargets | None:
        """Return stored targets, if a settings row exists."""
        row = self._get_row()
        if row is None:
            return None
        defaults = NutritionTargets()
        return NutritionTargets(
            calories=_target(row, "target_calories", defaults.calories),
            protein=_target(row, "target_protein", defaults.protein),
            carbs=_target(row, "target_carbs", defaults.carbs),
            fat=_target(row, "target_fat", defaults.fat),
        )

    def update_targets(self, targets: NutritionTargets) -> NutritionTargets:
        """Insert or update the settings row."""
        payload = {
            "target_calories": targets.calories,
            "target_protein": targets.protein,
            "target_carbs": targets.carbs,
            "target_fat": targets.fat,
        }
        row = self._get_row()
        if row is None:
            response = self.client.table("user_settings").insert(payload).execute()
        else:
            response = (
                self.client.table("user_settings")
                .update(payload)
                .eq("id", row["id"])
                .execute()
            )
        if not response.data:
            raise RuntimeError("Failed to save user settings")
        return targets

    def _get_row(self) -> dict[str, object] | None:
        response = (
            self.client.table("user_settings")
            .select("*")
            .order("id")
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]


def _target(row: dict[str, object], column: str, default: int) -> int:
    value = row.get(column)
    return default if value is None else int(value)
