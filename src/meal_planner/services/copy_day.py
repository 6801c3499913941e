"""Copy one day's plan onto another date."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from meal_planner.domain.ingredients import IngredientLine
from meal_planner.domain.meals import MealEntry, MealEntryDraft
from meal_planner.services.nutrition import entry_person


@dataclass(frozen=True)
class CopyPlan:
    """Target entries to delete and drafts to create for a day copy."""

    delete_ids: list[int]
    drafts: list[MealEntryDraft]


def copy_day(
    source_entries: Iterable[MealEntry], target_date: date
) -> list[MealEntryDraft]:
    """Return uneaten drafts on the target date mirroring the source entries."""
    return [
        MealEntryDraft(
            day=target_date,
            meal_type=entry.meal_type,
            person=entry_person(entry),
            recipe_id=entry.recipe_id,
            custom_name=entry.custom_name,
            custom_calories=entry.custom_calories,
            custom_protein=entry.custom_protein,
            custom_carbs=entry.custom_carbs,
            custom_fat=entry.custom_fat,
            servings=entry.servings,
            is_eaten=False,
            ingredients=tuple(
                IngredientLine(
                    ingredient_id=line.ingredient_id,
                    amount=line.amount,
                    ingredient=line.ingredient,
                )
                for line in entry.ingredients
            ),
        )
        for entry in source_entries
    ]


def slots_to_replace(
    source_entries: Iterable[MealEntry], target_entries: Iterable[MealEntry]
) -> list[int]:
    """Return ids of target entries occupying a slot the source day fills."""
    slots = {(entry.meal_type, entry_person(entry)) for entry in source_entries}
    return [
        entry.id
        for entry in target_entries
        if (entry.meal_type, entry_person(entry)) in slots
    ]


def plan_copy(
    source_entries: list[MealEntry],
    target_entries: list[MealEntry],
    target_date: date,
    *,
    replace_target: bool = True,
) -> CopyPlan:
    """Return the deletions and creations needed to copy a day."""
    delete_ids = (
        slots_to_replace(source_entries, target_entries) if replace_target else []
    )
    return CopyPlan(
        delete_ids=delete_ids, drafts=copy_day(source_entries, target_date)
    )
