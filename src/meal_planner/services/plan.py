"""Meal plan service: entries, day summaries and day copies."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from meal_planner.domain.ingredients import IngredientLine
from meal_planner.domain.meals import (
    DEFAULT_PERSON,
    MEAL_TYPES,
    PEOPLE,
    MealEntry,
    MealEntryDraft,
)
from meal_planner.domain.nutrition import NutritionTotals, round_half_up
from meal_planner.domain.settings import NutritionTargets
from meal_planner.domain.stats import DaySummary, PersonDaySummary
from meal_planner.services.addons import AddonSelection, merge_addons
from meal_planner.services.cache import Cache
from meal_planner.services.copy_day import plan_copy
from meal_planner.services.ingredients import IngredientRepository
from meal_planner.services.nutrition import entry_person, sum_entries
from meal_planner.services.recipes import RecipeRepository
from meal_planner.services.resolution import lines_from_edit
from meal_planner.services.units import absolute_nutrition
from meal_planner.services.user_settings import UserSettingsService

_logger = logging.getLogger(__name__)

ENTRY_FIELDS = frozenset(
    {
        "servings",
        "is_eaten",
        "person",
        "meal_type",
        "day",
        "custom_name",
        "custom_calories",
        "custom_protein",
        "custom_carbs",
        "custom_fat",
    }
)


class MealPlanRepository(Protocol):
    """Persistence interface for meal entries and their override lines."""

    def list_entries(self, start: date, end: date) -> list[MealEntry]:
        """Return hydrated entries within an inclusive date range."""

    def get_entry(self, entry_id: int) -> MealEntry | None:
        """Return a hydrated entry by id, if present."""

    def create_entry(self, draft: MealEntryDraft) -> int:
        """Persist an entry with its override lines and return its id."""

    def update_entry(self, entry_id: int, changes: dict[str, object]) -> None:
        """Update scalar fields of an entry."""

    def replace_entry_ingredients(
        self, entry_id: int, lines: list[IngredientLine]
    ) -> None:
        """Replace the override lines of an entry."""

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry and its override lines."""

    def delete_entries(self, entry_ids: list[int]) -> None:
        """Delete several entries and their override lines."""


def day_cache_key(day: date) -> str:
    """Return the cache key for a day summary."""
    return f"plan:day:{day.isoformat()}"


def _validate_slot(meal_type: str, person: str) -> None:
    if meal_type not in MEAL_TYPES:
        raise ValueError(f"Unknown meal type: {meal_type}")
    if person not in PEOPLE:
        raise ValueError(f"Unknown person: {person}")


def summarize_day(
    day: date, entries: Iterable[MealEntry], targets: NutritionTargets
) -> DaySummary:
    """Build a day summary from the entries planned on that day."""
    day_entries = [entry for entry in entries if entry.day == day]
    target_totals = NutritionTotals(
        calories=targets.calories,
        protein=targets.protein,
        carbs=targets.carbs,
        fat=targets.fat,
    )
    people = []
    for person in PEOPLE:
        person_entries = [
            entry for entry in day_entries if entry_person(entry) == person
        ]
        consumed = sum_entries(
            entry for entry in person_entries if entry.is_eaten
        ).rounded()
        people.append(
            PersonDaySummary(
                person=person,
                planned=sum_entries(person_entries).rounded(),
                consumed=consumed,
                remaining=target_totals - consumed,
                entries=person_entries,
            )
        )
    return DaySummary(
        day=day,
        totals=sum_entries(day_entries).rounded(),
        consumed=sum_entries(e for e in day_entries if e.is_eaten).rounded(),
        targets=targets,
        people=people,
        entries=day_entries,
    )


@dataclass
class MealPlanService:
    """Service for planning meals and summarising days."""

    repository: MealPlanRepository
    recipes: RecipeRepository
    ingredients: IngredientRepository
    settings: UserSettingsService
    cache: Cache
    cache_ttl_seconds: int = 300

    def get_day_summary(self, day: date) -> DaySummary:
        """Return a day summary, reading the day's entries through the cache."""
        key = day_cache_key(day)
        cached = self.cache.get(key)
        if isinstance(cached, list):
            entries = cached
        else:
            entries = self.repository.list_entries(day, day)
            self.cache.set(key, entries, self.cache_ttl_seconds)
        return summarize_day(day, entries, self.settings.get_targets())

    def get_entry(self, entry_id: int) -> MealEntry | None:
        """Return an entry by id."""
        return self.repository.get_entry(entry_id)

    def add_recipe_entry(  # noqa: PLR0913
        self,
        day: date,
        meal_type: str,
        recipe_id: int,
        *,
        person: str = DEFAULT_PERSON,
        servings: float = 1.0,
        addons: Mapping[int, float] | None = None,
    ) -> MealEntry:
        """Plan a recipe, snapshotting its ingredients with selected addons."""
        _validate_slot(meal_type, person)
        recipe = self.recipes.get_recipe(recipe_id)
        if recipe is None:
            raise ValueError(f"Unknown recipe: {recipe_id}")
        lines = list(recipe.ingredients)
        selected = AddonSelection(amounts=dict(addons or {})).selected_addons(recipe)
        if selected:
            lines = merge_addons(lines, selected)
            servings = 1.0
        draft = MealEntryDraft(
            day=day,
            meal_type=meal_type,
            person=person,
            recipe_id=recipe.id,
            servings=servings,
            ingredients=tuple(lines),
        )
        return self._create(draft)

    def add_custom_entry(  # noqa: PLR0913
        self,
        day: date,
        meal_type: str,
        name: str,
        nutrition: NutritionTotals,
        *,
        person: str = DEFAULT_PERSON,
        servings: float = 1.0,
        is_eaten: bool = False,
    ) -> MealEntry:
        """Plan a custom meal with absolute macros."""
        _validate_slot(meal_type, person)
        draft = MealEntryDraft(
            day=day,
            meal_type=meal_type,
            person=person,
            custom_name=name,
            custom_calories=nutrition.calories,
            custom_protein=nutrition.protein,
            custom_carbs=nutrition.carbs,
            custom_fat=nutrition.fat,
            servings=servings,
            is_eaten=is_eaten,
        )
        return self._create(draft)

    def add_ingredient_entry(
        self,
        day: date,
        meal_type: str,
        ingredient_id: int,
        amount: float,
        *,
        person: str = DEFAULT_PERSON,
    ) -> MealEntry:
        """Plan a single ingredient by weight."""
        _validate_slot(meal_type, person)
        if amount <= 0:
            raise ValueError("Amount must be positive")
        ingredient = self.ingredients.get_ingredient(ingredient_id)
        if ingredient is None:
            raise ValueError(f"Unknown ingredient: {ingredient_id}")
        totals = absolute_nutrition(ingredient, amount)
        draft = MealEntryDraft(
            day=day,
            meal_type=meal_type,
            person=person,
            custom_name=ingredient.name,
            custom_calories=round_half_up(totals.calories),
            custom_protein=round_half_up(totals.protein * 10) / 10,
            custom_carbs=round_half_up(totals.carbs * 10) / 10,
            custom_fat=round_half_up(totals.fat * 10) / 10,
            servings=1.0,
            ingredients=(
                IngredientLine(
                    ingredient_id=ingredient.id,
                    amount=round_half_up(amount),
                    ingredient=ingredient,
                ),
            ),
        )
        return self._create(draft)

    def update_entry(
        self,
        entry_id: int,
        changes: dict[str, object],
        ingredients: list[IngredientLine] | None = None,
    ) -> MealEntry | None:
        """Apply field changes and optionally replace the override lines."""
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            return None
        allowed = {
            key: value
            for key, value in changes.items()
            if key in ENTRY_FIELDS and value is not None
        }
        _validate_slot(
            str(allowed.get("meal_type", entry.meal_type)),
            str(allowed.get("person", entry_person(entry))),
        )
        if allowed:
            self.repository.update_entry(entry_id, allowed)
        if ingredients is not None:
            self.repository.replace_entry_ingredients(entry_id, ingredients)
            _logger.info(
                "Replaced entry ingredients: entry_id=%s lines=%s",
                entry_id,
                len(ingredients),
            )
        self._invalidate(entry.day)
        new_day = allowed.get("day")
        if isinstance(new_day, date) and new_day != entry.day:
            self._invalidate(new_day)
        return self.repository.get_entry(entry_id)

    def edit_entry_ingredients(
        self, entry_id: int, edited: list[IngredientLine]
    ) -> MealEntry | None:
        """Store ingredient amounts edited in consumed grams."""
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            return None
        return self.update_entry(entry_id, {}, lines_from_edit(entry, edited))

    def set_eaten(self, entry_id: int, is_eaten: bool) -> MealEntry | None:
        """Mark an entry as eaten or not."""
        return self.update_entry(entry_id, {"is_eaten": is_eaten})

    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry, returning False when it does not exist."""
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            return False
        self.repository.delete_entry(entry_id)
        self._invalidate(entry.day)
        return True

    def copy_day(
        self, source: date, target: date, *, replace_target: bool = True
    ) -> int:
        """Copy every entry of a day onto another date, returning the count."""
        if source == target:
            raise ValueError("Source and target dates must differ")
        plan = plan_copy(
            self.repository.list_entries(source, source),
            self.repository.list_entries(target, target),
            target,
            replace_target=replace_target,
        )
        if plan.delete_ids:
            self.repository.delete_entries(plan.delete_ids)
        for draft in plan.drafts:
            self.repository.create_entry(draft)
        self._invalidate(target)
        _logger.info(
            "Copied day: source=%s target=%s copied=%s replaced=%s",
            source,
            target,
            len(plan.drafts),
            len(plan.delete_ids),
        )
        return len(plan.drafts)

    def _create(self, draft: MealEntryDraft) -> MealEntry:
        entry_id = self.repository.create_entry(draft)
        self._invalidate(draft.day)
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            raise RuntimeError(f"Created entry {entry_id} could not be loaded")
        return entry

    def _invalidate(self, day: date) -> None:
        self.cache.delete(day_cache_key(day))
        self.cache.delete_prefix("shopping:")
