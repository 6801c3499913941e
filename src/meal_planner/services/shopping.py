"""Shopping list aggregation and check marks."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol

from meal_planner.domain.ingredients import Ingredient
from meal_planner.domain.meals import MealEntry
from meal_planner.domain.shopping import (
    DEFAULT_CATEGORY,
    ShoppingCategory,
    ShoppingListItem,
)
from meal_planner.services.cache import Cache
from meal_planner.services.resolution import resolve_ingredients_for_entry

_logger = logging.getLogger(__name__)


class ShoppingEntrySource(Protocol):
    """Source of planned entries for a date range."""

    def list_entries(self, start: date, end: date) -> list[MealEntry]:
        """Return entries within an inclusive date range."""


class ShoppingCheckRepository(Protocol):
    """Persistence interface for shopping list check marks."""

    def get_checks(self) -> dict[int, bool]:
        """Return check marks keyed by ingredient id."""

    def set_check(self, ingredient_id: int, is_checked: bool) -> None:
        """Store a check mark for an ingredient."""


def build_shopping_list(
    entries: Iterable[MealEntry], start: date, end: date
) -> list[ShoppingListItem]:
    """Sum grams per ingredient over recipe-backed entries in a date range.

    Items keep the order in which ingredients are first encountered.
    """
    totals: dict[int, float] = {}
    ingredients: dict[int, Ingredient] = {}
    for entry in entries:
        if not start <= entry.day <= end:
            continue
        resolved = resolve_ingredients_for_entry(entry)
        if resolved.is_custom:
            continue
        for line in resolved.lines:
            if line.ingredient is None:
                _logger.debug(
                    "Skipping missing ingredient on shopping list: ingredient_id=%s",
                    line.ingredient_id,
                )
                continue
            ingredients.setdefault(line.ingredient_id, line.ingredient)
            totals[line.ingredient_id] = (
                totals.get(line.ingredient_id, 0.0)
                + line.amount * resolved.scale_factor
            )
    return [
        ShoppingListItem(
            ingredient_id=ingredient_id,
            name=ingredients[ingredient_id].name,
            category=ingredients[ingredient_id].category or DEFAULT_CATEGORY,
            total_amount=total,
            unit="g",
            unit_weight=ingredients[ingredient_id].unit_weight,
        )
        for ingredient_id, total in totals.items()
    ]


def group_by_category(items: Iterable[ShoppingListItem]) -> list[ShoppingCategory]:
    """Group items by category, categories sorted by name."""
    grouped: dict[str, list[ShoppingListItem]] = {}
    for item in items:
        grouped.setdefault(item.category or DEFAULT_CATEGORY, []).append(item)
    return [
        ShoppingCategory(name=name, items=grouped[name]) for name in sorted(grouped)
    ]


def shopping_cache_key(start: date, end: date) -> str:
    """Return the cache key for a shopping list range."""
    return f"shopping:{start.isoformat()}:{end.isoformat()}"


@dataclass
class ShoppingListService:
    """Service for building shopping lists with check marks."""

    entries: ShoppingEntrySource
    checks: ShoppingCheckRepository
    cache: Cache
    cache_ttl_seconds: int = 300

    def get_items(self, start: date, end: date) -> list[ShoppingListItem]:
        """Return shopping list items for a range with their check marks."""
        if end < start:
            raise ValueError("end_date must not be before start_date")
        key = shopping_cache_key(start, end)
        cached = self.cache.get(key)
        if isinstance(cached, list):
            items = cached
        else:
            items = build_shopping_list(
                self.entries.list_entries(start, end), start, end
            )
            self.cache.set(key, items, self.cache_ttl_seconds)
        checks = self.checks.get_checks()
        return [
            replace(item, is_checked=checks.get(item.ingredient_id, False))
            for item in items
        ]

    def get_grouped(self, start: date, end: date) -> list[ShoppingCategory]:
        """Return shopping list items grouped by category."""
        return group_by_category(self.get_items(start, end))

    def set_check(self, ingredient_id: int, is_checked: bool) -> None:
        """Mark an ingredient as bought or not."""
        self.checks.set_check(ingredient_id, is_checked)
