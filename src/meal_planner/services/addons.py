"""Frequent addon merging and selection."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace

from meal_planner.domain.ingredients import IngredientLine
from meal_planner.domain.nutrition import round_half_up
from meal_planner.domain.recipes import FrequentAddon, Recipe


def merge_addon(
    lines: Iterable[IngredientLine], addon: FrequentAddon
) -> list[IngredientLine]:
    """Add an addon's grams to a matching line, or append a new line."""
    merged = list(lines)
    if addon.amount <= 0:
        return merged
    for index, line in enumerate(merged):
        if line.ingredient_id == addon.ingredient_id:
            merged[index] = replace(line, amount=line.amount + addon.amount)
            return merged
    merged.append(
        IngredientLine(
            ingredient_id=addon.ingredient_id,
            amount=addon.amount,
            ingredient=addon.ingredient,
        )
    )
    return merged


def merge_addons(
    lines: Iterable[IngredientLine], addons: Iterable[FrequentAddon]
) -> list[IngredientLine]:
    """Merge several addons into ingredient lines."""
    merged = list(lines)
    for addon in addons:
        merged = merge_addon(merged, addon)
    return merged


def repeat_count(selected_amount: float, base_amount: float) -> int:
    """Return how many suggested increments a selected amount represents."""
    if base_amount <= 0:
        return 0
    return max(0, round_half_up(selected_amount / base_amount))


@dataclass(frozen=True)
class AddonSelection:
    """Grams selected per addon ingredient before an entry is created."""

    amounts: Mapping[int, float] = field(default_factory=dict)

    def amount_for(self, ingredient_id: int) -> float:
        return self.amounts.get(ingredient_id, 0.0)

    def increase(self, addon: FrequentAddon) -> "AddonSelection":
        """Add one suggested increment."""
        return self.set_amount(
            addon.ingredient_id, self.amount_for(addon.ingredient_id) + addon.amount
        )

    def decrease(self, addon: FrequentAddon) -> "AddonSelection":
        """Remove one suggested increment, dropping the addon at zero."""
        return self.set_amount(
            addon.ingredient_id, self.amount_for(addon.ingredient_id) - addon.amount
        )

    def set_amount(self, ingredient_id: int, amount: float) -> "AddonSelection":
        """Set a rounded amount, dropping the addon when it is not positive."""
        amounts = dict(self.amounts)
        rounded = max(0, round_half_up(amount))
        if rounded > 0:
            amounts[ingredient_id] = rounded
        else:
            amounts.pop(ingredient_id, None)
        return AddonSelection(amounts=amounts)

    def selected_addons(self, recipe: Recipe) -> list[FrequentAddon]:
        """Return the recipe's addons carrying the selected amounts."""
        selected = []
        for addon in recipe.frequent_addons:
            amount = self.amount_for(addon.ingredient_id)
            if amount > 0:
                selected.append(replace(addon, amount=amount))
        return selected
