"""Domain models for the shopping list."""

from dataclasses import dataclass

from meal_planner.domain.nutrition import round_half_up

DEFAULT_CATEGORY = "Other"


@dataclass(frozen=True)
class ShoppingListItem:
    """Total grams of one ingredient needed over a date range."""

    ingredient_id: int
    name: str
    category: str
    total_amount: float
    unit: str = "g"
    unit_weight: float | None = None
    is_checked: bool = False

    @property
    def pieces(self) -> float | None:
        """Estimated number of pieces, when a piece weight is known."""
        return estimate_pieces(self.total_amount, self.unit_weight)


@dataclass(frozen=True)
class ShoppingCategory:
    """Shopping list items sharing a category."""

    name: str
    items: list[ShoppingListItem]


def estimate_pieces(total_amount: float, unit_weight: float | None) -> float | None:
    """Return total/unit_weight to one decimal place, or None without a weight."""
    if unit_weight is None or unit_weight <= 0:
        return None
    return round_half_up(total_amount / unit_weight * 10) / 10
