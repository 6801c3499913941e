"""Domain models for ingredients."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ingredient:
    """Ingredient with nutrition and price defined per 100 g/ml."""

    id: int
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    category: str | None = None
    unit: str = "g"
    unit_weight: float | None = None
    unit_description: str | None = None
    price: float = 0.0
    image_url: str | None = None


@dataclass(frozen=True)
class IngredientLine:
    """An ingredient amount in grams, with the ingredient when it still exists."""

    ingredient_id: int
    amount: float
    ingredient: Ingredient | None = None
