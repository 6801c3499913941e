"""Per-100 conversions and serving scale factors."""

from meal_planner.domain.ingredients import Ingredient
from meal_planner.domain.nutrition import NutritionTotals

NUTRIENT_FIELDS = ("calories", "protein", "carbs", "fat", "price")
_PER_AMOUNT = 100.0


def normalize_servings(servings: float | None) -> float:
    """Return servings, treating zero, negative or missing values as 1."""
    if servings is None or servings <= 0:
        return 1.0
    return float(servings)


def absolute_nutrient(
    ingredient: Ingredient, amount_g: float, field: str = "calories"
) -> float:
    """Convert a per-100 g value into the absolute value for `amount_g`."""
    if field not in NUTRIENT_FIELDS:
        raise ValueError(f"Unknown nutrient field: {field}")
    per_100 = getattr(ingredient, field) or 0.0
    return float(per_100) * amount_g / _PER_AMOUNT


def absolute_nutrition(ingredient: Ingredient, amount_g: float) -> NutritionTotals:
    """Return absolute calories, macros and price for an ingredient amount."""
    return NutritionTotals(
        calories=absolute_nutrient(ingredient, amount_g, "calories"),
        protein=absolute_nutrient(ingredient, amount_g, "protein"),
        carbs=absolute_nutrient(ingredient, amount_g, "carbs"),
        fat=absolute_nutrient(ingredient, amount_g, "fat"),
        price=absolute_nutrient(ingredient, amount_g, "price"),
    )


def serving_scale_factor(
    entry_servings: float | None, recipe_servings: float | None
) -> float:
    """Return how much of the recipe's ingredient list one entry uses."""
    return normalize_servings(entry_servings) / normalize_servings(recipe_servings)


def per_serving_factor(recipe_servings: float | None) -> float:
    """Return the factor turning recipe totals into one serving."""
    return 1.0 / normalize_servings(recipe_servings)
