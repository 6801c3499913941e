"""Domain models for recipes."""

from dataclasses import dataclass

from meal_planner.domain.ingredients import Ingredient, IngredientLine


@dataclass(frozen=True)
class FrequentAddon:
    """Optional extra ingredient with a suggested increment in grams."""

    ingredient_id: int
    amount: float
    ingredient: Ingredient | None = None


@dataclass(frozen=True)
class Recipe:
    """Recipe whose ingredient amounts are written for `servings` portions."""

    id: int
    name: str
    servings: float = 1.0
    tags: tuple[str, ...] = ()
    description: str | None = None
    instructions: str | None = None
    prep_time: int | None = None
    image_url: str | None = None
    ingredients: tuple[IngredientLine, ...] = ()
    frequent_addons: tuple[FrequentAddon, ...] = ()


@dataclass(frozen=True)
class RecipeStats:
    """Per-serving macros and how often the recipe appears in the plan."""

    calories: int
    protein: int
    carbs: int
    fat: int
    eat_count: int


@dataclass(frozen=True)
class RecipeWithStats:
    """Recipe paired with its computed stats."""

    recipe: Recipe
    stats: RecipeStats
