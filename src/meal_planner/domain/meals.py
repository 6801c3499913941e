"""Domain models for the meal plan."""

from dataclasses import dataclass
from datetime import date

from meal_planner.domain.ingredients import IngredientLine
from meal_planner.domain.recipes import Recipe

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")
PEOPLE = ("A", "B")
DEFAULT_PERSON = "A"


@dataclass(frozen=True)
class MealEntry:
    """One planned meal for one person on one day and meal slot.

    Non-empty `ingredients` override the recipe's own list. Custom macros are
    absolute values for the whole entry at one serving.
    """

    id: int
    day: date
    meal_type: str
    person: str = DEFAULT_PERSON
    recipe_id: int | None = None
    recipe: Recipe | None = None
    custom_name: str | None = None
    custom_calories: float | None = None
    custom_protein: float | None = None
    custom_carbs: float | None = None
    custom_fat: float | None = None
    servings: float = 1.0
    is_eaten: bool = False
    ingredients: tuple[IngredientLine, ...] = ()


@dataclass(frozen=True)
class MealEntryDraft:
    """A meal entry that has not been persisted yet."""

    day: date
    meal_type: str
    person: str = DEFAULT_PERSON
    recipe_id: int | None = None
    custom_name: str | None = None
    custom_calories: float | None = None
    custom_protein: float | None = None
    custom_carbs: float | None = None
    custom_fat: float | None = None
    servings: float = 1.0
    is_eaten: bool = False
    ingredients: tuple[IngredientLine, ...] = ()
