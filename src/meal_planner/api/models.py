"""Pydantic request models for the meal planner API."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MealType = Literal["breakfast", "lunch", "dinner", "snack"]
Person = Literal["A", "B"]


class _EntryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day: date = Field(alias="date")
    meal_type: MealType
    person: Person = "A"


class AddonAmount(BaseModel):
    """Selected grams of a frequent addon."""

    ingredient_id: int
    amount: float = Field(gt=0)


class RecipeEntryRequest(_EntryRequest):
    """Plan a recipe for a meal slot."""

    recipe_id: int
    servings: float = Field(default=1.0, gt=0)
    addons: list[AddonAmount] = Field(default_factory=list)


class CustomEntryRequest(_EntryRequest):
    """Plan a custom meal with absolute macros."""

    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    servings: float = Field(default=1.0, gt=0)
    is_eaten: bool = True


class IngredientEntryRequest(_EntryRequest):
    """Plan a single ingredient by weight."""

    ingredient_id: int
    amount: float = Field(gt=0)


class IngredientLineRequest(BaseModel):
    """Ingredient amount in grams."""

    ingredient_id: int
    amount: float = Field(ge=0)


class EntryUpdateRequest(BaseModel):
    """Partial update of a meal entry.

    `ingredients` replaces the override list as-is; `edited_ingredients` holds
    amounts as eaten at the entry's current servings.
    """

    model_config = ConfigDict(populate_by_name=True)

    day: date | None = Field(default=None, alias="date")
    meal_type: MealType | None = None
    person: Person | None = None
    servings: float | None = Field(default=None, gt=0)
    is_eaten: bool | None = None
    custom_name: str | None = None
    custom_calories: float | None = Field(default=None, ge=0)
    custom_protein: float | None = Field(default=None, ge=0)
    custom_carbs: float | None = Field(default=None, ge=0)
    custom_fat: float | None = Field(default=None, ge=0)
    ingredients: list[IngredientLineRequest] | None = None
    edited_ingredients: list[IngredientLineRequest] | None = None


class ToggleEatenRequest(BaseModel):
    """Mark an entry as eaten or not."""

    is_eaten: bool


class CopyDayRequest(BaseModel):
    """Copy a day's plan onto another date."""

    source_date: date
    target_date: date
    replace_target: bool = True


class ShoppingCheckRequest(BaseModel):
    """Check or uncheck a shopping list ingredient."""

    ingredient_id: int
    is_checked: bool


class TargetsUpdateRequest(BaseModel):
    """Partial update of daily nutrition targets."""

    calories: int | None = Field(default=None, ge=0)
    protein: int | None = Field(default=None, ge=0)
    carbs: int | None = Field(default=None, ge=0)
    fat: int | None = Field(default=None, ge=0)
