"""Meal plan endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, Response, status

from meal_planner.api.models import (
    CopyDayRequest,
    CustomEntryRequest,
    EntryUpdateRequest,
    IngredientEntryRequest,
    IngredientLineRequest,
    RecipeEntryRequest,
    ToggleEatenRequest,
)
from meal_planner.api.serializers import serialize_day, serialize_entry
from meal_planner.domain.ingredients import IngredientLine
from meal_planner.domain.nutrition import NutritionTotals

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api/meal-plan", tags=["meal-plan"])


def _lines(items: list[IngredientLineRequest]) -> list[IngredientLine]:
    return [
        IngredientLine(ingredient_id=item.ingredient_id, amount=item.amount)
        for item in items
    ]


@router.get("/{day}")
async def get_day(day: date, request: Request) -> dict[str, object]:
    """Return every entry of a day with totals per person."""
    container: AppContainer = request.app.state.container
    return serialize_day(container.meal_plan_service.get_day_summary(day))


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_recipe_entry(
    payload: RecipeEntryRequest, request: Request
) -> dict[str, object]:
    """Plan a recipe, optionally with frequent addons."""
    container: AppContainer = request.app.state.container
    entry = container.meal_plan_service.add_recipe_entry(
        payload.day,
        payload.meal_type,
        payload.recipe_id,
        person=payload.person,
        servings=payload.servings,
        addons={addon.ingredient_id: addon.amount for addon in payload.addons},
    )
    return serialize_entry(entry)


@router.post("/custom", status_code=status.HTTP_201_CREATED)
async def add_custom_entry(
    payload: CustomEntryRequest, request: Request
) -> dict[str, object]:
    """Plan a custom meal."""
    container: AppContainer = request.app.state.container
    entry = container.meal_plan_service.add_custom_entry(
        payload.day,
        payload.meal_type,
        payload.name,
        NutritionTotals(
            calories=payload.calories,
            protein=payload.protein,
            carbs=payload.carbs,
            fat=payload.fat,
        ),
        person=payload.person,
        servings=payload.servings,
        is_eaten=payload.is_eaten,
    )
    return serialize_entry(entry)


@router.post("/ingredient", status_code=status.HTTP_201_CREATED)
async def add_ingredient_entry(
    payload: IngredientEntryRequest, request: Request
) -> dict[str, object]:
    """Plan a single ingredient by weight."""
    container: AppContainer = request.app.state.container
    entry = container.meal_plan_service.add_ingredient_entry(
        payload.day,
        payload.meal_type,
        payload.ingredient_id,
        payload.amount,
        person=payload.person,
    )
    return serialize_entry(entry)


@router.post("/copy-day")
async def copy_day(payload: CopyDayRequest, request: Request) -> dict[str, object]:
    """Copy one day's entries onto another date."""
    container: AppContainer = request.app.state.container
    copied = container.meal_plan_service.copy_day(
        payload.source_date,
        payload.target_date,
        replace_target=payload.replace_target,
    )
    return {"copied": copied}


@router.patch("/entry/{entry_id}")
async def update_entry(
    entry_id: int, payload: EntryUpdateRequest, request: Request
) -> dict[str, object]:
    """Update entry fields and ingredient overrides."""
    container: AppContainer = request.app.state.container
    service = container.meal_plan_service
    changes = payload.model_dump(
        exclude_none=True, exclude={"ingredients", "edited_ingredients"}
    )
    ingredients = (
        _lines(payload.ingredients) if payload.ingredients is not None else None
    )
    entry = service.update_entry(entry_id, changes, ingredients)
    if entry is not None and payload.edited_ingredients is not None:
        entry = service.edit_entry_ingredients(
            entry_id, _lines(payload.edited_ingredients)
        )
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_entry(entry)


@router.patch("/{entry_id}/toggle")
async def toggle_eaten(
    entry_id: int, payload: ToggleEatenRequest, request: Request
) -> dict[str, object]:
    """Mark an entry as eaten or not."""
    container: AppContainer = request.app.state.container
    entry = container.meal_plan_service.set_eaten(entry_id, payload.is_eaten)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_entry(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: int, request: Request) -> Response:
    """Delete an entry."""
    container: AppContainer = request.app.state.container
    if not container.meal_plan_service.delete_entry(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
