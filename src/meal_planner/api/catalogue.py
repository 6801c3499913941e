"""Ingredient and recipe browsing endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from meal_planner.api.serializers import (
    serialize_ingredient,
    serialize_recipe_with_stats,
)

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api", tags=["catalogue"])


@router.get("/ingredients")
async def list_ingredients(
    request: Request, search: str | None = None
) -> dict[str, object]:
    """Return ingredients matching a name or category."""
    container: AppContainer = request.app.state.container
    ingredients = container.ingredient_service.list_ingredients(search)
    return {"ingredients": [serialize_ingredient(item) for item in ingredients]}


@router.get("/recipes")
async def list_recipes(
    request: Request, search: str | None = None, ingredient_id: int | None = None
) -> dict[str, object]:
    """Return recipes with per-serving macros and eat counts."""
    container: AppContainer = request.app.state.container
    recipes = container.recipe_service.list_recipes(search, ingredient_id)
    return {"recipes": [serialize_recipe_with_stats(item) for item in recipes]}


@router.get("/recipes/{recipe_id}")
async def get_recipe(recipe_id: int, request: Request) -> dict[str, object]:
    """Return one recipe with its stats."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_recipe_with_stats(recipe)
