"""Shopping list endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from meal_planner.api.models import ShoppingCheckRequest
from meal_planner.api.serializers import serialize_shopping_category

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])


@router.get("")
async def get_shopping_list(
    start_date: date, end_date: date, request: Request
) -> dict[str, object]:
    """Return ingredients needed for a date range, grouped by category."""
    container: AppContainer = request.app.state.container
    categories = container.shopping_list_service.get_grouped(start_date, end_date)
    return {
        "start_date": start_date.isoformat(),
        "end_date": end_date.isoformat(),
        "categories": [serialize_shopping_category(item) for item in categories],
    }


@router.post("/checks")
async def set_check(
    payload: ShoppingCheckRequest, request: Request
) -> dict[str, object]:
    """Check or uncheck an ingredient."""
    container: AppContainer = request.app.state.container
    container.shopping_list_service.set_check(
        payload.ingredient_id, payload.is_checked
    )
    return {"ingredient_id": payload.ingredient_id, "is_checked": payload.is_checked}
