"""Range analytics and nutrition target endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from meal_planner.api.models import TargetsUpdateRequest
from meal_planner.api.serializers import serialize_range
from meal_planner.config import parse_range_days

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api", tags=["insights"])


@router.get("/summary")
async def get_summary(request: Request, days: int | None = None) -> dict[str, object]:
    """Return cost and consumption analytics for the last 7/14/30/90 days."""
    container: AppContainer = request.app.state.container
    range_days = parse_range_days(days, container.settings.summary_default_days)
    return serialize_range(container.stats_service.get_summary(range_days))


@router.get("/user-settings")
async def get_user_settings(request: Request) -> dict[str, object]:
    """Return daily nutrition targets."""
    container: AppContainer = request.app.state.container
    return asdict(container.user_settings_service.get_targets())


@router.patch("/user-settings")
async def update_user_settings(
    payload: TargetsUpdateRequest, request: Request
) -> dict[str, object]:
    """Update daily nutrition targets."""
    container: AppContainer = request.app.state.container
    targets = container.user_settings_service.update_targets(
        payload.model_dump(exclude_none=True)
    )
    return asdict(targets)
