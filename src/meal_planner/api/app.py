"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from meal_planner.api.catalogue import router as catalogue_router
from meal_planner.api.insights import router as insights_router
from meal_planner.api.meal_plan import router as meal_plan_router
from meal_planner.api.shopping import router as shopping_router
from meal_planner.app_logging import configure_logging
from meal_planner.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Meal Planner")
    app.state.container = container

    app.include_router(catalogue_router)
    app.include_router(meal_plan_router)
    app.include_router(shopping_router)
    app.include_router(insights_router)

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        logger.info("Rejected request %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
