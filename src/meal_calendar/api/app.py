"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from meal_calendar.api.auth import router as auth_router
from meal_calendar.api.catalog import router as catalog_router
from meal_calendar.api.plans import router as plans_router
from meal_calendar.app_logging import configure_logging
from meal_calendar.containers import AppContainer
from meal_calendar.domain.errors import (
    AuthenticationError,
    PersistenceError,
    UnknownCategoryError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Meal Calendar")
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(catalog_router)
    app.include_router(plans_router)

    @app.exception_handler(PersistenceError)
    async def persistence_error(_: Request, exc: PersistenceError) -> JSONResponse:
        logger.warning("Catalog store unavailable: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Could not save or load your food lists."},
        )

    @app.exception_handler(UnknownCategoryError)
    async def unknown_category(_: Request, exc: UnknownCategoryError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(AuthenticationError)
    async def authentication_error(
        _: Request, exc: AuthenticationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
