"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from meal_vision.api.catalog import router as catalog_router
from meal_vision.api.detection import router as detection_router
from meal_vision.api.meals import router as meals_router
from meal_vision.api.profile import router as profile_router
from meal_vision.api.recommendations import router as recommendations_router
from meal_vision.app_logging import configure_logging
from meal_vision.containers import AppContainer
from meal_vision.errors import AppError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": (
        "Content-Type, Authorization, X-Client-Info, Apikey"
    ),
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Meal Vision", lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def cors(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        # Preflight and any other OPTIONS request: 200, no body.
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Render application errors as ``{error, details}``."""
        if exc.status_code >= 500:  # noqa: PLR2004
            logger.error(
                "Request failed: %s",
                exc.message,
                extra={"path": request.url.path, "details": exc.details},
            )
        content: dict[str, object] = {"error": exc.message}
        if exc.details is not None:
            content["details"] = exc.details
        return JSONResponse(status_code=exc.status_code, content=content)

    app.include_router(detection_router)
    app.include_router(catalog_router)
    app.include_router(meals_router)
    app.include_router(profile_router)
    app.include_router(recommendations_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
