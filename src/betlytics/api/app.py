"""FastAPI application factory for the betlytics API.

Start with::

    betlytics api serve
    # or directly:
    uvicorn betlytics.api.app:app --reload
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from betlytics import __version__
from betlytics.analytics.errors import InvalidInputError
from betlytics.api.routes.analytics import router as analytics_router
from betlytics.api.routes.calculators import router as calculators_router
from betlytics.api.routes.health import router as health_router
from betlytics.utils.logging import get_logger

log = get_logger(__name__)


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    log.info("invalid_input", path=request.url.path, field=exc.field, reason=exc.reason)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "field": exc.field, "reason": exc.reason},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title="betlytics API",
        version=__version__,
        description="Betting performance analytics: Kelly, EV, CLV, streaks, drawdown, risk",
    )

    # CORS for the tracker frontend
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(InvalidInputError, invalid_input_handler)

    # Register route groups
    application.include_router(health_router, tags=["Health"])
    application.include_router(calculators_router, prefix="/api", tags=["Calculators"])
    application.include_router(analytics_router, prefix="/api", tags=["Analytics"])

    return application


app = create_app()
