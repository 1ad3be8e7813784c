"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ecoplates.api.admin import router as admin_router
from ecoplates.api.auth import router as auth_router
from ecoplates.api.dashboard import router as dashboard_router
from ecoplates.api.donor import router as donor_router
from ecoplates.api.ngo import router as ngo_router
from ecoplates.api.notifications import router as notifications_router
from ecoplates.app_logging import configure_logging
from ecoplates.config import parse_allowed_origins
from ecoplates.containers import AppContainer
from ecoplates.domain.errors import (
    AuthError,
    DonationNotEditableError,
    DonationNotFoundError,
    DonationUnavailableError,
    EcoPlatesError,
    NotificationNotFoundError,
    PermissionDeniedError,
    ProfileNotFoundError,
    ValidationError,
)
from ecoplates.services.presenters import serialize_stats

_ERROR_STATUS: list[tuple[type[EcoPlatesError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (ProfileNotFoundError, status.HTTP_404_NOT_FOUND),
    (DonationNotFoundError, status.HTTP_404_NOT_FOUND),
    (NotificationNotFoundError, status.HTTP_404_NOT_FOUND),
    (DonationNotEditableError, status.HTTP_409_CONFLICT),
    (DonationUnavailableError, status.HTTP_409_CONFLICT),
]


def status_for_error(exc: EcoPlatesError) -> int:
    """Map a domain error to an HTTP status code."""
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting EcoPlates API: environment=%s", container.settings.environment
        )
        yield
        logger.info("Stopping EcoPlates API")

    app = FastAPI(title="EcoPlates", lifespan=lifespan)
    app.state.container = container

    allowed_origins = parse_allowed_origins(container.settings.cors_allowed_origins)
    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(EcoPlatesError)
    async def handle_domain_error(
        request: Request, exc: EcoPlatesError
    ) -> JSONResponse:
        status_code = status_for_error(exc)
        logger.info(
            "Request rejected: path=%s status=%s error=%s",
            request.url.path,
            status_code,
            type(exc).__name__,
        )
        return JSONResponse(status_code=status_code, content={"detail": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error: path=%s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Something went wrong"},
        )

    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(donor_router)
    app.include_router(ngo_router)
    app.include_router(admin_router)
    app.include_router(notifications_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/stats")
    async def stats(request: Request) -> dict[str, int]:
        """Landing page counters."""
        state_container: AppContainer = request.app.state.container
        return serialize_stats(state_container.stats_service.get_landing_stats())

    return app
