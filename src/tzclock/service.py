"""FastAPI service module for the tzclock time API.

This module keeps only the web-facing FastAPI wiring. The transition search
lives in ``transitions.py`` and the offset lookup in ``oracle.py``.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from .api.exceptions import plain_text_http_exception_handler
from .api.routes_time import router as time_router
from .constants import SERVICE_NAME, SERVICE_VERSION
from .errors import TzClockError
from .settings import Settings

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request with its status and duration."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms)"
        )
        return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service configuration; read from the environment when omitted

    Returns:
        Configured FastAPI instance with ``app.state.settings`` populated
    """
    if settings is None:
        settings = Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log the effective configuration on startup."""
        logger.info(
            f"Starting {SERVICE_NAME} (default timezone: {settings.default_timezone}, "
            f"horizon: {settings.horizon})"
        )
        if settings.override_now is not None:
            logger.info(f"Current time overridden to {settings.override_now.isoformat()}")
        yield

    app = FastAPI(title="Timezone Transition Service", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint for container monitoring."""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
        }

    app.include_router(time_router)
    return app


def main() -> None:  # pragma: no cover
    """Run the FastAPI service under uvicorn.

    Invoked via ``python3 -m tzclock.service`` or the ``tzclock`` console
    script. Configuration is handled via ``TZCLOCK_*`` environment variables.
    """
    import sys

    import uvicorn

    from .logging_config import configure_logging, get_uvicorn_log_config

    configure_logging()

    try:
        settings = Settings.from_env()
    except TzClockError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(2)

    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=get_uvicorn_log_config(),
    )


if __name__ == "__main__":
    main()
