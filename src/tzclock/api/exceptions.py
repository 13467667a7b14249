"""Exception handling utilities for API routes.

Provides error factories, a decorator that maps domain errors onto HTTP
errors, and the handler that renders every HTTP error as plain text.
"""

import functools
import inspect
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar, cast

from fastapi import HTTPException, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import InvalidHorizonError, InvalidTimezoneError

logger = logging.getLogger(__name__)

# TypeVar for wrapping route functions
F = TypeVar("F", bound=Callable[..., Any])


# ============================================================================
# HTTP Error Factory Functions
# ============================================================================


def invalid_timezone() -> HTTPException:
    """Create a standardized 400 error for an unknown timezone identifier.

    Returns:
        HTTPException with 400 status
    """
    return HTTPException(status_code=400, detail="invalid timezone")


def invalid_request(message: str) -> HTTPException:
    """Create a standardized 422 error for invalid query parameters.

    Args:
        message: Detailed validation error message

    Returns:
        HTTPException with 422 status and formatted message
    """
    return HTTPException(status_code=422, detail=f"Invalid request: {message}")


def encoding_failed() -> HTTPException:
    """Create a standardized 500 error for a response that could not be encoded.

    Returns:
        HTTPException with 500 status
    """
    return HTTPException(status_code=500, detail="failed to encode response")


# ============================================================================
# Error Handling Decorators
# ============================================================================


@contextmanager
def _translate_errors(name: str) -> Iterator[None]:
    """Map domain errors raised inside a route onto HTTP errors."""
    try:
        yield
    except HTTPException:
        raise
    except InvalidTimezoneError as e:
        logger.info(f"Rejected timezone {e.timezone!r} in {name}")
        raise invalid_timezone() from e
    except InvalidHorizonError as e:
        raise invalid_request(e.message) from e
    except OverflowError as e:
        raise invalid_request("instant out of range") from e
    except (TypeError, ValueError) as e:
        logger.error(f"Encoding error in {name}: {e}", exc_info=True)
        raise encoding_failed() from e


def handle_time_errors(func: F) -> F:
    """Decorator for consistent error handling across time endpoints.

    - HTTPException: pass through (already formatted for response)
    - InvalidTimezoneError: 400
    - InvalidHorizonError, OverflowError: 422
    - TypeError/ValueError raised while encoding: 500

    Works on both ``async def`` routes and plain ``def`` routes; the latter
    keep running in FastAPI's threadpool.

    Usage:
        @router.get("/time")
        @handle_time_errors
        async def get_time(request: Request):
            ...
    """
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _translate_errors(func.__name__):
                return await func(*args, **kwargs)

        return cast(F, async_wrapper)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with _translate_errors(func.__name__):
            return func(*args, **kwargs)

    return cast(F, wrapper)


async def plain_text_http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render HTTP errors as a short ``text/plain`` message."""
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )
