"""Time and transition API routes."""

import json
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from fastapi import APIRouter, Request
from fastapi.responses import Response
from pydantic import BaseModel, Field

from ..clock import take_snapshot
from ..constants import DEFAULT_SCAN_WINDOW, MAX_SCAN_WINDOWS, TIMEZONE_HEADER
from ..oracle import offset_at
from ..settings import Settings
from ..transitions import find_transitions
from ..utils.time import parse_instant, to_unix_millis
from .exceptions import handle_time_errors, invalid_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["time"])


# ============================================================================
# Request/Response Models
# ============================================================================


class TransitionModel(BaseModel):
    """A single offset change"""

    instant: datetime = Field(..., description="First instant (UTC) at which the new offset applies")
    instant_ms: int = Field(..., description="Same instant in Unix milliseconds")
    offset: int = Field(..., description="UTC offset in seconds from this instant on")


class TransitionsResponse(BaseModel):
    """Offset changes found for a zone within a horizon"""

    timezone: str = Field(..., description="IANA timezone identifier searched")
    start: datetime = Field(..., description="Search start (UTC)")
    start_ms: int = Field(..., description="Search start in Unix milliseconds")
    offset: int = Field(..., description="UTC offset in seconds at the search start")
    horizon_seconds: int = Field(..., description="Length of the searched interval")
    transitions: List[TransitionModel] = Field(default_factory=list)


def _settings(request: Request) -> Settings:
    return request.app.state.settings


# ============================================================================
# Endpoints
# ============================================================================


@router.get("/time")
@handle_time_errors
async def get_time(request: Request) -> Response:
    """Return ``[now_ms, offset_s, next_transition_ms, next_offset_s]``.

    The zone comes from the ``X-Timezone`` header and defaults to the
    configured default timezone. Transition fields are ``null`` when the
    offset does not change within the configured horizon.
    """
    settings = _settings(request)
    timezone = request.headers.get(TIMEZONE_HEADER) or settings.default_timezone

    snapshot = take_snapshot(timezone, settings.current_instant(), settings.horizon)
    body = json.dumps(snapshot.as_list())
    return Response(content=body, media_type="application/json")


@router.get("/api/transitions", response_model=TransitionsResponse)
@handle_time_errors
def get_transitions(
    request: Request,
    tz: Optional[str] = None,
    start: Optional[str] = None,
    horizon_seconds: Optional[int] = None,
    window_seconds: int = int(DEFAULT_SCAN_WINDOW.total_seconds()),
) -> TransitionsResponse:
    """List every offset change for ``tz`` between ``start`` and the horizon end.

    Runs in FastAPI's threadpool, off the event loop.
    """
    settings = _settings(request)
    timezone = tz or settings.default_timezone

    if start is None:
        start_instant = settings.current_instant()
    else:
        try:
            start_instant = parse_instant(start)
        except ValueError as exc:
            raise invalid_request(f"start must be an ISO 8601 timestamp, got {start!r}") from exc

    horizon = settings.horizon
    if horizon_seconds is not None:
        horizon = timedelta(seconds=horizon_seconds)

    if window_seconds > 0 and horizon.total_seconds() / window_seconds > MAX_SCAN_WINDOWS:
        raise invalid_request(f"horizon spans more than {MAX_SCAN_WINDOWS} windows")

    found = find_transitions(
        timezone,
        start_instant,
        horizon,
        window=timedelta(seconds=window_seconds),
    )
    logger.debug(f"{len(found)} transition(s) for {timezone} from {start_instant.isoformat()}")

    return TransitionsResponse(
        timezone=timezone,
        start=start_instant,
        start_ms=to_unix_millis(start_instant),
        offset=offset_at(timezone, start_instant),
        horizon_seconds=int(horizon.total_seconds()),
        transitions=[
            TransitionModel(
                instant=item.instant,
                instant_ms=to_unix_millis(item.instant),
                offset=item.new_offset,
            )
            for item in found
        ],
    )
