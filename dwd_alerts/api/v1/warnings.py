"""
FastAPI route: DWD Warnings — read-only view of the current warning feed.

Each request performs one fresh fetch from DWD; nothing is cached between
requests. Upstream failures are turned into 502 responses by the handlers in
``dwd_alerts.core.errors``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from dwd_alerts.alerts.models import WarningList, WeatherWarning
from dwd_alerts.ingestion.warning_service import get_warning_list

router = APIRouter(prefix="/api/v1/warnings", tags=["warnings"])


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class WarningOut(BaseModel):
    state: str
    state_short: str
    region_name: str
    category: int
    level: int
    event: str
    headline: str
    instruction: str
    description: str
    start: datetime
    end: Optional[datetime] = None
    altitude_start: Optional[int] = None
    altitude_end: Optional[int] = None
    is_current: bool


class WarningListOut(BaseModel):
    time: datetime
    copyright: str
    count: int = Field(..., description="Number of warnings after filtering")
    warnings: List[WarningOut]


def _to_out(warning: WeatherWarning, now: datetime) -> WarningOut:
    return WarningOut(
        state=warning.state,
        state_short=warning.state_short,
        region_name=warning.region_name,
        category=warning.category,
        level=warning.level,
        event=warning.event,
        headline=warning.headline,
        instruction=warning.instruction,
        description=warning.description,
        start=warning.start,
        end=warning.end,
        altitude_start=warning.altitude_start,
        altitude_end=warning.altitude_end,
        is_current=warning.is_current(now),
    )


def _select(
    warning_list: WarningList,
    now: datetime,
    current_only: bool,
    state_short: Optional[str],
    min_level: int,
) -> List[WeatherWarning]:
    selected = warning_list.current(now) if current_only else warning_list.warnings
    if state_short:
        wanted = state_short.upper()
        selected = [w for w in selected if w.state_short.upper() == wanted]
    return [w for w in selected if w.level >= min_level]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get(
    "",
    response_model=WarningListOut,
    summary="Current DWD warnings",
    description=(
        "Fetches the DWD warning feed and returns every warning ordered by "
        "start time, optionally filtered."
    ),
)
def list_warnings(
    current_only: bool = Query(False, description="Only warnings that have not ended"),
    state_short: Optional[str] = Query(None, description="State code, e.g. 'BY'"),
    min_level: int = Query(0, ge=0, le=255, description="Minimum severity level"),
):
    """
    **Flow:**
    1. Fetch and parse the feed (one upstream request)
    2. Apply filters, keeping start-time order
    3. Annotate each warning with `is_current`
    """
    warning_list = get_warning_list()
    now = datetime.now(timezone.utc)

    selected = _select(warning_list, now, current_only, state_short, min_level)

    return WarningListOut(
        time=warning_list.time,
        copyright=warning_list.copyright,
        count=len(selected),
        warnings=[_to_out(w, now) for w in selected],
    )
