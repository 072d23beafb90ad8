"""
warning_service.py — DWD warning ingestion pipeline.

Fetches the current warning feed from the Deutscher Wetterdienst and turns it
into a typed, sorted WarningList.

Pipeline
========
    1. FETCH        →  one GET, raw body text                (transport)
    2. UNWRAP       →  strip ``warnWetter.loadWarnings(`` … ``);``  (envelope)
    3. DESERIALIZE  →  strict pydantic validation into RawResponse  (schemas)
    4. CONVERT TIME →  epoch ms → aware UTC datetime
    5. FLATTEN      →  concatenate every region group into one sequence
    6. MAP          →  RawWarning → WeatherWarning
    7. SORT         →  stable, ascending by start (done by WarningList)

Error Handling Strategy
=======================
Each stage raises its own DwdAlertsError subclass and nothing is caught
here:

    TransportError        — network failure or non-2xx status
    ResponseShapeError    — envelope prefix/suffix missing
    DeserializationError  — invalid JSON or schema mismatch
    DateParsingError      — a response or warning timestamp out of range

A single warning with an unrepresentable start or end fails the whole
fetch. Callers never receive a partially built list.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta, timezone
from itertools import chain
from typing import Dict, Iterator, List, Optional

import httpx
from pydantic import ValidationError

from dwd_alerts.alerts.models import WarningList, WeatherWarning
from dwd_alerts.core.errors import DateParsingError, DeserializationError
from dwd_alerts.ingestion.envelope import unwrap_envelope
from dwd_alerts.ingestion.schemas import RawResponse, RawWarning
from dwd_alerts.ingestion.transport import fetch_raw_text

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Shown in DeserializationError messages; the full list stays in ``errors``
_MAX_REPORTED_ERRORS = 5


# ---------------------------------------------------------------------------
# Conversion helpers
# ---------------------------------------------------------------------------

def millis_to_datetime(value: int, field: str = "time") -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Raises DateParsingError if the result falls outside what ``datetime``
    can represent (years 1–9999). Values are never clamped.
    """
    try:
        return _EPOCH + timedelta(milliseconds=value)
    except OverflowError as e:
        raise DateParsingError(value, field=field) from e


def parse_response(payload: str) -> RawResponse:
    """Validate the unwrapped JSON text against the wire schema."""
    try:
        return RawResponse.model_validate_json(payload)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        summary = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in errors[:_MAX_REPORTED_ERRORS]
        )
        raise DeserializationError(summary, errors=errors) from e


def flatten_groups(groups: Dict[str, List[RawWarning]]) -> Iterator[RawWarning]:
    """
    Yield every warning across all region groups.

    Order within a group is preserved. Group order follows the mapping and
    carries no meaning; the group keys themselves are dropped.
    """
    return chain.from_iterable(groups.values())


def to_domain(raw: RawWarning) -> WeatherWarning:
    """Map one wire warning to the domain type, converting its time window."""
    start = millis_to_datetime(raw.start, field="start")
    end = millis_to_datetime(raw.end, field="end") if raw.end is not None else None

    return WeatherWarning(
        state=raw.state,
        category=raw.category,
        level=raw.level,
        start=start,
        end=end,
        region_name=raw.region_name,
        event=raw.event,
        headline=raw.headline,
        instruction=raw.instruction,
        description=raw.description,
        state_short=raw.state_short,
        altitude_start=raw.altitude_start,
        altitude_end=raw.altitude_end,
    )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def build_warning_list(response: RawResponse) -> WarningList:
    """Convert a validated RawResponse into a sorted WarningList."""
    received_at = millis_to_datetime(response.time, field="time")
    warnings = tuple(to_domain(raw) for raw in flatten_groups(response.warnings))

    return WarningList(
        time=received_at,
        warnings=warnings,
        copyright=response.copyright,
    )


def parse_warning_list(text: str) -> WarningList:
    """Run the offline part of the pipeline on a raw response body."""
    payload = unwrap_envelope(text)
    return build_warning_list(parse_response(payload))


def get_warning_list(
    url: Optional[str] = None,
    *,
    client: Optional[httpx.Client] = None,
) -> WarningList:
    """
    Fetch and parse the current DWD warnings.

    This is the PRIMARY entry point of the package.

    Parameters
    ----------
    url : str, optional
        Override the endpoint (e.g. a local mock server).
        Defaults to ``settings.DWD_WARNINGS_URL``.
    client : httpx.Client, optional
        Client to issue the request with; left open after the call.

    Returns
    -------
    WarningList
        Fresh list, sorted by start time.

    Example
    -------
    >>> warning_list = get_warning_list()
    >>> for warning in warning_list.current():
    ...     print(warning.headline)
    """
    start_time = time.perf_counter()

    text = fetch_raw_text(url, client=client)
    logger.debug("Received %d characters", len(text), extra={"body_chars": len(text)})

    warning_list = parse_warning_list(text)

    elapsed = (time.perf_counter() - start_time) * 1000
    logger.info(
        "Fetched %d warnings (%.0fms)", len(warning_list), elapsed,
        extra={"warning_count": len(warning_list), "duration_ms": elapsed},
    )
    return warning_list
