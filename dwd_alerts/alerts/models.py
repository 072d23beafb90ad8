"""
models.py — Domain model for DWD weather warnings.

Defines:
    • WeatherWarning — one hazard notice with severity, region and time window
    • WarningList    — all warnings of one fetch, ordered by start time

Both types are immutable value objects. A WarningList is built once from a
single upstream response and never updated in place; fetching again produces
a new list.

═══════════════════════════════════════════════════════════════════════════
ACTIVE WARNINGS
═══════════════════════════════════════════════════════════════════════════

A warning is current when it has no end time (indefinitely active) or when
its end time lies strictly after the moment of evaluation:

    end is None          → current
    end  > now           → current
    end <= now           → expired

The clock is read on every call; nothing caches "now".
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from operator import attrgetter
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Tuple

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class WeatherWarning:
    """
    A single DWD warning.

    Timestamps are timezone-aware UTC datetimes. ``category`` is the wire
    ``type`` code and ``level`` the severity level, both small integers
    passed through from the source.
    """
    state: str
    category: int
    level: int
    start: datetime
    end: Optional[datetime]
    region_name: str
    event: str
    headline: str
    instruction: str
    description: str
    state_short: str
    altitude_start: Optional[int] = None
    altitude_end: Optional[int] = None

    def is_current(self, now: Optional[datetime] = None) -> bool:
        """True if the warning has no end or ends strictly after ``now``."""
        if self.end is None:
            return True
        if now is None:
            now = datetime.now(timezone.utc)
        return self.end > now

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["start"] = self.start.isoformat()
        data["end"] = self.end.isoformat() if self.end else None
        return data


@dataclass(frozen=True)
class WarningList:
    """
    Warnings received in one response, plus the response time and copyright.

    ``warnings`` is sorted ascending by start time on construction (stable,
    so warnings with equal start keep their input order). Iterating the list
    yields the warnings in that order and can be repeated.
    """
    time: datetime
    warnings: Tuple[WeatherWarning, ...]
    copyright: str

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.warnings, key=attrgetter("start")))
        object.__setattr__(self, "warnings", ordered)

    def __iter__(self) -> Iterator[WeatherWarning]:
        return iter(self.warnings)

    def __len__(self) -> int:
        return len(self.warnings)

    def current(self, now: Optional[datetime] = None) -> Tuple[WeatherWarning, ...]:
        """Warnings that are still active at ``now`` (wall clock by default)."""
        return tuple(w for w in self.warnings if w.is_current(now))

    @classmethod
    def get_new(
        cls,
        url: Optional[str] = None,
        *,
        client: Optional[httpx.Client] = None,
    ) -> "WarningList":
        """Fetch a fresh list from DWD. See ``get_warning_list``."""
        from dwd_alerts.ingestion.warning_service import get_warning_list

        return get_warning_list(url, client=client)
