"""
Pydantic schemas for the DWD warnings wire format.

The payload inside the ``warnWetter.loadWarnings(...);`` envelope looks like:

    {
        "time": 1700000000000,
        "warnings": {
            "<region group>": [
                {
                    "state": "Bayern", "type": 1, "level": 2,
                    "start": 1700000100000, "end": null,
                    "regionName": "Stadt München", "event": "STURMBÖEN",
                    "headline": "...", "instruction": "...",
                    "description": "...", "stateShort": "BY",
                    "altitudeStart": null, "altitudeEnd": null
                }
            ]
        },
        "vorabInformation": {},
        "copyright": "..."
    }

Validation is strict: a string where an integer is expected is an error,
not something to coerce. Unknown keys are ignored.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        frozen=True,
    )


class RawWarning(_WireModel):
    """One alert object exactly as DWD sends it."""
    state: str
    category: int = Field(..., alias="type", ge=0, le=255)
    level: int = Field(..., ge=0, le=255)
    start: int = Field(..., description="Epoch milliseconds")
    end: Optional[int] = Field(default=None, description="Epoch milliseconds")
    region_name: str
    event: str
    headline: str
    instruction: str
    description: str
    state_short: str
    altitude_start: Optional[int] = None
    altitude_end: Optional[int] = None


class RawResponse(_WireModel):
    """Top-level payload. Warnings are grouped by an opaque region key."""
    time: int = Field(..., description="Epoch milliseconds")
    warnings: Dict[str, List[RawWarning]]
    vorab_information: Dict[str, Any]
    copyright: str
