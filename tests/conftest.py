"""Shared payload builders for the DWD warning tests."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import pytest

PREFIX = "warnWetter.loadWarnings("
SUFFIX = ");"

# 2023-11-14T22:13:20Z
RESPONSE_TIME_MS = 1_700_000_000_000


def _raw_warning(**overrides: Any) -> Dict[str, Any]:
    warning = {
        "state": "Bavaria",
        "type": 1,
        "level": 2,
        "start": 1_700_000_100_000,
        "end": None,
        "regionName": "Munich",
        "event": "Storm",
        "headline": "Storm Warning",
        "instruction": "Stay inside",
        "description": "Severe storm",
        "stateShort": "BY",
        "altitudeStart": None,
        "altitudeEnd": None,
    }
    warning.update(overrides)
    return warning


def _payload(
    groups: Optional[Dict[str, List[Dict[str, Any]]]] = None,
    time: Any = RESPONSE_TIME_MS,
    copyright: str = "DWD",
) -> Dict[str, Any]:
    return {
        "time": time,
        "warnings": groups if groups is not None else {"MUNICH": [_raw_warning()]},
        "vorabInformation": {},
        "copyright": copyright,
    }


def _wrap(payload: Any) -> str:
    body = payload if isinstance(payload, str) else json.dumps(payload)
    return f"{PREFIX}{body}{SUFFIX}"


@pytest.fixture
def raw_warning() -> Callable[..., Dict[str, Any]]:
    """Factory for one wire-format alert dict (camelCase keys)."""
    return _raw_warning


@pytest.fixture
def payload() -> Callable[..., Dict[str, Any]]:
    """Factory for a full wire-format response dict."""
    return _payload


@pytest.fixture
def wrap() -> Callable[[Any], str]:
    """Wrap a payload dict (or raw JSON text) in the JSONP envelope."""
    return _wrap


@pytest.fixture
def munich_body() -> str:
    """The single-warning Munich response, envelope included."""
    return _wrap(_payload())
