"""
dwd_alerts — client for the Deutscher Wetterdienst weather warnings feed.

    from dwd_alerts import get_warning_list

    for warning in get_warning_list().current():
        print(warning.headline)
"""

from .alerts.models import WarningList, WeatherWarning
from .core.errors import (
    DateParsingError,
    DeserializationError,
    DwdAlertsError,
    ResponseShapeError,
    TransportError,
)
from .ingestion.warning_service import get_warning_list, parse_warning_list

__all__ = [
    "WarningList",
    "WeatherWarning",
    "DwdAlertsError",
    "TransportError",
    "ResponseShapeError",
    "DeserializationError",
    "DateParsingError",
    "get_warning_list",
    "parse_warning_list",
]
