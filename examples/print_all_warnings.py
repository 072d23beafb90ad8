"""
Print every DWD warning that is currently active.

Run:
    python examples/print_all_warnings.py
"""

from __future__ import annotations

import logging
import sys

from dwd_alerts import DwdAlertsError, get_warning_list
from dwd_alerts.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging()

    try:
        warning_list = get_warning_list()
    except DwdAlertsError as e:
        logger.error("Could not fetch warnings: %s", e.message)
        return 1

    for warning in warning_list.current():
        end = warning.end.isoformat() if warning.end else "open end"
        print(
            f"[{warning.state_short}] level {warning.level} "
            f"{warning.region_name}: {warning.headline} "
            f"({warning.start.isoformat()} → {end})"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
