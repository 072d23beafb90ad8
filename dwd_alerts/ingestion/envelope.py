"""
DWD serves its warnings as JSONP: the JSON document is wrapped in a call to
``warnWetter.loadWarnings``. This module strips that wrapper.
"""

from __future__ import annotations

from dwd_alerts.core.errors import ResponseShapeError

ENVELOPE_PREFIX = "warnWetter.loadWarnings("
ENVELOPE_SUFFIX = ");"


def unwrap_envelope(text: str) -> str:
    """
    Return the JSON payload between the envelope prefix and suffix.

    Raises ResponseShapeError if either literal is missing. No attempt is
    made to recover a payload from a differently wrapped body.
    """
    if not text.startswith(ENVELOPE_PREFIX):
        raise ResponseShapeError("prefix", expected=ENVELOPE_PREFIX, received=text[:40])

    body = text[len(ENVELOPE_PREFIX):]
    if not body.endswith(ENVELOPE_SUFFIX):
        raise ResponseShapeError("suffix", expected=ENVELOPE_SUFFIX, received=body[-40:])

    return body[:-len(ENVELOPE_SUFFIX)]
