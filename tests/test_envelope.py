"""
test_envelope.py — Tests for stripping the JSONP wrapper.

Run with:
    pytest tests/test_envelope.py -v
"""

from __future__ import annotations

import pytest

from dwd_alerts.core.errors import ResponseShapeError
from dwd_alerts.ingestion import warning_service
from dwd_alerts.ingestion.envelope import (
    ENVELOPE_PREFIX,
    ENVELOPE_SUFFIX,
    unwrap_envelope,
)


class TestUnwrapEnvelope:

    def test_returns_payload_between_prefix_and_suffix(self):
        assert unwrap_envelope('warnWetter.loadWarnings({"a": 1});') == '{"a": 1}'

    def test_empty_payload(self):
        assert unwrap_envelope(ENVELOPE_PREFIX + ENVELOPE_SUFFIX) == ""

    def test_inner_parentheses_untouched(self):
        text = 'warnWetter.loadWarnings({"headline": "Sturm (Orkan);"});'
        assert unwrap_envelope(text) == '{"headline": "Sturm (Orkan);"}'

    def test_missing_prefix(self):
        with pytest.raises(ResponseShapeError) as exc_info:
            unwrap_envelope('{"time": 1});')
        assert exc_info.value.details["missing"] == "prefix"
        assert exc_info.value.error_code == "RESPONSE_SHAPE_ERROR"

    def test_missing_suffix(self):
        with pytest.raises(ResponseShapeError) as exc_info:
            unwrap_envelope('warnWetter.loadWarnings({"time": 1})')
        assert exc_info.value.details["missing"] == "suffix"

    def test_trailing_newline_is_rejected(self):
        with pytest.raises(ResponseShapeError):
            unwrap_envelope('warnWetter.loadWarnings({});\n')

    def test_renamed_callback_is_rejected(self):
        with pytest.raises(ResponseShapeError):
            unwrap_envelope('warnWetter.loadWarningsV2({});')

    def test_html_error_page_is_rejected(self):
        with pytest.raises(ResponseShapeError):
            unwrap_envelope("<html><body>Service Unavailable</body></html>")


class TestShapeErrorStopsPipeline:

    def test_no_json_parse_attempted(self, monkeypatch):
        def _fail(payload):
            raise AssertionError("parse_response must not be called")

        monkeypatch.setattr(warning_service, "parse_response", _fail)

        with pytest.raises(ResponseShapeError):
            warning_service.parse_warning_list('loadWarnings({"time": 1});')
