"""
test_models.py — Tests for WeatherWarning and WarningList.

Run with:
    pytest tests/test_models.py -v
"""

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from dwd_alerts.alerts.models import WarningList, WeatherWarning

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _make_warning(
    start: datetime = NOW - timedelta(hours=1),
    end=None,
    headline: str = "Amtliche WARNUNG vor FROST",
    level: int = 1,
) -> WeatherWarning:
    return WeatherWarning(
        state="Hessen",
        category=0,
        level=level,
        start=start,
        end=end,
        region_name="Stadt Frankfurt",
        event="FROST",
        headline=headline,
        instruction="",
        description="Es tritt leichter Frost um -3 °C auf.",
        state_short="HE",
    )


class TestIsCurrent:

    def test_no_end_is_current(self):
        assert _make_warning(end=None).is_current(NOW) is True

    def test_future_end_is_current(self):
        assert _make_warning(end=NOW + timedelta(minutes=1)).is_current(NOW) is True

    def test_past_end_is_not_current(self):
        assert _make_warning(end=NOW - timedelta(minutes=1)).is_current(NOW) is False

    def test_end_exactly_now_is_not_current(self):
        assert _make_warning(end=NOW).is_current(NOW) is False

    def test_defaults_to_wall_clock(self):
        future = datetime.now(timezone.utc) + timedelta(days=1)
        past = datetime.now(timezone.utc) - timedelta(days=1)
        assert _make_warning(end=future).is_current() is True
        assert _make_warning(end=past).is_current() is False

    def test_no_end_current_without_clock(self):
        assert _make_warning(end=None).is_current() is True


class TestWeatherWarning:

    def test_frozen(self):
        warning = _make_warning()
        with pytest.raises(dataclasses.FrozenInstanceError):
            warning.level = 4

    def test_altitudes_default_to_none(self):
        warning = _make_warning()
        assert warning.altitude_start is None
        assert warning.altitude_end is None

    def test_to_dict_iso_timestamps(self):
        warning = _make_warning(start=NOW, end=NOW + timedelta(hours=2))
        data = warning.to_dict()
        assert data["start"] == "2024-03-01T12:00:00+00:00"
        assert data["end"] == "2024-03-01T14:00:00+00:00"
        assert data["state_short"] == "HE"

    def test_to_dict_open_end(self):
        assert _make_warning(end=None).to_dict()["end"] is None


class TestWarningList:

    def _list(self, *warnings: WeatherWarning) -> WarningList:
        return WarningList(time=NOW, warnings=warnings, copyright="DWD")

    def test_sorted_on_construction(self):
        late = _make_warning(start=NOW + timedelta(hours=2), headline="late")
        early = _make_warning(start=NOW - timedelta(hours=2), headline="early")
        middle = _make_warning(start=NOW, headline="middle")

        warning_list = self._list(late, early, middle)

        assert [w.headline for w in warning_list] == ["early", "middle", "late"]

    def test_accepts_list_input(self):
        warning_list = WarningList(time=NOW, warnings=[_make_warning()], copyright="DWD")
        assert isinstance(warning_list.warnings, tuple)

    def test_iterable_more_than_once(self):
        warning_list = self._list(_make_warning(), _make_warning())
        assert list(warning_list) == list(warning_list)
        assert len(list(warning_list)) == 2

    def test_len(self):
        assert len(self._list()) == 0
        assert len(self._list(_make_warning())) == 1

    def test_current_filters_expired(self):
        active = _make_warning(end=NOW + timedelta(hours=1), headline="active")
        open_end = _make_warning(end=None, headline="open")
        expired = _make_warning(end=NOW - timedelta(hours=1), headline="expired")

        warning_list = self._list(active, open_end, expired)

        assert {w.headline for w in warning_list.current(NOW)} == {"active", "open"}

    def test_frozen(self):
        warning_list = self._list()
        with pytest.raises(dataclasses.FrozenInstanceError):
            warning_list.copyright = "other"
