from datetime import datetime, timezone

import pytest
from dateutil import tz

import src.crawler.dates as dates
from src.crawler.dates import normalize_date

BERLIN_SUMMER = tz.tzoffset("CEST", 2 * 3600)


@pytest.fixture()
def berlin_local(monkeypatch):
    monkeypatch.setattr(dates, "local_zone", lambda: BERLIN_SUMMER)


def test_zoned_offset_is_preserved():
    dt = normalize_date("2021-05-01T12:00:00+02:00")
    assert dt == datetime(2021, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert dt.utcoffset().total_seconds() == 0


def test_zone_less_19_chars_uses_local_zone(berlin_local):
    assert normalize_date("2021-05-01T12:00:00") == datetime(2021, 5, 1, 10, 0, tzinfo=timezone.utc)


def test_20_char_z_suffix_is_read_as_local_time(berlin_local):
    raw = "2021-05-01T12:00:00Z"
    assert len(raw) == 20
    # the trailing Z is dropped, so 12:00 is Berlin time, not UTC
    assert normalize_date(raw) == datetime(2021, 5, 1, 10, 0, tzinfo=timezone.utc)


def test_longer_z_suffix_stays_utc(berlin_local):
    assert normalize_date("2021-05-01T12:00:00.000Z") == datetime(2021, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_region_id_suffix():
    dt = normalize_date("2021-01-15T08:30:00+01:00[Europe/Berlin]")
    assert dt == datetime(2021, 1, 15, 7, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", [None, "", "   ", "not-a-date", "2021-05-01", "2021-05-01 12:00:00",
                                 "2021-05-01T12:00:00+02:00[Mars/Olympus]", "2021-05-01T24:00:00",
                                 "2021-05-01T12:00:00+02", "20210501T120000+0200",
                                 "2021-05-01T24:00:00+02:00"])
def test_unparseable_values_are_none(raw):
    assert normalize_date(raw) is None


def test_failure_is_logged(caplog):
    with caplog.at_level("WARNING"):
        assert normalize_date("not-a-date") is None
    assert "not-a-date" in caplog.text
