"""Day window resolution for appointment listings."""

from datetime import date, datetime

import pytest

from doctor_portal.features.appointments.date_window import day_bounds, parse_day, resolve_window


def test_parse_day_accepts_iso_days():
    assert parse_day("2024-03-11") == date(2024, 3, 11)


@pytest.mark.parametrize("value", ["2024-13-01", "11/03/2024", "tomorrow", ""])
def test_parse_day_rejects_other_formats(value):
    with pytest.raises(ValueError):
        parse_day(value)


def test_day_bounds_cover_whole_days():
    start, end = day_bounds(date(2024, 3, 11), date(2024, 3, 13))

    assert start == datetime(2024, 3, 11, 0, 0, 0, 0)
    assert end == datetime(2024, 3, 13, 23, 59, 59, 999000)


def test_start_date_alone_is_a_single_day():
    assert resolve_window("2024-03-11", None) == (
        datetime(2024, 3, 11, 0, 0),
        datetime(2024, 3, 11, 23, 59, 59, 999000),
    )


def test_end_date_alone_gives_no_window():
    assert resolve_window(None, "2024-03-11") is None
    assert resolve_window(None, None) is None


def test_bad_end_date_raises():
    with pytest.raises(ValueError):
        resolve_window("2024-03-11", "2024-03-xx")
