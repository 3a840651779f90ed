"""Tests for the pure Patch Tuesday calculations."""

from datetime import date, timedelta

import pytest

from patch_logic import (
    TUESDAY,
    Clock,
    days_away,
    format_date,
    format_days_away,
    format_days_until,
    make_date,
    next_month,
    next_patch_tuesdays,
    patch_tuesday,
    sunday_weekday,
)


@pytest.mark.parametrize("year", range(1990, 2061))
def test_patch_tuesday_is_second_tuesday(year):
    for month in range(12):
        pt = patch_tuesday(year, month)
        assert pt.weekday() == TUESDAY
        assert 8 <= pt.day <= 14
        assert (pt.year, pt.month) == (year, month + 1)


def test_january_2025():
    assert sunday_weekday(date(2025, 1, 1)) == 3
    assert patch_tuesday(2025, 0) == date(2025, 1, 14)


@pytest.mark.parametrize("year, month, expected", [
    (2024, 9, date(2024, 10, 8)),    # October 1st is a Tuesday
    (2024, 11, date(2024, 12, 10)),
    (2026, 8, date(2026, 9, 8)),     # September 1st is a Tuesday
    (2026, 10, date(2026, 11, 10)),
    (2025, 5, date(2025, 6, 10)),    # June 1st is a Sunday
    (2024, 1, date(2024, 2, 13)),    # February 1st is a Thursday
])
def test_known_patch_tuesdays(year, month, expected):
    assert patch_tuesday(year, month) == expected


def test_month_rollover():
    assert patch_tuesday(2024, 12) == patch_tuesday(2025, 0)
    assert patch_tuesday(2025, -1) == patch_tuesday(2024, 11)


def test_make_date_rollover():
    assert make_date(2025, 0, 32) == date(2025, 2, 1)
    assert make_date(2024, 12, 1) == date(2025, 1, 1)
    assert make_date(2025, 1, 29) == date(2025, 3, 1)


def test_next_month_wraps_year():
    assert next_month(2025, 11) == (2026, 0)
    assert next_month(2025, 3) == (2025, 4)


def test_clock_frozen_and_system():
    frozen = Clock(frozen=date(2025, 3, 1))
    assert frozen.today() == date(2025, 3, 1)
    assert Clock().today() == date.today()


@pytest.mark.parametrize("today", [
    date(2025, 1, 1),
    date(2025, 1, 14),
    date(2025, 1, 15),
    date(2025, 12, 9),
    date(2025, 12, 31),
    date(2028, 2, 29),
])
@pytest.mark.parametrize("count", [1, 3, 12, 25])
def test_next_patch_tuesdays_properties(today, count):
    dates = next_patch_tuesdays(count, Clock(frozen=today))
    assert len(dates) == count
    assert dates[0] >= today
    for earlier, later in zip(dates, dates[1:]):
        assert earlier < later
        assert next_month(earlier.year, earlier.month - 1) == (later.year, later.month - 1)


def test_patch_tuesday_itself_counts_as_upcoming():
    dates = next_patch_tuesdays(2, Clock(frozen=date(2025, 1, 14)))
    assert dates == [date(2025, 1, 14), date(2025, 2, 11)]


def test_next_patch_tuesdays_skips_passed_month():
    dates = next_patch_tuesdays(1, Clock(frozen=date(2025, 12, 10)))
    assert dates == [date(2026, 1, 13)]


def test_next_patch_tuesdays_rejects_non_positive_count():
    with pytest.raises(ValueError):
        next_patch_tuesdays(0)


def test_days_away():
    today = date(2025, 3, 9)  # US DST starts
    clock = Clock(frozen=today)
    assert days_away(today, clock) == 0
    assert days_away(today + timedelta(days=1), clock) == 1
    assert days_away(today - timedelta(days=1), clock) == -1
    assert days_away(date(2025, 11, 2), clock) == 238


def test_format_date():
    assert format_date(date(2025, 1, 14)) == "Tue, Jan 14, 2025"
    assert format_date(date(2026, 11, 10)) == "Tue, Nov 10, 2026"
    assert format_date(date(2024, 9, 1)) == "Sun, Sep 1, 2024"


@pytest.mark.parametrize("days, text", [
    (0, "Today"),
    (1, "1 day"),
    (-1, "1 day ago"),
    (5, "5 days"),
    (-5, "5 days ago"),
])
def test_format_days_away(days, text):
    assert format_days_away(days) == text


@pytest.mark.parametrize("days, text", [
    (0, "Today"),
    (1, "1 day away"),
    (-1, "1 day ago"),
    (30, "30 days away"),
    (-30, "30 days ago"),
])
def test_format_days_until(days, text):
    assert format_days_until(days) == text
