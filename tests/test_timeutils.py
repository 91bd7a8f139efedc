from datetime import date, datetime

import pytest

from timeuse_engine.timeutils import (
    add_months,
    datetime_to_ms,
    firestore_to_ms,
    month_window,
    timestamp_to_ms,
    week_window,
    window_days,
)


def test_firestore_timestamp_conversion():
    assert firestore_to_ms({"seconds": 1736899200, "nanoseconds": 500_000_000}) == 1736899200500
    assert firestore_to_ms({"seconds": 1736899200}) == 1736899200000


def test_timestamp_to_ms_accepts_iso_and_datetime():
    moment = datetime(2025, 1, 14, 9, 30)
    assert timestamp_to_ms("2025-01-14T09:30:00") == datetime_to_ms(moment)
    assert timestamp_to_ms(moment) == datetime_to_ms(moment)
    with pytest.raises(TypeError):
        timestamp_to_ms(12345)


def test_week_window_is_seven_days_ending_inclusive():
    window = week_window(date(2025, 1, 3))
    assert window.start == datetime(2024, 12, 28)
    assert window.end == datetime(2025, 1, 4)
    assert len(window_days(window)) == 7


def test_month_window_handles_year_end():
    window = month_window(date(2024, 12, 31))
    assert window.start == datetime(2024, 12, 1)
    assert window.end == datetime(2025, 1, 1)
    assert window_days(window)[-1] == date(2024, 12, 31)


def test_add_months():
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 1)
    assert add_months(date(2025, 1, 10), -1) == date(2024, 12, 1)
    assert add_months(date(2025, 11, 1), 14) == date(2027, 1, 1)


def test_timestamp_to_ms_accepts_utc_z_suffix():
    assert timestamp_to_ms("2025-01-14T09:00:00Z") == 1736845200000
    assert timestamp_to_ms("2025-01-14T09:00:00.250Z") == 1736845200250
    assert timestamp_to_ms("2025-01-14T09:00:00z") == timestamp_to_ms("2025-01-14T09:00:00+00:00")
