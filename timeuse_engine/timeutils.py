"""Time conversion and reporting-window helpers.

All engine math runs on integer epoch milliseconds. Conversions from wire
formats and from local calendar dates happen here and nowhere else.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from timeuse_engine.config import WEEK_DAYS
from timeuse_engine.schema import Window


def datetime_to_ms(value: datetime) -> int:
    """Convert a datetime (naive values are local wall-clock) to epoch ms."""

    return int(round(value.timestamp() * 1000))


def ms_to_datetime(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000.0)


def ms_to_date(ms: int) -> date:
    return ms_to_datetime(ms).date()


def firestore_to_ms(value: dict) -> int:
    """Convert a ``{seconds, nanoseconds}`` timestamp to epoch ms."""

    seconds = int(value["seconds"])
    nanoseconds = int(value.get("nanoseconds", 0) or 0)
    return seconds * 1000 + nanoseconds // 1_000_000


def timestamp_to_ms(value) -> int:
    """Accept a Firestore timestamp dict, an ISO-8601 string or a datetime."""

    if isinstance(value, dict):
        return firestore_to_ms(value)
    if isinstance(value, datetime):
        return datetime_to_ms(value)
    if isinstance(value, str):
        text = value.strip()
        # fromisoformat only accepts a "Z" suffix from Python 3.11
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return datetime_to_ms(datetime.fromisoformat(text))
    raise TypeError(f"Unsupported timestamp type {type(value).__name__}")


def local_midnight_ms(day: date) -> int:
    return datetime_to_ms(datetime(day.year, day.month, day.day))


def days_window(first_day: date, last_day: date) -> Window:
    """Window from local midnight of ``first_day`` to the midnight after ``last_day``."""

    return Window(local_midnight_ms(first_day), local_midnight_ms(last_day + timedelta(days=1)))


def day_window(day: date) -> Window:
    return days_window(day, day)


def week_window(end_day: date) -> Window:
    """Rolling seven days ending at ``end_day`` inclusive."""

    return days_window(end_day - timedelta(days=WEEK_DAYS - 1), end_day)


def month_bounds(day: date) -> tuple[date, date]:
    last = calendar.monthrange(day.year, day.month)[1]
    return date(day.year, day.month, 1), date(day.year, day.month, last)


def month_window(day: date) -> Window:
    """Calendar month containing ``day``."""

    first, last = month_bounds(day)
    return days_window(first, last)


def add_months(day: date, months: int) -> date:
    """Shift by whole months, landing on the first of the target month."""

    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def window_days(window: Window) -> list[date]:
    """Local calendar days touched by ``window``."""

    first = ms_to_date(window.start_ms)
    last = ms_to_date(window.end_ms - 1)
    return [first + timedelta(days=offset) for offset in range((last - first).days + 1)]
