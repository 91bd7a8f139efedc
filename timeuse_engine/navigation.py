"""Day / week / month window navigation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, Optional

from timeuse_engine.config import EMPTY_RANGE_YEARS, WEEK_DAYS
from timeuse_engine.schema import TimeRecord, Window
from timeuse_engine.timeutils import add_months, day_window, month_bounds, month_window, ms_to_date, week_window


class Granularity(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class DateRange:
    """Inclusive span of days navigation may visit."""

    min_date: date
    max_date: date

    def __contains__(self, day: date) -> bool:
        return self.min_date <= day <= self.max_date

    def clamp(self, day: date) -> date:
        return min(max(day, self.min_date), self.max_date)


def _shift_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:  # Feb 29
        return day.replace(year=day.year + years, day=28)


def date_range_from_records(records: Iterable[TimeRecord], today: Optional[date] = None) -> DateRange:
    """Earliest start day to latest end day over well-formed records."""

    records = [r for r in records if not r.is_malformed]
    if not records:
        today = today or date.today()
        return DateRange(_shift_years(today, -EMPTY_RANGE_YEARS), _shift_years(today, EMPTY_RANGE_YEARS))

    min_ms = min(r.start_ms for r in records)
    max_ms = max(r.end_ms for r in records)
    return DateRange(ms_to_date(min_ms), ms_to_date(max_ms))


def _anchor_for(granularity: Granularity, day: date) -> date:
    if granularity is Granularity.MONTH:
        return day.replace(day=1)
    return day


@dataclass
class ReportNavigator:
    """Tracks the selected reporting window.

    ``anchor`` is the selected day for DAY, the last (inclusive) day of the
    rolling week for WEEK and the first of the month for MONTH. Moves that
    would leave ``date_range`` are ignored.
    """

    granularity: Granularity
    anchor: date
    date_range: DateRange = field(repr=False)

    def __post_init__(self) -> None:
        self.granularity = Granularity(self.granularity)
        self.anchor = _anchor_for(self.granularity, self.anchor)

    @classmethod
    def for_records(
        cls,
        records: Iterable[TimeRecord],
        granularity: Granularity = Granularity.DAY,
        today: Optional[date] = None,
    ) -> "ReportNavigator":
        today = today or date.today()
        date_range = date_range_from_records(records, today=today)
        return cls(Granularity(granularity), date_range.clamp(today), date_range)

    def window(self) -> Window:
        if self.granularity is Granularity.DAY:
            return day_window(self.anchor)
        if self.granularity is Granularity.WEEK:
            return week_window(self.anchor)
        return month_window(self.anchor)

    def days(self) -> tuple[date, date]:
        """First and last day covered by the current window."""

        if self.granularity is Granularity.DAY:
            return self.anchor, self.anchor
        if self.granularity is Granularity.WEEK:
            return self.anchor - timedelta(days=WEEK_DAYS - 1), self.anchor
        return month_bounds(self.anchor)

    def previous(self) -> bool:
        if self.granularity is Granularity.DAY:
            candidate = self.anchor - timedelta(days=1)
            allowed = candidate in self.date_range
        elif self.granularity is Granularity.WEEK:
            candidate = self.anchor - timedelta(days=WEEK_DAYS)
            allowed = candidate >= self.date_range.min_date
        else:
            candidate = add_months(self.anchor, -1)
            allowed = month_bounds(candidate)[1] >= self.date_range.min_date
        return self._move(candidate, allowed)

    def next(self) -> bool:
        if self.granularity is Granularity.DAY:
            candidate = self.anchor + timedelta(days=1)
            allowed = candidate in self.date_range
        elif self.granularity is Granularity.WEEK:
            candidate = self.anchor + timedelta(days=WEEK_DAYS)
            allowed = candidate <= self.date_range.max_date
        else:
            candidate = add_months(self.anchor, 1)
            allowed = candidate <= self.date_range.max_date
        return self._move(candidate, allowed)

    def select(self, day: date) -> bool:
        """Jump to the unit containing ``day`` if it lies within the range."""

        return self._move(_anchor_for(self.granularity, day), day in self.date_range)

    def switch(self, granularity: Granularity, today: Optional[date] = None) -> None:
        self.granularity = Granularity(granularity)
        self.anchor = _anchor_for(self.granularity, self.date_range.clamp(today or date.today()))

    def _move(self, candidate: date, allowed: bool) -> bool:
        if not allowed:
            return False
        self.anchor = candidate
        return True
