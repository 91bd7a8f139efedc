"""Core data schema for time records, windows and report outputs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def _local(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000.0)


@dataclass(frozen=True)
class Category:
    """Read-only category as stored by the persistence layer."""

    id: str
    value: str
    label: str
    icon: str
    color: Optional[str] = None
    order: Optional[int] = None


@dataclass(frozen=True)
class TimeRecord:
    """Raw record; instants are epoch milliseconds."""

    id: str
    category_id: str
    task: str
    start_ms: int
    end_ms: int
    duration_seconds: Optional[float] = None

    @property
    def is_malformed(self) -> bool:
        return self.end_ms <= self.start_ms


@dataclass(frozen=True)
class Window:
    """Half-open reporting interval ``[start_ms, end_ms)``."""

    start_ms: int
    end_ms: int

    def __post_init__(self) -> None:
        if self.start_ms >= self.end_ms:
            raise ValueError(f"Window start {self.start_ms} must be before end {self.end_ms}")

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms

    @property
    def duration_seconds(self) -> float:
        return self.duration_ms / 1000.0

    @property
    def start(self) -> datetime:
        return _local(self.start_ms)

    @property
    def end(self) -> datetime:
        return _local(self.end_ms)


@dataclass(frozen=True)
class TimeSlot:
    """Non-overlapping, window-clipped piece of a record."""

    category: Category
    color: str
    start_ms: int
    end_ms: int
    task: str = ""
    record_id: str = ""

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms

    @property
    def duration_seconds(self) -> float:
        return self.duration_ms / 1000.0

    @property
    def duration_minutes(self) -> float:
        return self.duration_ms / 60000.0

    @property
    def start(self) -> datetime:
        return _local(self.start_ms)

    @property
    def end(self) -> datetime:
        return _local(self.end_ms)


@dataclass(frozen=True)
class CategoryAggregate:
    """Per-category total over one window."""

    category_id: str
    label: str
    icon: str
    color: str
    total_duration_ms: int
    percentage: float

    @property
    def total_duration_seconds(self) -> float:
        return self.total_duration_ms / 1000.0
