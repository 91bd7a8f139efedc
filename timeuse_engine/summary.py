"""Report summaries for chart and list rendering."""

from __future__ import annotations

from datetime import date

import numpy as np

from timeuse_engine.schema import TimeSlot, Window
from timeuse_engine.timeutils import local_midnight_ms, window_days


def format_duration(seconds: float) -> str:
    """Render seconds as ``"2h 5m"`` or ``"45m"``."""

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def report_summary(slots: list[TimeSlot], window: Window) -> dict:
    """Recorded vs unrecorded totals for the window."""

    recorded_ms = sum(slot.duration_ms for slot in slots)
    return {
        "recorded_seconds": recorded_ms / 1000.0,
        "unrecorded_seconds": (window.duration_ms - recorded_ms) / 1000.0,
        "recorded_pct": recorded_ms / window.duration_ms * 100.0,
        "window_hours": window.duration_ms / 3_600_000.0,
        "slot_count": len(slots),
    }


def clock_segments(slots: list[TimeSlot]) -> list[dict]:
    """Slots as labelled ``HH:MM`` arcs for the 24-hour clock chart."""

    return [
        {
            "label": f"{slot.category.icon} {slot.category.label}",
            "start": slot.start.strftime("%H:%M"),
            "end": slot.end.strftime("%H:%M"),
            "color": slot.color,
            "task": slot.task,
            "duration_minutes": slot.duration_minutes,
        }
        for slot in slots
    ]


def daily_breakdown(slots: list[TimeSlot], window: Window) -> tuple[list[date], list[str], np.ndarray]:
    """Seconds per (day, category) with slots split at local midnight.

    Categories are ordered by first appearance in ``slots``.
    """

    days = window_days(window)
    category_ids: list[str] = []
    for slot in slots:
        if slot.category.id not in category_ids:
            category_ids.append(slot.category.id)

    # day boundaries, clipped to the window
    edges = np.array([local_midnight_ms(day) for day in days] + [window.end_ms], dtype=np.int64)
    edges[0] = window.start_ms
    matrix = np.zeros((len(days), len(category_ids)), dtype=float)
    if not slots:
        return days, category_ids, matrix

    starts = np.array([slot.start_ms for slot in slots], dtype=np.int64)
    ends = np.array([slot.end_ms for slot in slots], dtype=np.int64)
    columns = np.array([category_ids.index(slot.category.id) for slot in slots])

    for row in range(len(days)):
        overlap = np.minimum(ends, edges[row + 1]) - np.maximum(starts, edges[row])
        overlap = np.clip(overlap, 0, None)
        np.add.at(matrix[row], columns, overlap / 1000.0)

    return days, category_ids, matrix
