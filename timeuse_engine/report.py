"""Full report pipeline: normalize, aggregate, summarize."""

from __future__ import annotations

from typing import Any, Mapping

from timeuse_engine.aggregator import aggregate
from timeuse_engine.normalizer import normalize
from timeuse_engine.schema import Category, TimeRecord, Window
from timeuse_engine.summary import clock_segments, format_duration, report_summary


def build_report(
    records: list[TimeRecord],
    categories: Mapping[str, Category],
    window: Window,
    unrecorded_label: str | None = None,
) -> dict[str, Any]:
    """Run the engine for one window and return a JSON-friendly payload."""

    slots = normalize(records, window, categories)
    aggregates = aggregate(slots, window, unrecorded_label=unrecorded_label)
    summary = report_summary(slots, window)

    return {
        "window": {
            "start": window.start.isoformat(),
            "end": window.end.isoformat(),
            "hours": summary["window_hours"],
        },
        "summary": {
            **summary,
            "recorded": format_duration(summary["recorded_seconds"]),
        },
        "slots": clock_segments(slots),
        "aggregates": [
            {
                "category_id": agg.category_id,
                "label": agg.label,
                "icon": agg.icon,
                "color": agg.color,
                "total_duration_seconds": agg.total_duration_seconds,
                "duration": format_duration(agg.total_duration_seconds),
                "percentage": agg.percentage,
            }
            for agg in aggregates
        ],
    }
