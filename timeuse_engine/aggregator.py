"""Per-category aggregation of normalized slots."""

from __future__ import annotations

from timeuse_engine.config import UNRECORDED_CATEGORY_ID, UNRECORDED_COLOR, UNRECORDED_ICON
from timeuse_engine.schema import CategoryAggregate, TimeSlot, Window


def _pct(part_ms: int, window: Window) -> float:
    return part_ms / window.duration_ms * 100.0


def aggregate(
    slots: list[TimeSlot],
    window: Window,
    unrecorded_label: str | None = None,
) -> list[CategoryAggregate]:
    """Sum slot durations per category, longest first.

    Ties are ordered by category id. When ``unrecorded_label`` is given, the
    uncovered remainder of the window is appended as a synthetic aggregate so
    that all totals add up to the window duration.
    """

    totals: dict[str, int] = {}
    first_seen: dict[str, TimeSlot] = {}
    for slot in slots:
        key = slot.category.id
        totals[key] = totals.get(key, 0) + slot.duration_ms
        first_seen.setdefault(key, slot)

    result = []
    for category_id, total_ms in totals.items():
        slot = first_seen[category_id]
        result.append(
            CategoryAggregate(
                category_id=category_id,
                label=slot.category.label,
                icon=slot.category.icon,
                color=slot.category.color or slot.color,
                total_duration_ms=total_ms,
                percentage=_pct(total_ms, window),
            )
        )
    result.sort(key=lambda agg: (-agg.total_duration_ms, agg.category_id))

    if unrecorded_label is not None:
        remainder = window.duration_ms - sum(totals.values())
        if remainder > 0:
            result.append(
                CategoryAggregate(
                    category_id=UNRECORDED_CATEGORY_ID,
                    label=unrecorded_label,
                    icon=UNRECORDED_ICON,
                    color=UNRECORDED_COLOR,
                    total_duration_ms=remainder,
                    percentage=_pct(remainder, window),
                )
            )

    return result
