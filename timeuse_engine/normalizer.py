"""Interval normalization: raw records to non-overlapping window slots."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from timeuse_engine.config import RESERVED_CATEGORY_IDS, UNKNOWN_CATEGORY_ID, UNKNOWN_ICON, UNKNOWN_LABEL
from timeuse_engine.palette import ColorAssigner
from timeuse_engine.schema import Category, TimeRecord, TimeSlot, Window

log = logging.getLogger(__name__)

UNKNOWN_CATEGORY = Category(
    id=UNKNOWN_CATEGORY_ID,
    value=UNKNOWN_LABEL,
    label=UNKNOWN_LABEL,
    icon=UNKNOWN_ICON,
)


def resolve_category(category_id: str, categories: Mapping[str, Category]) -> Category:
    """Look up a category, falling back to the shared Unknown placeholder.

    Reserved placeholder ids never resolve to a lookup entry.
    """

    if category_id in RESERVED_CATEGORY_IDS:
        return UNKNOWN_CATEGORY
    return categories.get(category_id) or UNKNOWN_CATEGORY


def normalize(
    records: Iterable[TimeRecord],
    window: Window,
    categories: Mapping[str, Category],
) -> list[TimeSlot]:
    """Partition ``window`` into category-tagged, non-overlapping slots.

    Records are visited in ascending start order. The sort is stable, so when
    two records start at the same instant the one given first keeps the
    contested span. Each later record only contributes the part extending
    past the coverage already accepted. Malformed or out-of-window records
    are dropped rather than failing the computation.
    """

    ordered = sorted(records, key=lambda r: r.start_ms)
    colors = ColorAssigner(reserved=categories.values())

    slots: list[TimeSlot] = []
    cursor = window.start_ms
    dropped = 0
    for record in ordered:
        if record.is_malformed:
            log.debug("dropping malformed record %s (%d >= %d)", record.id, record.start_ms, record.end_ms)
            dropped += 1
            continue
        if record.end_ms <= window.start_ms or record.start_ms >= window.end_ms:
            dropped += 1
            continue

        end = min(record.end_ms, window.end_ms)
        if end <= cursor:
            dropped += 1
            continue
        start = max(record.start_ms, cursor)

        category = resolve_category(record.category_id, categories)
        if category is UNKNOWN_CATEGORY:
            log.debug("record %s has unknown category id %r", record.id, record.category_id)

        slots.append(
            TimeSlot(
                category=category,
                color=colors.color_for(category),
                start_ms=start,
                end_ms=end,
                task=record.task,
                record_id=record.id,
            )
        )
        cursor = end

    log.debug("normalized %d records into %d slots (%d dropped)", len(ordered), len(slots), dropped)
    return slots
