"""JSON adapter for Firestore-exported records and categories."""

from __future__ import annotations

import json

from timeuse_engine.config import RESERVED_CATEGORY_IDS
from timeuse_engine.schema import Category, TimeRecord
from timeuse_engine.timeutils import timestamp_to_ms

_REQUIRED_RECORD_FIELDS = ("id", "categoryId", "startTime", "endTime")
_REQUIRED_CATEGORY_FIELDS = ("id", "label")


def _load_list(file_path: str) -> list:
    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")
    return payload


def _parse_record(item: dict, index: int) -> TimeRecord:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")
    missing = [field for field in _REQUIRED_RECORD_FIELDS if item.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        start_ms = timestamp_to_ms(item["startTime"])
        end_ms = timestamp_to_ms(item["endTime"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: malformed timestamp") from exc

    duration_raw = item.get("duration")
    duration_seconds = None
    if duration_raw is not None:
        try:
            duration_seconds = float(duration_raw)
        except Exception as exc:  # noqa: BLE001
            raise ValueError(f"Item {index}: invalid duration") from exc

    return TimeRecord(
        id=str(item["id"]).strip(),
        category_id=str(item["categoryId"]).strip(),
        task=str(item.get("task") or "").strip(),
        start_ms=start_ms,
        end_ms=end_ms,
        duration_seconds=duration_seconds,
    )


def _parse_category(item: dict, index: int) -> Category:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")
    missing = [field for field in _REQUIRED_CATEGORY_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    category_id = str(item["id"]).strip()
    if category_id in RESERVED_CATEGORY_IDS:
        raise ValueError(f"Item {index}: category id {category_id!r} is reserved")

    order_raw = item.get("order")
    order = None
    if order_raw is not None:
        try:
            order = int(order_raw)
        except Exception as exc:  # noqa: BLE001
            raise ValueError(f"Item {index}: invalid order") from exc

    label = str(item["label"]).strip()
    return Category(
        id=category_id,
        value=str(item.get("value") or label).strip(),
        label=label,
        icon=str(item.get("icon") or "").strip(),
        color=str(item["color"]).strip() if item.get("color") else None,
        order=order,
    )


def parse_records(file_path: str) -> list[TimeRecord]:
    """Parse a JSON list of time records."""

    return [_parse_record(item, i) for i, item in enumerate(_load_list(file_path), start=1)]


def parse_categories(file_path: str) -> dict[str, Category]:
    """Parse a JSON list of categories into an id-keyed lookup."""

    categories = [_parse_category(item, i) for i, item in enumerate(_load_list(file_path), start=1)]
    return {category.id: category for category in categories}
