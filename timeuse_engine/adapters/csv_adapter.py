"""CSV adapter for time records."""

from __future__ import annotations

import csv

from timeuse_engine.schema import TimeRecord
from timeuse_engine.timeutils import timestamp_to_ms

_REQUIRED_FIELDS = ("id", "category_id", "start_time", "end_time")


def _parse_row(row: dict, row_number: int) -> TimeRecord:
    missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        start_ms = timestamp_to_ms(row["start_time"])
        end_ms = timestamp_to_ms(row["end_time"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: malformed timestamp") from exc

    duration_raw = row.get("duration")
    duration_seconds = None
    if duration_raw not in (None, ""):
        try:
            duration_seconds = float(duration_raw)
        except Exception as exc:  # noqa: BLE001
            raise ValueError(f"Row {row_number}: invalid duration") from exc

    task_raw = row.get("task")
    return TimeRecord(
        id=row["id"].strip(),
        category_id=row["category_id"].strip(),
        task=task_raw.strip() if task_raw else "",
        start_ms=start_ms,
        end_ms=end_ms,
        duration_seconds=duration_seconds,
    )


def parse_records(file_path: str) -> list[TimeRecord]:
    """Parse CSV file into a list of time records."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        records: list[TimeRecord] = []
        for row_number, row in enumerate(reader, start=2):
            records.append(_parse_row(row, row_number))
        return records
