"""Compute a time-use report for one day, week or month."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from timeuse_engine import config
from timeuse_engine.adapters import csv_adapter, json_adapter
from timeuse_engine.navigation import Granularity, ReportNavigator
from timeuse_engine.report import build_report

log = logging.getLogger("timeuse_engine")


def _load_records(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse_records(str(path))
    if suffix == ".json":
        return json_adapter.parse_records(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run a time-use report")
    parser.add_argument("--records", required=True, help="Path to CSV/JSON records file")
    parser.add_argument("--categories", help="Path to JSON categories file")
    parser.add_argument("--period", choices=[g.value for g in Granularity], default="day")
    parser.add_argument("--date", help="Day inside the window (YYYY-MM-DD); defaults to today")
    parser.add_argument("--unrecorded-label", default=config.UNRECORDED_LABEL)
    parser.add_argument("--out", help="Also write the report JSON to this path")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        records = _load_records(Path(args.records))
        categories = json_adapter.parse_categories(args.categories) if args.categories else {}
        day = date.fromisoformat(args.date) if args.date else date.today()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    navigator = ReportNavigator.for_records(records, granularity=Granularity(args.period))
    if not navigator.select(day):
        log.warning("%s is outside the recorded range, showing %s instead", day, navigator.anchor)
    window = navigator.window()
    log.info("reporting %d records over %s .. %s", len(records), window.start, window.end)

    report = build_report(records, categories, window, unrecorded_label=args.unrecorded_label)
    print(json.dumps(report, indent=2, ensure_ascii=False))

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Saved report to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
