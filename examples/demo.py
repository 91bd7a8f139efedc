"""Demo script for timeuse-engine."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from timeuse_engine.adapters.json_adapter import parse_categories, parse_records
from timeuse_engine.navigation import Granularity, ReportNavigator
from timeuse_engine.report import build_report
from timeuse_engine.summary import format_duration

_HERE = Path(__file__).resolve().parent


def main() -> None:
    records = parse_records(str(_HERE / "sample_records.json"))
    categories = parse_categories(str(_HERE / "sample_categories.json"))
    navigator = ReportNavigator.for_records(records, today=date(2025, 1, 15))

    for granularity in Granularity:
        navigator.switch(granularity, today=date(2025, 1, 15))
        report = build_report(records, categories, navigator.window(), unrecorded_label="Unrecorded")
        print(f"== {granularity.value}: {report['window']['start']} -> {report['window']['end']}")
        for agg in report["aggregates"]:
            print(f"  {agg['icon']} {agg['label']:<12} {format_duration(agg['total_duration_seconds']):>8} {agg['percentage']:5.1f}%")


if __name__ == "__main__":
    main()
