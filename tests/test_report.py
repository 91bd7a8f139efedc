import json
import sys
from datetime import date
from pathlib import Path

from timeuse_engine.adapters.json_adapter import parse_categories, parse_records
from timeuse_engine.config import UNRECORDED_CATEGORY_ID
from timeuse_engine.report import build_report
from timeuse_engine.timeutils import day_window

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "scripts"))

from run_report import main  # noqa: E402

EXAMPLES = Path(__file__).resolve().parents[1] / "examples"


def test_build_report_on_sample_day():
    records = parse_records(str(EXAMPLES / "sample_records.json"))
    categories = parse_categories(str(EXAMPLES / "sample_categories.json"))
    report = build_report(records, categories, day_window(date(2025, 1, 15)), unrecorded_label="Unrecorded")

    labels = [agg["label"] for agg in report["aggregates"]]
    assert labels == ["Work", "Sleep", "Unknown", "Exercise", "Unrecorded"]
    assert report["aggregates"][0]["duration"] == "8h 0m"
    assert report["summary"]["slot_count"] == 4
    assert round(sum(agg["percentage"] for agg in report["aggregates"]), 9) == 100.0
    assert report["slots"][0]["start"] == "00:00"


def test_cli_writes_report(tmp_path, capsys):
    out = tmp_path / "report.json"
    code = main(
        [
            "--records",
            str(EXAMPLES / "sample_records.json"),
            "--categories",
            str(EXAMPLES / "sample_categories.json"),
            "--period",
            "week",
            "--date",
            "2025-01-15",
            "--out",
            str(out),
        ]
    )
    assert code == 0
    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["window"]["start"].startswith("2025-01-09")
    assert report["aggregates"][-1]["category_id"] == UNRECORDED_CATEGORY_ID
    assert "Saved report" in capsys.readouterr().out


def test_cli_reports_bad_input(tmp_path, capsys):
    path = tmp_path / "records.json"
    path.write_text("{}", encoding="utf-8")
    assert main(["--records", str(path)]) == 2
    assert "error:" in capsys.readouterr().err
