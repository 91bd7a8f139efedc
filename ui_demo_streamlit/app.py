"""Streamlit demo UI for timeuse-engine."""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path
from typing import Any

from timeuse_engine.adapters import csv_adapter, json_adapter
from timeuse_engine.aggregator import aggregate
from timeuse_engine.config import UNRECORDED_LABEL
from timeuse_engine.navigation import Granularity, ReportNavigator
from timeuse_engine.normalizer import normalize
from timeuse_engine.summary import clock_segments, daily_breakdown, format_duration, report_summary

DEMO_RECORDS = "examples/sample_records.json"
DEMO_CATEGORIES = "examples/sample_categories.json"


def _parse_records_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse_records(file_path)
    if suffix == ".json":
        return json_adapter.parse_records(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _save_uploaded(uploaded_file) -> str:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        return handle.name


def run_engine(records: list, categories: dict, navigator: ReportNavigator) -> dict[str, Any]:
    """Run all engine steps and return a UI-friendly result payload."""

    window = navigator.window()
    slots = normalize(records, window, categories)
    days, category_ids, matrix = daily_breakdown(slots, window)
    return {
        "window": window,
        "summary": report_summary(slots, window),
        "segments": clock_segments(slots),
        "aggregates": aggregate(slots, window, unrecorded_label=UNRECORDED_LABEL),
        "breakdown": (days, category_ids, matrix),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Time Use Report", layout="wide")
    st.title("Time Use Report")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload records", type=["csv", "json"])
        uploaded_categories = st.file_uploader("Upload categories", type=["json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        period = st.selectbox("Period", options=[g.value for g in Granularity], index=0)
        day = st.date_input("Date", value=date(2025, 1, 15) if use_demo else date.today())

    try:
        if use_demo:
            records = json_adapter.parse_records(DEMO_RECORDS)
            categories = json_adapter.parse_categories(DEMO_CATEGORIES)
        elif uploaded is not None:
            records = _parse_records_from_path(_save_uploaded(uploaded))
            categories = (
                json_adapter.parse_categories(_save_uploaded(uploaded_categories)) if uploaded_categories else {}
            )
        else:
            st.info("Upload a CSV/JSON file or enable 'Load demo dataset'.")
            return
    except ValueError as exc:
        st.error(f"Input error: {exc}")
        return

    navigator = ReportNavigator.for_records(records, granularity=Granularity(period), today=day)
    if not navigator.select(day):
        st.warning(f"{day} is outside the recorded range; showing {navigator.anchor} instead.")

    result = run_engine(records, categories, navigator)
    summary = result["summary"]

    first, last = navigator.days()
    st.subheader(f"{first} – {last}")
    c1, c2, c3 = st.columns(3)
    c1.metric("Recorded", format_duration(summary["recorded_seconds"]))
    c2.metric("Unrecorded", format_duration(summary["unrecorded_seconds"]))
    c3.metric("Recorded %", f"{summary['recorded_pct']:.1f}%")

    st.subheader("By category")
    for agg in result["aggregates"]:
        st.write(f"{agg.icon} **{agg.label}** {format_duration(agg.total_duration_seconds)} ({agg.percentage:.1f}%)")
        st.progress(min(1.0, agg.percentage / 100.0))

    if navigator.granularity is Granularity.DAY:
        st.subheader("Timeline")
        st.table(
            [
                {"time": f"{s['start']} – {s['end']}", "category": s["label"], "task": s["task"]}
                for s in result["segments"]
            ]
        )
    else:
        days, category_ids, matrix = result["breakdown"]
        st.subheader("Hours per day")
        st.bar_chart(
            {category_id: (matrix[:, col] / 3600.0).tolist() for col, category_id in enumerate(category_ids)}
        )
        st.caption(", ".join(str(d) for d in days))


if __name__ == "__main__":
    main()
