"""Central configuration for the time-use report engine."""

import os

# ── Palette ────────────────────────────────────────────────────────────
# Fallback colors for categories stored without one.
PRESET_COLORS = (
    "#3b82f6",  # blue
    "#ef4444",  # red
    "#10b981",  # green
    "#f59e0b",  # amber
    "#8b5cf6",  # purple
    "#06b6d4",  # cyan
    "#84cc16",  # lime
    "#f97316",  # orange
    "#ec4899",  # pink
    "#6b7280",  # gray
)

# ── Placeholder categories ─────────────────────────────────────────────
# Firestore reserves document ids matching __.*__, so stored categories never
# collide with these.
UNKNOWN_CATEGORY_ID = "__unknown__"
UNKNOWN_LABEL = "Unknown"
UNKNOWN_ICON = "📋"

UNRECORDED_CATEGORY_ID = "__unrecorded__"
UNRECORDED_LABEL = "Unrecorded"
UNRECORDED_ICON = "⏰"
UNRECORDED_COLOR = "#e5e7eb"

RESERVED_CATEGORY_IDS = frozenset({UNKNOWN_CATEGORY_ID, UNRECORDED_CATEGORY_ID})

# ── Navigation ─────────────────────────────────────────────────────────
WEEK_DAYS = 7
EMPTY_RANGE_YEARS = 1  # +/- around today when there are no records

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("TIMEUSE_LOG_LEVEL", "WARNING").upper()
