"""Shared feed and report constants — single source of truth."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Feed endpoint
# ---------------------------------------------------------------------------

SIGNIFICANT_MONTH_URL: str = (
    "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/significant_month.geojson"
)
"""USGS summary feed of significant earthquakes in the past 30 days."""

DEFAULT_FEED_PERIOD: str = "30 days"
"""Time window covered by the default feed, as worded in the report header."""

# ---------------------------------------------------------------------------
# Report layout
# ---------------------------------------------------------------------------

SEPARATOR: str = "-" * 67

EVENT_TIME_FORMAT: str = "%Y-%m-%d %H:%M:%S %Z"
"""``strftime`` format for event times; always rendered in UTC."""

DEFAULT_MINIMUM_MAGNITUDE: float = 0.0
