"""Shared pytest fixtures for the quake feed test suite."""

import json
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def sample_feed_path(data_dir: Path) -> Path:
    """Path to a four-event significant_month feed (M6.2, M5.0, M7.1, M4.4)."""
    return data_dir / "significant_month.geojson"


# ---------------------------------------------------------------------------
# Feed payload fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_feed_bytes(sample_feed_path: Path) -> bytes:
    """Raw bytes of the sample feed, as the HTTP layer would deliver them."""
    return sample_feed_path.read_bytes()


@pytest.fixture()
def sample_feed(sample_feed_bytes: bytes) -> dict[str, Any]:
    """The sample feed parsed into plain JSON objects."""
    return json.loads(sample_feed_bytes)


@pytest.fixture()
def empty_feed_bytes() -> bytes:
    """A valid feed with no events."""
    return json.dumps(
        {
            "type": "FeatureCollection",
            "metadata": {"title": "USGS Significant Earthquakes, Past Month", "count": 0},
            "features": [],
        }
    ).encode()
