"""Report activity — filter events by magnitude and render text blocks.

Selection is a strict comparison: an event whose magnitude equals the
threshold is *not* reported.  Events keep the order the feed lists
them in.

Block layout::

    Epicenter: 10 km SW of Town, Region
    Magnitude: 5.3
    Time: 2023-11-14 22:13:20 UTC
    Longitude: -122.4194
    Latitude: 37.7749
    -------------------------------------------------------------------
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from quake_feed.core.constants import DEFAULT_FEED_PERIOD, SEPARATOR
from quake_feed.utils.helpers import format_event_time

if TYPE_CHECKING:
    from collections.abc import Iterator

    from quake_feed.models.feed import FeedEnvelope, Record


def select_quakes(envelope: FeedEnvelope, minimum_magnitude: float) -> Iterator[Record]:
    """Yield records with ``mag > minimum_magnitude``, in feed order."""
    for record in envelope.records:
        if record.properties.mag > minimum_magnitude:
            yield record


def format_quake(record: Record) -> str:
    """Render one event block, including its trailing separator line."""
    return (
        f"Epicenter: {record.properties.place}\n"
        f"Magnitude: {record.properties.mag:.1f}\n"
        f"Time: {format_event_time(record.properties.time)}\n"
        f"Longitude: {record.geometry.longitude:.4f}\n"
        f"Latitude: {record.geometry.latitude:.4f}\n"
        f"{SEPARATOR}\n"
    )


def format_header(minimum_magnitude: float, period: str = DEFAULT_FEED_PERIOD) -> str:
    """Render the threshold banner framed by separator lines."""
    return (
        f"{SEPARATOR}\n"
        f"Earthquake(s) with magnitude {minimum_magnitude:.1f} or higher "
        f"in the last {period}:\n"
        f"{SEPARATOR}\n"
    )


def format_summary(count: int) -> str:
    """Render the closing total line."""
    return f"Total number of Earthquakes: {count}\n"


def report_quakes(envelope: FeedEnvelope, minimum_magnitude: float, out: TextIO) -> int:
    """Write a block for every selected event to *out*.

    Returns:
        Number of events written.
    """
    count = 0
    for record in select_quakes(envelope, minimum_magnitude):
        out.write(format_quake(record))
        count += 1
    return count
