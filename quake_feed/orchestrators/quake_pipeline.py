"""Earthquake report pipeline — fetch, decode, report.

Control flows strictly Fetcher → Decoder → Reporter.  Decoding happens
inside the scoped response so the connection is released exactly once
whatever the decode outcome.  Nothing is written to *out* until the
feed has decoded successfully, so a fatal error never leaves a partial
report behind.

Errors are not handled here: ``FetchError`` and ``DecodeError``
propagate to the single top-level handler in ``quake_feed.cli``.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from quake_feed.activities.decode_feed import decode_feed
from quake_feed.activities.fetch_feed import open_feed
from quake_feed.activities.report_quakes import format_header, format_summary, report_quakes
from quake_feed.core.config import FeedConfig

if TYPE_CHECKING:
    from quake_feed.models.feed import FeedEnvelope

logger = logging.getLogger(__name__)


def load_feed(config: FeedConfig) -> FeedEnvelope:
    """Fetch and decode the configured feed.

    Raises:
        FetchError: If the feed cannot be retrieved.
        DecodeError: If the body is not a valid feed document.
    """
    with open_feed(config.feed_url) as response:
        return decode_feed(response.read())


def run_pipeline(
    minimum_magnitude: float,
    *,
    config: FeedConfig | None = None,
    out: TextIO | None = None,
) -> int:
    """Run the pipeline once and return the number of reported events.

    Args:
        minimum_magnitude: Events must have a magnitude strictly
            greater than this value to be reported.
        config: Feed configuration.  Defaults to ``FeedConfig()``.
        out: Destination for the report.  Defaults to ``sys.stdout``.

    Raises:
        ConfigValidationError: If *config* is invalid.
        FetchError: If the feed cannot be retrieved.
        DecodeError: If the body is not a valid feed document.
    """
    config = (config or FeedConfig()).validate()
    out = out or sys.stdout

    envelope = load_feed(config)

    out.write(format_header(minimum_magnitude, config.feed_period))
    total = report_quakes(envelope, minimum_magnitude, out)
    out.write(format_summary(total))

    logger.info(
        "quake_pipeline completed | feed_records=%d | reported=%d | minimum_magnitude=%s",
        envelope.record_count,
        total,
        minimum_magnitude,
    )
    return total
