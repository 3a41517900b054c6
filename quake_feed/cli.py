"""Command-line entry point.

Usage::

    quake-feed [minimumMagnitude]
    python -m quake_feed [minimumMagnitude]

The optional positional argument is the magnitude threshold.  It falls
back to ``0`` with a logged warning when it is not a number.

This is the single top-level error handler: pipeline errors are logged
as one diagnostic line on stderr and mapped to exit status ``1``.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from quake_feed.core.constants import DEFAULT_MINIMUM_MAGNITUDE
from quake_feed.core.exceptions import ArgumentParseError, PipelineError
from quake_feed.orchestrators.quake_pipeline import run_pipeline
from quake_feed.utils.helpers import parse_float

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("quake_feed.cli")

EXIT_OK = 0
EXIT_FAILURE = 1

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stderr, keeping stdout for the report."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def parse_minimum_magnitude(argv: Sequence[str]) -> float:
    """Return the magnitude threshold from the first positional argument.

    Args:
        argv: Arguments excluding the program name.  Arguments after
            the first are ignored.

    Returns:
        The parsed threshold, or ``0.0`` if absent or unparsable.
    """
    if not argv:
        return DEFAULT_MINIMUM_MAGNITUDE

    try:
        return parse_float(argv[0])
    except ArgumentParseError as exc:
        logger.warning(
            "Invalid magnitude provided, using default of %g | argument=%r",
            DEFAULT_MINIMUM_MAGNITUDE,
            exc.argument,
        )
        return DEFAULT_MINIMUM_MAGNITUDE


def main(argv: Sequence[str] | None = None) -> int:
    """Run the report and return the process exit status."""
    configure_logging()
    args = sys.argv[1:] if argv is None else argv

    minimum_magnitude = parse_minimum_magnitude(args)
    try:
        run_pipeline(minimum_magnitude)
    except PipelineError as exc:
        logger.error(
            "%s | category=%s | stage=%s | code=%s | retryable=%s",
            exc.message,
            exc.category,
            exc.stage,
            exc.code,
            exc.retryable,
        )
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
