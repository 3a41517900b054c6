"""Fetch feed activity — retrieve the GeoJSON feed over HTTP.

Issues a single GET with default ``httpx`` client settings (no custom
timeout, no retries, no auth headers), following redirects to the final
resource.  The response is streamed and handed to the caller inside a
context manager, so the connection is released exactly once whether or
not the caller's processing succeeds.

Any ``httpx.HTTPError`` (DNS failure, refused connection, timeout,
interrupted read, non-2xx status) surfaces as ``FetchError`` chained
to the original cause.
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

import httpx

from quake_feed.core.exceptions import FetchError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def open_feed(url: str) -> Iterator[httpx.Response]:
    """Open a streaming GET request to *url*.

    Usage::

        with open_feed(url) as response:
            body = response.read()

    Yields:
        The streaming ``httpx.Response`` with a 2xx status.

    Raises:
        FetchError: If the request or any read from the response
            fails at the HTTP layer.
    """
    logger.info("fetch_feed started | url=%s", url)
    try:
        with (
            httpx.Client(follow_redirects=True) as client,
            client.stream("GET", url) as response,
        ):
            response.raise_for_status()
            logger.info(
                "fetch_feed connected | url=%s | status=%d",
                url,
                response.status_code,
            )
            yield response
    except httpx.HTTPError as exc:
        msg = f"Failed to fetch earthquake data from {url}: {exc}"
        raise FetchError(msg) from exc

