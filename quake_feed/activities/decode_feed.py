"""Decode feed activity — parse the feed body into a ``FeedEnvelope``.

Malformed JSON, a top-level value that is not an object, and any
field-level type mismatch all raise ``DecodeError``.  There is no
partial result: a feed either decodes completely or not at all.

The JSON parser is strict: the non-standard ``NaN``, ``Infinity`` and
``-Infinity`` literals and numbers too large for a float are rejected.
"""

from __future__ import annotations

import json
import logging
import math

from quake_feed.core.exceptions import DecodeError
from quake_feed.models.feed import FeedEnvelope

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> float:
    msg = f"invalid JSON literal {name!r}"
    raise ValueError(msg)


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        msg = f"number out of range: {text}"
        raise ValueError(msg)
    return value


def decode_feed(body: bytes | str) -> FeedEnvelope:
    """Decode a GeoJSON feed body.

    Args:
        body: Raw response body (UTF-8 bytes or text).

    Returns:
        The decoded, immutable ``FeedEnvelope``.

    Raises:
        DecodeError: If *body* is not valid JSON or does not match
            the feed schema.
    """
    try:
        data = json.loads(
            body,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        msg = f"Failed to decode earthquake data: {exc}"
        raise DecodeError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Failed to decode earthquake data: expected a JSON object, got {type(data).__name__}"
        raise DecodeError(msg)

    try:
        envelope = FeedEnvelope.from_dict(data)
    except DecodeError as exc:
        msg = f"Failed to decode earthquake data: {exc.message}"
        raise DecodeError(msg) from exc

    logger.debug(
        "decode_feed completed | records=%d | title=%s",
        envelope.record_count,
        envelope.metadata.title,
    )
    return envelope
