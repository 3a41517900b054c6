"""Shared helper functions used by the CLI and the reporter."""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime, timedelta

from quake_feed.core.constants import EVENT_TIME_FORMAT
from quake_feed.core.exceptions import ArgumentParseError

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)

#: Millisecond epoch range that ``datetime`` can represent.
EVENT_TIME_MIN_MS: int = (datetime.min.replace(tzinfo=UTC) - _EPOCH) // _ONE_MS
EVENT_TIME_MAX_MS: int = (datetime.max.replace(tzinfo=UTC) - _EPOCH) // _ONE_MS


def format_event_time(epoch_ms: int) -> str:
    """Format a millisecond epoch timestamp as ``YYYY-MM-DD HH:MM:SS UTC``.

    The sub-second part is truncated, not rounded.

    Args:
        epoch_ms: Milliseconds since the Unix epoch (may be negative).

    Returns:
        The UTC timestamp string.
    """
    moment = _EPOCH + timedelta(milliseconds=epoch_ms)
    return moment.strftime(EVENT_TIME_FORMAT)


_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")
_INFINITY = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)
_NAN = re.compile(r"nan", re.IGNORECASE)


def parse_float(text: str) -> float:
    """Parse *text* strictly as a floating-point literal.

    Accepts decimal and ``0x...p...`` hex notation, ``inf``/``infinity``
    with an optional sign, and ``nan``.  Whitespace, digit underscores,
    and finite values that overflow to infinity are rejected.

    Raises:
        ArgumentParseError: If *text* is not a number in that grammar.
    """
    if _NAN.fullmatch(text):
        return math.nan
    if _INFINITY.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf

    if _DECIMAL.fullmatch(text):
        value = float(text)
    elif _HEX.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError as exc:
            raise ArgumentParseError(text, f"Number out of range {text!r}") from exc
    else:
        raise ArgumentParseError(text, f"Invalid number {text!r}")

    if math.isinf(value):
        raise ArgumentParseError(text, f"Number out of range {text!r}")
    return value
