"""Data models for the earthquake feed.

- FeedEnvelope: Decoded top-level feed document
- FeedMetadata: Feed-level metadata block
- Record: A single earthquake event
- Properties / Geometry: Nested value types of a Record
"""

from quake_feed.models.feed import (
    FeedEnvelope,
    FeedMetadata,
    Geometry,
    Properties,
    Record,
)

__all__ = [
    "FeedEnvelope",
    "FeedMetadata",
    "Geometry",
    "Properties",
    "Record",
]
