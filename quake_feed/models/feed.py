"""Data model for the USGS GeoJSON summary feed.

A ``FeedEnvelope`` is the decoded top-level document.  Each entry in
its ``features`` array becomes a ``Record`` with nested ``Properties``
and ``Geometry`` value types.

Decoding rules (shared by every ``from_dict``):
- Unknown keys are ignored.
- Missing keys and JSON ``null`` become the zero value.
- Type mismatches raise ``DecodeError`` naming the offending path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quake_feed.core.exceptions import DecodeError
from quake_feed.utils.helpers import EVENT_TIME_MAX_MS, EVENT_TIME_MIN_MS

# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------


def _type_name(value: object) -> str:
    return type(value).__name__


def _to_float(value: object, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{where} must be a number, got {_type_name(value)}"
        raise DecodeError(msg)
    try:
        return float(value)
    except OverflowError as exc:
        msg = f"{where} is out of range for a float"
        raise DecodeError(msg) from exc


def _get_float(data: dict[str, Any], key: str, path: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    return _to_float(value, f"{path}.{key}")


def _get_int(data: dict[str, Any], key: str, path: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{path}.{key} must be an integer, got {value!r}"
        raise DecodeError(msg)
    return value


def _get_str(data: dict[str, Any], key: str, path: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"{path}.{key} must be a string, got {_type_name(value)}"
        raise DecodeError(msg)
    return value


def _get_object(data: dict[str, Any], key: str, path: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"{path}.{key} must be an object, got {_type_name(value)}"
        raise DecodeError(msg)
    return value


def _get_list(data: dict[str, Any], key: str, path: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"{path}.{key} must be an array, got {_type_name(value)}"
        raise DecodeError(msg)
    return value


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FeedMetadata:
    """Feed-level metadata block.

    Attributes:
        generated: Generation time in milliseconds since the epoch.
        url: Canonical feed URL reported by the server.
        title: Feed title (e.g. ``"USGS Significant Earthquakes, Past Month"``).
        status: HTTP status the server recorded for the feed.
        api: Feed API version.
        count: Number of features the server says it included.
    """

    generated: int = 0
    url: str = ""
    title: str = ""
    status: int = 0
    api: str = ""
    count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "metadata") -> FeedMetadata:
        """Decode the ``metadata`` object."""
        return cls(
            generated=_get_int(data, "generated", path),
            url=_get_str(data, "url", path),
            title=_get_str(data, "title", path),
            status=_get_int(data, "status", path),
            api=_get_str(data, "api", path),
            count=_get_int(data, "count", path),
        )


@dataclass(frozen=True, slots=True)
class Properties:
    """Event properties.

    Attributes:
        mag: Magnitude.
        place: Human-readable location (e.g. ``"10 km SW of Town, Region"``).
        time: Event origin time in milliseconds since the epoch.
        updated: Last update time in milliseconds since the epoch.
        tz: Timezone offset from UTC in minutes at the epicenter.
        longitude: Longitude, when the feed supplies it in properties.
        latitude: Latitude, when the feed supplies it in properties.
    """

    mag: float = 0.0
    place: str = ""
    time: int = 0
    updated: int = 0
    tz: int = 0
    longitude: float = 0.0
    latitude: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "properties") -> Properties:
        """Decode a feature's ``properties`` object.

        Raises:
            DecodeError: If ``time`` is outside the range a ``datetime``
                can represent (years 1 to 9999).
        """
        time = _get_int(data, "time", path)
        if not EVENT_TIME_MIN_MS <= time <= EVENT_TIME_MAX_MS:
            msg = f"{path}.time={time} is outside the representable date range"
            raise DecodeError(msg)

        return cls(
            mag=_get_float(data, "mag", path),
            place=_get_str(data, "place", path),
            time=time,
            updated=_get_int(data, "updated", path),
            tz=_get_int(data, "tz", path),
            longitude=_get_float(data, "longitude", path),
            latitude=_get_float(data, "latitude", path),
        )


@dataclass(frozen=True, slots=True)
class Geometry:
    """GeoJSON point geometry.

    Attributes:
        type: Geometry type tag (``"Point"`` for this feed).
        coordinates: ``(longitude, latitude[, depth_km])``.  Always at
            least two elements once decoded.
    """

    type: str = ""
    coordinates: tuple[float, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "geometry") -> Geometry:
        """Decode a feature's ``geometry`` object.

        Raises:
            DecodeError: If ``coordinates`` has fewer than two elements
                or contains a non-number.
        """
        raw = _get_list(data, "coordinates", path)
        if len(raw) < 2:
            msg = f"{path}.coordinates must have at least 2 elements, got {len(raw)}"
            raise DecodeError(msg)

        coordinates = [
            _to_float(value, f"{path}.coordinates[{index}]") for index, value in enumerate(raw)
        ]

        return cls(type=_get_str(data, "type", path), coordinates=tuple(coordinates))

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]


@dataclass(frozen=True, slots=True)
class Record:
    """A single earthquake event (one GeoJSON feature)."""

    type: str
    properties: Properties
    geometry: Geometry

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "features[0]") -> Record:
        """Decode one entry of the ``features`` array."""
        return cls(
            type=_get_str(data, "type", path),
            properties=Properties.from_dict(
                _get_object(data, "properties", path), f"{path}.properties"
            ),
            geometry=Geometry.from_dict(_get_object(data, "geometry", path), f"{path}.geometry"),
        )


@dataclass(frozen=True, slots=True)
class FeedEnvelope:
    """Decoded feed document.

    Attributes:
        type: Top-level type tag (``"FeatureCollection"``).
        metadata: Feed metadata block.
        records: Events in the order the feed lists them.
    """

    type: str = ""
    metadata: FeedMetadata = field(default_factory=FeedMetadata)
    records: tuple[Record, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FeedEnvelope:
        """Decode the top-level feed object.

        Raises:
            DecodeError: If any nested value has an unexpected type.
        """
        features = _get_list(data, "features", "feed")
        records = []
        for index, raw in enumerate(features):
            path = f"features[{index}]"
            if not isinstance(raw, dict):
                msg = f"{path} must be an object, got {_type_name(raw)}"
                raise DecodeError(msg)
            records.append(Record.from_dict(raw, path))

        return cls(
            type=_get_str(data, "type", "feed"),
            metadata=FeedMetadata.from_dict(_get_object(data, "metadata", "feed")),
            records=tuple(records),
        )

    @property
    def record_count(self) -> int:
        return len(self.records)
