"""Geographic feature model: points, track segments, tracks and waypoints.

All positions follow GeoJSON convention: [lng, lat] or [lng, lat, ele].
Every feature knows how to render itself as a GeoJSON Feature dict.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence

from loguru import logger

from geoworld.exporters.geojson import dumps


@dataclass(frozen=True)
class Point:
    """A single geographic position. Ranges are not checked."""

    longitude: float
    latitude: float
    elevation: float | None = None

    def to_array(self) -> list[float]:
        """Return the GeoJSON position for this point."""
        if self.elevation is not None:
            return [self.longitude, self.latitude, self.elevation]
        return [self.longitude, self.latitude]


@dataclass(frozen=True)
class TrackSegment:
    """An ordered run of points forming one line of a track."""

    coordinates: tuple[Point, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", tuple(self.coordinates))

    def to_coordinates(self) -> list[list[float]]:
        return [point.to_array() for point in self.coordinates]


class GeoFeature(ABC):
    """Anything a World can hold and serialize as a GeoJSON Feature."""

    @abstractmethod
    def to_geojson(self) -> dict:
        """Return the GeoJSON Feature as a plain dict."""

    def to_json(self, indent: int | None = None) -> str:
        """Return the GeoJSON Feature as JSON text."""
        return dumps(self.to_geojson(), indent=indent)


@dataclass(frozen=True)
class Track(GeoFeature):
    """A named collection of track segments.

    Attributes:
        segments: TrackSegments in draw order. Raw point sequences passed
            at construction are wrapped into TrackSegments.
        name: Optional title, emitted as ``properties.title``.
    """

    segments: tuple[TrackSegment, ...]
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", _wrap_segments(self.segments))
        logger.debug(f"Track {self.name!r}: {len(self.segments)} segments")

    def to_geojson(self) -> dict:
        # properties: {} when unnamed
        return {
            "type": "Feature",
            "properties": {"title": self.name} if self.name is not None else {},
            "geometry": {
                "type": "MultiLineString",
                "coordinates": [seg.to_coordinates() for seg in self.segments],
            },
        }


@dataclass(frozen=True)
class Waypoint(GeoFeature):
    """A single point of interest with an optional name and icon type.

    Attributes:
        longitude: Position longitude.
        latitude: Position latitude.
        elevation: Optional elevation.
        name: Optional title, emitted as ``properties.title``.
        type: Optional symbol name, emitted as ``properties.icon``.
    """

    longitude: float
    latitude: float
    elevation: float | None = None
    name: str | None = None
    type: str | None = None

    def to_array(self) -> list[float]:
        return Point(self.longitude, self.latitude, self.elevation).to_array()

    def to_geojson(self) -> dict:
        feature: dict = {
            "type": "Feature",
            "geometry": {
                "type": "Point",
                "coordinates": self.to_array(),
            },
        }

        # properties only when name or type is set
        if self.name is not None or self.type is not None:
            properties = {}
            if self.name is not None:
                properties["title"] = self.name
            if self.type is not None:
                properties["icon"] = self.type
            feature["properties"] = properties

        return feature


def _wrap_segments(
    segments: Iterable[TrackSegment | Sequence[Point]],
) -> tuple[TrackSegment, ...]:
    """Wrap raw point sequences into TrackSegments, keeping existing ones."""
    wrapped = []
    for seg in segments:
        if isinstance(seg, TrackSegment):
            wrapped.append(seg)
        else:
            wrapped.append(TrackSegment(tuple(seg)))
    return tuple(wrapped)
