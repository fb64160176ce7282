"""Ordered collection of tracks and waypoints, exported as one document.

Serializes to a GeoJSON FeatureCollection. The world name is kept in
memory only and never written to the GeoJSON output.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from geoworld.exporters.geojson import dumps, export_geojson
from geoworld.model import GeoFeature


class World:
    """Named, append-only collection of geographic features.

    Not synchronized; a World is meant to have a single owner.
    """

    def __init__(self, name: str, features: Iterable[GeoFeature] = ()) -> None:
        self.name = name
        self.features: list[GeoFeature] = list(features)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[GeoFeature]:
        return iter(self.features)

    def add_feature(self, feature: GeoFeature) -> None:
        """Append a feature after all existing ones.

        Args:
            feature: A Track or Waypoint.
        """
        self.features.append(feature)

    def to_geojson(self) -> dict:
        """Build the FeatureCollection dict.

        An entry that is not a Track or Waypoint is dropped from
        ``features`` and logged; no ``null`` placeholder is kept in its
        position, so the array holds only Track and Waypoint Features.

        Returns:
            Dict with ``type`` and ``features`` keys, features in list order.
        """
        return export_geojson(self)

    def to_json(self, indent: int | None = None) -> str:
        """Return the FeatureCollection as JSON text (compact by default)."""
        return dumps(self.to_geojson(), indent=indent)

    def export(self, format: str = "geojson", indent: int | None = None) -> str:
        """Export the world to a string in the given format.

        Args:
            format: Output format ("geojson" or "gpx").
            indent: JSON indent, only used for "geojson".

        Returns:
            String representation in the requested format.

        Raises:
            ValueError: If the format is not supported.
        """
        if format == "geojson":
            return self.to_json(indent=indent)
        elif format == "gpx":
            from geoworld.exporters.gpx import export_gpx
            return export_gpx(self)
        else:
            raise ValueError(f"Unsupported export format: {format}")
