"""Build the GeoJSON FeatureCollection for a World and render it as text.

Each Track or Waypoint supplies its own Feature dict; this module gathers
them in world order and owns the JSON text format shared by features and
worlds (compact unless an indent is requested).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from geoworld.world import World

# Compact output: no whitespace after separators
_COMPACT = (",", ":")


def export_geojson(world: World) -> dict:
    """Collect a World's features into a FeatureCollection dict.

    Entries that are not a Track or Waypoint are left out of ``features``
    altogether (no ``null`` placeholder) and logged as warnings. The world
    name is not written.

    Args:
        world: The World to export.

    Returns:
        Dict with ``type`` and ``features`` keys, features in world order.
    """
    from geoworld.model import GeoFeature

    features = []
    for idx, feature in enumerate(world.features):
        if not isinstance(feature, GeoFeature):
            logger.warning(
                f"World {world.name!r}: skipping unsupported feature #{idx} "
                f"({type(feature).__name__})"
            )
            continue
        features.append(feature.to_geojson())

    logger.debug(f"World {world.name!r}: serialized {len(features)} features")
    return {
        "type": "FeatureCollection",
        "features": features,
    }


def dumps(data: dict, indent: int | None = None) -> str:
    """Serialize a Feature or FeatureCollection dict to text.

    Args:
        data: Feature or FeatureCollection dict.
        indent: Pretty-print indent. None produces compact single-line text.

    Returns:
        JSON string.
    """
    if indent is None:
        return json.dumps(data, separators=_COMPACT)
    return json.dumps(data, indent=indent)
