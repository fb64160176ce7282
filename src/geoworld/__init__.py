"""Geographic feature model with GeoJSON export.

Points group into track segments, segments into tracks; tracks and
waypoints gather into a World that serializes to a FeatureCollection.
"""

from geoworld.model import GeoFeature, Point, Track, TrackSegment, Waypoint
from geoworld.world import World

__all__ = ["GeoFeature", "Point", "Track", "TrackSegment", "Waypoint", "World"]
