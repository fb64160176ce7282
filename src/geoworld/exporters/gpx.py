"""Write a World as a GPX 1.1 document.

Waypoints map to <wpt>, tracks to <trk> with one <trkseg> per
TrackSegment, and the world name to <metadata><name>. GPX carries
latitude and longitude as separate attributes, taken from each
Point or Waypoint field rather than from a GeoJSON position array.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from loguru import logger

from geoworld.model import Point, Track, Waypoint

if TYPE_CHECKING:
    from geoworld.world import World


def export_gpx(world: World) -> str:
    """Export a World to a GPX 1.1 XML string.

    Waypoints become <wpt> elements and are written first, as the GPX
    schema requires. Tracks become <trk> elements with one <trkseg> per
    TrackSegment. Anything else is skipped.

    Args:
        world: The World to export.

    Returns:
        GPX XML string.
    """
    gpx = ET.Element("gpx")
    gpx.set("version", "1.1")
    gpx.set("creator", "geoworld")
    gpx.set("xmlns", "http://www.topografix.com/GPX/1/1")

    if world.name:
        metadata = ET.SubElement(gpx, "metadata")
        _add_text(metadata, "name", world.name)

    waypoints = [f for f in world.features if isinstance(f, Waypoint)]
    tracks = [f for f in world.features if isinstance(f, Track)]
    skipped = len(world.features) - len(waypoints) - len(tracks)
    if skipped:
        logger.debug(f"GPX export of {world.name!r}: skipped {skipped} features")

    for waypoint in waypoints:
        _write_waypoint(gpx, waypoint)
    for track in tracks:
        _write_track(gpx, track)

    return ET.tostring(gpx, encoding="unicode", xml_declaration=True)


def _write_waypoint(parent: ET.Element, waypoint: Waypoint) -> None:
    """Write a Waypoint as a <wpt> element."""
    wpt = ET.SubElement(parent, "wpt")
    _set_position(wpt, waypoint.latitude, waypoint.longitude, waypoint.elevation)

    if waypoint.name is not None:
        _add_text(wpt, "name", waypoint.name)
    if waypoint.type is not None:
        _add_text(wpt, "sym", waypoint.type)


def _write_track(parent: ET.Element, track: Track) -> None:
    """Write a Track as a <trk> element, one <trkseg> per segment."""
    trk = ET.SubElement(parent, "trk")

    if track.name is not None:
        _add_text(trk, "name", track.name)

    for segment in track.segments:
        trkseg = ET.SubElement(trk, "trkseg")
        for point in segment.coordinates:
            _write_track_point(trkseg, point)


def _write_track_point(parent: ET.Element, point: Point) -> None:
    trkpt = ET.SubElement(parent, "trkpt")
    _set_position(trkpt, point.latitude, point.longitude, point.elevation)


def _set_position(elem: ET.Element, lat: float, lon: float, ele: float | None) -> None:
    elem.set("lat", str(lat))
    elem.set("lon", str(lon))
    # <ele> must precede <name>/<sym> in GPX, so it is written here
    if ele is not None:
        _add_text(elem, "ele", str(ele))


def _add_text(parent: ET.Element, tag: str, text: str) -> ET.Element:
    elem = ET.SubElement(parent, tag)
    elem.text = text
    return elem
