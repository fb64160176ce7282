"""Tests for the GPX exporter: waypoints, multi-segment tracks, metadata."""

import xml.etree.ElementTree as ET

import pytest

from geoworld import Point, Track, Waypoint, World
from geoworld.exporters.gpx import export_gpx

NS = "{http://www.topografix.com/GPX/1/1}"


@pytest.fixture
def gpx_root(world):
    return ET.fromstring(export_gpx(world))


class TestGPXExporter:
    """Export World to GPX 1.1 XML."""

    def test_export_produces_valid_xml(self, gpx_root):
        assert gpx_root.tag == f"{NS}gpx"
        assert gpx_root.get("version") == "1.1"

    def test_world_name_in_metadata(self, gpx_root):
        assert gpx_root.find(f"{NS}metadata/{NS}name").text == "My Data"

    def test_waypoint(self, gpx_root):
        wpts = gpx_root.findall(f"{NS}wpt")
        assert len(wpts) == 1
        wpt = wpts[0]
        assert float(wpt.get("lat")) == pytest.approx(45.5)
        assert float(wpt.get("lon")) == pytest.approx(-121.5)
        assert wpt.find(f"{NS}ele").text == "30"
        assert wpt.find(f"{NS}name").text == "home"
        assert wpt.find(f"{NS}sym").text == "flag"

    def test_track_segments(self, gpx_root):
        trk = gpx_root.find(f"{NS}trk")
        assert trk.find(f"{NS}name").text == "track 1"
        segs = trk.findall(f"{NS}trkseg")
        assert [len(s.findall(f"{NS}trkpt")) for s in segs] == [3, 2]
        first = segs[0].find(f"{NS}trkpt")
        assert first.get("lat") == "45"
        assert first.get("lon") == "-122"
        assert first.find(f"{NS}ele") is None

    def test_waypoints_before_tracks(self):
        w = World("Order", [Track([[Point(0, 0)]]), Waypoint(1, 1)])
        root = ET.fromstring(export_gpx(w))
        tags = [child.tag for child in root]
        assert tags == [f"{NS}metadata", f"{NS}wpt", f"{NS}trk"]

    def test_bare_waypoint_and_unnamed_world(self):
        root = ET.fromstring(export_gpx(World("", [Waypoint(1, 2)])))
        assert root.find(f"{NS}metadata") is None
        wpt = root.find(f"{NS}wpt")
        assert list(wpt) == []

    def test_unsupported_features_skipped(self, home):
        root = ET.fromstring(export_gpx(World("Mixed", [home, object()])))
        assert len(list(root)) == 2  # metadata + one wpt
