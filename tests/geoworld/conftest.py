"""Shared fixtures for geoworld tests."""

import sys

import pytest
from loguru import logger

from geoworld import Point, Track, Waypoint, World


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests start from default settings regardless of the caller's shell."""
    for var in ("GEOWORLD_DEBUG", "GEOWORLD_LOG_LEVEL", "GEOWORLD_JSON_INDENT",
                "GEOWORLD_DEFAULT_FORMAT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    """configure_logging() replaces sinks; restore the default stderr one."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def home():
    return Waypoint(-121.5, 45.5, 30, "home", "flag")


@pytest.fixture
def track_one():
    return Track(
        [
            [Point(-122, 45), Point(-122, 46), Point(-121, 46)],
            [Point(-121, 45), Point(-121, 46)],
        ],
        "track 1",
    )


@pytest.fixture
def world(home, track_one):
    return World("My Data", [home, track_one])
