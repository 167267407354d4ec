"""Pytest configuration and fixtures for the catalog tests.

This module provides fixtures for:
- Writing temporary JSON data files
- Repositories over small hand-built catalogs
- A clean DI container and settings per test
"""
import json

import pytest

from config import settings as settings_module
from core.container import get_container
from repositories.lego_set_repository import LegoSetRepository


def make_set(number, name, pieces=10, theme="City", subtheme=None, tags=None):
    """Build a raw record as it appears in the JSON file."""
    return {
        "number": number,
        "name": name,
        "pieces": pieces,
        "theme": theme,
        "subtheme": subtheme,
        "tags": tags if tags is not None else [],
    }


SAMPLE_SETS = [
    make_set("1-1", "Star Wars Magnet Set", pieces=3, theme="Gear", subtheme="Magnets",
             tags=["Magnet", "Star Wars"]),
    make_set("2-1", "Star Wars Magnet Set", pieces=3, theme="Gear", subtheme="Magnets",
             tags=["Star Wars", "Clone Trooper"]),
    make_set("3-1", "Tahu", pieces=31, theme="Bionicle", subtheme="Toa"),
    make_set("4-1", "Pahrak", pieces=40, theme="Bionicle", subtheme="Bohrok"),
    make_set("5-1", "Lewa", pieces=30, theme="Bionicle", subtheme="Toa"),
    make_set("6-1", "Bionicle Collector Pack", pieces=49, theme="Bionicle", subtheme=None),
    make_set("7-1", "Mini Fire Fighter", pieces=49, theme="Creator"),
    make_set("8-1", "Ultimate Collector's Millennium Falcon", pieces=5195, theme="Star Wars"),
    make_set("9-1", "London", pieces=468, theme="Architecture", subtheme="Skylines"),
    make_set("10-1", "Sphinx Secret Surprise", pieces=524, theme="Adventurers"),
    make_set("11-1", "Robo Attack", pieces=393, theme="Agents"),
    make_set("12-1", "New York City", pieces=598, theme="Architecture", subtheme="Skylines"),
    make_set("13-1", "LEGO Ideas Book", pieces=0, theme="Books"),
    make_set("14-1", "The LEGO Book", pieces=0, theme="Books"),
    make_set("15-1", "Brick Sorter", pieces=0, theme="Gear"),
    make_set("16-1", "Minifigure Display Case", pieces=0, theme="Gear"),
    make_set("17-1", "VIP Set", pieces=1, theme="Miscellaneous"),
    make_set("18-1", "Clone Wars Collector's Set", pieces=47, theme=None),
]


@pytest.fixture
def record():
    """Factory for raw records."""
    return make_set


@pytest.fixture
def sample_sets():
    """Raw records behind the ``repository`` fixture."""
    return [dict(item) for item in SAMPLE_SETS]


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temporary file and return its path."""
    def _write(payload, name="brickset.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_repository(write_json):
    """Build a LegoSetRepository over the given raw records."""
    def _make(records):
        return LegoSetRepository(resource_name=write_json(records))
    return _make


@pytest.fixture
def repository(make_repository):
    """Repository over SAMPLE_SETS."""
    return make_repository(SAMPLE_SETS)


@pytest.fixture(autouse=True)
def clean_globals(monkeypatch):
    """Isolate the container singleton and settings between tests."""
    for key in ("BRICKSET_DATA_DIR", "BRICKSET_FILE", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(key, raising=False)
    get_container().clear()
    settings_module.reset_settings()
    yield
    get_container().clear()
    settings_module.reset_settings()
