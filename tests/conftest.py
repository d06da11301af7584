import json
from datetime import datetime, timezone

import pytest

from core.models import Country, Visit


@pytest.fixture
def france():
    return Country(code="FRA", name="France", continent="Europe")


@pytest.fixture
def small_world():
    """Two European countries (one visited), one Asian, one territory."""
    return (
        Country("FRA", "France", "Europe", visits=(
            Visit("2024-01-01", "2024-01-03", visit_type="leisure"),
        )),
        Country("DEU", "Germany", "Europe"),
        Country("JPN", "Japan", "Asia", visits=(
            Visit("2023-05-10", visit_type="business"),
            Visit("2024-01-03"),
        )),
        Country("HKG", "Hong Kong", "Asia", is_territory=True, visits=(
            Visit("2024-01-03", "2024-01-04", visit_type="transit"),
        )),
    )


@pytest.fixture
def fixed_clock():
    moment = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    return lambda: moment


@pytest.fixture
def legacy_document():
    return {
        "countries": [
            {"code": "FRA", "name": "France", "continent": "Europe",
             "visited": True, "visitDate": "2023-06-01"},
            {"code": "DEU", "name": "Germany", "continent": "Europe",
             "visited": False},
            {"code": "JPN", "name": "Japan", "continent": "Asia",
             "visited": True, "visitDate": "2022-11-20T08:15:00.000Z"},
            {"code": "ESH", "name": "Western Sahara", "continent": "Africa",
             "visited": True, "isTerritory": True},
        ],
        "lastUpdated": "2024-02-10T12:00:00.000Z",
    }


@pytest.fixture
def write_json(tmp_path):
    def _write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)
    return _write
