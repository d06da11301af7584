import logging

import pytest

from core.catalogue import build_catalogue
from core.migration import (
    CURRENT_VERSION,
    SchemaKind,
    UnrecognizedDocumentError,
    detect_schema,
    load_travel_data,
    merge_with_catalogue,
    migrate,
)
from core.models import Country, TravelData, Visit


# --- detection ---

def test_detect_schema_by_version_field():
    assert detect_schema({"countries": []}) is SchemaKind.LEGACY
    assert detect_schema({"version": None, "countries": []}) is SchemaKind.LEGACY
    assert detect_schema({"version": CURRENT_VERSION}) is SchemaKind.CURRENT
    assert detect_schema({"version": 7}) is SchemaKind.UNKNOWN


@pytest.mark.parametrize("raw", [None, [], "travel", 42])
def test_non_object_input_is_rejected(raw):
    with pytest.raises(UnrecognizedDocumentError):
        migrate(raw)


# --- legacy upgrade ---

def test_legacy_visited_flag_becomes_one_visit(legacy_document):
    migrated = migrate(legacy_document)
    by_code = {c["code"]: c for c in migrated["countries"]}

    assert migrated["version"] == CURRENT_VERSION
    assert migrated["lastUpdated"] == legacy_document["lastUpdated"]
    assert by_code["FRA"]["visits"] == [{"startDate": "2023-06-01"}]
    assert by_code["DEU"]["visits"] == []
    assert "visited" not in by_code["FRA"]
    assert "visitDate" not in by_code["FRA"]


def test_legacy_timestamp_is_kept_as_start_date(legacy_document):
    data = load_travel_data(legacy_document)
    assert data.find("JPN").visits[0].start_date == "2022-11-20T08:15:00.000Z"


def test_legacy_visit_without_date_is_not_invented(legacy_document, caplog):
    # lastUpdated is present but is never used as a trip date.
    with caplog.at_level(logging.WARNING, logger="core.migration"):
        data = load_travel_data(legacy_document)
    western_sahara = data.find("ESH")
    assert western_sahara.is_territory
    assert western_sahara.visits == ()
    assert "ESH" in caplog.text


def test_legacy_visit_without_any_date_is_skipped(caplog):
    raw = {"countries": [
        {"code": "FRA", "name": "France", "continent": "Europe", "visited": True},
    ]}
    with caplog.at_level(logging.WARNING, logger="core.migration"):
        data = load_travel_data(raw)
    assert data.find("FRA").visits == ()
    assert "FRA" in caplog.text


def test_migration_is_idempotent(legacy_document):
    once = migrate(legacy_document)
    assert migrate(once) == once
    assert migrate(once) is once


def test_legacy_document_without_countries_is_rejected():
    with pytest.raises(UnrecognizedDocumentError):
        migrate({"lastUpdated": "2024-01-01T00:00:00.000Z"})


# --- other versions ---

def test_current_document_is_returned_unchanged():
    raw = {"version": CURRENT_VERSION, "countries": [], "lastUpdated": ""}
    assert migrate(raw) is raw


def test_unknown_version_warns_and_passes_through(caplog):
    raw = {"version": 99, "countries": []}
    with caplog.at_level(logging.WARNING, logger="core.migration"):
        assert migrate(raw) is raw
    assert "Unknown data version" in caplog.text


def test_unparseable_current_document_is_rejected():
    with pytest.raises(UnrecognizedDocumentError):
        load_travel_data({"version": CURRENT_VERSION, "countries": "FRA"})
    with pytest.raises(UnrecognizedDocumentError):
        load_travel_data({"version": CURRENT_VERSION, "countries": [{"name": "x"}]})


# --- catalogue merge ---

def test_merge_keeps_every_visit_for_catalogue_codes(legacy_document):
    loaded = load_travel_data(legacy_document)
    merged = merge_with_catalogue(loaded, build_catalogue()).data

    for country in loaded.countries:
        assert merged.find(country.code).visits == country.visits


def test_merge_takes_metadata_from_catalogue():
    loaded = TravelData(version=CURRENT_VERSION, countries=(
        Country("FRA", "Old France", "Asia", visits=(Visit("2024-01-01"),)),
    ))
    merged = merge_with_catalogue(loaded, build_catalogue()).data
    france = merged.find("FRA")

    assert (france.name, france.continent) == ("France", "Europe")
    assert france.visits == (Visit("2024-01-01"),)
    assert len(merged.countries) == len(build_catalogue())


def test_merge_drops_codes_missing_from_catalogue(caplog):
    # Visits on codes the catalogue no longer lists do not survive a load.
    loaded = TravelData(version=CURRENT_VERSION, countries=(
        Country("ZZZ", "Nowhere", "Europe", visits=(Visit("2024-01-01"),)),
        Country("FRA", "France", "Europe"),
    ))
    catalogue = (Country("FRA", "France", "Europe"), Country("DEU", "Germany", "Europe"))

    with caplog.at_level(logging.WARNING, logger="core.migration"):
        result = merge_with_catalogue(loaded, catalogue)

    assert result.dropped_codes == ("ZZZ",)
    assert result.data.find("ZZZ") is None
    assert [c.code for c in result.data.countries] == ["FRA", "DEU"]
    assert "ZZZ" in caplog.text
