from core.catalogue import build_catalogue, catalogue_codes
from core.models import CONTINENTS


def test_codes_are_unique():
    catalogue = build_catalogue()
    assert len(catalogue) == len(catalogue_codes())


def test_entries_are_unvisited_and_on_known_continents():
    for country in build_catalogue():
        assert country.visits == ()
        assert country.continent in CONTINENTS
        assert len(country.code) == 3 and country.code.isupper()


def test_territory_flags():
    by_code = {c.code: c for c in build_catalogue()}
    assert by_code["GRL"].is_territory
    assert by_code["HKG"].is_territory
    assert by_code["ATA"].is_territory
    assert by_code["ATA"].continent == "Oceania"
    assert not by_code["XKX"].is_territory
    assert not by_code["FRA"].is_territory
