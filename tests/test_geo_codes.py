import pytest

from core.geo_codes import (
    AMBIGUOUS_ID,
    known_feature_ids,
    normalize_feature_id,
    resolve_country_code,
)


@pytest.mark.parametrize("feature_id, expected", [
    ("004", "AFG"),
    ("250", "FRA"),
    ("840", "USA"),
    ("826", "GBR"),
    ("732", "ESH"),
    ("010", "ATA"),
])
def test_numeric_ids_resolve(feature_id, expected):
    assert resolve_country_code(feature_id) == expected


def test_greenland_id_wins_over_any_name():
    assert resolve_country_code("304") == "GRL"
    assert resolve_country_code("304", "Kosovo") == "GRL"
    assert resolve_country_code("304", "Northern Cyprus") == "GRL"


def test_integer_ids_are_zero_padded():
    assert normalize_feature_id(4) == "004"
    assert resolve_country_code(4) == "AFG"
    assert resolve_country_code(304) == "GRL"


@pytest.mark.parametrize("name, expected", [
    ("Kosovo", "XKX"),
    ("Republic of KOSOVO", "XKX"),
    ("Somaliland", "SOL"),
    ("N. Cyprus", "NCY"),
    ("Northern Cyprus", "NCY"),
])
def test_ambiguous_id_uses_name(name, expected):
    assert resolve_country_code(AMBIGUOUS_ID, name) == expected
    assert resolve_country_code(-99, name) == expected


def test_name_fallback_without_id():
    assert resolve_country_code("", "Kosovo") == "XKX"
    assert resolve_country_code(None, "Somaliland") == "SOL"


@pytest.mark.parametrize("feature_id, name", [
    (AMBIGUOUS_ID, None),
    (AMBIGUOUS_ID, "Atlantis"),
    ("999", None),
    ("abc", "Nowhere"),
    (None, None),
    ("", ""),
    (True, None),
])
def test_unresolvable_features_return_none(feature_id, name):
    assert resolve_country_code(feature_id, name) is None


def test_ambiguous_id_is_not_a_known_id():
    ids = known_feature_ids()
    assert AMBIGUOUS_ID not in ids
    assert "304" in ids
    assert ids == sorted(ids)
