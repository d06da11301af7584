import json
import os
from datetime import date

import pytest

from core.catalogue import build_catalogue
from core.ledger import InvalidDateRangeError, VisitIndexError
from core.models import TravelData, Visit
from core.store import TravelStore, UnknownCountryError, new_travel_data, utc_timestamp


def test_utc_timestamp_format(fixed_clock):
    assert utc_timestamp(fixed_clock()) == "2024-05-01T09:30:00.000Z"


def test_new_store_holds_the_whole_catalogue():
    store = TravelStore()
    assert len(store.countries) == len(build_catalogue())
    assert store.statistics().visited_count == 0
    assert new_travel_data().version == 2


def test_lookup_is_case_insensitive():
    store = TravelStore()
    assert store.country(" fra ").name == "France"
    with pytest.raises(UnknownCountryError):
        store.country("ZZZ")


def test_mutation_refreshes_last_updated(fixed_clock):
    stale = TravelData(version=2, countries=build_catalogue(),
                       last_updated="2000-01-01T00:00:00.000Z")
    store = TravelStore(data=stale, clock=fixed_clock)

    store.add_visit("FRA", {"start_date": "2024-04-20"})

    assert store.data.last_updated == "2024-05-01T09:30:00.000Z"
    assert store.country("FRA").visits == (Visit("2024-04-20"),)
    assert stale.find("FRA").visits == ()


def test_add_visit_defaults_to_today():
    store = TravelStore()
    country = store.add_visit("JPN", today=date(2024, 4, 1))
    assert country.visits == (Visit("2024-04-01"),)


def test_failed_mutation_changes_nothing(fixed_clock):
    store = TravelStore(clock=fixed_clock)
    store.add_visit("FRA", {"start_date": "2024-01-01"})
    before = store.data

    with pytest.raises(InvalidDateRangeError):
        store.add_visit("FRA", {"start_date": "2024-01-05", "end_date": "2024-01-01"})
    with pytest.raises(VisitIndexError):
        store.update_visit("FRA", 3, {"notes": "x"})
    with pytest.raises(UnknownCountryError):
        store.delete_visit("ZZZ", 0)

    assert store.data is before


def test_update_delete_and_clear():
    store = TravelStore()
    store.add_visit("ITA", {"start_date": "2023-01-01"})
    store.add_visit("ITA", {"start_date": "2024-01-01"})

    store.update_visit("ITA", 1, {"visit_type": "business"})
    assert store.country("ITA").visits[1].visit_type == "business"

    store.delete_visit("ITA", 0)
    assert [v.start_date for v in store.country("ITA").visits] == ["2024-01-01"]

    store.clear_visits("ITA")
    assert store.country("ITA").visits == ()


def test_other_countries_are_untouched():
    store = TravelStore()
    before = {c.code: c for c in store.countries}
    store.add_visit("ESP", {"start_date": "2024-01-01"})
    after = {c.code: c for c in store.countries}
    assert [code for code in before if before[code] != after[code]] == ["ESP"]


def test_autosave_after_every_mutation(tmp_path, fixed_clock):
    path = str(tmp_path / "travel.json")
    store = TravelStore.open(path, clock=fixed_clock)
    assert not os.path.exists(path)

    store.add_visit("PRT", {"start_date": "2024-02-02", "rating": 5})

    saved = json.load(open(path, encoding="utf-8"))
    portugal = next(c for c in saved["countries"] if c["code"] == "PRT")
    assert portugal["visits"] == [{"startDate": "2024-02-02", "rating": 5}]
    assert saved["lastUpdated"] == "2024-05-01T09:30:00.000Z"


def test_reopen_restores_visits(tmp_path):
    path = str(tmp_path / "travel.json")
    TravelStore.open(path).add_visit("USA", {"start_date": "2024-07-04"})

    reopened = TravelStore.open(path)
    assert reopened.country("USA").visits == (Visit("2024-07-04"),)
    assert reopened.dropped_codes == ()


def test_save_without_path_is_refused():
    with pytest.raises(ValueError):
        TravelStore().save()


def test_open_migrates_legacy_file(write_json, legacy_document):
    store = TravelStore.open(write_json("legacy.json", legacy_document), autosave=False)
    assert store.autosave_path is None
    assert store.statistics().visited_count == 2
