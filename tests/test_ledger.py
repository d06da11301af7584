from datetime import date

import pytest

from core import ledger
from core.ledger import InvalidDateRangeError, VisitError, VisitIndexError
from core.models import Country, Visit


def test_visited_means_at_least_one_visit(france):
    assert not ledger.is_visited(france)
    visited = ledger.add_visit(france, {"start_date": "2024-01-01"})
    assert ledger.is_visited(visited)
    assert ledger.is_visited(visited) == (len(visited.visits) > 0)


def test_add_visit_defaults_start_date_to_today(france):
    updated = ledger.add_visit(france, today=date(2024, 7, 14))
    assert updated.visits == (Visit("2024-07-14"),)


def test_add_visit_does_not_modify_original(france):
    ledger.add_visit(france, {"start_date": "2024-01-01"})
    assert france.visits == ()


def test_add_visit_with_all_fields(france):
    updated = ledger.add_visit(france, {
        "start_date": "2024-03-01",
        "end_date": "2024-03-05",
        "visit_type": "leisure",
        "notes": "Paris in spring",
        "rating": 4.5,
        "photos": ["trips/paris/1.jpg", "trips/paris/2.jpg"],
    })
    visit = updated.visits[0]
    assert visit.visit_type == "leisure"
    assert visit.rating == 4.5
    assert visit.photos == ("trips/paris/1.jpg", "trips/paris/2.jpg")


def test_duplicate_dates_are_allowed(france):
    country = ledger.add_visit(france, {"start_date": "2024-01-01"})
    country = ledger.add_visit(country, {"start_date": "2024-01-01"})
    assert len(country.visits) == 2


def test_end_before_start_is_refused(france):
    with pytest.raises(InvalidDateRangeError):
        ledger.add_visit(france, {"start_date": "2024-01-05", "end_date": "2024-01-01"})


@pytest.mark.parametrize("visit_data", [
    {"start_date": "not-a-date"},
    {"start_date": "2024-01-01", "end_date": "2024-13-01"},
    {"start_date": "2024-01-01", "visit_type": "vacation"},
    {"start_date": "2024-01-01", "rating": 5.5},
    {"start_date": "2024-01-01", "rating": -1},
    {"start_date": "2024-01-01", "rating": "great"},
    {"start_date": "2024-01-01", "rating": True},
    {"start_date": "2024-01-01", "photos": [42]},
    {"start_date": "2024-01-01", "country": "FRA"},
])
def test_invalid_visit_data_is_refused(france, visit_data):
    with pytest.raises(VisitError):
        ledger.add_visit(france, visit_data)


def test_rating_bounds_are_inclusive(france):
    country = ledger.add_visit(france, {"start_date": "2024-01-01", "rating": 0})
    country = ledger.add_visit(country, {"start_date": "2024-01-02", "rating": 5.0})
    assert [v.rating for v in country.visits] == [0, 5.0]


def test_update_merges_only_supplied_fields():
    country = Country("FRA", "France", "Europe", visits=(
        Visit("2024-01-01", "2024-01-03", visit_type="leisure", notes="Lyon"),
    ))
    updated = ledger.update_visit(country, 0, {"rating": 4, "notes": ""})
    visit = updated.visits[0]
    assert visit.end_date == "2024-01-03"
    assert visit.visit_type == "leisure"
    assert visit.rating == 4
    assert visit.notes is None


def test_update_validates_merged_visit():
    country = Country("FRA", "France", "Europe", visits=(Visit("2024-01-10"),))
    with pytest.raises(InvalidDateRangeError):
        ledger.update_visit(country, 0, {"end_date": "2024-01-01"})


@pytest.mark.parametrize("index", [1, -1, 5, True, "0"])
def test_update_out_of_range_leaves_visits_unchanged(index):
    visits = (Visit("2024-01-01"),)
    country = Country("FRA", "France", "Europe", visits=visits)
    with pytest.raises(VisitIndexError):
        ledger.update_visit(country, index, {"notes": "changed"})
    assert country.visits == visits


def test_index_error_is_also_an_index_error():
    country = Country("FRA", "France", "Europe")
    with pytest.raises(IndexError):
        ledger.delete_visit(country, 0)


def test_deleting_only_visit_makes_country_unvisited():
    country = Country("FRA", "France", "Europe", visits=(Visit("2024-01-01"),))
    assert not ledger.is_visited(ledger.delete_visit(country, 0))


def test_delete_shifts_later_visits_down():
    country = Country("FRA", "France", "Europe", visits=(
        Visit("2024-01-01"), Visit("2024-02-01"), Visit("2024-03-01"),
    ))
    updated = ledger.delete_visit(country, 1)
    assert [v.start_date for v in updated.visits] == ["2024-01-01", "2024-03-01"]


def test_clear_visits():
    country = Country("FRA", "France", "Europe", visits=(Visit("2024-01-01"),) * 3)
    assert ledger.clear_visits(country).visits == ()


# --- queries ---

def test_days_with_end_date_count_both_endpoints():
    country = Country("FRA", "France", "Europe",
                      visits=(Visit("2024-01-01", "2024-01-03"),))
    assert ledger.total_days_in_country(country) == 3


def test_days_without_end_date_is_one():
    country = Country("FRA", "France", "Europe", visits=(Visit("2024-01-01"),))
    assert ledger.total_days_in_country(country) == 1


def test_overlapping_visits_are_counted_separately():
    country = Country("FRA", "France", "Europe", visits=(
        Visit("2024-01-01", "2024-01-03"), Visit("2024-01-02", "2024-01-04"),
    ))
    assert ledger.total_days_in_country(country) == 6


def test_first_and_most_recent_visit_ignore_insertion_order():
    country = Country("FRA", "France", "Europe", visits=(
        Visit("2023-06-01"), Visit("2024-02-01", visit_type="business"),
        Visit("2021-09-15"),
    ))
    assert ledger.first_visit_date(country) == "2021-09-15"
    assert ledger.most_recent_visit_date(country) == "2024-02-01"
    assert ledger.latest_visit_type(country) == "business"


def test_queries_on_unvisited_country(france):
    assert ledger.first_visit_date(france) is None
    assert ledger.most_recent_visit_date(france) is None
    assert ledger.latest_visit_type(france) is None
    assert ledger.total_days_in_country(france) == 0
    assert ledger.all_photos(france) == []


def test_untyped_visit_is_reported_as_other():
    country = Country("FRA", "France", "Europe", visits=(Visit("2024-01-01"),))
    assert ledger.latest_visit_type(country) == "other"


def test_all_photos_in_visit_order():
    country = Country("FRA", "France", "Europe", visits=(
        Visit("2024-01-01", photos=("a.jpg",)),
        Visit("2024-02-01"),
        Visit("2024-03-01", photos=("b.jpg", "c.jpg")),
    ))
    assert ledger.all_photos(country) == ["a.jpg", "b.jpg", "c.jpg"]


def test_unparseable_dates_never_win_first_or_latest():
    country = Country("FRA", "France", "Europe", visits=(
        Visit("garbage", visit_type="transit"),
        Visit("2024-01-01", visit_type="leisure"),
        Visit("0000-bad"),
        Visit("2023-06-01"),
    ))
    assert ledger.most_recent_visit_date(country) == "2024-01-01"
    assert ledger.first_visit_date(country) == "2023-06-01"
    assert ledger.latest_visit_type(country) == "leisure"
