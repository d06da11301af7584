# =============================================================================
# core/ledger.py  -  Visit Ledger (per-country visit operations)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every operation that reads or changes a country's list of visits.
#
#   Mutations (return a NEW Country, never edit the given one):
#     add_visit, update_visit, delete_visit, clear_visits
#
#   Queries (pure):
#     is_visited, most_recent_visit_date, first_visit_date,
#     total_days_in_country, all_photos, latest_visit_type
#
# VISIT DATA:
#   Mutations take a partial mapping keyed by Visit field names
#   (start_date, end_date, visit_type, notes, rating, photos).  Only the
#   supplied keys are applied.  Empty strings count as "absent".
#
# VALIDATION:
#   A write is refused, with nothing changed, when:
#     - end_date is before start_date         -> InvalidDateRangeError
#     - the index does not exist              -> VisitIndexError
#     - a date does not parse, visit_type is unknown, rating is outside
#       0.0-5.0, or an unknown field is given -> VisitError
#
#   Refreshing the document's lastUpdated is the store's job
#   (core/store.py), since the store owns the document.
# =============================================================================

from dataclasses import fields, replace
from datetime import date
from typing import Any, Mapping, Optional

from core.models import (
    MAX_RATING,
    MIN_RATING,
    VISIT_TYPES,
    Country,
    Visit,
    parse_iso_date,
)


_VISIT_FIELDS = frozenset(f.name for f in fields(Visit))
_OPTIONAL_TEXT_FIELDS = ("end_date", "visit_type", "notes")


class VisitError(ValueError):
    """A visit write was refused because the data is invalid."""


class InvalidDateRangeError(VisitError):
    """end_date falls before start_date."""


class VisitIndexError(VisitError, IndexError):
    """The visit index does not exist for this country."""


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------
def _normalize(visit_data: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Copy the partial visit data, rejecting unknown keys."""
    data = dict(visit_data or {})
    unknown = sorted(set(data) - _VISIT_FIELDS)
    if unknown:
        raise VisitError(f"Unknown visit field(s): {', '.join(unknown)}")

    for key in _OPTIONAL_TEXT_FIELDS:
        if key in data and data[key] == "":
            data[key] = None
    if "photos" in data:
        data["photos"] = tuple(data["photos"] or ())
    return data


def _parse(value: Any, label: str) -> date:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError, AttributeError) as e:
        raise VisitError(f"{label} is not a valid ISO date: {value!r}") from e


def validate_visit(visit: Visit) -> Visit:
    """Check a visit before it is stored.  Returns it unchanged if valid."""
    start = _parse(visit.start_date, "start_date")
    if visit.end_date is not None:
        end = _parse(visit.end_date, "end_date")
        if end < start:
            raise InvalidDateRangeError(
                f"End date {visit.end_date} is before start date {visit.start_date}."
            )

    if visit.visit_type is not None and visit.visit_type not in VISIT_TYPES:
        raise VisitError(
            f"Unknown visit type {visit.visit_type!r}; "
            f"expected one of {', '.join(VISIT_TYPES)}."
        )

    if visit.rating is not None:
        if isinstance(visit.rating, bool) or not isinstance(visit.rating, (int, float)):
            raise VisitError(f"Rating must be a number, got {visit.rating!r}.")
        if not MIN_RATING <= visit.rating <= MAX_RATING:
            raise VisitError(
                f"Rating {visit.rating} is outside {MIN_RATING}-{MAX_RATING}."
            )

    if any(not isinstance(photo, str) for photo in visit.photos):
        raise VisitError("Photo references must be strings.")
    return visit


def _check_index(country: Country, index: int) -> None:
    if (isinstance(index, bool) or not isinstance(index, int)
            or not 0 <= index < len(country.visits)):
        raise VisitIndexError(
            f"{country.name} has {len(country.visits)} visit(s); "
            f"index {index!r} does not exist."
        )


def _visit_day(visit: Visit) -> Optional[str]:
    """Normalized ISO start date, or None if it does not parse."""
    try:
        return parse_iso_date(visit.start_date).isoformat()
    except (TypeError, ValueError, AttributeError):
        return None


def _sort_key(visit: Visit) -> tuple[bool, str]:
    # (dated, day): a visit with a parseable date always outranks one
    # without, so a bad date is never the latest or the earliest.
    day = _visit_day(visit)
    return (day is not None, day or str(visit.start_date))


def _latest(country: Country) -> Visit:
    return max(country.visits, key=_sort_key)


def _earliest(country: Country) -> Visit:
    def undated_last(visit: Visit) -> tuple[bool, str]:
        dated, day = _sort_key(visit)
        return (not dated, day)
    return min(country.visits, key=undated_last)


# -----------------------------------------------------------------------------
# Mutations
# -----------------------------------------------------------------------------
def add_visit(
    country: Country,
    visit_data: Optional[Mapping[str, Any]] = None,
    today: Optional[date] = None,
) -> Country:
    """Append a new visit built from partial data.

    start_date defaults to today; every other field defaults to absent.
    Duplicate dates are allowed; there is no limit on visits per country.
    """
    data = _normalize(visit_data)
    if not data.get("start_date"):
        data["start_date"] = (today or date.today()).isoformat()

    visit = validate_visit(Visit(**data))
    return replace(country, visits=country.visits + (visit,))


def update_visit(
    country: Country,
    index: int,
    visit_data: Mapping[str, Any],
) -> Country:
    """Shallow-merge partial data into the visit at index.

    Only supplied keys change; passing None for an optional field clears it.
    """
    _check_index(country, index)
    data = _normalize(visit_data)
    updated = validate_visit(replace(country.visits[index], **data))

    visits = list(country.visits)
    visits[index] = updated
    return replace(country, visits=tuple(visits))


def delete_visit(country: Country, index: int) -> Country:
    """Remove the visit at index; later visits shift down by one."""
    _check_index(country, index)
    visits = country.visits[:index] + country.visits[index + 1:]
    return replace(country, visits=visits)


def clear_visits(country: Country) -> Country:
    """Remove every visit ("unmark as visited")."""
    return replace(country, visits=())


# -----------------------------------------------------------------------------
# Queries
# -----------------------------------------------------------------------------
def is_visited(country: Country) -> bool:
    return len(country.visits) > 0


def most_recent_visit_date(country: Country) -> Optional[str]:
    """start_date of the latest visit, or None if never visited."""
    if not country.visits:
        return None
    return _latest(country).start_date


def first_visit_date(country: Country) -> Optional[str]:
    """start_date of the earliest visit, or None if never visited."""
    if not country.visits:
        return None
    return _earliest(country).start_date


def visit_days(visit: Visit) -> int:
    """Days covered by one visit, counting both endpoints.

    A visit without an end date is a single day.

    Raises:
        ValueError: a date does not parse.
    """
    start = parse_iso_date(visit.start_date)
    end = parse_iso_date(visit.end_date) if visit.end_date else start
    return (end - start).days + 1


def total_days_in_country(country: Country) -> int:
    """Sum of visit_days over all visits.

    Overlapping visits are not collapsed: a shared day counts once per visit.
    """
    return sum(visit_days(visit) for visit in country.visits)


def all_photos(country: Country) -> list[str]:
    """Every photo reference across all visits, in visit order."""
    photos: list[str] = []
    for visit in country.visits:
        photos.extend(visit.photos)
    return photos


def latest_visit_type(country: Country) -> Optional[str]:
    """Type label of the most recent visit ("other" if unspecified).

    Returns None for an unvisited country.
    """
    if not country.visits:
        return None
    return _latest(country).type_label
