# =============================================================================
# core/statistics.py  -  Statistics Aggregator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   calculate_statistics() derives a read-only TravelStatistics summary from
#   a list of countries:
#
#     1. Headline:   total, visited, visited percentage
#     2. Continents: the same three figures for each of the six continents,
#                    always in canonical order (even when empty)
#     3. Timeline:   visited countries grouped by the date of their most
#                    recent visit, newest date first
#     4. Trips:      total trips, total days traveled, average trip length
#     5. Extras:     territories visited, trips per visit type, the sorted
#                    visited list and the "bucket list" of unvisited names
#
# PURE FUNCTION:
#   No stored state, no side effects apart from warning logs.  Safe to call
#   as often as the caller likes.
#
# DIVISION BY ZERO:
#   Every ratio is defined as 0 when its denominator is 0.
#
# UNPARSEABLE DATES:
#   A visit whose dates do not parse still counts as a trip, but adds no
#   days and is left out of the average trip length.  It never becomes a
#   country's most recent visit (see core/ledger.py).
# =============================================================================

import logging
from typing import Iterable

from core.ledger import is_visited, most_recent_visit_date, visit_days
from core.models import (
    CONTINENTS,
    OTHER_VISIT_TYPE,
    VISIT_TYPES,
    ContinentStats,
    Country,
    TimelineEntry,
    TravelStatistics,
    parse_iso_date,
)

logger = logging.getLogger(__name__)


def _percentage(part: int, whole: int) -> float:
    return (part / whole) * 100 if whole > 0 else 0.0


def _continent_stats(countries: list[Country]) -> tuple[ContinentStats, ...]:
    stats = []
    for continent in CONTINENTS:
        members = [c for c in countries if c.continent == continent]
        visited = sum(1 for c in members if is_visited(c))
        stats.append(ContinentStats(
            continent=continent,
            total=len(members),
            visited=visited,
            percentage=_percentage(visited, len(members)),
        ))
    return tuple(stats)


def _timeline(visited: list[Country]) -> tuple[TimelineEntry, ...]:
    """Group visited countries by the yyyy-MM-dd of their latest visit."""
    groups: dict[str, tuple[list[str], list[str]]] = {}
    for country in visited:
        raw_date = most_recent_visit_date(country)
        try:
            day = parse_iso_date(raw_date).isoformat()
        except (TypeError, ValueError, AttributeError):
            logger.warning("Invalid date format for %s: %r; skipped from timeline.",
                           country.code, raw_date)
            continue
        names, codes = groups.setdefault(day, ([], []))
        names.append(country.name)
        codes.append(country.code)

    entries = [
        TimelineEntry(date=day, country_names=tuple(names), country_codes=tuple(codes))
        for day, (names, codes) in groups.items()
    ]
    # ISO dates sort correctly as strings.
    entries.sort(key=lambda entry: entry.date, reverse=True)
    return tuple(entries)


def _days_traveled(countries: list[Country]) -> tuple[int, int]:
    """Total days over every visit with parseable dates, and how many visits that was."""
    days, dated_trips = 0, 0
    for country in countries:
        for visit in country.visits:
            try:
                days += visit_days(visit)
            except (TypeError, ValueError, AttributeError):
                logger.warning("Unparseable visit dates for %s: %r; days not counted.",
                               country.code, visit.start_date)
                continue
            dated_trips += 1
    return days, dated_trips


def _visit_type_breakdown(countries: list[Country]) -> dict[str, int]:
    breakdown = {visit_type: 0 for visit_type in VISIT_TYPES + (OTHER_VISIT_TYPE,)}
    for country in countries:
        for visit in country.visits:
            label = visit.type_label
            breakdown[label] = breakdown.get(label, 0) + 1
    return breakdown


def calculate_statistics(
    countries: Iterable[Country],
    include_territories: bool = True,
) -> TravelStatistics:
    """Summarize a set of countries.

    Args:
        countries:           The current country set (any order).
        include_territories: When False, territories are left out of every
                             figure except territories_visited.

    Returns:
        A TravelStatistics snapshot.
    """
    everything = list(countries)
    territories_visited = sum(
        1 for c in everything if c.is_territory and is_visited(c)
    )
    counted = everything if include_territories else [
        c for c in everything if not c.is_territory
    ]

    visited = [c for c in counted if is_visited(c)]
    unvisited = [c for c in counted if not is_visited(c)]

    total_trips = sum(len(c.visits) for c in counted)
    total_days, dated_trips = _days_traveled(counted)

    return TravelStatistics(
        total_countries=len(counted),
        visited_count=len(visited),
        visited_percentage=_percentage(len(visited), len(counted)),
        continent_stats=_continent_stats(counted),
        timeline=_timeline(visited),
        total_trips=total_trips,
        total_days_traveled=total_days,
        average_trip_length=total_days / dated_trips if dated_trips > 0 else 0.0,
        territories_visited=territories_visited,
        visit_type_breakdown=_visit_type_breakdown(counted),
        visited_countries=tuple(sorted(c.name for c in visited)),
        bucket_list=tuple(sorted(c.name for c in unvisited)),
    )
