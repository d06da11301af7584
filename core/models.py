# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the travel record)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows through the tracker: visits, countries, the persisted document, the
# legacy document it replaced, and the statistics derived from it.
#
# IMMUTABLE SNAPSHOTS:
#   Every model is a frozen dataclass and every ordered collection is a
#   tuple.  A mutation never edits a snapshot in place; it builds a new one
#   with dataclasses.replace().  core/ledger.py and core/store.py rely on this.
#
# JSON SHAPE:
#   The persisted document uses camelCase keys ("startDate", "isTerritory",
#   "lastUpdated").  Python code uses snake_case attributes.  to_dict() and
#   from_dict() are the only places where the two meet.  Optional fields
#   that are absent are omitted from the JSON rather than written as null.
# =============================================================================

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping, Optional


# -----------------------------------------------------------------------------
# Fixed vocabularies
# -----------------------------------------------------------------------------
# Continents are emitted in this order by the statistics aggregator, even
# when a continent has no countries in the input.
CONTINENTS: tuple[str, ...] = (
    "Africa",
    "Asia",
    "Europe",
    "North America",
    "South America",
    "Oceania",
)

# A visit without a type is "unspecified", reported as "other".
VISIT_TYPES: tuple[str, ...] = ("business", "leisure", "transit")
OTHER_VISIT_TYPE = "other"

MIN_RATING = 0.0
MAX_RATING = 5.0


def parse_iso_date(value: str) -> date:
    """Parse a calendar date from an ISO 8601 string.

    Accepts a plain date ("2024-03-01") or a full timestamp
    ("2024-03-01T12:30:00.000Z", as written by the legacy schema).
    Only the calendar date is kept.

    Raises:
        ValueError: the string is not an ISO date or timestamp.
        TypeError:  the value is not a string.
    """
    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


def _omit_none(data: dict) -> dict:
    return {key: value for key, value in data.items() if value is not None}


# -----------------------------------------------------------------------------
# Visit - one discrete trip to a country
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Visit:
    """A single trip.  end_date, when present, is never before start_date.

    The ledger enforces the date ordering, the visit type vocabulary and the
    rating range on every write; from_dict() trusts what it is given.
    """

    start_date: str                        # ISO date: "2024-01-01"
    end_date: Optional[str] = None         # None = single-day visit
    visit_type: Optional[str] = None       # business | leisure | transit | None
    notes: Optional[str] = None
    rating: Optional[float] = None         # 0.0 - 5.0, one decimal expected
    photos: tuple[str, ...] = ()           # relative storage references

    @property
    def type_label(self) -> str:
        """The visit type, or "other" when it was never specified."""
        return self.visit_type or OTHER_VISIT_TYPE

    def to_dict(self) -> dict:
        data = _omit_none({
            "startDate": self.start_date,
            "endDate": self.end_date,
            "visitType": self.visit_type,
            "notes": self.notes,
            "rating": self.rating,
        })
        if self.photos:
            data["photos"] = list(self.photos)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Visit":
        return cls(
            start_date=data["startDate"],
            end_date=data.get("endDate"),
            visit_type=data.get("visitType"),
            notes=data.get("notes"),
            rating=data.get("rating"),
            photos=tuple(data.get("photos") or ()),
        )


# -----------------------------------------------------------------------------
# Country - one trackable entity (sovereign state or territory)
# -----------------------------------------------------------------------------
# A country is "visited" iff visits is non-empty.  No boolean flag is
# stored; the legacy schema's flag is dropped on migration.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Country:
    """A country or territory from the catalogue, plus the user's visits."""

    code: str                              # 3-letter code, unique, immutable
    name: str
    continent: str                         # one of CONTINENTS
    is_territory: bool = False             # disputed / dependent territory
    visits: tuple[Visit, ...] = ()

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "continent": self.continent,
            "isTerritory": self.is_territory,
            "visits": [visit.to_dict() for visit in self.visits],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Country":
        return cls(
            code=data["code"],
            name=data.get("name", data["code"]),
            continent=data.get("continent", ""),
            is_territory=bool(data.get("isTerritory", False)),
            visits=tuple(Visit.from_dict(v) for v in data.get("visits") or ()),
        )


# -----------------------------------------------------------------------------
# TravelData - the persisted document (current schema)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TravelData:
    """The whole travel record as written to disk.

    Attributes:
        version:      Schema revision (see core.migration.CURRENT_VERSION).
        countries:    Every trackable country; order is insignificant.
        last_updated: Advisory ISO timestamp, rewritten on every mutation.
    """

    version: int
    countries: tuple[Country, ...] = ()
    last_updated: str = ""

    def find(self, code: str) -> Optional[Country]:
        """Return the country with this code, or None."""
        for country in self.countries:
            if country.code == code:
                return country
        return None

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "countries": [country.to_dict() for country in self.countries],
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TravelData":
        return cls(
            version=data["version"],
            countries=tuple(Country.from_dict(c) for c in data["countries"]),
            last_updated=data.get("lastUpdated", ""),
        )


# -----------------------------------------------------------------------------
# Legacy schema (version 1, no "version" key on disk)
# -----------------------------------------------------------------------------
# Retained only as a migration source.  Nothing outside core/migration.py
# should construct these.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class LegacyCountry:
    """A country as the pre-versioning schema stored it."""

    code: str
    name: str
    continent: str
    visited: bool = False
    visit_date: Optional[str] = None       # date or full timestamp
    is_territory: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "LegacyCountry":
        return cls(
            code=data["code"],
            name=data.get("name", data["code"]),
            continent=data.get("continent", ""),
            visited=bool(data.get("visited", False)),
            visit_date=data.get("visitDate") or None,
            is_territory=bool(data.get("isTerritory", False)),
        )


@dataclass(frozen=True)
class LegacyTravelData:
    """The pre-versioning document: no version, one flag + date per country."""

    countries: tuple[LegacyCountry, ...] = ()
    last_updated: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "LegacyTravelData":
        return cls(
            countries=tuple(LegacyCountry.from_dict(c) for c in data["countries"]),
            last_updated=data.get("lastUpdated", ""),
        )


# -----------------------------------------------------------------------------
# Statistics output (produced by core/statistics.py)
# -----------------------------------------------------------------------------
# A flat, serializable structure consumed by the report renderer and the
# tool layer.  to_dict() gives the camelCase form.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ContinentStats:
    """Visited / total figures for one continent."""

    continent: str
    total: int
    visited: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "continent": self.continent,
            "total": self.total,
            "visited": self.visited,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class TimelineEntry:
    """All countries whose most recent visit falls on one calendar date."""

    date: str                              # "yyyy-MM-dd"
    country_names: tuple[str, ...] = ()
    country_codes: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "countryNames": list(self.country_names),
            "countryCodes": list(self.country_codes),
        }


@dataclass(frozen=True)
class TravelStatistics:
    """Read-only summary over a set of countries."""

    total_countries: int
    visited_count: int
    visited_percentage: float
    continent_stats: tuple[ContinentStats, ...] = ()
    timeline: tuple[TimelineEntry, ...] = ()

    # --- Trip metrics ---
    total_trips: int = 0
    total_days_traveled: int = 0
    average_trip_length: float = 0.0

    # --- Extra breakdowns ---
    territories_visited: int = 0
    visit_type_breakdown: Mapping[str, int] = field(default_factory=dict)
    visited_countries: tuple[str, ...] = ()    # names, alphabetical
    bucket_list: tuple[str, ...] = ()          # unvisited names, alphabetical

    def __post_init__(self):
        # Frozen all the way down: the breakdown is a read-only view of a copy.
        object.__setattr__(self, "visit_type_breakdown",
                           MappingProxyType(dict(self.visit_type_breakdown)))

    def to_dict(self) -> dict:
        return {
            "totalCountries": self.total_countries,
            "visitedCount": self.visited_count,
            "visitedPercentage": self.visited_percentage,
            "continentStats": [cs.to_dict() for cs in self.continent_stats],
            "timeline": [entry.to_dict() for entry in self.timeline],
            "totalTrips": self.total_trips,
            "totalDaysTraveled": self.total_days_traveled,
            "averageTripLength": self.average_trip_length,
            "territoriesVisited": self.territories_visited,
            "visitTypeBreakdown": dict(self.visit_type_breakdown),
            "visitedCountries": list(self.visited_countries),
            "bucketList": list(self.bucket_list),
        }
