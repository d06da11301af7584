# =============================================================================
# core/migration.py  -  Record Schema Detection, Migration & Reconciliation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns whatever JSON came off the disk into a current-schema TravelData.
#   Three steps, each a pure function:
#
#     detect_schema(raw)          -> CURRENT | LEGACY | UNKNOWN
#     migrate(raw)                -> dict in the current shape
#     merge_with_catalogue(data)  -> MergeResult (catalogue-aligned document)
#
#   load_travel_data() chains the first two and parses the result.
#
# SCHEMA HISTORY:
#   v1 (legacy, no "version" key):  country.visited + country.visitDate
#   v2 (current):                   country.visits[]
#
#   The two shapes are told apart by ONE check: is "version" present?
#   There is no structural guessing beyond that.
#
# FAILURE MODES:
#   - Not a JSON object / no countries list -> UnrecognizedDocumentError
#   - Unknown version number                -> returned as-is, warning logged
#   - Legacy visited=true without visitDate -> no visit, warning logged
#   - Malformed JSON text never reaches this module (core/storage.py).
# =============================================================================

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable

from core.models import (
    Country,
    LegacyCountry,
    LegacyTravelData,
    TravelData,
    Visit,
)

logger = logging.getLogger(__name__)

CURRENT_VERSION = 2


class UnrecognizedDocumentError(ValueError):
    """The input cannot be interpreted as a travel document at all."""


class SchemaKind(Enum):
    """Which document shape a decoded JSON value claims to be."""
    CURRENT = "current"
    LEGACY  = "legacy"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class MergeResult:
    """A catalogue-aligned document plus the codes the merge left out.

    Attributes:
        data:          The merged TravelData (catalogue membership).
        dropped_codes: Codes present in the loaded document but absent from
                       the catalogue, in their original order.
    """

    data: TravelData
    dropped_codes: tuple[str, ...] = ()


# -----------------------------------------------------------------------------
# Step 1: detection
# -----------------------------------------------------------------------------
def detect_schema(raw: Any) -> SchemaKind:
    """Classify a decoded JSON value by its "version" field.

    Raises:
        UnrecognizedDocumentError: raw is not a JSON object.
    """
    if not isinstance(raw, dict):
        raise UnrecognizedDocumentError(
            f"Expected a JSON object, got {type(raw).__name__}."
        )
    if "version" not in raw or raw["version"] is None:
        return SchemaKind.LEGACY
    if raw["version"] == CURRENT_VERSION:
        return SchemaKind.CURRENT
    return SchemaKind.UNKNOWN


# -----------------------------------------------------------------------------
# Step 2: migration
# -----------------------------------------------------------------------------
def _legacy_visits(country: LegacyCountry) -> tuple[Visit, ...]:
    """The single visit synthesized from a legacy country, if any."""
    if not country.visited:
        return ()
    if not country.visit_date:
        logger.warning(
            "Legacy country %s is marked visited but has no visitDate; "
            "no visit was created.", country.code,
        )
        return ()
    return (Visit(start_date=country.visit_date),)


def upgrade_legacy(legacy: LegacyTravelData) -> TravelData:
    """Convert a legacy document into the current schema.

    Each legacy country gets at most one visit: present iff it was marked
    visited AND has a visitDate, starting on that date.  It has no end
    date, type, notes, rating or photos (the legacy schema had none).
    """
    countries = []
    for old in legacy.countries:
        countries.append(Country(
            code=old.code,
            name=old.name,
            continent=old.continent,
            is_territory=old.is_territory,
            visits=_legacy_visits(old),
        ))

    return TravelData(
        version=CURRENT_VERSION,
        countries=tuple(countries),
        last_updated=legacy.last_updated,
    )


def migrate(raw: Any) -> Any:
    """Normalize a decoded JSON document into the current schema.

    - current version: returned unchanged (same object)
    - no version:      upgraded from the legacy shape
    - other version:   returned unchanged, with a warning

    Idempotent: migrate(migrate(d)) == migrate(d).

    Raises:
        UnrecognizedDocumentError: raw is not a JSON object, or a legacy
            document without a "countries" list.
    """
    kind = detect_schema(raw)

    if kind is SchemaKind.CURRENT:
        return raw

    if kind is SchemaKind.UNKNOWN:
        logger.warning("Unknown data version: %r; leaving document unchanged.",
                       raw["version"])
        return raw

    if not isinstance(raw.get("countries"), list):
        raise UnrecognizedDocumentError(
            "Legacy document has no 'countries' list."
        )
    try:
        legacy = LegacyTravelData.from_dict(raw)
    except (KeyError, TypeError, AttributeError) as e:
        raise UnrecognizedDocumentError(f"Malformed legacy document: {e}") from e

    migrated = upgrade_legacy(legacy)
    logger.info("Migrated legacy document: %d countries, %d visited.",
                len(migrated.countries),
                sum(1 for c in migrated.countries if c.visits))
    return migrated.to_dict()


def load_travel_data(raw: Any) -> TravelData:
    """Migrate a decoded JSON document and parse it into a TravelData.

    Schema shape is trusted past migration; a document whose countries
    cannot even be read is reported as unrecognized.

    Raises:
        UnrecognizedDocumentError: the document cannot be parsed.
    """
    migrated = migrate(raw)
    if not isinstance(migrated.get("countries"), list):
        raise UnrecognizedDocumentError("Document has no 'countries' list.")
    try:
        return TravelData.from_dict(migrated)
    except (KeyError, TypeError, AttributeError) as e:
        raise UnrecognizedDocumentError(f"Malformed travel document: {e}") from e


# -----------------------------------------------------------------------------
# Step 3: catalogue reconciliation
# -----------------------------------------------------------------------------
def merge_with_catalogue(
    loaded: TravelData,
    catalogue: Iterable[Country],
) -> MergeResult:
    """Align a loaded document with the current catalogue.

    For every catalogue country, adopt the loaded visits for the same code;
    otherwise keep the catalogue default (no visits).  Name, continent and
    territory flag always come from the catalogue.

    Countries in the loaded document but not in the catalogue are dropped
    from the result.  Their codes are returned in MergeResult.dropped_codes
    and logged.
    """
    catalogue = tuple(catalogue)
    loaded_by_code: dict[str, Country] = {}
    for country in loaded.countries:
        loaded_by_code.setdefault(country.code, country)

    merged = tuple(
        replace(entry, visits=loaded_by_code[entry.code].visits)
        if entry.code in loaded_by_code else entry
        for entry in catalogue
    )

    catalogue_codes = {entry.code for entry in catalogue}
    dropped = tuple(
        country.code for country in loaded.countries
        if country.code not in catalogue_codes
    )
    if dropped:
        logger.warning("Dropped %d country code(s) not in the catalogue: %s",
                       len(dropped), ", ".join(dropped))

    return MergeResult(
        data=TravelData(
            version=CURRENT_VERSION,
            countries=merged,
            last_updated=loaded.last_updated,
        ),
        dropped_codes=dropped,
    )
