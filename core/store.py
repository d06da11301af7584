# =============================================================================
# core/store.py  -  TravelStore (single owner of the current document)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   The ledger functions work on one Country at a time and know nothing
#   about the document around it.  TravelStore is the explicitly owned
#   object that holds the current TravelData and applies ledger operations
#   to it by country code:
#
#     store.add_visit("FRA", {"start_date": "2024-05-01"})
#       -> finds France
#       -> core.ledger.add_visit() builds a new Country
#       -> a new TravelData snapshot replaces the old one
#       -> lastUpdated is rewritten
#       -> the document is autosaved (if an autosave path is set)
#
# SINGLE WRITER:
#   One store per user session.  Callers hold the store and pass it around;
#   nothing in core/ keeps a global document.
#
# FAILURES:
#   A failing ledger operation raises before the snapshot is replaced, so
#   the document never ends up half-updated.
# =============================================================================

import logging
import os
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping, Optional

from core import ledger
from core.catalogue import build_catalogue
from core.migration import CURRENT_VERSION
from core.models import Country, TravelData, TravelStatistics
from core.statistics import calculate_statistics
from core.storage import load_document, save_document

logger = logging.getLogger(__name__)


class UnknownCountryError(KeyError):
    """No country with this code exists in the document."""


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO timestamp in UTC with milliseconds: "2024-05-01T09:30:00.000Z"."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def new_travel_data(now: Optional[datetime] = None) -> TravelData:
    """A fresh document: the whole catalogue, nothing visited."""
    return TravelData(
        version=CURRENT_VERSION,
        countries=build_catalogue(),
        last_updated=utc_timestamp(now),
    )


class TravelStore:
    """Holds the current travel document and applies visit operations to it.

    Args:
        data:          Starting document (default: a fresh catalogue).
        autosave_path: If set, the document is written there after every
                       successful mutation.
        clock:         Returns the current UTC datetime; used for
                       lastUpdated.  Tests pass a fixed clock.
    """

    def __init__(
        self,
        data: Optional[TravelData] = None,
        autosave_path: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._data = data if data is not None else new_travel_data(self._clock())
        self.autosave_path = autosave_path
        self.dropped_codes: tuple[str, ...] = ()

    # ------------------------------------------------------------------ #
    #  Construction from disk
    # ------------------------------------------------------------------ #

    @classmethod
    def open(cls, path: str, autosave: bool = True, **kwargs) -> "TravelStore":
        """Load the document at path, or start fresh if the file is missing.

        Raises:
            StorageError / UnrecognizedDocumentError: the file exists but
                cannot be loaded.
        """
        store = cls(autosave_path=path if autosave else None, **kwargs)
        if os.path.exists(path):
            store.load(path)
        else:
            logger.info("No travel data at %s; starting with an empty record.", path)
        return store

    def load(self, path: str) -> tuple[str, ...]:
        """Replace the document with the one at path.

        Returns:
            Codes that were dropped because the catalogue does not list them.
        """
        result = load_document(path)
        self._data = result.data
        self.dropped_codes = result.dropped_codes
        return result.dropped_codes

    def save(self, path: Optional[str] = None) -> str:
        """Write the document to path (default: the autosave path)."""
        target = path or self.autosave_path
        if not target:
            raise ValueError("No path given and no autosave path configured.")
        return save_document(target, self._data)

    # ------------------------------------------------------------------ #
    #  Reads
    # ------------------------------------------------------------------ #

    @property
    def data(self) -> TravelData:
        """The current (immutable) document snapshot."""
        return self._data

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._data.countries

    def country(self, code: str) -> Country:
        """Look up a country by code (case-insensitive).

        Raises:
            UnknownCountryError: the code is not in the document.
        """
        found = self._data.find(code.strip().upper())
        if found is None:
            raise UnknownCountryError(code)
        return found

    def statistics(self, include_territories: bool = True) -> TravelStatistics:
        return calculate_statistics(self._data.countries, include_territories)

    # ------------------------------------------------------------------ #
    #  Mutations
    # ------------------------------------------------------------------ #

    def add_visit(
        self,
        code: str,
        visit_data: Optional[Mapping[str, Any]] = None,
        today: Optional[date] = None,
    ) -> Country:
        return self._apply(code, ledger.add_visit, visit_data, today)

    def update_visit(self, code: str, index: int, visit_data: Mapping[str, Any]) -> Country:
        return self._apply(code, ledger.update_visit, index, visit_data)

    def delete_visit(self, code: str, index: int) -> Country:
        return self._apply(code, ledger.delete_visit, index)

    def clear_visits(self, code: str) -> Country:
        return self._apply(code, ledger.clear_visits)

    def replace_data(self, data: TravelData) -> None:
        """Swap in a whole document (e.g. after an import)."""
        self._data = data
        self._autosave()

    def _apply(self, code: str, operation: Callable[..., Country], *args) -> Country:
        current = self.country(code)
        updated = operation(current, *args)

        countries = tuple(
            updated if c.code == current.code else c
            for c in self._data.countries
        )
        self._data = replace(
            self._data,
            countries=countries,
            last_updated=utc_timestamp(self._clock()),
        )
        logger.info("%s %s: %d visit(s)", operation.__name__, updated.code,
                    len(updated.visits))
        self._autosave()
        return updated

    def _autosave(self) -> None:
        if self.autosave_path:
            save_document(self.autosave_path, self._data)
