# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines every MCP tool the travel-journal agent can call.  Each tool is
#   a thin wrapper around core/: it looks up the session's TravelStore,
#   calls one operation, and returns a plain dict.
#
# HOW IT WORKS (the flow):
#   1. The agent decides it needs to read or change the travel record
#   2. It calls a tool by name via MCP (e.g. "add_country_visit")
#   3. FastMCP routes the call to the decorated function below
#   4. The function calls core/ and formats the result
#   5. The agent receives a compact JSON-able dict
#
# THE RECORD:
#   One TravelStore per server process, opened lazily from the autosave
#   path (TRAVEL_TRACKER_DATA_PATH, see core/storage.py).  Every successful
#   change is written back immediately.
#
# ERRORS:
#   core/ raises typed exceptions.  Tools never let them cross the protocol:
#   they come back as {"error": ..., "hint": ...} so the agent can recover.
#
# RUNNING THIS SERVER:
#   a) Standalone:      python -m tools.mcp_server
#   b) From the agent:  spawned over stdio by agent/journal_agent.py
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from core import ledger
from core.geo_codes import resolve_country_code
from core.ledger import VisitError
from core.migration import UnrecognizedDocumentError
from core.models import CONTINENTS, VISIT_TYPES, Country
from core.report import render_report
from core.storage import StorageError, default_data_path, load_document
from core.store import TravelStore, UnknownCountryError

load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP JSON protocol, and anything else
# written there would corrupt it.
#
# Colours: CYAN for incoming requests, YELLOW for status, GREEN for responses.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: "
                 f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}")
    return result


def _error(tool_name: str, message: str, **extra) -> dict:
    _log_status(message)
    return _log_response(tool_name, {"error": message, **extra})


# =============================================================================
# The session's travel record
# =============================================================================
_store: Optional[TravelStore] = None


def get_store() -> TravelStore:
    """Open the autosave record on first use and keep it for the session."""
    global _store
    if _store is None:
        path = default_data_path()
        _store = TravelStore.open(path)
        _log_status(f"Opened travel record at {path}")
        if _store.dropped_codes:
            _log_status(f"Dropped codes not in catalogue: {list(_store.dropped_codes)}")
    return _store


def _country_summary(country: Country) -> dict:
    """The short per-country shape used in lists."""
    return {
        "code": country.code,
        "name": country.name,
        "continent": country.continent,
        "is_territory": country.is_territory,
        "visited": ledger.is_visited(country),
        "visit_count": len(country.visits),
        "most_recent_visit": ledger.most_recent_visit_date(country),
    }


def _country_details(country: Country) -> dict:
    """The full per-country shape: summary plus every visit (with index)."""
    details = _country_summary(country)
    try:
        total_days = ledger.total_days_in_country(country)
    except ValueError:
        total_days = None
    details.update({
        "first_visit": ledger.first_visit_date(country),
        "latest_visit_type": ledger.latest_visit_type(country),
        "total_days": total_days,
        "photos": ledger.all_photos(country),
        "visits": [
            {"index": i, **asdict(visit), "photos": list(visit.photos)}
            for i, visit in enumerate(country.visits)
        ],
    })
    return details


def _save_failed(tool_name: str, exc: OSError) -> dict:
    # The change is applied in memory; only the autosave write failed.
    return _error(
        tool_name, f"Change applied but the travel record could not be saved: {exc}",
        hint="Check TRAVEL_TRACKER_DATA_PATH, then use export_travel_data to save a copy.",
    )


def _unknown_country(tool_name: str, code: str) -> dict:
    return _error(
        tool_name, f"Country code '{code}' not found.",
        hint="Use list_countries with a search term to find the 3-letter code.",
    )


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("travel-tracker")


# =============================================================================
# TOOL 1: resolve_map_feature
# =============================================================================
@mcp.tool()
def resolve_map_feature(feature_id: str, feature_name: str = "") -> dict:
    """Translate a world-map feature into the tracker's 3-letter country code.

    WHEN TO CALL THIS: When the user refers to a map shape by its numeric
    boundary-dataset ID (e.g. "004", "304", "-99") rather than by name.

    Args:
        feature_id: Numeric feature ID from the world-boundaries dataset.
        feature_name: The feature's name; used for shapes without a stable
                      ID (Kosovo, Somaliland, Northern Cyprus).

    Returns:
        A dict with the resolved "code" and the matching country summary,
        or an error if the feature has no associated country.
    """
    _log_request("resolve_map_feature", feature_id=feature_id, feature_name=feature_name)

    code = resolve_country_code(feature_id, feature_name)
    if code is None:
        return _error("resolve_map_feature",
                      f"No country is associated with feature '{feature_id}'.")

    result = {"feature_id": feature_id, "code": code}
    found = get_store().data.find(code)
    if found is not None:
        result["country"] = _country_summary(found)
    return _log_response("resolve_map_feature", result)


# =============================================================================
# TOOL 2: list_countries
# =============================================================================
@mcp.tool()
def list_countries(
    status: str = "all",
    continent: str = "",
    search: str = "",
    include_territories: bool = True,
) -> dict:
    """List countries in the travel record, sorted by name.

    WHEN TO CALL THIS: To find a country's 3-letter code, or to answer
    "which countries have I visited / not visited".

    Args:
        status: "all", "visited" or "unvisited".
        continent: Optional continent filter (Africa, Asia, Europe,
                   North America, South America, Oceania).
        search: Optional case-insensitive substring of the country name.
        include_territories: Whether to include disputed/dependent territories.

    Returns:
        A dict with "count" and "countries" (code, name, continent,
        is_territory, visited, visit_count, most_recent_visit).
    """
    _log_request("list_countries", status=status, continent=continent,
                 search=search, include_territories=include_territories)

    if status not in ("all", "visited", "unvisited"):
        return _error("list_countries", f"Unknown status '{status}'.",
                      hint="Use 'all', 'visited' or 'unvisited'.")
    if continent and continent not in CONTINENTS:
        return _error("list_countries", f"Unknown continent '{continent}'.",
                      valid_continents=list(CONTINENTS))

    needle = search.strip().lower()
    matches = [
        c for c in get_store().countries
        if (include_territories or not c.is_territory)
        and (not continent or c.continent == continent)
        and (not needle or needle in c.name.lower())
        and (status == "all" or ledger.is_visited(c) == (status == "visited"))
    ]
    matches.sort(key=lambda c: c.name)
    _log_status(f"{len(matches)} countries matched")

    return _log_response("list_countries", {
        "count": len(matches),
        "countries": [_country_summary(c) for c in matches],
    })


# =============================================================================
# TOOL 3: get_country_details
# =============================================================================
@mcp.tool()
def get_country_details(code: str) -> dict:
    """Get one country's full visit history and derived figures.

    Args:
        code: 3-letter country code (e.g. "FRA").

    Returns:
        Summary fields plus first_visit, latest_visit_type, total_days,
        photos, and every visit with its index (needed for update/delete).
    """
    _log_request("get_country_details", code=code)
    try:
        country = get_store().country(code)
    except UnknownCountryError:
        return _unknown_country("get_country_details", code)
    return _log_response("get_country_details", _country_details(country))


# =============================================================================
# TOOL 4-7: visit changes
# =============================================================================
# Every change goes through the TravelStore, which refreshes lastUpdated
# and autosaves.  Invalid data (end before start, bad rating, bad index)
# is refused with nothing changed.
# =============================================================================
def _visit_fields(**candidates) -> dict:
    """Keep only the arguments the caller actually supplied (not None)."""
    return {key: value for key, value in candidates.items() if value is not None}


@mcp.tool()
def add_country_visit(
    code: str,
    start_date: str = "",
    end_date: str = "",
    visit_type: str = "",
    notes: str = "",
    rating: Optional[float] = None,
    photos: Optional[list[str]] = None,
) -> dict:
    """Record a new visit to a country (this marks it as visited).

    Args:
        code: 3-letter country code.
        start_date: ISO date (YYYY-MM-DD); defaults to today if empty.
        end_date: Optional ISO date, must not be before start_date.
        visit_type: Optional "business", "leisure" or "transit".
        notes: Optional free-text memories.
        rating: Optional 0.0-5.0.
        photos: Optional list of photo storage references.

    Returns:
        The country's updated details, or an error if the data is invalid.
    """
    _log_request("add_country_visit", code=code, start_date=start_date,
                 end_date=end_date, visit_type=visit_type, notes=notes,
                 rating=rating, photos=photos)
    visit_data = _visit_fields(start_date=start_date, end_date=end_date,
                               visit_type=visit_type, notes=notes,
                               rating=rating, photos=photos)
    try:
        country = get_store().add_visit(code, visit_data)
    except UnknownCountryError:
        return _unknown_country("add_country_visit", code)
    except OSError as e:
        return _save_failed("add_country_visit", e)
    except VisitError as e:
        return _error("add_country_visit", str(e),
                      valid_visit_types=list(VISIT_TYPES))
    _log_status(f"{country.name} now has {len(country.visits)} visit(s)")
    return _log_response("add_country_visit", _country_details(country))


@mcp.tool()
def update_country_visit(
    code: str,
    index: int,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    visit_type: Optional[str] = None,
    notes: Optional[str] = None,
    rating: Optional[float] = None,
    photos: Optional[list[str]] = None,
) -> dict:
    """Change some fields of an existing visit.

    Only the arguments you pass are changed.  Pass an empty string for
    end_date, visit_type or notes to clear that field.

    Args:
        code: 3-letter country code.
        index: Visit index from get_country_details (0 = first recorded).
        start_date, end_date, visit_type, notes, rating, photos: New values.

    Returns:
        The country's updated details, or an error (nothing is changed).
    """
    _log_request("update_country_visit", code=code, index=index,
                 start_date=start_date, end_date=end_date, visit_type=visit_type,
                 notes=notes, rating=rating, photos=photos)
    visit_data = _visit_fields(start_date=start_date, end_date=end_date,
                               visit_type=visit_type, notes=notes,
                               rating=rating, photos=photos)
    try:
        country = get_store().update_visit(code, index, visit_data)
    except UnknownCountryError:
        return _unknown_country("update_country_visit", code)
    except OSError as e:
        return _save_failed("update_country_visit", e)
    except VisitError as e:
        return _error("update_country_visit", str(e),
                      hint="Call get_country_details to see valid visit indexes.")
    return _log_response("update_country_visit", _country_details(country))


@mcp.tool()
def delete_country_visit(code: str, index: int) -> dict:
    """Delete one visit.  Later visits shift down by one index.

    Args:
        code: 3-letter country code.
        index: Visit index from get_country_details.
    """
    _log_request("delete_country_visit", code=code, index=index)
    try:
        country = get_store().delete_visit(code, index)
    except UnknownCountryError:
        return _unknown_country("delete_country_visit", code)
    except OSError as e:
        return _save_failed("delete_country_visit", e)
    except VisitError as e:
        return _error("delete_country_visit", str(e),
                      hint="Call get_country_details to see valid visit indexes.")
    return _log_response("delete_country_visit", _country_details(country))


@mcp.tool()
def clear_country_visits(code: str) -> dict:
    """Remove every visit to a country ("unmark as visited").

    Args:
        code: 3-letter country code.
    """
    _log_request("clear_country_visits", code=code)
    try:
        country = get_store().clear_visits(code)
    except UnknownCountryError:
        return _unknown_country("clear_country_visits", code)
    except OSError as e:
        return _save_failed("clear_country_visits", e)
    return _log_response("clear_country_visits", _country_summary(country))


# =============================================================================
# TOOL 8: get_travel_statistics
# =============================================================================
@mcp.tool()
def get_travel_statistics(include_territories: bool = True) -> dict:
    """Summarize the travel record.

    WHEN TO CALL THIS: For any "how much of the world have I seen" question.

    Args:
        include_territories: False to count sovereign countries only.

    Returns:
        totalCountries, visitedCount, visitedPercentage, continentStats,
        timeline (countries grouped by most recent visit date, newest first),
        totalTrips, totalDaysTraveled, averageTripLength, territoriesVisited,
        visitTypeBreakdown.  The long name lists are left out; use
        list_countries for those.
    """
    _log_request("get_travel_statistics", include_territories=include_territories)
    stats = get_store().statistics(include_territories)
    result = stats.to_dict()
    result.pop("visitedCountries", None)
    result.pop("bucketList", None)
    return _log_response("get_travel_statistics", result)


# =============================================================================
# TOOL 9: get_travel_report
# =============================================================================
@mcp.tool()
def get_travel_report(include_territories: bool = True) -> dict:
    """Render the full plain-text travel report.

    Args:
        include_territories: False to count sovereign countries only.

    Returns:
        {"report": "<multi-line text>"}
    """
    _log_request("get_travel_report", include_territories=include_territories)
    report = render_report(get_store().statistics(include_territories))
    _log_status(f"Report is {len(report.splitlines())} lines")
    return {"report": report}


# =============================================================================
# TOOL 10-11: import / export
# =============================================================================
@mcp.tool()
def import_travel_data(path: str) -> dict:
    """Replace the current record with a travel-data JSON file.

    Older (unversioned) files are migrated automatically.  Countries the
    catalogue does not know are dropped and listed in "dropped_codes".

    Args:
        path: Path to a travel-data JSON file.
    """
    _log_request("import_travel_data", path=path)
    try:
        result = load_document(path)
    except (StorageError, UnrecognizedDocumentError) as e:
        return _error("import_travel_data", str(e))

    store = get_store()
    try:
        store.replace_data(result.data)
    except OSError as e:
        return _save_failed("import_travel_data", e)
    stats = store.statistics()
    return _log_response("import_travel_data", {
        "imported_from": path,
        "visited_count": stats.visited_count,
        "total_trips": stats.total_trips,
        "dropped_codes": list(result.dropped_codes),
    })


@mcp.tool()
def export_travel_data(path: str) -> dict:
    """Save a copy of the current record to a JSON file.

    Args:
        path: Destination file path.
    """
    _log_request("export_travel_data", path=path)
    try:
        written = get_store().save(path)
    except OSError as e:
        return _error("export_travel_data", f"Could not write {path}: {e}")
    return _log_response("export_travel_data", {"saved_to": written})


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
