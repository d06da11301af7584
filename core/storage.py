# =============================================================================
# core/storage.py  -  JSON Document Storage
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads and writes the travel document as a UTF-8, pretty-printed JSON
#   file.  This is the only module in core/ that touches the filesystem.
#
# THE LOAD PATH:
#   read JSON -> core.migration.load_travel_data (migrate + parse)
#             -> core.migration.merge_with_catalogue (align with catalogue)
#
# DEFAULT LOCATION:
#   The autosave file lives at TRAVEL_TRACKER_DATA_PATH if that environment
#   variable is set (entry points load it from .env), otherwise at
#   ~/.travel-tracker/travel-data.json.
# =============================================================================

import json
import logging
import os
import tempfile
from typing import Any, Iterable, Optional

from core.catalogue import build_catalogue
from core.migration import MergeResult, load_travel_data, merge_with_catalogue
from core.models import Country, TravelData

logger = logging.getLogger(__name__)

DATA_PATH_ENV = "TRAVEL_TRACKER_DATA_PATH"
DEFAULT_DATA_PATH = os.path.join("~", ".travel-tracker", "travel-data.json")


class StorageError(RuntimeError):
    """The document file could not be read or decoded."""


def default_data_path() -> str:
    """Absolute path of the autosave document."""
    configured = os.environ.get(DATA_PATH_ENV) or DEFAULT_DATA_PATH
    return os.path.abspath(os.path.expanduser(configured))


def read_json(path: str) -> Any:
    """Read and decode a JSON file.

    Raises:
        StorageError: the file is missing, unreadable or not valid JSON.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise StorageError(f"Could not read travel data from {path}: {e}") from e


def load_document(
    path: str,
    catalogue: Optional[Iterable[Country]] = None,
) -> MergeResult:
    """Load, migrate and reconcile a travel document from disk.

    Args:
        path:      JSON file to read.
        catalogue: Country set to reconcile against (default: the built-in
                   catalogue).

    Raises:
        StorageError:              the file could not be read or decoded.
        UnrecognizedDocumentError: the JSON is not a travel document.
    """
    raw = read_json(path)
    data = load_travel_data(raw)
    result = merge_with_catalogue(data, catalogue if catalogue is not None else build_catalogue())
    logger.info("Loaded %s: %d countries, %d visited.", path,
                len(result.data.countries),
                sum(1 for c in result.data.countries if c.visits))
    return result


def save_document(path: str, data: TravelData) -> str:
    """Write the document as pretty-printed JSON, creating parent folders.

    The JSON goes to a temporary file in the same folder, which then
    replaces the target in one step.  An interrupted write leaves the
    previous file intact.

    Returns:
        The absolute path written.
    """
    path = os.path.abspath(os.path.expanduser(path))
    folder = os.path.dirname(path)
    os.makedirs(folder, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(
        dir=folder, prefix=f".{os.path.basename(path)}.", suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data.to_dict(), f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise
    logger.debug("Saved travel data to %s", path)
    return path
