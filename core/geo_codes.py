# =============================================================================
# core/geo_codes.py  -  Geo-Code Resolver (map feature ID -> country code)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   A world-boundaries dataset identifies each shape by a numeric ID
#   (UN M49, zero-padded: "004" is Afghanistan).  The tracker identifies
#   countries by a stable 3-letter code ("AFG").  resolve_country_code()
#   translates one into the other.
#
# THREE STRATEGIES, FIXED PRECEDENCE:
#   1. Overrides     - exact-ID special cases that must map to a territory
#                      code distinct from the dataset's own categorization.
#   2. Table lookup  - the direct M49 -> code table below.
#   3. Name fallback - case-insensitive substring rules for entities whose
#                      numeric ID is absent or the ambiguous sentinel "-99"
#                      (Kosovo, Somaliland, Northern Cyprus).
#   The first strategy that returns a code wins.  Each strategy is a plain
#   function so it can be tested on its own.
#
# TOTALITY:
#   resolve_country_code() never raises.  Anything it cannot map comes back
#   as UNRESOLVED (None), which callers treat as "no associated country".
# =============================================================================

from typing import Callable, Optional, Union

UNRESOLVED = None

# The dataset's "no official numeric ID" marker.  Several unrelated
# features share it, so it never resolves through the table.
AMBIGUOUS_ID = "-99"


# -----------------------------------------------------------------------------
# Direct table: UN M49 numeric ID -> 3-letter code
# -----------------------------------------------------------------------------
# Keys keep their leading zeros to match the dataset ("004", not "4").
# -----------------------------------------------------------------------------
_NUMERIC_ID_TO_CODE: dict[str, str] = {
    "004": "AFG", "008": "ALB", "010": "ATA", "012": "DZA", "016": "ASM", "020": "AND",
    "024": "AGO", "028": "ATG", "031": "AZE", "032": "ARG", "036": "AUS", "040": "AUT",
    "044": "BHS", "048": "BHR", "050": "BGD", "051": "ARM", "052": "BRB", "056": "BEL",
    "060": "BMU", "064": "BTN", "068": "BOL", "070": "BIH", "072": "BWA", "074": "BVT",
    "076": "BRA", "084": "BLZ", "086": "IOT", "090": "SLB", "092": "VGB", "096": "BRN",
    "100": "BGR", "104": "MMR", "108": "BDI", "112": "BLR", "116": "KHM", "120": "CMR",
    "124": "CAN", "132": "CPV", "136": "CYM", "140": "CAF", "144": "LKA", "148": "TCD",
    "152": "CHL", "156": "CHN", "158": "TWN", "162": "CXR", "166": "CCK", "170": "COL",
    "174": "COM", "175": "MYT", "178": "COG", "180": "COD", "184": "COK", "188": "CRI",
    "191": "HRV", "192": "CUB", "196": "CYP", "203": "CZE", "204": "BEN", "208": "DNK",
    "212": "DMA", "214": "DOM", "218": "ECU", "222": "SLV", "226": "GNQ", "231": "ETH",
    "232": "ERI", "233": "EST", "234": "FRO", "238": "FLK", "239": "SGS", "242": "FJI",
    "246": "FIN", "248": "ALA", "250": "FRA", "254": "GUF", "258": "PYF", "260": "ATF",
    "262": "DJI", "266": "GAB", "268": "GEO", "270": "GMB", "275": "PSE", "276": "DEU",
    "288": "GHA", "292": "GIB", "296": "KIR", "300": "GRC", "304": "GRL", "308": "GRD",
    "312": "GLP", "316": "GUM", "320": "GTM", "324": "GIN", "328": "GUY", "332": "HTI",
    "334": "HMD", "336": "VAT", "340": "HND", "344": "HKG", "348": "HUN", "352": "ISL",
    "356": "IND", "360": "IDN", "364": "IRN", "368": "IRQ", "372": "IRL", "376": "ISR",
    "380": "ITA", "384": "CIV", "388": "JAM", "392": "JPN", "398": "KAZ", "400": "JOR",
    "404": "KEN", "408": "PRK", "410": "KOR", "414": "KWT", "417": "KGZ", "418": "LAO",
    "422": "LBN", "426": "LSO", "428": "LVA", "430": "LBR", "434": "LBY", "438": "LIE",
    "440": "LTU", "442": "LUX", "446": "MAC", "450": "MDG", "454": "MWI", "458": "MYS",
    "462": "MDV", "466": "MLI", "470": "MLT", "474": "MTQ", "478": "MRT", "480": "MUS",
    "484": "MEX", "492": "MCO", "496": "MNG", "498": "MDA", "499": "MNE", "500": "MSR",
    "504": "MAR", "508": "MOZ", "512": "OMN", "516": "NAM", "520": "NRU", "524": "NPL",
    "528": "NLD", "531": "CUW", "533": "ABW", "534": "SXM", "535": "BES", "540": "NCL",
    "548": "VUT", "554": "NZL", "558": "NIC", "562": "NER", "566": "NGA", "570": "NIU",
    "574": "NFK", "578": "NOR", "580": "MNP", "581": "UMI", "583": "FSM", "584": "MHL",
    "585": "PLW", "586": "PAK", "591": "PAN", "598": "PNG", "600": "PRY", "604": "PER",
    "608": "PHL", "612": "PCN", "616": "POL", "620": "PRT", "624": "GNB", "626": "TLS",
    "630": "PRI", "634": "QAT", "638": "REU", "642": "ROU", "643": "RUS", "646": "RWA",
    "652": "BLM", "654": "SHN", "659": "KNA", "660": "AIA", "662": "LCA", "663": "MAF",
    "666": "SPM", "670": "VCT", "674": "SMR", "678": "STP", "682": "SAU", "686": "SEN",
    "688": "SRB", "690": "SYC", "694": "SLE", "702": "SGP", "703": "SVK", "704": "VNM",
    "705": "SVN", "706": "SOM", "710": "ZAF", "716": "ZWE", "724": "ESP", "728": "SSD",
    "729": "SDN", "732": "ESH", "740": "SUR", "744": "SJM", "748": "SWZ", "752": "SWE",
    "756": "CHE", "760": "SYR", "762": "TJK", "764": "THA", "768": "TGO", "772": "TKL",
    "776": "TON", "780": "TTO", "784": "ARE", "788": "TUN", "792": "TUR", "795": "TKM",
    "796": "TCA", "798": "TUV", "800": "UGA", "804": "UKR", "807": "MKD", "818": "EGY",
    "826": "GBR", "831": "GGY", "832": "JEY", "833": "IMN", "834": "TZA", "840": "USA",
    "850": "VIR", "854": "BFA", "858": "URY", "860": "UZB", "862": "VEN", "876": "WLF",
    "882": "WSM", "887": "YEM", "894": "ZMB",
}

# -----------------------------------------------------------------------------
# Overrides: evaluated before the table, so they win for these exact IDs
# -----------------------------------------------------------------------------
_ID_OVERRIDES: dict[str, str] = {
    "304": "GRL",   # Greenland, tracked as a territory, not as Denmark
    "732": "ESH",   # Western Sahara
    "010": "ATA",   # Antarctica
}

# -----------------------------------------------------------------------------
# Name fallback rules, tried in this order
# -----------------------------------------------------------------------------
_NAME_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("kosovo",), "XKX"),
    (("somaliland",), "SOL"),
    (("n. cyprus", "northern cyprus"), "NCY"),
)

Resolver = Callable[[str, str], Optional[str]]


def normalize_feature_id(feature_id: Union[str, int, None]) -> str:
    """Bring a feature ID into the dataset's zero-padded string form.

    Integers are padded to three digits (4 -> "004"); negative integers
    keep their sign ("-99").  None and blank strings become "".
    """
    if feature_id is None or isinstance(feature_id, bool):
        return ""
    if isinstance(feature_id, int):
        return str(feature_id) if feature_id < 0 else f"{feature_id:03d}"
    text = str(feature_id).strip()
    if text.isdigit():
        return text.zfill(3)
    return text


def resolve_by_override(feature_id: str, feature_name: str) -> Optional[str]:
    """Exact-ID special cases for territories."""
    return _ID_OVERRIDES.get(feature_id)


def resolve_by_table(feature_id: str, feature_name: str) -> Optional[str]:
    """Direct M49 table lookup.  The ambiguous sentinel never matches."""
    if not feature_id or feature_id == AMBIGUOUS_ID:
        return None
    return _NUMERIC_ID_TO_CODE.get(feature_id)


def resolve_by_name(feature_id: str, feature_name: str) -> Optional[str]:
    """Case-insensitive substring match on the feature name."""
    if not feature_name:
        return None
    name = feature_name.lower()
    for needles, code in _NAME_RULES:
        if any(needle in name for needle in needles):
            return code
    return None


# Precedence order: first non-None answer wins.
RESOLVERS: tuple[Resolver, ...] = (
    resolve_by_override,
    resolve_by_table,
    resolve_by_name,
)


def resolve_country_code(
    feature_id: Union[str, int, None],
    feature_name: Optional[str] = None,
) -> Optional[str]:
    """Translate a map feature into the tracker's 3-letter country code.

    Args:
        feature_id:   Numeric ID from the boundaries dataset ("004", "-99").
        feature_name: The feature's display name, used only when the ID
                      cannot be resolved on its own.

    Returns:
        The 3-letter code, or UNRESOLVED (None).
    """
    try:
        normalized_id = normalize_feature_id(feature_id)
        name = feature_name if isinstance(feature_name, str) else ""
    except (TypeError, ValueError):
        return UNRESOLVED

    for resolver in RESOLVERS:
        code = resolver(normalized_id, name)
        if code:
            return code
    return UNRESOLVED


def known_feature_ids() -> list[str]:
    """Every numeric ID that resolves without a name (table + overrides)."""
    return sorted(set(_NUMERIC_ID_TO_CODE) | set(_ID_OVERRIDES))
