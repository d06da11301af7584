# =============================================================================
# core/catalogue.py  -  The Country Catalogue (static reference table)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the fixed list of every country and territory the tracker knows
#   about, and builds the default (unvisited) Country set from it.
#
# THE CATALOGUE IS AUTHORITATIVE FOR MEMBERSHIP:
#   When a saved document is loaded, core/migration.merge_with_catalogue()
#   keeps exactly the countries listed here.  Adding a territory to this
#   table makes it appear in old documents; removing one drops it.
#
# TERRITORIES:
#   Entries flagged is_territory=True are disputed or dependent areas.
#   They are trackable, but the headline "countries visited" figure can
#   leave them out (see core/statistics.py, include_territories).
# =============================================================================

from core.models import Country

# (code, name, continent, is_territory)
_CATALOGUE_TABLE: tuple[tuple[str, str, str, bool], ...] = (
    # --- Africa ---
    ("DZA", "Algeria", "Africa", False),
    ("AGO", "Angola", "Africa", False),
    ("BEN", "Benin", "Africa", False),
    ("BWA", "Botswana", "Africa", False),
    ("BFA", "Burkina Faso", "Africa", False),
    ("BDI", "Burundi", "Africa", False),
    ("CPV", "Cabo Verde", "Africa", False),
    ("CMR", "Cameroon", "Africa", False),
    ("CAF", "Central African Republic", "Africa", False),
    ("TCD", "Chad", "Africa", False),
    ("COM", "Comoros", "Africa", False),
    ("COG", "Congo", "Africa", False),
    ("COD", "Democratic Republic of the Congo", "Africa", False),
    ("CIV", "Côte d'Ivoire", "Africa", False),
    ("DJI", "Djibouti", "Africa", False),
    ("EGY", "Egypt", "Africa", False),
    ("GNQ", "Equatorial Guinea", "Africa", False),
    ("ERI", "Eritrea", "Africa", False),
    ("SWZ", "Eswatini", "Africa", False),
    ("ETH", "Ethiopia", "Africa", False),
    ("GAB", "Gabon", "Africa", False),
    ("GMB", "Gambia", "Africa", False),
    ("GHA", "Ghana", "Africa", False),
    ("GIN", "Guinea", "Africa", False),
    ("GNB", "Guinea-Bissau", "Africa", False),
    ("KEN", "Kenya", "Africa", False),
    ("LSO", "Lesotho", "Africa", False),
    ("LBR", "Liberia", "Africa", False),
    ("LBY", "Libya", "Africa", False),
    ("MDG", "Madagascar", "Africa", False),
    ("MWI", "Malawi", "Africa", False),
    ("MLI", "Mali", "Africa", False),
    ("MRT", "Mauritania", "Africa", False),
    ("MUS", "Mauritius", "Africa", False),
    ("MAR", "Morocco", "Africa", False),
    ("MOZ", "Mozambique", "Africa", False),
    ("NAM", "Namibia", "Africa", False),
    ("NER", "Niger", "Africa", False),
    ("NGA", "Nigeria", "Africa", False),
    ("RWA", "Rwanda", "Africa", False),
    ("STP", "São Tomé and Príncipe", "Africa", False),
    ("SEN", "Senegal", "Africa", False),
    ("SYC", "Seychelles", "Africa", False),
    ("SLE", "Sierra Leone", "Africa", False),
    ("SOM", "Somalia", "Africa", False),
    ("ZAF", "South Africa", "Africa", False),
    ("SSD", "South Sudan", "Africa", False),
    ("SDN", "Sudan", "Africa", False),
    ("TZA", "Tanzania", "Africa", False),
    ("TGO", "Togo", "Africa", False),
    ("TUN", "Tunisia", "Africa", False),
    ("UGA", "Uganda", "Africa", False),
    ("ZMB", "Zambia", "Africa", False),
    ("ZWE", "Zimbabwe", "Africa", False),
    ("ESH", "Western Sahara", "Africa", True),
    ("SOL", "Somaliland", "Africa", True),

    # --- Asia ---
    ("AFG", "Afghanistan", "Asia", False),
    ("ARM", "Armenia", "Asia", False),
    ("AZE", "Azerbaijan", "Asia", False),
    ("BHR", "Bahrain", "Asia", False),
    ("BGD", "Bangladesh", "Asia", False),
    ("BTN", "Bhutan", "Asia", False),
    ("BRN", "Brunei", "Asia", False),
    ("KHM", "Cambodia", "Asia", False),
    ("CHN", "China", "Asia", False),
    ("GEO", "Georgia", "Asia", False),
    ("IND", "India", "Asia", False),
    ("IDN", "Indonesia", "Asia", False),
    ("IRN", "Iran", "Asia", False),
    ("IRQ", "Iraq", "Asia", False),
    ("ISR", "Israel", "Asia", False),
    ("JPN", "Japan", "Asia", False),
    ("JOR", "Jordan", "Asia", False),
    ("KAZ", "Kazakhstan", "Asia", False),
    ("KWT", "Kuwait", "Asia", False),
    ("KGZ", "Kyrgyzstan", "Asia", False),
    ("LAO", "Laos", "Asia", False),
    ("LBN", "Lebanon", "Asia", False),
    ("MYS", "Malaysia", "Asia", False),
    ("MDV", "Maldives", "Asia", False),
    ("MNG", "Mongolia", "Asia", False),
    ("MMR", "Myanmar", "Asia", False),
    ("NPL", "Nepal", "Asia", False),
    ("PRK", "North Korea", "Asia", False),
    ("OMN", "Oman", "Asia", False),
    ("PAK", "Pakistan", "Asia", False),
    ("PSE", "Palestine", "Asia", False),
    ("PHL", "Philippines", "Asia", False),
    ("QAT", "Qatar", "Asia", False),
    ("SAU", "Saudi Arabia", "Asia", False),
    ("SGP", "Singapore", "Asia", False),
    ("KOR", "South Korea", "Asia", False),
    ("LKA", "Sri Lanka", "Asia", False),
    ("SYR", "Syria", "Asia", False),
    ("TWN", "Taiwan", "Asia", False),
    ("TJK", "Tajikistan", "Asia", False),
    ("THA", "Thailand", "Asia", False),
    ("TLS", "Timor-Leste", "Asia", False),
    ("TUR", "Turkey", "Asia", False),
    ("TKM", "Turkmenistan", "Asia", False),
    ("ARE", "United Arab Emirates", "Asia", False),
    ("UZB", "Uzbekistan", "Asia", False),
    ("VNM", "Vietnam", "Asia", False),
    ("YEM", "Yemen", "Asia", False),
    ("HKG", "Hong Kong", "Asia", True),
    ("MAC", "Macau", "Asia", True),

    # --- Europe ---
    ("ALB", "Albania", "Europe", False),
    ("AND", "Andorra", "Europe", False),
    ("AUT", "Austria", "Europe", False),
    ("BLR", "Belarus", "Europe", False),
    ("BEL", "Belgium", "Europe", False),
    ("BIH", "Bosnia and Herzegovina", "Europe", False),
    ("BGR", "Bulgaria", "Europe", False),
    ("HRV", "Croatia", "Europe", False),
    ("CYP", "Cyprus", "Europe", False),
    ("CZE", "Czechia", "Europe", False),
    ("DNK", "Denmark", "Europe", False),
    ("EST", "Estonia", "Europe", False),
    ("FIN", "Finland", "Europe", False),
    ("FRA", "France", "Europe", False),
    ("DEU", "Germany", "Europe", False),
    ("GRC", "Greece", "Europe", False),
    ("HUN", "Hungary", "Europe", False),
    ("ISL", "Iceland", "Europe", False),
    ("IRL", "Ireland", "Europe", False),
    ("ITA", "Italy", "Europe", False),
    ("XKX", "Kosovo", "Europe", False),
    ("LVA", "Latvia", "Europe", False),
    ("LIE", "Liechtenstein", "Europe", False),
    ("LTU", "Lithuania", "Europe", False),
    ("LUX", "Luxembourg", "Europe", False),
    ("MLT", "Malta", "Europe", False),
    ("MDA", "Moldova", "Europe", False),
    ("MCO", "Monaco", "Europe", False),
    ("MNE", "Montenegro", "Europe", False),
    ("NLD", "Netherlands", "Europe", False),
    ("MKD", "North Macedonia", "Europe", False),
    ("NOR", "Norway", "Europe", False),
    ("POL", "Poland", "Europe", False),
    ("PRT", "Portugal", "Europe", False),
    ("ROU", "Romania", "Europe", False),
    ("RUS", "Russia", "Europe", False),
    ("SMR", "San Marino", "Europe", False),
    ("SRB", "Serbia", "Europe", False),
    ("SVK", "Slovakia", "Europe", False),
    ("SVN", "Slovenia", "Europe", False),
    ("ESP", "Spain", "Europe", False),
    ("SWE", "Sweden", "Europe", False),
    ("CHE", "Switzerland", "Europe", False),
    ("UKR", "Ukraine", "Europe", False),
    ("GBR", "United Kingdom", "Europe", False),
    ("VAT", "Vatican City", "Europe", False),
    ("NCY", "Northern Cyprus", "Europe", True),
    ("FRO", "Faroe Islands", "Europe", True),
    ("GIB", "Gibraltar", "Europe", True),

    # --- North America ---
    ("ATG", "Antigua and Barbuda", "North America", False),
    ("BHS", "Bahamas", "North America", False),
    ("BRB", "Barbados", "North America", False),
    ("BLZ", "Belize", "North America", False),
    ("CAN", "Canada", "North America", False),
    ("CRI", "Costa Rica", "North America", False),
    ("CUB", "Cuba", "North America", False),
    ("DMA", "Dominica", "North America", False),
    ("DOM", "Dominican Republic", "North America", False),
    ("SLV", "El Salvador", "North America", False),
    ("GRD", "Grenada", "North America", False),
    ("GTM", "Guatemala", "North America", False),
    ("HTI", "Haiti", "North America", False),
    ("HND", "Honduras", "North America", False),
    ("JAM", "Jamaica", "North America", False),
    ("MEX", "Mexico", "North America", False),
    ("NIC", "Nicaragua", "North America", False),
    ("PAN", "Panama", "North America", False),
    ("KNA", "Saint Kitts and Nevis", "North America", False),
    ("LCA", "Saint Lucia", "North America", False),
    ("VCT", "Saint Vincent and the Grenadines", "North America", False),
    ("TTO", "Trinidad and Tobago", "North America", False),
    ("USA", "United States", "North America", False),
    ("GRL", "Greenland", "North America", True),
    ("PRI", "Puerto Rico", "North America", True),
    ("BMU", "Bermuda", "North America", True),

    # --- South America ---
    ("ARG", "Argentina", "South America", False),
    ("BOL", "Bolivia", "South America", False),
    ("BRA", "Brazil", "South America", False),
    ("CHL", "Chile", "South America", False),
    ("COL", "Colombia", "South America", False),
    ("ECU", "Ecuador", "South America", False),
    ("GUY", "Guyana", "South America", False),
    ("PRY", "Paraguay", "South America", False),
    ("PER", "Peru", "South America", False),
    ("SUR", "Suriname", "South America", False),
    ("URY", "Uruguay", "South America", False),
    ("VEN", "Venezuela", "South America", False),
    ("GUF", "French Guiana", "South America", True),
    ("FLK", "Falkland Islands", "South America", True),

    # --- Oceania ---
    ("AUS", "Australia", "Oceania", False),
    ("FJI", "Fiji", "Oceania", False),
    ("KIR", "Kiribati", "Oceania", False),
    ("MHL", "Marshall Islands", "Oceania", False),
    ("FSM", "Micronesia", "Oceania", False),
    ("NRU", "Nauru", "Oceania", False),
    ("NZL", "New Zealand", "Oceania", False),
    ("PLW", "Palau", "Oceania", False),
    ("PNG", "Papua New Guinea", "Oceania", False),
    ("WSM", "Samoa", "Oceania", False),
    ("SLB", "Solomon Islands", "Oceania", False),
    ("TON", "Tonga", "Oceania", False),
    ("TUV", "Tuvalu", "Oceania", False),
    ("VUT", "Vanuatu", "Oceania", False),
    ("NCL", "New Caledonia", "Oceania", True),
    ("PYF", "French Polynesia", "Oceania", True),
    # Antarctica has no continent of its own in the six-continent model.
    ("ATA", "Antarctica", "Oceania", True),
)


def build_catalogue() -> tuple[Country, ...]:
    """Build the default Country set: every catalogue entry, no visits."""
    return tuple(
        Country(code=code, name=name, continent=continent, is_territory=is_territory)
        for code, name, continent, is_territory in _CATALOGUE_TABLE
    )


def catalogue_codes() -> frozenset[str]:
    """All codes in the catalogue."""
    return frozenset(entry[0] for entry in _CATALOGUE_TABLE)
