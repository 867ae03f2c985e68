"""
Fixed taxonomy and keyword tables.

List order is significant throughout this module: it defines match
precedence for sub-categories and display order for groups.
"""

from typing import List

AUSTRIA_GROUP = "Österreich"
DEFAULT_GROUP = "Allgemein"
DEFAULT_SUB = "Allgemein"
SPORT = "Sport"

# Display priority; groups not listed follow alphabetically
GROUP_PRIORITY: List[str] = [
    "Österreich",
    "Chronik",
    "Politik",
    "Sport",
    "Wirtschaft",
    "Wissenschaft",
    "Gesellschaft",
    "Wetter",
]

# Allowed sub-categories for Österreich (first match wins, also display order)
AUSTRIA_SUBCATEGORIES: List[str] = [
    "Sport",
    "Politik",
    "Burgenland",
    "Kärnten",
    "Niederösterreich",
    "Oberösterreich",
    "Salzburg",
    "Steiermark",
    "Tirol",
    "Vorarlberg",
    "Wien",
    "Wirtschaft",
    "Chronik",
    "Wissenschaft",
    "Gesellschaft",
]

# Österreich sub fallbacks for raw categories outside the allowed list
AUSTRIA_SUB_FALLBACKS = [
    (("kultur", "film", "musik"), "Gesellschaft"),
    (("finanzen",), "Wirtschaft"),
    (("wetter",), "Chronik"),
]

WISSENSCHAFT_KEYWORDS = [
    "wissenschaft", "technik", "science", "ki",
    "archäologie", "bildung", "datenschutz",
]

POLITIK_KEYWORDS = [
    "politik", "ausland", "international", "inland",
    "krieg", "nahost", "soziales",
]

# "medien" counts as Politik unless the category is about enterprises
POLITIK_MEDIA_KEYWORD = "medien"
POLITIK_MEDIA_EXCLUDE = "unternehmen"

WIRTSCHAFT_KEYWORDS = [
    "wirtschaft", "finanzen", "unternehmen",
    "netzwerk", "personalia", "business",
]

GESELLSCHAFT_KEYWORDS = [
    "gesellschaft", "kultur", "film", "musik", "gesundheit", "natur", "tier",
    "umwelt", "unterhaltung", "alltag", "lifestyle", "bezirke", "bücher",
    "dating", "familie", "glücksspiel", "haus", "garten", "hilfe",
    "korrekturen", "literatur", "reisen", "tourismus", "weltgeschehen",
    "kunstmarkt",
]

SPORT_KEYWORDS = ["sport"]
WETTER_KEYWORDS = ["wetter"]
CHRONIK_KEYWORDS = ["chronik"]

# Regions and formats explicitly filed under Allgemein
ALLGEMEIN_KEYWORDS = ["afrika", "audio", "podcast"]

# Home-country mention without an .at source
HOME_COUNTRY_KEYWORDS = ["österreich"]

FOOTBALL_EMOJI = "⚽"

FOOTBALL_KEYWORDS: List[str] = [
    # generic vocabulary
    "fußball", "fussball", "soccer", "kicker", "ball", "tor", "match", "spiel",
    "lig", "tabellenführer", "meisterschaft", "cup", "abstieg", "aufstieg",
    "relegation", "nationalteam", "teamchef",
    # associations and competitions
    "bundesliga", "oefb", "öfb", "fifa", "uefa",
    "champions league", "europa league", "conference league",
    # clubs
    "rapid", "sturm", "austria wien", "lask", "altach", "hartberg", "wolfsberg",
    "wac", "klagenfurt", "blau-weiß", "gak", "red bull", "salzburg", "liefering",
    "svr", "ried", "admira", "vienna", "sportclub",
]
