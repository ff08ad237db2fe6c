# teams.py
# NHL stats API team ids -> (name, abbreviation)
from types import MappingProxyType

ANAHEIM_DUCKS_ID = 24
ARIZONA_COYOTES_ID = 53
BOSTON_BRUINS_ID = 6
BUFFALO_SABRES_ID = 7
CALGARY_FLAMES_ID = 20
CAROLINA_HURRICANES_ID = 12
CHICAGO_BLACKHAWKS_ID = 16
COLORADO_AVALANCHE_ID = 21
COLUMBUS_BLUE_JACKETS_ID = 29
DALLAS_STARS_ID = 25
DETROIT_RED_WINGS_ID = 17
EDMONTON_OILERS_ID = 22
FLORIDA_PANTHERS_ID = 13
LOS_ANGELES_KINGS_ID = 26
MINNESOTA_WILD_ID = 30
MONTREAL_CANADIENS_ID = 8
NASHVILLE_PREDATORS_ID = 18
NEW_JERSEY_DEVILS_ID = 1
NEW_YORK_ISLANDERS_ID = 2
NEW_YORK_RANGERS_ID = 3
OTTAWA_SENATORS_ID = 9
PHILADELPHIA_FLYERS_ID = 4
PITTSBURGH_PENGUINS_ID = 5
SAN_JOSE_SHARKS_ID = 28
SEATTLE_KRAKEN_ID = 55
ST_LOUIS_BLUES_ID = 19
TAMPA_BAY_LIGHTNING_ID = 14
TORONTO_MAPLE_LEAFS_ID = 10
VANCOUVER_CANUCKS_ID = 23
VEGAS_GOLDEN_KNIGHTS_ID = 54
WASHINGTON_CAPITALS_ID = 15
WINNIPEG_JETS_ID = 52

TEAMS = MappingProxyType({
    ANAHEIM_DUCKS_ID: ("Anaheim Ducks", "ANA"),
    ARIZONA_COYOTES_ID: ("Arizona Coyotes", "ARI"),
    BOSTON_BRUINS_ID: ("Boston Bruins", "BOS"),
    BUFFALO_SABRES_ID: ("Buffalo Sabres", "BUF"),
    CALGARY_FLAMES_ID: ("Calgary Flames", "CGY"),
    CAROLINA_HURRICANES_ID: ("Carolina Hurricanes", "CAR"),
    CHICAGO_BLACKHAWKS_ID: ("Chicago Blackhawks", "CHI"),
    COLORADO_AVALANCHE_ID: ("Colorado Avalanche", "COL"),
    COLUMBUS_BLUE_JACKETS_ID: ("Columbus Blue Jackets", "CBJ"),
    DALLAS_STARS_ID: ("Dallas Stars", "DAL"),
    DETROIT_RED_WINGS_ID: ("Detroit Red Wings", "DET"),
    EDMONTON_OILERS_ID: ("Edmonton Oilers", "EDM"),
    FLORIDA_PANTHERS_ID: ("Florida Panthers", "FLA"),
    LOS_ANGELES_KINGS_ID: ("Los Angeles Kings", "LAK"),
    MINNESOTA_WILD_ID: ("Minnesota Wild", "MIN"),
    MONTREAL_CANADIENS_ID: ("Montréal Canadiens", "MTL"),
    NASHVILLE_PREDATORS_ID: ("Nashville Predators", "NSH"),
    NEW_JERSEY_DEVILS_ID: ("New Jersey Devils", "NJD"),
    NEW_YORK_ISLANDERS_ID: ("New York Islanders", "NYI"),
    NEW_YORK_RANGERS_ID: ("New York Rangers", "NYR"),
    OTTAWA_SENATORS_ID: ("Ottawa Senators", "OTT"),
    PHILADELPHIA_FLYERS_ID: ("Philadelphia Flyers", "PHI"),
    PITTSBURGH_PENGUINS_ID: ("Pittsburgh Penguins", "PIT"),
    SAN_JOSE_SHARKS_ID: ("San Jose Sharks", "SJS"),
    SEATTLE_KRAKEN_ID: ("Seattle Kraken", "SEA"),
    ST_LOUIS_BLUES_ID: ("St. Louis Blues", "STL"),
    TAMPA_BAY_LIGHTNING_ID: ("Tampa Bay Lightning", "TBL"),
    TORONTO_MAPLE_LEAFS_ID: ("Toronto Maple Leafs", "TOR"),
    VANCOUVER_CANUCKS_ID: ("Vancouver Canucks", "VAN"),
    VEGAS_GOLDEN_KNIGHTS_ID: ("Vegas Golden Knights", "VGK"),
    WASHINGTON_CAPITALS_ID: ("Washington Capitals", "WSH"),
    WINNIPEG_JETS_ID: ("Winnipeg Jets", "WPG"),
})

_BY_ABBR = {abbr: tid for tid, (_, abbr) in TEAMS.items()}


def team_name(team_id):
    return TEAMS.get(team_id, (f"Team {team_id}", "???"))[0]


def team_abbr(team_id):
    return TEAMS.get(team_id, ("", "???"))[1]


def team_id(text):
    """Look up a team by abbreviation (`EDM`) or numeric id (`22`)."""
    text = str(text).strip().upper()
    if text.isdigit() and int(text) in TEAMS:
        return int(text)
    if text in _BY_ABBR:
        return _BY_ABBR[text]
    raise KeyError(f"unknown team: {text}")


def parse_group(text):
    """`Max=EDM,CGY` -> ("Max", [22, 20])."""
    name, sep, members = text.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"expected NAME=TEAM,TEAM: {text!r}")
    return name.strip(), [team_id(m) for m in members.split(",") if m.strip()]
