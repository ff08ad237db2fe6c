# utils.py
import os, datetime, zoneinfo

TH1 = "#006FFF"   # blue
TH2 = "#FF9000"   # orange
TH3 = "#111111"   # dark background

TZ = zoneinfo.ZoneInfo(os.environ.get("NHL_TZ", "America/Edmonton"))

DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%m/%d/%y", "%Y%m%d")


def alpha(color, opacity=1.0):
    a = int(opacity * 255)
    return f"{color}{a:02X}"


def today(tz=TZ):
    return datetime.datetime.now(tz).date()


def parse_date_text(text):
    """Parse `2021-11-05` or US style `11/05/2021` into a date.
       Raises ValueError when nothing matches."""
    text = (text or "").strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"unrecognized date: {text!r}")


def local_time(dt, tz=TZ):
    """12-hour clock text like `7:05 PM` for an aware datetime."""
    dt_local = dt.astimezone(tz)
    pm = "PM" if dt_local.hour >= 12 else "AM"
    return f"{dt_local.hour % 12 or 12}:{dt_local.minute:02d} {pm}"


def describe_game(game, tz=TZ):
    home = game.teams.home.team.name
    away = game.teams.away.team.name
    return f"{home} vs {away} @ {local_time(game.game_date, tz)}"


def nav_html(path):
    """Shared SCORES / CUP submenu used by the NHL pages."""
    links = [("/nhl", "SCORES"), ("/nhl/cup", "CUP")]
    items = "\n".join(
        f'      <a href="{href}" class="{"active" if path == href else ""}">{label}</a>'
        for href, label in links
    )
    return f"""  <div class="nav">
    <a href="/" class="menu-btn">← MENU</a>
    <div class="submenu">
{items}
    </div>
  </div>"""


def page_style():
    return f"""  body {{
    background:{TH3};
    color:#eee;
    font-family:'Rajdhani',sans-serif;
    margin:0;
    padding:1em;
    text-align:left;
  }}

  /* --- NAVIGATION --- */
  .nav {{
    text-align:left;
    margin-bottom:1.2em;
  }}
  .menu-btn {{
    background:none;
    color:{TH1};
    text-decoration:none;
    font-weight:bold;
    font-size:clamp(22px,4vw,26px);
    display:inline-block;
    margin-bottom:0.5em;
  }}
  .submenu {{
    display:flex;
    justify-content:flex-start;
    flex-wrap:wrap;
    gap:0.6em;
  }}
  .submenu a {{
    background:{alpha(TH1,0.13)};
    color:{TH1};
    padding:0.3em 0.8em;
    border-radius:8px;
    text-decoration:none;
    font-weight:bold;
    font-size:clamp(17px,3.3vw,19px);
    transition:background 0.2s ease,color 0.2s ease;
  }}
  .submenu a:hover {{
    background:{alpha(TH2,0.25)};
    color:{TH2};
  }}
  .submenu a.active {{
    background:{TH2};
    color:#000;
  }}
  h2, h3 {{
    color:{TH1};
    margin:0.8em 0 0.4em;
  }}"""
