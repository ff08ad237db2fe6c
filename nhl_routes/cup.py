# nhl_routes/cup.py
from flask import make_response, request
from markupsafe import escape
import datetime
from . import nhl_bp
from nhl_api import fetch_season, ScheduleError
from handoff import match_records, track_handoffs, rank_groups, rank_teams
from teams import parse_group, team_abbr, team_id, team_name
from utils import TH1, TH2, TZ, alpha, nav_html, page_style
from issc import SEASON, SEED_HOLDER


def short_date(ts, tz=TZ):
    """`Oct 5` style date of `ts` in `tz`."""
    d = ts.astimezone(tz)
    return f"{d:%b} {d.day}"


@nhl_bp.route("/nhl/cup")
def nhl_cup_html():
    season = request.args.get("season", SEASON)
    try:
        seed = team_id(request.args.get("holder", SEED_HOLDER))
        groups = dict(parse_group(g) for g in request.args.getlist("group"))
    except (KeyError, ValueError) as e:
        return make_response(f"<pre>Bad request: {escape(str(e))}</pre>", 400)

    now_utc = datetime.datetime.now(datetime.timezone.utc)
    try:
        result = track_handoffs(match_records(fetch_season(season)), seed, now_utc, tz=TZ)
    except (ScheduleError, ValueError) as e:
        return f"<pre>Error building cup history: {escape(str(e))}</pre>"

    rows = "\n".join(
        (f"<tr style='color:{TH2};'>" if tid == result.holder else "<tr>") +
        f"<td>{team_abbr(tid)}</td><td>{days}</td></tr>"
        for tid, days in rank_teams(result.days)
    )
    transfers = "\n".join(
        f"<li>{short_date(ev.timestamp)}: "
        f"{team_abbr(ev.from_id)} → {team_abbr(ev.to_id)}</li>"
        for ev in reversed(result.transfers)
    )
    ignored = ""
    if result.flagged:
        ignored = f"<div class='note'>Ignored {len(result.flagged)} tied final(s)</div>"
    group_rows = "\n".join(
        f"<tr><td>{escape(name)}</td><td>{total}</td></tr>"
        for name, total in rank_groups(result.days, groups)
    )

    html = f"""<!DOCTYPE html>
<html>
<head>
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<link rel="stylesheet" href="https://fonts.googleapis.com/css2?family=Rajdhani:wght@600&display=swap">
<title>In-Season Cup</title>
<style>
{page_style()}
  .holder {{
    font-size:clamp(22px,4vw,28px);
    color:{TH2};
    font-weight:bold;
  }}
  table {{
    border-collapse:collapse;
    font-size:clamp(16px,2.6vw,18px);
  }}
  th, td {{
    border-bottom:1px solid #333;
    padding:0.2em 0.6em;
    text-align:left;
  }}
  th {{
    background:{alpha(TH1,0.3)};
    color:{TH2};
  }}
  ul {{ list-style:none; padding-left:0; }}
  .note {{ opacity:0.6; margin-top:0.6em; }}
</style>
</head>
<body>

{nav_html(request.path)}

  <div class="holder">Holder: {team_name(result.holder)}</div>

  <h3>Days Held</h3>
  <table>
    <tr><th>Team</th><th>Days</th></tr>
    {rows}
  </table>
"""
    if group_rows:
        html += f"""
  <h3>Groups</h3>
  <table>
    <tr><th>Name</th><th>Days</th></tr>
    {group_rows}
  </table>
"""
    html += f"""
  <h3>Transfers</h3>
  {ignored}
  <ul>
    {transfers}
  </ul>
</body>
</html>"""

    response = make_response(html)
    response.headers["Cache-Control"] = "public, max-age=600"
    return response
