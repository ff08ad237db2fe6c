# nhl_routes/scoreboard.py
from flask import make_response, request
from markupsafe import escape
import threading
from . import nhl_bp
from nhl_api import fetch_schedule, ScheduleError
from utils import TH1, TH2, TZ, alpha, describe_game, nav_html, page_style, parse_date_text, today

REFRESH_MS = 30 * 60 * 1000

SECTIONS = [
    ("Live", lambda g: g.is_live()),
    ("Upcoming", lambda g: g.is_preview()),
    ("Finished", lambda g: g.is_finished()),
    ("Postponed", lambda g: g.is_postponed()),
]

# sid -> generation of the newest schedule request for that client
_watchers = {}
_watch_lock = threading.Lock()


def begin_watch(sid):
    """Start a fetch for `sid`; any fetch started earlier becomes stale."""
    with _watch_lock:
        gen = _watchers.get(sid, 0) + 1
        _watchers[sid] = gen
        return gen


def is_current(sid, gen):
    with _watch_lock:
        return _watchers.get(sid) == gen


def end_watch(sid):
    with _watch_lock:
        _watchers.pop(sid, None)


def render_games(schedule, day, tz=TZ):
    """HTML fragment with one list per game state for the first date in `schedule`."""
    games = schedule.dates[0].games if schedule.dates else []
    html = f"<h2>{day.isoformat()}: {schedule.total_items} games</h2>\n"
    for title, wanted in SECTIONS:
        picked = [g for g in games if wanted(g)]
        if not picked:
            continue
        html += f"<div class='section'>\n<h3>{title}</h3>\n<ul>\n"
        for g in picked:
            html += f"<li class='{g.css_class()}'>{escape(describe_game(g, tz))}</li>\n"
        html += "</ul>\n</div>\n"
    return html


@nhl_bp.route("/nhl")
def nhl_games_html():
    text = request.args.get("date", "")
    notice = ""
    try:
        day = parse_date_text(text) if text else today()
    except ValueError:
        print(f"[Scoreboard] bad date {text!r}, using today")
        day = today()
        notice = f"<div class='notice'>Could not read date \"{escape(text)}\", showing {day.isoformat()}</div>\n"

    try:
        body = notice + render_games(fetch_schedule(day), day)
    except ScheduleError as e:
        body = notice + f"<pre>Error fetching schedule: {escape(str(e))}</pre>"

    html = f"""<!DOCTYPE html>
<html>
<head>
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<link rel="stylesheet" href="https://fonts.googleapis.com/css2?family=Rajdhani:wght@600&display=swap">
<title>Games Today</title>
<style>
{page_style()}
  .controls {{
    display:flex;
    align-items:center;
    gap:0.8em;
  }}
  .controls button {{
    background:{TH1};
    color:#000;
    font-weight:bold;
    border:none;
    border-radius:8px;
    padding:0.4em 1em;
    cursor:pointer;
  }}
  .controls button:hover {{ background:{TH2}; }}
  .controls input {{
    background:{alpha(TH1,0.13)};
    color:#eee;
    border:1px solid #333;
    border-radius:6px;
    padding:0.3em;
  }}
  ul {{ list-style:none; padding-left:0; }}
  li {{ font-size:clamp(20px,3vw,22px); line-height:1.6em; }}
  li.live {{ color:{TH2}; }}
  li.finished {{ opacity:0.6; }}
  li.postponed {{ text-decoration:line-through; opacity:0.5; }}
  #status {{ color:{TH2}; opacity:0.7; }}
  .notice {{ color:{TH2}; margin:0.6em 0; }}
</style>
<script src="https://cdn.socket.io/4.7.5/socket.io.min.js"></script>
<script>
  let socket;

  function watch() {{
    const day = document.getElementById("date").value;
    document.getElementById("status").textContent = "Loading...";
    socket.emit("schedule:watch", {{date: day}});
  }}

  window.onload = () => {{
    socket = io({{transports:['websocket']}});
    socket.on("schedule", data => {{
      document.getElementById("games").innerHTML = data.html;
      document.getElementById("status").textContent = "";
    }});
    socket.on("schedule:error", data => {{
      document.getElementById("status").textContent = data.message;
    }});
    document.getElementById("date").addEventListener("change", watch);
    document.getElementById("update").addEventListener("click", watch);
    setInterval(watch, {REFRESH_MS});
  }};
</script>
</head>
<body>

{nav_html(request.path)}

  <div class="controls">
    <input id="date" type="date" value="{day.isoformat()}">
    <button id="update">Update</button>
    <span id="status"></span>
  </div>

  <div id="games">
{body}
  </div>
</body>
</html>"""

    response = make_response(html)
    response.headers["Cache-Control"] = "public, max-age=40"
    return response


def register_socketio_events(socketio):
    @socketio.on("schedule:watch")
    def on_watch(data):
        sid = request.sid
        text = ((data or {}).get("date") or "").strip()
        try:
            day = parse_date_text(text) if text else today()
        except ValueError:
            print(f"[Scoreboard] bad date {text!r}")
            socketio.emit("schedule:error", {"date": text, "message": f"bad date: {text!r}"}, to=sid)
            return

        gen = begin_watch(sid)
        try:
            event = "schedule"
            payload = {"date": day.isoformat(), "html": render_games(fetch_schedule(day), day)}
        except ScheduleError as e:
            event = "schedule:error"
            payload = {"date": day.isoformat(), "message": f"Error fetching schedule: {e}"}

        if not is_current(sid, gen):
            print(f"[Scoreboard] dropping stale {day} for {sid}")
            return
        socketio.emit(event, payload, to=sid)

    @socketio.on("disconnect")
    def on_disconnect(*args):
        end_watch(request.sid)
