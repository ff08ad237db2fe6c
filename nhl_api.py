# nhl_api.py
"""Schedule records for the NHL stats API and the calls that fetch them.

The feed is a list of date buckets, each holding games with nested
home/away team objects and a status object. Records here are plain data;
display strings are built in `utils`.
"""
from __future__ import annotations

import datetime
import os
from dataclasses import dataclass, field
from typing import List, Optional

import requests

STATS_API = os.environ.get("NHL_STATS_API", "https://statsapi.web.nhl.com/api/v1")
TIMEOUT = float(os.environ.get("NHL_TIMEOUT", "10"))

FINAL = "Final"
LIVE = "Live"
PREVIEW = "Preview"
POSTPONED = "Postponed"
REGULAR_SEASON = "R"


class ScheduleError(Exception):
    """Anything that went wrong getting or reading a schedule."""


@dataclass(frozen=True)
class Team:
    id: int
    name: str


@dataclass(frozen=True)
class TeamAtGame:
    score: int
    team: Team


@dataclass(frozen=True)
class Teams:
    home: TeamAtGame
    away: TeamAtGame


@dataclass(frozen=True)
class Status:
    abstract_state: str = ""
    detailed_state: str = ""


@dataclass(frozen=True)
class Game:
    game_pk: int
    game_type: str
    game_date: datetime.datetime
    status: Status
    teams: Teams

    def is_postponed(self) -> bool:
        return self.status.detailed_state == POSTPONED

    def is_finished(self) -> bool:
        return self.status.abstract_state == FINAL and not self.is_postponed()

    def is_live(self) -> bool:
        return self.status.abstract_state == LIVE

    def is_preview(self) -> bool:
        return self.status.abstract_state == PREVIEW and not self.is_postponed()

    def css_class(self) -> str:
        if self.is_postponed():
            return "postponed"
        if self.is_finished():
            return "finished"
        if self.is_live():
            return "live"
        return "preview"


@dataclass(frozen=True)
class Date:
    date: datetime.date
    games: List[Game] = field(default_factory=list)


@dataclass(frozen=True)
class Schedule:
    total_games: int = 0
    total_items: int = 0
    dates: List[Date] = field(default_factory=list)

    def games(self) -> List[Game]:
        return [g for d in self.dates for g in d.games]


# ---------------- JSON -> records ----------------

def parse_timestamp(raw: str) -> datetime.datetime:
    dt = datetime.datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    return dt


def _team_at_game(side: dict) -> TeamAtGame:
    t = side.get("team", {})
    return TeamAtGame(
        score=int(side.get("score", 0) or 0),
        team=Team(id=int(t["id"]), name=t.get("name", f"Team {t['id']}")),
    )


def parse_game(raw: dict) -> Game:
    st = raw.get("status", {})
    teams = raw["teams"]
    return Game(
        game_pk=int(raw.get("gamePk", 0)),
        game_type=raw.get("gameType", REGULAR_SEASON),
        game_date=parse_timestamp(raw["gameDate"]),
        status=Status(
            abstract_state=st.get("abstractGameState", ""),
            detailed_state=st.get("detailedState", ""),
        ),
        teams=Teams(home=_team_at_game(teams["home"]), away=_team_at_game(teams["away"])),
    )


def parse_schedule(data: dict) -> Schedule:
    """Build a Schedule from the decoded JSON body.
       Missing keys or bad values raise ScheduleError."""
    try:
        dates = [
            Date(
                date=datetime.date.fromisoformat(d["date"]),
                games=[parse_game(g) for g in d.get("games", [])],
            )
            for d in data.get("dates", [])
        ]
        return Schedule(
            total_games=int(data.get("totalGames", 0)),
            total_items=int(data.get("totalItems", 0)),
            dates=dates,
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ScheduleError(f"malformed schedule: {e!r}") from e


# ---------------- HTTP ----------------

def get_json(path: str, params: Optional[dict] = None) -> dict:
    url = f"{STATS_API}{path}"
    try:
        r = requests.get(url, params=params, timeout=TIMEOUT)
        r.raise_for_status()
        return r.json()
    except (requests.RequestException, ValueError) as e:
        print(f"[Schedule] {url} error: {e}")
        raise ScheduleError(f"error fetching {url}: {e}") from e


def fetch_schedule(day: Optional[datetime.date] = None) -> Schedule:
    """Games for one day (the feed's own "today" when `day` is None)."""
    params = {"expand": "schedule.linescore"}
    if day is not None:
        params["date"] = day.strftime("%Y-%m-%d")
    return parse_schedule(get_json("/schedule", params))


def fetch_season(season: str, game_type: str = REGULAR_SEASON) -> Schedule:
    """Every game of a season such as `20212022`, in date order."""
    data = get_json("/schedule", {"season": season, "gameType": game_type})
    schedule = parse_schedule(data)
    print(f"[Schedule] season {season}: {len(schedule.dates)} dates, {schedule.total_games} games")
    return schedule
