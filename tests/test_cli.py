import datetime
import zoneinfo

import pytest

import games_today
import gordle
import issc
from handoff import match_records, track_handoffs
from nhl_api import ScheduleError
from teams import CALGARY_FLAMES_ID, EDMONTON_OILERS_ID, TAMPA_BAY_LIGHTNING_ID, parse_group


def test_games_today_prints_games(monkeypatch, capsys, make_schedule, game_json):
    asked = []

    def fake_fetch(day=None):
        asked.append(day)
        return make_schedule(("2021-11-05", [game_json(abstract="Preview")]))

    monkeypatch.setattr(games_today, "fetch_schedule", fake_fetch)
    assert games_today.main(["--date", "11/05/2021"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert asked == [datetime.date(2021, 11, 5)]
    assert out[0] == "2021-11-05"
    assert out[1].startswith("Edmonton Oilers vs Calgary Flames @ ")


def test_games_today_defaults_to_feed_today(monkeypatch, capsys, make_schedule):
    asked = []
    monkeypatch.setattr(games_today, "fetch_schedule", lambda day=None: asked.append(day) or make_schedule())
    assert games_today.main([]) == 0
    assert asked == [None]
    assert capsys.readouterr().out == ""


def test_games_today_fetch_failure(monkeypatch, capsys):
    def fail(day=None):
        raise ScheduleError("error fetching schedule: 503")

    monkeypatch.setattr(games_today, "fetch_schedule", fail)
    assert games_today.main([]) == 1
    assert "503" in capsys.readouterr().err


def test_games_today_bad_date():
    with pytest.raises(SystemExit):
        games_today.main(["--date", "someday"])


def test_gordle_filters(capsys):
    assert gordle.main(["--placed-letters", "..k.o"]) == 0
    out = capsys.readouterr().out
    assert "guesses (1):" in out
    assert "Kakko" in out


def test_gordle_openers(capsys):
    assert gordle.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines
    assert all(", " in line for line in lines)


def test_parse_group():
    assert parse_group("Max=EDM, cgy") == ("Max", [EDMONTON_OILERS_ID, CALGARY_FLAMES_ID])
    with pytest.raises(ValueError):
        parse_group("EDM,CGY")
    with pytest.raises(KeyError):
        parse_group("Max=XYZ")


def test_issc_prints_cup(monkeypatch, capsys, make_schedule, game_json):
    season = make_schedule(
        ("2021-10-12", [game_json(home=TAMPA_BAY_LIGHTNING_ID, away=EDMONTON_OILERS_ID,
                                  home_score=1, away_score=4, when="2021-10-13T00:00:00Z")]),
        ("2021-10-20", [game_json(home=EDMONTON_OILERS_ID, away=CALGARY_FLAMES_ID,
                                  home_score=2, away_score=3, when="2021-10-21T01:00:00Z")]),
    )
    seasons = []
    monkeypatch.setattr(issc, "fetch_season", lambda s: seasons.append(s) or season)

    assert issc.main(["--group", "Max=EDM", "--group", "Sam=CGY,TBL"]) == 0
    out = capsys.readouterr().out

    assert seasons == [issc.SEASON]
    assert "Holder: Calgary Flames" in out
    assert "TBL -> EDM" in out
    assert "EDM -> CGY" in out
    assert "  EDM     8" in out
    assert "Groups:" in out


def test_issc_unknown_holder():
    with pytest.raises(SystemExit):
        issc.main(["--holder", "XYZ"])


def test_issc_fetch_failure(monkeypatch, capsys):
    def fail(season):
        raise ScheduleError("error fetching season")

    monkeypatch.setattr(issc, "fetch_season", fail)
    assert issc.main([]) == 1
    assert "error fetching season" in capsys.readouterr().err


def test_issc_dates_agree_with_days(make_schedule, game_json):
    edmonton = zoneinfo.ZoneInfo("America/Edmonton")
    season = make_schedule(
        ("2021-10-12", [game_json(home=TAMPA_BAY_LIGHTNING_ID, away=EDMONTON_OILERS_ID,
                                  home_score=1, away_score=3, when="2021-10-12T23:00:00Z")]),
        # 10pm Pacific start, already the 14th in UTC
        ("2021-10-13", [game_json(home=EDMONTON_OILERS_ID, away=CALGARY_FLAMES_ID,
                                  home_score=0, away_score=2, when="2021-10-14T05:00:00Z")]),
    )
    now = datetime.datetime(2021, 10, 20, 12, 0, tzinfo=datetime.timezone.utc)
    result = track_handoffs(match_records(season), TAMPA_BAY_LIGHTNING_ID, now, tz=edmonton)
    lines = issc.cup_lines(result, tz=edmonton)

    assert "  2021-10-12  TBL -> EDM" in lines
    assert "  2021-10-13  EDM -> CGY" in lines
    assert result.days == {EDMONTON_OILERS_ID: 1, CALGARY_FLAMES_ID: 7}
