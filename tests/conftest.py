import datetime

import pytest

from handoff import Category, MatchRecord
from nhl_api import parse_schedule
from teams import CALGARY_FLAMES_ID, EDMONTON_OILERS_ID, TEAMS

DAY0 = datetime.datetime(2021, 10, 13, 2, 0, tzinfo=datetime.timezone.utc)


def _side(team_id, score):
    return {"score": score, "team": {"id": team_id, "name": TEAMS[team_id][0]}}


@pytest.fixture
def game_json():
    def make(home=EDMONTON_OILERS_ID, away=CALGARY_FLAMES_ID, home_score=0, away_score=0,
             when="2021-11-06T01:00:00Z", abstract="Final", detailed=None, game_type="R", pk=2021020001):
        return {
            "gamePk": pk,
            "gameType": game_type,
            "gameDate": when,
            "status": {"abstractGameState": abstract, "detailedState": detailed or abstract},
            "teams": {"home": _side(home, home_score), "away": _side(away, away_score)},
        }
    return make


@pytest.fixture
def schedule_json():
    def make(*buckets):
        """buckets: (date_str, [game dicts])"""
        dates = [{"date": d, "games": games} for d, games in buckets]
        total = sum(len(g) for _, g in buckets)
        return {"totalItems": total, "totalGames": total, "dates": dates}
    return make


@pytest.fixture
def make_schedule(schedule_json):
    def make(*buckets):
        return parse_schedule(schedule_json(*buckets))
    return make


@pytest.fixture
def match():
    """match(day, a, b, score_a, score_b) with `day` counted from DAY0."""
    def make(day, a, b, score_a, score_b, finished=True, category=Category.REGULAR, hours=0):
        return MatchRecord(
            participant_a=a,
            participant_b=b,
            score_a=score_a,
            score_b=score_b,
            finished=finished,
            category=category,
            timestamp=DAY0 + datetime.timedelta(days=day, hours=hours),
        )
    return make


@pytest.fixture
def at_day():
    def make(day):
        return DAY0 + datetime.timedelta(days=day)
    return make
