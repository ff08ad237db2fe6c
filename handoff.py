# handoff.py
"""In-season cup tracking.

The cup starts with a seed holder and changes hands whenever the holder
loses a finished regular-season game. Each holder is credited with the
calendar days between taking the cup and losing it; the current holder is
credited up to `now`.
"""
from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from nhl_api import REGULAR_SEASON, Schedule


class Category(enum.Enum):
    REGULAR = "regular"
    OTHER = "other"


@dataclass(frozen=True)
class MatchRecord:
    participant_a: int
    participant_b: int
    score_a: int
    score_b: int
    finished: bool
    category: Category
    timestamp: datetime.datetime

    def winner(self) -> Optional[int]:
        """Side with the strictly greater score, None on a tie."""
        if self.score_a > self.score_b:
            return self.participant_a
        if self.score_b > self.score_a:
            return self.participant_b
        return None


@dataclass(frozen=True)
class TransferEvent:
    timestamp: datetime.datetime
    from_id: int
    to_id: int


def calendar_day(ts: datetime.datetime, tz: Optional[datetime.tzinfo] = None) -> datetime.date:
    """Date of `ts` on the calendar of `tz` (the timestamp's own zone when None)."""
    return ts.astimezone(tz).date() if tz is not None else ts.date()


@dataclass
class OwnershipState:
    current_holder: int
    last_transfer_time: Optional[datetime.datetime] = None
    accumulated_days: Dict[int, int] = field(default_factory=dict)

    def credit(self, until: datetime.datetime, tz: Optional[datetime.tzinfo] = None) -> None:
        if self.last_transfer_time is None:
            return
        days = (calendar_day(until, tz) - calendar_day(self.last_transfer_time, tz)).days
        self.accumulated_days[self.current_holder] = (
            self.accumulated_days.get(self.current_holder, 0) + days
        )


@dataclass
class HandoffResult:
    state: OwnershipState
    transfers: List[TransferEvent]
    flagged: List[MatchRecord] = field(default_factory=list)

    @property
    def holder(self) -> int:
        return self.state.current_holder

    @property
    def days(self) -> Dict[int, int]:
        return self.state.accumulated_days


def match_records(schedule: Schedule) -> List[MatchRecord]:
    """Flatten a schedule into match records, home side first, ordered by start time."""
    records = [
        MatchRecord(
            participant_a=g.teams.home.team.id,
            participant_b=g.teams.away.team.id,
            score_a=g.teams.home.score,
            score_b=g.teams.away.score,
            finished=g.is_finished(),
            category=Category.REGULAR if g.game_type == REGULAR_SEASON else Category.OTHER,
            timestamp=g.game_date,
        )
        for g in schedule.games()
    ]
    return sorted(records, key=lambda r: r.timestamp)


def track_handoffs(
    records: Iterable[MatchRecord],
    seed_holder: int,
    now: datetime.datetime,
    tz: Optional[datetime.tzinfo] = None,
) -> HandoffResult:
    """Single pass over records sorted by timestamp.

    A finished game with a tied score cannot decide a winner; it is treated
    as no transfer and returned in `flagged`. Records out of timestamp
    order raise ValueError.

    Days are counted between calendar dates in `tz`, so they agree with
    transfer dates displayed in that zone.
    """
    state = OwnershipState(current_holder=seed_holder)
    transfers: List[TransferEvent] = []
    flagged: List[MatchRecord] = []
    previous: Optional[datetime.datetime] = None

    for rec in records:
        if previous is not None and rec.timestamp < previous:
            raise ValueError(f"records out of order at {rec.timestamp.isoformat()}")
        previous = rec.timestamp

        if rec.category != Category.REGULAR or not rec.finished:
            continue
        holder = state.current_holder
        if holder not in (rec.participant_a, rec.participant_b):
            continue

        winner = rec.winner()
        if winner is None:
            print(f"[Cup] tied final {rec.participant_a} vs {rec.participant_b} "
                  f"on {calendar_day(rec.timestamp, tz)}, no transfer")
            flagged.append(rec)
            continue
        if winner == holder:
            continue

        state.credit(rec.timestamp, tz)
        transfers.append(TransferEvent(rec.timestamp, holder, winner))
        state.current_holder = winner
        state.last_transfer_time = rec.timestamp

    if state.last_transfer_time is not None and now < state.last_transfer_time:
        raise ValueError("now is earlier than the last transfer")
    state.credit(now, tz)
    return HandoffResult(state=state, transfers=transfers, flagged=flagged)


def rank_groups(
    days: Mapping[int, int],
    groups: Mapping[str, Iterable[int]],
) -> List[Tuple[str, int]]:
    """Total days per named group, most days first, ties by name."""
    totals = [(name, sum(days.get(i, 0) for i in ids)) for name, ids in groups.items()]
    return sorted(totals, key=lambda kv: (-kv[1], kv[0]))


def rank_teams(days: Mapping[int, int]) -> List[Tuple[int, int]]:
    return sorted(days.items(), key=lambda kv: (-kv[1], kv[0]))
