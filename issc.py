# issc.py
# In-season Stanley Cup: who holds it, and for how long everyone has.
import argparse, datetime, sys
from nhl_api import fetch_season, ScheduleError
from handoff import match_records, track_handoffs, rank_groups, rank_teams
from teams import TAMPA_BAY_LIGHTNING_ID, parse_group, team_abbr, team_id, team_name
from utils import TZ

SEASON = "20212022"
SEED_HOLDER = TAMPA_BAY_LIGHTNING_ID  # 2021 Stanley Cup champions


def cup_lines(result, groups=None, tz=TZ):
    lines = [f"Holder: {team_name(result.holder)}", "", "Days held:"]
    for tid, days in rank_teams(result.days):
        lines.append(f"  {team_abbr(tid):<4} {days:>4}")
    lines.append("")
    lines.append("Transfers:")
    for ev in result.transfers:
        when = ev.timestamp.astimezone(tz).strftime("%Y-%m-%d")
        lines.append(f"  {when}  {team_abbr(ev.from_id)} -> {team_abbr(ev.to_id)}")
    if result.flagged:
        lines.append("")
        lines.append(f"Ignored {len(result.flagged)} tied final(s)")
    if groups:
        lines.append("")
        lines.append("Groups:")
        for name, total in rank_groups(result.days, groups):
            lines.append(f"  {name:<12} {total:>4}")
    return lines


def main(argv=None):
    parser = argparse.ArgumentParser(description="Track the in-season Stanley Cup")
    parser.add_argument("--season", default=SEASON, help="season id, e.g. 20212022")
    parser.add_argument("--holder", default=str(SEED_HOLDER), help="starting holder (abbreviation or id)")
    parser.add_argument("--group", action="append", default=[], metavar="NAME=TEAM,TEAM",
                        help="sum days for a named set of teams (repeatable)")
    args = parser.parse_args(argv)

    try:
        seed = team_id(args.holder)
        groups = dict(parse_group(g) for g in args.group)
    except (KeyError, ValueError) as e:
        parser.error(str(e))

    try:
        schedule = fetch_season(args.season)
        result = track_handoffs(match_records(schedule), seed, datetime.datetime.now(datetime.timezone.utc), tz=TZ)
    except (ScheduleError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in cup_lines(result, groups):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
