# games_today.py
import argparse, sys
from nhl_api import fetch_schedule, ScheduleError
from utils import TZ, parse_date_text, describe_game


def schedule_lines(schedule, tz=TZ):
    lines = []
    for d in schedule.dates:
        lines.append(d.date.isoformat())
        for game in d.games:
            lines.append(describe_game(game, tz))
    return lines


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print the NHL games for a day")
    parser.add_argument("--date", help="YYYY-MM-DD or MM/DD/YYYY (default: today)")
    args = parser.parse_args(argv)

    day = None
    if args.date:
        try:
            day = parse_date_text(args.date)
        except ValueError as e:
            parser.error(str(e))

    try:
        schedule = fetch_schedule(day)
    except ScheduleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in schedule_lines(schedule):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
