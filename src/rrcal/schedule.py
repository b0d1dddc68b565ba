#!/usr/bin/env python3
"""Round-robin tournament calendar builder.

Usage:
    rrcal TEAMS START END OUTPUT [--config FILE] [--csv FILE] [--locale ru|en]

    Reads the roster from TEAMS (one '<n>. <name> — <city>' per line),
    schedules a home and an away game for every pair of teams on the
    playable slots between START and END (DD.MM.YYYY) and writes the
    calendar to OUTPUT.

Examples:
    rrcal teams.txt 01.08.2026 01.06.2027 calendar.txt
    rrcal teams.txt 01.08.2026 01.06.2027 calendar.txt --locale en
    rrcal teams.txt 01.08.2026 01.06.2027 calendar.txt -c league.yaml --csv calendar.csv
"""

import argparse
import sys
from pathlib import Path

from rrcal.config import (
    check_locale, load_config, parse_date, validate_date_range,
)
from rrcal.constraints import validate_schedule, format_validation_report
from rrcal.errors import CalendarError, MissingInputFile
from rrcal.output import format_calendar, format_calendar_csv, write_outputs
from rrcal.roster import load_roster
from rrcal.scheduler import build_schedule
from rrcal.stats import compute_stats, format_stats_report

EXAMPLE = "rrcal teams.txt 01.08.2026 01.06.2027 calendar.txt"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit code 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        print(f"Example: {EXAMPLE}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="rrcal",
        description="Round-robin tournament calendar builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Weekly pattern (default): Fri, Sat, Sun at 12:00, 15:00 and 18:00,
at most 2 games at the same time. Override with --config.

Exit codes:
  0  Calendar written
  1  Invalid input, not enough slots, or usage error
""",
    )
    parser.add_argument("teams", help="Roster file, one team per line")
    parser.add_argument("start", help="First day of the tournament (DD.MM.YYYY)")
    parser.add_argument("end", help="Last day of the tournament (DD.MM.YYYY)")
    parser.add_argument("output", help="Path of the calendar to write")
    parser.add_argument(
        "--config", "-c", default=None,
        help="YAML file overriding game days, times and capacity"
    )
    parser.add_argument(
        "--csv", metavar="FILE", default=None,
        help="Also write an editable CSV of the calendar"
    )
    parser.add_argument(
        "--locale", default=None,
        help="Report language: ru (default) or en"
    )
    return parser


def run(args) -> None:
    """Validate inputs, build the calendar and write it.

    Raises CalendarError on any invalid input; nothing is written then.
    """
    start_date = parse_date(args.start)
    end_date = parse_date(args.end)

    config = load_config(args.config)
    if args.locale:
        config["report"]["locale"] = check_locale(args.locale)

    teams_path = Path(args.teams)
    if not teams_path.is_file():
        raise MissingInputFile(teams_path)
    validate_date_range(start_date, end_date, config["calendar"]["min_days"])

    print(f"Loading teams from {teams_path}...")
    teams = load_roster(teams_path)
    print(f"Loaded {len(teams)} teams")

    result = build_schedule(teams, start_date, end_date, config)
    print(f"Matches to schedule: {len(result['matches'])}")
    print(f"Available slots: {len(result['slots'])}")
    games = result["games"]

    # Validate
    print("\nValidating...")
    validation = validate_schedule(
        games, result["matches"], result["slots"],
        config["pattern"]["max_simultaneous_games"],
    )
    print(format_validation_report(validation))
    if not validation["valid"]:
        raise RuntimeError("Scheduled calendar failed validation")

    stats = compute_stats(games, teams, result["slots"])
    print("\n" + format_stats_report(stats))

    # Write outputs
    print("\nWriting output files...")
    report = config["report"]
    text = format_calendar(games, start_date, end_date,
                           locale=report["locale"], title=report["title"])
    outputs = [(text, args.output)]
    if args.csv:
        outputs.append((format_calendar_csv(games), args.csv))

    paths = write_outputs(outputs)
    for p in paths:
        print(f"Written: {p}")
    path = paths[0]

    print(f"\nCalendar created successfully in {path}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except CalendarError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
