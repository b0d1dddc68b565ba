"""Roster reading: '<n>. <team name> — <city>' lines into Teams."""

import re
from pathlib import Path

from rrcal.errors import (
    CalendarError, InsufficientTeams, MalformedRosterLine, MissingInputFile,
    RosterEncodingError,
)
from rrcal.models import Team

MIN_TEAMS = 2

# Em dash, en dash or hyphen between name and city
ROSTER_LINE_RE = re.compile(r"^\d+\.\s*(.+?)\s*[—–-]\s*(.+)$")


def parse_roster_line(line: str, line_number: int | None = None) -> Team:
    m = ROSTER_LINE_RE.match(line)
    if not m:
        raise MalformedRosterLine(line, line_number)
    return Team(name=m.group(1).strip(), city=m.group(2).strip())


def parse_roster(lines) -> list[Team]:
    """Parse roster lines in order, skipping blank ones.

    Raises MalformedRosterLine on the first non-blank line that doesn't
    match, and InsufficientTeams if fewer than two teams were read.
    """
    teams = []
    for n, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        teams.append(parse_roster_line(line, n))

    if len(teams) < MIN_TEAMS:
        raise InsufficientTeams(len(teams), MIN_TEAMS)
    return teams


def load_roster(path: str | Path) -> list[Team]:
    path = Path(path)
    if not path.is_file():
        raise MissingInputFile(path)
    # utf-8-sig drops a leading BOM
    try:
        with open(path, encoding="utf-8-sig") as f:
            lines = f.readlines()
    except UnicodeDecodeError as e:
        raise RosterEncodingError(path, str(e)) from e
    except OSError as e:
        raise CalendarError(f"Cannot read teams file {path}: {e.strerror}") from e
    return parse_roster(lines)
