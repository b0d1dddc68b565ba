"""Data models for the round-robin calendar builder."""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum


DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
             "Saturday", "Sunday"]


class DayOfWeek(Enum):
    Mon = 0
    Tue = 1
    Wed = 2
    Thu = 3
    Fri = 4
    Sat = 5
    Sun = 6

    @classmethod
    def from_str(cls, s: str) -> "DayOfWeek":
        """Accept the full English name or its three-letter abbreviation."""
        key = s.strip().lower()
        for day in cls:
            if key in (day.name.lower(), DAY_NAMES[day.value].lower()):
                return day
        raise KeyError(s)

    @classmethod
    def of(cls, d: date) -> "DayOfWeek":
        return cls(d.weekday())


GAME_DAYS = [DayOfWeek.Fri, DayOfWeek.Sat, DayOfWeek.Sun]
GAME_TIMES = [time(12, 0), time(15, 0), time(18, 0)]
MAX_SIMULTANEOUS_GAMES = 2
MIN_WINDOW_DAYS = 7


@dataclass(frozen=True)
class Team:
    """A team from the roster. Identity is its position in the roster."""
    name: str
    city: str

    @property
    def label(self) -> str:
        return f"{self.name} ({self.city})"


@dataclass(frozen=True)
class Match:
    """One leg of a pairing: home team hosts away team."""
    home: Team
    away: Team


@dataclass(frozen=True)
class Slot:
    """A playable (date, time) with its position in the full enumeration."""
    date: date
    time: time
    index: int


@dataclass(frozen=True)
class ScheduledGame:
    """A match placed on a slot's date and time."""
    date: date
    time: time
    match: Match

    @property
    def home(self) -> Team:
        return self.match.home

    @property
    def away(self) -> Team:
        return self.match.away
