"""Config loading and input validation for the calendar builder."""

import re
from datetime import date, datetime, time
from pathlib import Path

import yaml

from rrcal.errors import ConfigError, InvalidDateFormat, InvalidDateRange
from rrcal.models import (
    DayOfWeek, GAME_DAYS, GAME_TIMES, MAX_SIMULTANEOUS_GAMES, MIN_WINDOW_DAYS,
)

DATE_FORMAT = "%d.%m.%Y"
LOCALES = ("ru", "en")

_DATE_RE = re.compile(r"^\d{2}\.\d{2}\.\d{4}$")


def parse_time(s: str) -> time:
    """Parse time strings like '5:30pm', '10am', '17:00'."""
    s_clean = s.strip().lower()

    is_pm = s_clean.endswith("pm")
    is_am = s_clean.endswith("am")
    if is_pm or is_am:
        s_clean = s_clean[:-2].strip()

    if ":" in s_clean:
        parts = s_clean.split(":")
        h = int(parts[0])
        m = int(parts[1])
    else:
        h = int(s_clean)
        m = 0

    if is_pm and h < 12:
        h += 12
    elif is_am and h == 12:
        h = 0

    return time(h, m)


def parse_date(s: str) -> date:
    """Parse a DD.MM.YYYY date string."""
    s = s.strip()
    if not _DATE_RE.match(s):
        raise InvalidDateFormat(s)
    try:
        return datetime.strptime(s, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormat(s) from None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def validate_date_range(start: date, end: date,
                        min_days: int = MIN_WINDOW_DAYS) -> None:
    """Require start < end and a window of at least min_days days."""
    if start >= end:
        raise InvalidDateRange("Start date must be before end date")
    if (end - start).days < min_days:
        raise InvalidDateRange(
            f"Period too short to hold all games: {(end - start).days} days "
            f"(minimum {min_days})"
        )


def default_config() -> dict:
    return {
        "pattern": {
            "days": list(GAME_DAYS),
            "times": list(GAME_TIMES),
            "max_simultaneous_games": MAX_SIMULTANEOUS_GAMES,
        },
        "calendar": {
            "min_days": MIN_WINDOW_DAYS,
        },
        "report": {
            "locale": "ru",
            "title": None,
        },
    }


def _section(raw: dict, name: str) -> dict:
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be a mapping, got {value!r}")
    return value


def _as_list(values, key: str) -> list:
    if not isinstance(values, list):
        raise ConfigError(f"{key} must be a list, got {values!r}")
    return values


def _positive_int(value, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"{key} must be a positive integer, got {value!r}")
    return value


def _parse_days(values) -> list[DayOfWeek]:
    days = []
    for v in _as_list(values, "pattern.days"):
        try:
            day = DayOfWeek.from_str(str(v))
        except KeyError:
            raise ConfigError(f"Unknown day of week in pattern: {v!r}") from None
        if day not in days:
            days.append(day)
    if not days:
        raise ConfigError("pattern.days must list at least one day")
    return days


def _parse_times(values) -> list[time]:
    times = []
    for v in _as_list(values, "pattern.times"):
        try:
            if isinstance(v, bool):
                raise ValueError(v)
            if isinstance(v, int):
                # PyYAML reads unquoted 12:00 as base-60, i.e. 720
                times.append(time(*divmod(v, 60)))
            else:
                times.append(parse_time(str(v)))
        except ValueError:
            raise ConfigError(f"Cannot parse time in pattern: {v!r}") from None
    if not times:
        raise ConfigError("pattern.times must list at least one time")
    return times


def load_config(path: str | Path | None = None) -> dict:
    """Load the optional YAML config, returning structured data.

    Returns dict with:
    - pattern: {days: [DayOfWeek], times: [time], max_simultaneous_games}
    - calendar: {min_days}
    - report: {locale, title}

    Keys missing from the file keep their defaults. With no path the
    defaults are returned unchanged.
    """
    config = default_config()
    if path is None:
        return config

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file {path} not found")
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    # Pattern
    pattern = _section(raw, "pattern")
    if "days" in pattern:
        config["pattern"]["days"] = _parse_days(pattern["days"])
    if "times" in pattern:
        config["pattern"]["times"] = _parse_times(pattern["times"])
    if "max_simultaneous_games" in pattern:
        config["pattern"]["max_simultaneous_games"] = _positive_int(
            pattern["max_simultaneous_games"], "pattern.max_simultaneous_games")

    # Calendar
    calendar = _section(raw, "calendar")
    if "min_days" in calendar:
        config["calendar"]["min_days"] = _positive_int(
            calendar["min_days"], "calendar.min_days")

    # Report
    report = _section(raw, "report")
    if "locale" in report:
        config["report"]["locale"] = check_locale(str(report["locale"]))
    if report.get("title"):
        config["report"]["title"] = str(report["title"])

    return config


def check_locale(locale: str) -> str:
    if locale not in LOCALES:
        raise ConfigError(
            f"Unknown report locale {locale!r} (expected one of "
            f"{', '.join(LOCALES)})"
        )
    return locale
