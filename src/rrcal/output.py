"""Output formatters for the tournament calendar."""

import csv
import os
from datetime import date
from io import StringIO
from pathlib import Path

from rrcal.config import format_date
from rrcal.errors import OutputWriteError
from rrcal.models import DayOfWeek, ScheduledGame

WIDTH = 80

# Weekday names indexed by date.weekday() (Monday = 0); month names by
# date.month, in the form used after a day number.
LOCALES = {
    "ru": {
        "title": "СПОРТИВНЫЙ КАЛЕНДАРЬ",
        "period": "Период",
        "total": "Всего игр",
        "days": ["Понедельник", "Вторник", "Среда", "Четверг", "Пятница",
                 "Суббота", "Воскресенье"],
        "months": ["", "января", "февраля", "марта", "апреля", "мая", "июня",
                   "июля", "августа", "сентября", "октября", "ноября",
                   "декабря"],
    },
    "en": {
        "title": "SPORTS CALENDAR",
        "period": "Period",
        "total": "Total games",
        "days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
                 "Saturday", "Sunday"],
        "months": ["", "January", "February", "March", "April", "May", "June",
                   "July", "August", "September", "October", "November",
                   "December"],
    },
}


def format_date_full(d: date, locale: str = "ru") -> str:
    """'Пятница, 7 августа 2026' / 'Friday, 7 August 2026'."""
    names = LOCALES[locale]
    return f"{names['days'][d.weekday()]}, {d.day} {names['months'][d.month]} {d.year}"


def sort_games(games: list[ScheduledGame]) -> list[ScheduledGame]:
    """Chronological order; games sharing a slot keep assignment order."""
    return sorted(games, key=lambda g: (g.date, g.time))


def format_calendar(games: list[ScheduledGame], start_date: date,
                    end_date: date, locale: str = "ru",
                    title: str | None = None) -> str:
    """Format the calendar as a text report grouped by date."""
    names = LOCALES[locale]
    lines = []
    lines.append("=" * WIDTH)
    lines.append((title or names["title"]).center(WIDTH))
    lines.append(
        f"{names['period']}: {format_date(start_date)} - {format_date(end_date)}"
        .center(WIDTH)
    )
    lines.append("=" * WIDTH)
    lines.append("")

    current_date = None
    for g in sort_games(games):
        if g.date != current_date:
            current_date = g.date
            lines.append("")
            lines.append("-" * WIDTH)
            lines.append(format_date_full(current_date, locale))
            lines.append("-" * WIDTH)
        lines.append(
            f"  {g.time:%H:%M} | {g.home.label:<30} vs {g.away.label:<30}"
        )

    lines.append("")
    lines.append("=" * WIDTH)
    lines.append(f"{names['total']}: {len(games)}".center(WIDTH))
    lines.append("=" * WIDTH)
    return "\n".join(lines) + "\n"


def format_calendar_csv(games: list[ScheduledGame]) -> str:
    """Format the calendar as an editable CSV.

    Columns: Game, Date, Day, Time, Home, Home_City, Away, Away_City
    """
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(["Game", "Date", "Day", "Time",
                     "Home", "Home_City", "Away", "Away_City"])

    for i, g in enumerate(sort_games(games), 1):
        writer.writerow([
            i, format_date(g.date), DayOfWeek.of(g.date).name, f"{g.time:%H:%M}",
            g.home.name, g.home.city, g.away.name, g.away.city,
        ])

    return output.getvalue()


def _tmp_path(path: Path) -> Path:
    return path.with_name(f".{path.name}.tmp")


def write_outputs(outputs: list[tuple[str, str | Path]]) -> list[Path]:
    """Write rendered texts as UTF-8, all or nothing.

    Each text goes to a temporary file beside its target first; targets are
    only replaced once every temporary file is written. On failure the
    temporary files and any target already replaced in this call are
    removed, and OutputWriteError is raised.
    """
    targets = [(text, Path(path)) for text, path in outputs]
    for _, path in targets:
        if path.is_dir():
            raise OutputWriteError(path, "is a directory")

    written: list[Path] = []
    replaced: list[Path] = []
    current = None
    try:
        for text, path in targets:
            current = path
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = _tmp_path(path)
            tmp.write_text(text, encoding="utf-8")
            written.append(tmp)
        for _, path in targets:
            current = path
            os.replace(_tmp_path(path), path)
            replaced.append(path)
    except OSError as e:
        for p in written + replaced:
            p.unlink(missing_ok=True)
        raise OutputWriteError(current, e.strerror or str(e)) from e
    return [path for _, path in targets]


def write_calendar(text: str, path: str | Path) -> Path:
    """Write a rendered calendar as UTF-8, creating parent directories."""
    return write_outputs([(text, path)])[0]
