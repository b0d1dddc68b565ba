"""Statistics and balance reporting for a built calendar."""

from collections import defaultdict

from rrcal.models import DayOfWeek, ScheduledGame, Slot, Team


def compute_stats(games: list[ScheduledGame], teams: list[Team],
                  slots: list[Slot]) -> dict:
    """Compute per-team and per-day statistics for a schedule."""
    home_counts = defaultdict(int)
    away_counts = defaultdict(int)
    day_counts = defaultdict(lambda: defaultdict(int))  # team -> day -> count
    games_per_day = defaultdict(int)  # day name -> games

    for g in games:
        day = DayOfWeek.of(g.date).name
        home_counts[g.home] += 1
        away_counts[g.away] += 1
        day_counts[g.home][day] += 1
        day_counts[g.away][day] += 1
        games_per_day[day] += 1

    used_slots = {(g.date, g.time) for g in games}
    dates = sorted(g.date for g in games)

    return {
        "all_teams": list(teams),
        "home_counts": dict(home_counts),
        "away_counts": dict(away_counts),
        "total_games": {t: home_counts[t] + away_counts[t] for t in teams},
        "day_counts": {k: dict(v) for k, v in day_counts.items()},
        "games_per_day": dict(games_per_day),
        "game_count": len(games),
        "slots_available": len(slots),
        "slots_used": len(used_slots),
        "first_date": dates[0] if dates else None,
        "last_date": dates[-1] if dates else None,
    }


def format_stats_report(stats: dict) -> str:
    """Format statistics into a human-readable report."""
    lines = []
    lines.append("=" * 70)
    lines.append("SCHEDULE STATISTICS")
    lines.append("=" * 70)

    lines.append(f"\nGames: {stats['game_count']}")
    lines.append(f"Slots used: {stats['slots_used']} of "
                 f"{stats['slots_available']}")
    if stats["first_date"] is not None:
        lines.append(f"First game: {stats['first_date']:%d.%m.%Y}  "
                     f"Last game: {stats['last_date']:%d.%m.%Y}")

    all_teams = stats["all_teams"]
    width = max([len(t.label) for t in all_teams] + [4])

    lines.append("\n--- HOME/AWAY BALANCE ---")
    lines.append(f"{'Team':<{width}} {'Home':>5} {'Away':>5} {'Total':>5}")
    lines.append("-" * (width + 18))
    for t in all_teams:
        h = stats["home_counts"].get(t, 0)
        a = stats["away_counts"].get(t, 0)
        lines.append(f"{t.label:<{width}} {h:>5} {a:>5} "
                     f"{stats['total_games'][t]:>5}")

    lines.append("\n--- GAMES PER DAY OF WEEK ---")
    days = [d.name for d in DayOfWeek if stats["games_per_day"].get(d.name)]
    header = f"{'Team':<{width}}"
    for d in days:
        header += f" {d:>4}"
    lines.append(header)
    lines.append("-" * (width + 5 * len(days)))
    for t in all_teams:
        row = f"{t.label:<{width}}"
        for d in days:
            c = stats["day_counts"].get(t, {}).get(d, 0)
            row += f" {c:>4}"
        lines.append(row)

    return "\n".join(lines)
