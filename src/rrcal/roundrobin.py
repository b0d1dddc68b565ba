"""Double round-robin match generation."""

from itertools import combinations

from rrcal.models import Match, Team


def generate_matches(teams: list[Team]) -> list[Match]:
    """Generate both legs of every pairing.

    Pairs are taken in roster order (i < j); for each pair the match with
    teams[i] at home comes first, then the return match. For n teams this
    gives n * (n - 1) matches.
    """
    matches = []
    for first, second in combinations(teams, 2):
        matches.append(Match(home=first, away=second))
        matches.append(Match(home=second, away=first))
    return matches


def verify_matches(matches: list[Match], teams: list[Team]) -> dict:
    """Verify a match list is a complete double round-robin.

    Returns dict with:
    - valid: bool
    - errors: list of error strings
    - pair_counts: dict of (home, away) -> count
    - games_per_team: dict of team -> game count
    """
    errors = []
    pair_counts: dict[tuple[Team, Team], int] = {}
    games_per_team: dict[Team, int] = {t: 0 for t in teams}

    for m in matches:
        if m.home == m.away:
            errors.append(f"{m.home.label} is drawn against itself")
            continue
        key = (m.home, m.away)
        pair_counts[key] = pair_counts.get(key, 0) + 1
        games_per_team[m.home] = games_per_team.get(m.home, 0) + 1
        games_per_team[m.away] = games_per_team.get(m.away, 0) + 1

    # Every ordered pair plays exactly once
    for home in teams:
        for away in teams:
            if home == away:
                continue
            count = pair_counts.get((home, away), 0)
            if count != 1:
                errors.append(
                    f"{home.label} vs {away.label}: played {count} times "
                    f"(expected 1)"
                )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "pair_counts": pair_counts,
        "games_per_team": games_per_team,
    }
