"""Schedule validation for the calendar builder.

Re-checks a produced schedule against the match list and the slot grid.
"""

from collections import Counter, defaultdict

from rrcal.models import Match, ScheduledGame, Slot


def validate_schedule(games: list[ScheduledGame], matches: list[Match],
                      slots: list[Slot], max_per_slot: int) -> dict:
    """Validate a schedule.

    Returns dict with:
    - valid: bool (True if no hard violations)
    - errors: list of hard violations
    - warnings: list of soft issues
    """
    errors = []
    warnings = []

    slot_keys = {(s.date, s.time) for s in slots}
    per_slot: dict[tuple, list[ScheduledGame]] = defaultdict(list)

    for g in games:
        key = (g.date, g.time)
        if key not in slot_keys:
            errors.append(
                f"{g.home.label} vs {g.away.label} on {g.date} "
                f"{g.time:%H:%M} is not an available slot"
            )
        per_slot[key].append(g)

    for (d, t), slot_games in sorted(per_slot.items()):
        if len(slot_games) > max_per_slot:
            errors.append(
                f"{d} {t:%H:%M}: {len(slot_games)} games "
                f"(max {max_per_slot})"
            )
        # Allowed, but worth pointing out
        seen = Counter()
        for g in slot_games:
            seen[g.home] += 1
            seen[g.away] += 1
        for team, count in seen.items():
            if count > 1:
                warnings.append(
                    f"{team.label} plays {count} games at {d} {t:%H:%M}"
                )

    # Every match exactly once
    expected = Counter(matches)
    actual = Counter(g.match for g in games)
    for m, count in expected.items():
        got = actual.get(m, 0)
        if got != count:
            errors.append(
                f"{m.home.label} vs {m.away.label}: scheduled {got} times "
                f"(expected {count})"
            )
    for m in actual:
        if m not in expected:
            errors.append(
                f"{m.home.label} vs {m.away.label}: scheduled but not a "
                f"generated match"
            )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def format_validation_report(result: dict) -> str:
    """Format a calendar check as text; double-bookings show as notes."""
    lines = ["=" * 60, "CALENDAR CHECK", "=" * 60]

    if result["valid"]:
        lines.append("\nOK: every match placed once, all slots within capacity")
    else:
        lines.append(f"\nFAILED: {len(result['errors'])} problems found")
        for e in result["errors"]:
            lines.append(f"  ! {e}")

    if result["warnings"]:
        lines.append(f"\nDouble-booked teams ({len(result['warnings'])}):")
        lines.extend(f"  - {w}" for w in result["warnings"])

    return "\n".join(lines)
