"""Assignment of matches to slots, and the end-to-end scheduling pipeline."""

import math
from datetime import date

from rrcal.errors import InsufficientSlotsError
from rrcal.models import Match, ScheduledGame, Slot, Team
from rrcal.roundrobin import generate_matches
from rrcal.slots import enumerate_slots


def _fill_slot(slot: Slot, matches: list[Match], placed: int,
               games_per_slot: int, max_per_slot: int) -> list[ScheduledGame]:
    """Place the next unplaced matches on one slot.

    `placed` is how many matches earlier slots already took. Matches are
    taken in order until the slot is full, the matches run out, or the
    running total reaches (slot.index + 1) * games_per_slot. The cutoff is
    checked after each placement against the total for the whole run, not
    against this slot's own count.
    """
    games = []
    cutoff = (slot.index + 1) * games_per_slot
    while placed < len(matches) and len(games) < max_per_slot:
        games.append(ScheduledGame(date=slot.date, time=slot.time,
                                   match=matches[placed]))
        placed += 1
        if placed >= cutoff:
            break
    return games


def assign_games(matches: list[Match], slots: list[Slot],
                 max_per_slot: int) -> list[ScheduledGame]:
    """Assign every match to a slot, pacing games evenly over the window.

    Raises InsufficientSlotsError before placing anything if there are
    fewer slots than matches.
    """
    if len(slots) < len(matches):
        raise InsufficientSlotsError(len(slots), len(matches))
    if not matches:
        return []

    games_per_slot = math.ceil(len(matches) / len(slots))

    scheduled: list[ScheduledGame] = []
    for slot in sorted(slots, key=lambda s: s.index):
        if len(scheduled) >= len(matches):
            break
        scheduled.extend(_fill_slot(slot, matches, len(scheduled),
                                    games_per_slot, max_per_slot))

    if len(scheduled) < len(matches):
        raise RuntimeError(
            f"Slots exhausted with {len(matches) - len(scheduled)} matches "
            f"unplaced despite {len(slots)} slots for {len(matches)} matches"
        )
    return scheduled


def build_schedule(teams: list[Team], start_date: date, end_date: date,
                   config: dict) -> dict:
    """Generate matches and slots, then assign them.

    Returns dict with:
    - matches: every match in generation order
    - slots: every slot in the window
    - games: scheduled games in assignment order
    """
    pattern = config["pattern"]
    matches = generate_matches(teams)
    slots = enumerate_slots(start_date, end_date,
                            pattern["days"], pattern["times"])
    games = assign_games(matches, slots, pattern["max_simultaneous_games"])
    return {
        "matches": matches,
        "slots": slots,
        "games": games,
    }
