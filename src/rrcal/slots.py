"""Enumeration of playable slots inside a date window."""

from datetime import date, time, timedelta

from rrcal.models import DayOfWeek, Slot


def enumerate_slots(start_date: date, end_date: date,
                    game_days: list[DayOfWeek],
                    game_times: list[time]) -> list[Slot]:
    """List every (date, time) slot from start_date to end_date inclusive.

    Dates whose weekday is in game_days get one slot per entry of
    game_times, in the order given. Slots are numbered 0, 1, 2, ... in
    emission order.
    """
    days = set(game_days)
    slots = []
    index = 0

    current = start_date
    while current <= end_date:
        if DayOfWeek.of(current) in days:
            for t in game_times:
                slots.append(Slot(date=current, time=t, index=index))
                index += 1
        current += timedelta(days=1)

    return slots
