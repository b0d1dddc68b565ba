"""Error kinds raised while building a calendar.

Every error is fatal for a run. The command-line entry point catches
CalendarError, prints the message and exits with status 1.
"""


class CalendarError(Exception):
    kind = "calendar_error"


class InvalidDateFormat(CalendarError):
    kind = "invalid_date_format"

    def __init__(self, value: str, fmt: str = "DD.MM.YYYY"):
        self.value = value
        super().__init__(f"Invalid date format: {value!r}. Use {fmt}")


class MissingInputFile(CalendarError):
    kind = "missing_input_file"

    def __init__(self, path):
        self.path = path
        super().__init__(f"Teams file does not exist: {path}")


class InvalidDateRange(CalendarError):
    kind = "invalid_date_range"


class MalformedRosterLine(CalendarError):
    kind = "malformed_roster_line"

    def __init__(self, line: str, line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Invalid roster line{where}: {line}")


class InsufficientTeams(CalendarError):
    kind = "insufficient_teams"

    def __init__(self, count: int, minimum: int = 2):
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Not enough teams: {count} loaded (minimum {minimum})"
        )


class InsufficientSlotsError(CalendarError):
    kind = "insufficient_slots"

    def __init__(self, slots: int, matches: int):
        self.slots = slots
        self.matches = matches
        super().__init__(
            f"Not enough slots for all games: {slots} slots for {matches} "
            f"matches. Widen the date range or add game days/times."
        )


class ConfigError(CalendarError):
    kind = "config_error"


class RosterEncodingError(CalendarError):
    kind = "roster_encoding"

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Teams file {path} is not valid UTF-8: {reason}")


class OutputWriteError(CalendarError):
    kind = "output_write_error"

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Cannot write {path}: {reason}")
