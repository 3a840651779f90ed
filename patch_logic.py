"""Pure Patch Tuesday calculations, no UI dependencies.

Months are zero-based (0 = January .. 11 = December) throughout this module.
"""

from datetime import date, timedelta

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
MONTH_NAMES = ["January", "February", "March", "April", "May", "June",
               "July", "August", "September", "October", "November", "December"]

TUESDAY = 1  # date.weekday()


class Clock:
    """Source of "today" (date only).

    Re-read on every call unless frozen to a fixed date::

        Clock().today()                       # system date
        Clock(frozen=date(2025, 1, 14)).today()  # always 2025-01-14
    """

    __slots__ = ("_frozen",)

    def __init__(self, frozen: date | None = None) -> None:
        self._frozen = frozen

    def today(self) -> date:
        if self._frozen is not None:
            return self._frozen
        return date.today()


SYSTEM_CLOCK = Clock()


def make_date(year: int, month: int, day: int) -> date:
    """Build a date from a zero-based month, rolling over out-of-range values.

    ``make_date(2024, 12, 1)`` is 2025-01-01 and ``make_date(2025, 0, 32)``
    is 2025-02-01.
    """
    extra_years, month = divmod(month, 12)
    return date(year + extra_years, month + 1, 1) + timedelta(days=day - 1)


def sunday_weekday(d: date) -> int:
    """Weekday ordinal with Sunday=0 .. Saturday=6."""
    return (d.weekday() + 1) % 7


def patch_tuesday(year: int, month: int) -> date:
    """Return the second Tuesday of the given (year, zero-based month)."""
    first_day = make_date(year, month, 1)
    offset = (9 - sunday_weekday(first_day)) % 7
    first_tuesday = 1 + offset
    return make_date(year, month, first_tuesday + 7)


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 11:
        return year + 1, 0
    return year, month + 1


def next_patch_tuesdays(count: int, clock: Clock = SYSTEM_CLOCK) -> list[date]:
    """Return the next ``count`` Patch Tuesdays falling on or after today."""
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")

    today = clock.today()
    year, month = today.year, today.month - 1
    dates: list[date] = []
    while len(dates) < count:
        pt = patch_tuesday(year, month)
        if pt >= today:
            dates.append(pt)
        year, month = next_month(year, month)
    return dates


def days_away(d: date, clock: Clock = SYSTEM_CLOCK) -> int:
    """Signed number of calendar days from today to ``d``."""
    return (d - clock.today()).days


def format_date(d: date) -> str:
    """Format as e.g. ``Tue, Jan 14, 2025`` regardless of process locale."""
    return f"{DAY_ABBR[d.weekday()]}, {MONTH_ABBR[d.month - 1]} {d.day}, {d.year}"


def format_days_away(days: int) -> str:
    """Badge text used in the upcoming list."""
    if days == 0:
        return "Today"
    if days == 1:
        return "1 day"
    if days == -1:
        return "1 day ago"
    if days > 0:
        return f"{days} days"
    return f"{abs(days)} days ago"


def format_days_until(days: int) -> str:
    """Badge text used for the lookup result ("N days away" wording)."""
    if days == 0:
        return "Today"
    if days == 1:
        return "1 day away"
    if days > 0:
        return f"{days} days away"
    if days == -1:
        return "1 day ago"
    return f"{abs(days)} days ago"
