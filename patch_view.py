"""Presentation model: what the window shows, computed without touching widgets."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Generic, TypeVar

from patch_logic import (
    MONTH_NAMES,
    SYSTEM_CLOCK,
    Clock,
    days_away,
    format_date,
    format_days_away,
    format_days_until,
    next_patch_tuesdays,
    patch_tuesday,
)

logger = logging.getLogger(__name__)

UPCOMING_COUNT = 12
YEARS_BEFORE = 5
YEARS_AFTER = 10

# Region identifiers
UPCOMING_DATES = "upcoming-dates"
MONTH_SELECT = "month-select"
YEAR_SELECT = "year-select"
RESULT_DATE = "result-date"
RESULT_BADGE = "result-badge"

W = TypeVar("W")


class RegionNotFoundError(LookupError):
    """A display region was requested that the window never registered."""


class Regions(Generic[W]):
    """Widget lookup by identifier. Unknown identifiers fail immediately."""

    __slots__ = ("_widgets",)

    def __init__(self) -> None:
        self._widgets: dict[str, W] = {}

    def register(self, name: str, widget: W) -> W:
        self._widgets[name] = widget
        return widget

    def __getitem__(self, name: str) -> W:
        try:
            return self._widgets[name]
        except KeyError:
            raise RegionNotFoundError(f"no display region named {name!r}") from None


@dataclass(frozen=True)
class UpcomingRow:
    day: date
    date_label: str
    badge_text: str
    row_class: str
    badge_class: str

    @property
    def is_highlight(self) -> bool:
        return "highlight" in self.row_class.split()


@dataclass(frozen=True)
class Option:
    label: str
    value: int
    selected: bool


@dataclass(frozen=True)
class LookupResult:
    day: date
    date_label: str
    badge_text: str
    badge_class: str
    days: int


def upcoming_rows(count: int = UPCOMING_COUNT,
                  clock: Clock = SYSTEM_CLOCK) -> list[UpcomingRow]:
    """One row per upcoming Patch Tuesday; the soonest one is highlighted."""
    rows: list[UpcomingRow] = []
    for index, d in enumerate(next_patch_tuesdays(count, clock)):
        is_first = index == 0
        rows.append(UpcomingRow(
            day=d,
            date_label=format_date(d),
            badge_text=format_days_away(days_away(d, clock)),
            row_class="date-item highlight" if is_first else "date-item",
            badge_class="badge primary" if is_first else "badge",
        ))
    return rows


def default_selection(clock: Clock = SYSTEM_CLOCK) -> tuple[int, int]:
    """(month, year) of the soonest upcoming Patch Tuesday."""
    soonest = next_patch_tuesdays(1, clock)[0]
    return soonest.month - 1, soonest.year


def month_options(selected_month: int) -> list[Option]:
    return [Option(name, index, index == selected_month)
            for index, name in enumerate(MONTH_NAMES)]


def year_options(selected_year: int,
                 clock: Clock = SYSTEM_CLOCK,
                 years_before: int = YEARS_BEFORE,
                 years_after: int = YEARS_AFTER) -> list[Option]:
    """Years from ``years_before`` before to ``years_after`` after the current one.

    The range is widened to include ``selected_year`` so a selection always exists.
    """
    current_year = clock.today().year
    first = min(current_year - years_before, selected_year)
    last = max(current_year + years_after, selected_year)
    return [Option(str(y), y, y == selected_year) for y in range(first, last + 1)]


def tray_status(clock: Clock = SYSTEM_CLOCK) -> tuple[int, str]:
    """(days until next Patch Tuesday, tray tooltip text)."""
    soonest = next_patch_tuesdays(1, clock)[0]
    days = days_away(soonest, clock)
    return days, f"Next Patch Tuesday: {format_date(soonest)} ({format_days_away(days)})"


def lookup_result(year: int, month: int, clock: Clock = SYSTEM_CLOCK) -> LookupResult:
    """Patch Tuesday for an arbitrary (year, zero-based month), past or future."""
    d = patch_tuesday(year, month)
    days = days_away(d, clock)
    logger.debug("Lookup %04d-%02d -> %s (%d days)", year, month + 1, d, days)
    return LookupResult(
        day=d,
        date_label=format_date(d),
        badge_text=format_days_until(days),
        badge_class="badge accent" if days >= 0 else "badge",
        days=days,
    )
