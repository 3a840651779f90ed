"""Patch Tuesday window (tkinter): upcoming list plus month/year lookup."""

import logging
from tkinter import font as tkfont
from tkinter import ttk
import tkinter as tk

from patch_logic import SYSTEM_CLOCK, Clock
from patch_view import (
    MONTH_SELECT,
    RESULT_BADGE,
    RESULT_DATE,
    UPCOMING_DATES,
    YEAR_SELECT,
    Regions,
    default_selection,
    lookup_result,
    month_options,
    upcoming_rows,
    year_options,
)
from settings import load_settings

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
SUCCESS = "#107C10"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"

# Style classes from the presentation model -> widget options
_ROW_STYLES = {
    "date-item": {"bg": GRID_BG},
    "date-item highlight": {"bg": SEL_BG},
}
_BADGE_STYLES = {
    "badge": {"bg": "#E1E1E1", "fg": "#333333"},
    "badge primary": {"bg": ACCENT, "fg": "white"},
    "badge accent": {"bg": SUCCESS, "fg": "white"},
}


class PatchTuesdayWindow:
    """Lists upcoming Patch Tuesdays and looks up any month's date."""

    def __init__(self, clock: Clock = SYSTEM_CLOCK, settings: dict | None = None) -> None:
        self.clock = clock
        if settings is None:
            settings = load_settings()
        self.upcoming_count: int = settings["upcoming_count"]
        self.years_before: int = settings["years_before"]
        self.years_after: int = settings["years_after"]

        self.root = tk.Tk()
        self.root.title("Patch Tuesday")
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        self.regions: Regions[tk.Widget] = Regions()
        # Option values parallel to each combobox's displayed labels
        self._month_values: list[int] = []
        self._year_values: list[int] = []

        self._build_shell()
        self.render_all()

        self.regions[MONTH_SELECT].bind("<<ComboboxSelected>>", self.update_lookup_result)
        self.regions[YEAR_SELECT].bind("<<ComboboxSelected>>", self.update_lookup_result)

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_result = tkfont.Font(family=base, size=12, weight="bold")

    # ------------------------------------------------------------------
    # Build shell (once): upcoming list + lookup section
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=8, pady=6)

        tk.Label(
            outer, text="Upcoming Patch Tuesdays", font=self.font_header,
            bg=HEADER_BG, fg="#333333",
        ).pack(fill="x", pady=(0, 4))

        self.regions.register(UPCOMING_DATES, tk.Frame(outer, bg=GRID_BG)).pack(fill="x")

        tk.Label(
            outer, text="Look up a month", font=self.font_header,
            bg=HEADER_BG, fg="#333333",
        ).pack(fill="x", pady=(10, 4))

        selectors = tk.Frame(outer, bg=GRID_BG)
        selectors.pack(fill="x")
        self.regions.register(MONTH_SELECT, ttk.Combobox(
            selectors, state="readonly", width=12, font=self.font_normal,
        )).pack(side="left", padx=(0, 6))
        self.regions.register(YEAR_SELECT, ttk.Combobox(
            selectors, state="readonly", width=6, font=self.font_normal,
        )).pack(side="left")

        result = tk.Frame(outer, bg=GRID_BG)
        result.pack(fill="x", pady=(8, 0))
        self.regions.register(RESULT_DATE, tk.Label(
            result, font=self.font_result, bg=GRID_BG, fg="#333333",
        )).pack(side="left")
        self.regions.register(RESULT_BADGE, tk.Label(
            result, font=self.font_bold, padx=6, pady=1,
        )).pack(side="right")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render_all(self, keep_selection: bool = False) -> None:
        """Full render pass: upcoming list, selectors, lookup result."""
        self.render_upcoming_dates()
        self.populate_selectors(keep_selection)
        self.update_lookup_result()

    def render_upcoming_dates(self) -> None:
        container = self.regions[UPCOMING_DATES]
        rows = upcoming_rows(self.upcoming_count, self.clock)

        for child in container.winfo_children():
            child.destroy()

        for row in rows:
            row_style = _ROW_STYLES[row.row_class]
            item = tk.Frame(container, padx=6, pady=2, **row_style)
            item.pack(fill="x", pady=1)
            tk.Label(
                item, text=row.date_label, anchor="w",
                font=self.font_bold if row.is_highlight else self.font_normal,
                fg="#333333", **row_style,
            ).pack(side="left")
            tk.Label(
                item, text=row.badge_text, font=self.font_normal, padx=6,
                **_BADGE_STYLES[row.badge_class],
            ).pack(side="right")
        logger.debug("Rendered %d upcoming rows", len(rows))

    def populate_selectors(self, keep_selection: bool = False) -> None:
        """Fill both selectors, selecting the soonest Patch Tuesday's month/year.

        With ``keep_selection`` the month/year already chosen stays selected.
        """
        month_select = self.regions[MONTH_SELECT]
        year_select = self.regions[YEAR_SELECT]
        if keep_selection and self._month_values and self._year_values:
            month = self._month_values[month_select.current()]
            year = self._year_values[year_select.current()]
        else:
            month, year = default_selection(self.clock)

        months = month_options(month)
        years = year_options(year, self.clock, self.years_before, self.years_after)

        self._month_values = [o.value for o in months]
        month_select.configure(values=[o.label for o in months])
        month_select.current(self._month_values.index(month))

        self._year_values = [o.value for o in years]
        year_select.configure(values=[o.label for o in years])
        year_select.current(self._year_values.index(year))

    def update_lookup_result(self, _event: tk.Event | None = None) -> None:
        month = self._month_values[self.regions[MONTH_SELECT].current()]
        year = self._year_values[self.regions[YEAR_SELECT].current()]
        result = lookup_result(year, month, self.clock)

        self.regions[RESULT_DATE].configure(text=result.date_label)
        self.regions[RESULT_BADGE].configure(
            text=result.badge_text, **_BADGE_STYLES[result.badge_class],
        )

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        # Day counts go stale while hidden in the tray
        self.render_all(keep_selection=True)
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right, clear of a typical taskbar
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"+{x}+{y}")
