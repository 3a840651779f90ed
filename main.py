"""Entry point: glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import sys
import threading

from icon_gen import create_icon_image
from patch_view import tray_status
from patch_window import PatchTuesdayWindow
from settings import load_settings
from tray_icon import create_tray, refresh_tray

logger = logging.getLogger(__name__)

_TRAY_REFRESH_MS = 15 * 60 * 1000


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> None:
    settings = load_settings()
    setup_logging(settings["log_level"])

    # DPI awareness so positions / fonts are crisp on Hi-DPI monitors
    if sys.platform == "win32":
        try:
            ctypes.windll.shcore.SetProcessDpiAwareness(1)
        except (AttributeError, OSError) as exc:
            logger.debug("DPI awareness unavailable: %s", exc)

    win = PatchTuesdayWindow(settings=settings)

    days, title = tray_status(win.clock)
    tray = create_tray(create_icon_image(days), title,
                       on_show=lambda: win.root.after(0, on_show),
                       on_exit=lambda: win.root.after(0, on_exit))
    shown_days = days

    def refresh() -> None:
        nonlocal shown_days
        days, title = tray_status(win.clock)
        if days != shown_days:
            logger.info("Tray updated: %s", title)
            refresh_tray(tray, create_icon_image(days), title)
            shown_days = days

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        refresh()
        win.toggle()

    def on_exit() -> None:
        logger.info("Exiting")
        tray.stop()
        win.root.destroy()

    def periodic_refresh() -> None:
        refresh()
        win.root.after(_TRAY_REFRESH_MS, periodic_refresh)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()
    logger.info("Started: %s", title)

    win.root.after(_TRAY_REFRESH_MS, periodic_refresh)
    # tkinter main loop on the main thread
    win.root.mainloop()


if __name__ == "__main__":
    main()
