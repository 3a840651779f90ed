"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def create_tray(
    icon_image: Image.Image,
    title: str,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    menu = Menu(
        MenuItem("Show Patch Tuesdays", lambda _icon, _item: on_show(), default=True),
        Menu.SEPARATOR,
        MenuItem("Exit", lambda _icon, _item: on_exit()),
    )
    return pystray.Icon("patch-tuesday", icon_image, title, menu)


def refresh_tray(icon: pystray.Icon, icon_image: Image.Image, title: str) -> None:
    """Swap in a new image and tooltip on a running icon."""
    icon.icon = icon_image
    icon.title = title
