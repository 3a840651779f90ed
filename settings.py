"""JSON-based settings for the Patch Tuesday tool."""

import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".patch-tuesday-settings.json")

_DEFAULTS = {
    "upcoming_count": 12,
    "years_before": 5,
    "years_after": 10,
    "log_level": "WARNING",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", _SETTINGS_PATH)
        return settings

    if _is_int(stored.get("upcoming_count")) and stored["upcoming_count"] >= 1:
        settings["upcoming_count"] = stored["upcoming_count"]
    for key in ("years_before", "years_after"):
        if _is_int(stored.get(key)) and stored[key] >= 0:
            settings[key] = stored[key]
    level = stored.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        settings["log_level"] = level.upper()
    return settings
