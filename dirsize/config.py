"""Read-only JSON config helpers.

Supplies defaults for traversal limits, cancellation and output styling.
All access is tolerant: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirsize"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_max_concurrency() -> int | None:
    """Return the configured cap on live walk threads, or ``None`` for unbounded.

    Booleans and non-positive integers are rejected.
    """
    value = load_config().get("max_concurrency")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 1 else None


def load_cancel_on_error() -> bool:
    value = load_config().get("cancel_on_error")
    return value if isinstance(value, bool) else True


def load_human_readable() -> bool:
    value = load_config().get("human_readable")
    return value if isinstance(value, bool) else False


def load_style() -> str:
    """Return the configured Pygments style name."""
    value = load_config().get("style")
    return value if isinstance(value, str) and value else DEFAULT_STYLE


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_STYLE",
    "load_config",
    "load_max_concurrency",
    "load_cancel_on_error",
    "load_human_readable",
    "load_style",
]
