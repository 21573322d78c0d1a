"""Persistent JSON config helpers.

Stores output defaults and extra dictionary file names.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "foamoutline"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

OUTPUT_FORMATS: tuple[str, ...] = ("tree", "symbols", "json")
DEFAULT_STYLE = "monokai"
DEFAULT_FORMAT = "tree"
DEFAULT_MAX_SYMBOLS = 2000


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_style() -> str:
    """Load the Pygments style name used for coloured JSON output."""
    value = load_config().get("style")
    if not isinstance(value, str):
        return DEFAULT_STYLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_STYLE


def save_style(style: str) -> None:
    stripped = str(style).strip()
    if not stripped:
        return
    config = load_config()
    config["style"] = stripped
    save_config(config)


def load_output_format() -> str:
    """Load the default output format, falling back to ``tree``."""
    value = load_config().get("format")
    return value if isinstance(value, str) and value in OUTPUT_FORMATS else DEFAULT_FORMAT


def load_max_symbols() -> int:
    """Load the picker row cap.

    Booleans, non-integers and non-positive values fall back to the default.
    """
    value = load_config().get("max_symbols")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_MAX_SYMBOLS
    return value


def load_extra_dictionary_names() -> frozenset[str]:
    """Load additional file names to treat as OpenFOAM dictionaries."""
    value = load_config().get("extra_dictionary_names")
    if not isinstance(value, list):
        return frozenset()
    return frozenset(item.strip() for item in value if isinstance(item, str) and item.strip())


def save_extra_dictionary_names(names: list[str]) -> None:
    config = load_config()
    config["extra_dictionary_names"] = sorted({name.strip() for name in names if name.strip()})
    save_config(config)
