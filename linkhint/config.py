"""Persistent JSON config helpers.

Stores the hint-key alphabet, hint label style, and single-candidate jump
preference. Malformed or missing config falls back to defaults per key.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .selector.overlay import DEFAULT_HINT_STYLE, is_valid_hint_style

APP_NAME = "linkhint"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_HINT_KEYS = "asdfghjkl"


@dataclass(frozen=True)
class HintSettings:
    """Effective selector settings after validation."""

    keys: str = DEFAULT_HINT_KEYS
    style: str = DEFAULT_HINT_STYLE
    single_candidate_jump: bool = True


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored; the next load just sees defaults.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def is_valid_hint_keys(value: object) -> bool:
    """Hint keys need two or more distinct printable, non-space characters."""
    if not isinstance(value, str) or len(value) < 2:
        return False
    if len(set(value)) != len(value):
        return False
    return all(ch.isprintable() and not ch.isspace() for ch in value)


def load_hint_settings() -> HintSettings:
    """Load selector settings, replacing each invalid value with its default."""
    data = load_config()
    keys = data.get("hint_keys")
    style = data.get("hint_style")
    single = data.get("single_candidate_jump")
    return HintSettings(
        keys=keys if is_valid_hint_keys(keys) else DEFAULT_HINT_KEYS,
        style=style if isinstance(style, str) and is_valid_hint_style(style) else DEFAULT_HINT_STYLE,
        single_candidate_jump=single if isinstance(single, bool) else True,
    )


def save_hint_keys(keys: str) -> None:
    """Persist the hint-key alphabet; invalid alphabets are rejected."""
    if not is_valid_hint_keys(keys):
        raise ValueError(f"invalid hint keys: {keys!r}")
    config = load_config()
    config["hint_keys"] = keys
    save_config(config)
