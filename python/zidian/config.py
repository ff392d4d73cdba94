"""Configuration loader for zidian.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any, Optional

from .phonetics.tones import DEFAULT_TONE_COLOURS

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "dictionary_path": None,
    "cache_dir": "sources",
    "output": "output/deck.apkg",
    "segmenter": "jieba",
    "tone_colours": ";".join(DEFAULT_TONE_COLOURS),
    "side": None,
    "tier_list": None,
    "tier_filter": None,
    "force": False,
    "quiet": False,
    "verbose": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/zidian -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the loaded configuration so the next load() reads it again."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_dictionary_path() -> Optional[str]:
    return get_default("dictionary_path", FALLBACK_DEFAULTS["dictionary_path"])


def default_cache_dir() -> str:
    return get_default("cache_dir", FALLBACK_DEFAULTS["cache_dir"])


def default_output() -> str:
    return get_default("output", FALLBACK_DEFAULTS["output"])


def default_segmenter() -> str:
    return get_default("segmenter", FALLBACK_DEFAULTS["segmenter"])


def default_tone_colours() -> str:
    return get_default("tone_colours", FALLBACK_DEFAULTS["tone_colours"])
