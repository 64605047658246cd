"""Configuration loader for random_word.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "languages": "de,en,es,fr,ja,ru,zh",  # builder selection only
    "language": "en",
    "buffer_size": 4096,
    "num_words": 4,
    "separator": "-",
    "wordlist_dir": "wordlists",
    "output_dir": "python/random_word/data",
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/random_word -> root
        Path.cwd() / "config.json",
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


def parse_languages(value: str) -> list[str]:
    """Split a comma-separated language list into codes."""
    return [code.strip() for code in value.split(",") if code.strip()]


# Convenience accessors
def default_languages() -> list[str]:
    return parse_languages(get_default("languages", FALLBACK_DEFAULTS["languages"]))


def default_language() -> str:
    return get_default("language", FALLBACK_DEFAULTS["language"])


def default_buffer_size() -> int:
    return get_default("buffer_size", FALLBACK_DEFAULTS["buffer_size"])


def default_num_words() -> int:
    return get_default("num_words", FALLBACK_DEFAULTS["num_words"])


def default_separator() -> str:
    return get_default("separator", FALLBACK_DEFAULTS["separator"])


def default_wordlist_dir() -> str:
    return get_default("wordlist_dir", FALLBACK_DEFAULTS["wordlist_dir"])


def default_output_dir() -> str:
    return get_default("output_dir", FALLBACK_DEFAULTS["output_dir"])
