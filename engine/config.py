"""Engine configuration: JSON file → EngineConfig, with validation.

Validation mirrors a compiler pass: collect every problem as a readable
message instead of stopping at the first one.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from engine.errors import ConfigError
from engine.query import MINUS_MARKER

MAX_RESULT_DOCUMENT_COUNT = 5


@dataclass(frozen=True)
class EngineConfig:
    max_results: int = MAX_RESULT_DOCUMENT_COUNT
    minus_marker: str = MINUS_MARKER
    stop_words: str = ""

    def to_dict(self) -> dict:
        return {
            "max_results": self.max_results,
            "minus_marker": self.minus_marker,
            "stop_words": self.stop_words,
        }


# ── Validation ──────────────────────────────────────────────────────


def validate_config_dict(config: object) -> list[str]:
    """Check field types and ranges.  Returns list of error strings."""
    if not isinstance(config, dict):
        return ["Config must be a JSON object."]

    errors: list[str] = []

    max_results = config.get("max_results", MAX_RESULT_DOCUMENT_COUNT)
    # bool is an int subclass
    if not isinstance(max_results, int) or isinstance(max_results, bool) or max_results < 1:
        errors.append("'max_results' must be a positive integer.")

    marker = config.get("minus_marker", MINUS_MARKER)
    if not isinstance(marker, str) or len(marker) != 1 or marker == " ":
        errors.append("'minus_marker' must be a single non-space character.")

    stop_words = config.get("stop_words", "")
    if not isinstance(stop_words, str):
        errors.append("'stop_words' must be a string of space-separated words.")

    return errors


def _read_json(config_path: str | Path) -> object:
    path = Path(config_path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError([f"Invalid JSON: {e}"]) from e
    except FileNotFoundError as e:
        raise ConfigError([f"Config file not found: {config_path}"]) from e


def validate_config(config_path: str | Path) -> tuple[bool, list[str]]:
    """Validate a config file.  Returns (passed, errors)."""
    try:
        data = _read_json(config_path)
    except ConfigError as e:
        return False, e.errors
    errors = validate_config_dict(data)
    return not errors, errors


def config_from_dict(data: object) -> EngineConfig:
    errors = validate_config_dict(data)
    if errors:
        raise ConfigError(errors)
    return EngineConfig(
        max_results=data.get("max_results", MAX_RESULT_DOCUMENT_COUNT),
        minus_marker=data.get("minus_marker", MINUS_MARKER),
        stop_words=data.get("stop_words", ""),
    )


def load_config(config_path: str | Path | None = None) -> EngineConfig:
    """Load and validate a config file; None → defaults."""
    if config_path is None:
        return EngineConfig()
    return config_from_dict(_read_json(config_path))
