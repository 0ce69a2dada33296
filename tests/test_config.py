from __future__ import annotations

import json

import pytest

from engine.config import (
    EngineConfig,
    config_from_dict,
    load_config,
    validate_config,
    validate_config_dict,
)
from engine.errors import ConfigError


def test_defaults() -> None:
    config = load_config(None)
    assert config == EngineConfig()
    assert config.max_results == 5
    assert config.minus_marker == "-"
    assert config.stop_words == ""


def test_load_from_file(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_results": 3, "stop_words": "the a", "extra": 1}))

    config = load_config(path)
    assert config == EngineConfig(max_results=3, minus_marker="-", stop_words="the a")
    assert config.to_dict() == {"max_results": 3, "minus_marker": "-", "stop_words": "the a"}


def test_valid_dict_has_no_errors() -> None:
    assert validate_config_dict({}) == []
    assert validate_config_dict({"max_results": 10, "minus_marker": "!"}) == []


def test_collects_every_error() -> None:
    errors = validate_config_dict({"max_results": 0, "minus_marker": "--", "stop_words": 3})
    assert errors == [
        "'max_results' must be a positive integer.",
        "'minus_marker' must be a single non-space character.",
        "'stop_words' must be a string of space-separated words.",
    ]


@pytest.mark.parametrize("value", [True, 2.5, "5", -1])
def test_rejects_bad_max_results(value) -> None:
    assert validate_config_dict({"max_results": value}) == [
        "'max_results' must be a positive integer."
    ]


def test_rejects_space_marker() -> None:
    assert validate_config_dict({"minus_marker": " "}) != []


def test_rejects_non_object() -> None:
    assert validate_config_dict([1, 2]) == ["Config must be a JSON object."]


def test_config_from_dict_raises_with_errors() -> None:
    with pytest.raises(ConfigError) as exc_info:
        config_from_dict({"max_results": "many"})
    assert exc_info.value.errors == ["'max_results' must be a positive integer."]
    assert isinstance(exc_info.value, ValueError)


def test_validate_config_file(tmp_path) -> None:
    good = tmp_path / "good.json"
    good.write_text('{"max_results": 2}')
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")

    assert validate_config(good) == (True, [])

    passed, errors = validate_config(bad)
    assert not passed
    assert errors[0].startswith("Invalid JSON")

    passed, errors = validate_config(tmp_path / "missing.json")
    assert not passed
    assert errors[0].startswith("Config file not found")


def test_load_config_raises_on_invalid_file(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"minus_marker": ""}')
    with pytest.raises(ConfigError):
        load_config(path)
