# tests/test_env_loader.py
"""Tests for env.loader.load_config."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from env.loader import DEFAULT_CONFIG_PATH, PROJECT_ROOT, load_config, log_level
from env.schema import MazeConfig


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "maze.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_repository_config_loads() -> None:
    config = load_config(DEFAULT_CONFIG_PATH)

    assert config.movement.step_duration == pytest.approx(0.4)
    assert (config.costs.orthogonal, config.costs.diagonal, config.costs.hazard_penalty) == (10, 14, 10)
    assert config.search.max_expansions is None
    assert config.monitoring.event_log == PROJECT_ROOT / "logs" / "monitoring" / "events.jsonl"


def test_missing_keys_fall_back_to_defaults(tmp_path: Path) -> None:
    path = write_config(tmp_path, "movement:\n  step_duration: 0.2\n")

    config = load_config(path)

    assert config.movement.step_duration == pytest.approx(0.2)
    assert config.costs == MazeConfig().costs
    assert config.logging.level == "INFO"
    assert config.monitoring.event_log is None


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_config(write_config(tmp_path, "")) == MazeConfig()


def test_values_are_parsed(tmp_path: Path) -> None:
    path = write_config(
        tmp_path,
        """
costs:
  orthogonal: 2
  diagonal: 3
  hazard_penalty: 4
search:
  max_expansions: 500
logging:
  level: debug
monitoring:
  event_log: /var/tmp/events.jsonl
""",
    )

    config = load_config(path)

    assert (config.costs.orthogonal, config.costs.diagonal, config.costs.hazard_penalty) == (2, 3, 4)
    assert config.search.max_expansions == 500
    assert config.logging.level == "DEBUG"
    assert log_level(config) == logging.DEBUG
    assert config.monitoring.event_log == Path("/var/tmp/events.jsonl")


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "movement: 3\n",
        "movement:\n  step_duration: 0\n",
        "costs:\n  orthogonal: 0\n",
        "costs:\n  orthogonal: 10\n  diagonal: 9\n",
        "costs:\n  hazard_penalty: 0\n",
        "search:\n  max_expansions: -1\n",
        "logging:\n  level: chatty\n",
    ],
)
def test_invalid_configs_are_rejected(tmp_path: Path, text: str) -> None:
    with pytest.raises(ValueError):
        load_config(write_config(tmp_path, text))
