from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .schema import (
    CostConfig,
    LoggingConfig,
    MazeConfig,
    MonitoringConfig,
    MovementConfig,
    SearchConfig,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "maze.yaml"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML config file and require a mapping at the top."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    raw = cfg.get(name) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(raw)}")
    return raw


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(path: Path | None = None) -> MazeConfig:
    """Main entry point: returns a fully resolved MazeConfig.

    Missing sections or keys fall back to the dataclass defaults.
    """
    path = path or DEFAULT_CONFIG_PATH
    cfg = _load_yaml(path)

    movement_raw = _section(cfg, "movement")
    costs_raw = _section(cfg, "costs")
    search_raw = _section(cfg, "search")
    logging_raw = _section(cfg, "logging")
    monitoring_raw = _section(cfg, "monitoring")

    defaults = MazeConfig()

    movement = MovementConfig(
        step_duration=float(
            movement_raw.get("step_duration", defaults.movement.step_duration)
        ),
    )
    costs = CostConfig(
        orthogonal=int(costs_raw.get("orthogonal", defaults.costs.orthogonal)),
        diagonal=int(costs_raw.get("diagonal", defaults.costs.diagonal)),
        hazard_penalty=int(
            costs_raw.get("hazard_penalty", defaults.costs.hazard_penalty)
        ),
    )

    max_expansions = search_raw.get("max_expansions")
    search = SearchConfig(
        max_expansions=int(max_expansions) if max_expansions is not None else None,
    )

    log_cfg = LoggingConfig(
        level=str(logging_raw.get("level", defaults.logging.level)).upper(),
    )

    event_log = monitoring_raw.get("event_log")
    monitoring = MonitoringConfig(
        event_log=_resolve_path(event_log) if event_log else None,
    )

    config = MazeConfig(
        movement=movement,
        costs=costs,
        search=search,
        logging=log_cfg,
        monitoring=monitoring,
    )

    # perform basic validation before returning
    _validate_config(config)
    return config


def log_level(config: MazeConfig) -> int:
    """Translate the configured level name into a logging constant."""
    return getattr(logging, config.logging.level)


def _resolve_path(raw: str) -> Path:
    """Relative paths are taken relative to the project root."""
    p = Path(raw)
    if p.is_absolute():
        return p
    return PROJECT_ROOT / p


def _validate_config(config: MazeConfig) -> None:
    """Minimal sanity checks for the configuration."""
    if config.movement.step_duration <= 0:
        raise ValueError(
            f"movement.step_duration must be positive, got {config.movement.step_duration}"
        )

    costs = config.costs
    if costs.orthogonal <= 0 or costs.diagonal <= 0:
        raise ValueError("costs.orthogonal and costs.diagonal must be positive")
    if costs.diagonal < costs.orthogonal:
        raise ValueError(
            f"costs.diagonal ({costs.diagonal}) must not be below "
            f"costs.orthogonal ({costs.orthogonal})"
        )
    if costs.hazard_penalty < 1:
        raise ValueError(f"costs.hazard_penalty must be >= 1, got {costs.hazard_penalty}")

    max_exp = config.search.max_expansions
    if max_exp is not None and max_exp <= 0:
        raise ValueError(f"search.max_expansions must be positive or null, got {max_exp}")

    if config.logging.level not in _LOG_LEVELS:
        raise ValueError(f"Invalid logging.level: {config.logging.level}")
