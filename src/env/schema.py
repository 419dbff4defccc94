# MazeConfig, MovementConfig, CostConfig dataclasses
# src/env/schema.py

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class MovementConfig:
    """How the path follower paces its steps."""
    step_duration: float = 0.4  # seconds per single-tile move


@dataclass
class CostConfig:
    """Per-step move costs used by the grid oracle."""
    orthogonal: int = 10
    diagonal: int = 14
    hazard_penalty: int = 10    # multiplier when the destination holds a hazard


@dataclass
class SearchConfig:
    """Pathfinder limits."""
    max_expansions: Optional[int] = None  # None means unbounded


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class MonitoringConfig:
    event_log: Optional[Path] = None  # JSONL file for monitoring events


@dataclass
class MazeConfig:
    """Top-level resolved configuration."""
    movement: MovementConfig = field(default_factory=MovementConfig)
    costs: CostConfig = field(default_factory=CostConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)
