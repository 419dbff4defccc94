# path: src/monitoring/events.py
"""
Event schemas for maze monitoring.

This module defines:
- MonitoringEvent (structured navigation/game events)
- EventType enum
- LoggingEventSink (forward events into the logging module)

All events are JSON-serializable via `.to_dict()` and are intended
for use with monitoring.bus.EventBus and monitoring.logger.JsonFileLogger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from enum import Enum, auto
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


# ============================================================
# Event Types
# ============================================================

class EventType(Enum):
    """Typed monitoring events emitted by the navigation core."""

    # Path search
    PATH_REQUESTED = auto()
    PATH_FOUND = auto()
    PATH_NOT_FOUND = auto()
    MOVE_BLOCKED = auto()

    # Step lifecycle
    STEP_ISSUED = auto()
    STEP_COMPLETED = auto()
    RETARGETED = auto()

    # Tile effects
    PICKUP_COLLECTED = auto()
    HAZARD_CLEARED = auto()

    # Agent phase (Idle, Stepping, Won, Lost)
    AGENT_PHASE_CHANGE = auto()

    # End states
    GAME_WON = auto()
    GAME_LOST = auto()

    # Generic log messages
    LOG = auto()


# ============================================================
# Monitoring Event Structure
# ============================================================

@dataclass
class MonitoringEvent:
    """
    Runtime event emitted by the pathfinder, the path follower or a session.

    All fields must be JSON-safe.
    """

    ts: float                   # UNIX timestamp (seconds)
    module: str                 # Source module string ("maze_core.mover", ...)
    event_type: EventType       # Enum describing the event class
    message: str                # Short human-readable description
    payload: Dict[str, Any]     # Structured data (coords, counters, phase)
    correlation_id: Optional[str] = None  # Used for grouping events per session

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dict for loggers."""
        data = asdict(self)
        data["event_type"] = self.event_type.name  # store name, not enum
        return data


class LoggingEventSink:
    """
    Minimal subscriber that logs events via the standard logging module.

    Attach with `bus.subscribe(LoggingEventSink().emit)`; handy for
    quick grep-able traces of a session.
    """

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def emit(self, event: MonitoringEvent) -> None:
        logger.log(self._level, "MazeEvent: %s", event.to_dict())
