# src/interfaces/__init__.py

from __future__ import annotations

"""
Public interface surface for the maze navigator.

Re-exports the shared value types (tile coordinates, directions, intents)
and the Protocol seams the navigation core talks to. Concrete
implementations live in maze_core.
"""

from .types import (
    TileCoord,
    Direction,
    Occupant,
    DirectionIntent,
    PointIntent,
    MoveIntent,
)
from .maze import (
    GridOracle,
    Presentation,
    CoordinateMapper,
    StepCallback,
)

__all__ = [
    # Value types
    "TileCoord",
    "Direction",
    "Occupant",
    "DirectionIntent",
    "PointIntent",
    "MoveIntent",
    # Protocols
    "GridOracle",
    "Presentation",
    "CoordinateMapper",
    "StepCallback",
]
