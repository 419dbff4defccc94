"""
Navigation subsystem for the maze.

Provides:
- TileGrid: walls + occupants, the concrete GridOracle
- A* pathfinding: search / find_path
- PathFollower: step-by-step path consumption with retargeting
- TileMapper: world position <-> tile coordinate conversion
"""

from __future__ import annotations

from .grid import TileGrid
from .mapping import TileMapper
from .mover import AgentPhase, PathFollower
from .pathfinder import (
    Coord,
    PathfindingResult,
    find_path,
    manhattan,
    path_cost,
    search,
    walkable_neighbors,
)

__all__ = [
    "TileGrid",
    "TileMapper",
    "AgentPhase",
    "PathFollower",
    "Coord",
    "PathfindingResult",
    "find_path",
    "manhattan",
    "path_cost",
    "search",
    "walkable_neighbors",
]
