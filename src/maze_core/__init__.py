# maze_core package
# src/maze_core/__init__.py
"""
maze_core package.

Exports:
    - MazeSession: one game on one layout (grid + agent + mapper + bus)
    - PathFollower, AgentPhase: the agent's movement state machine
    - TileGrid: the in-memory grid oracle
"""

from __future__ import annotations

from .nav import AgentPhase, PathFollower, TileGrid
from .session import MazeSession

__all__ = [
    "MazeSession",
    "PathFollower",
    "AgentPhase",
    "TileGrid",
]
