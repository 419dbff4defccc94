# A* pathfinding over a GridOracle
# src/maze_core/nav/pathfinder.py
"""
A* pathfinding over a GridOracle.

- Manhattan distance heuristic.
- 8-directional neighbours; diagonals never cut a wall corner.
- Step costs come from the oracle (orthogonal/diagonal/hazard penalty).
- The open list is kept ordered by F score with a stable sort, so
  equal-F entries keep their relative order.
- Optional max_expansions guard for very large grids.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import Dict, List, Optional, Set

from interfaces.maze import GridOracle
from interfaces.types import TileCoord

logger = logging.getLogger(__name__)

Coord = TileCoord


@dataclass
class PathfindingResult:
    """Structured result for a pathfinding attempt."""

    path: List[Coord]
    success: bool
    reason: str | None = None
    cost: int = 0
    expanded: int = 0


class _SearchStep:
    """One visited-or-frontier tile within a single search."""

    __slots__ = ("position", "parent", "g_score", "h_score")

    def __init__(self, position: Coord) -> None:
        self.position = position
        self.parent: Optional[_SearchStep] = None
        self.g_score = 0
        self.h_score = 0

    @property
    def f_score(self) -> int:
        return self.g_score + self.h_score

    def set_parent(self, parent: "_SearchStep", move_cost: int) -> None:
        self.parent = parent
        self.g_score = parent.g_score + move_cost

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _SearchStep):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash((self.position.col, self.position.row))

    def __repr__(self) -> str:
        return f"pos={self.position} g={self.g_score} h={self.h_score} f={self.f_score}"


_BY_F_SCORE = attrgetter("f_score")


def manhattan(a: Coord, b: Coord) -> int:
    """Manhattan distance heuristic for A*."""
    return abs(b.col - a.col) + abs(b.row - a.row)


def walkable_neighbors(oracle: GridOracle, coord: Coord) -> List[Coord]:
    """
    Walkable tiles adjacent to `coord`.

    Orthogonal neighbours come first (top, left, bottom, right). A diagonal
    is only offered when both orthogonal tiles it passes between are
    walkable as well as the diagonal itself, so paths never squeeze
    through a wall corner.
    """
    can_up = oracle.is_walkable(coord.top)
    can_left = oracle.is_walkable(coord.left)
    can_down = oracle.is_walkable(coord.bottom)
    can_right = oracle.is_walkable(coord.right)

    result: List[Coord] = []
    if can_up:
        result.append(coord.top)
    if can_left:
        result.append(coord.left)
    if can_down:
        result.append(coord.bottom)
    if can_right:
        result.append(coord.right)

    if can_up and can_left and oracle.is_walkable(coord.top_left):
        result.append(coord.top_left)
    if can_down and can_left and oracle.is_walkable(coord.bottom_left):
        result.append(coord.bottom_left)
    if can_up and can_right and oracle.is_walkable(coord.top_right):
        result.append(coord.top_right)
    if can_down and can_right and oracle.is_walkable(coord.bottom_right):
        result.append(coord.bottom_right)

    return result


def search(
    oracle: GridOracle,
    start: Coord,
    goal: Coord,
    max_expansions: Optional[int] = None,
) -> PathfindingResult:
    """
    A* search for a path from start to goal.

    Returns a PathfindingResult with:
      - path: coordinates excluding start, including goal (empty on failure,
        and also empty when start == goal)
      - success: bool
      - reason: if not success, "no_path_found" or "max_expansions_exhausted"
      - cost: summed move cost along the path
      - expanded: how many steps were taken off the open list

    Does not mutate the oracle.
    """
    closed: Set[Coord] = set()
    open_steps: List[_SearchStep] = [_SearchStep(start)]
    # position -> step, for every step currently on the open list
    open_index: Dict[Coord, _SearchStep] = {start: open_steps[0]}
    expanded = 0

    while open_steps:
        if max_expansions is not None and expanded >= max_expansions:
            logger.debug(
                "Search %s -> %s gave up after %d expansions", start, goal, expanded
            )
            return PathfindingResult(
                path=[],
                success=False,
                reason="max_expansions_exhausted",
                expanded=expanded,
            )

        # The list is ordered, so the first step has the lowest F score.
        current = open_steps.pop(0)
        del open_index[current.position]
        closed.add(current.position)
        expanded += 1

        if current.position == goal:
            path = _reconstruct_path(current)
            logger.debug(
                "Path %s -> %s: %d steps, cost %d, %d expanded",
                start, goal, len(path), current.g_score, expanded,
            )
            return PathfindingResult(
                path=path,
                success=True,
                cost=current.g_score,
                expanded=expanded,
            )

        for tile in walkable_neighbors(oracle, current.position):
            if tile in closed:
                continue

            move_cost = oracle.move_cost(current.position, tile)
            existing = open_index.get(tile)

            if existing is not None:
                # Only a strictly cheaper route re-parents an open step;
                # its H score stays as first computed.
                if current.g_score + move_cost < existing.g_score:
                    existing.set_parent(current, move_cost)
                    open_steps.remove(existing)
                    _insert_step(open_steps, existing)
            else:
                step = _SearchStep(tile)
                step.set_parent(current, move_cost)
                step.h_score = manhattan(tile, goal)
                _insert_step(open_steps, step)
                open_index[tile] = step

    logger.debug("No path %s -> %s (%d expanded)", start, goal, expanded)
    return PathfindingResult(
        path=[],
        success=False,
        reason="no_path_found",
        expanded=expanded,
    )


def find_path(oracle: GridOracle, start: Coord, goal: Coord) -> Optional[List[Coord]]:
    """
    Shortest walkable path from start to goal, or None if none exists.

    The path excludes `start` and includes `goal`; it is empty when
    start == goal.
    """
    result = search(oracle, start, goal)
    if not result.success:
        return None
    return result.path


def path_cost(oracle: GridOracle, start: Coord, path: List[Coord]) -> int:
    """Sum of move costs walking `path` from `start`."""
    total = 0
    previous = start
    for coord in path:
        total += oracle.move_cost(previous, coord)
        previous = coord
    return total


def _insert_step(open_steps: List[_SearchStep], step: _SearchStep) -> None:
    """Append then stable-sort, keeping the list ascending by F score."""
    open_steps.append(step)
    open_steps.sort(key=_BY_F_SCORE)


def _reconstruct_path(last: _SearchStep) -> List[Coord]:
    """Walk parent links back to (but excluding) the start step."""
    path: List[Coord] = []
    step = last
    while step.parent is not None:
        path.append(step.position)
        step = step.parent
    path.reverse()
    return path
