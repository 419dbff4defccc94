# GridOracle / Presentation / CoordinateMapper interface definitions
# src/interfaces/maze.py

from __future__ import annotations

from typing import Callable, Protocol, Tuple

from .types import Direction, TileCoord

# Invoked by the presentation layer once a single-step move has finished.
StepCallback = Callable[[], None]


class GridOracle(Protocol):
    """Walkability and occupancy queries over a tile grid.

    Implementations answer "not walkable" for out-of-bounds coordinates
    instead of raising; the pathfinder and mover assume these calls
    never throw.
    """

    def is_walkable(self, coord: TileCoord) -> bool:
        ...

    def has_pickup(self, coord: TileCoord) -> bool:
        ...

    def has_hazard(self, coord: TileCoord) -> bool:
        ...

    def has_exit(self, coord: TileCoord) -> bool:
        ...

    def remove_occupant(self, coord: TileCoord) -> None:
        """Clear the pickup/hazard marker at `coord` (no-op if empty)."""
        ...

    def move_cost(self, from_coord: TileCoord, to_coord: TileCoord) -> int:
        """Cost of a single step between two adjacent tiles."""
        ...


class Presentation(Protocol):
    """Visual/audio side of the agent.

    The navigation core decides *what* to move to and *when* a step is
    logically complete; implementations decide how that looks and sounds.
    """

    def issue_step_move(
        self,
        target: TileCoord,
        duration: float,
        facing: Direction,
        on_complete: StepCallback,
    ) -> None:
        """
        Move the agent visually to `target` over `duration` seconds.

        `on_complete` must be called exactly once, after the move finishes.
        It may be called before this method returns.
        """
        ...

    def notify_blocked(self) -> None:
        ...

    def notify_idle(self) -> None:
        ...

    def notify_step(self) -> None:
        ...

    def notify_collected(self, count: int) -> None:
        ...

    def notify_hazard_cleared(self, count: int) -> None:
        ...

    def notify_win(self) -> None:
        ...

    def notify_lose(self) -> None:
        ...


class CoordinateMapper(Protocol):
    """Conversion between world/render positions and tile coordinates."""

    def tile_coord_for_position(self, x: float, y: float) -> TileCoord:
        ...

    def position_for_tile_coord(self, coord: TileCoord) -> Tuple[float, float]:
        ...
