# core shared types: TileCoord, Direction, Occupant, input intents
# src/interfaces/types.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


# ---------------------------------------------------------------------------
# Tile coordinates
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TileCoord:
    """Integer (column, row) address of one grid cell.

    Rows grow downward (screen space): `top` is row - 1, `bottom` is row + 1.
    Equality and hashing are structural, so coordinates work as dict keys
    and set members.
    """

    col: int
    row: int

    @property
    def top(self) -> "TileCoord":
        return TileCoord(self.col, self.row - 1)

    @property
    def bottom(self) -> "TileCoord":
        return TileCoord(self.col, self.row + 1)

    @property
    def left(self) -> "TileCoord":
        return TileCoord(self.col - 1, self.row)

    @property
    def right(self) -> "TileCoord":
        return TileCoord(self.col + 1, self.row)

    @property
    def top_left(self) -> "TileCoord":
        return TileCoord(self.col - 1, self.row - 1)

    @property
    def top_right(self) -> "TileCoord":
        return TileCoord(self.col + 1, self.row - 1)

    @property
    def bottom_left(self) -> "TileCoord":
        return TileCoord(self.col - 1, self.row + 1)

    @property
    def bottom_right(self) -> "TileCoord":
        return TileCoord(self.col + 1, self.row + 1)

    def neighbor(self, direction: "Direction") -> "TileCoord":
        """Orthogonal neighbour one tile away in `direction`."""
        dcol, drow = direction.delta
        return TileCoord(self.col + dcol, self.row + drow)

    def manhattan(self, other: "TileCoord") -> int:
        return abs(other.col - self.col) + abs(other.row - self.row)

    def __sub__(self, other: "TileCoord") -> "TileCoord":
        # The result is a delta, used to infer movement direction.
        return TileCoord(self.col - other.col, self.row - other.row)

    def __str__(self) -> str:
        return f"[col={self.col} row={self.row}]"

    def to_dict(self) -> dict:
        return {"col": self.col, "row": self.row}


# ---------------------------------------------------------------------------
# Directions / facing
# ---------------------------------------------------------------------------

class Direction(Enum):
    """Cardinal directions, valued by their (dcol, drow) delta."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @classmethod
    def facing(cls, delta: TileCoord) -> "Direction":
        """
        Facing for a movement delta.

        A strictly larger column delta faces horizontally; everything else
        (ties included) faces vertically, DOWN only for a positive row delta.
        """
        if abs(delta.col) > abs(delta.row):
            return cls.RIGHT if delta.col > 0 else cls.LEFT
        return cls.DOWN if delta.row > 0 else cls.UP


class Occupant(Enum):
    """Domain objects that can sit on a walkable tile."""

    PICKUP = "pickup"
    HAZARD = "hazard"
    EXIT = "exit"


# ---------------------------------------------------------------------------
# Input intents
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectionIntent:
    """Keyboard/controller style input: move one tile in a direction."""

    direction: Direction


@dataclass(frozen=True)
class PointIntent:
    """Touch/mouse style input: move toward a world-space point."""

    x: float
    y: float


MoveIntent = Union[DirectionIntent, PointIntent]
