# tile grid: walls + occupant layer, implements GridOracle
# src/maze_core/nav/grid.py
"""
TileGrid: in-memory grid oracle for the maze.

This module only knows tiles. It:
- Answers walkability (in bounds and not a wall).
- Tracks occupants (pickups, hazards, the exit) on walkable tiles.
- Prices single steps according to CostConfig.

It does NOT search or move anything; see pathfinder and mover.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set

from env.schema import CostConfig
from interfaces.types import Occupant, TileCoord

# Characters accepted by TileGrid.from_ascii
WALL_CHAR = "#"
FLOOR_CHAR = "."
SPAWN_CHAR = "S"
OCCUPANT_CHARS: Dict[str, Occupant] = {
    "P": Occupant.PICKUP,
    "H": Occupant.HAZARD,
    "E": Occupant.EXIT,
}


@dataclass
class TileGrid:
    """
    Rectangular tile grid with a wall set and an occupant layer.

    Responsibilities:
    - Provide walkability tests (is_walkable).
    - Provide occupancy queries and removal.
    - Provide per-step move costs.

    Coordinates outside [0, columns) x [0, rows) are simply not walkable.
    """

    columns: int
    rows: int
    walls: Set[TileCoord] = field(default_factory=set)
    occupants: Dict[TileCoord, Occupant] = field(default_factory=dict)
    spawn: TileCoord = field(default_factory=lambda: TileCoord(0, 0))
    costs: CostConfig = field(default_factory=CostConfig)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_ascii(
        cls,
        lines: Iterable[str],
        costs: Optional[CostConfig] = None,
    ) -> "TileGrid":
        """
        Build a grid from rows of characters, top row first.

        Legend: '#' wall, '.' floor, 'S' spawn, 'P' pickup, 'H' hazard,
        'E' exit.
        """
        rows = [line for line in lines]
        if not rows:
            raise ValueError("Grid needs at least one row")
        width = len(rows[0])
        if width == 0:
            raise ValueError("Grid rows must not be empty")

        walls: Set[TileCoord] = set()
        occupants: Dict[TileCoord, Occupant] = {}
        spawn: Optional[TileCoord] = None

        for row, line in enumerate(rows):
            if len(line) != width:
                raise ValueError(
                    f"Row {row} has width {len(line)}, expected {width}"
                )
            for col, ch in enumerate(line):
                coord = TileCoord(col, row)
                if ch == WALL_CHAR:
                    walls.add(coord)
                elif ch == SPAWN_CHAR:
                    if spawn is not None:
                        raise ValueError(f"Second spawn at {coord}, first at {spawn}")
                    spawn = coord
                elif ch in OCCUPANT_CHARS:
                    occupants[coord] = OCCUPANT_CHARS[ch]
                elif ch != FLOOR_CHAR:
                    raise ValueError(f"Unknown tile character {ch!r} at {coord}")

        return cls(
            columns=width,
            rows=len(rows),
            walls=walls,
            occupants=occupants,
            spawn=spawn or TileCoord(0, 0),
            costs=costs or CostConfig(),
        )

    # ------------------------------------------------------------------
    # GridOracle
    # ------------------------------------------------------------------

    def is_valid(self, coord: TileCoord) -> bool:
        return 0 <= coord.col < self.columns and 0 <= coord.row < self.rows

    def is_wall(self, coord: TileCoord) -> bool:
        return coord in self.walls

    def is_walkable(self, coord: TileCoord) -> bool:
        return self.is_valid(coord) and not self.is_wall(coord)

    def occupant_at(self, coord: TileCoord) -> Optional[Occupant]:
        return self.occupants.get(coord)

    def has_pickup(self, coord: TileCoord) -> bool:
        return self.occupants.get(coord) is Occupant.PICKUP

    def has_hazard(self, coord: TileCoord) -> bool:
        return self.occupants.get(coord) is Occupant.HAZARD

    def has_exit(self, coord: TileCoord) -> bool:
        return self.occupants.get(coord) is Occupant.EXIT

    def remove_occupant(self, coord: TileCoord) -> None:
        self.occupants.pop(coord, None)

    def move_cost(self, from_coord: TileCoord, to_coord: TileCoord) -> int:
        """
        Cost of one step between adjacent tiles.

        Diagonal steps (both column and row change) cost more than
        orthogonal ones; stepping onto a hazard multiplies the cost.
        """
        diagonal = from_coord.col != to_coord.col and from_coord.row != to_coord.row
        base = self.costs.diagonal if diagonal else self.costs.orthogonal
        if self.has_hazard(to_coord):
            return base * self.costs.hazard_penalty
        return base

    # ------------------------------------------------------------------
    # Debug helpers
    # ------------------------------------------------------------------

    def to_ascii(self, agent: Optional[TileCoord] = None) -> list[str]:
        """Render with the from_ascii legend; `agent` (if given) is drawn as 'A'."""
        symbols = {occ: ch for ch, occ in OCCUPANT_CHARS.items()}
        lines: list[str] = []
        for row in range(self.rows):
            chars = []
            for col in range(self.columns):
                coord = TileCoord(col, row)
                if coord == agent:
                    chars.append("A")
                elif coord in self.walls:
                    chars.append(WALL_CHAR)
                elif coord in self.occupants:
                    chars.append(symbols[self.occupants[coord]])
                else:
                    chars.append(FLOOR_CHAR)
            lines.append("".join(chars))
        return lines
