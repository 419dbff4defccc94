# world position <-> tile coordinate conversion
# src/maze_core/nav/mapping.py
"""
TileMapper: coordinate conversion between world space and tiles.

World space has its origin at the bottom-left of the map with y growing
upward; tile rows are counted from the top. Positions returned for a tile
are the tile centre.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from interfaces.types import TileCoord


@dataclass(frozen=True)
class TileMapper:
    columns: int
    rows: int
    tile_width: float
    tile_height: float

    @property
    def width(self) -> float:
        return self.columns * self.tile_width

    @property
    def height(self) -> float:
        return self.rows * self.tile_height

    def tile_coord_for_position(self, x: float, y: float) -> TileCoord:
        # int() truncates toward zero, matching the renderer's own rounding.
        return TileCoord(
            col=int(x / self.tile_width),
            row=int((self.height - y) / self.tile_height),
        )

    def position_for_tile_coord(self, coord: TileCoord) -> Tuple[float, float]:
        x = coord.col * self.tile_width + self.tile_width / 2
        y = self.height - (coord.row * self.tile_height + self.tile_height / 2)
        return x, y
