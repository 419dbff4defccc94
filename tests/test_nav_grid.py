# tests/test_nav_grid.py
"""Unit tests for TileGrid (the in-memory grid oracle)."""

from __future__ import annotations

import pytest

from env.schema import CostConfig
from interfaces.types import Occupant, TileCoord
from maze_core.nav import TileGrid

LAYOUT = [
    "S.#",
    "P.H",
    "..E",
]


def test_from_ascii_reads_walls_occupants_and_spawn() -> None:
    grid = TileGrid.from_ascii(LAYOUT)

    assert (grid.columns, grid.rows) == (3, 3)
    assert grid.spawn == TileCoord(0, 0)
    assert grid.walls == {TileCoord(2, 0)}
    assert grid.occupant_at(TileCoord(0, 1)) is Occupant.PICKUP
    assert grid.occupant_at(TileCoord(2, 1)) is Occupant.HAZARD
    assert grid.occupant_at(TileCoord(2, 2)) is Occupant.EXIT
    assert grid.occupant_at(TileCoord(1, 1)) is None


def test_walkability_respects_walls_and_bounds() -> None:
    grid = TileGrid.from_ascii(LAYOUT)

    assert grid.is_walkable(TileCoord(0, 0))
    assert grid.is_walkable(TileCoord(2, 1))  # hazards are walkable
    assert not grid.is_walkable(TileCoord(2, 0))
    assert not grid.is_walkable(TileCoord(-1, 0))
    assert not grid.is_walkable(TileCoord(0, 3))
    assert not grid.is_walkable(TileCoord(3, 0))


def test_occupancy_queries_and_removal() -> None:
    grid = TileGrid.from_ascii(LAYOUT)
    pickup, hazard, exit_ = TileCoord(0, 1), TileCoord(2, 1), TileCoord(2, 2)

    assert grid.has_pickup(pickup) and not grid.has_hazard(pickup)
    assert grid.has_hazard(hazard) and not grid.has_exit(hazard)
    assert grid.has_exit(exit_)

    grid.remove_occupant(pickup)
    grid.remove_occupant(hazard)
    grid.remove_occupant(TileCoord(1, 1))  # empty tile: no-op

    assert not grid.has_pickup(pickup)
    assert not grid.has_hazard(hazard)
    assert grid.has_exit(exit_)


def test_move_cost_policy() -> None:
    grid = TileGrid.from_ascii(LAYOUT)
    c = TileCoord(1, 0)

    assert grid.move_cost(c, TileCoord(1, 1)) == 10
    assert grid.move_cost(c, TileCoord(0, 1)) == 14
    # Destination with a hazard: x10
    assert grid.move_cost(TileCoord(1, 1), TileCoord(2, 1)) == 100
    assert grid.move_cost(TileCoord(1, 2), TileCoord(2, 1)) == 140


def test_move_cost_uses_configured_costs() -> None:
    grid = TileGrid.from_ascii(LAYOUT, costs=CostConfig(orthogonal=2, diagonal=3, hazard_penalty=5))

    assert grid.move_cost(TileCoord(1, 0), TileCoord(1, 1)) == 2
    assert grid.move_cost(TileCoord(1, 0), TileCoord(0, 1)) == 3
    assert grid.move_cost(TileCoord(1, 1), TileCoord(2, 1)) == 10


def test_to_ascii_renders_agent() -> None:
    grid = TileGrid.from_ascii(LAYOUT)

    # The spawn marker is not part of the grid state, so it renders as floor.
    assert grid.to_ascii(agent=TileCoord(1, 1)) == ["..#", "PAH", "..E"]


@pytest.mark.parametrize(
    "lines",
    [
        [],
        [""],
        ["...", ".."],
        ["..x"],
        ["S.", ".S"],
    ],
)
def test_from_ascii_rejects_malformed_layouts(lines) -> None:
    with pytest.raises(ValueError):
        TileGrid.from_ascii(lines)
