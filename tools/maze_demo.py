#!/usr/bin/env python3
"""
tools/maze_demo.py

Minimal harness to watch the navigation core play a maze.

- Builds a TileGrid from a built-in layout (or --layout FILE, one row per line)
- Drives a MazeSession with FakePresentation (no rendering, no clock)
- Each positional MOVE is either a direction (up/down/left/right) or a
  target tile "col,row"; targets go through the point-intent path
- Prints the rich dashboard after every move

Examples:
    python tools/maze_demo.py
    python tools/maze_demo.py 1,4 8,1
    python tools/maze_demo.py --retarget 8,5 1,4 8,1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

# ---------------------------------------------------------------------------
# Ensure src/ is on sys.path when running as a script
# ---------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# ---------------------------------------------------------------------------
# Imports from the project
# ---------------------------------------------------------------------------

from agent.logging_config import configure_logging  # type: ignore[import]
from env.loader import load_config  # type: ignore[import]
from interfaces.types import (  # type: ignore[import]
    Direction,
    DirectionIntent,
    MoveIntent,
    PointIntent,
    TileCoord,
)
from maze_core import MazeSession, TileGrid  # type: ignore[import]
from maze_core.testing.fakes import FakePresentation  # type: ignore[import]
from monitoring.bus import EventBus  # type: ignore[import]
from monitoring.dashboard_tui import MazeDashboard  # type: ignore[import]
from monitoring.events import LoggingEventSink  # type: ignore[import]
from monitoring.logger import JsonFileLogger  # type: ignore[import]

logger = logging.getLogger("tools.maze_demo")

DEMO_MAZE = [
    "##########",
    "#S..#...E#",
    "#.#.#.##.#",
    "#.#...H..#",
    "#P###.#..#",
    "#........#",
    "##########",
]

DEFAULT_MOVES = ["1,4", "8,1"]


def _parse_move(raw: str, session: MazeSession) -> MoveIntent:
    name = raw.strip().upper()
    if name in Direction.__members__:
        return DirectionIntent(Direction[name])
    try:
        col_s, row_s = raw.split(",")
        coord = TileCoord(int(col_s), int(row_s))
    except ValueError as exc:
        raise ValueError(f"Move must be a direction or 'col,row', got {raw!r}") from exc
    x, y = session.mapper.position_for_tile_coord(coord)
    return PointIntent(x, y)


def _load_layout(path: Path | None) -> List[str]:
    if path is None:
        return DEMO_MAZE
    return [line.rstrip("\n") for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play a maze with the navigation core.")
    parser.add_argument("moves", nargs="*", default=DEFAULT_MOVES, help="directions or col,row targets")
    parser.add_argument("--config", type=Path, default=None, help="path to maze.yaml")
    parser.add_argument("--layout", type=Path, default=None, help="text file with an ASCII maze")
    parser.add_argument(
        "--retarget",
        action="store_true",
        help="issue each move after the first step of the previous one instead of waiting",
    )
    parser.add_argument("--events", action="store_true", help="log every monitoring event")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(config)

    bus = EventBus()
    if args.events:
        bus.subscribe(LoggingEventSink().emit)
    file_logger = None
    if config.monitoring.event_log is not None:
        file_logger = JsonFileLogger(config.monitoring.event_log, bus)

    grid = TileGrid.from_ascii(_load_layout(args.layout), costs=config.costs)
    dashboard = MazeDashboard(bus, grid)
    presentation = FakePresentation()
    session = MazeSession(grid, presentation, config=config, bus=bus)

    try:
        for raw in args.moves:
            try:
                intent = _parse_move(raw, session)
            except ValueError as exc:
                parser.error(str(exc))
            logger.info("Move: %s", raw)
            session.handle_intent(intent)
            if args.retarget:
                presentation.complete_step()
            else:
                presentation.run_until_settled()
            dashboard.print_snapshot()
            if session.agent.is_terminal:
                break
        presentation.run_until_settled()
        dashboard.print_snapshot()
    finally:
        if file_logger is not None:
            file_logger.close()

    logger.info("Final phase %s at %s", session.agent.phase.value, session.agent.position)
    logger.info("Presentation calls: %s", presentation.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
