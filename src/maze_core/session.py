# src/maze_core/session.py
"""
MazeSession: scene-level wiring for one game.

Owns the grid, the agent's PathFollower, the coordinate mapper and the
event bus, and turns input intents into follower calls:

    DirectionIntent -> PathFollower.move_in_direction
    PointIntent     -> PathFollower.move_toward
"""

from __future__ import annotations

import logging
import uuid
from copy import deepcopy
from typing import Optional

from env.schema import MazeConfig
from interfaces.maze import Presentation
from interfaces.types import DirectionIntent, MoveIntent, PointIntent
from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event
from .nav.grid import TileGrid
from .nav.mapping import TileMapper
from .nav.mover import PathFollower

logger = logging.getLogger(__name__)

MODULE = "maze_core.session"


class MazeSession:
    """One playthrough of one maze layout."""

    def __init__(
        self,
        grid: TileGrid,
        presentation: Presentation,
        *,
        config: Optional[MazeConfig] = None,
        bus: Optional[EventBus] = None,
        tile_size: float = 32.0,
    ) -> None:
        self.config = config or MazeConfig()
        # Keep an untouched copy so restart() can rebuild pickups/hazards.
        self._layout = deepcopy(grid)
        self.grid = grid
        self.grid.costs = self.config.costs
        self.presentation = presentation
        self.bus = bus or EventBus()
        self.session_id = uuid.uuid4().hex[:12]
        self.mapper = TileMapper(
            columns=grid.columns,
            rows=grid.rows,
            tile_width=tile_size,
            tile_height=tile_size,
        )
        self.agent = PathFollower(
            grid,
            presentation,
            grid.spawn,
            step_duration=self.config.movement.step_duration,
            max_expansions=self.config.search.max_expansions,
            bus=self.bus,
            correlation_id=self.session_id,
        )
        self._tile_size = tile_size

        log_event(
            bus=self.bus,
            module=MODULE,
            event_type=EventType.LOG,
            message="Session started",
            payload={
                "columns": grid.columns,
                "rows": grid.rows,
                "spawn": grid.spawn.to_dict(),
            },
            correlation_id=self.session_id,
        )

    def handle_intent(self, intent: MoveIntent) -> None:
        """Route one input intent to the agent."""
        if isinstance(intent, DirectionIntent):
            self.agent.move_in_direction(intent.direction)
        elif isinstance(intent, PointIntent):
            self.agent.move_toward(intent.x, intent.y, self.mapper)
        else:
            raise TypeError(f"Unsupported intent: {intent!r}")

    def restart(self, presentation: Optional[Presentation] = None) -> "MazeSession":
        """
        Fresh session on the original layout.

        A finished agent never leaves its terminal phase, so a new game
        always means a new follower.
        """
        logger.info("Restarting session %s", self.session_id)
        return MazeSession(
            deepcopy(self._layout),
            presentation or self.presentation,
            config=self.config,
            bus=self.bus,
            tile_size=self._tile_size,
        )
