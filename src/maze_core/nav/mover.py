# step-by-step path following for one agent
# src/maze_core/nav/mover.py
"""
Mover: drive an agent along A* paths one tile at a time.

PathFollower owns:
- the agent's current path, pending retarget and in-flight flag
- tile-effect resolution after every arrival (pickups, hazards, exit)
- the Idle / Stepping / Won / Lost phase

It does NOT animate or play sounds; the Presentation collaborator does
that and reports back through the step-completion callback.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from interfaces.maze import CoordinateMapper, GridOracle, Presentation
from interfaces.types import Direction, TileCoord
from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event
from .pathfinder import search

logger = logging.getLogger(__name__)

MODULE = "maze_core.mover"


class AgentPhase(str, Enum):
    IDLE = "IDLE"
    STEPPING = "STEPPING"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self in (AgentPhase.WON, AgentPhase.LOST)


class PathFollower:
    """
    Path-following controller for a single agent.

    Only one step is ever in flight. Move requests that arrive while a step
    is animating are parked as the pending target (latest wins) and take
    over from the stale path as soon as that step completes. Once the game
    is won or lost the follower ignores every further request; start a new
    follower for a new game.
    """

    def __init__(
        self,
        grid: GridOracle,
        presentation: Presentation,
        start: TileCoord,
        *,
        step_duration: float = 0.4,
        resources: int = 0,
        max_expansions: Optional[int] = None,
        bus: Optional[EventBus] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        # Non-owning handles; the session owns grid and presentation.
        self._grid = grid
        self._presentation = presentation
        self._bus = bus
        self._correlation_id = correlation_id

        self._step_duration = step_duration
        self._max_expansions = max_expansions

        self._position = start
        self._resources = resources
        self._phase = AgentPhase.IDLE
        self._facing = Direction.DOWN

        self._current_path: Optional[List[TileCoord]] = None
        self._step_in_flight = False
        self._step_target: Optional[TileCoord] = None
        self._pending_target: Optional[TileCoord] = None

        # Re-entrant completion handling, see _on_step_complete.
        self._dispatching = False
        self._completion_queued = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def position(self) -> TileCoord:
        return self._position

    @property
    def resources(self) -> int:
        return self._resources

    @property
    def phase(self) -> AgentPhase:
        return self._phase

    @property
    def facing(self) -> Direction:
        return self._facing

    @property
    def step_in_flight(self) -> bool:
        return self._step_in_flight

    @property
    def pending_target(self) -> Optional[TileCoord]:
        return self._pending_target

    @property
    def current_path(self) -> List[TileCoord]:
        """Remaining steps after the one in flight (copy)."""
        return list(self._current_path or [])

    @property
    def is_terminal(self) -> bool:
        return self._phase.is_terminal

    # ------------------------------------------------------------------
    # Move requests
    # ------------------------------------------------------------------

    def request_move(self, target: TileCoord) -> None:
        """Walk to `target` along the cheapest path, if there is one."""
        if self.is_terminal:
            logger.debug("Ignoring move to %s: game already %s", target, self._phase.value)
            return

        if self._step_in_flight:
            # Picked up by step_completed() once the current step lands.
            self._pending_target = target
            return

        self._start_path(target)

    def move_in_direction(self, direction: Direction) -> None:
        """Move one tile from the current position."""
        self.request_move(self._position.neighbor(direction))

    def move_toward(self, x: float, y: float, mapper: CoordinateMapper) -> None:
        """Move to the tile containing world position (x, y)."""
        self.request_move(mapper.tile_coord_for_position(x, y))

    # ------------------------------------------------------------------
    # Step lifecycle
    # ------------------------------------------------------------------

    def step_completed(self) -> None:
        """
        Continue after a step: retarget, go idle, or issue the next step.

        A pending target always wins over what is left of the old path.
        """
        self._step_in_flight = False

        if self._pending_target is not None:
            target = self._pending_target
            self._pending_target = None
            self._current_path = None
            logger.info("Retargeting from %s to %s", self._position, target)
            self._emit(
                EventType.RETARGETED,
                f"Retarget to {target}",
                {"from": self._position.to_dict(), "to": target.to_dict()},
            )
            if not self._start_path(target):
                self._go_idle()
            return

        if not self._current_path:
            self._go_idle()
            return

        next_coord = self._current_path.pop(0)
        self._facing = Direction.facing(next_coord - self._position)

        self._step_in_flight = True
        self._step_target = next_coord
        self._set_phase(AgentPhase.STEPPING)
        self._emit(
            EventType.STEP_ISSUED,
            f"Step to {next_coord}",
            {
                "from": self._position.to_dict(),
                "target": next_coord.to_dict(),
                "facing": self._facing.name,
                "remaining": len(self._current_path),
            },
        )
        self._presentation.issue_step_move(
            next_coord,
            self._step_duration,
            self._facing,
            self._on_step_complete,
        )

    def _on_step_complete(self) -> None:
        """
        Completion callback handed to the presentation layer.

        A presentation may call this from inside issue_step_move (zero
        duration, headless runs). Such completions are queued and drained
        by the outermost call, so stack depth stays flat on long paths.
        """
        if not self._step_in_flight or self._step_target is None:
            logger.warning("Step completion reported with no step in flight; ignored")
            return

        if self._dispatching:
            self._completion_queued = True
            return

        self._dispatching = True
        try:
            self._land_step()
            while self._completion_queued:
                self._completion_queued = False
                self._land_step()
        finally:
            self._dispatching = False
            self._completion_queued = False

    def _land_step(self) -> None:
        """Arrive on the in-flight target and continue."""
        self._position = self._step_target
        self._step_target = None
        self._emit(
            EventType.STEP_COMPLETED,
            f"Arrived at {self._position}",
            {"position": self._position.to_dict()},
        )

        if self._resolve_tile_effects():
            self._step_in_flight = False
            self._pending_target = None
            self._current_path = None
            return

        self.step_completed()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _start_path(self, target: TileCoord) -> bool:
        """Search and start walking; False if no step was issued."""
        if target == self._position:
            logger.debug("Already at %s", target)
            return False

        if not self._grid.is_walkable(target):
            self._presentation.notify_blocked()
            self._emit(
                EventType.MOVE_BLOCKED,
                f"{target} is not walkable",
                {"target": target.to_dict()},
            )
            return False

        logger.debug("Finding shortest path from %s to %s", self._position, target)
        self._emit(
            EventType.PATH_REQUESTED,
            f"Path {self._position} -> {target}",
            {"from": self._position.to_dict(), "to": target.to_dict()},
        )
        result = search(
            self._grid,
            self._position,
            target,
            max_expansions=self._max_expansions,
        )
        if not result.success:
            self._emit(
                EventType.PATH_NOT_FOUND,
                f"No path to {target}",
                {"to": target.to_dict(), "reason": result.reason},
            )
            return False

        self._emit(
            EventType.PATH_FOUND,
            f"Path to {target}: {len(result.path)} steps",
            {
                "to": target.to_dict(),
                "path": [c.to_dict() for c in result.path],
                "cost": result.cost,
            },
        )
        self._current_path = list(result.path)
        self.step_completed()
        return True

    def _resolve_tile_effects(self) -> bool:
        """Apply the arrival tile's effect. Returns True if the game ended."""
        coord = self._position

        if self._grid.has_pickup(coord):
            self._resources += 1
            self._grid.remove_occupant(coord)
            self._presentation.notify_collected(self._resources)
            self._emit(
                EventType.PICKUP_COLLECTED,
                f"Pickup at {coord}",
                {"position": coord.to_dict(), "resources": self._resources},
            )

        elif self._grid.has_hazard(coord):
            if self._resources == 0:
                self._finish(AgentPhase.LOST)
                return True
            self._resources -= 1
            self._grid.remove_occupant(coord)
            self._presentation.notify_hazard_cleared(self._resources)
            self._emit(
                EventType.HAZARD_CLEARED,
                f"Hazard cleared at {coord}",
                {"position": coord.to_dict(), "resources": self._resources},
            )

        elif self._grid.has_exit(coord):
            self._finish(AgentPhase.WON)
            return True

        else:
            self._presentation.notify_step()

        return False

    def _finish(self, phase: AgentPhase) -> None:
        self._set_phase(phase)
        payload = {"position": self._position.to_dict(), "resources": self._resources}
        if phase is AgentPhase.WON:
            logger.info("Reached the exit at %s", self._position)
            self._presentation.notify_win()
            self._emit(EventType.GAME_WON, "Reached the exit", payload)
        else:
            logger.info("Caught by a hazard at %s", self._position)
            self._presentation.notify_lose()
            self._emit(EventType.GAME_LOST, "Caught by a hazard", payload)

    def _go_idle(self) -> None:
        self._current_path = None
        self._set_phase(AgentPhase.IDLE)
        self._presentation.notify_idle()

    def _set_phase(self, phase: AgentPhase) -> None:
        if phase is self._phase:
            return
        previous = self._phase
        self._phase = phase
        self._emit(
            EventType.AGENT_PHASE_CHANGE,
            f"{previous.value} -> {phase.value}",
            {"phase": phase.value, "previous": previous.value},
        )

    def _emit(self, event_type: EventType, message: str, payload: Dict[str, Any]) -> None:
        if self._bus is None:
            return
        log_event(
            bus=self._bus,
            module=MODULE,
            event_type=event_type,
            message=message,
            payload=payload,
            correlation_id=self._correlation_id,
        )
