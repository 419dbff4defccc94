# rich-based TUI dashboard
# src/monitoring/dashboard_tui.py
"""
TUI dashboard for maze monitoring.

A lightweight terminal UI (using `rich`) that subscribes to the monitoring
EventBus and renders:

- Agent status:
    - Phase (IDLE / STEPPING / WON / LOST)
    - Position and resource count
    - Current target and remaining path length

- Maze:
    - The grid with walls, occupants and the agent (if a grid is attached)

- Recent events:
    - The last few event types and messages

Runs entirely in-process.
"""

from __future__ import annotations

import time
from collections import deque
from typing import Any, Deque, Dict, Optional, Tuple

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from interfaces.types import Occupant, TileCoord
from .bus import EventBus
from .events import EventType, MonitoringEvent

# Tile glyphs and styles for the maze panel
_GLYPHS: Dict[Optional[Occupant], Tuple[str, str]] = {
    None: (".", "dim"),
    Occupant.PICKUP: ("P", "bold green"),
    Occupant.HAZARD: ("H", "bold red"),
    Occupant.EXIT: ("E", "bold cyan"),
}


def _coord(raw: Any) -> Optional[TileCoord]:
    if not isinstance(raw, dict):
        return None
    return TileCoord(int(raw["col"]), int(raw["row"]))


# ============================================================
# TUI Dashboard
# ============================================================

class MazeDashboard:
    """
    Live terminal dashboard bound to a monitoring.EventBus.

    It consumes MonitoringEvents and keeps a small in-memory state
    representation, which is rendered on demand or periodically via rich.
    `grid` is any object with `columns`, `rows`, `is_wall(coord)` and
    `occupant_at(coord)` (TileGrid satisfies this).
    """

    def __init__(
        self,
        bus: EventBus,
        grid: Any = None,
        *,
        console: Optional[Console] = None,
        history: int = 8,
    ) -> None:
        self._bus = bus
        self._grid = grid
        self._console = console or Console()

        self._state: Dict[str, Any] = {
            "phase": "IDLE",
            "position": None,
            "resources": 0,
            "target": None,
            "remaining": 0,
            "steps_taken": 0,
            "pickups": 0,
            "hazards_cleared": 0,
            "blocked": 0,
            "outcome": None,
        }
        self._recent: Deque[str] = deque(maxlen=history)

        self._bus.subscribe(self._on_event)

    @property
    def state(self) -> Dict[str, Any]:
        return dict(self._state)

    def close(self) -> None:
        self._bus.unsubscribe(self._on_event)

    # --------------------------------------------------------
    # Event handler
    # --------------------------------------------------------

    def _on_event(self, event: MonitoringEvent) -> None:
        """Update dashboard state from one event. Cheap and non-blocking."""
        et = event.event_type
        payload = event.payload

        if et == EventType.AGENT_PHASE_CHANGE:
            self._state["phase"] = payload.get("phase", "UNKNOWN")
            if self._state["phase"] == "IDLE":
                self._state["target"] = None
                self._state["remaining"] = 0

        elif et == EventType.LOG and "spawn" in payload:
            self._state["position"] = _coord(payload["spawn"])

        elif et == EventType.PATH_FOUND:
            self._state["target"] = _coord(payload.get("to"))
            self._state["remaining"] = len(payload.get("path") or [])

        elif et == EventType.STEP_ISSUED:
            self._state["remaining"] = payload.get("remaining", 0)

        elif et == EventType.STEP_COMPLETED:
            self._state["position"] = _coord(payload.get("position"))
            self._state["steps_taken"] += 1

        elif et == EventType.MOVE_BLOCKED:
            self._state["blocked"] += 1

        elif et == EventType.PICKUP_COLLECTED:
            self._state["resources"] = payload.get("resources", 0)
            self._state["pickups"] += 1

        elif et == EventType.HAZARD_CLEARED:
            self._state["resources"] = payload.get("resources", 0)
            self._state["hazards_cleared"] += 1

        elif et == EventType.GAME_WON:
            self._state["outcome"] = "won"

        elif et == EventType.GAME_LOST:
            self._state["outcome"] = "lost"

        self._recent.append(f"{et.name}: {event.message}")

    # --------------------------------------------------------
    # Rendering helpers
    # --------------------------------------------------------

    def _render_agent_panel(self) -> Panel:
        s = self._state
        position = s["position"] or "<unknown>"
        target = s["target"] or "<none>"

        txt = Text()
        txt.append("Phase: ", style="bold")
        txt.append(f"{s['phase']}\n")
        txt.append("Position: ", style="bold")
        txt.append(f"{position}\n")
        txt.append("Target: ", style="bold")
        txt.append(f"{target} ({s['remaining']} steps left)\n")
        txt.append("Resources: ", style="bold")
        txt.append(f"{s['resources']}\n")
        if s["outcome"] == "won":
            txt.append("You win!", style="bold green")
        elif s["outcome"] == "lost":
            txt.append("You lose!", style="bold red")

        return Panel(txt, title="Agent Status", border_style="cyan")

    def _render_maze_panel(self) -> Panel:
        if self._grid is None:
            return Panel(Text("No grid attached", style="dim"), title="Maze")

        agent = self._state["position"]
        txt = Text()
        for row in range(self._grid.rows):
            for col in range(self._grid.columns):
                coord = TileCoord(col, row)
                if coord == agent:
                    txt.append("A", style="bold yellow")
                elif self._grid.is_wall(coord):
                    txt.append("#", style="white")
                else:
                    glyph, style = _GLYPHS[self._grid.occupant_at(coord)]
                    txt.append(glyph, style=style)
            txt.append("\n")
        return Panel(txt, title="Maze", border_style="green")

    def _render_stats_panel(self) -> Panel:
        s = self._state
        table = Table.grid()
        table.add_column(justify="left")
        table.add_row(f"[bold]Steps taken:[/bold] {s['steps_taken']}")
        table.add_row(f"[bold]Pickups:[/bold] {s['pickups']}")
        table.add_row(f"[bold]Hazards cleared:[/bold] {s['hazards_cleared']}")
        table.add_row(f"[bold]Blocked moves:[/bold] {s['blocked']}")
        table.add_row("")
        if self._recent:
            for line in self._recent:
                table.add_row(line)
        else:
            table.add_row("[dim]No events yet[/dim]")
        return Panel(table, title="Events", border_style="yellow")

    def build_layout(self) -> Layout:
        """Construct the overall layout for the dashboard."""
        layout = Layout()
        layout.split(
            Layout(name="top", size=7),
            Layout(name="middle", ratio=1),
        )
        layout["top"].update(self._render_agent_panel())
        layout["middle"].split_row(
            Layout(name="maze"),
            Layout(name="events"),
        )
        layout["maze"].update(self._render_maze_panel())
        layout["events"].update(self._render_stats_panel())
        return layout

    def print_snapshot(self) -> None:
        """Render the current state once."""
        self._console.print(self._render_agent_panel())
        self._console.print(self._render_maze_panel())
        self._console.print(self._render_stats_panel())

    # --------------------------------------------------------
    # Main loop
    # --------------------------------------------------------

    def run(self, refresh_per_second: float = 4.0) -> None:
        """
        Run the TUI loop until interrupted.

        Blocks the current thread; run the game on another thread.
        """
        refresh_delay = 1.0 / max(refresh_per_second, 0.1)
        with Live(self.build_layout(), console=self._console, refresh_per_second=refresh_per_second) as live:
            while True:
                live.update(self.build_layout())
                time.sleep(refresh_delay)
