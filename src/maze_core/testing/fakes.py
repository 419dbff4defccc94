# src/maze_core/testing/fakes.py
"""
Test helpers for maze_core.

Provides:
- FakePresentation: in-memory Presentation that records every call and
  holds step completions until the test (or a demo loop) releases them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from interfaces.maze import StepCallback
from interfaces.types import Direction, TileCoord


@dataclass
class IssuedStep:
    """Record of a step move handed to FakePresentation."""

    target: TileCoord
    duration: float
    facing: Direction


@dataclass
class FakePresentation:
    """
    Presentation used for unit tests and the demo tool.

    Features:
    - Records all step moves in `steps` and every notification in `calls`.
    - Keeps the completion callback of the in-flight step; nothing moves
      on until complete_step() is called.
    - No rendering, no audio, no clock.
    """

    steps: List[IssuedStep] = field(default_factory=list)
    calls: List[Tuple[str, Tuple[Any, ...]]] = field(default_factory=list)
    _pending: Optional[StepCallback] = None

    # ------------------------------------------------------------------
    # Presentation protocol
    # ------------------------------------------------------------------

    def issue_step_move(
        self,
        target: TileCoord,
        duration: float,
        facing: Direction,
        on_complete: StepCallback,
    ) -> None:
        if self._pending is not None:
            raise AssertionError("A second step was issued while one is in flight")
        self.steps.append(IssuedStep(target=target, duration=duration, facing=facing))
        self.calls.append(("step", (target,)))
        self._pending = on_complete

    def notify_blocked(self) -> None:
        self.calls.append(("blocked", ()))

    def notify_idle(self) -> None:
        self.calls.append(("idle", ()))

    def notify_step(self) -> None:
        self.calls.append(("ambient_step", ()))

    def notify_collected(self, count: int) -> None:
        self.calls.append(("collected", (count,)))

    def notify_hazard_cleared(self, count: int) -> None:
        self.calls.append(("hazard_cleared", (count,)))

    def notify_win(self) -> None:
        self.calls.append(("win", ()))

    def notify_lose(self) -> None:
        self.calls.append(("lose", ()))

    # ------------------------------------------------------------------
    # Test-only helpers
    # ------------------------------------------------------------------

    @property
    def has_pending_step(self) -> bool:
        return self._pending is not None

    def complete_step(self) -> bool:
        """
        Finish the in-flight step, if any.

        Returns True if a step was completed.
        """
        callback = self._pending
        if callback is None:
            return False
        self._pending = None
        callback()
        return True

    def run_until_settled(self, max_steps: int = 1000) -> int:
        """Complete steps until none is pending; returns how many ran."""
        count = 0
        while self.complete_step():
            count += 1
            if count >= max_steps:
                raise AssertionError(f"Agent still moving after {max_steps} steps")
        return count

    def targets(self) -> List[TileCoord]:
        return [s.target for s in self.steps]

    def names(self) -> List[str]:
        """Call names in order, e.g. ['step', 'ambient_step', 'idle']."""
        return [name for name, _ in self.calls]

    def count(self, name: str) -> int:
        return sum(1 for n, _ in self.calls if n == name)

    def summary(self) -> Dict[str, int]:
        out: Dict[str, int] = {}
        for name, _ in self.calls:
            out[name] = out.get(name, 0) + 1
        return out
