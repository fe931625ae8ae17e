"""FrameContext - explicit per-frame state passed to every system.

The engine builds one FrameContext per ``update`` call. Systems read the
frame's elapsed time, viewport and input from it instead of reaching into
engine attributes, which keeps each system testable on its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from flappy.game_state import GameState, GameStateMachine
from flappy.input import InputMapper

if TYPE_CHECKING:
    from flappy.update_phases import UpdatePhase


@dataclass(frozen=True)
class Viewport:
    """Current window size in world units (pixels)."""

    width: float
    height: float

    @property
    def half_width(self) -> float:
        return self.width / 2.0

    @property
    def half_height(self) -> float:
        return self.height / 2.0

    def is_usable(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass
class FrameContext:
    """Explicit per-frame state passed through the update phases.

    Attributes:
        frame: Frame number, starting at 1 for the first update
        dt: Seconds elapsed since the previous frame (never negative)
        viewport: Window geometry sampled at the start of the frame
        input: Action queries bound to this frame's keyboard snapshot
        state_machine: Game state, updated at phase barriers
        phase: Phase currently executing
    """

    frame: int
    dt: float
    viewport: Viewport
    input: InputMapper
    state_machine: GameStateMachine
    phase: Optional["UpdatePhase"] = field(default=None)

    @property
    def state(self) -> GameState:
        return self.state_machine.current
