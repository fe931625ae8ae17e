"""Game lifecycle state machine.

Started --(start)--> Running --(crash)--> Over --(restart)--> Started

Transitions are requested by systems and applied by the engine at phase
barriers, so a system never sees the state change under it mid-phase.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class GameState(Enum):
    """The three lifecycle states. Exactly one is current at a time."""

    STARTED = "started"
    RUNNING = "running"
    OVER = "over"


EnterHook = Callable[[], None]


class GameStateMachine:
    """Tracks the current state, a pending transition and enter hooks.

    Attributes:
        current: The active state
        pending: Transition requested this frame, applied at the next barrier
        transitions: Number of transitions applied so far
    """

    def __init__(self, initial: GameState = GameState.STARTED) -> None:
        self.current: GameState = initial
        self.pending: Optional[GameState] = None
        self.transitions: int = 0
        self._enter_hooks: Dict[GameState, List[EnterHook]] = {state: [] for state in GameState}

    def on_enter(self, state: GameState, hook: EnterHook) -> None:
        """Register ``hook`` to run every time ``state`` is entered."""
        self._enter_hooks[state].append(hook)

    def request(self, state: GameState) -> None:
        """Ask to move to ``state`` at the next barrier.

        Requesting the current state is ignored. Repeated requests within a
        frame keep the latest one.
        """
        if state is self.current:
            return
        self.pending = state

    def apply_pending(self) -> bool:
        """Apply a requested transition and run the new state's enter hooks.

        Returns:
            True if the state changed
        """
        if self.pending is None:
            return False
        previous, self.current = self.current, self.pending
        self.pending = None
        self.transitions += 1
        logger.info("Game state %s -> %s", previous.name, self.current.name)
        self.run_enter_hooks()
        return True

    def run_enter_hooks(self) -> None:
        """Run enter hooks for the current state (also used at startup)."""
        for hook in self._enter_hooks[self.current]:
            hook()
