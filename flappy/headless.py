"""Headless runner: drives the engine without a window.

Input is scripted: a press on the start screen, a flap every
``flap_interval`` frames while running, and a held key after a crash to
restart. Useful for smoke runs and profiling the systems.
"""

import logging
from typing import Any, Dict, Optional

from flappy.config.display import FRAME_RATE, SEPARATOR_WIDTH
from flappy.game_state import GameState
from flappy.input import Action, InputState, KeyBindings
from flappy.simulation.engine import GameEngine

logger = logging.getLogger(__name__)


class ScriptedInput:
    """Produces one InputState per frame from the engine's current state."""

    def __init__(self, flap_interval: int, bindings: Optional[KeyBindings] = None) -> None:
        if flap_interval <= 0:
            raise ValueError(f"flap_interval must be positive, got {flap_interval}")
        self.flap_interval = flap_interval
        self.bindings = bindings or KeyBindings()
        self._running_frames = 0

    def next_input(self, state: GameState) -> InputState:
        if state is GameState.STARTED:
            self._running_frames = 0
            return InputState.press(self.bindings.key_for(Action.START))
        if state is GameState.OVER:
            return InputState.hold(self.bindings.key_for(Action.RESTART))
        self._running_frames += 1
        if self._running_frames % self.flap_interval == 0:
            return InputState.press(self.bindings.key_for(Action.FLAP))
        return InputState.idle()


class HeadlessRunner:
    """Steps an engine at a fixed ``dt`` and logs periodic stats."""

    def __init__(
        self,
        engine: GameEngine,
        flap_interval: int = 45,
        frame_rate: int = FRAME_RATE,
    ) -> None:
        self.engine = engine
        self.dt = 1.0 / frame_rate
        self.script = ScriptedInput(flap_interval, engine.input.bindings)
        self.rounds_finished = 0

    def step(self) -> None:
        before = self.engine.state
        self.engine.update(self.dt, self.script.next_input(before))
        if before is GameState.RUNNING and self.engine.state is GameState.OVER:
            self.rounds_finished += 1

    def run(self, max_frames: int, stats_interval: int = 300) -> Dict[str, Any]:
        """Run ``max_frames`` frames and return the final stats."""
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("HEADLESS FLAPPY SIMULATION")
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info(
            "Running for %d frames (%.1f seconds of sim time)", max_frames, max_frames * self.dt
        )

        self.engine.setup()
        for frame in range(1, max_frames + 1):
            self.step()
            if stats_interval > 0 and frame % stats_interval == 0:
                self.log_stats()

        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("SIMULATION COMPLETE - Final Statistics")
        logger.info("=" * SEPARATOR_WIDTH)
        self.log_stats()
        stats = self.engine.get_stats()
        stats["rounds_finished"] = self.rounds_finished
        return stats

    def log_stats(self) -> None:
        stats = self.engine.get_stats()
        logger.info(
            "frame=%d state=%s score=%d highscore=%d rounds=%d entities=%d particles=%d",
            stats["frame"],
            stats["state"],
            stats["score"],
            stats["highscore"],
            self.rounds_finished,
            stats["entities"],
            stats["particles"],
        )
