"""Systems that turn player actions into game effects.

- StartCheckSystem: START held on the start screen begins the round
- FlapSystem: FLAP just pressed launches the body upward
- RestartSystem: RESTART held after a crash resets the round
"""

import logging
import math
from typing import TYPE_CHECKING

from flappy.components import Bird, DestroyAtRestart, Gravity, Score, Velocity
from flappy.game_state import GameState
from flappy.input import Action
from flappy.systems.base import BaseSystem, SystemResult
from flappy.update_phases import UpdatePhase, runs_in_phase, runs_in_state

if TYPE_CHECKING:
    from flappy.simulation.engine import GameEngine
    from flappy.simulation.frame_context import FrameContext

logger = logging.getLogger(__name__)


def flap_speed(gravity: float, flap_height: float) -> float:
    """Upward launch speed whose ballistic apex is ``flap_height``.

    From v^2 = 2 g h.
    """
    return math.sqrt(2.0 * gravity * flap_height)


@runs_in_phase(UpdatePhase.INPUT)
@runs_in_state(GameState.STARTED)
class StartCheckSystem(BaseSystem):
    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "StartCheck")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        if ctx.input.held(Action.START):
            ctx.state_machine.request(GameState.RUNNING)
            return SystemResult(details={"started": 1})
        return SystemResult.empty()


@runs_in_phase(UpdatePhase.ENTITY_ACT)
@runs_in_state(GameState.RUNNING)
class FlapSystem(BaseSystem):
    """Sets the body's vertical speed outright; flaps do not accumulate."""

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "Flap")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        if not ctx.input.just_pressed(Action.FLAP):
            return SystemResult.empty()
        affected = 0
        for _, (bird, gravity, velocity) in self.engine.store.query(Bird, Gravity, Velocity):
            velocity.value.y = flap_speed(gravity.acceleration, bird.flap_height)
            affected += 1
        return SystemResult(entities_affected=affected)


@runs_in_phase(UpdatePhase.INPUT)
@runs_in_state(GameState.OVER)
class RestartSystem(BaseSystem):
    """Purges the finished round and returns to the start screen.

    Borders, the scoreboard and the highscore are untouched; the score
    counter goes back to zero.
    """

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "Restart")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        if not ctx.input.held(Action.RESTART):
            return SystemResult.empty()
        store = self.engine.store
        removed = store.despawn_all(store.query_ids(DestroyAtRestart))
        for _, (score,) in store.query(Score):
            score.value = 0
        ctx.state_machine.request(GameState.STARTED)
        logger.debug("Restart purged %d entities", removed)
        return SystemResult(entities_removed=removed)
