"""Physics stepping: gravity and velocity integration.

Both steps are explicit Euler. Gravity only acts while a round is running,
so the body hovers on the start screen; velocity integration runs in every
state so debris and scrolling pillars keep moving after a crash.
"""

from typing import TYPE_CHECKING

from flappy.components import Gravity, Transform, Velocity
from flappy.game_state import GameState
from flappy.systems.base import BaseSystem, SystemResult
from flappy.update_phases import UpdatePhase, runs_in_phase, runs_in_state

if TYPE_CHECKING:
    from flappy.simulation.engine import GameEngine
    from flappy.simulation.frame_context import FrameContext


@runs_in_phase(UpdatePhase.ENTITY_ACT)
@runs_in_state(GameState.RUNNING)
class GravitySystem(BaseSystem):
    """velocity.y -= acceleration * dt for every falling entity."""

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "Gravity")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        if ctx.dt <= 0:
            return SystemResult.empty()
        affected = 0
        for _, (velocity, gravity) in self.engine.store.query(Velocity, Gravity):
            velocity.value.y -= gravity.acceleration * ctx.dt
            affected += 1
        return SystemResult(entities_affected=affected)


@runs_in_phase(UpdatePhase.PHYSICS)
class VelocitySystem(BaseSystem):
    """translation += velocity * dt for every moving entity."""

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "Velocity")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        if ctx.dt <= 0:
            return SystemResult.empty()
        affected = 0
        for _, (velocity, transform) in self.engine.store.query(Velocity, Transform):
            transform.translation.add_scaled_inplace(velocity.value, ctx.dt)
            affected += 1
        return SystemResult(entities_affected=affected)
