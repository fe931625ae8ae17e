"""Entity upkeep that is independent of the round in progress.

- LifetimeSystem: ages particles and destroys expired ones
- FadeOutSystem: fades scored triggers (Running only)
- BorderSystem: keeps the roof and floor glued to the viewport edges
- OutOfBoundsSystem: destroys anything but the body fully past the left edge
"""

from typing import TYPE_CHECKING

from flappy.components import Bird, Border, FadeOut, Lifetime, Sprite, Transform
from flappy.game_state import GameState
from flappy.systems.base import BaseSystem, SystemResult
from flappy.update_phases import UpdatePhase, runs_in_phase, runs_in_state

if TYPE_CHECKING:
    from flappy.simulation.engine import GameEngine
    from flappy.simulation.frame_context import FrameContext


@runs_in_phase(UpdatePhase.LIFECYCLE)
class LifetimeSystem(BaseSystem):
    """Destroys an entity on the first frame its lifetime is <= 0.

    An entity therefore survives one frame past reaching zero.
    """

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "Lifetime")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        store = self.engine.store
        removed = 0
        for entity, (lifetime,) in store.query(Lifetime):
            if lifetime.remaining <= 0:
                if store.despawn(entity):
                    removed += 1
            else:
                lifetime.remaining -= ctx.dt
        return SystemResult(entities_removed=removed)


@runs_in_phase(UpdatePhase.EFFECTS)
@runs_in_state(GameState.RUNNING)
class FadeOutSystem(BaseSystem):
    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "FadeOut")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        affected = 0
        for _, (fade_out, sprite) in self.engine.store.query(FadeOut, Sprite):
            if fade_out.started:
                sprite.color.fade(fade_out.speed * max(ctx.dt, 0.0))
                affected += 1
        return SystemResult(entities_affected=affected)


@runs_in_phase(UpdatePhase.FRAME_START)
class BorderSystem(BaseSystem):
    """Sizes the roof and floor from this frame's viewport before anything collides."""

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "Border")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        thickness = self.engine.config.border_thickness
        affected = 0
        for _, (border, transform, sprite) in self.engine.store.query(Border, Transform, Sprite):
            transform.translation.x = 0.0
            transform.translation.y = border.role * ctx.viewport.half_height
            sprite.size.x = ctx.viewport.width
            sprite.size.y = thickness
            affected += 1
        return SystemResult(entities_affected=affected)


@runs_in_phase(UpdatePhase.CLEANUP)
class OutOfBoundsSystem(BaseSystem):
    """Destroys entities whose ``x + width`` is left of ``-viewport.width / 2``.

    The body is exempt: it never scrolls, and a narrow window must not
    remove it.
    """

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "OutOfBounds")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        store = self.engine.store
        left_edge = -ctx.viewport.half_width
        removed = 0
        for entity, (transform, sprite) in store.query(Transform, Sprite):
            if store.has(entity, Bird):
                continue
            if transform.translation.x + sprite.size.x < left_edge:
                if store.despawn(entity):
                    removed += 1
        return SystemResult(entities_removed=removed)
