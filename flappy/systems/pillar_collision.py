"""Crash detection between the body and solid obstacles.

The body box is shrunk by ``BirdConfig.collision_scale`` before testing so a
graze on a pillar corner is forgiven. Every other ``Collider`` entity is an
obstacle: the pillar segments and the roof and floor strips.
"""

import logging
from typing import TYPE_CHECKING

from flappy.collision import collide_aabb
from flappy.components import Bird, Collider, Explodes, Sprite, Transform
from flappy.game_state import GameState
from flappy.systems.base import BaseSystem, SystemResult
from flappy.update_phases import UpdatePhase, runs_in_phase, runs_in_state

if TYPE_CHECKING:
    from flappy.simulation.engine import GameEngine
    from flappy.simulation.frame_context import FrameContext

logger = logging.getLogger(__name__)


@runs_in_phase(UpdatePhase.COLLISION)
@runs_in_state(GameState.RUNNING)
class PillarCollisionSystem(BaseSystem):
    """Triggers the body's explosion and ends the round on any overlap."""

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "PillarCollision")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        store = self.engine.store
        scale = self.engine.config.bird.collision_scale
        obstacles = [
            (entity, transform, sprite)
            for entity, (_, transform, sprite) in store.query(Collider, Transform, Sprite)
            if not store.has(entity, Bird)
        ]

        crashes = 0
        for bird_entity, (_, _, transform, sprite, explodes) in store.query(
            Bird, Collider, Transform, Sprite, Explodes
        ):
            bird_size = sprite.size * scale
            for obstacle, obstacle_transform, obstacle_sprite in obstacles:
                if collide_aabb(
                    transform.translation,
                    bird_size,
                    obstacle_transform.translation,
                    obstacle_sprite.size,
                ):
                    if not explodes.triggered:
                        logger.debug("%s crashed into %s at frame %d", bird_entity, obstacle, ctx.frame)
                    explodes.trigger()
                    ctx.state_machine.request(GameState.OVER)
                    crashes += 1

        return SystemResult(entities_affected=crashes, details={"crashes": crashes})
