"""Explosion system: replaces a crashed body with a burst of debris.

Each particle draws, from the injected RNG:
- a size as a fraction of the body's size
- a direction from two independent draws in [-1, 1), normalized
- a speed and a lifetime from the configured ranges

The exploding entity is destroyed once, after its whole burst is spawned.
"""

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from flappy.components import Explodes, Sprite, Transform
from flappy.entity_factory import spawn_particle
from flappy.math_utils import Vector2, sample_range
from flappy.systems.base import BaseSystem, SystemResult
from flappy.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from flappy.simulation.engine import GameEngine
    from flappy.simulation.frame_context import FrameContext

logger = logging.getLogger(__name__)


@dataclass
class ParticleDraw:
    size: Vector2
    velocity: Vector2
    lifetime: float


def draw_particles(explodes: Explodes, body_size: Vector2, rng: random.Random) -> List[ParticleDraw]:
    """Sample ``explodes.particle_count`` particles."""
    draws = []
    for _ in range(explodes.particle_count):
        size = body_size * sample_range(rng, *explodes.particle_size_fraction_range)
        direction = Vector2(sample_range(rng, -1.0, 1.0), sample_range(rng, -1.0, 1.0)).normalize()
        velocity = direction * sample_range(rng, *explodes.particle_speed_range)
        lifetime = sample_range(rng, *explodes.particle_lifetime_range)
        draws.append(ParticleDraw(size, velocity, lifetime))
    return draws


@runs_in_phase(UpdatePhase.EFFECTS)
class ExplosionSystem(BaseSystem):
    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "Explosion")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        store = self.engine.store
        spawned = 0
        removed = 0
        for entity, (explodes, sprite, transform) in store.query(Explodes, Sprite, Transform):
            if not explodes.triggered:
                continue
            for draw in draw_particles(explodes, sprite.size, self.engine.rng):
                spawn_particle(
                    store,
                    transform.translation,
                    draw.size,
                    draw.velocity,
                    draw.lifetime,
                    explodes.particle_color,
                )
                spawned += 1
            if store.despawn(entity):
                removed += 1
            logger.debug("%s exploded into %d particles", entity, explodes.particle_count)
        return SystemResult(entities_spawned=spawned, entities_removed=removed)
