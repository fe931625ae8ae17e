"""Pillar spawning system.

Obstacle pairs appear just past the right edge of the viewport and scroll
left at a constant speed. Spawning is driven by ``SpawnerState.last_spawn_x``,
a world-space marker that scrolls with the pillars:

- every frame the marker moves left by ``speed * dt``
- once ``viewport.width - last_spawn_x`` exceeds the spawn distance, a pair
  is spawned and the marker is re-based to the new pair's x plus half the
  viewport width

Re-basing to the new pair (instead of adding a fixed step) couples the
cadence to the scroll speed and the viewport, giving a roughly periodic
but not strictly periodic pattern.

The planning half (``plan_pillar_pair``) is a pure function over an
explicit state and RNG so the cadence can be tested without an engine.
"""

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from flappy.config.game_config import PillarConfig
from flappy.entity_factory import BoxPlan, spawn_pillar, spawn_score_trigger
from flappy.game_state import GameState
from flappy.math_utils import Vector2, sample_range
from flappy.simulation.frame_context import Viewport
from flappy.systems.base import BaseSystem, SystemResult
from flappy.update_phases import UpdatePhase, runs_in_phase, runs_in_state

if TYPE_CHECKING:
    from flappy.simulation.engine import GameEngine
    from flappy.simulation.frame_context import FrameContext

logger = logging.getLogger(__name__)


@dataclass
class SpawnerState:
    """Spawn cadence marker, in world x."""

    last_spawn_x: float = 0.0


@dataclass
class PillarPairPlan:
    """Geometry of one obstacle pair and its score trigger.

    Attributes:
        gap_fraction: Fraction of the viewport height above the gap
        top: Segment hanging from the roof
        bottom: Segment standing on the floor
        trigger: Score zone filling the gap
    """

    gap_fraction: float
    top: BoxPlan
    bottom: BoxPlan
    trigger: BoxPlan


def build_pillar_pair(viewport: Viewport, gap_fraction: float, config: PillarConfig) -> PillarPairPlan:
    """Lay out a pair for a given gap position.

    The gap is centred at ``height * (gap_fraction - 0.5)``; each segment's
    inner edge sits half the gap size away from that centre.
    """
    height = viewport.height
    x = viewport.half_width + config.width / 2.0

    top_height = height * (1.0 - gap_fraction)
    top_y = height / 2.0 - top_height / 2.0 + config.gap / 2.0

    bottom_height = height * gap_fraction
    bottom_y = bottom_height / 2.0 - height / 2.0 - config.gap / 2.0

    return PillarPairPlan(
        gap_fraction=gap_fraction,
        top=BoxPlan(Vector2(x, top_y), Vector2(config.width, top_height)),
        bottom=BoxPlan(Vector2(x, bottom_y), Vector2(config.width, bottom_height)),
        trigger=BoxPlan(
            Vector2(x, height * (gap_fraction - 0.5)),
            Vector2(config.trigger_width, config.gap),
        ),
    )


def plan_pillar_pair(
    state: SpawnerState,
    viewport: Viewport,
    dt: float,
    rng: random.Random,
    config: PillarConfig,
) -> Optional[PillarPairPlan]:
    """Advance the spawn marker by one frame.

    Args:
        state: Spawn marker, updated in place
        viewport: Current window geometry
        dt: Seconds elapsed this frame
        rng: Source for the gap position
        config: Pillar geometry and speed

    Returns:
        The pair to spawn this frame, or None
    """
    plan = None
    if viewport.width - state.last_spawn_x > config.spawn_distance:
        low, high = config.gap_fraction_range
        plan = build_pillar_pair(viewport, sample_range(rng, low, high), config)
        state.last_spawn_x = plan.top.position.x + viewport.half_width
    if dt > 0:
        state.last_spawn_x -= config.speed * dt
    return plan


@runs_in_phase(UpdatePhase.SPAWN)
@runs_in_state(GameState.RUNNING)
class PillarSpawningSystem(BaseSystem):
    """Materialises planned pairs as pillar and trigger entities."""

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "PillarSpawning")
        self._pairs_spawned = 0

    @property
    def pairs_spawned(self) -> int:
        return self._pairs_spawned

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        engine = self.engine
        config = engine.config.pillars
        plan = plan_pillar_pair(engine.spawner_state, ctx.viewport, ctx.dt, engine.rng, config)
        if plan is None:
            return SystemResult.empty()

        spawn_pillar(engine.store, plan.top, config.speed)
        spawn_pillar(engine.store, plan.bottom, config.speed)
        spawn_score_trigger(engine.store, plan.trigger, config)
        self._pairs_spawned += 1
        logger.debug(
            "Spawned pillar pair %d (gap fraction %.3f) at frame %d",
            self._pairs_spawned,
            plan.gap_fraction,
            ctx.frame,
        )
        return SystemResult(entities_spawned=3, details={"pairs": 1})

    def get_debug_info(self):
        info = super().get_debug_info()
        info["pairs_spawned"] = self._pairs_spawned
        info["last_spawn_x"] = self.engine.spawner_state.last_spawn_x
        return info
