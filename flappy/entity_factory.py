"""Entity factory: the single place that knows which components make up
each kind of entity.

Systems call these helpers instead of assembling component lists inline, so
the body, pillars, triggers, particles and scoreboard stay consistent
wherever they are created.
"""

from dataclasses import dataclass
from typing import List

from flappy.color import Color, ColorType
from flappy.components import (
    Bird,
    Border,
    Collider,
    DestroyAtRestart,
    Explodes,
    FadeOut,
    Gravity,
    Highscore,
    Lifetime,
    Particle,
    Score,
    ScoreTrigger,
    Sprite,
    Text,
    Transform,
    Velocity,
)
from flappy.config.display import (
    HIGHSCORE_FONT_SIZE,
    HIGHSCORE_TOP_OFFSET,
    SCORE_FONT_SIZE,
    SCORE_TOP_OFFSET,
)
from flappy.config.game_config import BirdConfig, ExplosionConfig, PillarConfig
from flappy.entity_ids import EntityId
from flappy.math_utils import Vector2
from flappy.simulation.entity_store import EntityStore

BIRD_Z = 1.0


@dataclass
class BoxPlan:
    """Centre and size of a box to spawn."""

    position: Vector2
    size: Vector2


def spawn_bird(store: EntityStore, bird: BirdConfig, explosion: ExplosionConfig) -> EntityId:
    """Create the player body at its start position, at rest."""
    return store.spawn(
        Transform(Vector2(bird.start_x, 0.0), z=BIRD_Z),
        Sprite(Vector2(bird.size, bird.size), ColorType.BIRD.get_color()),
        Velocity(Vector2(0.0, 0.0)),
        Collider(),
        Gravity(bird.gravity),
        Bird(flap_height=bird.flap_height),
        DestroyAtRestart(),
        Explodes(
            particle_color=ColorType.BIRD.get_color(),
            particle_count=explosion.particle_count,
            particle_speed_range=explosion.speed_range,
            particle_lifetime_range=explosion.lifetime_range,
            particle_size_fraction_range=explosion.size_fraction_range,
        ),
    )


def spawn_borders(store: EntityStore) -> List[EntityId]:
    """Create the floor and roof strips.

    Their geometry is zero until the border system sizes them to the
    viewport on the first frame.
    """
    return [
        store.spawn(
            Transform(Vector2(0.0, 0.0)),
            Sprite(Vector2(0.0, 0.0), ColorType.PILLAR.get_color()),
            Collider(),
            Border(role=role),
        )
        for role in (-1, 1)
    ]


def spawn_scoreboard(store: EntityStore) -> List[EntityId]:
    """Create the score and highscore counters with their text displays."""
    score = store.spawn(
        Score(0),
        Text("0", SCORE_FONT_SIZE, SCORE_TOP_OFFSET, ColorType.SCORE.get_color()),
    )
    highscore = store.spawn(
        Highscore(0),
        Text("0", HIGHSCORE_FONT_SIZE, HIGHSCORE_TOP_OFFSET, ColorType.SCORE.get_color()),
    )
    return [score, highscore]


def spawn_pillar(store: EntityStore, plan: BoxPlan, speed: float) -> EntityId:
    return store.spawn(
        Transform(plan.position.copy()),
        Sprite(plan.size.copy(), ColorType.PILLAR.get_color()),
        Velocity(Vector2(-speed, 0.0)),
        Collider(),
        DestroyAtRestart(),
    )


def spawn_score_trigger(store: EntityStore, plan: BoxPlan, pillars: PillarConfig) -> EntityId:
    return store.spawn(
        Transform(plan.position.copy()),
        Sprite(plan.size.copy(), ColorType.LASER.get_color()),
        Velocity(Vector2(-pillars.speed, 0.0)),
        ScoreTrigger(),
        DestroyAtRestart(),
        FadeOut(speed=pillars.trigger_fade_speed),
    )


def spawn_particle(
    store: EntityStore,
    position: Vector2,
    size: Vector2,
    velocity: Vector2,
    lifetime: float,
    color: Color,
) -> EntityId:
    return store.spawn(
        Transform(position.copy()),
        Sprite(size, color.copy()),
        Velocity(velocity),
        Lifetime(lifetime),
        Particle(),
        DestroyAtRestart(),
    )
