"""Component records attached to entities.

Components are plain data. Systems read and write them through the entity
store; no component holds a reference to another entity.

One-shot flags (score latch, explosion trigger) are small enums with a
single forward transition so "exactly once" holds by construction.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from flappy.color import Color
from flappy.math_utils import Vector2


@dataclass
class Transform:
    """Sprite centre in world space plus draw order (higher z on top)."""

    translation: Vector2 = field(default_factory=Vector2)
    z: float = 0.0


@dataclass
class Sprite:
    """Axis-aligned box size and fill color."""

    size: Vector2 = field(default_factory=Vector2)
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))


@dataclass
class Velocity:
    value: Vector2 = field(default_factory=Vector2)


@dataclass
class Gravity:
    """Downward acceleration magnitude for entities subject to falling."""

    acceleration: float


@dataclass
class Bird:
    """Marks the player body. ``flap_height`` is the apex of one flap."""

    flap_height: float


class ExplosionState(Enum):
    ARMED = "armed"
    TRIGGERED = "triggered"


@dataclass
class Explodes:
    """Replaces its entity with a particle burst once triggered."""

    particle_color: Color
    particle_count: int
    particle_speed_range: Tuple[float, float]
    particle_lifetime_range: Tuple[float, float]
    particle_size_fraction_range: Tuple[float, float]
    state: ExplosionState = ExplosionState.ARMED

    @property
    def triggered(self) -> bool:
        return self.state is ExplosionState.TRIGGERED

    def trigger(self) -> None:
        self.state = ExplosionState.TRIGGERED


@dataclass
class Lifetime:
    """Seconds left before the entity is destroyed."""

    remaining: float


@dataclass
class Collider:
    """Marker: the body explodes when it overlaps this entity."""


@dataclass
class Border:
    """Roof or floor strip. ``role`` is -1 for the floor and +1 for the roof."""

    role: int


class ScoreState(Enum):
    UNSCORED = "unscored"
    SCORED = "scored"


@dataclass
class ScoreTrigger:
    """Zone in a pillar gap that awards one point on first pass-through."""

    state: ScoreState = ScoreState.UNSCORED

    @property
    def scored(self) -> bool:
        return self.state is ScoreState.SCORED

    def mark_scored(self) -> bool:
        """Latch the trigger.

        Returns:
            True if this call performed the UNSCORED -> SCORED transition,
            False if the trigger had already scored
        """
        if self.state is ScoreState.SCORED:
            return False
        self.state = ScoreState.SCORED
        return True


@dataclass
class FadeOut:
    """Lowers the sprite alpha by ``speed`` per second once started."""

    speed: float
    started: bool = False


@dataclass
class DestroyAtRestart:
    """Marker: purged when the game goes from Over back to Started."""


@dataclass
class Particle:
    """Marker for explosion debris."""


@dataclass
class Score:
    value: int = 0


@dataclass
class Highscore:
    value: int = 0


@dataclass
class Text:
    """Text shown by the frontend for scoreboard entities."""

    value: str = "0"
    font_size: float = 40.0
    top_offset: float = 0.0
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))


__all__ = [
    "Bird",
    "Border",
    "Collider",
    "DestroyAtRestart",
    "ExplosionState",
    "Explodes",
    "FadeOut",
    "Gravity",
    "Highscore",
    "Lifetime",
    "Particle",
    "Score",
    "ScoreState",
    "ScoreTrigger",
    "Sprite",
    "Text",
    "Transform",
    "Velocity",
]
