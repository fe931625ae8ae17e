"""Lightweight game configuration helpers."""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Tuple

from flappy.config.display import SCREEN_HEIGHT, SCREEN_WIDTH
from flappy.config.gameplay import (
    BIRD_COLLISION_SCALE,
    BIRD_FLAP_HEIGHT,
    BIRD_GRAVITY,
    BIRD_SIZE,
    BIRD_START_X,
    BORDER_THICKNESS,
    PARTICLE_COUNT,
    PARTICLE_LIFETIME_RANGE,
    PARTICLE_SIZE_FRACTION_RANGE,
    PARTICLE_SPEED_RANGE,
    PILLAR_GAP,
    PILLAR_GAP_FRACTION_RANGE,
    PILLAR_SPAWN_DISTANCE,
    PILLAR_SPEED,
    PILLAR_WIDTH,
    SCORE_TRIGGER_FADE_SPEED,
    SCORE_TRIGGER_WIDTH,
)
from flappy.exceptions import ConfigurationError


@dataclass
class BirdConfig:
    """Player body configuration."""

    start_x: float = BIRD_START_X
    size: float = BIRD_SIZE
    gravity: float = BIRD_GRAVITY
    flap_height: float = BIRD_FLAP_HEIGHT
    collision_scale: float = BIRD_COLLISION_SCALE


@dataclass
class PillarConfig:
    """Obstacle pair and score trigger configuration."""

    gap: float = PILLAR_GAP
    width: float = PILLAR_WIDTH
    spawn_distance: float = PILLAR_SPAWN_DISTANCE
    speed: float = PILLAR_SPEED
    gap_fraction_range: Tuple[float, float] = PILLAR_GAP_FRACTION_RANGE
    trigger_width: float = SCORE_TRIGGER_WIDTH
    trigger_fade_speed: float = SCORE_TRIGGER_FADE_SPEED


@dataclass
class ExplosionConfig:
    """Particle burst configuration for an exploding body."""

    particle_count: int = PARTICLE_COUNT
    speed_range: Tuple[float, float] = PARTICLE_SPEED_RANGE
    lifetime_range: Tuple[float, float] = PARTICLE_LIFETIME_RANGE
    size_fraction_range: Tuple[float, float] = PARTICLE_SIZE_FRACTION_RANGE


@dataclass
class GameConfig:
    """Aggregate configuration for a game engine.

    Attributes:
        headless: Whether the engine runs without a window.
        initial_width: Window width used before the frontend reports one.
        initial_height: Window height used before the frontend reports one.
        border_thickness: Height of the roof and floor strips.
    """

    headless: bool = True
    initial_width: float = SCREEN_WIDTH
    initial_height: float = SCREEN_HEIGHT
    border_thickness: float = BORDER_THICKNESS
    bird: BirdConfig = field(default_factory=BirdConfig)
    pillars: PillarConfig = field(default_factory=PillarConfig)
    explosion: ExplosionConfig = field(default_factory=ExplosionConfig)

    def with_overrides(self, **overrides: Any) -> "GameConfig":
        """Return a copy with top-level fields replaced."""
        return dataclasses.replace(self, **overrides)

    def validate(self) -> None:
        """Check that every value can drive a simulation.

        Raises:
            ConfigurationError: If any value is out of range
        """
        _require_positive("bird.size", self.bird.size)
        _require_positive("bird.gravity", self.bird.gravity)
        _require_positive("bird.flap_height", self.bird.flap_height)
        if not 0.0 < self.bird.collision_scale <= 1.0:
            raise ConfigurationError(
                f"bird.collision_scale must be in (0, 1], got {self.bird.collision_scale}"
            )

        _require_positive("pillars.gap", self.pillars.gap)
        _require_positive("pillars.width", self.pillars.width)
        _require_positive("pillars.spawn_distance", self.pillars.spawn_distance)
        _require_positive("pillars.speed", self.pillars.speed)
        _require_positive("pillars.trigger_width", self.pillars.trigger_width)
        _require_positive("pillars.trigger_fade_speed", self.pillars.trigger_fade_speed)
        low, high = _require_range("pillars.gap_fraction_range", self.pillars.gap_fraction_range)
        if low <= 0.0 or high >= 1.0:
            raise ConfigurationError(
                f"pillars.gap_fraction_range must lie inside (0, 1), got {(low, high)}"
            )

        if self.explosion.particle_count < 0:
            raise ConfigurationError(
                f"explosion.particle_count must be >= 0, got {self.explosion.particle_count}"
            )
        _require_range("explosion.speed_range", self.explosion.speed_range)
        low, _ = _require_range("explosion.lifetime_range", self.explosion.lifetime_range)
        if low < 0.0:
            raise ConfigurationError(f"explosion.lifetime_range must be non-negative, got {low}")
        low, _ = _require_range(
            "explosion.size_fraction_range", self.explosion.size_fraction_range
        )
        if low <= 0.0:
            raise ConfigurationError(
                f"explosion.size_fraction_range must be positive, got {low}"
            )

        _require_positive("border_thickness", self.border_thickness)
        _require_positive("initial_width", self.initial_width)
        _require_positive("initial_height", self.initial_height)


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")


def _require_range(name: str, value: Tuple[float, float]) -> Tuple[float, float]:
    """Check a half-open ``[low, high)`` sampling range is non-empty."""
    try:
        low, high = value
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a (low, high) pair, got {value!r}") from exc
    if not low < high:
        raise ConfigurationError(f"{name} must satisfy low < high, got {value!r}")
    return low, high
