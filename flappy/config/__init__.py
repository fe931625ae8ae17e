"""Configuration package for the flappy simulation.

- display.py: window and HUD constants used by the frontend
- gameplay.py: tuning constants for the body, pillars and explosions
- game_config.py: dataclasses grouping those constants, with validation
"""

from flappy.config.game_config import BirdConfig, ExplosionConfig, GameConfig, PillarConfig

__all__ = [
    "BirdConfig",
    "ExplosionConfig",
    "GameConfig",
    "PillarConfig",
]
