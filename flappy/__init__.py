"""Core simulation for a side-scrolling pillar-dodging game.

This package contains the pure game logic, with no UI dependencies. Key
modules include:

- simulation: GameEngine, the entity store and per-frame context
- systems: physics, spawning, collision, scoring, explosion and upkeep
- game_state: the Started / Running / Over state machine
- input: key bindings and per-frame input snapshots
- config: tuning constants and validated configuration dataclasses

A frontend creates a GameEngine, calls ``update(dt, input_state)`` once per
frame and draws ``engine.renderables()`` plus the scoreboard text.
"""

from flappy.config.game_config import GameConfig
from flappy.game_state import GameState
from flappy.input import Action, InputState, KeyBindings
from flappy.simulation.engine import GameEngine, Renderable
from flappy.simulation.frame_context import Viewport

__all__ = [
    "Action",
    "GameConfig",
    "GameEngine",
    "GameState",
    "InputState",
    "KeyBindings",
    "Renderable",
    "Viewport",
]
