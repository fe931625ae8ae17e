"""Simulation systems package.

Each system has a single responsibility, declares the update phase it runs
in, and optionally the game states it is active in. Systems read and write
components through the engine's entity store.

System Execution Order
======================

```
FRAME_START  Border
INPUT        StartCheck [Started], Restart [Over]
ENTITY_ACT   Flap, Gravity [Running]
PHYSICS      Velocity
SPAWN        PillarSpawning [Running]
COLLISION    PillarCollision, ScoreCollision [Running]
EFFECTS      Explosion; FadeOut [Running]
LIFECYCLE    Lifetime
CLEANUP      OutOfBounds
FRAME_END    Highscore, Scoreboard
```

A state transition requested in one phase is applied before the next
phase starts. Pressing space on the start screen therefore starts the round
and flaps in the same frame, and a crash stops spawning and scoring for
the rest of the frame while the explosion still runs.

See Also
--------
- `flappy/update_phases.py`: Phase enum definitions and PhaseRunner
- `flappy/systems/base.py`: BaseSystem abstract class and SystemResult
"""

from flappy.systems.base import BaseSystem, SystemResult

__all__ = ["BaseSystem", "SystemResult"]
