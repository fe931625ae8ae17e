"""Score triggers, the highscore ratchet and scoreboard text.

- ScoreCollisionSystem: the body passing through an unscored trigger adds
  one point, latches the trigger and starts its fade
- HighscoreSystem: highscore = max(highscore, score), every frame
- ScoreboardSystem: mirrors both counters into their text displays
"""

from typing import TYPE_CHECKING

from flappy.collision import collide_aabb
from flappy.components import Bird, FadeOut, Highscore, Score, ScoreTrigger, Sprite, Text, Transform
from flappy.game_state import GameState
from flappy.systems.base import BaseSystem, SystemResult
from flappy.update_phases import UpdatePhase, runs_in_phase, runs_in_state

if TYPE_CHECKING:
    from flappy.simulation.engine import GameEngine
    from flappy.simulation.frame_context import FrameContext


@runs_in_phase(UpdatePhase.COLLISION)
@runs_in_state(GameState.RUNNING)
class ScoreCollisionSystem(BaseSystem):
    """Awards a point per trigger, once, however long the overlap lasts."""

    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "ScoreCollision")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        store = self.engine.store
        points = 0
        for _, (_, bird_transform, bird_sprite) in store.query(Bird, Transform, Sprite):
            for _, (trigger, fade_out, transform, sprite) in store.query(
                ScoreTrigger, FadeOut, Transform, Sprite
            ):
                if not collide_aabb(
                    bird_transform.translation, bird_sprite.size, transform.translation, sprite.size
                ):
                    continue
                if trigger.mark_scored():
                    for _, (score,) in store.query(Score):
                        score.value += 1
                    fade_out.started = True
                    points += 1
        return SystemResult(entities_affected=points, details={"points": points})


@runs_in_phase(UpdatePhase.FRAME_END)
class HighscoreSystem(BaseSystem):
    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "Highscore")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        store = self.engine.store
        best = max((score.value for _, (score,) in store.query(Score)), default=0)
        raised = 0
        for _, (highscore,) in store.query(Highscore):
            if best > highscore.value:
                highscore.value = best
                raised += 1
        return SystemResult(entities_affected=raised)


@runs_in_phase(UpdatePhase.FRAME_END)
class ScoreboardSystem(BaseSystem):
    def __init__(self, engine: "GameEngine") -> None:
        super().__init__(engine, "Scoreboard")

    def _do_update(self, ctx: "FrameContext") -> SystemResult:
        store = self.engine.store
        for _, (text, score) in store.query(Text, Score):
            text.value = str(score.value)
        for _, (text, highscore) in store.query(Text, Highscore):
            text.value = str(highscore.value)
        return SystemResult.empty()
