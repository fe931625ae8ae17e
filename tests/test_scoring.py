"""Tests for score triggers, the highscore ratchet and scoreboard text."""

import pytest

from flappy.components import FadeOut, Highscore, Score, ScoreTrigger, Sprite
from flappy.entity_factory import BoxPlan, spawn_score_trigger
from flappy.math_utils import Vector2


def _trigger_on_bird(engine):
    """Place a score trigger straight over the body."""
    plan = BoxPlan(Vector2(-275.0, 0.0), Vector2(5.0, 155.0))
    return spawn_score_trigger(engine.store, plan, engine.config.pillars)


class TestScoreCollision:
    def test_passing_trigger_scores_once(self, running_engine):
        """Test that a long overlap with one trigger awards exactly one point."""
        engine = running_engine
        trigger = _trigger_on_bird(engine)

        for _ in range(5):
            engine.update(0.0)

        assert engine.score == 1
        assert engine.store.get(trigger, ScoreTrigger).scored

    def test_scoring_starts_fade(self, running_engine):
        engine = running_engine
        trigger = _trigger_on_bird(engine)
        assert not engine.store.get(trigger, FadeOut).started

        engine.update(0.0)
        assert engine.store.get(trigger, FadeOut).started
        engine.update(0.1)

        assert engine.store.get(trigger, Sprite).color.a == pytest.approx(0.7)

    def test_fade_clamps_at_zero(self, running_engine):
        engine = running_engine
        trigger = _trigger_on_bird(engine)
        engine.update(0.0)
        for _ in range(6):
            engine.update(0.1)
        assert engine.store.get(trigger, Sprite).color.a == 0.0

    def test_two_triggers_score_two_points(self, running_engine):
        engine = running_engine
        _trigger_on_bird(engine)
        _trigger_on_bird(engine)
        engine.update(0.0)
        assert engine.score == 2

    def test_unscored_trigger_does_not_fade(self, running_engine):
        engine = running_engine
        trigger = engine.store.query_ids(ScoreTrigger)[0]
        engine.update(0.1)
        assert engine.store.get(trigger, Sprite).color.a == 1.0

    def test_mark_scored_latch(self):
        trigger = ScoreTrigger()
        assert trigger.mark_scored() is True
        assert trigger.mark_scored() is False
        assert trigger.scored


class TestHighscoreAndScoreboard:
    def test_highscore_follows_score(self, running_engine):
        engine = running_engine
        _trigger_on_bird(engine)
        engine.update(0.0)
        assert engine.highscore == 1
        assert engine.score_text == "1"
        assert engine.highscore_text == "1"

    def test_highscore_never_decreases(self, engine, make_context):
        ctx = make_context()
        _, highscore = engine.store.single(Highscore)
        _, score = engine.store.single(Score)
        score.value = 7
        engine.highscore_system.update(ctx)
        score.value = 2
        engine.highscore_system.update(ctx)
        assert highscore.value == 7

    def test_texts_score_first(self, engine):
        texts = engine.texts()
        assert len(texts) == 2
        assert texts[0].font_size == 90.0
        assert texts[1].font_size == 40.0
        assert texts[0].top_offset == 47.0
        assert texts[1].top_offset == 100.0
