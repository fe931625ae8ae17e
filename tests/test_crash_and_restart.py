"""Tests for crashing, the explosion burst and restarting a round."""

from flappy.components import (
    Border,
    Explodes,
    Lifetime,
    Particle,
    ScoreTrigger,
    Sprite,
    Text,
    Transform,
    Velocity,
)
from flappy.config.game_config import ExplosionConfig
from flappy.entity_factory import BoxPlan, spawn_pillar, spawn_score_trigger
from flappy.game_state import GameState
from flappy.input import InputState
from flappy.math_utils import Vector2
from flappy.systems.explosion import draw_particles


def _crash(engine):
    """Put a pillar on the body and step one frame."""
    plan = BoxPlan(Vector2(-275.0, 0.0), Vector2(60.0, 60.0))
    spawn_pillar(engine.store, plan, engine.config.pillars.speed)
    engine.update(0.0)


class TestCrash:
    def test_pillar_overlap_ends_round(self, running_engine):
        engine = running_engine
        _crash(engine)
        assert engine.state is GameState.OVER

    def test_explosion_replaces_body(self, running_engine):
        """Test that the body is gone and exactly one burst was spawned."""
        engine = running_engine
        _crash(engine)
        assert engine.bird is None
        assert engine.count(Particle) == 32

    def test_burst_only_once(self, running_engine):
        engine = running_engine
        _crash(engine)
        for _ in range(3):
            engine.update(0.0)
        assert engine.count(Particle) == 32
        assert engine.explosion_system.get_debug_info()["entities_removed"] == 1

    def test_floor_is_an_obstacle(self, running_engine):
        engine = running_engine
        # borders are sized on the first frame
        engine.store.get(engine.bird, Transform).translation.y = -370.0
        engine.update(0.0)
        assert engine.state is GameState.OVER

    def test_graze_inside_collision_scale_is_forgiven(self, running_engine):
        """Test that the shrunk body box ignores a sub-pixel corner touch."""
        engine = running_engine
        # full box reaches -275 + 13.5; the scaled box stops at -275 + 12.825
        plan = BoxPlan(Vector2(-275.0 + 13.2 + 5.0, 0.0), Vector2(10.0, 10.0))
        spawn_pillar(engine.store, plan, engine.config.pillars.speed)
        engine.update(0.0)
        assert engine.state is GameState.RUNNING

    def test_triggers_do_not_crash(self, running_engine):
        engine = running_engine
        plan = BoxPlan(Vector2(-275.0, 0.0), Vector2(5.0, 155.0))
        spawn_score_trigger(engine.store, plan, engine.config.pillars)
        engine.update(0.0)
        assert engine.state is GameState.RUNNING

    def test_no_scoring_after_crash(self, running_engine):
        engine = running_engine
        _crash(engine)
        plan = BoxPlan(Vector2(-275.0, 0.0), Vector2(5.0, 155.0))
        spawn_score_trigger(engine.store, plan, engine.config.pillars)
        engine.update(0.0)
        assert engine.score == 0


class TestExplosionDraws:
    def test_draws_respect_ranges(self, seeded_rng):
        config = ExplosionConfig()
        explodes = Explodes(
            particle_color=Sprite().color,
            particle_count=config.particle_count,
            particle_speed_range=config.speed_range,
            particle_lifetime_range=config.lifetime_range,
            particle_size_fraction_range=config.size_fraction_range,
        )
        draws = draw_particles(explodes, Vector2(27.0, 27.0), seeded_rng)

        assert len(draws) == 32
        for draw in draws:
            assert 300.0 <= draw.velocity.length() <= 850.0 + 1e-6
            assert 0.1 <= draw.lifetime <= 1.0
            assert 27.0 * 0.05 <= draw.size.x <= 27.0 * 0.5
            assert draw.size.x == draw.size.y

    def test_particles_start_at_body_centre(self, running_engine):
        engine = running_engine
        _crash(engine)
        for entity, (transform, _) in engine.store.query(Transform, Particle):
            assert transform.translation == Vector2(-275.0, 0.0)
            assert engine.store.has(entity, Velocity, Lifetime, Sprite)

    def test_particles_keep_moving_after_crash(self, running_engine):
        engine = running_engine
        _crash(engine)
        engine.update(0.05)
        moved = [
            t.translation != Vector2(-275.0, 0.0)
            for _, (t, _) in engine.store.query(Transform, Particle)
        ]
        assert moved and all(moved)


class TestRestart:
    def test_restart_resets_round(self, running_engine):
        engine = running_engine
        plan = BoxPlan(Vector2(-275.0, 0.0), Vector2(5.0, 155.0))
        spawn_score_trigger(engine.store, plan, engine.config.pillars)
        engine.update(0.0)
        assert engine.score == 1
        _crash(engine)

        engine.update(0.0, InputState.hold("space"))

        assert engine.state is GameState.STARTED
        assert engine.score == 0
        assert engine.highscore == 1
        assert engine.count(Particle) == 0
        assert engine.count(ScoreTrigger) == 0
        assert engine.bird is not None
        assert engine.store.get(engine.bird, Transform).translation == Vector2(-275.0, 0.0)

    def test_restart_keeps_persistent_entities(self, running_engine):
        engine = running_engine
        _crash(engine)
        engine.update(0.0, InputState.hold("space"))
        assert engine.count(Border) == 2
        assert engine.count(Text) == 2
        # borders, scoreboard and a fresh body
        assert len(engine.store) == 5

    def test_no_restart_without_input(self, running_engine):
        engine = running_engine
        _crash(engine)
        for _ in range(5):
            engine.update(0.0)
        assert engine.state is GameState.OVER

    def test_held_key_starts_next_round(self, running_engine):
        """Test that keeping the key down restarts, then starts again."""
        engine = running_engine
        _crash(engine)
        engine.update(0.0, InputState.hold("space"))
        engine.update(0.0, InputState.hold("space"))
        assert engine.state is GameState.RUNNING

    def test_new_body_is_at_rest(self, running_engine):
        engine = running_engine
        _crash(engine)
        engine.update(0.0, InputState.hold("space"))
        assert engine.store.get(engine.bird, Velocity).value == Vector2(0.0, 0.0)
