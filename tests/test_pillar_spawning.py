"""Tests for pillar pair layout and spawn cadence."""

import pytest

from flappy.components import (
    Bird,
    Collider,
    DestroyAtRestart,
    FadeOut,
    ScoreTrigger,
    Transform,
    Velocity,
)
from flappy.config.game_config import PillarConfig
from flappy.simulation.frame_context import Viewport
from flappy.systems.pillar_spawning import SpawnerState, build_pillar_pair, plan_pillar_pair


class TestBuildPillarPair:
    def test_gap_is_centred_on_fraction(self):
        """Test that the opening between segments has the configured size."""
        viewport = Viewport(800.0, 600.0)
        config = PillarConfig()
        plan = build_pillar_pair(viewport, 0.3, config)

        gap_centre = 600.0 * (0.3 - 0.5)
        top_inner_edge = plan.top.position.y - plan.top.size.y / 2.0
        bottom_inner_edge = plan.bottom.position.y + plan.bottom.size.y / 2.0

        assert top_inner_edge == pytest.approx(gap_centre + config.gap / 2.0)
        assert bottom_inner_edge == pytest.approx(gap_centre - config.gap / 2.0)
        assert top_inner_edge - bottom_inner_edge == pytest.approx(config.gap)

    def test_segments_start_just_off_the_right_edge(self):
        plan = build_pillar_pair(Viewport(800.0, 600.0), 0.5, PillarConfig())
        assert plan.top.position.x == pytest.approx(400.0 + 30.0)
        assert plan.bottom.position.x == plan.top.position.x
        assert plan.top.size.x == 60.0

    def test_segment_heights(self):
        plan = build_pillar_pair(Viewport(800.0, 600.0), 0.25, PillarConfig())
        assert plan.top.size.y == pytest.approx(450.0)
        assert plan.bottom.size.y == pytest.approx(150.0)

    def test_trigger_fills_the_gap(self):
        config = PillarConfig()
        plan = build_pillar_pair(Viewport(800.0, 600.0), 0.7, config)
        assert plan.trigger.position.y == pytest.approx(600.0 * 0.2)
        assert plan.trigger.size.x == config.trigger_width
        assert plan.trigger.size.y == config.gap


class TestPlanPillarPair:
    def test_first_call_spawns_and_rebases_marker(self, seeded_rng):
        state = SpawnerState()
        config = PillarConfig()
        plan = plan_pillar_pair(state, Viewport(1000.0, 600.0), 0.0, seeded_rng, config)

        assert plan is not None
        assert state.last_spawn_x == pytest.approx(530.0 + 500.0)

    def test_marker_scrolls_with_pillars(self, seeded_rng):
        state = SpawnerState(last_spawn_x=1030.0)
        plan = plan_pillar_pair(state, Viewport(1000.0, 600.0), 0.1, seeded_rng, PillarConfig())
        assert plan is None
        assert state.last_spawn_x == pytest.approx(1030.0 - 35.0)

    def test_spawn_cadence(self, seeded_rng):
        """Test that the second pair appears once the marker passes the spawn distance."""
        state = SpawnerState()
        viewport = Viewport(1000.0, 600.0)
        config = PillarConfig()
        spawn_frames = []
        for frame in range(1, 30):
            if plan_pillar_pair(state, viewport, 0.1, seeded_rng, config) is not None:
                spawn_frames.append(frame)

        # 1030 - 35 * 12 = 610 is the first marker below 1000 - 380
        assert spawn_frames[:2] == [1, 13]
        assert spawn_frames[2] - spawn_frames[1] == 12

    def test_gap_fraction_within_range(self, seeded_rng):
        config = PillarConfig()
        viewport = Viewport(1000.0, 600.0)
        for _ in range(50):
            state = SpawnerState()
            plan = plan_pillar_pair(state, viewport, 0.0, seeded_rng, config)
            assert 0.2 <= plan.gap_fraction < 0.8


class TestPillarSpawningSystem:
    def test_start_frame_spawns_one_pair(self, running_engine):
        engine = running_engine
        assert engine.count(ScoreTrigger) == 1
        assert engine.pillar_spawning_system.pairs_spawned == 1

    def test_pair_components(self, running_engine):
        engine = running_engine
        pillars = [
            e
            for e in engine.store.query_ids(Collider, Velocity, DestroyAtRestart)
            if not engine.store.has(e, Bird)
        ]
        assert len(pillars) == 2
        for entity in pillars:
            assert engine.store.get(entity, Velocity).value.x == -350.0

        trigger = engine.store.query_ids(ScoreTrigger)[0]
        assert engine.store.has(trigger, FadeOut, DestroyAtRestart, Velocity)
        assert not engine.store.has(trigger, Collider)

    def test_no_spawning_before_start(self, engine):
        for _ in range(20):
            engine.update(0.1)
        assert engine.count(ScoreTrigger) == 0

    def test_pillars_scroll_left(self, running_engine):
        engine = running_engine
        trigger = engine.store.query_ids(ScoreTrigger)[0]
        x_before = engine.store.get(trigger, Transform).translation.x
        engine.update(0.1)
        assert engine.store.get(trigger, Transform).translation.x == pytest.approx(x_before - 35.0)
