"""Tests for the scripted headless runner."""

import pytest

from flappy.game_state import GameState
from flappy.headless import HeadlessRunner, ScriptedInput
from flappy.simulation.engine import GameEngine


class TestScriptedInput:
    def test_presses_start_on_start_screen(self):
        script = ScriptedInput(flap_interval=3)
        state = script.next_input(GameState.STARTED)
        assert "space" in state.pressed

    def test_holds_restart_after_crash(self):
        script = ScriptedInput(flap_interval=3)
        state = script.next_input(GameState.OVER)
        assert "space" in state.held
        assert not state.pressed

    def test_flaps_every_interval(self):
        script = ScriptedInput(flap_interval=3)
        presses = [bool(script.next_input(GameState.RUNNING).pressed) for _ in range(9)]
        assert presses == [False, False, True] * 3

    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            ScriptedInput(flap_interval=0)


@pytest.mark.integration
class TestHeadlessRunner:
    def test_run_returns_final_stats(self):
        runner = HeadlessRunner(GameEngine(seed=42))
        stats = runner.run(max_frames=600, stats_interval=0)
        assert stats["frame"] == 600
        assert stats["highscore"] >= stats["score"]
        assert stats["rounds_finished"] >= 0
        assert stats["pillar_pairs"] >= 1

    def test_never_flapping_crashes_into_floor(self):
        """Test that an unattended round ends and is restarted by the script."""
        runner = HeadlessRunner(GameEngine(seed=3), flap_interval=10_000)
        runner.run(max_frames=300, stats_interval=100)
        assert runner.rounds_finished >= 1

    def test_same_seed_same_outcome(self):
        first = HeadlessRunner(GameEngine(seed=9)).run(max_frames=900, stats_interval=0)
        second = HeadlessRunner(GameEngine(seed=9)).run(max_frames=900, stats_interval=0)
        assert first == second
