"""Pytest configuration and fixtures for flappy tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def viewport():
    from flappy.simulation.frame_context import Viewport

    return Viewport(800.0, 600.0)


@pytest.fixture
def engine():
    """Setup a game engine for testing with deterministic seed."""
    from flappy.simulation.engine import GameEngine

    engine = GameEngine(seed=42)
    engine.setup()

    return engine


@pytest.fixture
def make_context(engine):
    """Build a FrameContext for driving a single system by hand."""
    from flappy.input import InputMapper, InputState
    from flappy.simulation.frame_context import FrameContext, Viewport

    def _make(dt=1.0 / 60.0, viewport=None, input_state=None):
        mapper = InputMapper()
        mapper.bind(input_state or InputState.idle())
        return FrameContext(
            frame=1,
            dt=dt,
            viewport=viewport or Viewport(800.0, 600.0),
            input=mapper,
            state_machine=engine.state_machine,
        )

    return _make


@pytest.fixture
def running_engine(engine):
    """An engine whose round has just started (one frame with dt=0)."""
    from flappy.input import InputState

    engine.update(0.0, InputState.press("space"))
    return engine
