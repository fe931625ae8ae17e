"""Simulation package - core orchestration components.

- engine.py: the GameEngine orchestrator
- entity_store.py: entities and their components
- frame_context.py: per-frame state handed to systems

Usage:
    from flappy.simulation.engine import GameEngine

    engine = GameEngine(seed=42)
    engine.setup()
    engine.update(1 / 60, InputState.press("space"))
"""
