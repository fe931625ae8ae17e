"""Flappy exception hierarchy.

Centralised base classes so callers can catch simulation failures narrowly
instead of falling back to bare ``except Exception`` blocks.
"""


class FlappyError(Exception):
    """Root of all flappy domain exceptions."""


class SimulationError(FlappyError):
    """Errors during simulation execution (engine, systems, entities)."""


class ViewportUnavailableError(SimulationError):
    """The viewport collaborator is missing or reports unusable geometry.

    Spawning and bounds logic cannot run without a viewport, so this is
    fatal: the engine raises it instead of stepping with undefined geometry.
    """


class ConfigurationError(FlappyError):
    """Invalid or missing configuration."""
