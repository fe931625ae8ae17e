"""Update phase definitions for explicit execution ordering.

This module defines the phases of a simulation tick and the runner that
executes systems phase by phase.

Why Explicit Phases?
--------------------
Each system writes a small set of components, and later systems read what
earlier ones wrote. Positions must be integrated before new pillars are
placed, pillars must exist before collisions are checked, and collisions
must be resolved before the explosion replaces the body. Phases make that
order explicit instead of depending on registration order.

Phase Barriers:
---------------
After every phase the engine applies any pending game-state transition.
Systems therefore always run against a state that was fixed for their whole
phase, and a transition requested in one phase takes effect for the next.

Usage:
------
    @runs_in_phase(UpdatePhase.COLLISION)
    @runs_in_state(GameState.RUNNING)
    class PillarCollisionSystem(BaseSystem):
        ...

    runner = PhaseRunner()
    runner.register(pillar_collision_system)
    runner.run_all(context, on_barrier=engine.apply_state_transition)
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from flappy.game_state import GameState

# Explicit public API
__all__ = [
    "UpdatePhase",
    "PhaseRunner",
    "PHASE_DESCRIPTIONS",
    "runs_in_phase",
    "runs_in_state",
    "get_system_phase",
]

if TYPE_CHECKING:
    from flappy.simulation.frame_context import FrameContext
    from flappy.systems.base import BaseSystem


class UpdatePhase(Enum):
    """Phases of a simulation tick, executed in declaration order.

    Within a phase, systems execute in registration order.
    """

    FRAME_START = auto()  # Border tracking
    INPUT = auto()  # Start / restart requests
    ENTITY_ACT = auto()  # Flap impulse, gravity
    PHYSICS = auto()  # Velocity integration
    SPAWN = auto()  # Pillar pairs and score triggers
    COLLISION = auto()  # Crashes and score triggers
    EFFECTS = auto()  # Explosion burst, trigger fade
    LIFECYCLE = auto()  # Particle ageing
    CLEANUP = auto()  # Off-screen removal
    FRAME_END = auto()  # Highscore and scoreboard text


# Human-readable descriptions for debugging
PHASE_DESCRIPTIONS: Dict[UpdatePhase, str] = {
    UpdatePhase.FRAME_START: "Fitting borders to the viewport",
    UpdatePhase.INPUT: "Mapping input to state transitions",
    UpdatePhase.ENTITY_ACT: "Applying flaps and gravity",
    UpdatePhase.PHYSICS: "Integrating velocities",
    UpdatePhase.SPAWN: "Spawning pillars",
    UpdatePhase.COLLISION: "Detecting crashes and scoring",
    UpdatePhase.EFFECTS: "Running explosions and fades",
    UpdatePhase.LIFECYCLE: "Ageing particles",
    UpdatePhase.CLEANUP: "Removing off-screen entities",
    UpdatePhase.FRAME_END: "Updating scoreboard",
}


BarrierCallback = Callable[[UpdatePhase], Any]


@dataclass
class PhaseRunner:
    """Executes systems in their designated phases.

    A system runs only if it is enabled and its declared states include the
    current game state.
    """

    _systems_by_phase: Dict[UpdatePhase, List["BaseSystem"]] = field(
        default_factory=lambda: {phase: [] for phase in UpdatePhase}
    )
    _debug_mode: bool = False
    _current_phase: Optional[UpdatePhase] = None
    _phase_timings: Dict[UpdatePhase, float] = field(default_factory=dict)

    def register(self, system: "BaseSystem", phase: Optional[UpdatePhase] = None) -> None:
        """Register a system in ``phase`` or, by default, its declared phase.

        Raises:
            ValueError: If the system declares no phase and none is given
        """
        target = phase or get_system_phase(system)
        if target is None:
            raise ValueError(f"{system!r} does not declare an update phase")
        self._systems_by_phase[target].append(system)

    def run_all(
        self, context: "FrameContext", on_barrier: Optional[BarrierCallback] = None
    ) -> None:
        """Run all phases in order, calling ``on_barrier`` after each one."""
        for phase in UpdatePhase:
            self.run_phase(phase, context)
            if on_barrier is not None:
                on_barrier(phase)

    def run_phase(self, phase: UpdatePhase, context: "FrameContext") -> None:
        """Run every active system registered for ``phase``."""
        self._current_phase = phase
        context.phase = phase

        if self._debug_mode:
            start_time = time.perf_counter()

        for system in self._systems_by_phase[phase]:
            if system.runs_in(context.state):
                system.update(context)

        if self._debug_mode:
            self._phase_timings[phase] = time.perf_counter() - start_time

        self._current_phase = None

    @property
    def current_phase(self) -> Optional[UpdatePhase]:
        """Get the currently executing phase, or None if not in update."""
        return self._current_phase

    def get_all(self) -> List["BaseSystem"]:
        """All registered systems in execution order."""
        return [system for phase in UpdatePhase for system in self._systems_by_phase[phase]]

    def enable_debug(self, enabled: bool = True) -> None:
        """Enable debug mode (tracks timing per phase)."""
        self._debug_mode = enabled

    def get_phase_timings(self) -> Dict[UpdatePhase, float]:
        return self._phase_timings.copy()

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "current_phase": self._current_phase.name if self._current_phase else None,
            "systems_per_phase": {
                phase.name: [s.name for s in systems]
                for phase, systems in self._systems_by_phase.items()
                if systems
            },
            "timings": (
                {
                    phase.name: f"{timing*1000:.2f}ms"
                    for phase, timing in self._phase_timings.items()
                }
                if self._debug_mode
                else {}
            ),
        }


def runs_in_phase(phase: UpdatePhase) -> Callable:
    """Decorator to declare which phase a system runs in.

    Example:
        @runs_in_phase(UpdatePhase.PHYSICS)
        class VelocitySystem(BaseSystem):
            ...
    """

    def decorator(cls):
        cls._phase = phase
        return cls

    return decorator


def runs_in_state(*states: GameState) -> Callable:
    """Decorator restricting a system to the given game states.

    Systems without this decorator run in every state.
    """

    def decorator(cls):
        cls._states = frozenset(states)
        return cls

    return decorator


def get_system_phase(system: "BaseSystem") -> Optional[UpdatePhase]:
    """Get the phase a system is declared to run in."""
    return getattr(system, "_phase", None)
