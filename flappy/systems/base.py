"""Base class and protocol for simulation systems.

This module defines the contract that all simulation systems follow.

Design Principles:
- Each system has ONE responsibility
- Systems are initialized with the engine that owns their data
- Systems declare the phase they run in and, optionally, the game states
  they are active in
- Systems return results describing what they did (for debugging/metrics)

    @runs_in_phase(UpdatePhase.COLLISION)
    @runs_in_state(GameState.RUNNING)
    class PillarCollisionSystem(BaseSystem):
        ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Optional

from flappy.game_state import GameState

# Explicit public API
__all__ = [
    "SystemResult",
    "BaseSystem",
]

if TYPE_CHECKING:
    from flappy.simulation.engine import GameEngine
    from flappy.simulation.frame_context import FrameContext
    from flappy.update_phases import UpdatePhase


@dataclass
class SystemResult:
    """What one system update did.

    Attributes:
        entities_affected: Entities whose components were changed
        entities_spawned: Entities created this update
        entities_removed: Entities destroyed this update
        skipped: True when the system was disabled and did nothing
        details: Per-system counters, e.g. ``{"points": 1}``
    """

    entities_affected: int = 0
    entities_spawned: int = 0
    entities_removed: int = 0
    skipped: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def skipped_result() -> "SystemResult":
        return SystemResult(skipped=True)

    @staticmethod
    def empty() -> "SystemResult":
        return SystemResult()

    def __add__(self, other: "SystemResult") -> "SystemResult":
        """Sum two results; a skipped side contributes nothing.

        Numeric detail counters are summed, anything else keeps the newest value.
        """
        if other.skipped:
            return self
        if self.skipped:
            return other

        details = dict(self.details)
        for key, value in other.details.items():
            previous = details.get(key)
            summable = isinstance(value, (int, float)) and isinstance(previous, (int, float))
            details[key] = previous + value if summable else value

        return SystemResult(
            entities_affected=self.entities_affected + other.entities_affected,
            entities_spawned=self.entities_spawned + other.entities_spawned,
            entities_removed=self.entities_removed + other.entities_removed,
            details=details,
        )


class BaseSystem(ABC):
    """Abstract base class for all simulation systems.

    Subclasses implement ``_do_update``. Phase and state declarations are
    set by the ``runs_in_phase`` / ``runs_in_state`` decorators.
    """

    # Class-level declarations (set by decorators)
    _phase: Optional["UpdatePhase"] = None
    _states: Optional[FrozenSet[GameState]] = None

    def __init__(self, engine: "GameEngine", name: str) -> None:
        """Initialize the system.

        Args:
            engine: The game engine (provides the entity store, config, rng)
            name: Human-readable name for this system
        """
        self._engine = engine
        self._name = name
        self._enabled = True
        self._update_count = 0
        self._totals = SystemResult.empty()

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @property
    def engine(self) -> "GameEngine":
        return self._engine

    @property
    def update_count(self) -> int:
        """Number of times the system actually ran."""
        return self._update_count

    @property
    def phase(self) -> Optional["UpdatePhase"]:
        return self._phase

    def runs_in(self, state: GameState) -> bool:
        """Whether the system should run while ``state`` is current."""
        return self._enabled and (self._states is None or state in self._states)

    def update(self, ctx: "FrameContext") -> SystemResult:
        """Perform the system's per-frame logic.

        Handles enabled checking, update counting and result totals.
        Subclasses implement _do_update() for actual logic.
        """
        if not self._enabled:
            return SystemResult.skipped_result()

        result = self._do_update(ctx)
        self._update_count += 1
        if result is None:
            result = SystemResult.empty()
        self._totals = self._totals + result
        return result

    @abstractmethod
    def _do_update(self, ctx: "FrameContext") -> Optional[SystemResult]:
        """Implement system-specific update logic."""

    def get_debug_info(self) -> Dict[str, Any]:
        """Return debug information about this system's state."""
        return {
            "name": self._name,
            "enabled": self._enabled,
            "update_count": self._update_count,
            "phase": self._phase.name if self._phase else None,
            "states": sorted(s.name for s in self._states) if self._states else None,
            "entities_spawned": self._totals.entities_spawned,
            "entities_removed": self._totals.entities_removed,
        }

    def __repr__(self) -> str:
        phase_str = f", phase={self._phase.name}" if self._phase else ""
        return f"{self.__class__.__name__}(name={self._name!r}, enabled={self._enabled}{phase_str})"
