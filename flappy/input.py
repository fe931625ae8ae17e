"""Input mapping from raw key events to game actions.

The frontend polls its input backend once per frame and hands the engine an
``InputState`` snapshot: which keys are held, and which went down this
frame. Key names are backend-neutral strings (``"space"``, ``"return"``),
matching what ``pygame.key.name`` reports.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional


class Action(Enum):
    """Logical game actions."""

    FLAP = "flap"
    START = "start"
    RESTART = "restart"


DEFAULT_KEY = "space"


@dataclass(frozen=True)
class InputState:
    """Keyboard snapshot for a single frame.

    Attributes:
        held: Keys currently down
        pressed: Keys that went down this frame (subset of ``held``)
    """

    held: FrozenSet[str] = frozenset()
    pressed: FrozenSet[str] = frozenset()

    @classmethod
    def idle(cls) -> "InputState":
        return cls()

    @classmethod
    def press(cls, *keys: str) -> "InputState":
        """Keys that went down this frame (and are therefore held)."""
        return cls(held=frozenset(keys), pressed=frozenset(keys))

    @classmethod
    def hold(cls, *keys: str) -> "InputState":
        """Keys still held from an earlier frame."""
        return cls(held=frozenset(keys), pressed=frozenset())

    def is_held(self, key: str) -> bool:
        return key in self.held

    def just_pressed(self, key: str) -> bool:
        return key in self.pressed


@dataclass
class KeyBindings:
    """Maps each action to a physical key. All default to the space bar."""

    bindings: Dict[Action, str] = field(
        default_factory=lambda: {action: DEFAULT_KEY for action in Action}
    )

    def key_for(self, action: Action) -> str:
        return self.bindings[action]

    def keys(self) -> Iterable[str]:
        return set(self.bindings.values())


class InputMapper:
    """Answers action queries against the current frame's input.

    The engine rebinds the mapper to each frame's ``InputState`` before any
    system runs.
    """

    def __init__(self, bindings: Optional[KeyBindings] = None) -> None:
        self.bindings = bindings or KeyBindings()
        self._state = InputState.idle()

    def bind(self, state: InputState) -> None:
        self._state = state

    def held(self, action: Action) -> bool:
        return self._state.is_held(self.bindings.key_for(action))

    def just_pressed(self, action: Action) -> bool:
        return self._state.just_pressed(self.bindings.key_for(action))


__all__ = ["Action", "InputMapper", "InputState", "KeyBindings"]
