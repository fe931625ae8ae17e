"""Type-safe entity handles.

Entities are plain identifiers; every piece of data lives in components
owned by the entity store. Wrapping the raw integer keeps handles from being
confused with scores, counts and other ints flowing through the systems.

Usage:
------
    bird = EntityId(3)
    print(bird)       # "Entity#3"
    int(bird)         # 3
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EntityId:
    """Handle for an entity in the store.

    - Immutable (frozen)
    - Hashable (usable in sets/dicts)
    - Ordered by creation
    """

    value: int

    def __post_init__(self) -> None:
        """Validate the ID value."""
        if not isinstance(self.value, int):
            raise TypeError(f"ID value must be int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"ID value must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return f"Entity#{self.value}"

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, EntityId):
            return self.value < other.value
        return NotImplemented

    def __int__(self) -> int:
        return self.value


__all__ = ["EntityId"]
