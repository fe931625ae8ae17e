"""Entity storage for the simulation.

Entities are ``EntityId`` handles; their data lives in per-type component
tables keyed by handle. The store owns every component.

Design Decisions:
-----------------
1. Queries return list snapshots rather than live iterators, so systems may
   spawn or destroy entities while walking a query result.

2. Destroying an entity that is already gone is a no-op that returns False.
   Systems never need to check liveness before despawning.

3. Handles are never reused within a store, so a stale handle can never
   alias a newer entity.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple, Type, TypeVar

from flappy.entity_ids import EntityId

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityStore:
    """Creates, queries and destroys entities and their components.

    Example:
        store = EntityStore()
        bird = store.spawn(Transform(), Velocity(), Bird(flap_height=75.0))
        for entity, (transform, velocity) in store.query(Transform, Velocity):
            ...
        store.despawn(bird)
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._next_id: int = 0
        self._alive: Set[EntityId] = set()
        self._components: Dict[type, Dict[EntityId, Any]] = {}

    def __len__(self) -> int:
        return len(self._alive)

    def __contains__(self, entity: EntityId) -> bool:
        return entity in self._alive

    # ------------------------------------------------------------------
    # Entity lifecycle
    # ------------------------------------------------------------------

    def spawn(self, *components: Any) -> EntityId:
        """Create an entity with the given components.

        Args:
            *components: Component instances; at most one per type

        Returns:
            Handle of the new entity
        """
        entity = EntityId(self._next_id)
        self._next_id += 1
        self._alive.add(entity)
        for component in components:
            self.insert(entity, component)
        return entity

    def despawn(self, entity: EntityId) -> bool:
        """Destroy an entity and drop all of its components.

        Returns:
            True if the entity existed, False if it was already gone
        """
        if entity not in self._alive:
            return False
        self._alive.discard(entity)
        for table in self._components.values():
            table.pop(entity, None)
        return True

    def despawn_all(self, entities: Iterable[EntityId]) -> int:
        """Destroy several entities, returning how many actually existed."""
        return sum(1 for entity in list(entities) if self.despawn(entity))

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def insert(self, entity: EntityId, component: Any) -> None:
        """Attach ``component`` to ``entity``, replacing one of the same type."""
        if entity not in self._alive:
            logger.debug("Ignoring %s insert on destroyed %s", type(component).__name__, entity)
            return
        self._components.setdefault(type(component), {})[entity] = component

    def remove(self, entity: EntityId, component_type: Type[Any]) -> bool:
        """Detach a component. Returns True if it was present."""
        table = self._components.get(component_type)
        if table is None:
            return False
        return table.pop(entity, None) is not None

    def get(self, entity: EntityId, component_type: Type[T]) -> Optional[T]:
        """Return the entity's component of ``component_type``, if any."""
        return self._components.get(component_type, {}).get(entity)

    def has(self, entity: EntityId, *component_types: type) -> bool:
        return all(entity in self._components.get(t, {}) for t in component_types)

    def query(self, *component_types: type) -> List[Tuple[EntityId, Tuple[Any, ...]]]:
        """Snapshot of entities carrying every requested component type.

        ``query(Transform, Velocity)`` yields ``(entity, (transform, velocity))``
        pairs in creation order. An empty query returns an empty list.
        """
        if not component_types:
            return []
        tables = [self._components.get(t) for t in component_types]
        if not all(tables):
            return []
        smallest = min(tables, key=len)
        matches = [e for e in smallest if all(e in table for table in tables)]
        matches.sort()
        return [(e, tuple(table[e] for table in tables)) for e in matches]

    def query_ids(self, *component_types: type) -> List[EntityId]:
        """Handles of entities carrying every requested component type."""
        return [entity for entity, _ in self.query(*component_types)]

    def single(self, component_type: Type[T]) -> Optional[Tuple[EntityId, T]]:
        """Return the first entity with ``component_type``, or None."""
        matches = self.query(component_type)
        if not matches:
            return None
        entity, (component,) = matches[0]
        return entity, component


__all__ = ["EntityStore"]
