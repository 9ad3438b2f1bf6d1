"""Entity registry and per-type component storage."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

MAX_ENTITIES = 1024
MAX_COLLISIONS = 32


class ComponentType(Enum):
    """Kinds of component an entity can carry."""

    TAG = 0
    POSITION = 1
    VELOCITY = 2
    SPRITE = 3
    COLLIDER = 4
    HEALTH = 5
    HARM = 6
    CHASE_BEHAVIOUR = 7


class ECS:
    """Hands out entity ids and stores one component of each type per entity.

    Entity id 0 is never issued, so it can stand for "no entity".
    """

    def __init__(self) -> None:
        self.next_entity = 1
        self._active: set[int] = set()
        self._stores: dict[ComponentType, dict[int, Any]] = {
            kind: {} for kind in ComponentType
        }

    def new_entity(self) -> int:
        """Create a new active entity and return its id."""
        if self.next_entity >= MAX_ENTITIES:
            raise OverflowError(f"entity limit of {MAX_ENTITIES} reached")
        entity = self.next_entity
        self.next_entity += 1
        self._active.add(entity)
        logger.info("new entity: %u", entity)
        return entity

    def _require_active(self, entity: int) -> None:
        if entity not in self._active:
            raise KeyError(f"entity {entity} is not active")

    def attach(self, entity: int, component: Any, component_type: ComponentType) -> None:
        """Attach a component to an active entity, replacing any of the same type."""
        self._require_active(entity)
        self._stores[ComponentType(component_type)][entity] = component

    def get(self, entity: int, component_type: ComponentType) -> Any | None:
        """Return the entity's component of the given type, or None if it has none."""
        self._require_active(entity)
        return self._stores[ComponentType(component_type)].get(entity)

    def components(self, component_type: ComponentType) -> dict[int, Any]:
        """Return the live mapping of entity id to component for one type."""
        return self._stores[ComponentType(component_type)]

    def active_entities(self) -> list[int]:
        """Return the ids of all active entities in ascending order."""
        return sorted(self._active)

    def is_active(self, entity: int) -> bool:
        """Tell whether the entity is currently active."""
        return entity in self._active

    def remove_entity(self, entity: int) -> None:
        """Deactivate an entity. Its components are left in place."""
        self._active.discard(entity)