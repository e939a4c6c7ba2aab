"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
Entities are kept in process memory, keyed by their ``id`` attribute.
"""

import threading
from typing import Dict, Generic, TypeVar, Optional, Type
from uuid import UUID
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.

    Sync route handlers run in a thread pool, so every access to the store
    goes through the lock.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model
        self._items: Dict[UUID, ModelType] = {}
        self._lock = threading.Lock()

    def get_by_id(self, entity_id: UUID) -> Optional[ModelType]:
        """
        Get entity by ID.

        Args:
            entity_id: Entity UUID

        Returns:
            Entity or None if not found
        """
        with self._lock:
            return self._items.get(entity_id)

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        with self._lock:
            self._items[entity.id] = entity
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Store the new state of an existing entity"""
        with self._lock:
            if entity.id not in self._items:
                raise KeyError(entity.id)
            self._items[entity.id] = entity
        return entity

    def delete(self, entity_id: UUID) -> bool:
        """Delete entity by ID"""
        with self._lock:
            return self._items.pop(entity_id, None) is not None

    def exists(self, entity_id: UUID) -> bool:
        """Check if entity exists"""
        with self._lock:
            return entity_id in self._items

    def count(self) -> int:
        with self._lock:
            return len(self._items)
