"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic repository interface keyed by string identifiers.

    Concrete repositories decide where entities live; callers only see ids.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve an entity by ID, or None if it does not exist."""
        pass

    @abstractmethod
    def list(self) -> List[str]:
        """List the IDs of all stored entities."""
        pass

    @abstractmethod
    def create(self, id: str, entity: T) -> T:
        """Store a new entity under ``id``."""
        pass

    @abstractmethod
    def update(self, id: str, entity: T) -> T:
        """Replace the entity stored under ``id``."""
        pass

    @abstractmethod
    def delete(self, id: str) -> None:
        """Delete an entity by ID."""
        pass
