"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for create-only, read-many storage."""

    def insert(self, obj_in: Any) -> T:
        """Persist a new entity and return it with server-assigned fields."""
        ...
