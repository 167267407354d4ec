# core/interfaces.py
"""Abstract interfaces for the catalog application."""

from abc import ABC, abstractmethod
from typing import List, TypeVar, Generic


# Generic type for repository records
T = TypeVar('T')


class IReadOnlyRepository(ABC, Generic[T]):
    """Read-only repository interface over an in-memory record list."""

    @abstractmethod
    def get_all(self) -> List[T]:
        """Get all records in load order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Get total count of records."""
        pass
