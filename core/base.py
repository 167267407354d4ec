# core/base.py
"""Base classes for services and repositories."""

from abc import ABC
from typing import Optional, TypeVar, Generic
import logging
from contextlib import contextmanager

T = TypeVar('T')


class BaseService(ABC):
    """
    Base class for all services.

    Provides common functionality:
    - Logging
    - Error handling patterns
    """

    def __init__(self, service_name: Optional[str] = None):
        self._service_name = service_name or self.__class__.__name__
        self._logger = logging.getLogger(self._service_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def service_name(self) -> str:
        return self._service_name

    @contextmanager
    def _error_context(self, operation: str):
        """Context manager for consistent error logging."""
        try:
            yield
        except Exception as e:
            self._logger.error(f"{operation} failed: {e}")
            raise


class BaseRepository(ABC, Generic[T]):
    """
    Base class for all repositories.

    Provides common data access patterns and operation logging.
    """

    def __init__(self, entity_name: str):
        self._entity_name = entity_name
        self._logger = logging.getLogger(f"{entity_name}Repository")

    @property
    def entity_name(self) -> str:
        return self._entity_name

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _log_operation(self, operation: str, criteria: Optional[str] = None) -> None:
        """Log repository operation."""
        if criteria:
            self._logger.debug(f"{operation} {self._entity_name} [{criteria}]")
        else:
            self._logger.debug(f"{operation} {self._entity_name}")


class Singleton(type):
    """
    Metaclass for implementing Singleton pattern.

    Usage:
        class MyClass(metaclass=Singleton):
            pass
    """
    _instances: dict = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]
