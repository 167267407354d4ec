"""Core module - Base classes, interfaces, exceptions, and DI container."""

from .exceptions import (
    BricksetError,
    ConfigurationError,
    DataLoadError,
    DataNotFoundError,
    ValidationError,
    EmptyResultError,
)
from .interfaces import IReadOnlyRepository
from .base import (
    BaseService,
    BaseRepository,
    Singleton,
)
from .container import (
    Container,
    get_container,
    configure_container,
    inject,
)

__all__ = [
    # Exceptions
    'BricksetError',
    'ConfigurationError',
    'DataLoadError',
    'DataNotFoundError',
    'ValidationError',
    'EmptyResultError',
    # Interfaces
    'IReadOnlyRepository',
    # Base classes
    'BaseService',
    'BaseRepository',
    'Singleton',
    # DI Container
    'Container',
    'get_container',
    'configure_container',
    'inject',
]
