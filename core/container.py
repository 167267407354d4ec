# core/container.py
"""
Dependency Injection Container.

Provides centralized wiring of repositories and services for the entry points.
"""

from typing import TypeVar, Type, Dict, Any, Optional, Callable, Tuple
import logging

from core.base import Singleton

logger = logging.getLogger(__name__)
T = TypeVar('T')


class Container(metaclass=Singleton):
    """
    Dependency Injection Container.

    Manages service registration and resolution with support for:
    - Singleton instances
    - Factory functions
    - Lazy initialization
    """

    def __init__(self):
        self._factories: Dict[str, Tuple[Callable[[], Any], bool]] = {}
        self._singletons: Dict[str, Any] = {}

    def register(
        self,
        service_type: Type[T],
        instance: Optional[T] = None,
        factory: Optional[Callable[[], T]] = None,
        singleton: bool = True
    ) -> 'Container':
        """
        Register a service.

        Args:
            service_type: The type/class to register
            instance: Pre-created instance (optional)
            factory: Factory function to create instance (optional)
            singleton: Whether to cache instance (default True)

        Returns:
            Self for chaining
        """
        key = service_type.__name__

        if instance is not None:
            self._singletons[key] = instance
            logger.debug(f"Registered singleton instance: {key}")
        elif factory is not None:
            self._singletons.pop(key, None)
            self._factories[key] = (factory, singleton)
            logger.debug(f"Registered factory: {key} (singleton={singleton})")
        else:
            raise ValueError(f"Must provide either instance or factory for {key}")

        return self

    def resolve(self, service_type: Type[T]) -> T:
        """
        Resolve a service.

        Args:
            service_type: The type/class to resolve

        Returns:
            The service instance
        """
        key = service_type.__name__

        if key in self._singletons:
            return self._singletons[key]

        if key in self._factories:
            factory, is_singleton = self._factories[key]
            instance = factory()

            if is_singleton:
                self._singletons[key] = instance

            return instance

        raise KeyError(f"Service not registered: {key}")

    def get(self, service_type: Type[T]) -> Optional[T]:
        """Get a service if registered, None otherwise."""
        try:
            return self.resolve(service_type)
        except KeyError:
            return None

    def is_registered(self, service_type: Type[T]) -> bool:
        """Check if a service is registered."""
        key = service_type.__name__
        return key in self._singletons or key in self._factories

    def clear(self) -> None:
        """Clear all registrations."""
        self._factories.clear()
        self._singletons.clear()
        logger.debug("Container cleared")


# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global container instance."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def configure_container(settings=None) -> Container:
    """
    Configure the container with the catalog repository and report service.

    Args:
        settings: Optional settings override

    Returns:
        Configured container
    """
    from config.settings import get_settings
    from repositories.lego_set_repository import LegoSetRepository
    from services.catalog_report_service import CatalogReportService

    container = get_container()

    if settings is None:
        settings = get_settings()

    container.register(
        LegoSetRepository,
        factory=lambda: LegoSetRepository(
            resource_name=settings.brickset_file,
            data_dir=settings.data_dir
        )
    )
    container.register(
        CatalogReportService,
        factory=lambda: CatalogReportService(
            repository=container.resolve(LegoSetRepository)
        )
    )

    logger.info("Container configured with catalog services")
    return container


def inject(service_type: Type[T]) -> T:
    """
    Resolve a service from the global container.

    Usage:
        repository = inject(LegoSetRepository)
    """
    return get_container().resolve(service_type)
