"""Dependency injection container wiring directories into the search engine."""

from typing import Any, Dict, Optional

import structlog

from ..application.search_engine import SearchEngine
from ..config.settings import Settings, get_settings
from .repositories.in_memory_directory import InMemorySpotDirectory, InMemoryVehicleDirectory

logger = structlog.get_logger()


class DIContainer:
    """Dependency injection container implementing the service locator pattern."""

    def __init__(self, settings: Optional[Settings] = None):
        self._services: Dict[str, Any] = {}
        self._singletons: Dict[str, Any] = {}
        self.settings = settings or get_settings()
        self._initialize_services()

    def _initialize_services(self):
        """Initialize all services and their dependencies."""

        logger.info("Initializing dependency injection container")

        # Directories (singletons)
        self._register_singleton('vehicle_directory', lambda: InMemoryVehicleDirectory())
        self._register_singleton('spot_directory', lambda: InMemorySpotDirectory())

        # The engine owns the plate cache, so it must be a singleton too
        self._register_singleton('search_engine', self._create_search_engine)

        logger.info("Dependency injection container initialized successfully")

    def _register_singleton(self, service_name: str, factory_func):
        """Register a singleton service."""
        self._services[service_name] = ('singleton', factory_func)

    def register_instance(self, service_name: str, instance: Any):
        """Replace a service with a ready-made instance."""
        self._services[service_name] = ('singleton', lambda: instance)
        self._singletons[service_name] = instance

    def get(self, service_name: str) -> Any:
        """Get a service instance."""

        if service_name not in self._services:
            raise ValueError(f"Service '{service_name}' not registered")

        service_type, factory_func = self._services[service_name]

        if service_type == 'singleton':
            if service_name not in self._singletons:
                logger.debug("Creating singleton service", service_name=service_name)
                self._singletons[service_name] = factory_func()
            return self._singletons[service_name]

        raise ValueError(f"Unknown service type: {service_type}")

    def _create_search_engine(self) -> SearchEngine:
        """Factory method for the search engine."""
        return SearchEngine(
            vehicle_directory=self.get('vehicle_directory'),
            spot_directory=self.get('spot_directory'),
            settings=self.settings
        )

    def get_service_info(self) -> Dict[str, Any]:
        """Get information about registered services."""
        return {
            'registered_services': sorted(self._services),
            'singleton_instances': sorted(self._singletons),
            'total_registered': len(self._services)
        }

    def reset(self):
        """Reset the container (clear singletons)."""

        logger.warning("Resetting DI container - clearing all singleton instances")
        self._singletons.clear()
        self._initialize_services()


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get the global DI container instance."""
    global _container

    if _container is None:
        _container = DIContainer()

    return _container


def reset_container():
    """Reset the global DI container."""
    global _container

    if _container is not None:
        _container.reset()
    else:
        _container = DIContainer()
