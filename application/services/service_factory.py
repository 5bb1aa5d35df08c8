"""
Service Factory for centralized service initialization.

Implements the Factory pattern for creating and managing service instances.
Provides singleton access to services across the application.
"""

import logging
from typing import Optional

from application.services.github.repository_clone_service import RepositoryCloneService

logger = logging.getLogger(__name__)


class ServiceFactory:
    """
    Factory for creating and managing service instances.

    Implements singleton pattern for services to ensure single instance
    across the application.
    """

    _instance: Optional["ServiceFactory"] = None

    # Service instances (lazy-loaded)
    _repository_clone_service: Optional[RepositoryCloneService] = None

    def __new__(cls):
        """Ensure only one instance exists (Singleton pattern)."""
        if cls._instance is None:
            cls._instance = super(ServiceFactory, cls).__new__(cls)
            logger.debug("ServiceFactory instance created")
        return cls._instance

    @property
    def repository_clone_service(self) -> RepositoryCloneService:
        """
        Get RepositoryCloneService instance.

        The default clone path is resolved on first access.

        Returns:
            RepositoryCloneService: Repository clone service singleton

        Example:
            >>> factory = ServiceFactory()
            >>> clone_service = factory.repository_clone_service
            >>> print(clone_service.default_clone_path)
        """
        if self._repository_clone_service is None:
            self._repository_clone_service = RepositoryCloneService()
            logger.debug("RepositoryCloneService initialized")
        return self._repository_clone_service

    def clear_cache(self):
        """
        Clear all cached service instances.

        Useful for testing or when services need to be re-initialized.
        """
        self._repository_clone_service = None
        logger.debug("ServiceFactory cache cleared")


# Global factory instance
_factory_instance: Optional[ServiceFactory] = None


def get_service_factory() -> ServiceFactory:
    """
    Get global ServiceFactory instance.

    Returns:
        ServiceFactory: Singleton factory instance
    """
    global _factory_instance
    if _factory_instance is None:
        _factory_instance = ServiceFactory()
    return _factory_instance


def get_repository_clone_service() -> RepositoryCloneService:
    """Get the process-wide RepositoryCloneService."""
    return get_service_factory().repository_clone_service
