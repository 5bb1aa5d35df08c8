"""
Application services package.

Contains the repository clone service and its factory accessors.
"""

from application.services.github.repository_clone_service import RepositoryCloneService
from application.services.service_factory import (
    ServiceFactory,
    get_repository_clone_service,
    get_service_factory,
)

__all__ = [
    "RepositoryCloneService",
    "ServiceFactory",
    "get_repository_clone_service",
    "get_service_factory",
]
