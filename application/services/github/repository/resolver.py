"""
Default clone path resolution using the Strategy pattern.

The default strategy prefers the git provider's configured clone path and
falls back to a host-supplied directory when the provider has no preference.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from application.services.github.git.environment import EnvironmentProvider
from application.services.github.git.preferences import GitProviderPreferences

logger = logging.getLogger(__name__)


class ClonePathResolver(ABC):
    """Abstract base class for default clone path strategies."""

    @abstractmethod
    def resolve_default_path(self, fallback: str) -> str:
        """
        Resolve the directory new repositories are cloned into by default.

        Args:
            fallback: Path to use when no preference exists

        Returns:
            Default clone path
        """
        pass


class GitProviderClonePathResolver(ClonePathResolver):
    """
    Resolver backed by the git provider preference.

    A non-empty preference has its environment variable references expanded.
    The fallback is returned unchanged.
    """

    def __init__(
        self,
        preferences: Optional[GitProviderPreferences] = None,
        environment: Optional[EnvironmentProvider] = None,
    ):
        self.preferences = preferences or GitProviderPreferences()
        self.environment = environment or EnvironmentProvider()

    def resolve_default_path(self, fallback: str) -> str:
        preferred = self.preferences.get_local_clone_path_from_git_provider()
        if preferred:
            resolved = self.environment.expand_environment_variables(preferred)
            logger.info(f"Using git provider clone path: {resolved}")
            return resolved

        logger.info(f"No git provider clone path set, using {fallback}")
        return fallback
