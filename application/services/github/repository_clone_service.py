"""
Repository clone service.

Resolves the default directory repositories are cloned into and performs
clones in the background, delivering exactly one outcome per request.
"""

import asyncio
import logging
from typing import Optional

from application.services.github.git.clone import GitCloner
from application.services.github.git.directory import DirectoryProvider
from application.services.github.git.environment import EnvironmentProvider
from application.services.github.git.preferences import GitProviderPreferences
from application.services.github.models.types import (
    CloneOutcome,
    CloneRequest,
    CloneState,
)
from application.services.github.repository.resolver import (
    ClonePathResolver,
    GitProviderClonePathResolver,
)

logger = logging.getLogger(__name__)


class RepositoryCloneService:
    """
    Service used to clone repositories into local directories.

    Collaborators are injectable so hosts can supply their own git engine,
    filesystem access and preference source. The default clone path is
    resolved once in the constructor and never re-evaluated.
    """

    def __init__(
        self,
        environment: Optional[EnvironmentProvider] = None,
        directory: Optional[DirectoryProvider] = None,
        cloner: Optional[GitCloner] = None,
        preferences: Optional[GitProviderPreferences] = None,
        path_resolver: Optional[ClonePathResolver] = None,
    ):
        """Initialize the clone service.

        Args:
            environment: Environment provider (documents path, variable expansion)
            directory: Directory provider used to create clone destinations
            cloner: Clone primitive
            preferences: Git provider preference source
            path_resolver: Strategy for the default clone path
        """
        self._environment = environment or EnvironmentProvider()
        self._directory = directory or DirectoryProvider()
        self._cloner = cloner or GitCloner()
        self._path_resolver = path_resolver or GitProviderClonePathResolver(
            preferences=preferences, environment=self._environment
        )

        self._default_clone_path = self._path_resolver.resolve_default_path(
            self._environment.get_user_documents_path_for_application()
        )

    @property
    def default_clone_path(self) -> str:
        return self._default_clone_path

    def clone_repository(
        self, source_url: str, repository_name: str, destination_parent_dir: str
    ) -> "asyncio.Task[None]":
        """Clone a repository in the background.

        Arguments are validated before anything is scheduled. The returned
        task resolves to None on success, or raises the original error from
        directory creation or the clone primitive.

        Args:
            source_url: Remote repository URL
            repository_name: Name of the directory created for the clone
            destination_parent_dir: Directory the repository directory is created in

        Returns:
            Task completing once the clone has finished

        Raises:
            CloneArgumentError: If any argument is empty
            RuntimeError: If called without a running event loop
        """
        request = CloneRequest(
            source_url=source_url,
            repository_name=repository_name,
            destination_parent_dir=destination_parent_dir,
        )
        loop = asyncio.get_running_loop()
        self._log_state(request, CloneState.SCHEDULED)
        return loop.create_task(self._run_clone(request))

    async def _run_clone(self, request: CloneRequest) -> None:
        path = request.destination_path
        try:
            await asyncio.to_thread(self._directory.create_directory, path)
        except Exception:
            self._log_state(request, CloneState.FAULTED)
            raise
        self._log_state(request, CloneState.DIRECTORY_ENSURED)

        outcome = await asyncio.to_thread(self._clone, request, path)
        self._forward_outcome(outcome)

    def _clone(self, request: CloneRequest, path: str) -> CloneOutcome:
        self._log_state(request, CloneState.CLONING)
        try:
            self._cloner.clone(request.source_url, path, True)
        except Exception as e:
            return CloneOutcome(request=request, destination_path=path, error=e)
        return CloneOutcome(request=request, destination_path=path)

    def _forward_outcome(self, outcome: CloneOutcome) -> None:
        """Log a failed outcome and re-raise its error unchanged."""
        if outcome.success:
            self._log_state(outcome.request, CloneState.COMPLETED)
            return

        self._log_state(outcome.request, CloneState.FAULTED)
        logger.error(
            "Could not clone %s to %s. %s",
            outcome.request.source_url,
            outcome.destination_path,
            outcome.error,
        )
        raise outcome.error

    @staticmethod
    def _log_state(request: CloneRequest, state: CloneState) -> None:
        logger.debug(f"Clone of {request.source_url}: {state.value}")
