"""Git clone primitive.

Runs `git clone` as a blocking subprocess. Callers are expected to run it
off the event loop.
"""

import logging
import subprocess
from typing import List

from application.services.github.git.errors import GitCloneError
from common.config.config import GIT_EXECUTABLE

logger = logging.getLogger(__name__)


class GitCloner:
    """Materializes a working copy of a remote repository at a local path."""

    def __init__(self, git_executable: str = GIT_EXECUTABLE):
        self.git_executable = git_executable

    def build_clone_command(
        self, source_url: str, destination_path: str, recurse_submodules: bool
    ) -> List[str]:
        cmd = [self.git_executable, "clone"]
        if recurse_submodules:
            cmd.append("--recurse-submodules")
        cmd.extend([source_url, destination_path])
        return cmd

    def clone(
        self, source_url: str, destination_path: str, recurse_submodules: bool
    ) -> None:
        """Clone source_url into destination_path.

        Args:
            source_url: Remote repository URL
            destination_path: Local directory to clone into
            recurse_submodules: Whether to initialize submodules

        Raises:
            GitCloneError: If git is missing or the clone fails
        """
        cmd = self.build_clone_command(source_url, destination_path, recurse_submodules)
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise GitCloneError(
                f"Git executable '{self.git_executable}' not found"
            ) from e

        if result.returncode != 0:
            raise GitCloneError(
                f"Error during git clone: {result.stderr.strip()}",
                returncode=result.returncode,
                stderr=result.stderr,
            )
