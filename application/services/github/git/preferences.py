"""
Git provider clone path preference.

The preferred clone location comes from LOCAL_CLONE_PATH when set, otherwise
from the user's global git configuration.
"""

import logging
import subprocess

from common.config.config import (
    GIT_CLONE_PATH_CONFIG_KEY,
    GIT_EXECUTABLE,
    LOCAL_CLONE_PATH,
)

logger = logging.getLogger(__name__)

GIT_CONFIG_TIMEOUT_SECONDS = 10


class GitProviderPreferences:
    """Source of the git provider's preferred local clone path."""

    def __init__(self, config_key: str = GIT_CLONE_PATH_CONFIG_KEY):
        self.config_key = config_key

    def get_local_clone_path_from_git_provider(self) -> str:
        """Get the preferred clone path.

        Returns:
            Preferred path, or an empty string when there is no preference
        """
        if LOCAL_CLONE_PATH:
            return LOCAL_CLONE_PATH
        return self._read_git_config()

    def _read_git_config(self) -> str:
        try:
            result = subprocess.run(
                [GIT_EXECUTABLE, "config", "--global", "--get", self.config_key],
                capture_output=True,
                text=True,
                timeout=GIT_CONFIG_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"Could not read git config '{self.config_key}': {e}")
            return ""

        if result.returncode != 0:
            # Exit code 1 means the key is not set
            return ""
        return result.stdout.strip()
