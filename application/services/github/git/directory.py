"""
Filesystem directory access for clone destinations.
"""

import logging
import os

logger = logging.getLogger(__name__)


class DirectoryProvider:
    """Creates clone destination directories."""

    def create_directory(self, path: str) -> None:
        """Create a directory and any missing parents.

        Does nothing if the directory already exists.

        Raises:
            OSError: If the path is invalid or permissions are insufficient
        """
        os.makedirs(path, exist_ok=True)
        logger.debug(f"Target directory '{path}' is ready.")
