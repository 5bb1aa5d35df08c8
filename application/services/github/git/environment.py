"""
Operating system environment access for clone path resolution.
"""

import logging
import os
import re
from typing import Mapping, Optional

from common.config.config import APP_NAME, CLONE_DOCUMENTS_DIR

logger = logging.getLogger(__name__)

# %NAME%, ${NAME} or $NAME
_VARIABLE_REFERENCE = re.compile(
    r"%(?P<percent>[A-Za-z_][A-Za-z0-9_()]*)%"
    r"|\$\{(?P<braced>[^}]+)\}"
    r"|\$(?P<bare>\w+)"
)


class EnvironmentProvider:
    """Reads user directories and expands environment variable references."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def get_user_documents_path_for_application(self) -> str:
        """Get the application folder inside the user's documents directory.

        Returns:
            Path such as ~/Documents/GitHub
        """
        documents_dir = CLONE_DOCUMENTS_DIR or os.path.join(
            os.path.expanduser("~"), "Documents"
        )
        return os.path.join(documents_dir, APP_NAME)

    def expand_environment_variables(self, text: str) -> str:
        """Expand %VAR%, $VAR and ${VAR} references in a single pass.

        Unknown references are left as they are.

        Args:
            text: Text containing variable references

        Returns:
            Text with known references substituted
        """
        environ = self.environ

        def _substitute(match: "re.Match[str]") -> str:
            name = match.group("percent") or match.group("braced") or match.group("bare")
            return environ.get(name, match.group(0))

        expanded = _VARIABLE_REFERENCE.sub(_substitute, text)
        if expanded != text:
            logger.debug(f"Expanded '{text}' to '{expanded}'")
        return expanded

