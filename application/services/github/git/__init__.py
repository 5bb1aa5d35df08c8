"""
Git Collaborators Module

Local operations the clone service delegates to:
- Clone primitive (git clone subprocess)
- Directory creation
- Environment variable expansion and user documents path
- Git provider clone path preference
"""

from application.services.github.git.clone import GitCloner
from application.services.github.git.directory import DirectoryProvider
from application.services.github.git.environment import EnvironmentProvider
from application.services.github.git.errors import CloneArgumentError, GitCloneError
from application.services.github.git.preferences import GitProviderPreferences

__all__ = [
    "GitCloner",
    "DirectoryProvider",
    "EnvironmentProvider",
    "GitProviderPreferences",
    "CloneArgumentError",
    "GitCloneError",
]
