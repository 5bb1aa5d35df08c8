"""
Shared types and models for repository clone operations.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from application.services.github.git.errors import CloneArgumentError


class CloneState(str, Enum):
    SCHEDULED = "scheduled"
    DIRECTORY_ENSURED = "directory_ensured"
    CLONING = "cloning"
    FAULTED = "faulted"
    COMPLETED = "completed"


def require_non_empty(value: Optional[str], parameter_name: str) -> None:
    """Raise CloneArgumentError if value is None or an empty string."""
    if value is None or value == "":
        raise CloneArgumentError(parameter_name)


@dataclass(frozen=True)
class CloneRequest:
    source_url: str
    repository_name: str
    destination_parent_dir: str

    def __post_init__(self):
        """Validate required fields."""
        require_non_empty(self.source_url, "source_url")
        require_non_empty(self.repository_name, "repository_name")
        require_non_empty(self.destination_parent_dir, "destination_parent_dir")

    @property
    def destination_path(self) -> str:
        return os.path.join(self.destination_parent_dir, self.repository_name)


@dataclass
class CloneOutcome:
    """Result of a single clone attempt, as seen by the service internals."""

    request: CloneRequest
    destination_path: str
    error: Optional[BaseException] = field(default=None)

    @property
    def success(self) -> bool:
        return self.error is None
