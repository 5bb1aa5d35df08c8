"""
Clone Models Module

Shared types, enums, and dataclasses for repository clone operations.
"""

from application.services.github.models.types import (
    CloneOutcome,
    CloneRequest,
    CloneState,
)

__all__ = [
    "CloneOutcome",
    "CloneRequest",
    "CloneState",
]
