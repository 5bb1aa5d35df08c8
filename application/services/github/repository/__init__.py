"""
Repository Management Module

Handles default clone path resolution strategies.
"""

from application.services.github.repository.resolver import (
    ClonePathResolver,
    GitProviderClonePathResolver,
)

__all__ = [
    "ClonePathResolver",
    "GitProviderClonePathResolver",
]
