"""
GitHub Service Package

Service layer for cloning repositories into local directories.

Main Components:
- RepositoryCloneService: Default clone path and background clone operations
- Git Collaborators: Clone primitive, directories, environment, preferences
- Repository Management: Default clone path resolution strategies
"""

from application.services.github.repository_clone_service import RepositoryCloneService

__all__ = ["RepositoryCloneService"]
