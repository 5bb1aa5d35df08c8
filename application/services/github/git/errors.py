"""
Errors raised by repository clone operations.
"""

from typing import Optional


class CloneArgumentError(ValueError):
    """Raised when a required clone argument is missing or empty."""

    def __init__(self, parameter_name: str):
        self.parameter_name = parameter_name
        super().__init__(f"The value for '{parameter_name}' must not be empty")


class GitCloneError(RuntimeError):
    """Raised when git fails to clone a repository."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
