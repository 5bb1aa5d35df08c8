"""Tests for the GitCloner clone primitive and DirectoryProvider."""

from unittest.mock import MagicMock, patch

import pytest

from application.services.github.git.clone import GitCloner
from application.services.github.git.directory import DirectoryProvider
from application.services.github.git.errors import GitCloneError


class TestGitCloner:
    """Test GitCloner.clone function."""

    def test_build_clone_command_with_submodules(self):
        """Test submodule recursion adds the flag before the URL."""
        cloner = GitCloner(git_executable="git")
        assert cloner.build_clone_command("https://example.com/o/r.git", "/home/u/code/r", True) == [
            "git",
            "clone",
            "--recurse-submodules",
            "https://example.com/o/r.git",
            "/home/u/code/r",
        ]

    def test_build_clone_command_without_submodules(self):
        """Test the flag is omitted when recursion is disabled."""
        cloner = GitCloner(git_executable="/usr/bin/git")
        assert cloner.build_clone_command("https://example.com/o/r.git", "/tmp/r", False) == [
            "/usr/bin/git",
            "clone",
            "https://example.com/o/r.git",
            "/tmp/r",
        ]

    def test_clone_success(self):
        """Test a zero exit code returns None."""
        cloner = GitCloner(git_executable="git")
        completed = MagicMock(returncode=0, stdout="", stderr="")

        with patch("application.services.github.git.clone.subprocess.run", return_value=completed) as mock_run:
            assert cloner.clone("https://example.com/o/r.git", "/tmp/r", True) is None

        mock_run.assert_called_once_with(
            ["git", "clone", "--recurse-submodules", "https://example.com/o/r.git", "/tmp/r"],
            capture_output=True,
            text=True,
        )

    def test_clone_failure_raises(self):
        """Test a non-zero exit code raises GitCloneError with stderr."""
        cloner = GitCloner(git_executable="git")
        completed = MagicMock(returncode=128, stdout="", stderr="fatal: repository not found\n")

        with patch("application.services.github.git.clone.subprocess.run", return_value=completed):
            with pytest.raises(GitCloneError) as exc_info:
                cloner.clone("https://example.com/o/r.git", "/tmp/r", True)

        assert exc_info.value.returncode == 128
        assert "repository not found" in str(exc_info.value)
        assert exc_info.value.stderr == "fatal: repository not found\n"

    def test_clone_missing_git_raises(self):
        """Test a missing git executable raises GitCloneError."""
        cloner = GitCloner(git_executable="no-such-git")

        with patch(
            "application.services.github.git.clone.subprocess.run",
            side_effect=FileNotFoundError("no-such-git"),
        ):
            with pytest.raises(GitCloneError) as exc_info:
                cloner.clone("https://example.com/o/r.git", "/tmp/r", True)

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


class TestDirectoryProvider:
    """Test DirectoryProvider.create_directory function."""

    def test_create_directory_with_parents(self, tmp_path):
        """Test missing parent directories are created."""
        target = tmp_path / "a" / "b" / "repo"
        DirectoryProvider().create_directory(str(target))
        assert target.is_dir()

    def test_create_directory_idempotent(self, tmp_path):
        """Test an existing directory is left alone."""
        target = tmp_path / "repo"
        target.mkdir()
        (target / "keep.txt").write_text("x")

        DirectoryProvider().create_directory(str(target))

        assert (target / "keep.txt").read_text() == "x"

    def test_create_directory_over_file_fails(self, tmp_path):
        """Test an invalid path raises an OSError."""
        blocker = tmp_path / "file"
        blocker.write_text("x")

        with pytest.raises(OSError):
            DirectoryProvider().create_directory(str(blocker / "repo"))
