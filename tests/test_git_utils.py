"""Tests for git utility functions."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from extforge.core.errors import CloneError
from extforge.utils.git import clone_repository, directory_exists

REPO_URL = "https://github.com/cline/cline.git"


class TestDirectoryExists:
    """Tests for directory_exists()."""

    def test_existing_and_missing(self, tmp_path: Path) -> None:
        """Reports presence of the path."""
        assert directory_exists(tmp_path) is True
        assert directory_exists(tmp_path / "missing") is False


class TestCloneRepository:
    """Tests for clone_repository()."""

    @patch("extforge.utils.git.subprocess.run")
    def test_clones_and_removes_git_dir(self, mock_run: MagicMock, tmp_path: Path) -> None:
        """Successful clone strips the .git directory."""
        target = tmp_path / "my-app"

        def fake_clone(*_args: object, **_kwargs: object) -> MagicMock:
            (target / ".git").mkdir(parents=True)
            (target / "package.json").write_text("{}", encoding="utf-8")
            return MagicMock(returncode=0, stdout="", stderr="")

        mock_run.side_effect = fake_clone

        clone_repository(REPO_URL, target, timeout=30)

        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "clone", REPO_URL, str(target)]
        assert kwargs["timeout"] == 30
        assert kwargs["check"] is False
        assert not (target / ".git").exists()
        assert (target / "package.json").exists()

    @patch("extforge.utils.git.subprocess.run")
    def test_nonzero_exit_raises(self, mock_run: MagicMock, tmp_path: Path) -> None:
        """git errors surface stderr in the exception."""
        mock_run.return_value = MagicMock(returncode=128, stdout="", stderr="fatal: repository not found\n")
        with pytest.raises(CloneError, match="repository not found"):
            clone_repository(REPO_URL, tmp_path / "my-app")

    @patch("extforge.utils.git.subprocess.run", side_effect=FileNotFoundError("git"))
    def test_git_missing_raises(self, _mock_run: MagicMock, tmp_path: Path) -> None:
        """A missing git binary becomes a CloneError."""
        with pytest.raises(CloneError, match="not installed"):
            clone_repository(REPO_URL, tmp_path / "my-app")

    @patch(
        "extforge.utils.git.subprocess.run",
        side_effect=subprocess.TimeoutExpired(cmd="git", timeout=1),
    )
    def test_timeout_raises(self, _mock_run: MagicMock, tmp_path: Path) -> None:
        """Timeouts become a CloneError."""
        with pytest.raises(CloneError, match="timed out"):
            clone_repository(REPO_URL, tmp_path / "my-app", timeout=1)
