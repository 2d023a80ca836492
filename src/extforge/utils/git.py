"""Git helpers for fetching template repositories."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from extforge.core.errors import CloneError

logger = logging.getLogger(__name__)


def directory_exists(path: Path) -> bool:
    """Check whether anything already exists at path."""
    return path.exists()


def clone_repository(repo_url: str, target_dir: Path, timeout: int = 600) -> None:
    """Clone a template repository and strip its git metadata.

    Args:
        repo_url: URL of the template repository
        target_dir: Destination directory (must not exist yet)
        timeout: Seconds before the clone is abandoned

    Raises:
        CloneError: If git is missing, times out, or exits non-zero
    """
    logger.debug(f"Cloning {repo_url} into {target_dir}")
    try:
        result = subprocess.run(
            ["git", "clone", repo_url, str(target_dir)],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise CloneError("git is not installed or not on PATH") from e
    except subprocess.TimeoutExpired as e:
        raise CloneError(f"git clone timed out after {timeout} seconds") from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise CloneError(f"git clone failed (exit {result.returncode}): {stderr}")

    git_dir = target_dir / ".git"
    if git_dir.exists():
        shutil.rmtree(git_dir)
