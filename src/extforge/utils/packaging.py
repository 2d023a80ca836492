"""Dependency installation and VSCode extension packaging."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from extforge.core.errors import PackagingError

if TYPE_CHECKING:
    from extforge.config import Config

logger = logging.getLogger(__name__)

# Lines of stderr kept in error messages
STDERR_TAIL_LINES = 20


def _tail(text: str, lines: int = STDERR_TAIL_LINES) -> str:
    return "\n".join(text.strip().splitlines()[-lines:])


def run_step(command: Sequence[str], cwd: Path, timeout: int) -> subprocess.CompletedProcess[str]:
    """Run an external build step inside a working directory.

    The directory is passed to the subprocess; the current process working
    directory is left alone.

    Raises:
        PackagingError: If the command is missing, times out, or exits non-zero
    """
    logger.debug(f"Running {' '.join(command)} in {cwd}")
    try:
        result = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            cwd=cwd,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise PackagingError(f"Command not found: {command[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise PackagingError(f"'{' '.join(command)}' timed out after {timeout} seconds") from e

    if result.returncode != 0:
        detail = _tail(result.stderr) or _tail(result.stdout)
        raise PackagingError(f"'{' '.join(command)}' failed (exit {result.returncode}): {detail}")
    return result


def find_vsix(directory: Path) -> Path:
    """Return the packaged .vsix file in directory.

    Raises:
        PackagingError: If no .vsix file exists
    """
    candidates = sorted(directory.glob("*.vsix"))
    if not candidates:
        raise PackagingError("VSIX file not found")
    return candidates[0]


def install_and_package(target_dir: Path, config: Config) -> Path:
    """Install dependencies and package the extension.

    Args:
        target_dir: Root of the transformed project
        config: Supplies the install/package commands and their timeouts

    Returns:
        Path to the generated .vsix file
    """
    run_step(config.install_command, target_dir, config.install_timeout)
    run_step(config.package_command, target_dir, config.package_timeout)
    return find_vsix(target_dir)
