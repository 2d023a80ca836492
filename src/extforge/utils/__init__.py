"""Utility modules for extforge."""

from extforge.utils.git import clone_repository, directory_exists
from extforge.utils.packaging import find_vsix, install_and_package, run_step

__all__ = [
    "clone_repository",
    "directory_exists",
    "find_vsix",
    "install_and_package",
    "run_step",
]
