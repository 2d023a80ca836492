"""File and directory renaming for the source token."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from extforge.core.models import ProjectNames, RenameRules
from extforge.rewrite.enumerator import iter_directories
from extforge.rewrite.rewriter import token_pattern

logger = logging.getLogger(__name__)


def rename_token(name: str, names: ProjectNames, rules: RenameRules) -> str:
    """Replace "Cline" with the capitalized form and "cline" with the safe form."""

    def replace(m: re.Match[str]) -> str:
        return names.capitalized if m.group(0) == rules.capitalized_token else names.safe

    return re.sub(token_pattern(rules), replace, name)


def _move(source: Path, target: Path) -> None:
    # os.rename silently replaces existing files on POSIX
    if target.exists():
        raise FileExistsError(f"Cannot rename {source}: {target} already exists")
    source.rename(target)


def rename_file(file_path: Path, names: ProjectNames, rules: RenameRules | None = None) -> Path:
    """Rename a file whose name contains the source token.

    Only the file name is changed; directory segments are handled by
    rename_directories().

    Args:
        file_path: File to rename
        names: Derived project name forms
        rules: Token table, defaults to RenameRules()

    Returns:
        The new path, or file_path unchanged if its name has no token

    Raises:
        FileExistsError: If the target name is already taken
        OSError: If the move fails
    """
    rules = rules or RenameRules()
    new_name = rename_token(file_path.name, names, rules)
    if new_name == file_path.name:
        return file_path

    target = file_path.with_name(new_name)
    try:
        _move(file_path, target)
    except OSError as e:
        logger.error(f"Failed to rename {file_path} -> {target}: {e}")
        raise
    logger.debug(f"Renamed {file_path.name} -> {new_name}")
    return target


def rename_directories(root: Path, names: ProjectNames, rules: RenameRules | None = None) -> list[Path]:
    """Rename every directory under root whose name contains the source token.

    Directories are processed deepest first, so renaming a parent never
    invalidates a child path that is still pending.

    Args:
        root: Tree to process (root itself is never renamed)
        names: Derived project name forms
        rules: Token table, defaults to RenameRules()

    Returns:
        New paths of the renamed directories, in processing order
    """
    rules = rules or RenameRules()
    directories = list(iter_directories(root, rules.ignore_patterns))
    # Stable sort keeps enumeration order between directories of equal depth
    directories.sort(key=lambda p: len(p.parts), reverse=True)

    renamed: list[Path] = []
    for directory in directories:
        new_name = rename_token(directory.name, names, rules)
        if new_name == directory.name:
            continue
        target = directory.with_name(new_name)
        try:
            _move(directory, target)
        except OSError as e:
            logger.error(f"Failed to rename directory {directory} -> {target}: {e}")
            raise
        logger.debug(f"Renamed directory {directory.name} -> {new_name}")
        renamed.append(target)

    return renamed
