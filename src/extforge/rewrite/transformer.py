"""Orchestrates content rewriting and renaming over a cloned template."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from extforge.core.models import ProjectNames, RenameRules
from extforge.rewrite.enumerator import get_all_files
from extforge.rewrite.renamer import rename_directories, rename_file
from extforge.rewrite.rewriter import IdentifierRewriter

logger = logging.getLogger(__name__)


@dataclass
class TransformResult:
    """Summary of a project transformation.

    Attributes:
        files_scanned: Number of files in the captured file set
        files_rewritten: Files whose content changed
        files_renamed: New paths of renamed files
        directories_renamed: New paths of renamed directories
    """

    files_scanned: int = 0
    files_rewritten: list[Path] = field(default_factory=list)
    files_renamed: list[Path] = field(default_factory=list)
    directories_renamed: list[Path] = field(default_factory=list)


def process_template_project(
    target_dir: Path,
    names: ProjectNames,
    rules: RenameRules | None = None,
) -> TransformResult:
    """Rename a cloned template in place.

    Phases run strictly in sequence: rewrite contents, rename files, rename
    directories. The file set is captured once up front and is not
    re-enumerated after renames, so cross-file import paths depend on the
    content passes producing names that match the renamed files.

    Args:
        target_dir: Root of the cloned template (.git already removed)
        names: Derived project name forms
        rules: Token table, defaults to RenameRules()

    Returns:
        TransformResult describing what changed

    Raises:
        OSError: On the first filesystem failure; nothing is rolled back
    """
    rules = rules or RenameRules()
    result = TransformResult()

    try:
        logger.info("Starting file processing...")

        files = get_all_files(target_dir, rules.ignore_patterns)
        result.files_scanned = len(files)

        rewriter = IdentifierRewriter(names, rules)
        for file_path in files:
            if rewriter.rewrite_file(file_path):
                result.files_rewritten.append(file_path)

        for file_path in files:
            new_path = rename_file(file_path, names, rules)
            if new_path != file_path:
                result.files_renamed.append(new_path)

        result.directories_renamed = rename_directories(target_dir, names, rules)

        logger.info("All files processed successfully.")
    except Exception as e:
        logger.error(f"An error occurred while processing the project: {e}")
        raise

    return result
