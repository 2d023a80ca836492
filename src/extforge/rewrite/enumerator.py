"""Directory walking with substring-based ignore patterns."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from extforge.core.models import DEFAULT_IGNORE_PATTERNS

logger = logging.getLogger(__name__)


def _merge_patterns(ignore_patterns: Iterable[str]) -> list[str]:
    patterns = list(DEFAULT_IGNORE_PATTERNS)
    patterns.extend(p for p in ignore_patterns if p and p not in patterns)
    return patterns


def is_ignored(name: str, patterns: Iterable[str]) -> bool:
    """Check if an entry name contains any ignore substring."""
    return any(pattern in name for pattern in patterns)


def _list_entries(directory: Path, patterns: list[str]) -> list[Path]:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.error(f"Cannot read directory {directory}: {e}")
        raise
    return [entry for entry in entries if not is_ignored(entry.name, patterns)]


def get_all_files(root: Path, ignore_patterns: Iterable[str] = ()) -> list[Path]:
    """Recursively collect regular files under a root directory.

    Entries whose name contains a default or caller-supplied ignore substring
    are skipped, and ignored directories are never descended into. Entries are
    visited in sorted name order so the result is stable for a given tree.

    Args:
        root: Directory to walk
        ignore_patterns: Extra substrings to skip

    Returns:
        List of file paths in depth-first order

    Raises:
        OSError: If a directory cannot be read
    """
    patterns = _merge_patterns(ignore_patterns)
    results: list[Path] = []

    def walk(directory: Path) -> None:
        for entry in _list_entries(directory, patterns):
            if entry.is_dir():
                walk(entry)
            else:
                results.append(entry)

    walk(Path(root))
    return results


def iter_directories(root: Path, ignore_patterns: Iterable[str] = ()) -> Iterator[Path]:
    """Yield every non-ignored directory below root, parents before children."""
    patterns = _merge_patterns(ignore_patterns)
    pending = [Path(root)]
    while pending:
        directory = pending.pop()
        children = [entry for entry in _list_entries(directory, patterns) if entry.is_dir()]
        for child in children:
            yield child
        # Reverse so the next pop() continues with the first child in sorted order
        pending.extend(reversed(children))
