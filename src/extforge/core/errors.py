"""Exception types shared across extforge."""

from __future__ import annotations


class ExtforgeError(Exception):
    """Base error for failures outside the filesystem layer."""


class CloneError(ExtforgeError):
    """Raised when the template repository cannot be cloned."""


class PackagingError(ExtforgeError):
    """Raised when dependency installation or extension packaging fails."""
