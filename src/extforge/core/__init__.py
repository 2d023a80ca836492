"""Core models and errors."""

from extforge.core.errors import CloneError, ExtforgeError, PackagingError
from extforge.core.models import DEFAULT_IGNORE_PATTERNS, ProjectNames, RenameRules

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "CloneError",
    "ExtforgeError",
    "PackagingError",
    "ProjectNames",
    "RenameRules",
]
