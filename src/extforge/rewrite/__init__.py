"""Name-rewriting engine: enumeration, content passes and renames."""

from extforge.rewrite.enumerator import get_all_files, is_ignored, iter_directories
from extforge.rewrite.renamer import rename_directories, rename_file, rename_token
from extforge.rewrite.rewriter import IdentifierRewriter, RewritePass, build_code_passes
from extforge.rewrite.transformer import TransformResult, process_template_project

__all__ = [
    "IdentifierRewriter",
    "RewritePass",
    "TransformResult",
    "build_code_passes",
    "get_all_files",
    "is_ignored",
    "iter_directories",
    "process_template_project",
    "rename_directories",
    "rename_file",
    "rename_token",
]
