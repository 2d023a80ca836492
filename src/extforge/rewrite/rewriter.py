"""Multi-pass identifier rewriting for template file contents.

Renaming one identifier across many surface encodings without a parser is done
with an explicit ordered list of regex passes. Specific compound shapes (const
declarations, string literals, method declarations, member access) run first so
that by the time the generic whole-word passes run most compound forms are
already resolved. Reordering the list changes the output.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from extforge.core.models import ProjectNames, RenameRules

logger = logging.getLogger(__name__)

Replacement = Callable[[re.Match[str]], str]


@dataclass(frozen=True)
class RewritePass:
    """A single global substitution in the ordered pass list.

    Attributes:
        name: Short identifier used in debug logs and tests
        pattern: Compiled regex, applied to every match in the content
        replace: Callable building the replacement text from a match
    """

    name: str
    pattern: re.Pattern[str]
    replace: Replacement

    def apply(self, content: str) -> str:
        return self.pattern.sub(self.replace, content)


def token_pattern(rules: RenameRules) -> str:
    """Regex matching the source token in lowercase or capitalized form ("[Cc]line")."""
    first = rules.source_token[:1]
    return f"[{re.escape(first.upper())}{re.escape(first)}]{re.escape(rules.source_token[1:])}"


def build_code_passes(rules: RenameRules, names: ProjectNames) -> list[RewritePass]:
    """Build the ordered pass list for code-like files.

    Args:
        rules: Token and literal table
        names: Derived forms of the project name

    Returns:
        Passes in the order they must be applied
    """
    token = re.escape(rules.source_token)
    cap_token = re.escape(rules.capitalized_token)
    either_re = re.compile(token_pattern(rules))
    either = either_re.pattern
    safe = names.safe
    cap = names.capitalized

    def by_case(m: re.Match[str]) -> str:
        return cap if m.group(0) == rules.capitalized_token else safe

    compound = re.compile(rf"\b({either})([A-Z][a-zA-Z0-9]*)\b")

    def compound_replace(m: re.Match[str]) -> str:
        prefix = cap if m.group(1) == rules.capitalized_token else safe
        return prefix + m.group(2)

    def import_replace(m: re.Match[str]) -> str:
        imports, q1, path, q2 = m.group(1), m.group(2), m.group(3), m.group(4)
        new_imports = compound.sub(compound_replace, imports)
        new_path = either_re.sub(by_case, path)
        if new_imports == imports and new_path == path:
            return m.group(0)
        return f"import {{{new_imports}}} from {q1}{new_path}{q2}"

    passes = [
        # const clineIgnorePattern = ... -> const myappIgnorePattern = ...
        RewritePass(
            "const-declaration",
            re.compile(rf"const\s+{token}([a-zA-Z0-9]+)\s*="),
            lambda m: f"const {safe}{m.group(1)} =",
        ),
        # "clineignore_error" -> "myappignore_error"
        RewritePass(
            "double-quoted-literal",
            re.compile(rf'"([^"]*?){token}([^"]*?)"'),
            lambda m: f'"{m.group(1)}{safe}{m.group(2)}"',
        ),
        RewritePass(
            "single-quoted-literal",
            re.compile(rf"'([^']*?){token}([^']*?)'"),
            lambda m: f"'{m.group(1)}{safe}{m.group(2)}'",
        ),
        RewritePass(
            "ignore-file-reference",
            re.compile(rf"\.{token}ignore"),
            lambda m: f".{safe}ignore",
        ),
        # private async saveClineMessages( -> private async saveMyAppMessages(
        RewritePass(
            "async-method-declaration",
            re.compile(rf"(\s+)([a-z]+)(\s+async\s+)([a-z]+){cap_token}([A-Za-z0-9]+)(\()"),
            lambda m: f"{m.group(1)}{m.group(2)}{m.group(3)}{m.group(4)}{cap}{m.group(5)}{m.group(6)}",
        ),
        # this.saveClineMessages -> this.saveMyAppMessages
        RewritePass(
            "member-access",
            re.compile(rf"([.a-zA-Z0-9_]+\.)([a-z]+){cap_token}([A-Za-z0-9]+)"),
            lambda m: f"{m.group(1)}{m.group(2)}{cap}{m.group(3)}",
        ),
        RewritePass(
            "camel-case-embedded",
            re.compile(rf"\b([a-z]+){cap_token}([A-Za-z0-9_]+)\b"),
            lambda m: f"{m.group(1)}{cap}{m.group(2)}",
        ),
        RewritePass("lowercase-word", re.compile(rf"\b{token}\b"), lambda m: safe),
        RewritePass("capitalized-word", re.compile(rf"\b{cap_token}\b"), lambda m: cap),
    ]

    passes.extend(
        RewritePass(f"literal:{literal}", re.compile(re.escape(literal)), lambda m: names.raw)
        for literal in rules.literal_replacements
    )

    passes.extend(
        [
            # './core/ignore/ClineController' -> './core/ignore/MyAppController'
            RewritePass(
                "quoted-path",
                re.compile(rf"(['\"])([^'\"]*?){either}([^'\"]*?)(['\"])"),
                lambda m: either_re.sub(by_case, m.group(0)),
            ),
            RewritePass("compound-identifier", compound, compound_replace),
            RewritePass(
                "import-statement",
                re.compile(r"import\s+\{([^}]*)\}\s+from\s+(['\"])([^'\"]*?)(['\"])"),
                import_replace,
            ),
        ]
    )
    return passes


class IdentifierRewriter:
    """Rewrites file contents, replacing every form of the source token.

    Code-like files go through the ordered passes from build_code_passes().
    Everything else gets a single case-insensitive substitution.
    """

    def __init__(self, names: ProjectNames, rules: RenameRules | None = None) -> None:
        self.names = names
        self.rules = rules or RenameRules()
        self.passes = build_code_passes(self.rules, names)
        self._any_case = re.compile(re.escape(self.rules.source_token), re.IGNORECASE)

    def rewrite_code(self, content: str) -> str:
        """Apply every code pass in order."""
        for rewrite_pass in self.passes:
            content = rewrite_pass.apply(content)
        return content

    def rewrite_plain(self, content: str) -> str:
        """Case-aware substitution for documentation and other non-code files."""

        def replace(m: re.Match[str]) -> str:
            found = m.group(0)
            if found == self.rules.upper_token:
                return self.names.upper
            if found == self.rules.capitalized_token:
                return self.names.capitalized
            if found == self.rules.source_token:
                return self.names.safe
            return found

        return self._any_case.sub(replace, content)

    def rewrite_text(self, content: str, file_name: str) -> str:
        """Rewrite content, choosing the pass set from the file name."""
        if self.rules.is_code_file(file_name):
            return self.rewrite_code(content)
        return self.rewrite_plain(content)

    def rewrite_file(self, file_path: Path) -> bool:
        """Rewrite a file in place.

        Binary files (NUL bytes or invalid UTF-8) are left untouched. The file
        is only written back when its content changed.

        Args:
            file_path: File to rewrite

        Returns:
            True if the file was modified

        Raises:
            OSError: If the file cannot be read or written
        """
        try:
            data = file_path.read_bytes()
            if b"\x00" in data:
                logger.debug(f"Skipping binary file {file_path}")
                return False
            try:
                content = data.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug(f"Skipping non UTF-8 file {file_path}")
                return False

            updated = self.rewrite_text(content, file_path.name)
            if updated == content:
                return False

            file_path.write_bytes(updated.encode("utf-8"))
            logger.debug(f"Rewrote {file_path}")
            return True
        except OSError as e:
            logger.error(f"Error occurred while processing file {file_path}: {e}")
            raise
