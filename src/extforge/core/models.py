"""Core data models for extforge."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Separator used by kebab-case project names
NAME_SEPARATOR = "-"

DEFAULT_IGNORE_PATTERNS = [
    "node_modules",
    ".git",
    "dist",
    "build",
    ".DS_Store",
]


class RenameRules(BaseModel):
    """The literal table driving a rename.

    Attributes:
        source_token: Lowercase word baked into the template (e.g. "cline")
        literal_replacements: Extra literals replaced outright by the raw project name
        code_extensions: File suffixes that get the full ordered pass sequence
        ignore_patterns: Extra name substrings skipped during enumeration
    """

    source_token: str = Field(default="cline", description="Identifying word of the template")
    literal_replacements: list[str] = Field(
        default_factory=lambda: ["claude-dev", "saoudrizwan"],
        description="Legacy literals replaced by the raw project name in code files",
    )
    code_extensions: list[str] = Field(
        default_factory=lambda: [".ts", ".tsx", ".js", ".jsx", ".json"],
        description="Suffixes treated as code-like files",
    )
    ignore_patterns: list[str] = Field(
        default_factory=list,
        description="Additional substrings; matching files and directories are skipped",
    )

    @property
    def capitalized_token(self) -> str:
        """Source token with its first letter upper-cased ("Cline")."""
        return capitalize_segment(self.source_token)

    @property
    def upper_token(self) -> str:
        """Source token in all caps ("CLINE")."""
        return self.source_token.upper()

    def is_code_file(self, file_name: str) -> bool:
        """Check whether a file name has one of the code-like suffixes."""
        return any(file_name.endswith(ext) for ext in self.code_extensions)


class ProjectNames(BaseModel):
    """Derived forms of a user-supplied project name.

    Computed once per run and shared by every pass, file and rename so the same
    source occurrence always maps to the same replacement.
    """

    raw: str
    safe: str
    capitalized: str
    upper: str

    @classmethod
    def from_name(cls, name: str) -> ProjectNames:
        """Build all derived forms from a kebab-case project name.

        Examples:
            my-app -> safe "myapp", capitalized "MyApp", upper "MY-APP"
        """
        segments = name.split(NAME_SEPARATOR)
        return cls(
            raw=name,
            safe=name.replace(NAME_SEPARATOR, ""),
            capitalized="".join(capitalize_segment(segment) for segment in segments),
            upper=name.upper(),
        )


def capitalize_segment(segment: str) -> str:
    """Upper-case the first character only; the rest is kept as-is."""
    return segment[:1].upper() + segment[1:]
