"""Configuration management for extforge."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from extforge.core.models import RenameRules

DEFAULT_TEMPLATES = {
    "cline": "https://github.com/cline/cline.git",
}


class Config(BaseModel):
    """extforge configuration.

    Template settings:
        template: Key of the template used when --template is not given
        templates: Template key -> git URL
        template_rules: Per-template rename rules; falls back to `rules`
    """

    template: str = Field(default="cline", description="Default template key")
    templates: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_TEMPLATES),
        description="Template repositories keyed by template name",
    )
    rules: RenameRules = Field(default_factory=RenameRules)
    template_rules: dict[str, RenameRules] = Field(
        default_factory=dict,
        description="Rename rules overriding `rules` for a given template key",
    )
    clone_timeout: int = Field(default=600, description="git clone timeout in seconds")
    install_command: list[str] = Field(
        default_factory=lambda: ["npm", "run", "install:all"],
        description="Command installing the extension dependencies",
    )
    install_timeout: int = Field(default=1800, description="Install timeout in seconds (default: 30 min)")
    package_command: list[str] = Field(
        default_factory=lambda: ["npx", "vsce", "package"],
        description="Command producing the .vsix artifact",
    )
    package_timeout: int = Field(default=900, description="Packaging timeout in seconds (default: 15 min)")

    def repo_url(self, template: str | None = None) -> str:
        """Get the git URL for a template key.

        Raises:
            KeyError: If the template is not configured
        """
        key = template or self.template
        if key not in self.templates:
            known = ", ".join(sorted(self.templates))
            raise KeyError(f"Unknown template '{key}' (known: {known})")
        return self.templates[key]

    def rules_for(self, template: str | None = None) -> RenameRules:
        """Get the rename rules for a template key."""
        return self.template_rules.get(template or self.template, self.rules)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file or use defaults."""
        if config_path is None:
            # Look for config in .extforge/config.yaml
            config_path = Path(".extforge/config.yaml")

        if config_path.exists():
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
            return cls.model_validate(data)

        return cls()

    def save(self, config_path: Path) -> None:
        """Save configuration to file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with config_path.open("w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)
