"""Tests for file and directory renaming."""

from __future__ import annotations

from pathlib import Path

import pytest

from extforge.core.models import ProjectNames, RenameRules
from extforge.rewrite.renamer import rename_directories, rename_file, rename_token


@pytest.fixture
def names() -> ProjectNames:
    """Derived forms for "my-app"."""
    return ProjectNames.from_name("my-app")


class TestRenameToken:
    """Tests for rename_token()."""

    def test_capitalized_and_lowercase(self, names: ProjectNames) -> None:
        """Each occurrence is replaced according to its case."""
        assert rename_token("ClineProvider.ts", names, RenameRules()) == "MyAppProvider.ts"
        assert rename_token("cline-utils", names, RenameRules()) == "myapp-utils"
        assert rename_token("cline-Cline", names, RenameRules()) == "myapp-MyApp"

    def test_uppercase_left_alone(self, names: ProjectNames) -> None:
        """All-caps names are not renamed."""
        assert rename_token("CLINE.md", names, RenameRules()) == "CLINE.md"


class TestRenameFile:
    """Tests for rename_file()."""

    def test_renames_file(self, tmp_path: Path, names: ProjectNames) -> None:
        """ClineProvider.ts becomes MyAppProvider.ts in the same directory."""
        source = tmp_path / "ClineProvider.ts"
        source.write_text("x", encoding="utf-8")

        result = rename_file(source, names)

        assert result == tmp_path / "MyAppProvider.ts"
        assert result.read_text(encoding="utf-8") == "x"
        assert not source.exists()

    def test_unchanged_name_returns_same_path(self, tmp_path: Path, names: ProjectNames) -> None:
        """Files without the token stay where they are."""
        source = tmp_path / "extension.ts"
        source.write_text("x", encoding="utf-8")
        assert rename_file(source, names) == source
        assert source.exists()

    def test_only_file_name_is_changed(self, tmp_path: Path, names: ProjectNames) -> None:
        """Directory segments are left for rename_directories()."""
        folder = tmp_path / "cline"
        folder.mkdir()
        source = folder / "cline.ts"
        source.write_text("x", encoding="utf-8")

        result = rename_file(source, names)

        assert result == folder / "myapp.ts"
        assert folder.exists()

    def test_existing_target_raises(self, tmp_path: Path, names: ProjectNames) -> None:
        """A name collision is an error, not an overwrite."""
        source = tmp_path / "ClineProvider.ts"
        source.write_text("old", encoding="utf-8")
        existing = tmp_path / "MyAppProvider.ts"
        existing.write_text("keep", encoding="utf-8")

        with pytest.raises(FileExistsError):
            rename_file(source, names)

        assert existing.read_text(encoding="utf-8") == "keep"
        assert source.exists()


class TestRenameDirectories:
    """Tests for rename_directories()."""

    def test_nested_directories_deepest_first(self, tmp_path: Path, names: ProjectNames) -> None:
        """The child is renamed before its parent and no path goes stale."""
        nested = tmp_path / "cline-core" / "cline-utils"
        nested.mkdir(parents=True)
        (nested / "helpers.ts").write_text("x", encoding="utf-8")

        renamed = rename_directories(tmp_path, names)

        assert [p.name for p in renamed] == ["myapp-utils", "myapp-core"]
        assert (tmp_path / "myapp-core" / "myapp-utils" / "helpers.ts").exists()
        assert not (tmp_path / "cline-core").exists()

    def test_root_is_not_renamed(self, tmp_path: Path, names: ProjectNames) -> None:
        """Only directories below the root are processed."""
        root = tmp_path / "cline"
        (root / "src").mkdir(parents=True)
        assert rename_directories(root, names) == []
        assert root.exists()

    def test_ignored_directories_skipped(self, tmp_path: Path, names: ProjectNames) -> None:
        """Directories under node_modules are never renamed."""
        vendored = tmp_path / "node_modules" / "cline"
        vendored.mkdir(parents=True)
        assert rename_directories(tmp_path, names) == []
        assert vendored.exists()

    def test_custom_ignore_pattern(self, tmp_path: Path, names: ProjectNames) -> None:
        """Rule-supplied ignore patterns apply to directories too."""
        (tmp_path / "fixtures" / "cline").mkdir(parents=True)
        rules = RenameRules(ignore_patterns=["fixtures"])
        assert rename_directories(tmp_path, names, rules) == []

    def test_collision_raises(self, tmp_path: Path, names: ProjectNames) -> None:
        """Renaming onto an existing directory fails."""
        (tmp_path / "cline").mkdir()
        (tmp_path / "myapp").mkdir()
        with pytest.raises(FileExistsError):
            rename_directories(tmp_path, names)
