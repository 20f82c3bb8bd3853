"""Tests for recursive template tree materialization."""

from pathlib import Path

import pytest

from boilerkit.scaffold.render import strip_template_suffix
from boilerkit.scaffold.tree import RENAME_FILES, destination_name, materialize


def _relative_files(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """A small template tree with nesting, a rename and a template file."""
    src = tmp_path / "template"
    (src / "src" / "components").mkdir(parents=True)
    (src / "public").mkdir()
    (src / "index.html").write_text("<html></html>")
    (src / "_gitignore").write_text("node_modules\n")
    (src / "src" / "main.ts").write_text("console.log('hi')\n")
    (src / "src" / "components" / "App.vue").write_text("<template/>")
    (src / "src" / "version.ts.mustache").write_text("export const v = '{{now}}'\n")
    (src / "public" / "icon.bin").write_bytes(b"\x00\x01\x02")
    (src / "package.json").write_text("{}")
    return src


class TestRenameTable:
    """Tests for the static rename table."""

    def test_gitignore_is_renamed(self) -> None:
        """Test _gitignore ships as .gitignore."""
        assert destination_name("_gitignore") == ".gitignore"

    def test_template_suffix_does_not_hide_rename(self) -> None:
        """Test a suffixed _gitignore template maps to .gitignore."""
        assert destination_name("_gitignore.mustache") == ".gitignore"
        assert destination_name("README.md.mustache") == "README.md.mustache"

    def test_other_names_unchanged(self) -> None:
        """Test names outside the table are kept."""
        assert destination_name("main.ts") == "main.ts"

    def test_table_is_read_only(self) -> None:
        """Test the rename table cannot be mutated."""
        with pytest.raises(TypeError):
            RENAME_FILES["x"] = "y"  # type: ignore[index]


class TestMaterialize:
    """Tests for materialize."""

    def test_structural_round_trip(self, template_tree: Path, tmp_path: Path) -> None:
        """Test destination paths mirror the source with renames and suffixes applied."""
        dest = tmp_path / "out"

        materialize(template_tree, dest, {"now": "2024.01.02"})

        expected = set()
        for rel in _relative_files(template_tree):
            parts = rel.split("/")
            parts = [destination_name(part) for part in parts]
            expected.add(strip_template_suffix(Path(*parts)).as_posix())
        assert _relative_files(dest) == expected

    def test_creates_missing_destination(self, template_tree: Path, tmp_path: Path) -> None:
        """Test intermediate destination directories are created."""
        dest = tmp_path / "a" / "b" / "c"
        materialize(template_tree, dest, {})
        assert (dest / "index.html").is_file()

    def test_renders_nested_templates(self, template_tree: Path, tmp_path: Path) -> None:
        """Test variables reach template files at any depth."""
        dest = tmp_path / "out"
        materialize(template_tree, dest, {"now": "2024.01.02"})
        content = (dest / "src" / "version.ts").read_text()
        assert content == "export const v = '2024.01.02'\n"

    def test_rename_applies_at_depth(self, tmp_path: Path) -> None:
        """Test renames are applied in nested directories too."""
        src = tmp_path / "template"
        (src / "sub").mkdir(parents=True)
        (src / "sub" / "_gitignore").write_text("dist\n")

        materialize(src, tmp_path / "out", {})

        assert (tmp_path / "out" / "sub" / ".gitignore").read_text() == "dist\n"

    def test_rendered_gitignore_template_is_renamed(self, tmp_path: Path) -> None:
        """Test a _gitignore template is rendered and shipped as .gitignore."""
        src = tmp_path / "template"
        src.mkdir()
        (src / "_gitignore.mustache").write_text("/{{name}}-dist\n")

        written = materialize(src, tmp_path / "out", {"name": "app"})

        assert written == [tmp_path / "out" / ".gitignore"]
        assert (tmp_path / "out" / ".gitignore").read_text() == "/app-dist\n"
        assert not (tmp_path / "out" / "_gitignore").exists()

    def test_exclude_skips_top_level_entries(
        self, template_tree: Path, tmp_path: Path
    ) -> None:
        """Test excluded names are not written."""
        dest = tmp_path / "out"
        written = materialize(template_tree, dest, {}, exclude=("package.json",))
        assert not (dest / "package.json").exists()
        assert dest / "index.html" in written

    def test_returns_every_written_file(
        self, template_tree: Path, tmp_path: Path
    ) -> None:
        """Test the written paths match the files on disk."""
        dest = tmp_path / "out"
        written = materialize(template_tree, dest, {})
        on_disk = {p for p in dest.rglob("*") if p.is_file()}
        assert set(written) == on_disk

    def test_missing_source_raises(self, tmp_path: Path) -> None:
        """Test an unreadable source propagates as an OSError."""
        with pytest.raises(OSError):
            materialize(tmp_path / "missing", tmp_path / "out", {})
