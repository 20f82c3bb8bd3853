"""Tests for template file rendering."""

from pathlib import Path

import pytest

from boilerkit.errors import TemplateRenderError
from boilerkit.scaffold.render import (
    TemplateRenderer,
    is_template_file,
    render_entry,
    strip_template_suffix,
)


class TestTemplateSuffix:
    """Tests for suffix detection and stripping."""

    def test_suffix_is_case_insensitive(self) -> None:
        """Test that .MUSTACHE is recognised."""
        assert is_template_file(Path("README.md.MUSTACHE"))
        assert is_template_file(Path("LICENSE.mustache"))
        assert not is_template_file(Path("main.ts"))

    def test_strip_suffix(self) -> None:
        """Test the suffix is removed and other names are untouched."""
        assert strip_template_suffix(Path("a/README.md.mustache")) == Path("a/README.md")
        assert strip_template_suffix(Path("a/LICENSE.Mustache")) == Path("a/LICENSE")
        assert strip_template_suffix(Path("a/main.ts")) == Path("a/main.ts")


class TestTemplateRenderer:
    """Tests for TemplateRenderer."""

    def test_substitutes_named_placeholders(self) -> None:
        """Test simple variable substitution."""
        renderer = TemplateRenderer()
        result = renderer.render_string(
            "{{name}} by {{author}} ({{nowYear}})",
            {"name": "my-app", "author": "Jane", "nowYear": "2024"},
        )
        assert result == "my-app by Jane (2024)"

    def test_missing_keys_render_empty(self) -> None:
        """Test that unknown placeholders become empty strings."""
        renderer = TemplateRenderer()
        assert renderer.render_string("[{{missing}}]", {}) == "[]"

    def test_no_html_escaping(self) -> None:
        """Test that values are inserted verbatim."""
        renderer = TemplateRenderer()
        result = renderer.render_string("{{author}}", {"author": "<Jane & Co>"})
        assert result == "<Jane & Co>"

    def test_keeps_trailing_newline(self) -> None:
        """Test that a trailing newline survives rendering."""
        renderer = TemplateRenderer()
        assert renderer.render_string("{{name}}\n", {"name": "x"}) == "x\n"

    def test_block_and_comment_syntax_is_literal(self) -> None:
        """Test brace-percent and brace-hash text passes through untouched."""
        renderer = TemplateRenderer()
        text = "{#if ready}<p>{{name}}</p>{/if} width: {%w}; {# note #}"
        result = renderer.render_string(text, {"name": "app"})
        assert result == "{#if ready}<p>app</p>{/if} width: {%w}; {# note #}"

    def test_filters_are_not_available(self) -> None:
        """Test expressions beyond a plain name are rejected."""
        renderer = TemplateRenderer()
        with pytest.raises(TemplateRenderError):
            renderer.render_string("{{ name | upper }}", {"name": "x"})

    def test_render_error_names_the_file(self, tmp_path: Path) -> None:
        """Test the failing template path is reported."""
        src = tmp_path / "bad.txt.mustache"
        src.write_text("{{ name | upper }}", encoding="utf-8")
        with pytest.raises(TemplateRenderError) as exc_info:
            TemplateRenderer().render_file(src, {"name": "x"})
        assert exc_info.value.path == src
        assert str(src) in str(exc_info.value)


class TestRenderEntry:
    """Tests for render_entry."""

    def test_renders_template_file_and_strips_suffix(self, tmp_path: Path) -> None:
        """Test a name-only template renders to exactly the name."""
        src = tmp_path / "src" / "NAME.mustache"
        src.parent.mkdir()
        src.write_text("{{name}}", encoding="utf-8")
        dest_dir = tmp_path / "out"
        dest_dir.mkdir()

        written = render_entry(src, dest_dir / "NAME.mustache", {"name": "my-app"})

        assert written == [dest_dir / "NAME"]
        assert (dest_dir / "NAME").read_text(encoding="utf-8") == "my-app"
        assert not (dest_dir / "NAME.mustache").exists()

    def test_copies_binary_files_verbatim(self, tmp_path: Path) -> None:
        """Test non-template files are copied byte for byte."""
        payload = bytes(range(256)) + b"{{name}}"
        src = tmp_path / "logo.png"
        src.write_bytes(payload)
        dest = tmp_path / "copy.png"

        render_entry(src, dest, {"name": "ignored"})

        assert dest.read_bytes() == payload

    def test_directory_recurses(self, tmp_path: Path) -> None:
        """Test a directory source is materialized recursively."""
        src = tmp_path / "src"
        (src / "nested").mkdir(parents=True)
        (src / "nested" / "file.txt").write_text("plain")
        (src / "nested" / "hello.txt.mustache").write_text("hi {{name}}")

        written = render_entry(src, tmp_path / "out", {"name": "bob"})

        assert (tmp_path / "out" / "nested" / "file.txt").read_text() == "plain"
        assert (tmp_path / "out" / "nested" / "hello.txt").read_text() == "hi bob"
        assert len(written) == 2

    def test_renders_svelte_component(self, tmp_path: Path) -> None:
        """Test Svelte block syntax survives rendering of a component template."""
        src = tmp_path / "App.svelte.mustache"
        src.write_text(
            "<h1>{{name}}</h1>\n{#if ready}<p>ok</p>{/if}\n"
            "{#each items as item}<li>{item}</li>{/each}\n",
            encoding="utf-8",
        )

        written = render_entry(src, tmp_path / "App.svelte.mustache", {"name": "app"})

        assert written == [tmp_path / "App.svelte"]
        assert (tmp_path / "App.svelte").read_text(encoding="utf-8") == (
            "<h1>app</h1>\n{#if ready}<p>ok</p>{/if}\n"
            "{#each items as item}<li>{item}</li>{/each}\n"
        )
