"""Per-entry copy-or-render decisions.

Files whose name ends in ``.mustache`` have their ``{{name}}`` placeholders
filled from the project variables and are written without the suffix.
Everything else is copied byte for byte. Directories recurse through
:func:`materialize`.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Mapping
from pathlib import Path

from jinja2 import Environment, TemplateError

from boilerkit.errors import TemplateRenderError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".mustache"

# Block and comment markers no source file contains, so ``{%`` and ``{#``
# (Svelte blocks, CSS, shell snippets) stay literal text.
_UNUSED_BLOCK_START = "\x00{%"
_UNUSED_BLOCK_END = "%}\x00"
_UNUSED_COMMENT_START = "\x00{#"
_UNUSED_COMMENT_END = "#}\x00"


def is_template_file(path: Path) -> bool:
    """Check whether ``path`` carries the template suffix (case-insensitive)."""
    return path.name.lower().endswith(TEMPLATE_SUFFIX)


def strip_template_suffix(path: Path) -> Path:
    """Drop the template suffix from ``path`` if present."""
    if not is_template_file(path):
        return path
    return path.with_name(path.name[: -len(TEMPLATE_SUFFIX)])


class TemplateRenderer:
    """Renders template files with a flat variable mapping.

    Only ``{{name}}`` placeholders are live. There are no statements,
    comments, filters or globals. Unknown names render as an empty string and
    nothing is HTML-escaped, since output is source code.
    """

    def __init__(self) -> None:
        self.env = Environment(
            block_start_string=_UNUSED_BLOCK_START,
            block_end_string=_UNUSED_BLOCK_END,
            comment_start_string=_UNUSED_COMMENT_START,
            comment_end_string=_UNUSED_COMMENT_END,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self.env.filters.clear()
        self.env.tests.clear()
        self.env.globals.clear()

    def render_string(
        self,
        template_string: str,
        variables: Mapping[str, str],
        source: Path | None = None,
    ) -> str:
        """Render an inline template string.

        Raises:
            TemplateRenderError: If a placeholder is not a plain name.
        """
        try:
            template = self.env.from_string(template_string)
            return template.render(**variables)
        except TemplateError as e:
            raise TemplateRenderError(source, str(e)) from e

    def render_file(self, src: Path, variables: Mapping[str, str]) -> str:
        """Read ``src`` as UTF-8 text and render it."""
        return self.render_string(src.read_text(encoding="utf-8"), variables, src)


def render_entry(
    src: Path,
    dest: Path,
    variables: Mapping[str, str],
    renderer: TemplateRenderer | None = None,
) -> list[Path]:
    """Materialize one source entry at ``dest``.

    Returns the file paths written (several for a directory).
    """
    if src.is_dir():
        from boilerkit.scaffold.tree import materialize

        return materialize(src, dest, variables, renderer=renderer)

    if is_template_file(src):
        renderer = renderer or TemplateRenderer()
        content = renderer.render_file(src, variables)
        dest = strip_template_suffix(dest)
        dest.write_text(content, encoding="utf-8")
        logger.debug("Rendered %s -> %s", src, dest)
        return [dest]

    shutil.copyfile(src, dest)
    logger.debug("Copied %s -> %s", src, dest)
    return [dest]
