"""Recursive materialization of a template tree."""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from pathlib import Path
from types import MappingProxyType

from boilerkit.scaffold.render import (
    TemplateRenderer,
    render_entry,
    strip_template_suffix,
)

logger = logging.getLogger(__name__)

# Names that cannot ship literally inside a published template package.
RENAME_FILES: Mapping[str, str] = MappingProxyType(
    {
        "_gitignore": ".gitignore",
    }
)


def destination_name(name: str) -> str:
    """Return the destination name for a template entry.

    Renames match the name without its template suffix, so
    ``_gitignore.mustache`` is rendered to ``.gitignore``.
    """
    stripped = strip_template_suffix(Path(name)).name
    return RENAME_FILES.get(stripped, name)


def materialize(
    src_dir: Path,
    dest_dir: Path,
    variables: Mapping[str, str],
    exclude: Collection[str] = (),
    renderer: TemplateRenderer | None = None,
) -> list[Path]:
    """Reproduce ``src_dir`` under ``dest_dir``.

    Args:
        src_dir: Template tree to read.
        dest_dir: Destination directory, created with parents if missing.
        variables: Values substituted into ``.mustache`` files.
        exclude: Entry names skipped at the top level of ``src_dir``.
        renderer: Shared renderer; one is created if omitted.

    Returns:
        Every file path written, in processing order.
    """
    renderer = renderer or TemplateRenderer()
    dest_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for entry in sorted(src_dir.iterdir(), key=lambda p: p.name):
        if entry.name in exclude:
            continue
        target = dest_dir / destination_name(entry.name)
        written.extend(render_entry(entry, target, variables, renderer=renderer))

    logger.debug("Materialized %s into %s (%d files)", src_dir, dest_dir, len(written))
    return written
