"""Compose reconciliation, materialization and manifest merging."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from types import MappingProxyType

from boilerkit.errors import TemplateNotFoundError, ValidationError
from boilerkit.naming import is_valid_package_name
from boilerkit.scaffold.destination import prepare_destination
from boilerkit.scaffold.manifest import (
    MANIFEST_FILENAME,
    load_manifest,
    merge_manifest,
    write_manifest,
)
from boilerkit.scaffold.render import TemplateRenderer
from boilerkit.scaffold.tree import materialize
from boilerkit.scaffold.variables import build_variables
from boilerkit.templates import get_template_path, get_variables_path, is_known_template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaffoldConfig:
    """Fully resolved inputs for one scaffolding run.

    Build with :meth:`create` so the package name and template are validated
    and the variables computed exactly once.
    """

    target_dir: str
    package_name: str
    author: str
    template: str
    overwrite: bool = False
    variables: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def create(
        cls,
        target_dir: str,
        package_name: str,
        author: str,
        template: str,
        overwrite: bool = False,
        now: date | None = None,
    ) -> ScaffoldConfig:
        """Validate inputs and compute substitution variables.

        Raises:
            ValidationError: If ``package_name`` is not a valid package name.
            TemplateNotFoundError: If ``template`` is not a known leaf id.
        """
        if not is_valid_package_name(package_name):
            raise ValidationError("package name", package_name)
        if not is_known_template(template):
            raise TemplateNotFoundError(template)
        return cls(
            target_dir=target_dir,
            package_name=package_name,
            author=author,
            template=template,
            overwrite=overwrite,
            variables=MappingProxyType(build_variables(package_name, author, now)),
        )


@dataclass(frozen=True)
class ScaffoldResult:
    """Outcome of a successful run."""

    root: Path
    template: str
    files: tuple[Path, ...]


def _log_overrides(template_files: list[Path], variable_files: list[Path]) -> None:
    overridden = set(template_files) & set(variable_files)
    for path in sorted(overridden):
        logger.debug("Variable file overrides template file %s", path)


def scaffold(
    config: ScaffoldConfig,
    cwd: Path | None = None,
    boilerplates_path: Path | None = None,
    variables_path: Path | None = None,
) -> ScaffoldResult:
    """Materialize a new project as described by ``config``.

    Steps run strictly in order:
    1. Prepare the destination (create, or empty after confirmation)
    2. Materialize the template tree, without its manifest
    3. Materialize the cross-template variable files
    4. Write the merged manifest

    The template manifest is parsed before step 1, so a malformed manifest
    aborts before anything is removed or written. Failures after that leave
    the destination partially written; there is no rollback.

    Raises:
        CancelledError: If the destination is not empty and overwrite was
            not confirmed.
        ManifestError: If the template manifest is malformed.
        TemplateRenderError: If a template file holds more than placeholders.
        OSError: On any read or write failure, including a missing template
            tree or variable files directory.
    """
    root = (cwd or Path.cwd()) / config.target_dir
    template_dir = get_template_path(config.template, boilerplates_path)
    variables_dir = variables_path if variables_path is not None else get_variables_path()

    manifest = load_manifest(template_dir / MANIFEST_FILENAME)

    # 1. Destination
    prepare_destination(root, overwrite=config.overwrite)

    renderer = TemplateRenderer()

    # 2. Template tree
    logger.info("Materializing template %s into %s", config.template, root)
    template_files = materialize(
        template_dir,
        root,
        config.variables,
        exclude=(MANIFEST_FILENAME,),
        renderer=renderer,
    )

    # 3. Variable files, written last so they win on collision
    variable_files = materialize(
        variables_dir, root, config.variables, renderer=renderer
    )
    _log_overrides(template_files, variable_files)

    # 4. Manifest
    merged = merge_manifest(manifest, config.package_name, config.author)
    manifest_path = write_manifest(root, merged)

    files = [*template_files, *variable_files, manifest_path]
    return ScaffoldResult(
        root=root,
        template=config.template,
        files=tuple(dict.fromkeys(files)),
    )
