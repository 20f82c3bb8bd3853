"""Locations of bundled template trees."""

from __future__ import annotations

from pathlib import Path

from boilerkit.errors import TemplateNotFoundError
from boilerkit.templates.catalog import is_known_template

BOILERPLATES_DIRNAME = "boilerplates"
VARIABLES_DIRNAME = "variables"
TEMPLATE_DIR_PREFIX = "template-"


def get_package_templates_path() -> Path:
    """Get path to the package-bundled template assets."""
    return Path(__file__).parent


def get_boilerplates_path() -> Path:
    """Get path to the root holding one ``template-<id>`` tree per leaf id."""
    return get_package_templates_path() / BOILERPLATES_DIRNAME


def get_variables_path() -> Path:
    """Get path to the cross-template variable files."""
    return get_package_templates_path() / VARIABLES_DIRNAME


def get_template_path(template_id: str, base_path: Path | None = None) -> Path:
    """Return the source tree for a leaf template.

    Args:
        template_id: A leaf id such as ``react-ts``.
        base_path: Alternative boilerplates root (from configuration).

    Raises:
        TemplateNotFoundError: If ``template_id`` is not in the catalog.
    """
    if not is_known_template(template_id):
        raise TemplateNotFoundError(template_id)
    root = base_path if base_path is not None else get_boilerplates_path()
    return root / f"{TEMPLATE_DIR_PREFIX}{template_id}"
