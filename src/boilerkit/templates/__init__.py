"""Boilerplate catalog and template asset discovery."""

from boilerkit.templates.base import Framework, TemplateDescriptor, Variant
from boilerkit.templates.catalog import (
    BOILERPLATES,
    TEMPLATES,
    get_framework_by_name,
    is_known_template,
    list_frameworks,
    list_template_ids,
    resolve_template,
)
from boilerkit.templates.loader import (
    get_boilerplates_path,
    get_package_templates_path,
    get_template_path,
    get_variables_path,
)

__all__ = [
    "BOILERPLATES",
    "Framework",
    "TEMPLATES",
    "TemplateDescriptor",
    "Variant",
    "get_boilerplates_path",
    "get_framework_by_name",
    "get_package_templates_path",
    "get_template_path",
    "get_variables_path",
    "is_known_template",
    "list_frameworks",
    "list_template_ids",
    "resolve_template",
]
