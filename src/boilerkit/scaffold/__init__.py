"""Project scaffolding engine."""

from boilerkit.scaffold.destination import (
    DestinationState,
    empty_dir,
    inspect_destination,
    is_empty,
    prepare_destination,
)
from boilerkit.scaffold.manifest import load_manifest, merge_manifest, write_manifest
from boilerkit.scaffold.orchestrator import ScaffoldConfig, ScaffoldResult, scaffold
from boilerkit.scaffold.render import TemplateRenderer, render_entry
from boilerkit.scaffold.tree import RENAME_FILES, materialize
from boilerkit.scaffold.variables import (
    build_variables,
    format_compact_date,
    format_year,
)

__all__ = [
    "DestinationState",
    "RENAME_FILES",
    "ScaffoldConfig",
    "ScaffoldResult",
    "TemplateRenderer",
    "build_variables",
    "empty_dir",
    "format_compact_date",
    "format_year",
    "inspect_destination",
    "is_empty",
    "load_manifest",
    "materialize",
    "merge_manifest",
    "prepare_destination",
    "render_entry",
    "scaffold",
    "write_manifest",
]
