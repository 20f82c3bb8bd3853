"""Package manifest (package.json) merging."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from boilerkit.errors import ManifestError

MANIFEST_FILENAME = "package.json"
DEFAULT_MANIFEST_AUTHOR = "*"


def load_manifest(path: Path) -> dict[str, Any]:
    """Parse a template manifest.

    Raises:
        OSError: If the file cannot be read.
        ManifestError: If the content is not a JSON object.
    """
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(path, str(e)) from e
    if not isinstance(data, dict):
        raise ManifestError(path, "top level is not an object")
    result: dict[str, Any] = data
    return result


def merge_manifest(manifest: dict[str, Any], name: str, author: str) -> dict[str, Any]:
    """Return a copy of ``manifest`` with ``name`` and ``author`` replaced.

    Every other field, nested ones included, is passed through and the
    original key order is kept.
    """
    merged = dict(manifest)
    merged["name"] = name
    merged["author"] = author or DEFAULT_MANIFEST_AUTHOR
    return merged


def dump_manifest(manifest: dict[str, Any]) -> str:
    """Serialize with two-space indentation."""
    return json.dumps(manifest, indent=2, ensure_ascii=False)


def write_manifest(dest_dir: Path, manifest: dict[str, Any]) -> Path:
    """Write ``manifest`` as ``dest_dir/package.json``."""
    path = dest_dir / MANIFEST_FILENAME
    path.write_text(dump_manifest(manifest), encoding="utf-8")
    return path
