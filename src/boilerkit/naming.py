"""Package name validation and target directory normalisation."""

from __future__ import annotations

import os
import re
from pathlib import Path

_PACKAGE_NAME_RE = re.compile(
    r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$"
)
_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_DOT_RE = re.compile(r"^[._]")
_INVALID_CHARS_RE = re.compile(r"[^a-z0-9-~]+")


def is_valid_package_name(name: str) -> bool:
    """Check whether ``name`` is usable as a package.json ``name``."""
    return _PACKAGE_NAME_RE.match(name) is not None


def to_valid_package_name(raw: str) -> str:
    """Coerce ``raw`` into a package name.

    Never fails, but the result may still be empty or hyphen-only, so callers
    must validate it again.
    """
    name = raw.strip().lower()
    name = _WHITESPACE_RE.sub("-", name)
    name = _LEADING_DOT_RE.sub("", name, count=1)
    return _INVALID_CHARS_RE.sub("-", name)


def format_target_dir(raw: str | None) -> str | None:
    """Trim whitespace and trailing path separators from a directory argument."""
    if raw is None:
        return None
    separators = "/" + (os.sep if os.sep != "/" else "")
    return raw.strip().rstrip(separators)


def get_project_name(target_dir: str, cwd: Path | None = None) -> str:
    """Return the project name implied by ``target_dir``.

    ``.`` means the current directory, so its basename is used.
    """
    if target_dir == ".":
        return (cwd or Path.cwd()).resolve().name
    return target_dir
