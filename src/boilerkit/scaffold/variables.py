"""Substitution variables available to template files."""

from __future__ import annotations

from datetime import date, datetime


def format_compact_date(value: date) -> str:
    """Format as ``yyyy.MM.dd``."""
    return f"{value.year:04d}.{value.month:02d}.{value.day:02d}"


def format_year(value: date) -> str:
    """Format as ``yyyy``."""
    return f"{value.year:04d}"


def build_variables(
    name: str, author: str, now: date | None = None
) -> dict[str, str]:
    """Build the variable map rendered into ``.mustache`` files."""
    if now is None:
        now = datetime.now()
    return {
        "name": name,
        "author": author,
        "now": format_compact_date(now),
        "nowYear": format_year(now),
    }
