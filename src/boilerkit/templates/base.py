"""Boilerplate catalog definitions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Variant:
    """A language variant of a framework, e.g. ``react-ts``."""

    name: str  # leaf id, e.g. "react-ts"
    display: str  # e.g. "TypeScript"
    color: str = "default"  # rich style used when listing


@dataclass(frozen=True)
class Framework:
    """A framework family owning an ordered set of variants."""

    name: str  # e.g. "react"
    color: str = "default"
    variants: tuple[Variant, ...] = ()


@dataclass(frozen=True)
class TemplateDescriptor:
    """A resolved, directly selectable template."""

    id: str
    display: str
    framework: str
    variant: str | None = None
