"""Configuration schema for boilerkit."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class BoilerkitConfig:
    """User defaults for scaffolding.

    None values indicate "not set" and fall through to lower-precedence
    layers or built-in behaviour. Command-line flags always win.
    """

    author: str | None = None
    template: str | None = None
    package_manager: str | None = None
    templates_dir: str | None = None  # alternative boilerplates root

    def merge(self, other: BoilerkitConfig) -> BoilerkitConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new BoilerkitConfig instance.
        """
        return BoilerkitConfig(
            author=other.author if other.author is not None else self.author,
            template=other.template if other.template is not None else self.template,
            package_manager=(
                other.package_manager
                if other.package_manager is not None
                else self.package_manager
            ),
            templates_dir=(
                other.templates_dir
                if other.templates_dir is not None
                else self.templates_dir
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoilerkitConfig:
        """Create from a dictionary. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {
            key: str(value)
            for key, value in data.items()
            if key in known and value is not None
        }
        return cls(**values)


DEFAULT_CONFIG = BoilerkitConfig()
