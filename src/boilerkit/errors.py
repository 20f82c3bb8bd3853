"""Exceptions raised while resolving and scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class BoilerkitError(Exception):
    """Base class for boilerkit errors."""


class ValidationError(BoilerkitError, ValueError):
    """Raised when a user-supplied value fails validation."""

    def __init__(self, field: str, value: str, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field}: {value!r}")


class TemplateNotFoundError(ValidationError):
    """Raised when a template id is not in the catalog."""

    def __init__(self, template_id: str) -> None:
        super().__init__(
            "template", template_id, f"'{template_id}' isn't a valid template"
        )


class CancelledError(BoilerkitError):
    """Raised when the user declines a confirmation or interrupts a prompt."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class ManifestError(BoilerkitError):
    """Raised when a template's package manifest cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Malformed manifest {path}: {reason}")


class TemplateRenderError(BoilerkitError):
    """Raised when a template file holds something other than plain placeholders."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        where = f" {path}" if path is not None else ""
        super().__init__(f"Cannot render template{where}: {reason}")
