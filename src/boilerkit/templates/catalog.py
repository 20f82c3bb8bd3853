"""Static registry of bundled boilerplates."""

from __future__ import annotations

from boilerkit.templates.base import Framework, TemplateDescriptor, Variant


def _js_ts(framework: str) -> tuple[Variant, ...]:
    return (
        Variant(name=f"{framework}-js", display="JavaScript", color="yellow"),
        Variant(name=f"{framework}-ts", display="TypeScript", color="blue"),
    )


BOILERPLATES: tuple[Framework, ...] = (
    Framework(name="lit", color="bright_blue", variants=_js_ts("lit")),
    Framework(name="preact", color="magenta", variants=_js_ts("preact")),
    Framework(name="react", color="cyan", variants=_js_ts("react")),
    Framework(name="svelte", color="red", variants=_js_ts("svelte")),
    Framework(name="vanilla", color="yellow", variants=_js_ts("vanilla")),
    Framework(name="vue", color="green", variants=_js_ts("vue")),
)


def _build_index(
    frameworks: tuple[Framework, ...],
) -> dict[str, TemplateDescriptor]:
    index: dict[str, TemplateDescriptor] = {}
    for framework in frameworks:
        if not framework.variants:
            descriptors = [
                TemplateDescriptor(
                    id=framework.name,
                    display=framework.name,
                    framework=framework.name,
                )
            ]
        else:
            descriptors = [
                TemplateDescriptor(
                    id=variant.name,
                    display=variant.display,
                    framework=framework.name,
                    variant=variant.display,
                )
                for variant in framework.variants
            ]
        for descriptor in descriptors:
            if descriptor.id in index:
                raise ValueError(f"Duplicate template id: {descriptor.id}")
            index[descriptor.id] = descriptor
    return index


_INDEX = _build_index(BOILERPLATES)

TEMPLATES: tuple[str, ...] = tuple(_INDEX)


def list_frameworks() -> tuple[Framework, ...]:
    """Return all frameworks in display order."""
    return BOILERPLATES


def list_template_ids() -> tuple[str, ...]:
    """Return every leaf template id across all frameworks."""
    return TEMPLATES


def is_known_template(template_id: str | None) -> bool:
    """Check whether ``template_id`` names a leaf template."""
    return template_id is not None and template_id in _INDEX


def resolve_template(template_id: str) -> TemplateDescriptor | None:
    """Look up a leaf template by id, or None if unknown."""
    return _INDEX.get(template_id)


def get_framework_by_name(name: str) -> Framework | None:
    """Find a framework by name (case-insensitive)."""
    name_lower = name.lower()
    for framework in BOILERPLATES:
        if framework.name == name_lower:
            return framework
    return None
