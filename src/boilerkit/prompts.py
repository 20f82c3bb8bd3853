"""Interactive resolution of a scaffold configuration.

The flow is a fixed sequence of steps over a mutable draft. Each step looks
at the answers collected so far and either returns the next question or None
when nothing needs asking. Answers are applied back to the draft before the
next step runs, so later questions can depend on earlier ones.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from boilerkit.errors import CancelledError
from boilerkit.naming import (
    format_target_dir,
    get_project_name,
    is_valid_package_name,
    to_valid_package_name,
)
from boilerkit.scaffold.destination import DestinationState, inspect_destination
from boilerkit.scaffold.orchestrator import ScaffoldConfig
from boilerkit.templates import (
    Framework,
    get_framework_by_name,
    is_known_template,
    list_frameworks,
)

DEFAULT_TARGET_DIR = "vite-project"
DEFAULT_AUTHOR = "no one"
UNSET_AUTHOR = "**"  # author when the author question is never asked

QuestionKind = Literal["text", "confirm", "select"]


@dataclass(frozen=True)
class Choice:
    """One option of a select question."""

    title: str
    value: Any
    style: str = "default"


@dataclass(frozen=True)
class Question:
    """A single prompt to show the user."""

    name: str
    kind: QuestionKind
    message: str
    default: Any = None
    choices: tuple[Choice, ...] = ()
    # Returns an error message for invalid answers, None when valid.
    validate: Callable[[str], str | None] | None = None


@dataclass
class ScaffoldDraft:
    """Partially resolved configuration.

    Seeded from command-line flags and user config, then completed by the
    prompt steps.
    """

    target_dir: str | None = None
    template: str | None = None
    author: str | None = None
    default_author: str | None = None
    package_name: str | None = None
    overwrite: bool | None = None
    framework: Framework | None = None
    cwd: Path = field(default_factory=Path.cwd)
    target_prompted: bool = False

    @property
    def project_name(self) -> str:
        return get_project_name(self.target_dir or DEFAULT_TARGET_DIR, self.cwd)


@dataclass(frozen=True)
class Step:
    """A question factory paired with the function applying its answer."""

    ask: Callable[[ScaffoldDraft], Question | None]
    apply: Callable[[ScaffoldDraft, Any], None]


# -- project name -----------------------------------------------------------


def _ask_project_name(draft: ScaffoldDraft) -> Question | None:
    if draft.target_dir:
        return None
    return Question(
        name="projectName",
        kind="text",
        message="Project name",
        default=DEFAULT_TARGET_DIR,
    )


def _apply_project_name(draft: ScaffoldDraft, answer: str) -> None:
    draft.target_dir = format_target_dir(answer) or DEFAULT_TARGET_DIR
    draft.target_prompted = True


# -- overwrite --------------------------------------------------------------


def _ask_overwrite(draft: ScaffoldDraft) -> Question | None:
    if draft.overwrite is True:
        return None
    target = draft.target_dir or DEFAULT_TARGET_DIR
    if inspect_destination(draft.cwd / target) is not DestinationState.NON_EMPTY:
        return None
    where = "Current directory" if target == "." else f'Target directory "{target}"'
    return Question(
        name="overwrite",
        kind="confirm",
        message=f"{where} is not empty. Remove existing files and continue?",
        default=False,
    )


def _apply_overwrite(draft: ScaffoldDraft, answer: bool) -> None:
    if answer is not True:
        raise CancelledError()
    draft.overwrite = True


# -- author -----------------------------------------------------------------


def _ask_author(draft: ScaffoldDraft) -> Question | None:
    if draft.author is not None or not draft.target_prompted:
        return None
    return Question(
        name="author",
        kind="text",
        message="Author",
        default=draft.default_author or DEFAULT_AUTHOR,
    )


def _apply_author(draft: ScaffoldDraft, answer: str) -> None:
    draft.author = format_target_dir(answer) or DEFAULT_AUTHOR


# -- package name -----------------------------------------------------------


def _validate_package_name(value: str) -> str | None:
    if is_valid_package_name(value):
        return None
    return "Invalid package.json name"


def _ask_package_name(draft: ScaffoldDraft) -> Question | None:
    if draft.package_name is not None or is_valid_package_name(draft.project_name):
        return None
    return Question(
        name="packageName",
        kind="text",
        message="Package name",
        default=to_valid_package_name(draft.project_name),
        validate=_validate_package_name,
    )


def _apply_package_name(draft: ScaffoldDraft, answer: str) -> None:
    draft.package_name = answer


# -- framework / variant ----------------------------------------------------


def _ask_framework(draft: ScaffoldDraft) -> Question | None:
    if is_known_template(draft.template) or _named_framework(draft):
        return None
    if draft.template:
        message = f'"{draft.template}" isn\'t a valid template. Please choose from below'
    else:
        message = "Framework"
    return Question(
        name="framework",
        kind="select",
        message=message,
        default=0,
        choices=tuple(
            Choice(title=fw.name, value=fw, style=fw.color) for fw in list_frameworks()
        ),
    )


def _apply_framework(draft: ScaffoldDraft, answer: Framework) -> None:
    draft.framework = answer
    if not answer.variants:
        draft.template = answer.name


def _named_framework(draft: ScaffoldDraft) -> Framework | None:
    """Framework named directly by the template option, e.g. ``react``."""
    if not draft.template:
        return None
    return get_framework_by_name(draft.template)


def _ask_variant(draft: ScaffoldDraft) -> Question | None:
    framework = draft.framework or _named_framework(draft)
    if framework is None or not framework.variants:
        return None
    return Question(
        name="variant",
        kind="select",
        message="Language",
        default=0,
        choices=tuple(
            Choice(title=v.name, value=v.name, style=v.color)
            for v in framework.variants
        ),
    )


def _apply_variant(draft: ScaffoldDraft, answer: str) -> None:
    draft.template = answer


STEPS: tuple[Step, ...] = (
    Step(_ask_project_name, _apply_project_name),
    Step(_ask_overwrite, _apply_overwrite),
    Step(_ask_author, _apply_author),
    Step(_ask_package_name, _apply_package_name),
    Step(_ask_framework, _apply_framework),
    Step(_ask_variant, _apply_variant),
)


def finalize(draft: ScaffoldDraft) -> ScaffoldConfig:
    """Freeze a completed draft into a validated ScaffoldConfig."""
    return ScaffoldConfig.create(
        target_dir=draft.target_dir or DEFAULT_TARGET_DIR,
        package_name=draft.package_name or draft.project_name,
        author=draft.author or draft.default_author or UNSET_AUTHOR,
        template=draft.template or "",
        overwrite=draft.overwrite is True,
    )


def run_prompts(
    draft: ScaffoldDraft, ask: Callable[[Question], Any]
) -> ScaffoldConfig:
    """Walk every step in order, asking only the questions still open.

    Args:
        draft: Values known before prompting.
        ask: Presents a question and returns the (validated) answer.

    Raises:
        CancelledError: If the user declines to overwrite a non-empty target.
    """
    for step in STEPS:
        question = step.ask(draft)
        if question is None:
            continue
        step.apply(draft, ask(question))
    return finalize(draft)
