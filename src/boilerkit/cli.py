"""Command-line interface for boilerkit."""

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from boilerkit import __version__
from boilerkit.config import (
    BoilerkitConfig,
    get_home_config_path,
    get_local_config_path,
    load_config,
)
from boilerkit.console import console
from boilerkit.errors import (
    CancelledError,
    ManifestError,
    TemplateRenderError,
    ValidationError,
)
from boilerkit.naming import format_target_dir, is_valid_package_name
from boilerkit.pkg_manager import detect_package_manager, next_steps
from boilerkit.prompts import Question, ScaffoldDraft, run_prompts
from boilerkit.scaffold import scaffold
from boilerkit.templates import list_frameworks

logger = logging.getLogger(__name__)


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"boilerkit [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _click_value_proc(question: Question) -> Callable[[str], str]:
    """Wrap a question validator so click re-prompts on invalid input."""

    def proc(value: str) -> str:
        if question.validate is not None:
            error = question.validate(value)
            if error:
                raise click.BadParameter(error)
        return value

    return proc


def ask_question(question: Question) -> Any:
    """Present a question with click prompts and return the answer."""
    if question.kind == "confirm":
        return click.confirm(question.message, default=bool(question.default))

    if question.kind == "select":
        console.print(f"[bold]{question.message}:[/bold]")
        for i, choice in enumerate(question.choices, 1):
            console.print(f"  {i}. [{choice.style}]{choice.title}[/{choice.style}]")
        index: int = click.prompt(
            "Select",
            type=click.IntRange(1, len(question.choices)),
            default=(question.default or 0) + 1,
        )
        return question.choices[index - 1].value

    return click.prompt(
        question.message,
        default=question.default,
        value_proc=_click_value_proc(question),
    )


def _print_templates() -> None:
    """List every framework and its selectable template ids."""
    console.print("[bold]Available templates:[/bold]")
    for framework in list_frameworks():
        console.print(f"\n  [{framework.color}]{framework.name}[/{framework.color}]")
        for variant in framework.variants:
            console.print(
                f"    [{variant.color}]{variant.name}[/{variant.color}]"
                f" [dim]({variant.display})[/dim]"
            )


def _show_config(config: BoilerkitConfig) -> None:
    """Display the effective configuration."""
    console.print("\n[bold]Current Effective Configuration:[/bold]")
    console.print(f"  [dim]Global: {get_home_config_path()}[/dim]")
    console.print(f"  [dim]Local: {get_local_config_path()}[/dim]")
    console.print()

    data = config.to_dict()
    if data:
        for key, value in data.items():
            console.print(f"  {key}: {value}")
    else:
        console.print("  [dim](using built-in defaults)[/dim]")


def _print_next_steps(root: Path, cwd: Path, pkg_manager: str) -> None:
    console.print("\nDone. Now run:\n")
    if root != cwd:
        console.print(f"  cd {os.path.relpath(root, cwd)}")
    for command in next_steps(pkg_manager):
        console.print(f"  {command}")
    console.print()


@click.command()
@click.argument("target_dir", required=False)
@click.option(
    "--template",
    "-t",
    help="Template id, e.g. react-ts. Prompts for a framework if missing or unknown.",
)
@click.option("--author", "-a", help="Author written into the project metadata.")
@click.option(
    "--name",
    "-n",
    "package_name",
    help="Package name (defaults to the project directory name).",
)
@click.option(
    "--overwrite",
    is_flag=True,
    help="Remove existing files in a non-empty target directory without asking.",
)
@click.option(
    "--list-templates",
    is_flag=True,
    help="List available templates and exit.",
)
@click.option(
    "--show-config",
    is_flag=True,
    help="Show current effective configuration and exit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
def main(
    target_dir: str | None,
    template: str | None,
    author: str | None,
    package_name: str | None,
    overwrite: bool,
    list_templates: bool,
    show_config: bool,
    verbose: bool,
) -> None:
    """Scaffold a new project from a bundled boilerplate.

    TARGET_DIR is created if missing. Without it, you are asked for a
    project name and author.

    Defaults for --author and --template can be set in
    ~/.boilerkit/config.yaml or ./.boilerkit/config.yaml.
    """
    _configure_logging(verbose)

    if list_templates:
        _print_templates()
        return

    config = load_config()
    if show_config:
        _show_config(config)
        return

    if package_name is not None and not is_valid_package_name(package_name):
        raise click.BadParameter(
            f"'{package_name}' is not a valid package.json name",
            param_hint="'--name'",
        )

    cwd = Path.cwd()
    draft = ScaffoldDraft(
        target_dir=format_target_dir(target_dir) or None,
        template=template or config.template,
        author=format_target_dir(author) or None,
        default_author=config.author,
        package_name=package_name,
        overwrite=True if overwrite else None,
        cwd=cwd,
    )
    boilerplates_path = (
        Path(config.templates_dir).expanduser() if config.templates_dir else None
    )

    try:
        scaffold_config = run_prompts(draft, ask_question)
        console.print(
            f"\nScaffolding project in {cwd / scaffold_config.target_dir}..."
        )
        result = scaffold(scaffold_config, cwd=cwd, boilerplates_path=boilerplates_path)
    except (CancelledError, click.Abort):
        console.print("[red]✖[/red] Operation cancelled")
        return
    except ValidationError as e:
        console.print(f"[red]✖[/red] {e}")
        raise SystemExit(2) from None
    except (ManifestError, TemplateRenderError, OSError) as e:
        logger.debug("Scaffolding failed", exc_info=True)
        console.print(f"[red]✗ Scaffolding failed:[/red] {e}")
        console.print(
            "[dim]The target directory may be partially written.[/dim]"
        )
        raise SystemExit(1) from None

    logger.info("Wrote %d files", len(result.files))
    pkg_manager = detect_package_manager(configured=config.package_manager)
    _print_next_steps(result.root, cwd, pkg_manager)
