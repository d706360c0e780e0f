"""Command line interface for dist-ci."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

import click

from . import tasks
from .config import TARGETS_ENV, WORKSPACE_ENV, set_debug, targets_from_env
from .output import get_output_manager
from .result import Result


def _resolve_targets(targets: tuple[str, ...]) -> list[str]:
    """Targets from the command line, falling back to DIST_CI_TARGETS."""
    if targets:
        return list(targets)
    return targets_from_env()


def _finish(name: str, result: Result, start_time: float) -> None:
    """Report a task result and exit non-zero if it failed."""
    output = get_output_manager()
    elapsed = time.perf_counter() - start_time
    if result.failed:
        output.error(result.error or "unknown error")
    output.done(name, result.ok, elapsed)
    if result.failed:
        sys.exit(1)


target_option = click.option(
    "--target",
    "targets",
    multiple=True,
    help=f"Build target triple. Repeat for more targets. Defaults to ${TARGETS_ENV}.",
)


@click.group()
@click.option("--debug/--no-debug", default=False, help="Enable debug output")
def cli(debug: bool) -> None:
    """Generate the GitHub Actions release workflow for a set of build targets."""
    set_debug(debug)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


@cli.command()
@click.option(
    "--workspace",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    envvar=WORKSPACE_ENV,
    help="Workspace root. The workflow is written to .github/workflows/release.yml under it.",
)
@target_option
@click.option("--check", is_flag=True, default=False, help="Only check that the workflow is up to date")
def generate(workspace: Path, targets: tuple[str, ...], check: bool) -> None:
    """Write (or check) the release workflow."""
    start_time = time.perf_counter()
    result = tasks.generate_release_ci(
        workspace=workspace,
        targets=_resolve_targets(targets),
        check_only=check,
    )
    _finish("generate", result, start_time)


@cli.command()
@target_option
def render(targets: tuple[str, ...]) -> None:
    """Print the release workflow to stdout."""
    result = tasks.render_release_ci(
        targets=_resolve_targets(targets),
        stream=sys.stdout,
    )
    if result.failed:
        get_output_manager().error(result.error or "unknown error")
        sys.exit(1)


@cli.command("targets")
@target_option
def show_targets(targets: tuple[str, ...]) -> None:
    """Show which runner each target is built on."""
    tasks.summarize(_resolve_targets(targets))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
