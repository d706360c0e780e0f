"""
Task functions behind the dist-ci commands.

Each task returns a Result instead of raising, so the CLI only has to report
and pick an exit code.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .config import DEFAULT_LOCATION, WorkflowLocation
from .errors import WorkflowError
from .matrix import BuildMatrix
from .output import dbg, get_output_manager, out
from .result import Err, Ok, Result
from .workflow import ReleaseWorkflow, target_args
from .writer import generate_github_ci, workflow_is_current

logger = logging.getLogger(__name__)


def _report_skipped(matrix: BuildMatrix) -> tuple[str, ...]:
    for skipped in matrix.skipped:
        logger.warning(skipped.reason)
    return tuple(skipped.reason for skipped in matrix.skipped)


def generate_release_ci(
    *,
    workspace: str | Path,
    targets: Sequence[str],
    check_only: bool = False,
    location: WorkflowLocation = DEFAULT_LOCATION,
) -> Result[Path]:
    """
    Generate the release workflow in `workspace`.

    Args:
        workspace: Workspace root. The file goes to .github/workflows/release.yml.
        targets: Build targets, in order.
        check_only: If True, only check that the file on disk is up to date.
                    Returns Err if it would change.
        location: Override the workflow directory and filename.

    Returns:
        The path of the workflow file. Targets without a runner are reported
        as warnings on the result and through logging.

    Examples:
        dist-ci generate --target x86_64-unknown-linux-gnu --target aarch64-apple-darwin
        dist-ci generate --check --target x86_64-unknown-linux-gnu

    """
    output = get_output_manager()
    path = location.path(workspace)
    dbg(f"targets: {list(targets)}")

    if check_only:
        try:
            current = workflow_is_current(workspace, targets, location=location)
        except (OSError, UnicodeError) as e:
            output.file_status(path, "stale")
            return Err(f"failed to check {path}: {e}")
        if current:
            output.file_status(path, "unchanged")
            return Ok(path)
        output.file_status(path, "stale")
        return Err(f"{path} is out of date.\nRun without --check to regenerate it.")

    try:
        report = generate_github_ci(workspace, targets, location=location)
    except WorkflowError as e:
        cause = f" ({e.__cause__})" if e.__cause__ else ""
        return Err(f"{e}{cause}")

    warnings = _report_skipped(report.matrix)
    output.file_status(report.path, report.status)
    dbg(f"{report.workflow}, env: {target_args(targets)!r}")
    return Ok(report.path, warnings=warnings)


def render_release_ci(*, targets: Sequence[str], stream: TextIO) -> Result[None]:
    """Write the release workflow to `stream` without touching the filesystem."""
    workflow = ReleaseWorkflow.for_targets(targets)
    warnings = _report_skipped(workflow.matrix)
    try:
        workflow.write_to(stream)
    except (OSError, UnicodeError) as e:
        return Err(f"failed to write workflow content: {e}")
    return Ok(None, warnings=warnings)


def summarize(targets: Sequence[str]) -> None:
    """Print which runner each target builds on."""
    matrix = ReleaseWorkflow.for_targets(targets).matrix
    for entry in matrix:
        out(f"  {entry.target} -> {entry.os}")
    for skipped in matrix.skipped:
        out(f"  {skipped.target} -> (skipped)")
