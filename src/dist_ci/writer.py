"""Writing the release workflow into a workspace."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_LOCATION, WorkflowLocation
from .errors import WorkflowDirError, WorkflowFileError, WorkflowWriteError
from .matrix import BuildMatrix
from .workflow import ReleaseWorkflow


@dataclass
class GenerationReport:
    """What a call to `generate_github_ci` did."""

    path: Path
    workflow: ReleaseWorkflow
    existed: bool

    @property
    def matrix(self) -> BuildMatrix:
        return self.workflow.matrix

    @property
    def status(self) -> str:
        return "overwritten" if self.existed else "created"


def generate_github_ci(
    workspace_dir: str | Path,
    targets: Sequence[str],
    *,
    location: WorkflowLocation = DEFAULT_LOCATION,
) -> GenerationReport:
    """
    Write the release workflow for `targets` under `workspace_dir`.

    Creates the workflow directory (and any missing parents), then creates or
    truncates the workflow file and writes the document into it. An existing
    file is overwritten without a backup.

    Args:
        workspace_dir: Root of the workspace.
        targets: Build targets, in the order they should appear.
        location: Where the file goes, relative to `workspace_dir`.

    Returns:
        A GenerationReport. Targets that could not be mapped to a runner are
        listed in `report.matrix.skipped`.

    Raises:
        WorkflowDirError: If the directory can't be created.
        WorkflowFileError: If the file can't be opened for writing.
        WorkflowWriteError: If writing the content fails. The file may be
            left partially written.

    """
    ci_dir = location.directory(workspace_dir)
    ci_file = location.path(workspace_dir)
    workflow = ReleaseWorkflow.for_targets(targets)

    try:
        ci_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WorkflowDirError(ci_dir) from e

    existed = ci_file.exists()
    try:
        f = ci_file.open("w", encoding="utf-8", newline="\n")
    except OSError as e:
        raise WorkflowFileError(ci_file) from e

    try:
        with f:
            workflow.write_to(f)
    except (OSError, UnicodeError) as e:
        raise WorkflowWriteError(ci_file) from e

    return GenerationReport(path=ci_file, workflow=workflow, existed=existed)


def workflow_is_current(
    workspace_dir: str | Path,
    targets: Sequence[str],
    *,
    location: WorkflowLocation = DEFAULT_LOCATION,
) -> bool:
    """
    Check whether the workflow on disk matches what would be generated.

    Never writes. A missing file counts as out of date. The comparison is on
    bytes, so a copy with different line endings is out of date too.

    Raises:
        OSError: If the file exists but can't be read.
        UnicodeError: If the targets can't be encoded as UTF-8.

    """
    ci_file = location.path(workspace_dir)
    if not ci_file.exists():
        return False
    return ci_file.read_bytes() == ReleaseWorkflow.for_targets(targets).to_yaml().encode("utf-8")
