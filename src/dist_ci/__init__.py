"""
dist-ci - generate a GitHub Actions release workflow for a set of build targets.

Basic usage:

    import dist_ci

    report = dist_ci.generate_github_ci(".", ["x86_64-unknown-linux-gnu", "aarch64-apple-darwin"])
    for skipped in report.matrix.skipped:
        print(skipped.reason)

    # Or render without writing anything:
    print(dist_ci.ReleaseWorkflow.for_targets(["x86_64-pc-windows-msvc"]).to_yaml())

Or from the command line:

    dist-ci generate --target x86_64-unknown-linux-gnu --target aarch64-apple-darwin
"""

from .config import DEFAULT_LOCATION, WorkflowLocation
from .errors import GenerationStep, WorkflowDirError, WorkflowError, WorkflowFileError, WorkflowWriteError
from .matrix import BuildMatrix, MatrixEntry, SkippedTarget, build_matrix
from .result import Err, Ok, Result
from .targets import OS_RULES, RunnerOS, runner_os_for_target
from .workflow import ReleaseWorkflow, target_args
from .writer import GenerationReport, generate_github_ci, workflow_is_current

__all__ = [
    # Targets and matrix
    "RunnerOS",
    "OS_RULES",
    "runner_os_for_target",
    "MatrixEntry",
    "SkippedTarget",
    "BuildMatrix",
    "build_matrix",
    # Workflow
    "ReleaseWorkflow",
    "target_args",
    "generate_github_ci",
    "workflow_is_current",
    "GenerationReport",
    "WorkflowLocation",
    "DEFAULT_LOCATION",
    # Errors
    "GenerationStep",
    "WorkflowError",
    "WorkflowDirError",
    "WorkflowFileError",
    "WorkflowWriteError",
    # Results
    "Result",
    "Ok",
    "Err",
]
