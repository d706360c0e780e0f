"""Configuration for dist-ci."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Environment variables read by the CLI when the matching option is not given.
WORKSPACE_ENV = "DIST_CI_WORKSPACE"
TARGETS_ENV = "DIST_CI_TARGETS"


@dataclass(frozen=True)
class WorkflowLocation:
    """Where the workflow file lives, relative to the workspace root."""

    ci_dir: Path = Path(".github") / "workflows"
    filename: str = "release.yml"

    def directory(self, workspace_dir: str | Path) -> Path:
        return Path(workspace_dir) / self.ci_dir

    def path(self, workspace_dir: str | Path) -> Path:
        return self.directory(workspace_dir) / self.filename


DEFAULT_LOCATION = WorkflowLocation()


def targets_from_env() -> list[str]:
    """Targets listed in DIST_CI_TARGETS, whitespace separated."""
    return os.environ.get(TARGETS_ENV, "").split()


_debug_mode: bool = False


def set_debug(enabled: bool) -> None:
    """Enable or disable debug output."""
    global _debug_mode
    _debug_mode = enabled


def is_debug() -> bool:
    return _debug_mode
