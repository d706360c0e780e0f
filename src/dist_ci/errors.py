"""Errors raised while writing the release workflow."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class GenerationStep(Enum):
    """The step of workflow generation that failed."""

    CREATE_DIR = "create_dir"
    CREATE_FILE = "create_file"
    WRITE = "write"


class WorkflowError(Exception):
    """
    A fatal error while generating the workflow file.

    The underlying OSError is chained as `__cause__`. Nothing is retried, and a
    failure during WRITE can leave a partial file on disk.
    """

    step: GenerationStep
    context: str = "failed to generate workflow"

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{self.context}: {path}")


class WorkflowDirError(WorkflowError):
    step = GenerationStep.CREATE_DIR
    context = "failed to create workflow directory"


class WorkflowFileError(WorkflowError):
    step = GenerationStep.CREATE_FILE
    context = "failed to create workflow file"


class WorkflowWriteError(WorkflowError):
    step = GenerationStep.WRITE
    context = "failed to write workflow content"
