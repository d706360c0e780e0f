"""Assembly of the release workflow document.

The document is an ordered list of segments. Static segments are written
verbatim; only the env line and the matrix entries depend on the targets:

    HEADER -> env line -> JOBS_PREAMBLE -> matrix entries -> JOBS_TRAILER

Rendering goes straight to a text stream, one write per line, so a large
target list is never built up as a single string first.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from io import StringIO
from typing import TextIO

from .matrix import BuildMatrix, MatrixEntry, build_matrix
from .templates import HEADER, JOBS_PREAMBLE, JOBS_TRAILER

TARGET_ARGS_VAR = "ALL_CARGO_DIST_TARGET_ARGS"


def target_args(targets: Iterable[str]) -> str:
    """
    Flags for every requested target, as used by the manifest job.

    Each token is followed by a single space, including the last one.
    """
    return "".join(f"--target={target} " for target in targets)


@dataclass(frozen=True)
class StaticSegment:
    """Fixed workflow text."""

    text: str

    def write_to(self, stream: TextIO) -> None:
        stream.write(self.text)
        stream.write("\n")


@dataclass(frozen=True)
class EnvLineSegment:
    """The workflow-level env var listing every requested target."""

    targets: tuple[str, ...]

    def write_to(self, stream: TextIO) -> None:
        stream.write(f"  {TARGET_ARGS_VAR}: ")
        for target in self.targets:
            stream.write(f"--target={target} ")
        stream.write("\n")


@dataclass(frozen=True)
class MatrixEntriesSegment:
    """The `include:` items of the upload-artifacts matrix."""

    entries: tuple[MatrixEntry, ...]

    def write_to(self, stream: TextIO) -> None:
        for entry in self.entries:
            stream.write(f"        - target: {entry.target}\n")
            stream.write(f"          os: {entry.os.value}\n")


Segment = StaticSegment | EnvLineSegment | MatrixEntriesSegment


@dataclass
class ReleaseWorkflow:
    """
    The release workflow for a list of build targets.

    `targets` is the list as requested, which feeds the env line. `matrix` is
    what actually gets built; unmappable targets are missing from it but still
    present in `targets`.
    """

    targets: list[str]
    matrix: BuildMatrix = field(default_factory=BuildMatrix)

    @classmethod
    def for_targets(cls, targets: Sequence[str]) -> ReleaseWorkflow:
        """Resolve runners for `targets` and build the workflow."""
        targets = list(targets)
        return cls(targets=targets, matrix=build_matrix(targets))

    def __str__(self) -> str:
        skipped = len(self.matrix.skipped)
        skipped_str = f", {skipped} skipped" if skipped else ""
        return f"ReleaseWorkflow - {len(self.targets)} target(s), {len(self.matrix)} matrix entr(ies){skipped_str}"

    __repr__ = __str__

    def segments(self) -> list[Segment]:
        """The document's segments in write order."""
        return [
            StaticSegment(HEADER),
            EnvLineSegment(tuple(self.targets)),
            StaticSegment(JOBS_PREAMBLE),
            MatrixEntriesSegment(tuple(self.matrix.entries)),
            StaticSegment(JOBS_TRAILER),
        ]

    def write_to(self, stream: TextIO) -> None:
        """Write the whole document to `stream`."""
        for segment in self.segments():
            segment.write_to(stream)

    def to_yaml(self) -> str:
        """Render the document as a string."""
        stream = StringIO()
        self.write_to(stream)
        return stream.getvalue()
