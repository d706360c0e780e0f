"""Build matrix construction for the upload-artifacts job."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .targets import RunnerOS, runner_os_for_target


@dataclass(frozen=True)
class MatrixEntry:
    """One parallel build job: a target and the runner that builds it."""

    target: str
    os: RunnerOS


@dataclass(frozen=True)
class SkippedTarget:
    """A requested target that got no matrix entry."""

    target: str
    reason: str

    def __str__(self) -> str:
        return self.reason


@dataclass
class BuildMatrix:
    """
    Matrix entries plus the targets that were left out.

    `entries` keeps the relative order of the input targets. `skipped` holds a
    diagnostic per unmappable target; nothing here logs, so the caller chooses
    how to report them.
    """

    entries: list[MatrixEntry] = field(default_factory=list)
    skipped: list[SkippedTarget] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[MatrixEntry]:
        return iter(self.entries)

    @property
    def targets(self) -> list[str]:
        return [entry.target for entry in self.entries]


def build_matrix(targets: Iterable[str]) -> BuildMatrix:
    """
    Build the matrix for `targets`.

    Targets without a runner are dropped and recorded in `skipped`. Duplicates
    are kept as-is. An empty input gives an empty matrix.
    """
    matrix = BuildMatrix()
    for target in targets:
        os = runner_os_for_target(target)
        if os is None:
            matrix.skipped.append(
                SkippedTarget(
                    target=target,
                    reason=f"skipping generating ci for {target} (no idea what github os should build this)",
                )
            )
            continue
        matrix.entries.append(MatrixEntry(target=target, os=os))
    return matrix
