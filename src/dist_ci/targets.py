"""Mapping of build targets to GitHub Actions runner images."""

from __future__ import annotations

from enum import Enum


class RunnerOS(Enum):
    """The runner image a matrix entry is built on."""

    LINUX = "ubuntu-latest"
    MACOS = "macos-latest"
    WINDOWS = "windows-latest"

    def __str__(self) -> str:
        return self.value


# Evaluated top to bottom, first match wins. A target only needs to contain the
# OS marker, so vendor and ABI suffixes don't matter.
OS_RULES: list[tuple[str, RunnerOS]] = [
    ("linux", RunnerOS.LINUX),
    ("apple", RunnerOS.MACOS),
    ("windows", RunnerOS.WINDOWS),
]


def runner_os_for_target(target: str) -> RunnerOS | None:
    """
    Pick the runner that should build `target`.

    Returns None when no rule applies. That is a normal outcome, not an error:
    the caller decides what to do with targets it can't build.

    Example:
        >>> runner_os_for_target("aarch64-apple-darwin")
        <RunnerOS.MACOS: 'macos-latest'>
        >>> runner_os_for_target("riscv64-unknown-none") is None
        True

    """
    for marker, runner in OS_RULES:
        if marker in target:
            return runner
    return None
