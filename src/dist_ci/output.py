"""Console output for dist-ci.

All user-facing output goes through a single OutputManager so styling is
consistent, colors honor NO_COLOR, and running inside GitHub Actions turns errors
into workflow-command annotations.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

from rich.console import Console

from .config import is_debug

SYMBOLS = {
    "created": "+",
    "overwritten": "~",
    "unchanged": "=",
    "stale": "!",
    "success": "\u2713",  # ✓
    "failure": "\u2717",  # ✗
}


@dataclass
class OutputManager:
    """Centralized output formatting for dist-ci."""

    console: Console = field(default_factory=Console)
    err_console: Console = field(default_factory=lambda: Console(stderr=True))
    _is_gha: bool = field(default_factory=lambda: os.environ.get("GITHUB_ACTIONS") == "true")

    def info(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)

    def debug(self, message: str) -> None:
        if is_debug():
            self.err_console.print(f"[debug] {message}", style="dim", markup=False, highlight=False, soft_wrap=True)

    def error(self, message: str) -> None:
        if self._is_gha:
            print(f"::error::{message}", file=sys.stderr, flush=True)
            return
        self.err_console.print(f"error: {message}", style="bold red", markup=False, highlight=False, soft_wrap=True)

    def file_status(self, path: object, status: str) -> None:
        """Print a one-line status for a workflow file, e.g. `[+] release.yml (created)`."""
        icon = SYMBOLS.get(status, "?")
        self.console.print(f"  [{icon}] {path} ({status})", markup=False, highlight=False, soft_wrap=True)

    def done(self, name: str, success: bool, elapsed: float) -> None:
        if success:
            self.console.print(f"{SYMBOLS['success']} {name} succeeded in {elapsed:.2f}s", style="bold green")
        else:
            self.console.print(f"{SYMBOLS['failure']} {name} failed in {elapsed:.2f}s", style="bold red")


_output_manager: OutputManager | None = None


def get_output_manager() -> OutputManager:
    """Get the global output manager instance."""
    global _output_manager
    if _output_manager is None:
        _output_manager = OutputManager()
    return _output_manager


def reset_output_manager() -> None:
    """Reset the global output manager (for testing)."""
    global _output_manager
    _output_manager = None


def out(message: str) -> None:
    """Print a message."""
    get_output_manager().info(message)


def dbg(message: str) -> None:
    """Print a debug message, only when debug mode is enabled."""
    get_output_manager().debug(message)
