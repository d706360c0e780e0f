"""Pytest configuration for dist-ci tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_state(monkeypatch: pytest.MonkeyPatch):
    """Reset global state between tests and disable colors."""
    from dist_ci.config import set_debug
    from dist_ci.output import reset_output_manager

    # Rich ignores NO_COLOR when FORCE_COLOR is set
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    monkeypatch.delenv("DIST_CI_TARGETS", raising=False)
    monkeypatch.delenv("DIST_CI_WORKSPACE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")

    set_debug(False)
    reset_output_manager()

    yield

    set_debug(False)
    reset_output_manager()


@pytest.fixture
def mixed_targets() -> list[str]:
    """One target per runner plus one that maps to nothing."""
    return ["x86_64-unknown-linux-gnu", "aarch64-apple-darwin", "x86_64-pc-windows-msvc", "riscv64-unknown-none"]
