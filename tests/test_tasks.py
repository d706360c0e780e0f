"""Tests for the task layer."""

import io
import logging
from io import StringIO
from pathlib import Path

import pytest

from dist_ci import ReleaseWorkflow
from dist_ci.tasks import generate_release_ci, render_release_ci, summarize


class TestGenerateReleaseCi:
    """Tests for generate_release_ci."""

    def test_generate(self, tmp_path: Path, mixed_targets: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        result = generate_release_ci(workspace=tmp_path, targets=mixed_targets)

        assert result.ok
        assert result.value() == tmp_path / ".github" / "workflows" / "release.yml"
        assert result.value().exists()
        assert "(created)" in capsys.readouterr().out

    def test_skipped_targets_are_logged(
        self, tmp_path: Path, mixed_targets: list[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="dist_ci"):
            result = generate_release_ci(workspace=tmp_path, targets=mixed_targets)

        assert result.ok
        assert len(result.warnings) == 1
        assert "riscv64-unknown-none" in result.warnings[0]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert [r.getMessage() for r in warnings] == list(result.warnings)

    def test_no_warnings_for_empty_targets(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="dist_ci"):
            result = generate_release_ci(workspace=tmp_path, targets=[])

        assert result.ok
        assert result.warnings == ()
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_failure_becomes_err(self, tmp_path: Path) -> None:
        (tmp_path / ".github").write_text("not a directory")

        result = generate_release_ci(workspace=tmp_path, targets=["x86_64-unknown-linux-gnu"])

        assert result.failed
        assert result.error is not None
        assert "failed to create workflow directory" in result.error

    def test_check_only_missing_file(self, tmp_path: Path) -> None:
        result = generate_release_ci(workspace=tmp_path, targets=["x86_64-unknown-linux-gnu"], check_only=True)

        assert result.failed
        assert "out of date" in (result.error or "")
        assert not (tmp_path / ".github").exists()

    def test_check_only_up_to_date(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        generate_release_ci(workspace=tmp_path, targets=["aarch64-apple-darwin"])
        capsys.readouterr()

        result = generate_release_ci(workspace=tmp_path, targets=["aarch64-apple-darwin"], check_only=True)

        assert result.ok
        assert "(unchanged)" in capsys.readouterr().out


    def test_check_only_directory_in_the_way(self, tmp_path: Path) -> None:
        ci_file = tmp_path / ".github" / "workflows" / "release.yml"
        ci_file.mkdir(parents=True)

        result = generate_release_ci(workspace=tmp_path, targets=["x86_64-unknown-linux-gnu"], check_only=True)

        assert result.failed
        assert str(ci_file) in (result.error or "")

    def test_check_only_invalid_utf8(self, tmp_path: Path) -> None:
        generate_release_ci(workspace=tmp_path, targets=["x86_64-unknown-linux-gnu"])
        (tmp_path / ".github" / "workflows" / "release.yml").write_bytes(b"\xff\xfe garbage")

        result = generate_release_ci(workspace=tmp_path, targets=["x86_64-unknown-linux-gnu"], check_only=True)

        assert result.failed
        assert "out of date" in (result.error or "")

    def test_unencodable_target_becomes_err(self, tmp_path: Path) -> None:
        result = generate_release_ci(workspace=tmp_path, targets=["x86_64-unknown-linux-gnu\udcff"])

        assert result.failed
        assert "failed to write workflow content" in (result.error or "")

def test_render_release_ci(mixed_targets: list[str]) -> None:
    stream = StringIO()
    result = render_release_ci(targets=mixed_targets, stream=stream)

    assert result.ok
    assert stream.getvalue() == ReleaseWorkflow.for_targets(mixed_targets).to_yaml()
    assert len(result.warnings) == 1


def test_summarize(mixed_targets: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    summarize(mixed_targets)
    lines = capsys.readouterr().out.splitlines()

    assert lines == [
        "  x86_64-unknown-linux-gnu -> ubuntu-latest",
        "  aarch64-apple-darwin -> macos-latest",
        "  x86_64-pc-windows-msvc -> windows-latest",
        "  riscv64-unknown-none -> (skipped)",
    ]


def test_render_unencodable_target() -> None:
    stream = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    result = render_release_ci(targets=["x86_64-unknown-linux-gnu\udcff"], stream=stream)

    assert result.failed
    assert "failed to write workflow content" in (result.error or "")
