"""Tests for directory materialisation."""

from __future__ import annotations

from pathlib import Path

import pytest

from uibase.scaffolder.structure import (
    PROJECT_DIRECTORIES,
    SETUP_DIRECTORIES,
    materialize,
)

pytestmark = pytest.mark.unit


class TestMaterialize:
    def test_creates_project_layout(self, tmp_path: Path) -> None:
        report = materialize(tmp_path, PROJECT_DIRECTORIES)

        assert report.ok
        for rel in PROJECT_DIRECTORIES:
            assert (tmp_path / rel).is_dir(), rel
        assert len(report.created) == len(PROJECT_DIRECTORIES)

    def test_project_layout_contents(self) -> None:
        assert "src/components/common" in PROJECT_DIRECTORIES
        assert "src/assets/fonts" in PROJECT_DIRECTORIES
        assert "tests/e2e" in PROJECT_DIRECTORIES
        assert "docs/standards" in PROJECT_DIRECTORIES
        assert "public" in PROJECT_DIRECTORIES
        assert len(PROJECT_DIRECTORIES) == 19

    def test_second_run_is_a_no_op(self, tmp_path: Path) -> None:
        materialize(tmp_path, SETUP_DIRECTORIES)
        report = materialize(tmp_path, SETUP_DIRECTORIES)

        assert report.ok
        assert report.created == []
        assert report.existing == [tmp_path / "docs", tmp_path / "docs/standards"]

    def test_failure_is_recorded_and_siblings_continue(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        # A regular file where a directory should go.
        (tmp_path / "docs").write_text("not a directory", encoding="utf-8")

        report = materialize(tmp_path, ["docs/standards", "src/pages"])

        assert not report.ok
        assert [p for p, _ in report.failed] == [tmp_path / "docs/standards"]
        assert (tmp_path / "src/pages").is_dir()
        assert "Error creating directory" in capsys.readouterr().out
