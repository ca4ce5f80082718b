"""Tests for the step driver in uibase.pipeline."""

from __future__ import annotations

import pytest

from uibase.pipeline import (
    RunReport,
    Step,
    StepResult,
    StepStatus,
    run_steps,
)

pytestmark = pytest.mark.unit


def _recording_step(name: str, result: StepResult, seen: list[str]) -> Step:
    def action() -> StepResult:
        seen.append(name)
        return result

    return Step(name, action)


class TestStepResult:
    def test_constructors(self) -> None:
        assert StepResult.ok().status is StepStatus.OK
        assert StepResult.warning("w").status is StepStatus.SKIPPED_WITH_WARNING
        assert StepResult.fatal("f", ["a"]).details == ["a"]


class TestRunSteps:
    def test_runs_all_steps_in_order(self) -> None:
        seen: list[str] = []
        report = run_steps(
            [
                _recording_step("one", StepResult.ok("first"), seen),
                _recording_step("two", StepResult.warning("meh"), seen),
                _recording_step("three", StepResult.ok(), seen),
            ]
        )
        assert seen == ["one", "two", "three"]
        assert report.step_names == ["one", "two", "three"]
        assert report.succeeded
        assert [name for name, _ in report.warnings] == ["two"]

    def test_stops_after_fatal(self) -> None:
        seen: list[str] = []
        report = run_steps(
            [
                _recording_step("one", StepResult.ok(), seen),
                _recording_step("two", StepResult.fatal("stop"), seen),
                _recording_step("three", StepResult.ok(), seen),
            ]
        )
        assert seen == ["one", "two"]
        assert not report.succeeded
        assert report.fatal_step == "two"
        assert report.result_for("three") is None

    def test_os_error_becomes_fatal(self) -> None:
        def explode() -> StepResult:
            raise PermissionError("Permission denied: 'x'")

        report = run_steps([Step("write", explode), Step("after", StepResult.ok)])

        assert report.fatal_step == "write"
        assert "write failed" in report.result_for("write").message
        assert report.step_names == ["write"]

    def test_other_exceptions_propagate(self) -> None:
        def broken() -> StepResult:
            raise KeyError("nope")

        with pytest.raises(KeyError):
            run_steps([Step("broken", broken)])

    def test_reports_each_outcome(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_steps(
            [
                Step("a", lambda: StepResult.ok("Created tsconfig.json")),
                Step("b", lambda: StepResult.warning("skipped request.md")),
                Step("c", lambda: StepResult.fatal("No package.json found.")),
            ]
        )
        out = capsys.readouterr().out
        assert "Created tsconfig.json" in out
        assert "Warning: skipped request.md" in out
        assert "No package.json found." in out


class TestRunReport:
    def test_summary_rows(self) -> None:
        report = RunReport()
        report.add("a", StepResult.ok())
        report.add("b", StepResult.warning("x"))
        report.add("c", StepResult.fatal("y"))
        assert report.summary_rows() == [("a", "ok"), ("b", "warning"), ("c", "failed")]
