"""Step driver shared by the setup and create flows.

A scaffolding run is an ordered list of named :class:`Step` objects.  Each
step returns a tagged :class:`StepResult`:

OK                   -- the step did everything it set out to do.
SKIPPED_WITH_WARNING -- something was skipped; the run carries on.
FATAL                -- the run stops here; later steps never execute.

Nothing is rolled back after a fatal step.  Whatever was written before it
stays on disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable

from uibase.utils import print_error, print_success, print_warning


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PreconditionError(Exception):
    """Raised before any step runs when a flow cannot start at all."""


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class StepStatus(str, Enum):
    OK = "ok"
    SKIPPED_WITH_WARNING = "skipped_with_warning"
    FATAL = "fatal"


STATUS_LABELS: dict[StepStatus, str] = {
    StepStatus.OK: "ok",
    StepStatus.SKIPPED_WITH_WARNING: "warning",
    StepStatus.FATAL: "failed",
}


@dataclass
class StepResult:
    """Tagged outcome of a single step."""

    status: StepStatus
    message: str = ""
    details: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls, message: str = "", details: Iterable[str] = ()) -> "StepResult":
        return cls(StepStatus.OK, message, list(details))

    @classmethod
    def warning(cls, message: str, details: Iterable[str] = ()) -> "StepResult":
        return cls(StepStatus.SKIPPED_WITH_WARNING, message, list(details))

    @classmethod
    def fatal(cls, message: str, details: Iterable[str] = ()) -> "StepResult":
        return cls(StepStatus.FATAL, message, list(details))


@dataclass
class Step:
    """A named unit of work in a scaffolding run."""

    name: str
    action: Callable[[], StepResult]


@dataclass
class RunReport:
    """Ordered record of every step that actually executed."""

    records: list[tuple[str, StepResult]] = field(default_factory=list)

    def add(self, name: str, result: StepResult) -> None:
        self.records.append((name, result))

    @property
    def step_names(self) -> list[str]:
        return [name for name, _ in self.records]

    @property
    def succeeded(self) -> bool:
        return self.fatal_step is None

    @property
    def fatal_step(self) -> str | None:
        for name, result in self.records:
            if result.status is StepStatus.FATAL:
                return name
        return None

    @property
    def warnings(self) -> list[tuple[str, StepResult]]:
        return [
            (name, result)
            for name, result in self.records
            if result.status is StepStatus.SKIPPED_WITH_WARNING
        ]

    def result_for(self, name: str) -> StepResult | None:
        for step_name, result in self.records:
            if step_name == name:
                return result
        return None

    def summary_rows(self) -> list[tuple[str, str]]:
        return [(name, STATUS_LABELS[result.status]) for name, result in self.records]


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


def run_steps(steps: Iterable[Step]) -> RunReport:
    """Execute *steps* in order, stopping after the first fatal result.

    An ``OSError`` escaping a step (disk full, permission denied) is turned
    into a fatal result for that step.  Any other exception propagates.
    """
    report = RunReport()
    for step in steps:
        try:
            result = step.action()
        except OSError as exc:
            result = StepResult.fatal(f"{step.name} failed: {exc}")

        report.add(step.name, result)
        _report_result(result)

        if result.status is StepStatus.FATAL:
            break

    return report


def _report_result(result: StepResult) -> None:
    if result.status is StepStatus.OK:
        if result.message:
            print_success(result.message)
    elif result.status is StepStatus.SKIPPED_WITH_WARNING:
        print_warning(f"Warning: {result.message}")
    else:
        print_error(result.message)
