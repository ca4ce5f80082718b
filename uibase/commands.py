"""External command execution.

The tools shell out twice: to the package manager (setup flow) and to git
(create flow).  Both go through a :class:`CommandRunner` so orchestrators can
be handed a fake in tests instead of touching real processes.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence


@dataclass
class CommandResult:
    """Outcome of one external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command(self) -> str:
        return " ".join(self.args)

    def describe_failure(self) -> str:
        """One-line reason for a failed command, for log messages."""
        detail = self.stderr.strip().splitlines()[-1] if self.stderr.strip() else ""
        base = f"'{self.command}' exited with status {self.returncode}"
        return f"{base}: {detail}" if detail else base


class CommandRunner(Protocol):
    """Runs a command and reports its exit status."""

    def run(
        self,
        args: Sequence[str],
        cwd: str | Path | None = None,
        *,
        capture: bool = True,
    ) -> CommandResult: ...


class SubprocessRunner:
    """:class:`CommandRunner` backed by :func:`subprocess.run`.

    Never raises for process-level failures: a missing executable is reported
    as exit status 127, one that cannot be launched as 126 and a timeout as
    -1, mirroring shell conventions.
    """

    def __init__(self, timeout: int = 600) -> None:
        self.timeout = timeout

    def run(
        self,
        args: Sequence[str],
        cwd: str | Path | None = None,
        *,
        capture: bool = True,
    ) -> CommandResult:
        argv = [str(a) for a in args]
        try:
            completed = subprocess.run(
                argv,
                cwd=str(cwd) if cwd else None,
                capture_output=capture,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError:
            return CommandResult(argv, 127, "", f"Command not found: {argv[0]}")
        except OSError as exc:
            return CommandResult(
                argv, 126, "", f"Cannot execute {argv[0]}: {exc.strerror or exc}"
            )
        except subprocess.TimeoutExpired:
            return CommandResult(
                argv, -1, "", f"Command timed out after {self.timeout}s: {' '.join(argv)}"
            )

        return CommandResult(
            argv,
            completed.returncode,
            (completed.stdout or "").strip(),
            (completed.stderr or "").strip(),
        )
