"""Git repository bootstrap for newly created projects.

Runs ``git init``, ``git add .`` and ``git commit``.  This is best effort:
git missing, no committer identity configured, or any other failure is
reported as a warning and never fails the run.
"""

from __future__ import annotations

from pathlib import Path

from uibase.commands import CommandRunner
from uibase.pipeline import StepResult


class GitBootstrapper:
    """Creates a repository with a single initial commit."""

    def __init__(self, runner: CommandRunner, commit_message: str) -> None:
        self.runner = runner
        self.commit_message = commit_message

    def commands(self) -> list[list[str]]:
        return [
            ["git", "init"],
            ["git", "add", "."],
            ["git", "commit", "-m", self.commit_message],
        ]

    def bootstrap(self, root: str | Path) -> StepResult:
        """Initialise a repository in *root* and commit everything in it."""
        for args in self.commands():
            result = self.runner.run(args, cwd=root)
            if not result.ok:
                return StepResult.warning(
                    f"Could not initialize Git repository: {result.describe_failure()}"
                )
        return StepResult.ok("Initialized Git repository")
