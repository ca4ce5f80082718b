"""Dev-dependency installation through the host package manager.

The installer only builds and issues the command.  Its output streams
straight to the terminal and is never parsed; the exit status is all the
caller gets back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from uibase.commands import CommandResult, CommandRunner

INSTALL_DEV_COMMANDS: dict[str, tuple[str, ...]] = {
    "npm": ("npm", "install", "--save-dev"),
    "yarn": ("yarn", "add", "--dev"),
    "pnpm": ("pnpm", "add", "--save-dev"),
}


class DependencyInstaller:
    """Installs development dependencies into a project."""

    def __init__(self, runner: CommandRunner, package_manager: str = "npm") -> None:
        if package_manager not in INSTALL_DEV_COMMANDS:
            raise ValueError(f"Unsupported package manager: {package_manager}")
        self.runner = runner
        self.package_manager = package_manager

    def command_for(self, packages: Sequence[str]) -> list[str]:
        return [*INSTALL_DEV_COMMANDS[self.package_manager], *packages]

    def install_dev(self, packages: Sequence[str], cwd: str | Path) -> CommandResult:
        """Install *packages* as dev dependencies in *cwd*."""
        return self.runner.run(self.command_for(packages), cwd=cwd, capture=False)
