"""Shared pytest fixtures for the UI-base tooling test suite.

Provides reusable fixtures for:
- Temporary target directories (empty, or with a package.json)
- A recording fake command runner
- Config instances that never shell out
- Template renderers pointed at the bundled templates
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

import pytest

from uibase.commands import CommandResult
from uibase.config import Config
from uibase.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------


@dataclass
class FakeRunner:
    """Records every command and returns a canned result.

    ``failures`` maps a program name (``args[0]``) or a full command string to
    the exit status it should report.  Everything else succeeds.
    """

    failures: dict[str, int] = field(default_factory=dict)
    stderr: str = "simulated failure"
    calls: list[dict[str, Any]] = field(default_factory=list)

    def run(
        self,
        args: Sequence[str],
        cwd: str | Path | None = None,
        *,
        capture: bool = True,
    ) -> CommandResult:
        argv = [str(a) for a in args]
        self.calls.append({"args": argv, "cwd": cwd, "capture": capture})
        code = self.failures.get(" ".join(argv), self.failures.get(argv[0], 0))
        return CommandResult(argv, code, "", self.stderr if code else "")

    @property
    def commands(self) -> list[list[str]]:
        return [call["args"] for call in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A command runner where every command succeeds."""
    return FakeRunner()


@pytest.fixture
def failing_runner() -> FakeRunner:
    """A command runner where npm and git both fail."""
    return FakeRunner(failures={"npm": 1, "git": 128})


# ---------------------------------------------------------------------------
# Config & renderer
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> Config:
    """Default configuration (bundled resources, npm, install + git on)."""
    return Config()


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the bundled templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Target directories
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_target(tmp_path: Path) -> Path:
    """Empty existing project directory."""
    target = tmp_path / "existing-app"
    target.mkdir()
    yield target


@pytest.fixture
def sample_manifest() -> dict[str, Any]:
    """A typical package.json of an app that predates the standards."""
    return {
        "name": "existing-app",
        "version": "1.2.3",
        "private": True,
        "scripts": {
            "start": "react-scripts start",
            "lint": "eslint src",
            "deploy": "./scripts/deploy.sh",
        },
        "dependencies": {"react": "^18.2.0"},
    }


@pytest.fixture
def tmp_target_with_manifest(tmp_target: Path, sample_manifest: dict[str, Any]) -> Path:
    """Existing project directory with a valid package.json."""
    (tmp_target / "package.json").write_text(
        json.dumps(sample_manifest, indent=2) + "\n", encoding="utf-8"
    )
    yield tmp_target


@pytest.fixture
def partial_resource_dir(tmp_path: Path, config: Config) -> Path:
    """Copy of the bundled resources with ``request.md`` missing."""
    resources = tmp_path / "resources"
    resources.mkdir()
    for source in config.resource_dir.iterdir():
        if source.name != "request.md":
            (resources / source.name).write_bytes(source.read_bytes())
    yield resources


@pytest.fixture
def runner_factory():
    """Build a :class:`FakeRunner` with custom failures."""
    return FakeRunner
