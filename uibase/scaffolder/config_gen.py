"""Lint, format, type-check and hook configuration files.

Each file is a literal template with no variables, written over whatever is
already at the destination.  Writes are isolated from one another: a file
that cannot be written is logged and skipped, and the remaining files are
still emitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, NamedTuple

from uibase.utils import make_executable, print_error

from .templates import TemplateRenderer


class ConfigFile(NamedTuple):
    template: str
    destination: str
    executable: bool = False


CONFIG_FILES: dict[str, ConfigFile] = {
    "eslint": ConfigFile("config/eslintrc.js.j2", ".eslintrc.js"),
    "tsconfig": ConfigFile("config/tsconfig.json.j2", "tsconfig.json"),
    "prettier": ConfigFile("config/prettierrc.j2", ".prettierrc"),
    "stylelint": ConfigFile("config/stylelintrc.json.j2", ".stylelintrc.json"),
    "env_example": ConfigFile("config/env.example.j2", ".env.example"),
    "env_development": ConfigFile("config/env.example.j2", ".env.development"),
    "lint_staged": ConfigFile("config/lintstagedrc.json.j2", ".lintstagedrc.json"),
    "pre_commit": ConfigFile("config/husky/pre-commit.j2", ".husky/pre-commit", executable=True),
}

SETUP_CONFIG_FILES: tuple[str, ...] = ("eslint", "tsconfig", "prettier", "stylelint")
CREATE_CONFIG_FILES: tuple[str, ...] = tuple(CONFIG_FILES)


@dataclass
class EmitReport:
    written: list[Path] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class ConfigEmitter:
    """Writes the static configuration files into a project root."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def emit(
        self,
        root: str | Path,
        names: Iterable[str] = CREATE_CONFIG_FILES,
        context: dict[str, Any] | None = None,
    ) -> EmitReport:
        """Write each named config file under *root*.

        Args:
            root: Project root directory.
            names: Keys of :data:`CONFIG_FILES` to emit, in order.
            context: Optional template context.  The shipped templates use
                no variables, so this is normally left empty.

        Raises:
            KeyError: If a name is not a known config file.
        """
        base = Path(root)
        ctx = context or {}
        report = EmitReport()

        specs = [(name, CONFIG_FILES[name]) for name in names]
        for name, spec in specs:
            out = base / spec.destination
            try:
                self.renderer.render_to_file(spec.template, out, ctx)
                if spec.executable:
                    make_executable(out)
            except OSError as exc:
                print_error(f"Error writing {spec.destination}: {exc}")
                report.failed.append((spec.destination, str(exc)))
                continue
            report.written.append(out)

        return report
