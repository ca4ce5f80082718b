"""Apply the UI-base standards bundle to an existing project.

Copies the standards documentation into ``docs/standards/``, writes the
lint/format/type-check configuration, adds the matching scripts to
``package.json`` and installs the tooling as dev dependencies.

Usage::

    uibase-setup              # current directory
    uibase-setup path/to/app
    python -m uibase.setup_standards path/to/app
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from uibase.commands import CommandRunner, SubprocessRunner
from uibase.config import Config
from uibase.pipeline import PreconditionError, RunReport, Step, StepResult, run_steps
from uibase.scaffolder.config_gen import SETUP_CONFIG_FILES, ConfigEmitter
from uibase.scaffolder.copier import TemplateCopier
from uibase.scaffolder.installer import DependencyInstaller
from uibase.scaffolder.manifest import ManifestError, update_manifest
from uibase.scaffolder.structure import SETUP_DIRECTORIES, materialize
from uibase.scaffolder.templates import TemplateRenderer
from uibase.utils import (
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)


class StandardsSetup:
    """Drives the setup flow against one target directory.

    Step order: ``directories`` -> ``standards`` -> ``config_files`` ->
    ``manifest`` -> ``dependencies``.  All file emission happens before the
    manifest step, so a missing or broken ``package.json`` still leaves the
    documentation and config files in place; it only stops the install.
    """

    def __init__(
        self,
        config: Config,
        runner: CommandRunner | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.runner = runner or SubprocessRunner(timeout=config.command_timeout)
        self.renderer = renderer or TemplateRenderer(config.template_dir)
        self.copier = TemplateCopier(config.resource_dir)
        self.emitter = ConfigEmitter(self.renderer)
        self.installer = DependencyInstaller(self.runner, config.package_manager)

    # -- Public API --------------------------------------------------------

    def run(self, target: str | Path) -> RunReport:
        """Apply the standards bundle to *target*.

        Raises:
            PreconditionError: If *target* is not an existing directory.
        """
        root = Path(target)
        if not root.is_dir():
            raise PreconditionError(f"Target directory {root} does not exist.")

        return run_steps(self.steps(root))

    def steps(self, root: Path) -> list[Step]:
        return [
            Step("directories", lambda: self._create_directories(root)),
            Step("standards", lambda: self._copy_standards(root)),
            Step("config_files", lambda: self._emit_config(root)),
            Step("manifest", lambda: self._update_manifest(root)),
            Step("dependencies", lambda: self._install_dependencies(root)),
        ]

    # -- Steps -------------------------------------------------------------

    def _create_directories(self, root: Path) -> StepResult:
        report = materialize(root, SETUP_DIRECTORIES)
        if not report.ok:
            return StepResult.warning(
                "Some directories could not be created",
                [str(path) for path, _ in report.failed],
            )
        created = ", ".join(str(p) for p in report.created)
        return StepResult.ok(f"Created directory: {created}" if created else "")

    def _copy_standards(self, root: Path) -> StepResult:
        report = self.copier.copy_all(self.config.bundle.template_entries(), root)
        if not report.ok:
            skipped = ", ".join(report.failed_sources)
            return StepResult.warning(f"Skipped standards files: {skipped}", report.failed_sources)
        return StepResult.ok(f"Copied {len(report.copied)} standards and config files")

    def _emit_config(self, root: Path) -> StepResult:
        report = self.emitter.emit(root, SETUP_CONFIG_FILES)
        written = ", ".join(p.name for p in report.written)
        if not report.ok:
            skipped = ", ".join(name for name, _ in report.failed)
            return StepResult.warning(f"Skipped config files: {skipped}")
        return StepResult.ok(f"Created {written}")

    def _update_manifest(self, root: Path) -> StepResult:
        try:
            update_manifest(root / "package.json")
        except ManifestError as exc:
            return StepResult.fatal(str(exc))
        return StepResult.ok("Updated package.json with linting scripts")

    def _install_dependencies(self, root: Path) -> StepResult:
        if not self.config.install_dependencies:
            return StepResult.ok("Skipped dependency installation (disabled)")

        packages = self.config.bundle.dev_dependencies
        print_warning(f"Installing dev dependencies: {', '.join(packages)}")
        result = self.installer.install_dev(packages, cwd=root)
        if not result.ok:
            return StepResult.warning(
                f"Error installing dependencies: {result.describe_failure()}"
            )
        return StepResult.ok("Installed dev dependencies")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``uibase-setup``."""
    parser = argparse.ArgumentParser(
        prog="uibase-setup",
        description="Apply the UI-base standards to an existing project",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=".",
        help="Project directory to update (default: current directory)",
    )
    args = parser.parse_args(argv)

    print_header("UI-base Standards Setup")

    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Configuration error: {exc}")
        sys.exit(1)

    try:
        report = StandardsSetup(config).run(args.target)
    except PreconditionError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_summary_table(report.summary_rows(), title="Setup Summary")

    if not report.succeeded:
        print_error(f"Setup stopped at step '{report.fatal_step}'.")
        sys.exit(1)

    print_success("Setup complete! Standards have been incorporated into your project.")
    print_warning("To get started with the React frontend standards, run:")
    print_warning(f"  1. {config.package_manager} install")
    print_warning(f"  2. {config.package_manager} run lint")
    print_warning(f"  3. {config.package_manager} start")


if __name__ == "__main__":
    main()
