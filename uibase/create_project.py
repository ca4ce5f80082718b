"""Create a new React + TypeScript project that follows the UI-base standards.

Usage::

    uibase-create my-app
    python -m uibase.create_project my-app

The project is created as a subdirectory of the current working directory.
Dependencies are not installed; the closing message tells the user how.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from uibase.commands import CommandRunner, SubprocessRunner
from uibase.config import Config
from uibase.pipeline import PreconditionError, RunReport, Step, StepResult, run_steps
from uibase.scaffolder.app_gen import SkeletonGenerator, build_context
from uibase.scaffolder.config_gen import CREATE_CONFIG_FILES, ConfigEmitter
from uibase.scaffolder.copier import TemplateCopier
from uibase.scaffolder.manifest import build_manifest, write_manifest
from uibase.scaffolder.structure import PROJECT_DIRECTORIES, materialize
from uibase.scaffolder.templates import TemplateRenderer
from uibase.scaffolder.vcs import GitBootstrapper
from uibase.utils import (
    console,
    print_error,
    print_header,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)


def validate_project_name(name: str | None) -> str:
    """Return *name* if it is usable as a new directory name.

    Raises:
        PreconditionError: For an empty name, ``.``/``..`` or anything that
            contains a path separator.
    """
    if not name or not name.strip():
        raise PreconditionError("Please provide a project name")
    if name in {".", ".."} or "/" in name or "\\" in name:
        raise PreconditionError(
            f"Invalid project name {name!r}: use a single directory name."
        )
    return name


class ProjectCreator:
    """Drives the create flow for one new project directory."""

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
        self.skeleton = SkeletonGenerator(self.renderer)
        self.git = GitBootstrapper(self.runner, config.commit_message)

    # -- Public API --------------------------------------------------------

    def run(self, project_name: str, parent_dir: str | Path = ".") -> RunReport:
        """Create *project_name* under *parent_dir*.

        Both preconditions are checked before anything touches the disk.

        Raises:
            PreconditionError: If the name is invalid or the directory
                already exists.
        """
        name = validate_project_name(project_name)
        root = Path(parent_dir) / name
        if root.exists():
            raise PreconditionError(
                f"Directory {name} already exists. Please choose another name."
            )

        context = build_context(name)
        return run_steps(self.steps(root, context))

    def steps(self, root: Path, context: dict) -> list[Step]:
        name = context["project_name"]
        return [
            Step("directory_tree", lambda: self._create_tree(root)),
            Step("manifest", lambda: self._write_manifest(root, name)),
            Step("templates", lambda: self._copy_templates(root)),
            Step("config_files", lambda: self._emit_config(root)),
            Step("skeleton_files", lambda: self._generate_skeleton(root, context)),
            Step("readme", lambda: self._write_readme(root, context)),
            Step("vcs", lambda: self._init_git(root)),
        ]

    # -- Steps -------------------------------------------------------------

    def _create_tree(self, root: Path) -> StepResult:
        # Fails if something appeared at root since the precondition check.
        root.mkdir(parents=False, exist_ok=False)
        report = materialize(root, PROJECT_DIRECTORIES)
        if not report.ok:
            return StepResult.fatal(
                "Could not create the project directory structure",
                [str(path) for path, _ in report.failed],
            )
        return StepResult.ok(f"Created project directory structure in {root}")

    def _write_manifest(self, root: Path, name: str) -> StepResult:
        write_manifest(root / "package.json", build_manifest(name))
        return StepResult.ok("Created package.json")

    def _copy_templates(self, root: Path) -> StepResult:
        report = self.copier.copy_all(self.config.bundle.template_entries(), root)
        if not report.ok:
            skipped = ", ".join(report.failed_sources)
            return StepResult.warning(f"Skipped template files: {skipped}", report.failed_sources)
        return StepResult.ok(f"Copied {len(report.copied)} standards and config files")

    def _emit_config(self, root: Path) -> StepResult:
        report = self.emitter.emit(root, CREATE_CONFIG_FILES)
        if not report.ok:
            skipped = ", ".join(name for name, _ in report.failed)
            return StepResult.warning(f"Skipped config files: {skipped}")
        return StepResult.ok("Created configuration files")

    def _generate_skeleton(self, root: Path, context: dict) -> StepResult:
        written = self.skeleton.generate(root, context)
        return StepResult.ok(f"Created {len(written)} application files")

    def _write_readme(self, root: Path, context: dict) -> StepResult:
        self.skeleton.write_readme(root, context)
        return StepResult.ok("Created README.md")

    def _init_git(self, root: Path) -> StepResult:
        if not self.config.init_git:
            return StepResult.ok("Skipped Git initialization (disabled)")
        return self.git.bootstrap(root)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``uibase-create``."""
    parser = argparse.ArgumentParser(
        prog="uibase-create",
        description="Create a new React project with the UI-base standards",
    )
    parser.add_argument("project_name", nargs="?", help="Name of the new project directory")
    args = parser.parse_args(argv)

    if not args.project_name:
        print_error("Please provide a project name")
        print_warning(f"Usage: {parser.prog} <project-name>")
        sys.exit(1)

    print_header(f"Creating UI-base project: {args.project_name}")

    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Configuration error: {exc}")
        sys.exit(1)

    try:
        report = ProjectCreator(config).run(args.project_name, Path.cwd())
    except PreconditionError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_summary_table(report.summary_rows(), title="Create Summary")

    if not report.succeeded:
        print_error(f"Project creation stopped at step '{report.fatal_step}'.")
        sys.exit(1)

    print_success(f"Project {args.project_name} created successfully!")
    print_info("To get started, run:")
    console.print(f"  cd {args.project_name}", markup=False, highlight=False)
    console.print(f"  {config.package_manager} install", markup=False, highlight=False)
    console.print(f"  {config.package_manager} start", markup=False, highlight=False)


if __name__ == "__main__":
    main()
