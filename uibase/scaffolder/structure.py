"""Directory materialisation.

Creates a list of relative directories under a root.  Already-existing
directories are fine; a directory that cannot be created is recorded and
reported, and its siblings are still attempted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from uibase.utils import print_error

# React project layout for the create flow.
PROJECT_DIRECTORIES: tuple[str, ...] = (
    "src/components",
    "src/components/common",
    "src/components/layout",
    "src/contexts",
    "src/hooks",
    "src/pages",
    "src/services",
    "src/styles",
    "src/types",
    "src/utils",
    "src/assets/images",
    "src/assets/icons",
    "src/assets/fonts",
    "tests/unit",
    "tests/integration",
    "tests/fixtures",
    "tests/e2e",
    "docs/standards",
    "public",
)

SETUP_DIRECTORIES: tuple[str, ...] = (
    "docs",
    "docs/standards",
)


@dataclass
class MaterializeReport:
    created: list[Path] = field(default_factory=list)
    existing: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def materialize(root: str | Path, relative_dirs: Iterable[str]) -> MaterializeReport:
    """Ensure every directory in *relative_dirs* exists under *root*.

    Intermediate segments are created as needed.  Calling this again on the
    same tree is a no-op.
    """
    base = Path(root)
    report = MaterializeReport()

    for rel in relative_dirs:
        path = base / rel
        if path.is_dir():
            report.existing.append(path)
            continue
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            print_error(f"Error creating directory {path}: {exc}")
            report.failed.append((path, str(exc)))
            continue
        report.created.append(path)

    return report
