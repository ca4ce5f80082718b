"""Verbatim copy of the bundled template file set.

Files are copied byte-for-byte from the resource directory.  An existing
destination is overwritten without comparison or backup, so re-running always
leaves identical copies.  One bad file never stops the rest of the batch.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from uibase.config import TemplateEntry
from uibase.utils import print_error

__all__ = ["CopyReport", "TemplateCopier", "TemplateEntry"]


@dataclass
class CopyReport:
    copied: list[Path] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def failed_sources(self) -> list[str]:
        return [source for source, _ in self.failed]


class TemplateCopier:
    """Copies :class:`TemplateEntry` items from a resource directory."""

    def __init__(self, resource_dir: str | Path) -> None:
        self.resource_dir = Path(resource_dir)

    def source_path(self, entry: TemplateEntry) -> Path:
        return self.resource_dir / entry.source

    def copy_all(self, entries: Iterable[TemplateEntry], target_root: str | Path) -> CopyReport:
        """Copy each entry under *target_root*, best effort.

        Returns:
            A report of written destinations and ``(source, reason)`` pairs
            for every entry that could not be copied.
        """
        root = Path(target_root)
        report = CopyReport()

        for entry in entries:
            destination = root / entry.destination
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(self.source_path(entry), destination)
            except OSError as exc:
                reason = exc.strerror or str(exc)
                print_error(f"Error copying {entry.source}: {reason}")
                report.failed.append((entry.source, reason))
                continue
            report.copied.append(destination)

        return report
