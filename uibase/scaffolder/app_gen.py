"""Application skeleton generation for new projects.

Renders a minimal working React + TypeScript application: entry point, root
composition with routing, Material-UI theme, layout shell (header, content,
footer), home and not-found pages, an error-boundary fallback, a web-vitals
reporter and an Axios-based API service.  The project name is the only
variable; it appears in page titles, the header brand and the web manifest.

The target directory is always brand new, so files are written without any
overwrite checks.  A write error propagates to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .templates import TemplateRenderer

# Template (relative to the template root) -> output path (relative to the project root)
SKELETON_FILES: dict[str, str] = {
    "app/src/index.tsx.j2": "src/index.tsx",
    "app/src/App.tsx.j2": "src/App.tsx",
    "app/src/styles/theme.ts.j2": "src/styles/theme.ts",
    "app/src/styles/index.css.j2": "src/styles/index.css",
    "app/src/pages/HomePage.tsx.j2": "src/pages/HomePage.tsx",
    "app/src/pages/NotFoundPage.tsx.j2": "src/pages/NotFoundPage.tsx",
    "app/src/components/layout/Layout.tsx.j2": "src/components/layout/Layout.tsx",
    "app/src/components/layout/Header.tsx.j2": "src/components/layout/Header.tsx",
    "app/src/components/layout/Footer.tsx.j2": "src/components/layout/Footer.tsx",
    "app/src/components/common/ErrorFallback.tsx.j2": "src/components/common/ErrorFallback.tsx",
    "app/src/utils/reportWebVitals.ts.j2": "src/utils/reportWebVitals.ts",
    "app/src/services/ApiService.ts.j2": "src/services/ApiService.ts",
    "app/public/index.html.j2": "public/index.html",
    "app/public/manifest.json.j2": "public/manifest.json",
    "app/public/robots.txt.j2": "public/robots.txt",
}

README_TEMPLATE = "README.md.j2"


def build_context(project_name: str) -> dict[str, Any]:
    """Template context shared by every generated file."""
    return {"project_name": project_name}


class SkeletonGenerator:
    """Writes the boilerplate application files and the project README."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, root: str | Path, context: dict[str, Any]) -> list[Path]:
        """Render every skeleton file under *root*.

        Returns:
            Written paths, in :data:`SKELETON_FILES` order.
        """
        base = Path(root)
        return [
            self.renderer.render_to_file(template_name, base / output_name, context)
            for template_name, output_name in SKELETON_FILES.items()
        ]

    def write_readme(self, root: str | Path, context: dict[str, Any]) -> Path:
        """Render ``README.md`` with the project name as its heading."""
        return self.renderer.render_to_file(
            README_TEMPLATE, Path(root) / "README.md", context
        )
