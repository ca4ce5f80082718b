"""``package.json`` construction and update.

Build mode produces the complete manifest for a new project from a static
template.  Update mode adds the standards scripts to an existing manifest,
keyed by script name, and leaves everything else exactly as it was.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Mapping

from uibase.utils import dump_json, load_json, write_text


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ManifestError(Exception):
    """Base class for manifest update failures."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class ManifestNotFoundError(ManifestError):
    """Raised when an update is requested but no manifest exists."""


class ManifestParseError(ManifestError):
    """Raised when the existing manifest cannot be read as a JSON object."""


# ---------------------------------------------------------------------------
# Scripts added to an existing project by the setup flow
# ---------------------------------------------------------------------------

SETUP_SCRIPTS: dict[str, str] = {
    "lint:md": 'markdownlint "*.md" "docs/**/*.md"',
    "lint:ts": "eslint --ext .js,.jsx,.ts,.tsx src",
    "lint:css": 'stylelint "src/**/*.{css,scss}"',
    "lint": "npm run lint:md && npm run lint:ts && npm run lint:css",
    "format": 'prettier --write "src/**/*.{js,jsx,ts,tsx,json,css,scss}"',
    "typecheck": "tsc --noEmit",
}


# ---------------------------------------------------------------------------
# Static template for new projects
# ---------------------------------------------------------------------------

_MANIFEST_TEMPLATE: dict[str, Any] = {
    "name": "",
    "version": "0.1.0",
    "description": "A React UI application using UI-base standards",
    "private": True,
    "scripts": {
        "start": "react-scripts start",
        "build": "react-scripts build",
        "test": "react-scripts test",
        "eject": "react-scripts eject",
        "lint:md": 'markdownlint "*.md" "docs/*.md"',
        "lint:ts": "eslint --ext .js,.jsx,.ts,.tsx src",
        "lint:css": 'stylelint "src/**/*.{css,scss}"',
        "lint": "npm run lint:md && npm run lint:ts && npm run lint:css",
        "format": 'prettier --write "src/**/*.{js,jsx,ts,tsx,json,css,scss}"',
        "typecheck": "tsc --noEmit",
        "test:watch": "react-scripts test --watchAll",
        "test:coverage": "react-scripts test --coverage",
        "test:e2e": "cypress run",
        "cypress": "cypress open",
    },
    "keywords": ["react", "typescript", "ui", "frontend", "accessibility"],
    "author": "",
    "license": "MIT",
    "dependencies": {
        "@emotion/react": "^11.11.1",
        "@emotion/styled": "^11.11.0",
        "@mui/icons-material": "^5.14.11",
        "@mui/material": "^5.14.11",
        "@tanstack/react-query": "^4.35.3",
        "axios": "^1.5.1",
        "date-fns": "^2.30.0",
        "framer-motion": "^10.16.4",
        "i18next": "^23.5.1",
        "lodash": "^4.17.21",
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
        "react-error-boundary": "^4.0.11",
        "react-helmet-async": "^1.3.0",
        "react-hook-form": "^7.47.0",
        "react-i18next": "^13.2.2",
        "react-router-dom": "^6.16.0",
        "zod": "^3.22.4",
        "web-vitals": "^3.5.0",
    },
    "devDependencies": {
        "@axe-core/react": "^4.7.3",
        "@storybook/addon-a11y": "^7.4.5",
        "@storybook/addon-essentials": "^7.4.5",
        "@storybook/react": "^7.4.5",
        "@testing-library/jest-dom": "^6.1.3",
        "@testing-library/react": "^14.0.0",
        "@testing-library/user-event": "^14.5.1",
        "@types/jest": "^29.5.5",
        "@types/lodash": "^4.14.199",
        "@types/node": "^20.8.2",
        "@types/react": "^18.2.24",
        "@types/react-dom": "^18.2.8",
        "@typescript-eslint/eslint-plugin": "^6.7.4",
        "@typescript-eslint/parser": "^6.7.4",
        "cypress": "^13.3.0",
        "eslint": "^8.50.0",
        "eslint-config-prettier": "^9.0.0",
        "eslint-plugin-import": "^2.28.1",
        "eslint-plugin-jsx-a11y": "^6.7.1",
        "eslint-plugin-react": "^7.33.2",
        "eslint-plugin-react-hooks": "^4.6.0",
        "husky": "^8.0.3",
        "lint-staged": "^14.0.1",
        "markdownlint-cli": "^0.37.0",
        "msw": "^1.3.1",
        "prettier": "^3.0.3",
        "react-scripts": "^5.0.1",
        "source-map-explorer": "^2.5.3",
        "stylelint": "^15.10.3",
        "stylelint-config-standard": "^34.0.0",
        "typescript": "^5.2.2",
    },
    "browserslist": {
        "production": [">0.2%", "not dead", "not op_mini all"],
        "development": [
            "last 1 chrome version",
            "last 1 firefox version",
            "last 1 safari version",
        ],
    },
    "eslintConfig": {
        "extends": [
            "react-app",
            "react-app/jest",
            "plugin:jsx-a11y/recommended",
            "prettier",
        ],
        "plugins": ["jsx-a11y"],
    },
}


# ---------------------------------------------------------------------------
# Build mode
# ---------------------------------------------------------------------------


def build_manifest(project_name: str) -> dict[str, Any]:
    """Return a fresh manifest for a new project named *project_name*."""
    manifest = copy.deepcopy(_MANIFEST_TEMPLATE)
    manifest["name"] = project_name
    return manifest


def write_manifest(path: str | Path, manifest: Mapping[str, Any]) -> Path:
    """Serialise *manifest* to *path*, overwriting any existing file."""
    return write_text(path, dump_json(manifest))


# ---------------------------------------------------------------------------
# Update mode
# ---------------------------------------------------------------------------


def read_manifest(path: str | Path) -> dict[str, Any]:
    """Load an existing manifest.

    Raises:
        ManifestNotFoundError: If *path* does not exist.
        ManifestParseError: If the content is not a JSON object.
    """
    manifest_path = Path(path)
    if not manifest_path.is_file():
        raise ManifestNotFoundError(
            manifest_path, "No package.json found. Please run npm init first."
        )
    try:
        data = load_json(manifest_path)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(
            manifest_path,
            f"Error parsing {manifest_path.name}: {exc.msg} (line {exc.lineno}, column {exc.colno})",
        ) from exc
    except UnicodeDecodeError as exc:
        raise ManifestParseError(
            manifest_path, f"Error parsing {manifest_path.name}: not valid UTF-8"
        ) from exc

    if not isinstance(data, dict):
        raise ManifestParseError(
            manifest_path,
            f"Error parsing {manifest_path.name}: expected a JSON object, got {type(data).__name__}",
        )
    return data


def update_manifest(
    path: str | Path,
    scripts: Mapping[str, str] = SETUP_SCRIPTS,
) -> dict[str, Any]:
    """Insert or overwrite *scripts* in the manifest at *path*.

    All other content, including unrelated script entries and key order, is
    preserved.  The file is only rewritten once it has been parsed and
    updated successfully.

    Returns:
        The updated manifest.
    """
    manifest_path = Path(path)
    manifest = read_manifest(manifest_path)

    existing = manifest.setdefault("scripts", {})
    if not isinstance(existing, dict):
        raise ManifestParseError(
            manifest_path,
            f"Error parsing {manifest_path.name}: \"scripts\" must be an object",
        )
    existing.update(scripts)

    write_manifest(manifest_path, manifest)
    return manifest
