"""UI-base tooling configuration.

Centralised, typed configuration for both command-line tools. Settings are
Pydantic v2 models, frozen so that a ``Config`` built at startup can be passed
through an entire run without anything mutating it along the way.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_PACKAGE_DIR = Path(__file__).parent

DEFAULT_RESOURCE_DIR = _PACKAGE_DIR / "scaffolder" / "standards"
DEFAULT_TEMPLATE_DIR = _PACKAGE_DIR / "scaffolder" / "templates"

SUPPORTED_PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "yarn", "pnpm")

STANDARDS_FILES: tuple[str, ...] = (
    "node_structure_and_naming_conventions.md",
    "sql-standards-and-patterns.md",
    "technologies.md",
    "operations-and-responses.md",
    "request.md",
    "validation.md",
    "global-rules.md",
    "CLAUDE.md",
    "visual-design-requirements.md",
)

# Bundled source name -> destination relative to the target root.  Dotfiles
# are stored without the leading dot so they are not picked up by tooling
# inside this package.
COPIED_CONFIG_FILES: tuple[tuple[str, str], ...] = (
    ("markdownlint.json", ".markdownlint.json"),
    ("gitignore", ".gitignore"),
)

DEV_DEPENDENCIES: tuple[str, ...] = (
    "markdownlint-cli",
    "eslint",
    "eslint-plugin-jsx-a11y",
    "eslint-plugin-react",
    "eslint-plugin-react-hooks",
    "eslint-config-prettier",
    "@typescript-eslint/eslint-plugin",
    "@typescript-eslint/parser",
    "prettier",
    "stylelint",
    "stylelint-config-standard",
)

STANDARDS_DIR = "docs/standards"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class TemplateEntry(BaseModel):
    """A single (source, destination) pair in the template file set."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="File name relative to the resource directory")
    destination: str = Field(..., description="Path relative to the target root")


class StandardsBundle(BaseModel):
    """The fixed set of files and tooling that makes up the standards bundle."""

    model_config = ConfigDict(frozen=True)

    standards_files: tuple[str, ...] = Field(default=STANDARDS_FILES)
    copied_config_files: tuple[tuple[str, str], ...] = Field(default=COPIED_CONFIG_FILES)
    dev_dependencies: tuple[str, ...] = Field(default=DEV_DEPENDENCIES)

    def template_entries(self) -> list[TemplateEntry]:
        """Return every file copied verbatim, standards documents first."""
        entries = [
            TemplateEntry(source=name, destination=f"{STANDARDS_DIR}/{name}")
            for name in self.standards_files
        ]
        entries.extend(
            TemplateEntry(source=source, destination=destination)
            for source, destination in self.copied_config_files
        )
        return entries


class Config(BaseModel):
    """Global configuration for a scaffolding run.

    Instances are created once by a CLI entry point (usually through
    :meth:`from_env`) and handed to the orchestrator.
    """

    model_config = ConfigDict(frozen=True)

    resource_dir: Path = Field(default=DEFAULT_RESOURCE_DIR)
    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    package_manager: str = Field(default="npm")
    install_dependencies: bool = Field(
        default=True, description="Whether the setup flow installs dev dependencies"
    )
    init_git: bool = Field(
        default=True, description="Whether the create flow makes an initial commit"
    )
    commit_message: str = Field(default="Initial commit with UI-base standards")
    command_timeout: int = Field(
        default=600, ge=1, description="External command timeout in seconds"
    )
    bundle: StandardsBundle = Field(default_factory=StandardsBundle)

    @field_validator("package_manager")
    @classmethod
    def _check_package_manager(cls, value: str) -> str:
        if value not in SUPPORTED_PACKAGE_MANAGERS:
            supported = ", ".join(SUPPORTED_PACKAGE_MANAGERS)
            raise ValueError(f"Unsupported package manager {value!r} (expected one of: {supported})")
        return value

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            UIBASE_RESOURCE_DIR, UIBASE_TEMPLATE_DIR, UIBASE_PACKAGE_MANAGER,
            UIBASE_INSTALL_DEPS, UIBASE_INIT_GIT, UIBASE_COMMIT_MESSAGE,
            UIBASE_COMMAND_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("UIBASE_RESOURCE_DIR"):
            kwargs["resource_dir"] = Path(os.environ["UIBASE_RESOURCE_DIR"])
        if os.environ.get("UIBASE_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["UIBASE_TEMPLATE_DIR"])
        if os.environ.get("UIBASE_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["UIBASE_PACKAGE_MANAGER"]
        if os.environ.get("UIBASE_INSTALL_DEPS"):
            kwargs["install_dependencies"] = _parse_bool(
                "UIBASE_INSTALL_DEPS", os.environ["UIBASE_INSTALL_DEPS"]
            )
        if os.environ.get("UIBASE_INIT_GIT"):
            kwargs["init_git"] = _parse_bool("UIBASE_INIT_GIT", os.environ["UIBASE_INIT_GIT"])
        if os.environ.get("UIBASE_COMMIT_MESSAGE"):
            kwargs["commit_message"] = os.environ["UIBASE_COMMIT_MESSAGE"]
        if os.environ.get("UIBASE_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["UIBASE_COMMAND_TIMEOUT"])
        return cls(**kwargs)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")
