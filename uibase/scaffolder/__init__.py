"""UI-base scaffolder -- the building blocks behind both CLI flows.

Each module handles one kind of artifact:

    structure   -- directory trees
    copier      -- verbatim copies of the bundled standards documents
    manifest    -- package.json construction and update
    config_gen  -- lint/format/type-check/hook configuration files
    app_gen     -- React application skeleton and README
    installer   -- dev-dependency installation (external command)
    vcs         -- git init and initial commit (external command)
"""

from uibase.scaffolder.app_gen import SkeletonGenerator
from uibase.scaffolder.config_gen import ConfigEmitter
from uibase.scaffolder.copier import TemplateCopier, TemplateEntry
from uibase.scaffolder.installer import DependencyInstaller
from uibase.scaffolder.manifest import (
    ManifestError,
    ManifestNotFoundError,
    ManifestParseError,
    build_manifest,
    update_manifest,
    write_manifest,
)
from uibase.scaffolder.structure import materialize
from uibase.scaffolder.templates import TemplateRenderer
from uibase.scaffolder.vcs import GitBootstrapper

__all__ = [
    "ConfigEmitter",
    "DependencyInstaller",
    "GitBootstrapper",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "SkeletonGenerator",
    "TemplateCopier",
    "TemplateEntry",
    "TemplateRenderer",
    "build_manifest",
    "materialize",
    "update_manifest",
    "write_manifest",
]
