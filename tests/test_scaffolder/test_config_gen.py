"""Tests for the configuration file emitter."""

from __future__ import annotations

import json
import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from uibase.scaffolder.config_gen import (
    CONFIG_FILES,
    CREATE_CONFIG_FILES,
    SETUP_CONFIG_FILES,
    ConfigEmitter,
)
from uibase.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


class TestConfigEmitter:
    def test_setup_subset(self, renderer: TemplateRenderer, tmp_path: Path) -> None:
        report = ConfigEmitter(renderer).emit(tmp_path, SETUP_CONFIG_FILES)

        assert report.ok
        assert sorted(p.name for p in report.written) == sorted(
            [".eslintrc.js", "tsconfig.json", ".prettierrc", ".stylelintrc.json"]
        )
        assert not (tmp_path / ".husky").exists()

    def test_create_set(self, renderer: TemplateRenderer, tmp_path: Path) -> None:
        report = ConfigEmitter(renderer).emit(tmp_path, CREATE_CONFIG_FILES)

        assert report.ok
        for spec in CONFIG_FILES.values():
            assert (tmp_path / spec.destination).is_file(), spec.destination

    def test_env_files_share_content(self, renderer: TemplateRenderer, tmp_path: Path) -> None:
        ConfigEmitter(renderer).emit(tmp_path, ["env_example", "env_development"])
        example = (tmp_path / ".env.example").read_text(encoding="utf-8")
        assert example == (tmp_path / ".env.development").read_text(encoding="utf-8")
        assert "REACT_APP_API_URL=" in example

    def test_json_configs_parse(self, renderer: TemplateRenderer, tmp_path: Path) -> None:
        ConfigEmitter(renderer).emit(tmp_path, ["stylelint", "lint_staged", "prettier"])
        for name in (".stylelintrc.json", ".lintstagedrc.json", ".prettierrc"):
            json.loads((tmp_path / name).read_text(encoding="utf-8"))

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_pre_commit_hook_is_executable(
        self, renderer: TemplateRenderer, tmp_path: Path
    ) -> None:
        ConfigEmitter(renderer).emit(tmp_path, ["pre_commit"])
        hook = tmp_path / ".husky" / "pre-commit"
        assert hook.read_text(encoding="utf-8").startswith("#!/bin/sh\n")
        assert hook.stat().st_mode & stat.S_IXUSR

    def test_overwrites_existing(self, renderer: TemplateRenderer, tmp_path: Path) -> None:
        (tmp_path / "tsconfig.json").write_text("{}", encoding="utf-8")
        ConfigEmitter(renderer).emit(tmp_path, ["tsconfig"])
        assert '"compilerOptions"' in (tmp_path / "tsconfig.json").read_text(encoding="utf-8")

    def test_unknown_name(self, renderer: TemplateRenderer, tmp_path: Path) -> None:
        with pytest.raises(KeyError):
            ConfigEmitter(renderer).emit(tmp_path, ["webpack"])
        assert list(tmp_path.iterdir()) == []

    def test_write_failure_is_isolated(
        self,
        renderer: TemplateRenderer,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        original = renderer.render_to_file

        def flaky(template_path, output_path, context):
            if template_path.endswith("tsconfig.json.j2"):
                raise PermissionError(13, "Permission denied")
            return original(template_path, output_path, context)

        with patch.object(renderer, "render_to_file", side_effect=flaky):
            report = ConfigEmitter(renderer).emit(tmp_path, SETUP_CONFIG_FILES)

        assert [name for name, _ in report.failed] == ["tsconfig.json"]
        assert len(report.written) == 3
        assert (tmp_path / ".stylelintrc.json").is_file()
        assert "Error writing tsconfig.json" in capsys.readouterr().out
