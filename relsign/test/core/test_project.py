"""Tests for relsign.core.project module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relsign.core.config import SigningSettings
from relsign.core.project import (
    PROJECT_ENV_VAR,
    Project,
    detect_project,
    find_project_upward,
    is_project_root,
)
from relsign.core.result import Err, Ok


@pytest.fixture
def flutter_project(tmp_path: Path) -> Path:
    (tmp_path / "pubspec.yaml").write_text("name: demo\n", encoding="utf-8")
    (tmp_path / "android" / "app").mkdir(parents=True)
    return tmp_path


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(PROJECT_ENV_VAR, raising=False)


class TestProject:
    def test_paths(self, tmp_path: Path) -> None:
        project = Project(root=tmp_path)
        assert project.config_path == tmp_path / "relsign.toml"
        assert project.android_dir == tmp_path / "android"
        assert project.app_module_dir == tmp_path / "android" / "app"

    def test_default_descriptor_path(self, tmp_path: Path) -> None:
        project = Project(root=tmp_path)
        assert project.descriptor_path() == tmp_path / "android" / "key.properties"

    def test_configured_descriptor_path(self, tmp_path: Path) -> None:
        project = Project(root=tmp_path)
        settings = SigningSettings(descriptor="signing/upload.properties")
        assert project.descriptor_path(settings) == tmp_path / "signing" / "upload.properties"


class TestIsProjectRoot:
    def test_pubspec(self, tmp_path: Path) -> None:
        (tmp_path / "pubspec.yaml").write_text("", encoding="utf-8")
        assert is_project_root(tmp_path)

    def test_android_dir(self, tmp_path: Path) -> None:
        (tmp_path / "android").mkdir()
        assert is_project_root(tmp_path)

    def test_empty_dir(self, tmp_path: Path) -> None:
        assert not is_project_root(tmp_path)


class TestDetectProject:
    def test_finds_upward(self, flutter_project: Path) -> None:
        nested = flutter_project / "lib" / "src"
        nested.mkdir(parents=True)

        assert find_project_upward(nested) == flutter_project
        assert detect_project(start_dir=nested) == Ok(Project(root=flutter_project.resolve()))

    def test_env_var_wins(
        self, flutter_project: Path, tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        other = tmp_path_factory.mktemp("other")
        monkeypatch.setenv(PROJECT_ENV_VAR, str(other))

        result = detect_project(start_dir=flutter_project)

        assert result == Ok(Project(root=other.resolve()))

    def test_env_var_not_a_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(PROJECT_ENV_VAR, str(tmp_path / "missing"))

        result = detect_project(start_dir=tmp_path)

        assert isinstance(result, Err)
        assert PROJECT_ENV_VAR in result.error.message

    def test_not_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "relsign.core.project.find_project_upward", lambda start: None
        )

        result = detect_project(start_dir=tmp_path)

        assert isinstance(result, Err)
        assert result.error.searched_from == tmp_path.resolve()
