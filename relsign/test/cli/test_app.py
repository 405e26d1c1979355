from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from relsign import __version__
from relsign.cli.app import app
from relsign.core.errors import ErrorCode
from relsign.core.project import PROJECT_ENV_VAR
from relsign.signing.errors import ReleaseSigningUnconfiguredError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # --project writes the variable; monkeypatch restores it afterwards.
    monkeypatch.delenv(PROJECT_ENV_VAR, raising=False)


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_project_must_be_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--project", str(tmp_path / "missing"), "check"])

    assert result.exit_code == int(ErrorCode.ENV_ERROR)


def test_resolve_release_without_descriptor(tmp_path: Path) -> None:
    (tmp_path / "android" / "app").mkdir(parents=True)

    result = runner.invoke(app, ["--project", str(tmp_path), "resolve", "bundleRelease"])

    assert result.exit_code == int(ErrorCode.SIGNING_ERROR)
    assert ReleaseSigningUnconfiguredError().message in result.output


def test_resolve_debug_without_descriptor(tmp_path: Path) -> None:
    (tmp_path / "android" / "app").mkdir(parents=True)

    result = runner.invoke(app, ["--project", str(tmp_path), "resolve", "assembleDebug"])

    assert result.exit_code == 0
