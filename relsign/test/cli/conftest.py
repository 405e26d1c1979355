from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from relsign.cli.context import CLIContext
from relsign.core.config import Config
from relsign.core.project import Project
from relsign.output.console import MockConsole


@pytest.fixture
def cli_ctx(tmp_path: Path) -> CLIContext:
    (tmp_path / "pubspec.yaml").write_text("name: demo\n", encoding="utf-8")
    (tmp_path / "android" / "app").mkdir(parents=True)
    return CLIContext(project=Project(root=tmp_path), config=Config(), console=MockConsole())


@pytest.fixture
def write_key_properties(cli_ctx: CLIContext) -> Callable[[str], Path]:
    def write(text: str) -> Path:
        path = cli_ctx.project.descriptor_path()
        path.write_text(text, encoding="utf-8")
        return path

    return write
