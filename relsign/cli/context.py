from __future__ import annotations

from dataclasses import dataclass

import typer

from relsign.core.config import Config, load_config_or_default
from relsign.core.errors import ErrorCode
from relsign.core.project import Project, detect_project
from relsign.core.result import Err
from relsign.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: Config
    console: ConsoleProtocol


def build_context() -> CLIContext:
    console = RichConsole()

    project_result = detect_project()
    if isinstance(project_result, Err):
        console.error(project_result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    project = project_result.value

    config = Config()
    config_result = load_config_or_default(project.config_path)
    if isinstance(config_result, Err):
        console.warning(f"{config_result.error.message} (using defaults)")
    else:
        config = config_result.value

    return CLIContext(project=project, config=config, console=console)
