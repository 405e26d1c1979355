from __future__ import annotations

import os
from pathlib import Path

import typer

from relsign import __version__
from relsign.cli.commands.check import check
from relsign.cli.commands.init import init
from relsign.cli.commands.resolve import resolve
from relsign.core.errors import ErrorCode
from relsign.core.project import PROJECT_ENV_VAR


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(resolve)
app.command()(check)
app.command()(init)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    project: Path | None = typer.Option(
        None,
        "--project",
        help="Flutter project root (overrides auto detection)",
    ),
) -> None:
    if project is not None:
        try:
            root = project.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --project: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --project '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

        os.environ[PROJECT_ENV_VAR] = str(root)


def main() -> None:
    app()
