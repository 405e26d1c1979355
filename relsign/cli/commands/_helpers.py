"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from relsign.core.result import Err, Result
from relsign.output.errors import error_exit_code, print_error
from relsign.signing.errors import RelsignError

if TYPE_CHECKING:
    from relsign.cli.context import CLIContext


T = TypeVar("T")


def unwrap_or_exit(result: Result[T, RelsignError], ctx: CLIContext) -> T:
    """Return the value of an Ok, or print the error and exit.

    Replaces the pattern:
        match result:
            case Err(e):
                print_error(e, ctx.console)
                raise typer.Exit(code=error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_error(result.error, ctx.console)
        raise typer.Exit(code=error_exit_code(result.error))
    return result.value
