from __future__ import annotations

import typer

from relsign.cli.context import CLIContext, build_context
from relsign.core.errors import ErrorCode
from relsign.output.console import Style
from relsign.services.check import CheckResult, CheckStatus, SigningCheckService


def check() -> None:
    """Check the release signing setup and suggest fixes."""
    ctx = build_context()

    service = SigningCheckService(project=ctx.project, settings=ctx.config.signing)
    report = service.run()

    ctx.console.print(f"project: {ctx.project.root}", Style.DIM)
    ctx.console.print(f"descriptor: {report.descriptor_path}", Style.DIM)
    _print_group(ctx, "Signing", report.results)

    if report.has_errors():
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))


def _print_group(ctx: CLIContext, title: str, results: list[CheckResult]) -> None:
    console = ctx.console
    console.header(title)
    for r in results:
        console.print(f"{r.name}: {r.message}", _style_for_status(r.status))
        if r.hint and r.status != CheckStatus.OK:
            console.print(f"hint: {r.hint}", Style.DIM)


def _style_for_status(status: CheckStatus) -> Style:
    if status == CheckStatus.OK:
        return Style.SUCCESS
    if status == CheckStatus.WARNING:
        return Style.WARNING
    return Style.ERROR
