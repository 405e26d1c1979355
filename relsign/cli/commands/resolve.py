from __future__ import annotations

import json

import typer

from relsign.cli.commands._helpers import unwrap_or_exit
from relsign.cli.context import CLIContext, build_context
from relsign.output.console import Style
from relsign.services.signing import SigningService
from relsign.signing.model import MASK, Configured, SigningResolution, Unconfigured


def resolve(
    tasks: list[str] | None = typer.Argument(
        None,
        help="Task names requested for this build (e.g. assembleRelease).",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the resolution as JSON."),
) -> None:
    """Resolve release signing for the given tasks."""
    ctx = build_context()

    service = SigningService(project=ctx.project, settings=ctx.config.signing)
    resolution = unwrap_or_exit(service.resolve(tasks or []), ctx)

    if json_output:
        typer.echo(json.dumps(resolution.to_dict(), indent=2))
        return

    _print_resolution(ctx, resolution)


def _print_resolution(ctx: CLIContext, resolution: SigningResolution) -> None:
    console = ctx.console
    build_type = resolution.intent.build_type
    match resolution.signing:
        case Configured(descriptor=descriptor):
            console.success(f"release signing configured ({build_type} build)")
            console.print(f"keyAlias: {descriptor.key_alias}", Style.DIM)
            console.print(
                f"storeFile: {descriptor.store_path(ctx.project.app_module_dir)}", Style.DIM
            )
            console.print(f"storePassword: {MASK}", Style.DIM)
            console.print(f"keyPassword: {MASK}", Style.DIM)
        case Unconfigured():
            console.info(f"release signing not configured ({build_type} build, not required)")
