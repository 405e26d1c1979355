from __future__ import annotations

import typer

from relsign.cli.commands._helpers import unwrap_or_exit
from relsign.cli.context import build_context
from relsign.output.console import Style
from relsign.services.descriptor import write_template
from relsign.signing.template import DEFAULT_KEY_ALIAS, DEFAULT_STORE_FILE


def init(
    store_file: str = typer.Option(
        DEFAULT_STORE_FILE,
        "--store-file",
        help="Keystore path, absolute or relative to android/app.",
    ),
    key_alias: str = typer.Option(DEFAULT_KEY_ALIAS, "--key-alias", help="Key alias."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    """Create a key.properties template for release signing."""
    ctx = build_context()

    path = ctx.project.descriptor_path(ctx.config.signing)
    written = unwrap_or_exit(
        write_template(path, store_file=store_file, key_alias=key_alias, force=force),
        ctx,
    )

    ctx.console.success(f"wrote {written}")
    ctx.console.print("hint: fill in storePassword and keyPassword", Style.DIM)
