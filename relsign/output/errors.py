"""Error presentation and exit code mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from relsign.core.errors import ErrorCode
from relsign.output.console import Style
from relsign.signing.errors import (
    DescriptorExists,
    DescriptorWriteFailed,
    MissingFieldError,
    PropertiesUnreadable,
    ReleaseSigningUnconfiguredError,
    RelsignError,
)

if TYPE_CHECKING:
    from relsign.output.console import ConsoleProtocol

__all__ = ["error_exit_code", "print_error"]


def print_error(error: RelsignError, console: ConsoleProtocol) -> None:
    """Print an error to the console with a hint where one helps."""
    match error:
        case PropertiesUnreadable(path=path, reason=reason):
            console.error(f"cannot read {path}: {reason}")
        case MissingFieldError(name=name, path=path):
            where = path if path is not None else "key.properties"
            console.error(f"{where}: missing required field '{name}'")
            console.print(f"hint: add {name}=... to {where}", Style.DIM)
        case ReleaseSigningUnconfiguredError():
            console.error(error.message)
        case DescriptorExists(path=path, hint=hint):
            console.error(f"{path} already exists")
            console.print(f"hint: {hint}", Style.DIM)
        case DescriptorWriteFailed(path=path, reason=reason):
            console.error(f"cannot write {path}: {reason}")


def error_exit_code(error: RelsignError) -> int:
    match error:
        case MissingFieldError() | ReleaseSigningUnconfiguredError():
            return int(ErrorCode.SIGNING_ERROR)
        case PropertiesUnreadable() | DescriptorWriteFailed():
            return int(ErrorCode.IO_ERROR)
        case DescriptorExists():
            return int(ErrorCode.USER_ERROR)
        case _:
            assert_never(error)
