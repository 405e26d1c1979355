"""Error codes for CLI exit status.

The values are process exit codes and must stay stable:
- 0: Success
- 1: User error (bad arguments, refusing to overwrite a file)
- 2: Environment error (project not found, failed checks)
- 3: Signing error (release signing missing or incomplete)
- 5: I/O error (descriptor unreadable, template not writable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    SIGNING_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
