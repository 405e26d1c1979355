"""Error values produced while resolving release signing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relsign.core.config import DEFAULT_DESCRIPTOR, DEFAULT_REBUILD_COMMAND

__all__ = [
    "DescriptorExists",
    "DescriptorWriteFailed",
    "InitError",
    "MissingFieldError",
    "PropertiesUnreadable",
    "ReleaseSigningUnconfiguredError",
    "RelsignError",
    "SigningError",
]


@dataclass(frozen=True, slots=True)
class PropertiesUnreadable:
    """The descriptor file exists but could not be read or decoded."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class MissingFieldError:
    """storeFile is set but another required field is absent."""

    name: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseSigningUnconfiguredError:
    """A release build was requested without a usable descriptor."""

    descriptor: str = DEFAULT_DESCRIPTOR
    rebuild_command: str = DEFAULT_REBUILD_COMMAND

    @property
    def message(self) -> str:
        return (
            f"Release signing isn't configured. Create {self.descriptor} and point it at "
            f"your upload keystore (.jks). Then rebuild with: {self.rebuild_command}"
        )


@dataclass(frozen=True, slots=True)
class DescriptorExists:
    path: Path
    hint: str = "Pass --force to overwrite it"


@dataclass(frozen=True, slots=True)
class DescriptorWriteFailed:
    path: Path
    reason: str


SigningError = PropertiesUnreadable | MissingFieldError | ReleaseSigningUnconfiguredError

InitError = DescriptorExists | DescriptorWriteFailed

RelsignError = SigningError | InitError
