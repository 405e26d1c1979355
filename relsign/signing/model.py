"""Signing configuration types.

A resolution is either ``Configured`` with a complete descriptor or
``Unconfigured``; consumers branch with ``match`` on the two variants.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .intent import InvocationIntent

__all__ = [
    "KEY_ALIAS",
    "KEY_PASSWORD",
    "REQUIRED_FIELDS",
    "STORE_FILE",
    "STORE_PASSWORD",
    "Configured",
    "KeystoreDescriptor",
    "Signing",
    "SigningResolution",
    "Unconfigured",
    "resolve_store_path",
]

STORE_FILE = "storeFile"
STORE_PASSWORD = "storePassword"
KEY_ALIAS = "keyAlias"
KEY_PASSWORD = "keyPassword"

# Order in which fields are read into a descriptor; the first absent one is reported.
REQUIRED_FIELDS: tuple[str, ...] = (KEY_ALIAS, KEY_PASSWORD, STORE_FILE, STORE_PASSWORD)

MASK = "********"


def resolve_store_path(store_file: str, module_dir: Path) -> Path:
    """Resolve storeFile the way Gradle's ``file()`` does in the app module.

    Absolute paths are kept; relative paths are taken from ``module_dir``.
    """
    path = Path(store_file).expanduser()
    if path.is_absolute():
        return path
    return module_dir / path


@dataclass(frozen=True, slots=True)
class KeystoreDescriptor:
    """Release signing credentials read from key.properties.

    Passwords are left out of ``repr`` so descriptors can be printed safely.
    """

    store_file: str
    store_password: str = field(repr=False)
    key_alias: str
    key_password: str = field(repr=False)

    def store_path(self, module_dir: Path) -> Path:
        return resolve_store_path(self.store_file, module_dir)

    def masked(self) -> dict[str, str]:
        """Descriptor as key.properties keys, passwords masked."""
        return {
            STORE_FILE: self.store_file,
            STORE_PASSWORD: MASK,
            KEY_ALIAS: self.key_alias,
            KEY_PASSWORD: MASK,
        }


@dataclass(frozen=True, slots=True)
class Configured:
    descriptor: KeystoreDescriptor


@dataclass(frozen=True, slots=True)
class Unconfigured:
    pass


Signing = Configured | Unconfigured


@dataclass(frozen=True, slots=True)
class SigningResolution:
    """Outcome of resolving release signing for one invocation."""

    signing: Signing
    intent: InvocationIntent

    @property
    def is_configured(self) -> bool:
        return isinstance(self.signing, Configured)

    @property
    def must_fail(self) -> bool:
        """True iff no signing config exists and a release build was requested."""
        return isinstance(self.signing, Unconfigured) and self.intent.is_release_build

    def to_dict(self) -> dict[str, object]:
        match self.signing:
            case Configured(descriptor=descriptor):
                signing: dict[str, object] = {"status": "configured", **descriptor.masked()}
            case Unconfigured():
                signing = {"status": "unconfigured"}
        return {
            "signing": signing,
            "build_type": self.intent.build_type,
            "tasks": list(self.intent.task_names),
            "must_fail": self.must_fail,
        }
