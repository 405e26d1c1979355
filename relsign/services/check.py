"""Diagnostics for the release signing setup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from relsign.core.config import SigningSettings
from relsign.core.project import Project
from relsign.core.result import Err
from relsign.signing.model import (
    KEY_ALIAS,
    KEY_PASSWORD,
    STORE_FILE,
    STORE_PASSWORD,
    resolve_store_path,
)
from relsign.signing.properties import read_descriptor
from relsign.signing.resolver import has_release_keystore

KEYSTORE_SUFFIXES = (".jks", ".keystore")


class CheckStatus(Enum):
    """Status of a check result."""

    OK = auto()
    """Check passed."""

    WARNING = auto()
    """Debug builds work, release builds may not."""

    ERROR = auto()
    """Release builds will fail."""


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a single check.

    Attributes:
        name: What was checked (e.g. "key.properties", "keyAlias")
        status: Whether the check passed, warned, or failed
        message: Human-readable result message
        hint: Optional fix
    """

    name: str
    status: CheckStatus
    message: str
    hint: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == CheckStatus.ERROR

    @property
    def is_warning(self) -> bool:
        return self.status == CheckStatus.WARNING

    @classmethod
    def success(cls, name: str, message: str) -> CheckResult:
        return cls(name=name, status=CheckStatus.OK, message=message)

    @classmethod
    def warning(cls, name: str, message: str, hint: str | None = None) -> CheckResult:
        return cls(name=name, status=CheckStatus.WARNING, message=message, hint=hint)

    @classmethod
    def error(cls, name: str, message: str, hint: str | None = None) -> CheckResult:
        return cls(name=name, status=CheckStatus.ERROR, message=message, hint=hint)


@dataclass(frozen=True, slots=True)
class CheckReport:
    descriptor_path: Path
    results: list[CheckResult]

    def has_errors(self) -> bool:
        return any(r.is_error for r in self.results)


class SigningCheckService:
    def __init__(self, *, project: Project, settings: SigningSettings) -> None:
        self._project = project
        self._settings = settings

    def run(self) -> CheckReport:
        path = self._project.descriptor_path(self._settings)
        return CheckReport(descriptor_path=path, results=self._check(path))

    def _check(self, path: Path) -> list[CheckResult]:
        name = path.name
        contents = read_descriptor(path)
        if isinstance(contents, Err):
            e = contents.error
            return [CheckResult.error(name, f"unreadable: {e.reason}")]

        data = contents.value
        if data is None:
            return [
                CheckResult.warning(
                    name,
                    "not found (release builds will fail)",
                    hint="Run: relsign init",
                )
            ]

        results = [CheckResult.success(name, f"found at {path}")]
        if not has_release_keystore(data):
            results.append(
                CheckResult.warning(
                    STORE_FILE,
                    "missing or blank (descriptor is ignored, release builds will fail)",
                    hint=f"Set {STORE_FILE} to your upload keystore (.jks)",
                )
            )
            return results

        results.extend(self._check_fields(data))
        results.extend(self._check_keystore(data[STORE_FILE]))
        return results

    def _check_fields(self, data: dict[str, str]) -> list[CheckResult]:
        results: list[CheckResult] = []
        for key in (KEY_ALIAS, KEY_PASSWORD, STORE_PASSWORD):
            value = data.get(key)
            if value is None:
                results.append(CheckResult.error(key, "missing", hint=f"Add {key}=... to the file"))
            elif not value:
                results.append(CheckResult.warning(key, "empty"))
            elif key == KEY_ALIAS:
                results.append(CheckResult.success(key, value))
            else:
                results.append(CheckResult.success(key, "set"))
        return results

    def _check_keystore(self, store_file: str) -> list[CheckResult]:
        store_path = resolve_store_path(store_file, self._project.app_module_dir)
        results: list[CheckResult] = []
        if store_path.is_file():
            results.append(CheckResult.success("keystore", str(store_path)))
        else:
            results.append(
                CheckResult.error(
                    "keystore",
                    f"not found: {store_path}",
                    hint="Relative storeFile paths are resolved from android/app",
                )
            )

        if store_path.suffix.lower() not in KEYSTORE_SUFFIXES:
            results.append(
                CheckResult.warning("keystore", f"unexpected extension '{store_path.suffix}'")
            )
        return results
