"""Flutter project detection and paths.

A project root is a directory holding ``pubspec.yaml`` or an ``android/``
directory. The Android module that consumes the signing config lives in
``android/app``; Gradle resolves a relative ``storeFile`` against it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import CONFIG_FILENAME, SigningSettings
from .result import Err, Ok, Result

__all__ = [
    "PROJECT_ENV_VAR",
    "Project",
    "ProjectError",
    "detect_project",
    "find_project_upward",
    "is_project_root",
]

PROJECT_ENV_VAR = "RELSIGN_PROJECT"


@dataclass(frozen=True)
class ProjectError:
    """Error when the project root cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A detected Flutter project."""

    root: Path

    @property
    def config_path(self) -> Path:
        """Path to relsign.toml."""
        return self.root / CONFIG_FILENAME

    @property
    def android_dir(self) -> Path:
        return self.root / "android"

    @property
    def app_module_dir(self) -> Path:
        """Gradle module directory of the application (android/app)."""
        return self.android_dir / "app"

    def descriptor_path(self, settings: SigningSettings | None = None) -> Path:
        """Path to the keystore descriptor (key.properties)."""
        settings = settings or SigningSettings()
        return self.root / settings.descriptor

    def __str__(self) -> str:
        return str(self.root)



def is_project_root(path: Path) -> bool:
    return (path / "pubspec.yaml").is_file() or (path / "android").is_dir()


def find_project_upward(start: Path) -> Path | None:
    """Search upward from start for a project root."""
    for parent in (start, *start.parents):
        if is_project_root(parent):
            return parent
    return None


def detect_project(
    *,
    start_dir: Path | None = None,
    env_var: str = PROJECT_ENV_VAR,
) -> Result[Project, ProjectError]:
    """Detect the project root directory.

    Detection order:
    1. ``RELSIGN_PROJECT`` environment variable (set by ``--project``)
    2. Search upward from start_dir (or cwd)
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir():
            return Ok(Project(root=env_path))
        return Err(
            ProjectError(
                message=f"${env_var} is set to '{env_value}' but it is not a directory",
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(search_start)
    if found is None:
        return Err(
            ProjectError(
                message="Could not find a Flutter project (no pubspec.yaml or android/ found)",
                searched_from=search_start,
            )
        )
    return Ok(Project(root=found))
