from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from relsign.core.config import SigningSettings
from relsign.core.project import Project
from relsign.core.result import Err, Ok, Result
from relsign.signing.errors import ReleaseSigningUnconfiguredError, SigningError
from relsign.signing.model import SigningResolution
from relsign.signing.properties import read_descriptor
from relsign.signing.resolver import resolve


class SigningService:
    """Reads the descriptor once and resolves signing for a set of tasks."""

    def __init__(self, *, project: Project, settings: SigningSettings) -> None:
        self._project = project
        self._settings = settings

    @property
    def descriptor_path(self) -> Path:
        return self._project.descriptor_path(self._settings)

    def resolve(self, task_names: Sequence[str]) -> Result[SigningResolution, SigningError]:
        """Resolve signing and fail if a release build has nothing to sign with."""
        descriptor_path = self.descriptor_path
        contents = read_descriptor(descriptor_path)
        if isinstance(contents, Err):
            return contents

        resolution = resolve(
            contents.value,
            task_names,
            release_marker=self._settings.release_marker,
        ).map_err(lambda e: replace(e, path=descriptor_path))
        if isinstance(resolution, Err):
            return resolution

        return self.require(resolution.value)

    def require(
        self, resolution: SigningResolution
    ) -> Result[SigningResolution, ReleaseSigningUnconfiguredError]:
        if resolution.must_fail:
            return Err(
                ReleaseSigningUnconfiguredError(
                    descriptor=self._settings.descriptor,
                    rebuild_command=self._settings.rebuild_command,
                )
            )
        return Ok(resolution)
