from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from relsign.core.config import DEFAULT_RELEASE_MARKER

__all__ = ["BuildType", "InvocationIntent"]

BuildType = Literal["release", "debug"]


@dataclass(frozen=True, slots=True)
class InvocationIntent:
    """What the build driver was asked to do in this invocation.

    Attributes:
        task_names: Requested task names, in order
        is_release_build: True if any task name contains the release marker,
            compared case-insensitively
    """

    task_names: tuple[str, ...]
    is_release_build: bool

    @classmethod
    def from_task_names(
        cls,
        names: Iterable[str],
        *,
        marker: str = DEFAULT_RELEASE_MARKER,
    ) -> InvocationIntent:
        tasks = tuple(names)
        needle = marker.lower()
        return cls(
            task_names=tasks,
            is_release_build=any(needle in name.lower() for name in tasks),
        )

    @property
    def build_type(self) -> BuildType:
        return "release" if self.is_release_build else "debug"
