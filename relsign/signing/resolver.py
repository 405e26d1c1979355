"""Release signing resolution.

``resolve`` is pure: it receives the already-read descriptor contents and the
requested task names, and never touches the filesystem or aborts the build.
Turning ``must_fail`` into an error is left to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from relsign.core.config import DEFAULT_RELEASE_MARKER
from relsign.core.result import Err, Ok, Result

from .errors import MissingFieldError
from .intent import InvocationIntent
from .model import (
    KEY_ALIAS,
    KEY_PASSWORD,
    REQUIRED_FIELDS,
    STORE_FILE,
    STORE_PASSWORD,
    Configured,
    KeystoreDescriptor,
    SigningResolution,
    Unconfigured,
)

__all__ = ["build_descriptor", "has_release_keystore", "resolve"]


def has_release_keystore(contents: Mapping[str, object] | None) -> bool:
    """True if a descriptor exists and its storeFile is a non-blank string."""
    if contents is None:
        return False
    store_file = contents.get(STORE_FILE)
    return isinstance(store_file, str) and bool(store_file.strip())


def build_descriptor(
    contents: Mapping[str, object],
) -> Result[KeystoreDescriptor, MissingFieldError]:
    values: dict[str, str] = {}
    for name in REQUIRED_FIELDS:
        value = contents.get(name)
        if not isinstance(value, str):
            return Err(MissingFieldError(name))
        values[name] = value

    return Ok(
        KeystoreDescriptor(
            store_file=values[STORE_FILE],
            store_password=values[STORE_PASSWORD],
            key_alias=values[KEY_ALIAS],
            key_password=values[KEY_PASSWORD],
        )
    )


def resolve(
    contents: Mapping[str, object] | None,
    task_names: Sequence[str],
    *,
    release_marker: str = DEFAULT_RELEASE_MARKER,
) -> Result[SigningResolution, MissingFieldError]:
    """Decide whether release signing is configured for this invocation.

    Args:
        contents: Parsed key.properties, or None if the file does not exist
        task_names: Task names requested for this invocation
        release_marker: Substring that marks a task as a release task

    Returns:
        Ok(SigningResolution) with ``Configured`` when the descriptor has a
        non-blank storeFile, otherwise ``Unconfigured``.
        Err(MissingFieldError) when storeFile is set but another field is absent.
    """
    intent = InvocationIntent.from_task_names(task_names, marker=release_marker)

    if contents is not None and has_release_keystore(contents):
        return build_descriptor(contents).map(
            lambda descriptor: SigningResolution(signing=Configured(descriptor), intent=intent)
        )

    return Ok(SigningResolution(signing=Unconfigured(), intent=intent))
