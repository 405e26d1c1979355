from __future__ import annotations

from .model import KEY_ALIAS, KEY_PASSWORD, STORE_FILE, STORE_PASSWORD
from .properties import dump_properties

__all__ = ["DEFAULT_KEY_ALIAS", "DEFAULT_STORE_FILE", "render_template"]

DEFAULT_STORE_FILE = "upload-keystore.jks"
DEFAULT_KEY_ALIAS = "upload"

_HEADER = """\
# Release signing for the Android app module.
# storeFile is resolved relative to android/app unless it is absolute.
# Keep this file out of version control.
"""


def render_template(
    *,
    store_file: str = DEFAULT_STORE_FILE,
    key_alias: str = DEFAULT_KEY_ALIAS,
) -> str:
    """Render a key.properties skeleton with empty passwords."""
    return _HEADER + dump_properties(
        {
            STORE_PASSWORD: "",
            KEY_PASSWORD: "",
            KEY_ALIAS: key_alias,
            STORE_FILE: store_file,
        }
    )
