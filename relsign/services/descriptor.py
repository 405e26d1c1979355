from __future__ import annotations

from pathlib import Path

from relsign.core.result import Err, Ok, Result
from relsign.signing.errors import DescriptorExists, DescriptorWriteFailed, InitError
from relsign.signing.properties import ENCODING
from relsign.signing.template import render_template


def write_template(
    path: Path,
    *,
    store_file: str,
    key_alias: str,
    force: bool = False,
) -> Result[Path, InitError]:
    """Write a key.properties skeleton to ``path``.

    An existing file is only replaced when ``force`` is set.
    """
    if path.exists() and not force:
        return Err(DescriptorExists(path=path))

    content = render_template(store_file=store_file, key_alias=key_alias)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode(ENCODING))
    except OSError as e:
        return Err(DescriptorWriteFailed(path=path, reason=e.strerror or str(e)))
    return Ok(path)
