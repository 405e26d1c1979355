"""Reader for Java ``.properties`` files.

Gradle loads key.properties with ``java.util.Properties.load(InputStream)``,
so the file is decoded as ISO-8859-1 and follows the same line rules:

- blank lines and lines starting with ``#`` or ``!`` are ignored
- a line ending in an odd number of backslashes continues on the next one
- the key ends at the first unescaped ``=``, ``:`` or whitespace
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` are decoded; a backslash
  before any other character yields that character
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterator, Mapping
from pathlib import Path

from relsign.core.result import Err, Ok, Result

from .errors import PropertiesUnreadable

__all__ = ["dump_properties", "parse_properties", "read_descriptor"]

ENCODING = "iso-8859-1"

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_NEWLINE = re.compile(r"\r\n|\r|\n")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _logical_lines(text: str) -> Iterator[str]:
    pending: str | None = None
    for raw in _NEWLINE.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
        else:
            line = pending + line
            pending = None

        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = line[:-1]
            continue
        yield line

    if pending:
        yield pending


def _split_key_value(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in _SEPARATORS or c in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    if i < len(line) and line[i] in _SEPARATORS:
        return key, line[i + 1 :].lstrip(_WHITESPACE)

    value = line[i:].lstrip(_WHITESPACE)
    if value and value[0] in _SEPARATORS:
        value = value[1:].lstrip(_WHITESPACE)
    return key, value


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        c = text[i]
        i += 1
        if c != "\\":
            out.append(c)
            continue
        if i >= len(text):
            break
        e = text[i]
        i += 1
        if e == "u":
            digits = text[i : i + 4]
            if len(digits) < 4 or any(d not in string.hexdigits for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(e, e))
    # Consecutive \uXXXX escapes may form a UTF-16 surrogate pair.
    joined = "".join(out)
    return joined.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dict; later keys override earlier ones.

    Raises:
        ValueError: On a malformed ``\\uXXXX`` escape.
    """
    result: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_key_value(line)
        result[_unescape(key)] = _unescape(value)
    return result


def read_descriptor(path: Path) -> Result[dict[str, str] | None, PropertiesUnreadable]:
    """Read the keystore descriptor once.

    Returns:
        Ok(None) if the file does not exist, Ok(contents) if it was parsed,
        Err(PropertiesUnreadable) if it exists but cannot be read.
    """
    if not path.exists():
        return Ok(None)

    try:
        text = path.read_bytes().decode(ENCODING)
    except PermissionError:
        return Err(PropertiesUnreadable(path=path, reason="permission denied"))
    except IsADirectoryError:
        return Err(PropertiesUnreadable(path=path, reason="is a directory"))
    except OSError as e:
        return Err(PropertiesUnreadable(path=path, reason=e.strerror or str(e)))

    try:
        return Ok(parse_properties(text))
    except ValueError as e:
        return Err(PropertiesUnreadable(path=path, reason=str(e)))


def _escape(text: str, *, is_key: bool) -> str:
    out: list[str] = []
    for i, c in enumerate(text):
        if c == "\\":
            out.append("\\\\")
        elif c == " " and (is_key or i == 0):
            out.append("\\ ")
        elif c in "\t\n\r\f":
            out.append("\\" + {"\t": "t", "\n": "n", "\r": "r", "\f": "f"}[c])
        elif is_key and c in "=:#!":
            out.append("\\" + c)
        elif ord(c) > 0xFFFF:
            units = c.encode("utf-16-be")
            out.append(f"\\u{units[:2].hex()}\\u{units[2:].hex()}")
        elif ord(c) > 0xFF:
            out.append(f"\\u{ord(c):04x}")
        else:
            out.append(c)
    return "".join(out)


def dump_properties(entries: Mapping[str, str]) -> str:
    """Serialize entries so that ``parse_properties`` reads them back unchanged."""
    return "".join(
        f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}\n"
        for key, value in entries.items()
    )
