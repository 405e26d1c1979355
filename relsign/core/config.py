"""Typed configuration loading.

An optional ``relsign.toml`` at the project root overrides where the keystore
descriptor lives and how release tasks are recognized:

    [signing]
    descriptor = "android/key.properties"
    release_marker = "release"
    rebuild_command = "flutter build appbundle --release"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_DESCRIPTOR",
    "DEFAULT_RELEASE_MARKER",
    "DEFAULT_REBUILD_COMMAND",
    "Config",
    "ConfigError",
    "SigningSettings",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "relsign.toml"

DEFAULT_DESCRIPTOR = "android/key.properties"
DEFAULT_RELEASE_MARKER = "release"
DEFAULT_REBUILD_COMMAND = "flutter build appbundle --release"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class SigningSettings:
    """Where to find the descriptor and how to classify tasks."""

    descriptor: str = DEFAULT_DESCRIPTOR
    release_marker: str = DEFAULT_RELEASE_MARKER
    rebuild_command: str = DEFAULT_REBUILD_COMMAND


@dataclass(frozen=True, slots=True)
class Config:
    signing: SigningSettings = field(default_factory=SigningSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a parsed TOML mapping."""
        signing: StrDict = get_table(data, "signing") or {}
        return cls(
            signing=SigningSettings(
                descriptor=get_str(signing, "descriptor") or DEFAULT_DESCRIPTOR,
                release_marker=get_str(signing, "release_marker") or DEFAULT_RELEASE_MARKER,
                rebuild_command=get_str(signing, "rebuild_command") or DEFAULT_REBUILD_COMMAND,
            )
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relsign.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    signing = result.value.get("signing")
    if signing is not None and as_str_dict(signing) is None:
        return Err(ConfigError("[signing] must be a TOML table", path=path))

    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config, treating a missing file as the default config.

    A present but invalid file is still an error so callers can warn about it.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
