"""Tests for relsign.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relsign.core.config import (
    Config,
    ConfigError,
    SigningSettings,
    load_config,
    load_config_or_default,
)
from relsign.core.result import Err, Ok


class TestSigningSettings:
    def test_defaults(self) -> None:
        settings = SigningSettings()
        assert settings.descriptor == "android/key.properties"
        assert settings.release_marker == "release"
        assert settings.rebuild_command == "flutter build appbundle --release"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            SigningSettings().descriptor = "x"  # type: ignore[misc]


class TestConfigFromDict:
    def test_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_overrides(self) -> None:
        config = Config.from_dict(
            {
                "signing": {
                    "descriptor": "android/release.properties",
                    "release_marker": "prod",
                    "rebuild_command": "flutter build apk --release",
                }
            }
        )
        assert config.signing.descriptor == "android/release.properties"
        assert config.signing.release_marker == "prod"
        assert config.signing.rebuild_command == "flutter build apk --release"

    def test_blank_values_fall_back_to_defaults(self) -> None:
        config = Config.from_dict({"signing": {"descriptor": "  ", "release_marker": 3}})
        assert config.signing == SigningSettings()


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "relsign.toml"
        path.write_text('[signing]\nrelease_marker = "Prod"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.signing.release_marker == "Prod"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "relsign.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "relsign.toml"
        path.write_text("[signing\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert result.error.path == path
        assert "Invalid TOML" in result.error.message

    def test_signing_not_a_table(self, tmp_path: Path) -> None:
        path = tmp_path / "relsign.toml"
        path.write_text('signing = "yes"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "[signing]" in result.error.message


class TestLoadConfigOrDefault:
    def test_missing_file_is_default(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "relsign.toml") == Ok(Config())

    def test_invalid_file_is_error(self, tmp_path: Path) -> None:
        path = tmp_path / "relsign.toml"
        path.write_text("not toml at all =", encoding="utf-8")

        assert isinstance(load_config_or_default(path), Err)
