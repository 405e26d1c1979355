"""Tests for relsign.signing.template module."""

from relsign.core.result import Ok
from relsign.signing.properties import parse_properties
from relsign.signing.resolver import resolve
from relsign.signing.template import render_template


class TestRenderTemplate:
    def test_defaults(self) -> None:
        assert parse_properties(render_template()) == {
            "storePassword": "",
            "keyPassword": "",
            "keyAlias": "upload",
            "storeFile": "upload-keystore.jks",
        }

    def test_starts_with_comment(self) -> None:
        assert render_template().startswith("# ")

    def test_custom_values(self) -> None:
        data = parse_properties(
            render_template(store_file="C:\\keys\\upload.jks", key_alias="release key")
        )
        assert data["storeFile"] == "C:\\keys\\upload.jks"
        assert data["keyAlias"] == "release key"

    def test_template_resolves_as_configured(self) -> None:
        result = resolve(parse_properties(render_template()), ["bundleRelease"])
        assert isinstance(result, Ok)
        assert result.value.is_configured
