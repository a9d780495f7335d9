"""Tests for manifest.json parsing."""

import pytest

from xpinstall.errors import AddonFormatError
from xpinstall.manifest import load_modern_manifest, parse_modern_manifest

from conftest import make_manifest_json


class TestParseModernManifest:
    """Test WebExtension manifest parsing."""

    def test_fields_copied(self):
        data = {
            "name": "Web Sample",
            "version": "2.1",
            "applications": {"gecko": {"id": "web@example.com"}},
        }
        details = parse_modern_manifest(data)

        assert details.id == "web@example.com"
        assert details.name == "Web Sample"
        assert details.version == "2.1"
        assert details.unpack is False

    def test_name_and_version_optional(self):
        details = parse_modern_manifest({"applications": {"gecko": {"id": "a@b"}}})
        assert details.name is None
        assert details.version is None

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"applications": {}},
            {"applications": {"gecko": {}}},
            {"applications": {"gecko": {"id": ""}}},
            {"applications": None},
            {"applications": {"gecko": "web@example.com"}},
            {"applications": {"gecko": {"id": 123}}},
            {"applications": {"gecko": {"id": ["a@b"]}}},
        ],
    )
    def test_missing_id(self, data):
        """A missing segment or a non-string applications.gecko.id is an error."""
        with pytest.raises(AddonFormatError, match="Could not find add-on ID"):
            parse_modern_manifest(data, source="/x/webext")

    def test_never_unpacked(self):
        data = {"applications": {"gecko": {"id": "a@b"}}, "unpack": True}
        assert parse_modern_manifest(data).unpack is False


class TestLoadModernManifest:
    """Test decoding manifest.json bytes."""

    def test_load(self):
        details = load_modern_manifest(make_manifest_json().encode("utf-8"))
        assert details.id == "web@example.com"

    def test_load_with_bom(self):
        raw = b"\xef\xbb\xbf" + make_manifest_json().encode("utf-8")
        assert load_modern_manifest(raw).id == "web@example.com"

    def test_invalid_json(self):
        with pytest.raises(AddonFormatError) as exc_info:
            load_modern_manifest(b"{not json", source="/x/webext")
        assert exc_info.value.path == "/x/webext"

    def test_non_object(self):
        with pytest.raises(AddonFormatError):
            load_modern_manifest(b"[1, 2, 3]")
