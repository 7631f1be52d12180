"""Tests for mime.types parsing, merging and lookups."""

import pytest

from mojo_codegen.catalogs.media_types import (
    MediaTypeIndex,
    build_media_type_spec,
    extension_of,
    load_media_types,
    parse_media_type_lines,
    read_default_media_types,
    read_user_media_types,
)
from mojo_codegen.codegen.core.schema import ArtifactKind, CatalogEntry
from mojo_codegen.errors import CatalogError, MissingInputFileError


class TestParseMediaTypeLines:
    def test_type_and_extensions(self):
        entries = parse_media_type_lines(["image/jpeg\tjpeg jpg  jpe"])
        assert len(entries) == 1
        assert entries[0].key == "image/jpeg"
        assert entries[0].extensions == ["jpeg", "jpg", "jpe"]

    def test_skips_comments_blank_and_type_only_lines(self):
        entries = parse_media_type_lines(
            [
                "# a comment",
                "",
                "   ",
                "   # indented comment",
                "application/x-empty",
                "text/plain txt",
            ]
        )
        assert [e.key for e in entries] == ["text/plain"]

    def test_no_entry_without_extensions(self):
        entries = parse_media_type_lines(["a/b", "c/d  ", "e/f g"])
        assert all(entry.extensions for entry in entries)

    def test_first_occurrence_wins_case_insensitive(self):
        entries = parse_media_type_lines(["image/JPEG jpeg", "image/jpeg jpg"])
        assert len(entries) == 1
        assert entries[0].extensions == ["jpeg"]

    def test_appends_to_accumulator(self):
        accumulator = [CatalogEntry("text/plain", extensions=["txt"])]
        result = parse_media_type_lines(["text/plain text", "text/csv csv"], accumulator)
        assert result is accumulator
        assert [e.key for e in accumulator] == ["text/plain", "text/csv"]
        assert accumulator[0].extensions == ["txt"]


class TestReadMediaTypes:
    def test_bundled_defaults(self):
        entries = read_default_media_types()
        index = MediaTypeIndex(entries)
        assert index.get_ext("image/jp2") == "jp2"
        assert len(index.get_exts("image/jp2")) >= 2
        assert index.from_ext("jpg").key == "image/jpeg"
        assert len(index.get_types("image")) >= 6

    def test_explicit_default_file(self, write_mime_types):
        path = write_mime_types("mime.types", "text/plain txt\n")
        entries = read_default_media_types(path)
        assert [e.key for e in entries] == ["text/plain"]

    def test_missing_default_is_fatal(self, tmp_path):
        with pytest.raises(MissingInputFileError):
            read_default_media_types(tmp_path / "missing.types")

    def test_missing_override_ignored(self, tmp_path):
        entries = [CatalogEntry("text/plain", extensions=["txt"])]
        assert read_user_media_types(tmp_path / "missing", entries) == entries

    def test_unreadable_override_raises(self, tmp_path):
        with pytest.raises(CatalogError):
            read_user_media_types(tmp_path, [])

    def test_defaults_win_over_overrides(self, write_mime_types):
        defaults = write_mime_types(
            "defaults.types",
            """\
            image/jpeg jpeg jpg
            text/plain txt
            """,
        )
        system = write_mime_types(
            "system.types",
            """\
            image/jpeg jpe
            image/x-new xnew
            """,
        )
        user = write_mime_types(
            "user.types",
            """\
            IMAGE/X-NEW other
            audio/x-user usr
            """,
        )

        entries = load_media_types(defaults, [system, user])
        index = MediaTypeIndex(entries)

        assert [e.key for e in entries] == [
            "image/jpeg",
            "text/plain",
            "image/x-new",
            "audio/x-user",
        ]
        assert index.get_exts("image/jpeg") == ["jpeg", "jpg"]
        assert index.get_exts("image/x-new") == ["xnew"]

    def test_build_spec(self):
        entries = [CatalogEntry("text/plain", extensions=["txt"])]
        spec = build_media_type_spec(entries, "info.example")
        assert spec.kind == ArtifactKind.TYPE_ENUM
        assert spec.qualified_name == "info.example.MediaType"
        assert spec.entries == entries
        assert spec.entries is not entries


@pytest.fixture
def index():
    return MediaTypeIndex(
        parse_media_type_lines(
            [
                "application/jpg jpg",
                "image/jpeg jpeg jpg jpe",
                "image/svg+xml svg svgz",
                "image/png png",
                "text/plain txt",
            ]
        )
    )


class TestMediaTypeIndex:
    def test_round_trip_extensions(self, index):
        for entry in index:
            assert index.get_ext(entry.key) == entry.extensions[0]
            assert index.get_exts(entry.key) == entry.extensions

    def test_from_string_case_insensitive(self, index):
        assert index.from_string("IMAGE/PNG").key == "image/png"
        assert index.from_string("image/gif") is None
        assert index.from_string(None) is None

    def test_from_ext_without_hint_returns_first_seen(self, index):
        assert index.from_ext("jpg").key == "application/jpg"

    def test_from_ext_hint_preferred(self, index):
        assert index.from_ext("jpg", "image").key == "image/jpeg"
        assert index.from_ext("JPG", "IMAGE").key == "image/jpeg"

    def test_from_ext_hint_falls_back_to_first_match(self, index):
        assert index.from_ext("jpg", "video").key == "application/jpg"

    def test_from_ext_unknown(self, index):
        assert index.from_ext("xyz") is None

    def test_get_types(self, index):
        assert [e.key for e in index.get_types("image")] == [
            "image/jpeg",
            "image/svg+xml",
            "image/png",
        ]
        assert [e.key for e in index.get_types("Text")] == ["text/plain"]

    def test_parse_strips_fragment(self, index):
        assert index.parse("http://x.com/a.svg#frag").key == "image/svg+xml"

    def test_parse_without_extension_falls_back_to_from_string(self, index):
        assert index.parse("http://x.com/a") is None
        assert index.parse("image/png").key == "image/png"

    def test_parse_with_hint(self, index):
        assert index.parse("http://x.com/photo.jpg", "image").key == "image/jpeg"
        assert index.parse("http://x.com/photo.jpg").key == "application/jpg"

    def test_get_unknown_raises(self, index):
        with pytest.raises(KeyError):
            index.get_ext("image/gif")


class TestExtensionOf:
    @pytest.mark.parametrize(
        "uri, expected",
        [
            ("http://x.com/a.svg", "svg"),
            ("http:/thing.com/image", None),
            ("file.tar.gz", "gz"),
            ("dir.d/file", None),
            ("trailing.", None),
        ],
    )
    def test_examples(self, uri, expected):
        assert extension_of(uri) == expected
