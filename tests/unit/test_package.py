#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_package.py
"""Unit tests for package loading and source aggregation.

Tests cover:
- Package validation from descriptor mappings
- Stylesheet settings
- Loading by extension and base directory selection
- Source path resolution and aggregation

"""

import pytest
from utils import write_file

from booksource.constants import PACKAGE_EXTENSIONS
from booksource.exceptions import (
    ConfigSyntaxError,
    EmptyPackageError,
    InvalidPackageError,
    SourceReadError,
    UnsupportedExtensionError,
)
from booksource.package import (
    Package,
    PerSectionPaths,
    SingleCorePath,
    aggregate_sources,
    get_extension,
    load_package,
    parse_css_spec,
    resolve_source_path,
)


@pytest.mark.unit
class TestPackageFromMapping:
    """Tests for Package.from_mapping."""

    def test_full_descriptor(self):
        package = Package.from_mapping(
            {
                "sources": ["intro", "chapter.bks"],
                "postFilters": ["smart-quotes"],
                "theme": {"palette": {"primary": "red"}},
                "css": "custom.css",
            }
        )
        assert package.sources == ("intro", "chapter.bks")
        assert package.post_filters == ("smart-quotes",)
        assert package.theme == {"palette": {"primary": "red"}}
        assert package.css == SingleCorePath("custom.css")
        assert package.is_package

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"sources": []},
            {"sources": "intro"},
            {"sources": None},
            ["intro"],
            None,
        ],
    )
    def test_missing_sources(self, data):
        with pytest.raises(EmptyPackageError, match="No source specified in the package."):
            Package.from_mapping(data)

    @pytest.mark.parametrize("entry", [42, "", None, {"path": "x"}])
    def test_invalid_source_entry(self, entry):
        with pytest.raises(InvalidPackageError):
            Package.from_mapping({"sources": ["ok", entry]})

    def test_bad_optional_values_are_ignored(self, caplog):
        package = Package.from_mapping({"sources": ["a"], "postFilters": "dashes", "theme": "dark", "css": 3})
        assert package.post_filters == ()
        assert package.theme is None
        assert package.css is None
        assert "postFilters" in caplog.text

    def test_direct_construction_requires_sources(self):
        with pytest.raises(EmptyPackageError):
            Package(sources=())

    def test_for_document(self):
        package = Package.for_document("doc.bks")
        assert package.sources == ("doc.bks",)
        assert not package.is_package
        assert package.post_filters == ()


@pytest.mark.unit
class TestCssSpec:
    """Tests for parse_css_spec."""

    def test_string_is_core_path(self):
        assert parse_css_spec("a.css") == SingleCorePath("a.css")

    def test_mapping(self):
        spec = parse_css_spec({"core": "core.css", "code": "code.css"})
        assert spec == PerSectionPaths(standalone=None, core="core.css", code="code.css")
        assert spec.get("core") == "core.css"
        assert spec.get("standalone") is None

    def test_non_string_section_dropped(self):
        assert parse_css_spec({"core": 5}) == PerSectionPaths()

    def test_unknown_sections_logged(self, caplog):
        parse_css_spec({"print": "print.css"})
        assert "print" in caplog.text

    def test_none(self):
        assert parse_css_spec(None) is None


@pytest.mark.unit
class TestLoadPackage:
    """Tests for load_package."""

    def test_single_document(self, temp_dir):
        package, base_dir = load_package("doc.bks", cwd=temp_dir)
        assert package.sources == ("doc.bks",)
        assert base_dir == temp_dir

    def test_kfg_descriptor_base_dir(self, temp_dir):
        write_file(temp_dir, "book/book.kfg", "sources:\n  - intro\n")
        package, base_dir = load_package("book/book.kfg", cwd=temp_dir)
        assert package.sources == ("intro",)
        assert package.is_package
        assert base_dir == temp_dir / "book"

    def test_json_descriptor(self, temp_dir):
        write_file(temp_dir, "book.json", '{"sources": ["a", "b"], "postFilters": ["dashes"]}')
        package, _ = load_package("book.json", cwd=temp_dir)
        assert package.sources == ("a", "b")
        assert package.post_filters == ("dashes",)

    def test_absolute_descriptor_path(self, temp_dir):
        path = write_file(temp_dir, "abs.kfg", "sources: [x]\n")
        _, base_dir = load_package(str(path), cwd=temp_dir / "elsewhere")
        assert base_dir == temp_dir

    @pytest.mark.parametrize("extension", PACKAGE_EXTENSIONS)
    def test_every_package_extension_loads_descriptor(self, temp_dir, extension):
        write_file(temp_dir, f"book.{extension}", '{"sources": ["intro"]}')
        package, _ = load_package(f"book.{extension}", cwd=temp_dir)
        assert package.sources == ("intro",)
        assert package.is_package

    @pytest.mark.parametrize("source,extension", [("notes.txt", "txt"), ("README", ""), ("doc.BKS", "BKS")])
    def test_unsupported_extension(self, temp_dir, source, extension):
        with pytest.raises(UnsupportedExtensionError) as exc_info:
            load_package(source, cwd=temp_dir)
        assert exc_info.value.message == f"Cannot load file with extension .{extension}"
        assert exc_info.value.show_help

    def test_missing_descriptor(self, temp_dir):
        with pytest.raises(SourceReadError) as exc_info:
            load_package("missing.kfg", cwd=temp_dir)
        assert exc_info.value.file_path == "missing.kfg"

    def test_malformed_descriptor(self, temp_dir):
        write_file(temp_dir, "bad.kfg", "sources: [unclosed\n")
        with pytest.raises(ConfigSyntaxError):
            load_package("bad.kfg", cwd=temp_dir)

    def test_empty_descriptor(self, temp_dir):
        write_file(temp_dir, "empty.kfg", "")
        with pytest.raises(EmptyPackageError):
            load_package("empty.kfg", cwd=temp_dir)


@pytest.mark.unit
class TestSources:
    """Tests for source resolution and aggregation."""

    def test_get_extension(self):
        assert get_extension("a/b.c/file.bks") == "bks"
        assert get_extension("a/b.c/file") == ""
        assert get_extension("archive.tar.kfg") == "kfg"

    def test_extension_appended(self, temp_dir):
        assert resolve_source_path("intro", temp_dir) == temp_dir / "intro.bks"

    def test_existing_extension_kept(self, temp_dir):
        assert resolve_source_path("notes.txt", temp_dir) == temp_dir / "notes.txt"

    def test_directory_dot_does_not_count(self, temp_dir):
        assert resolve_source_path("v1.0/intro", temp_dir) == temp_dir / "v1.0" / "intro.bks"

    def test_join_with_single_newline(self, temp_dir):
        write_file(temp_dir, "a.bks", "# A")
        write_file(temp_dir, "b.bks", "# B\n")
        write_file(temp_dir, "c.bks", "C")
        package = Package(sources=("a", "b.bks", "c"))
        assert aggregate_sources(package, temp_dir) == "# A\n# B\n\nC"

    def test_empty_file_still_separated(self, temp_dir):
        write_file(temp_dir, "a.bks", "")
        write_file(temp_dir, "b.bks", "B")
        assert aggregate_sources(Package(sources=("a", "b")), temp_dir) == "\nB"

    def test_missing_source_names_entry(self, temp_dir):
        write_file(temp_dir, "a.bks", "A")
        with pytest.raises(SourceReadError) as exc_info:
            aggregate_sources(Package(sources=("a", "missing")), temp_dir)
        assert exc_info.value.file_path == "missing"
        assert exc_info.value.message == "Error reading source file 'missing':"

    def test_invalid_utf8(self, temp_dir):
        (temp_dir / "bin.bks").write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(SourceReadError):
            aggregate_sources(Package(sources=("bin",)), temp_dir)
