"""Unit tests for path extraction and file loading."""

from pathlib import Path

import pytest

from svgdxf.exceptions import ConversionError
from svgdxf.svg_loader import extract_path_data, local_name, read_markup


class TestExtractPathData:
    """Tests for extract_path_data."""

    def test_single_path(self):
        """A lone path element yields its data."""
        assert extract_path_data('<path d="M0 0 L10 0"/>') == ["M0 0 L10 0"]

    def test_document_order(self, mixed_markup):
        """Paths come back in the order they appear, nested or not."""
        assert extract_path_data(mixed_markup) == [
            "M5 5",
            "M0 0 L10 0 L10 10 L0 10 Z",
            "M0 0 C0 10 10 10 10 0",
        ]

    def test_sibling_roots(self):
        """Fragments with several top-level elements are all scanned."""
        markup = '<path d="M1 1 L2 2"/><path d="M3 3 L4 4"/>'
        assert extract_path_data(markup) == ["M1 1 L2 2", "M3 3 L4 4"]

    def test_skips_paths_without_data(self):
        """Path elements without a usable d attribute are skipped."""
        markup = '<svg><path id="a"/><path d=""/><path d="   "/><path d="M0 0 L1 1"/></svg>'
        assert extract_path_data(markup) == ["M0 0 L1 1"]

    def test_ignores_other_elements(self):
        """Only path elements count, even when other elements carry d."""
        markup = '<svg><rect d="M9 9 L8 8"/><circle cx="1" cy="1" r="1"/></svg>'
        assert extract_path_data(markup) == []

    def test_no_paths(self):
        """Markup without paths is not an error."""
        assert extract_path_data('<svg width="10" height="10"></svg>') == []

    @pytest.mark.parametrize("markup", ["", "   ", "not markup at all", "<<<"])
    def test_garbage_yields_nothing(self, markup):
        """Unusable input gives an empty list."""
        assert extract_path_data(markup) == []

    def test_unrepaired_glued_tag_is_not_found(self):
        """Without repair the glued tag name is not a path element."""
        assert extract_path_data('<pathd="M0 0L5 5"/>') == []

    def test_comments_are_ignored(self):
        """Paths inside comments are not extracted."""
        markup = '<svg><!-- <path d="M9 9 L1 1"/> --><path d="M0 0 L1 1"/></svg>'
        assert extract_path_data(markup) == ["M0 0 L1 1"]

    def test_lone_surrogate(self):
        """Unencodable characters in the input do not stop extraction."""
        assert extract_path_data('\ud800<path d="M0 0 L1 1"/>') == ["M0 0 L1 1"]


class TestLocalName:
    """Tests for tag name normalization."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("path", "path"),
            ("PATH", "path"),
            ("{http://www.w3.org/2000/svg}path", "path"),
            ("svg:path", "path"),
        ],
    )
    def test_local_name(self, tag, expected):
        """Namespace and prefix are stripped."""
        assert local_name(tag) == expected


class TestReadMarkup:
    """Tests for read_markup."""

    def test_reads_svg(self, svg_file: Path, square_markup: str):
        """Content is returned unchanged."""
        assert read_markup(svg_file) == square_markup

    def test_suffix_is_case_insensitive(self, tmp_path: Path):
        """Upper-case suffixes are accepted."""
        path = tmp_path / "LOGO.SVG"
        path.write_text("<svg/>", encoding="utf-8")
        assert read_markup(path) == "<svg/>"

    def test_rejects_other_suffix(self, tmp_path: Path):
        """Only .svg files are accepted."""
        path = tmp_path / "drawing.txt"
        path.write_text("<svg/>", encoding="utf-8")
        with pytest.raises(ConversionError, match="only .svg files"):
            read_markup(path)

    def test_missing_file(self, tmp_path: Path):
        """Unreadable files raise ConversionError."""
        with pytest.raises(ConversionError) as exc_info:
            read_markup(tmp_path / "missing.svg")
        assert exc_info.value.source.endswith("missing.svg")

    def test_join_lines(self, tmp_path: Path):
        """Lines are trimmed and joined on request."""
        path = tmp_path / "multi.svg"
        path.write_text('<svg>\n  <path d="M0 0 L1 1"/>\n</svg>\n', encoding="utf-8")
        assert read_markup(path, join_lines=True) == '<svg><path d="M0 0 L1 1"/></svg>'
