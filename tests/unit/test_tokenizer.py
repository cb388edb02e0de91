"""Unit tests for the path-data tokenizer adapter."""

import pytest

from svgdxf.exceptions import PathSyntaxError, SvgDxfError
from svgdxf.models import CubicCurveTo, LineTo, MoveTo, Point, Unsupported
from svgdxf.tokenizer import check_lexical, tokenize


class TestTokenize:
    """Tests for tokenize."""

    def test_move_and_lines(self):
        """Absolute move and line commands map one to one."""
        assert tokenize("M0 0 L10 0 L10 10") == [MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10)]

    def test_relative_commands_become_absolute(self):
        """Relative coordinates are resolved against the current point."""
        assert tokenize("m1 1 l2 0 l0 3") == [MoveTo(1, 1), LineTo(3, 1), LineTo(3, 4)]

    def test_horizontal_and_vertical_lines(self):
        """H and V arrive as plain line commands."""
        assert tokenize("M0 0 H10 V5") == [MoveTo(0, 0), LineTo(10, 0), LineTo(10, 5)]

    def test_cubic(self):
        """Cubic curves keep both control points and the end point."""
        commands = tokenize("M0 0 C0 10 10 10 10 0")
        assert commands == [MoveTo(0, 0), CubicCurveTo(0, 10, 10, 10, 10, 0)]
        assert commands[1].end == Point(10, 0)

    def test_close_is_unsupported(self):
        """Close-path carries the subpath start but no geometry."""
        commands = tokenize("M2 3 L10 3 L10 10 Z")
        assert commands[-1] == Unsupported("Z", Point(2, 3))

    def test_quadratic_is_unsupported(self):
        """Quadratic curves are reported, not converted."""
        commands = tokenize("M0 0 Q5 5 10 0")
        assert commands == [MoveTo(0, 0), Unsupported("Q", Point(10, 0))]

    def test_coordinates_are_floats(self):
        """Coordinates come back as plain floats."""
        move = tokenize("M1.5 -2")[0]
        assert isinstance(move.x, float)
        assert move.end == Point(1.5, -2.0)

    def test_malformed_data_raises(self):
        """Unparseable data raises PathSyntaxError."""
        with pytest.raises(PathSyntaxError) as exc_info:
            tokenize("M0 0 L x y")
        assert exc_info.value.path_data == "M0 0 L x y"
        assert isinstance(exc_info.value, SvgDxfError)

    @pytest.mark.parametrize(
        "d",
        [
            "M0 0 L10 0 X L10 10 L0 10",
            "M0 0 L10 0 L10 10 #! L0 10",
            "M0 0 L10 0 L10 10 L0 10e",
            "M0 0 L10 0 L10 10 L0 10 ;",
        ],
    )
    def test_trailing_garbage_raises(self, d):
        """Anything besides commands, numbers and separators is rejected."""
        with pytest.raises(PathSyntaxError) as exc_info:
            tokenize(d)
        assert exc_info.value.path_data == d

    @pytest.mark.parametrize("d", ["M1,2,3,4", "M0 0 L-1e2-3", "  M0 0 z  ", "M0 0 A5 5 0 0 1 10 0"])
    def test_compact_syntax_accepted(self, d):
        """Commas, implicit separators and exponents are valid path data."""
        assert tokenize(d)

    def test_overflowing_coordinate_raises(self):
        """Coordinates beyond the double range are rejected, not written as inf."""
        with pytest.raises(PathSyntaxError):
            tokenize("M0 0 L1e400 0 L5 5")


class TestCheckLexical:
    """Tests for check_lexical."""

    def test_reports_offset(self):
        with pytest.raises(PathSyntaxError) as exc_info:
            check_lexical("M0 0 L10 0 X")
        assert exc_info.value.reason == "unexpected 'X' at offset 11"

    def test_blank_is_fine(self):
        check_lexical("")
        check_lexical(" ,\n")
