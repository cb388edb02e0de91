"""Adapter between the `svg.path` parser and svgdxf commands.

`svg.path` already resolves relative coordinates and expands shorthand
(H, V, S, T) into absolute segments, so only the segment type decides
which command is produced. It stops quietly at the first token it does
not understand, so the whole string is scanned against the path-data
lexical grammar first.
"""

from __future__ import annotations

import math
import re
from typing import List

from svg.path import Close, CubicBezier, Line, Move, parse_path

from .exceptions import PathSyntaxError
from .models import Command, CubicCurveTo, LineTo, MoveTo, Point, Unsupported

UNSUPPORTED_CODES = {
    "Close": "Z",
    "QuadraticBezier": "Q",
    "Arc": "A",
}

# One command letter or number, with any leading separators.
PATH_TOKEN_RE = re.compile(
    r"[\s,]*(?:[MmZzLlHhVvCcSsQqTtAa]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
)
SEPARATORS_RE = re.compile(r"[\s,]*")


def check_lexical(path_data: str) -> None:
    """Raise PathSyntaxError unless the text is only commands, numbers and separators."""
    pos = 0
    match = PATH_TOKEN_RE.match(path_data, pos)
    while match is not None and match.end() > pos:
        pos = match.end()
        match = PATH_TOKEN_RE.match(path_data, pos)
    pos = SEPARATORS_RE.match(path_data, pos).end()
    if pos < len(path_data):
        raise PathSyntaxError(path_data, f"unexpected {path_data[pos]!r} at offset {pos}")


def _point(value: complex, path_data: str) -> Point:
    point = Point(float(value.real), float(value.imag))
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise PathSyntaxError(path_data, "coordinate is not a finite number")
    return point


def tokenize(path_data: str) -> List[Command]:
    """Turn path data into absolute MoveTo / LineTo / CubicCurveTo commands.

    Raises:
        PathSyntaxError: if the path data cannot be parsed or holds a
            coordinate that overflows a double.
    """
    check_lexical(path_data)
    try:
        segments = parse_path(path_data)
    except (ValueError, IndexError) as exc:
        raise PathSyntaxError(path_data, str(exc) or type(exc).__name__) from exc

    commands: List[Command] = []
    for segment in segments:
        if isinstance(segment, Move):
            end = _point(segment.end, path_data)
            commands.append(MoveTo(end.x, end.y))
        elif isinstance(segment, Close):
            commands.append(Unsupported("Z", _point(segment.end, path_data)))
        elif isinstance(segment, Line):
            end = _point(segment.end, path_data)
            commands.append(LineTo(end.x, end.y))
        elif isinstance(segment, CubicBezier):
            c1 = _point(segment.control1, path_data)
            c2 = _point(segment.control2, path_data)
            end = _point(segment.end, path_data)
            commands.append(CubicCurveTo(c1.x, c1.y, c2.x, c2.y, end.x, end.y))
        else:
            code = UNSUPPORTED_CODES.get(type(segment).__name__, type(segment).__name__)
            commands.append(Unsupported(code, _point(segment.end, path_data)))
    return commands
