from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Union


class Point(NamedTuple):
    x: float
    y: float


Polyline = List[Point]


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    @property
    def end(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    @property
    def end(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class CubicCurveTo:
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    @property
    def control1(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def control2(self) -> Point:
        return Point(self.x2, self.y2)

    @property
    def end(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Unsupported:
    """Tokenizer command that yields no geometry (close, quadratic, arc)."""

    code: str
    end: Point


Command = Union[MoveTo, LineTo, CubicCurveTo, Unsupported]


@dataclass
class DxfDocument:
    """Polylines ready for serialization plus the fixed header metadata."""

    polylines: List[Polyline] = field(default_factory=list)
    layer: str = "symbols"
    color: int = 7

    version: str = field(default="AC1009", init=False)
    extmin: tuple[str, str] = field(default=("0", "0"), init=False)
    extmax: tuple[str, str] = field(default=("1000", "1000"), init=False)

    @property
    def entity_count(self) -> int:
        return len(self.polylines)

    @property
    def vertex_count(self) -> int:
        return sum(len(poly) for poly in self.polylines)


@dataclass
class ConversionResult:
    dxf: str
    entity_count: int
    vertex_count: int
    path_count: int
    skipped_paths: int = 0
    warnings: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.entity_count == 0

    def summary(self) -> str:
        """Human readable one-liner for status output."""
        text = f"{self.entity_count} polylines, {self.vertex_count} vertices from {self.path_count} paths"
        if self.skipped_paths:
            text += f" ({self.skipped_paths} skipped)"
        return text
