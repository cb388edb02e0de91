from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .models import DxfDocument, Point, Polyline

DEFAULT_LAYER = "symbols"
DEFAULT_COLOR = 7  # ACI white/black

# POLYLINE flag 70: 1 = closed. Every traced path is written closed.
POLYLINE_CLOSED = 1
VERTEX_FLAGS = 0

Tag = Tuple[int, str]


def format_number(value: float) -> str:
    """Shortest decimal text that parses back to the same double."""
    return repr(float(value))


class DxfWriter:
    """Serialize polylines into the minimal HEADER/ENTITIES subset of R12 DXF."""

    def __init__(self, layer: str = DEFAULT_LAYER, color: int = DEFAULT_COLOR) -> None:
        self.layer = layer
        self.color = color

    def build(self, polylines: Iterable[Polyline]) -> DxfDocument:
        return DxfDocument(polylines=[list(poly) for poly in polylines], layer=self.layer, color=self.color)

    def write(self, polylines: Iterable[Polyline]) -> str:
        return self.write_document(self.build(polylines))

    def write_document(self, document: DxfDocument) -> str:
        """
        Render the document as DXF text.

        Polylines with fewer than two points must be filtered out by the caller.
        """
        tags: List[Tag] = []
        tags.extend(self._header_tags(document))
        tags.extend(_section_start("ENTITIES"))
        for poly in document.polylines:
            tags.extend(self._polyline_tags(poly, document.layer, document.color))
        tags.append((0, "ENDSEC"))
        tags.append((0, "EOF"))
        return "".join(f"{code}\n{value}\n" for code, value in tags)

    @staticmethod
    def _header_tags(document: DxfDocument) -> List[Tag]:
        tags = _section_start("HEADER")
        tags += [(9, "$ACADVER"), (1, document.version)]
        tags += [(9, "$EXTMIN"), (10, document.extmin[0]), (20, document.extmin[1])]
        tags += [(9, "$EXTMAX"), (10, document.extmax[0]), (20, document.extmax[1])]
        tags.append((0, "ENDSEC"))
        return tags

    @staticmethod
    def _polyline_tags(points: Sequence[Point], layer: str, color: int) -> List[Tag]:
        tags: List[Tag] = [
            (0, "POLYLINE"),
            (8, layer),
            (62, str(color)),
            (70, str(POLYLINE_CLOSED)),
            (10, "0"),
            (20, "0"),
            (66, "1"),
        ]
        for x, y in points:
            tags += [
                (0, "VERTEX"),
                (8, layer),
                (10, format_number(x)),
                (20, format_number(y)),
                (70, str(VERTEX_FLAGS)),
            ]
        tags += [(0, "SEQEND"), (8, layer)]
        return tags


def _section_start(name: str) -> List[Tag]:
    return [(0, "SECTION"), (2, name)]


def serialize(polylines: Iterable[Polyline], layer: str = DEFAULT_LAYER, color: int = DEFAULT_COLOR) -> str:
    return DxfWriter(layer=layer, color=color).write(polylines)
