from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ezdxf.lldxf.const import DXFStructureError
from ezdxf.lldxf.tagger import ascii_tags_loader

from .exceptions import SvgDxfError
from .models import Point, Polyline


@dataclass
class DxfSummary:
    version: Optional[str] = None
    sections: List[str] = field(default_factory=list)
    header: Dict[str, List[str]] = field(default_factory=dict)
    polylines: List[Polyline] = field(default_factory=list)
    closed_flags: List[bool] = field(default_factory=list)
    layers: List[str] = field(default_factory=list)
    has_eof: bool = False

    @property
    def entity_count(self) -> int:
        return len(self.polylines)

    @property
    def vertex_counts(self) -> List[int]:
        return [len(poly) for poly in self.polylines]

    def format_counts(self) -> str:
        vertices = sum(self.vertex_counts)
        return f"{self.entity_count} polylines, {vertices} vertices"


def summarize_dxf(text: str) -> DxfSummary:
    """Read DXF text back through ezdxf's tag loader.

    Only the records this package writes are interpreted: header variables,
    POLYLINE/VERTEX/SEQEND entities and section markers.
    """
    try:
        tags = [(tag.code, tag.value) for tag in ascii_tags_loader(io.StringIO(text))]
    except DXFStructureError as exc:
        raise SvgDxfError(f"Not a readable DXF document: {exc}") from exc

    summary = DxfSummary()
    section: Optional[str] = None
    entity: Optional[str] = None
    variable: Optional[str] = None
    vertex_x: Optional[float] = None
    index = 0
    while index < len(tags):
        code, value = tags[index]
        index += 1
        if code == 0:
            entity = value
            if value == "SECTION" and index < len(tags) and tags[index][0] == 2:
                section = tags[index][1]
                summary.sections.append(section)
                index += 1
            elif value == "ENDSEC":
                section = None
            elif value == "EOF":
                summary.has_eof = True
            elif value == "POLYLINE":
                summary.polylines.append([])
                summary.closed_flags.append(False)
            continue

        if section == "HEADER":
            if code == 9:
                variable = value
                summary.header[variable] = []
            elif variable is not None:
                summary.header[variable].append(value)
            continue

        if section != "ENTITIES":
            continue
        if code == 8 and value not in summary.layers:
            summary.layers.append(value)
        if entity == "POLYLINE" and code == 70:
            summary.closed_flags[-1] = bool(int(value) & 1)
        elif entity == "VERTEX" and summary.polylines:
            if code == 10:
                vertex_x = float(value)
            elif code == 20 and vertex_x is not None:
                summary.polylines[-1].append(Point(vertex_x, float(value)))
                vertex_x = None

    acadver = summary.header.get("$ACADVER")
    if acadver:
        summary.version = acadver[0]
    return summary
