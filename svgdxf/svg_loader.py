from __future__ import annotations

from pathlib import Path
from typing import List

import structlog
from lxml import etree

from .exceptions import ConversionError
from .repair import join_lines as join_markup_lines

logger = structlog.get_logger(__name__)

SVG_SUFFIX = ".svg"


def _make_parser() -> etree.HTMLParser:
    # The HTML parser keeps sibling roots, tolerates unclosed tags and
    # never needs a namespace map, which suits half-repaired markup.
    return etree.HTMLParser(encoding="utf-8", recover=True, remove_comments=True, remove_pis=True, no_network=True)


def extract_path_data(markup: str) -> List[str]:
    """Return the `d` attribute of every path element in document order.

    Elements without a non-blank `d` are skipped. Markup the parser cannot
    make anything of yields an empty list.
    """
    if not markup.strip():
        return []
    try:
        root = etree.fromstring(markup.encode("utf-8", errors="replace"), _make_parser())
    except etree.XMLSyntaxError as exc:
        logger.debug("Markup not parseable", error=str(exc))
        return []
    if root is None:
        return []

    path_data: List[str] = []
    for element in root.iter(etree.Element):
        if local_name(element.tag) != "path":
            continue
        data = element.get("d")
        if data is None or not data.strip():
            continue
        path_data.append(data)
    return path_data


def local_name(tag: str) -> str:
    """Tag name without namespace URI or prefix, lower-cased."""
    name = tag.rpartition("}")[2]
    return name.rpartition(":")[2].lower()


def read_markup(path: Path, *, join_lines: bool = False) -> str:
    """Read an SVG file as text.

    Only the file suffix is checked; content is taken as-is.
    """
    if path.suffix.lower() != SVG_SUFFIX:
        raise ConversionError(str(path), f"only {SVG_SUFFIX} files can be converted")
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ConversionError(str(path), exc.strerror or str(exc)) from exc
    if join_lines:
        text = join_markup_lines(text)
    return text
