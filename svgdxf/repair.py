from __future__ import annotations

import re
from typing import List, Tuple

# Element names tried before the generic rule so that `<svgwidth=` splits as
# `<svg width=` rather than at the last possible letter.
KNOWN_TAGS = (
    "linearGradient",
    "radialGradient",
    "clipPath",
    "polyline",
    "polygon",
    "ellipse",
    "pattern",
    "circle",
    "symbol",
    "tspan",
    "image",
    "style",
    "title",
    "defs",
    "line",
    "mask",
    "path",
    "rect",
    "stop",
    "text",
    "svg",
    "use",
    "g",
)

_ATTR_AHEAD = r"(?=[a-zA-Z-]+=)"

KNOWN_TAG_RE = re.compile(r"<((?:[a-zA-Z0-9-]+:)?(?:" + "|".join(KNOWN_TAGS) + r"))" + _ATTR_AHEAD)
TAG_ATTR_RE = re.compile(r"<([a-zA-Z0-9:-]+)" + _ATTR_AHEAD)
QUOTED_BOUNDARY_RE = re.compile(r'"([a-zA-Z-]+=)"')
PATH_DATA_END_RE = re.compile(r'(\sd="[^"]+")' + _ATTR_AHEAD)
WHITESPACE_RUN_RE = re.compile(r"\s{2,}")

# Applied in order: later passes rely on the spacing produced by earlier ones.
REPAIR_PASSES: List[Tuple[str, re.Pattern[str], str]] = [
    ("tag-attribute", KNOWN_TAG_RE, r"<\1 "),
    ("tag-attribute", TAG_ATTR_RE, r"<\1 "),
    ("quoted-boundary", QUOTED_BOUNDARY_RE, r'" \1"'),
    ("path-data-end", PATH_DATA_END_RE, r"\1 "),
    ("whitespace", WHITESPACE_RUN_RE, " "),
]


def repair(raw_markup: str) -> str:
    """Undo glued tag/attribute boundaries left by some authoring tools.

    `<pathd="..."` becomes `<path d="..."`, `x="1"y="2"` becomes
    `x="1" y="2"` and whitespace runs collapse to a single space. Never
    rejects input.
    """
    markup, _ = repair_with_report(raw_markup)
    return markup


def repair_with_report(raw_markup: str) -> Tuple[str, int]:
    """Same as :func:`repair`, also returning how many boundaries were fixed.

    Whitespace collapsing is not counted.
    """
    markup = raw_markup
    fixes = 0
    for name, pattern, replacement in REPAIR_PASSES:
        markup, count = pattern.subn(replacement, markup)
        if name != "whitespace":
            fixes += count
    return markup, fixes


def join_lines(text: str) -> str:
    """Trim every line and join them without separators.

    Matches the upload normalisation of the browser front-end this tool
    replaces. Numbers split across lines get glued together, so it is opt-in.
    """
    return "".join(line.strip() for line in text.split("\n"))
