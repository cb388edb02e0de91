"""Shared fixtures for svgdxf tests."""

import logging
from pathlib import Path

import pytest
import structlog

SQUARE_PATH = "M0 0 L10 0 L10 10 L0 10 Z"
CURVE_PATH = "M0 0 C0 10 10 10 10 0"


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers the CLI installs so later tests do not write to closed streams."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith("svgdxf"):
            root.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()


@pytest.fixture
def square_markup() -> str:
    return f'<svg xmlns="http://www.w3.org/2000/svg"><path d="{SQUARE_PATH}"/></svg>'


@pytest.fixture
def mixed_markup() -> str:
    """One degenerate path, one square, one curve, one element without data."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">\n'
        '  <path id="dot" d="M5 5"/>\n'
        "  <g>\n"
        f'    <path id="square" d="{SQUARE_PATH}"/>\n'
        "  </g>\n"
        '  <rect x="0" y="0" width="4" height="4"/>\n'
        f'  <path id="curve" d="{CURVE_PATH}"/>\n'
        "</svg>\n"
    )


@pytest.fixture
def svg_file(tmp_path: Path, square_markup: str) -> Path:
    path = tmp_path / "square.svg"
    path.write_text(square_markup, encoding="utf-8")
    return path
