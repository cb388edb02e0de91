"""
SVG path to DXF polyline converter.

This module exposes the conversion entry points used by the CLI and by
library callers.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "convert",
    "convert_file",
    "convert_files",
    "convert_markup",
    "markup_to_polylines",
    "PipelineController",
]

from .pipeline import (  # noqa: E402
    PipelineController,
    convert,
    convert_file,
    convert_files,
    convert_markup,
    markup_to_polylines,
)
