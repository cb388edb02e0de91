"""Command line interface for svgdxf."""

from svgdxf.cli.app import app, run

__all__ = ["app", "run"]
