"""CLI application entry point for svgdxf.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from svgdxf import __version__
from svgdxf.cli.output import (
    console,
    print_converted,
    print_dxf_summary,
    print_error,
    print_failed,
    print_header,
    print_totals,
)
from svgdxf.dxf_reader import summarize_dxf
from svgdxf.exceptions import SvgDxfError
from svgdxf.logging import configure_logging
from svgdxf.pipeline import PipelineController, convert_files, default_output_path
from svgdxf.repair import join_lines as join_markup_lines
from svgdxf.settings import (
    CleanupConfig,
    ConverterSettings,
    DxfConfig,
    FlattenConfig,
    LoggingConfig,
    PathErrorPolicy,
    ProcessingConfig,
)

STDIO = "-"

app = typer.Typer(
    name="svgdxf",
    help="Convert SVG path outlines into closed POLYLINE entities of an R12 DXF file.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svgdxf[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """svgdxf command line."""


@app.command()
def convert(
    inputs: Annotated[
        list[Path],
        typer.Argument(
            help="SVG files to convert, or - to read markup from stdin",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for a single input (default: {name}.dxf next to it)",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-d",
            help="Directory for converted files",
        ),
    ] = None,
    samples: Annotated[
        int,
        typer.Option(
            "--samples",
            "-s",
            help="Parametric intervals per cubic curve",
            min=1,
            max=10000,
        ),
    ] = 100,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Drop points closer than this to the previous kept point",
            min=0.0,
        ),
    ] = 0.001,
    layer: Annotated[
        str,
        typer.Option(
            "--layer",
            help="Layer name for all entities",
        ),
    ] = "symbols",
    color: Annotated[
        int,
        typer.Option(
            "--color",
            help="AutoCAD color index for all polylines",
            min=0,
            max=256,
        ),
    ] = 7,
    on_path_error: Annotated[
        PathErrorPolicy,
        typer.Option(
            "--on-path-error",
            help="Skip paths with invalid data or abort the file",
            case_sensitive=False,
        ),
    ] = PathErrorPolicy.SKIP,
    require_entities: Annotated[
        bool,
        typer.Option(
            "--require-entities",
            help="Fail files that contain no convertible paths",
        ),
    ] = False,
    join_lines: Annotated[
        bool,
        typer.Option(
            "--join-lines",
            help="Trim and join all lines of the input before conversion",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers for several inputs (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Convert SVG files to DXF.

    Example:
        svgdxf convert logo.svg

    This writes logo.dxf with one closed polyline per <path> element.
    """
    if output is not None and len(inputs) != 1:
        print_error("--output can only be used with a single input")
        raise typer.Exit(code=1)
    if STDIO in (str(path) for path in inputs) and len(inputs) != 1:
        print_error("- (stdin) cannot be combined with other inputs")
        raise typer.Exit(code=1)

    try:
        settings = ConverterSettings(
            flatten=FlattenConfig(curve_samples=samples),
            cleanup=CleanupConfig(tolerance=tolerance),
            dxf=DxfConfig(layer=layer, color=color),
            processing=ProcessingConfig(
                on_path_error=on_path_error,
                require_entities=require_entities,
                max_workers=workers,
            ),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if str(inputs[0]) == STDIO:
        _convert_stdin(settings, output, join_lines)
        return

    if not quiet:
        print_header(__version__)

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    if len(inputs) == 1:
        source = inputs[0]
        target = output or default_output_path(source, output_dir)
        try:
            result = PipelineController(settings).convert_file(source, target, join_lines=join_lines)
        except SvgDxfError as e:
            print_failed(str(source), str(e))
            raise typer.Exit(code=1)
        if not quiet:
            print_converted(source.name, str(target), result)
        return

    items = convert_files(inputs, output_dir, settings, join_lines=join_lines)
    failed = 0
    for item in items:
        if item.ok and item.result is not None:
            if not quiet:
                print_converted(item.source.name, str(item.output), item.result)
        else:
            failed += 1
            print_failed(str(item.source), item.error or "unknown error")
    if not quiet:
        print_totals(len(items) - failed, failed)
    if failed:
        raise typer.Exit(code=1)


def _convert_stdin(settings: ConverterSettings, output: Path | None, join_lines: bool) -> None:
    markup = sys.stdin.read()
    if join_lines:
        markup = join_markup_lines(markup)
    if not markup.strip():
        print_error("Input is empty")
        raise typer.Exit(code=1)
    try:
        result = PipelineController(settings).convert_markup(markup)
    except SvgDxfError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    if output is None:
        sys.stdout.write(result.dxf)
    else:
        output.write_text(result.dxf, encoding="utf-8", newline="\n")


@app.command()
def inspect(
    dxf_file: Annotated[
        Path,
        typer.Argument(
            help="DXF file to summarize",
            show_default=False,
        ),
    ],
) -> None:
    """Summarize the polylines stored in a DXF file."""
    if not dxf_file.is_file():
        print_error(f"Input file not found: {dxf_file}")
        raise typer.Exit(code=1)
    try:
        summary = summarize_dxf(dxf_file.read_text(encoding="utf-8", errors="replace"))
    except SvgDxfError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_dxf_summary(dxf_file.name, summary)


def run() -> None:
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    run()
