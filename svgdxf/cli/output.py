"""Rich console output helpers for the CLI.

Status goes to stderr so that DXF text can be streamed on stdout.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from svgdxf.dxf_reader import DxfSummary
from svgdxf.models import ConversionResult

console = Console(stderr=True)

SYM_OK = "✓"  # Success
SYM_WARN = "!"  # Converted with warnings
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    console.print(f"\n[bold]svgdxf[/bold] v{version}")
    console.print("─" * 44)


def print_converted(source: str, output: str, result: ConversionResult) -> None:
    """Print one status line per converted file.

    Args:
        source: Input file name
        output: Written DXF file name
        result: Conversion statistics
    """
    symbol, style = (SYM_WARN, "yellow") if result.warnings or result.is_empty else (SYM_OK, "green")
    line = Text(f"  {symbol} ", style=style)
    line.append(source)
    line.append(" → ")
    line.append(output, style="bold")
    console.print(line)
    console.print(f"    {result.summary()}")
    if result.is_empty:
        console.print("    [yellow]no convertible paths, DXF has an empty ENTITIES section[/yellow]")
    for warning in result.warnings:
        console.print(Text(f"    {SYM_DOT} {warning}", style="yellow"))


def print_failed(source: str, error: str) -> None:
    line = Text(f"  {SYM_ERR} ", style="red")
    line.append(source)
    line.append(f": {error}")
    console.print(line)


def print_totals(converted: int, failed: int) -> None:
    style = "red" if failed else "green"
    console.print(f"\n[bold {style}]{converted} converted {SYM_DOT} {failed} failed[/bold {style}]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(Text.assemble((f"\n{SYM_ERR} Error: ", "bold red"), message))
    if details:
        console.print(f"  {details}")


def print_dxf_summary(name: str, summary: DxfSummary) -> None:
    """Print what a DXF file contains, one row per polyline."""
    console.print(Text.assemble(("\n", ""), (name, "bold"), f" (version {summary.version or '?'})"))
    console.print(f"  sections: {', '.join(summary.sections) or 'none'} {SYM_DOT} EOF: {'yes' if summary.has_eof else 'no'}")
    console.print(f"  {summary.format_counts()} {SYM_DOT} layers: {', '.join(summary.layers) or 'none'}")
    if not summary.polylines:
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("vertices", justify="right")
    table.add_column("closed")
    table.add_column("first vertex")
    for index, (poly, closed) in enumerate(zip(summary.polylines, summary.closed_flags), start=1):
        first = f"({poly[0].x:g}, {poly[0].y:g})" if poly else "-"
        table.add_row(str(index), str(len(poly)), "yes" if closed else "no", first)
    console.print(table)
