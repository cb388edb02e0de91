from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import structlog

from .dxf_writer import DxfWriter
from .exceptions import EmptyInputError, PathSyntaxError, SvgDxfError
from .models import ConversionResult, Polyline
from .path_parser import cleanup, flatten
from .repair import repair
from .settings import ConverterSettings, PathErrorPolicy, get_default_settings
from .svg_loader import extract_path_data, read_markup

logger = structlog.get_logger(__name__)

DXF_SUFFIX = ".dxf"


@dataclass
class TraceReport:
    polylines: List[Polyline] = field(default_factory=list)
    path_count: int = 0
    skipped_paths: int = 0
    warnings: List[str] = field(default_factory=list)


class PipelineController:
    """Run repair -> extraction -> flattening -> cleanup -> serialization."""

    def __init__(self, settings: ConverterSettings | None = None):
        self.settings = settings or get_default_settings()
        self.writer = DxfWriter(layer=self.settings.dxf.layer, color=self.settings.dxf.color)

    def trace(self, markup: str) -> TraceReport:
        """Stages 1-4: polylines with at least two points, in document order."""
        report = TraceReport()
        path_data = extract_path_data(repair(markup))
        report.path_count = len(path_data)
        samples = self.settings.flatten.curve_samples
        tolerance = self.settings.cleanup.tolerance
        abort = self.settings.processing.on_path_error is PathErrorPolicy.ABORT

        for index, data in enumerate(path_data):
            try:
                raw = flatten(data, samples)
            except PathSyntaxError as exc:
                if abort:
                    logger.error("Path rejected, aborting", path_index=index, reason=exc.reason)
                    raise
                logger.warning("Path rejected, skipped", path_index=index, reason=exc.reason)
                report.skipped_paths += 1
                report.warnings.append(f"path #{index + 1} skipped: {exc}")
                continue
            poly = cleanup(raw, tolerance)
            if len(poly) < 2:
                logger.debug("Degenerate path dropped", path_index=index, points=len(poly))
                continue
            report.polylines.append(poly)
        return report

    def convert_markup(self, markup: str) -> ConversionResult:
        report = self.trace(markup)
        if not report.polylines and self.settings.processing.require_entities:
            raise EmptyInputError(report.path_count)

        document = self.writer.build(report.polylines)
        dxf = self.writer.write_document(document)
        logger.info(
            "Conversion finished",
            paths=report.path_count,
            entities=document.entity_count,
            skipped=report.skipped_paths,
        )
        return ConversionResult(
            dxf=dxf,
            entity_count=document.entity_count,
            vertex_count=document.vertex_count,
            path_count=report.path_count,
            skipped_paths=report.skipped_paths,
            warnings=report.warnings,
        )

    def convert_file(self, input_path: Path, output_path: Path | None = None, *, join_lines: bool = False) -> ConversionResult:
        markup = read_markup(input_path, join_lines=join_lines)
        result = self.convert_markup(markup)
        target = output_path or default_output_path(input_path)
        target.write_text(result.dxf, encoding="utf-8", newline="\n")
        logger.info("DXF written", source=str(input_path), output=str(target))
        return result


def default_output_path(input_path: Path, output_dir: Path | None = None) -> Path:
    name = input_path.with_suffix(DXF_SUFFIX).name
    return (output_dir or input_path.parent) / name


def convert_markup(markup: str, settings: ConverterSettings | None = None) -> ConversionResult:
    return PipelineController(settings).convert_markup(markup)


def convert(markup: str, settings: ConverterSettings | None = None) -> str:
    """Convert SVG markup to DXF text."""
    return convert_markup(markup, settings).dxf


def markup_to_polylines(markup: str, settings: ConverterSettings | None = None) -> List[Polyline]:
    return PipelineController(settings).trace(markup).polylines


def convert_file(
    input_path: Path,
    output_path: Path | None = None,
    settings: ConverterSettings | None = None,
    *,
    join_lines: bool = False,
) -> ConversionResult:
    return PipelineController(settings).convert_file(input_path, output_path, join_lines=join_lines)


@dataclass
class BatchItem:
    source: Path
    output: Path
    result: Optional[ConversionResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def convert_job(source: str, output: str, settings_dict: Dict[str, Any], join_lines: bool) -> Tuple[Optional[ConversionResult], Optional[str]]:
    """Convert one file; top-level so worker processes can pickle it."""
    settings = ConverterSettings.model_validate(settings_dict)
    try:
        result = convert_file(Path(source), Path(output), settings, join_lines=join_lines)
    except SvgDxfError as exc:
        return None, str(exc)
    return result, None


def convert_files(
    paths: Iterable[Path],
    output_dir: Path | None = None,
    settings: ConverterSettings | None = None,
    *,
    join_lines: bool = False,
) -> List[BatchItem]:
    """Convert several files in worker processes; results keep input order."""
    settings = settings or get_default_settings()
    items = [BatchItem(source=path, output=default_output_path(path, output_dir)) for path in paths]
    if not items:
        return items
    settings_dict = settings.model_dump(mode="json")
    max_workers = settings.processing.max_workers

    logger.info("Starting batch conversion", files=len(items), max_workers=max_workers)
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(convert_job, str(item.source), str(item.output), settings_dict, join_lines)
            for item in items
        ]
        for item, future in zip(items, futures):
            try:
                item.result, item.error = future.result()
            except Exception as exc:
                # Worker crashed or the result could not be unpickled
                item.error = f"{type(exc).__name__}: {exc}"
            if item.error:
                logger.error("Batch item failed", source=str(item.source), error=item.error)
    return items
