from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import structlog

from .exceptions import PathSyntaxError
from .models import Command, CubicCurveTo, LineTo, MoveTo, Point, Polyline, Unsupported
from .tokenizer import tokenize

logger = structlog.get_logger(__name__)

DEFAULT_CURVE_SAMPLES = 100
DEFAULT_TOLERANCE = 0.001


def cubic_points(p0: Point, p1: Point, p2: Point, p3: Point, samples: int = DEFAULT_CURVE_SAMPLES) -> List[Point]:
    """
    Sample a cubic Bezier at `samples + 1` evenly spaced parameters.

    Args:
        p0: start point (current point).
        p1: first control point.
        p2: second control point.
        p3: end point.
        samples: number of parametric intervals, 100 gives a 0.01 step.

    Returns:
        Points for t = 0 .. 1 in increasing order, the last one equal to p3.
    """
    if samples < 1:
        raise ValueError(f"samples must be >= 1, got {samples}")
    t = np.linspace(0.0, 1.0, samples + 1)[:, np.newaxis]
    mt = 1.0 - t
    control = np.array([p0, p1, p2, p3], dtype=float)
    curve = (
        mt**3 * control[0]
        + 3.0 * mt**2 * t * control[1]
        + 3.0 * mt * t**2 * control[2]
        + t**3 * control[3]
    )
    points = [Point(float(x), float(y)) for x, y in curve]
    points[-1] = Point(float(p3[0]), float(p3[1]))
    return points


def _step(
    state: Tuple[Optional[Point], Optional[Point]],
    command: Command,
    out: List[Point],
    samples: int,
) -> Tuple[Optional[Point], Optional[Point]]:
    """Advance (current point, subpath start) by one command, appending to `out`."""
    current, subpath_start = state
    if isinstance(command, MoveTo):
        out.append(command.end)
        return command.end, command.end
    if isinstance(command, LineTo):
        out.append(command.end)
        return command.end, subpath_start if subpath_start is not None else command.end
    if isinstance(command, CubicCurveTo):
        if current is None:
            logger.debug("Curve without current point dropped")
            return current, subpath_start
        out.extend(cubic_points(current, command.control1, command.control2, command.end, samples))
        return command.end, subpath_start
    if isinstance(command, Unsupported):
        logger.debug("Command produces no geometry", code=command.code)
        if command.code == "Z":
            return subpath_start, subpath_start
        return command.end, subpath_start
    return current, subpath_start


def commands_to_points(commands: Iterable[Command], samples: int = DEFAULT_CURVE_SAMPLES) -> List[Point]:
    points: List[Point] = []
    state: Tuple[Optional[Point], Optional[Point]] = (None, None)
    for command in commands:
        state = _step(state, command, points, samples)
    return points


def flatten(path_data: str, samples: int = DEFAULT_CURVE_SAMPLES) -> List[Point]:
    """Raw point sequence of one path, curves sampled, before cleanup.

    Raises:
        PathSyntaxError: propagated from the tokenizer, or when curve
            arithmetic on huge coordinates overflows.
    """
    points = commands_to_points(tokenize(path_data), samples)
    if points and not np.isfinite(np.asarray(points, dtype=float)).all():
        raise PathSyntaxError(path_data, "curve overflows to a non-finite coordinate")
    return points


def cleanup(points: Sequence[Point], tolerance: float = DEFAULT_TOLERANCE) -> Polyline:
    """Drop points within `tolerance` of the last kept point.

    Greedy single pass: each point is compared only against the last point
    that was kept, never against the rest of the sequence.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")
    if len(points) < 2:
        return [Point(*p) for p in points]

    limit = tolerance * tolerance
    kept: Polyline = [Point(*points[0])]
    last_x, last_y = kept[0]
    for x, y in points[1:]:
        dx = x - last_x
        dy = y - last_y
        if dx * dx + dy * dy > limit:
            kept.append(Point(x, y))
            last_x, last_y = x, y
    return kept


def path_to_polyline(
    path_data: str,
    samples: int = DEFAULT_CURVE_SAMPLES,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Polyline:
    """Flatten and clean one path-data string."""
    return cleanup(flatten(path_data, samples), tolerance)
