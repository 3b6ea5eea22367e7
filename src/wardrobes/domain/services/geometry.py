"""Geometry primitives for the design canvas.

Pure functions over points, segments and shape bounds: distances, grid and
angle snapping, segment intersection, alignment guides and selection
measurements. Nothing here raises for numeric input; degenerate cases return
``None`` or pass the value through.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable

from ..value_objects import (
    AlignmentGuide,
    LineShape,
    MeasurementResult,
    Point2D,
    RectShape,
    ShapeBounds,
)

if TYPE_CHECKING:
    from ..value_objects import Shape

__all__ = [
    "ANGLE_SNAP_INCREMENT",
    "SNAP_THRESHOLD",
    "apply_angle_snap",
    "calculate_measurements",
    "distance",
    "find_alignment_guides",
    "get_angle",
    "get_combined_bounds",
    "get_shape_bounds",
    "is_horizontal",
    "is_vertical",
    "point_to_segment_distance",
    "round_half_up",
    "segment_intersection",
    "snap_angle",
    "snap_point_to_grid",
    "snap_to_grid",
]

# Pixel threshold for snapping to other shapes
SNAP_THRESHOLD = 10.0

# Angle snap increment in degrees
ANGLE_SNAP_INCREMENT = 45.0

_PARALLEL_EPSILON = 1e-10


def round_half_up(value: float) -> float:
    """Round to the nearest integer, with .5 always rounding up.

    Unlike the built-in ``round`` this never rounds half to even, so repeated
    layout edits round the same way every time. Non-finite values are
    returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def distance(p1: Point2D, p2: Point2D) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def point_to_segment_distance(p: Point2D, a: Point2D, b: Point2D) -> float:
    """Shortest distance from ``p`` to the segment ``a``-``b``.

    When the projection of ``p`` falls outside the segment, the distance to
    the nearest endpoint is returned. A zero-length segment degrades to the
    distance to ``a``.
    """
    vx = b.x - a.x
    vy = b.y - a.y
    wx = p.x - a.x
    wy = p.y - a.y

    c1 = vx * wx + vy * wy
    if c1 <= 0:
        return math.hypot(p.x - a.x, p.y - a.y)

    c2 = vx * vx + vy * vy
    if c2 <= c1:
        return math.hypot(p.x - b.x, p.y - b.y)

    t = c1 / c2
    return math.hypot(p.x - (a.x + t * vx), p.y - (a.y + t * vy))


def snap_to_grid(value: float, grid_size: float) -> float:
    """Snap a value to the nearest multiple of ``grid_size``.

    With ``grid_size=1`` this is plain half-up rounding. A non-positive grid
    leaves the value unchanged.
    """
    if grid_size <= 0:
        return value
    return round_half_up(value / grid_size) * grid_size


def snap_point_to_grid(x: float, y: float, grid_size: float) -> Point2D:
    """Snap both coordinates of a point to the grid."""
    return Point2D(snap_to_grid(x, grid_size), snap_to_grid(y, grid_size))


def get_angle(x1: float, y1: float, x2: float, y2: float) -> float:
    """Angle from the first point to the second, in whole degrees (-180..180)."""
    degrees = math.degrees(math.atan2(y2 - y1, x2 - x1))
    return math.fmod(round_half_up(degrees), 360)


def snap_angle(angle: float, increment: float = ANGLE_SNAP_INCREMENT) -> float:
    """Snap an angle to the nearest increment."""
    return snap_to_grid(angle, increment)


def apply_angle_snap(start: Point2D, end: Point2D, should_snap: bool) -> Point2D:
    """Rotate a line endpoint onto the nearest snap angle, keeping its length."""
    if not should_snap:
        return end

    angle = math.radians(snap_angle(get_angle(start.x, start.y, end.x, end.y)))
    length = distance(start, end)
    return Point2D(
        start.x + length * math.cos(angle),
        start.y + length * math.sin(angle),
    )


def is_horizontal(angle: float, tolerance: float = 15) -> bool:
    """Check if an angle is within ``tolerance`` of 0 or 180 degrees."""
    normalized = angle % 360
    return (
        normalized < tolerance
        or normalized > 360 - tolerance
        or abs(normalized - 180) < tolerance
    )


def is_vertical(angle: float, tolerance: float = 15) -> bool:
    """Check if an angle is within ``tolerance`` of 90 or 270 degrees."""
    normalized = angle % 360
    return abs(normalized - 90) < tolerance or abs(normalized - 270) < tolerance


def segment_intersection(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    x4: float,
    y4: float,
    grid_size: float | None = None,
) -> Point2D | None:
    """Intersect segment 1 with the infinite line through segment 2.

    Only the first segment's parameter is range-checked, so guide lines can
    be projected onto the first segment from anywhere along the second
    line's direction.

    Returns:
        The intersection point (snapped when ``grid_size`` is given), or
        ``None`` for parallel lines or when the hit lies outside segment 1.
    """
    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < _PARALLEL_EPSILON:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    if t < 0 or t > 1:
        return None

    x = x1 + t * (x2 - x1)
    y = y1 + t * (y2 - y1)
    if grid_size:
        return snap_point_to_grid(x, y, grid_size)
    return Point2D(x, y)


def get_shape_bounds(shape: Shape) -> ShapeBounds | None:
    """Bounding box of a single shape."""
    if isinstance(shape, RectShape):
        return ShapeBounds(
            x1=shape.x,
            y1=shape.y,
            x2=shape.x + shape.w,
            y2=shape.y + shape.h,
            cx=shape.x + shape.w / 2,
            cy=shape.y + shape.h / 2,
        )
    if isinstance(shape, LineShape):
        return ShapeBounds(
            x1=min(shape.x1, shape.x2),
            y1=min(shape.y1, shape.y2),
            x2=max(shape.x1, shape.x2),
            y2=max(shape.y1, shape.y2),
            cx=(shape.x1 + shape.x2) / 2,
            cy=(shape.y1 + shape.y2) / 2,
        )
    return None


def get_combined_bounds(shapes: Iterable[Shape]) -> ShapeBounds | None:
    """Bounding box enclosing every shape, or ``None`` for no shapes."""
    bounds = [b for b in (get_shape_bounds(s) for s in shapes) if b is not None]
    if not bounds:
        return None

    x1 = min(b.x1 for b in bounds)
    y1 = min(b.y1 for b in bounds)
    x2 = max(b.x2 for b in bounds)
    y2 = max(b.y2 for b in bounds)
    return ShapeBounds(x1=x1, y1=y1, x2=x2, y2=y2, cx=(x1 + x2) / 2, cy=(y1 + y2) / 2)


def find_alignment_guides(
    current_x: float,
    current_y: float,
    shapes: Iterable[Shape],
    exclude_id: str | None,
    canvas_width: float,
    canvas_height: float,
    threshold: float = SNAP_THRESHOLD,
) -> tuple[list[AlignmentGuide], float | None, float | None]:
    """Find guides for a point moving near the edges or centers of shapes.

    Every edge and center line within ``threshold`` produces a guide. The
    first match on each axis becomes the snap coordinate.

    Returns:
        Tuple of (guides, snap_x, snap_y); snap values are ``None`` when
        nothing aligned on that axis.
    """
    guides: list[AlignmentGuide] = []
    snap_x: float | None = None
    snap_y: float | None = None

    for shape in shapes:
        if shape.id == exclude_id:
            continue
        bounds = get_shape_bounds(shape)
        if bounds is None:
            continue

        for position in (bounds.y1, bounds.cy, bounds.y2):
            if abs(current_y - position) < threshold:
                guides.append(AlignmentGuide("horizontal", position, 0, canvas_width))
                if snap_y is None:
                    snap_y = position

        for position in (bounds.x1, bounds.cx, bounds.x2):
            if abs(current_x - position) < threshold:
                guides.append(AlignmentGuide("vertical", position, 0, canvas_height))
                if snap_x is None:
                    snap_x = position

    return guides, snap_x, snap_y


def calculate_measurements(
    shapes: Iterable[Shape],
    selected_ids: set[str],
    selected_id: str | None = None,
) -> MeasurementResult:
    """Sum line lengths and rectangle area/perimeter over the selection."""
    total_length = 0.0
    area = 0.0
    perimeter = 0.0
    count = 0

    for shape in shapes:
        if shape.id not in selected_ids and shape.id != selected_id:
            continue
        count += 1
        if isinstance(shape, LineShape):
            total_length += math.hypot(shape.x2 - shape.x1, shape.y2 - shape.y1)
        elif isinstance(shape, RectShape):
            area += shape.w * shape.h
            perimeter += 2 * (shape.w + shape.h)

    return MeasurementResult(
        total_length=round_half_up(total_length),
        area=round_half_up(area),
        perimeter=round_half_up(perimeter),
        selected_count=count,
    )
