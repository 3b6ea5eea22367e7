"""Pointer hit testing on the design canvas.

``hit_test_shapes`` resolves a pointer to the front-most selectable shape,
``detect_edge`` tells a resize grab from a move grab, and
``get_click_target`` maps a click onto the carcass structure (panel, center
post or section) for context menus.
"""

from __future__ import annotations

from typing import Iterable, Literal, Sequence

from ..shape_ids import NON_SELECTABLE_IDS, PanelId
from ..value_objects import (
    WARDROBE_CARCASS,
    ClickTarget,
    ClickTargetType,
    LineShape,
    ModuleConfig,
    Point2D,
    RectShape,
    SectionType,
    Shape,
    WardrobeBounds,
    WardrobeSection,
)
from .bounds import find_rect
from .geometry import point_to_segment_distance

__all__ = [
    "ALL_EDGES",
    "EDGE_THRESHOLD",
    "LINE_TOLERANCE_FACTOR",
    "Edge",
    "detect_edge",
    "get_click_target",
    "get_wardrobe_bounds",
    "hit_test_shapes",
]

Edge = Literal["left", "right", "top", "bottom"]

ALL_EDGES: tuple[Edge, ...] = ("left", "right", "top", "bottom")

# Pixels from an edge that still count as grabbing it
EDGE_THRESHOLD = 8.0

# Line hit tolerance as a fraction of the grid size
LINE_TOLERANCE_FACTOR = 0.6

# Unit types that have a carcass layout to click into
_WARDROBE_UNIT_TYPES = frozenset({"wardrobe", WARDROBE_CARCASS})


def hit_test_shapes(
    x: float,
    y: float,
    shapes: Sequence[Shape],
    grid_size: float,
) -> Shape | None:
    """Return the front-most shape under the point, if any.

    Shapes later in the sequence are drawn on top and win. Non-selectable
    shapes such as the back panel are skipped so they never block the
    shapes behind them.

    Args:
        x: Pointer x in canvas coordinates.
        y: Pointer y in canvas coordinates.
        shapes: Shapes in drawing order.
        grid_size: Current grid size; lines are hit within 60% of it.

    Returns:
        The hit shape, or ``None``.
    """
    tolerance = grid_size * LINE_TOLERANCE_FACTOR
    point = Point2D(x, y)

    for shape in reversed(shapes):
        if shape.id in NON_SELECTABLE_IDS:
            continue
        if isinstance(shape, RectShape):
            if shape.x <= x <= shape.right and shape.y <= y <= shape.bottom:
                return shape
        elif isinstance(shape, LineShape):
            if point_to_segment_distance(point, shape.start, shape.end) < tolerance:
                return shape

    return None


def detect_edge(
    x: float,
    y: float,
    rect: RectShape,
    allowed_edges: Iterable[Edge] = ALL_EDGES,
    threshold: float = EDGE_THRESHOLD,
) -> Edge | None:
    """Detect which edge of a rectangle the point is grabbing.

    Only one edge is reported; when the point is near two edges (a corner)
    the first allowed one in left, right, top, bottom order wins.

    Returns:
        The grabbed edge, or ``None`` when the point is not near an allowed
        edge.
    """
    in_x_range = rect.x - threshold <= x <= rect.right + threshold
    in_y_range = rect.y - threshold <= y <= rect.bottom + threshold
    if not in_x_range or not in_y_range:
        return None

    within_height = rect.y <= y <= rect.bottom
    within_width = rect.x <= x <= rect.right
    near: dict[Edge, bool] = {
        "left": abs(x - rect.x) <= threshold and within_height,
        "right": abs(x - rect.right) <= threshold and within_height,
        "top": abs(y - rect.y) <= threshold and within_width,
        "bottom": abs(y - rect.bottom) <= threshold and within_width,
    }

    allowed = set(allowed_edges)
    for edge in ALL_EDGES:
        if near[edge] and edge in allowed:
            return edge
    return None


def get_wardrobe_bounds(
    module_config: ModuleConfig,
    shapes: Sequence[Shape],
) -> WardrobeBounds | None:
    """Locate the outer frame of the wardrobe on the canvas.

    The origin comes from the left and top panels. Without a left panel the
    top-left corner of all rectangles is used. Width and height always come
    from the configuration.
    """
    thickness = module_config.thickness
    left = find_rect(shapes, PanelId.LEFT.value)
    top = find_rect(shapes, PanelId.TOP.value)

    if left is not None:
        ox = left.x
        oy = top.y if top is not None else left.y
    else:
        rects = [s for s in shapes if isinstance(s, RectShape)]
        if not rects:
            return None
        ox = min(r.x for r in rects)
        oy = min(r.y for r in rects)

    return WardrobeBounds(
        ox=ox,
        oy=oy,
        width=module_config.width_mm,
        height=module_config.height_mm,
        thickness=thickness,
    )


def _panel_at(point: Point2D, bounds: WardrobeBounds) -> PanelId | None:
    ox, oy, t = bounds.ox, bounds.oy, bounds.thickness
    if ox <= point.x < ox + t:
        return PanelId.LEFT
    if ox + bounds.width - t < point.x <= ox + bounds.width:
        return PanelId.RIGHT
    if oy <= point.y < oy + t:
        return PanelId.TOP
    if oy + bounds.height - t < point.y <= oy + bounds.height:
        return PanelId.BOTTOM
    return None


def _post_at(point: Point2D, bounds: WardrobeBounds, post_count: int) -> int | None:
    """1-based index of the center post under the point, assuming equal spacing."""
    if post_count <= 0:
        return None

    t = bounds.thickness
    inner_width = bounds.width - t * 2
    section_width = (inner_width - post_count * t) / (post_count + 1)

    for i in range(1, post_count + 1):
        post_x = bounds.ox + t + section_width * i + t * (i - 1)
        if post_x <= point.x <= post_x + t:
            return i
    return None


def _section_from_sections(
    point: Point2D,
    bounds: WardrobeBounds,
    sections: Sequence[WardrobeSection],
) -> int | None:
    t = bounds.thickness
    inner_width = bounds.width - t * 2
    partition_count = max(0, len(sections) - 1)
    auto_width = (inner_width - partition_count * t) / len(sections)

    current_x = bounds.ox + t
    for index, section in enumerate(sections):
        section_width = section.width_mm if section.width_mm > 0 else auto_width
        section_end = current_x + section_width
        if current_x <= point.x < section_end:
            return index
        current_x = section_end + t
    return None


def _section_from_post_count(
    point: Point2D,
    bounds: WardrobeBounds,
    post_count: int,
) -> int:
    t = bounds.thickness
    section_count = post_count + 1
    inner_width = bounds.width - t * 2
    section_width = (inner_width - post_count * t) / section_count

    current_x = bounds.ox + t
    for index in range(section_count):
        section_end = current_x + section_width
        if current_x <= point.x < section_end:
            return index
        current_x = section_end + t
    return 0


def get_click_target(
    point: Point2D,
    module_config: ModuleConfig | None,
    shapes: Sequence[Shape],
) -> ClickTarget:
    """Determine which part of the wardrobe a click landed on.

    Checks run in a fixed order: outside the frame, outer panels (left,
    right, top, bottom), center posts, then sections. With explicit
    sections only ``shelves`` and ``short_hang`` sections are reported;
    clicks in other section types are ``empty``. Without explicit sections
    the carcass is divided equally by its post count.

    Args:
        point: Click position in canvas coordinates.
        module_config: Current module configuration, if any.
        shapes: Current canvas shapes.

    Returns:
        The click target; ``empty`` when nothing applies.
    """
    if module_config is None or module_config.unit_type not in _WARDROBE_UNIT_TYPES:
        return ClickTarget(type=ClickTargetType.EMPTY)

    bounds = get_wardrobe_bounds(module_config, shapes)
    if bounds is None:
        return ClickTarget(type=ClickTargetType.EMPTY)

    if not (
        bounds.ox <= point.x <= bounds.ox + bounds.width
        and bounds.oy <= point.y <= bounds.oy + bounds.height
    ):
        return ClickTarget(type=ClickTargetType.OUTSIDE)

    panel = _panel_at(point, bounds)
    if panel is not None:
        return ClickTarget(type=ClickTargetType.PANEL, panel_id=panel.value)

    post_count = module_config.center_post_count or 0
    post_index = _post_at(point, bounds, post_count)
    if post_index is not None:
        return ClickTarget(type=ClickTargetType.CENTER_POST, post_index=post_index)

    sections = module_config.sections
    if sections:
        index = _section_from_sections(point, bounds, sections)
        if index is not None and sections[index].type.supports_shelves:
            section = sections[index]
            return ClickTarget(
                type=ClickTargetType.SECTION,
                section_index=index,
                section_type=section.type,
                shelf_count=section.shelf_count,
            )
        return ClickTarget(type=ClickTargetType.EMPTY)

    return ClickTarget(
        type=ClickTargetType.SECTION,
        section_index=_section_from_post_count(point, bounds, post_count),
        section_type=SectionType.SHELVES,
        shelf_count=0,
    )
