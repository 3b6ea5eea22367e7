"""Drag bounds for shelves and center posts.

Bounds are derived from the live shape positions on the canvas rather than
from the module configuration, so they stay correct while a post is being
dragged and the configuration has not caught up yet.

Both entry points return ``None`` when the constraint does not apply (not a
wardrobe carcass, panels missing, malformed shelf id).
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..shape_ids import (
    MIN_EDGE_GAP,
    MODULE_ID_PREFIX,
    PanelId,
    get_center_posts,
    parse_shelf_id,
)
from ..value_objects import (
    CarcassBounds,
    CarcassPanels,
    ModuleConfig,
    RectShape,
    SectionBoundary,
    Shape,
    ShelfBounds,
)

__all__ = [
    "build_section_boundaries",
    "find_rect",
    "get_carcass_bounds",
    "get_carcass_panels",
    "get_shelf_bounds",
]

logger = logging.getLogger(__name__)


def find_rect(shapes: Iterable[Shape], *shape_ids: str) -> RectShape | None:
    """Return the first rectangle whose id is one of ``shape_ids``."""
    for shape in shapes:
        if isinstance(shape, RectShape) and shape.id in shape_ids:
            return shape
    return None


def get_carcass_panels(shapes: Sequence[Shape]) -> CarcassPanels:
    """Resolve the four structural panels from the canvas."""
    return CarcassPanels(
        top=find_rect(shapes, PanelId.TOP.value),
        bottom=find_rect(shapes, PanelId.BOTTOM.value),
        left=find_rect(shapes, PanelId.LEFT.value),
        right=find_rect(shapes, PanelId.RIGHT.value),
    )


def build_section_boundaries(
    left_edge: float,
    right_edge: float,
    center_posts: Sequence[RectShape],
) -> list[SectionBoundary]:
    """Split the span between the carcass edges at each center post.

    ``center_posts`` must be sorted by x (see ``get_center_posts``); each
    section runs from the previous post's right face to the next post's
    left face.
    """
    boundaries: list[SectionBoundary] = []
    start = left_edge
    for post in center_posts:
        boundaries.append(SectionBoundary(start=start, end=post.x))
        start = post.x + post.w
    boundaries.append(SectionBoundary(start=start, end=right_edge))
    return boundaries


def get_shelf_bounds(
    module_config: ModuleConfig | None,
    shapes: Sequence[Shape],
    shelf_id: str,
) -> ShelfBounds | None:
    """Calculate the vertical drag range of a shelf within its section.

    The inner carcass box comes from the four panel shapes. When any of them
    is missing, the extent of every ``MOD-`` rectangle inset by one panel
    thickness is used instead. A further thickness of margin is kept at the
    top and bottom so a shelf cannot touch the top or bottom panel.

    A shelf that refers to a section beyond the last existing one is
    constrained to the last section.

    Args:
        module_config: Current module configuration.
        shapes: Live canvas shapes.
        shelf_id: Id of the shelf being dragged.

    Returns:
        Shelf bounds, or ``None`` if not applicable.
    """
    if module_config is None or not module_config.is_wardrobe_carcass:
        return None

    shelf = parse_shelf_id(shelf_id)
    if shelf is None:
        logger.debug(f"Shelf bounds not applicable for id {shelf_id!r}")
        return None

    thickness = module_config.thickness
    panels = get_carcass_panels(shapes)
    top, bottom, left, right = panels.top, panels.bottom, panels.left, panels.right

    if top and bottom and left and right:
        min_y = top.bottom
        max_y = bottom.y
        left_edge = left.right
        right_edge = right.x
    else:
        module_rects = [
            s
            for s in shapes
            if isinstance(s, RectShape) and s.id.startswith(MODULE_ID_PREFIX)
        ]
        if not module_rects:
            logger.debug("Shelf bounds not applicable: no module shapes on canvas")
            return None

        min_y = min(r.y for r in module_rects) + thickness
        max_y = max(r.bottom for r in module_rects) - thickness
        left_edge = min(r.x for r in module_rects) + thickness
        right_edge = max(r.right for r in module_rects) - thickness

    sections = build_section_boundaries(left_edge, right_edge, get_center_posts(shapes))

    index = max(0, min(shelf.section_index, len(sections) - 1))
    if index != shelf.section_index:
        logger.debug(
            f"Shelf {shelf_id} refers to section {shelf.section_index}; "
            f"using section {index} of {len(sections)}"
        )
    section = sections[index]

    return ShelfBounds(
        min_y=min_y + thickness,
        max_y=max_y - thickness,
        section_x=section.start,
        section_width=section.width,
    )


def get_carcass_bounds(
    module_config: ModuleConfig | None,
    shapes: Sequence[Shape],
) -> CarcassBounds | None:
    """Calculate the horizontal drag range of a center post.

    The left and right panels are found under their normal id or their
    ``-DISABLED`` placeholder id. An enabled panel's inner face is the edge;
    for a disabled panel its outer face is used. Posts must keep
    ``MIN_EDGE_GAP`` clearance from either edge.

    Returns:
        Carcass bounds, or ``None`` if not applicable.
    """
    if module_config is None or not module_config.is_wardrobe_carcass:
        return None

    enabled = module_config.effective_panels
    left = find_rect(shapes, PanelId.LEFT.value, PanelId.LEFT.disabled_id)
    right = find_rect(shapes, PanelId.RIGHT.value, PanelId.RIGHT.disabled_id)

    if left is None or right is None:
        logger.debug("Carcass bounds not applicable: side panels not on canvas")
        return None

    left_edge = left.right if enabled.left else left.x
    right_edge = right.x if enabled.right else right.right

    return CarcassBounds(
        min_x=left_edge + MIN_EDGE_GAP,
        max_x=right_edge - MIN_EDGE_GAP,
        left_edge=left_edge,
        right_edge=right_edge,
    )
