"""Shape id conventions and classification.

Carcass shapes carry their domain role in their id:

- Structural panels use a fixed table of ids (``MOD-LEFT``, ``MOD-TOP``...).
- Center posts use ``MOD-POST-{index}``, 0-based in the id.
- Shelves use ``MOD-SHELF-{sectionIndex}-{shelfIndex}``, where the section
  index is 1-based in the id and the shelf index is 1-based everywhere.

``classify`` decodes an id into a ``ShapeRef`` variant. It never raises:
anything it cannot decode is an ``UnknownRef``.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Iterable

from .value_objects import (
    PanelRef,
    PostRef,
    RectShape,
    ShapeRef,
    ShelfRef,
    UnknownRef,
)

if TYPE_CHECKING:
    from .value_objects import Shape

__all__ = [
    "DISABLED_SUFFIX",
    "MIN_EDGE_GAP",
    "MODULE_ID_PREFIX",
    "NON_SELECTABLE_IDS",
    "PANEL_LABELS",
    "POST_ID_PREFIX",
    "SHELF_ID_PREFIX",
    "PanelId",
    "classify",
    "get_center_posts",
    "get_shelves",
    "is_center_post",
    "is_panel",
    "is_shelf",
    "parse_post_index",
    "parse_shelf_id",
]

MODULE_ID_PREFIX = "MOD-"
POST_ID_PREFIX = "MOD-POST-"
SHELF_ID_PREFIX = "MOD-SHELF-"

# Placeholder panels keep their shape when switched off, under this suffix.
DISABLED_SUFFIX = "-DISABLED"

# Minimum clearance (mm) between a center post and either carcass edge.
MIN_EDGE_GAP = 100.0

_POST_INDEX_RE = re.compile(r"MOD-POST-(\d+)", re.ASCII)
_SHELF_ID_RE = re.compile(r"MOD-SHELF-(\d+)-(\d+)", re.ASCII)


class PanelId(str, Enum):
    """Ids of the structural carcass panels."""

    LEFT = "MOD-LEFT"
    RIGHT = "MOD-RIGHT"
    TOP = "MOD-TOP"
    BOTTOM = "MOD-BOTTOM"
    BACK = "MOD-BACK"

    @property
    def disabled_id(self) -> str:
        return f"{self.value}{DISABLED_SUFFIX}"


# Panel id -> (panels-enabled key, display label)
PANEL_LABELS: dict[str, tuple[str, str]] = {
    PanelId.LEFT.value: ("left", "Left Side"),
    PanelId.RIGHT.value: ("right", "Right Side"),
    PanelId.TOP.value: ("top", "Top Panel"),
    PanelId.BOTTOM.value: ("bottom", "Bottom Panel"),
    PanelId.BACK.value: ("back", "Back Panel"),
}

# The back panel covers the whole interior and would block every click.
NON_SELECTABLE_IDS: frozenset[str] = frozenset({PanelId.BACK.value})


def is_panel(shape_id: str) -> bool:
    """Check if an id is one of the structural panel ids."""
    return shape_id in PANEL_LABELS


def is_center_post(shape_id: str) -> bool:
    """Check if an id belongs to a draggable center post."""
    return shape_id.startswith(POST_ID_PREFIX)


def is_shelf(shape_id: str) -> bool:
    """Check if an id belongs to a draggable shelf."""
    return shape_id.startswith(SHELF_ID_PREFIX)


def parse_post_index(shape_id: str) -> int:
    """Return the 1-based display index of a center post id.

    Falls back to 1 when the id has the post prefix but no parseable
    number after it.
    """
    match = _POST_INDEX_RE.search(shape_id)
    if match is None:
        return 1
    return int(match.group(1)) + 1


def parse_shelf_id(shape_id: str) -> ShelfRef | None:
    """Decode a shelf id into 0-based section and 1-based shelf indices.

    Example:
        >>> parse_shelf_id("MOD-SHELF-2-3")
        ShelfRef(section_index=1, shelf_index=3)
        >>> parse_shelf_id("garbage") is None
        True
    """
    match = _SHELF_ID_RE.search(shape_id)
    if match is None:
        return None
    return ShelfRef(
        section_index=int(match.group(1)) - 1,
        shelf_index=int(match.group(2)),
    )


def classify(shape_id: str) -> ShapeRef:
    """Decode the domain role of a shape from its id."""
    if not isinstance(shape_id, str):
        return UnknownRef()

    panel = PANEL_LABELS.get(shape_id)
    if panel is not None:
        key, label = panel
        return PanelRef(panel_id=shape_id, key=key, label=label)

    if is_center_post(shape_id):
        return PostRef(index=parse_post_index(shape_id))

    if is_shelf(shape_id):
        shelf = parse_shelf_id(shape_id)
        if shelf is not None:
            return shelf

    return UnknownRef()


def get_center_posts(shapes: Iterable[Shape]) -> list[RectShape]:
    """Return center post rectangles sorted left to right.

    Section boundaries are built pairwise from this order, so the sort is
    required even when the canvas keeps posts in creation order.
    """
    posts = [
        shape
        for shape in shapes
        if isinstance(shape, RectShape) and isinstance(shape.ref, PostRef)
    ]
    return sorted(posts, key=lambda post: post.x)


def get_shelves(shapes: Iterable[Shape]) -> list[RectShape]:
    """Return shelf rectangles in canvas order."""
    return [
        shape
        for shape in shapes
        if isinstance(shape, RectShape) and isinstance(shape.ref, ShelfRef)
    ]
