"""Decoded shape references.

A canvas shape id packs the shape's domain role and positional indices into
a string. These variants are the decoded form, produced once when the shape
is created so that per-frame code never re-parses the id.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class ShapeRole(str, Enum):
    """Domain role of a canvas shape."""

    PANEL = "panel"
    POST = "post"
    SHELF = "shelf"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PanelRef:
    """A structural carcass panel (top, bottom, left, right or back).

    Attributes:
        panel_id: The exact panel id, e.g. ``MOD-LEFT``.
        key: Panel key used in ``PanelsEnabled`` (``left``, ``top``...).
        label: Human-readable label for menus and overlays.
    """

    role: ClassVar[ShapeRole] = ShapeRole.PANEL

    panel_id: str
    key: str
    label: str


@dataclass(frozen=True)
class PostRef:
    """A full-height center post.

    Attributes:
        index: 1-based display index (the id itself is 0-based).
    """

    role: ClassVar[ShapeRole] = ShapeRole.POST

    index: int


@dataclass(frozen=True)
class ShelfRef:
    """A shelf inside one carcass section.

    Attributes:
        section_index: 0-based section index (the id carries it 1-based).
        shelf_index: 1-based shelf index, as carried by the id.
    """

    role: ClassVar[ShapeRole] = ShapeRole.SHELF

    section_index: int
    shelf_index: int


@dataclass(frozen=True)
class UnknownRef:
    """Any shape whose id does not encode a carcass role."""

    role: ClassVar[ShapeRole] = ShapeRole.UNKNOWN


ShapeRef = Union[PanelRef, PostRef, ShelfRef, UnknownRef]
