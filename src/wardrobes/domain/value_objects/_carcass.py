"""Wardrobe carcass configuration and derived bounds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from ._shapes import RectShape

DEFAULT_CARCASS_THICKNESS = 18.0
WARDROBE_CARCASS = "wardrobe_carcass"

PanelKey = Literal["top", "bottom", "left", "right", "back"]


class SectionType(str, Enum):
    """Types of wardrobe sections.

    Attributes:
        LONG_HANG: Full-height hanging rod.
        SHORT_HANG: Short hanging rod with shelves below.
        SHELVES: Horizontal shelves.
        DRAWERS: Stacked drawers.
        OPEN: Empty open section.
    """

    LONG_HANG = "long_hang"
    SHORT_HANG = "short_hang"
    SHELVES = "shelves"
    DRAWERS = "drawers"
    OPEN = "open"

    @property
    def supports_shelves(self) -> bool:
        return self in (SectionType.SHELVES, SectionType.SHORT_HANG)


@dataclass(frozen=True)
class WardrobeSection:
    """One section of a wardrobe carcass.

    Attributes:
        type: What the section holds.
        width_mm: Fixed width, or 0 for an equal share of the inner width.
        shelf_count: Number of shelves (shelves and short_hang sections).
        drawer_count: Number of drawers (drawers sections).
        rod_height_pct: Share of the section height given to the rod area.
        shelf_positions: Custom shelf y positions as a percentage (0-100)
            of the section height, indexed by ``shelf_index - 1``.
            ``None`` means evenly spaced.
        posts_below: Partial-height posts hung below the section's shelves.
    """

    type: SectionType = SectionType.SHELVES
    width_mm: float = 0
    shelf_count: int = 0
    drawer_count: int = 0
    rod_height_pct: float | None = None
    shelf_positions: tuple[float, ...] | None = None
    posts_below: int = 0


@dataclass(frozen=True)
class PanelsEnabled:
    """Which structural panels are switched on."""

    top: bool = True
    bottom: bool = True
    left: bool = True
    right: bool = True
    back: bool = True


@dataclass(frozen=True)
class ModuleConfig:
    """A wardrobe carcass as configured by the design UI.

    The core only reads this; edits come back as new instances from
    ``wardrobes.domain.services.config_updates``.
    """

    unit_type: str = WARDROBE_CARCASS
    name: str = ""
    width_mm: float = 1200
    height_mm: float = 2100
    depth_mm: float = 560
    carcass_thickness_mm: float | None = None
    center_post_count: int = 0
    center_post_positions: tuple[float, ...] | None = None
    panels_enabled: PanelsEnabled | None = None
    sections: tuple[WardrobeSection, ...] = ()

    @property
    def thickness(self) -> float:
        """Carcass thickness, falling back to the 18mm default."""
        if self.carcass_thickness_mm is None:
            return DEFAULT_CARCASS_THICKNESS
        return self.carcass_thickness_mm

    @property
    def is_wardrobe_carcass(self) -> bool:
        return self.unit_type == WARDROBE_CARCASS

    @property
    def effective_panels(self) -> PanelsEnabled:
        """Panel states, all enabled when not configured."""
        return self.panels_enabled or PanelsEnabled()


@dataclass(frozen=True)
class SectionBoundary:
    """Horizontal extent of one section between carcass edges and posts."""

    start: float
    end: float

    @property
    def width(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class ShelfBounds:
    """Legal vertical drag range for a shelf, plus its section's extent."""

    min_y: float
    max_y: float
    section_x: float
    section_width: float


@dataclass(frozen=True)
class CarcassBounds:
    """Legal horizontal drag range for a center post."""

    min_x: float
    max_x: float
    left_edge: float
    right_edge: float


@dataclass(frozen=True)
class CarcassPanels:
    """The four structural panels resolved from the canvas, if present."""

    top: RectShape | None = None
    bottom: RectShape | None = None
    left: RectShape | None = None
    right: RectShape | None = None

    @property
    def complete(self) -> bool:
        return None not in (self.top, self.bottom, self.left, self.right)


@dataclass(frozen=True)
class WardrobeBounds:
    """Outer frame of a wardrobe on the canvas."""

    ox: float
    oy: float
    width: float
    height: float
    thickness: float


class ClickTargetType(str, Enum):
    """What a click on the design canvas landed on."""

    PANEL = "panel"
    CENTER_POST = "centerPost"
    SECTION = "section"
    OUTSIDE = "outside"
    EMPTY = "empty"


@dataclass(frozen=True)
class ClickTarget:
    """Result of resolving a canvas click against the carcass layout."""

    type: ClickTargetType
    panel_id: str | None = None
    section_index: int | None = None
    section_type: SectionType | None = None
    shelf_count: int | None = None
    post_index: int | None = None
