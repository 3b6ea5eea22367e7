"""Pydantic schemas for wardrobe JSON documents.

Three documents are accepted:
- a module configuration (``ModuleConfigSchema``)
- a canvas snapshot: a module configuration plus its shapes
  (``CanvasSnapshotSchema``)
- a production input: the flat panel list with overrides and gap
  (``ProductionInputSchema``)

Numbers that feed the section width solver are not range-checked here; the
solver clamps them to safe values itself.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from wardrobes.domain.services.group_layout import DEFAULT_GAP_MM
from wardrobes.domain.value_objects import (
    WARDROBE_CARCASS,
    ProductionPanelType,
    SectionType,
)

__all__ = [
    "CanvasSnapshotSchema",
    "LineShapeSchema",
    "ModuleConfigSchema",
    "PanelOverrideSchema",
    "PanelsEnabledSchema",
    "ProductionInputSchema",
    "ProductionPanelItemSchema",
    "RectShapeSchema",
    "ShapeSchema",
    "WardrobeSectionSchema",
]


# =============================================================================
# Module configuration
# =============================================================================


class PanelsEnabledSchema(BaseModel):
    """Which structural panels are switched on."""

    model_config = ConfigDict(extra="forbid")

    top: bool = True
    bottom: bool = True
    left: bool = True
    right: bool = True
    back: bool = True


class WardrobeSectionSchema(BaseModel):
    """Configuration for one wardrobe section.

    Attributes:
        type: What the section holds.
        width_mm: Fixed section width, 0 for an equal share.
        shelf_count: Number of shelves.
        drawer_count: Number of drawers.
        rod_height_pct: Share of the section height used by the rod area.
        shelf_positions: Custom shelf positions as percentages of the
            section height.
        posts_below: Partial-height posts below the shelves (0-9).
    """

    model_config = ConfigDict(extra="forbid")

    type: SectionType = SectionType.SHELVES
    width_mm: float = 0
    shelf_count: int = Field(default=0, ge=0)
    drawer_count: int = Field(default=0, ge=0)
    rod_height_pct: float | None = None
    shelf_positions: list[float] | None = None
    posts_below: int = Field(default=0, ge=0, le=9)


class ModuleConfigSchema(BaseModel):
    """Configuration for a wardrobe carcass module.

    Attributes:
        unit_type: Unit type; bounds and drags only apply to
            ``wardrobe_carcass``.
        name: Display name of the module.
        width_mm: Overall width in mm.
        height_mm: Overall height in mm.
        depth_mm: Overall depth in mm.
        carcass_thickness_mm: Panel thickness, 18mm when omitted.
        center_post_count: Number of full-height center posts.
        center_post_positions: Custom post positions from the inner left
            edge.
        panels_enabled: Structural panel switches, all on when omitted.
        sections: Ordered section list; may be empty.
    """

    model_config = ConfigDict(extra="forbid")

    unit_type: str = WARDROBE_CARCASS
    name: str = ""
    width_mm: float = 1200
    height_mm: float = 2100
    depth_mm: float = 560
    carcass_thickness_mm: float | None = None
    center_post_count: int = 0
    center_post_positions: list[float] | None = None
    panels_enabled: PanelsEnabledSchema | None = None
    sections: list[WardrobeSectionSchema] = Field(default_factory=list)


# =============================================================================
# Canvas shapes
# =============================================================================


class RectShapeSchema(BaseModel):
    """A rectangle on the canvas."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["rect"] = "rect"
    id: str
    x: float
    y: float
    w: float
    h: float


class LineShapeSchema(BaseModel):
    """A line segment on the canvas."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["line"] = "line"
    id: str
    x1: float
    y1: float
    x2: float
    y2: float


ShapeSchema = Annotated[
    Union[RectShapeSchema, LineShapeSchema],
    Field(discriminator="type"),
]


class CanvasSnapshotSchema(BaseModel):
    """A module configuration together with the shapes drawn for it."""

    model_config = ConfigDict(extra="forbid")

    module: ModuleConfigSchema
    shapes: list[ShapeSchema] = Field(default_factory=list)


# =============================================================================
# Production
# =============================================================================


class ProductionPanelItemSchema(BaseModel):
    """One physical panel to be cut."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    room_index: int = Field(default=0, ge=0)
    room_name: str = ""
    unit_index: int = Field(default=0, ge=0)
    unit_id: str
    unit_type: str = "wardrobe"
    unit_label: str = ""
    panel_type: ProductionPanelType = ProductionPanelType.SHUTTER
    panel_label: str = ""
    row: int = Field(default=1, ge=1)
    col: int = Field(default=1, ge=1)
    width_mm: float = Field(..., gt=0)
    height_mm: float = Field(..., gt=0)
    laminate_code: str | None = None
    grain_direction: bool = False


class PanelOverrideSchema(BaseModel):
    """Manual width/height correction for one panel."""

    model_config = ConfigDict(extra="forbid")

    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)


class ProductionInputSchema(BaseModel):
    """Input document for the production view.

    Attributes:
        items: Flat list of production panels in drawing order.
        overrides: Manual corrections keyed by panel id.
        gap_mm: Gap between panels in mm.
        deleted_panels: Ids of panels removed from production.
    """

    model_config = ConfigDict(extra="forbid")

    items: list[ProductionPanelItemSchema] = Field(default_factory=list)
    overrides: dict[str, PanelOverrideSchema] = Field(default_factory=dict)
    gap_mm: float = Field(default=DEFAULT_GAP_MM, ge=0)
    deleted_panels: list[str] = Field(default_factory=list)
