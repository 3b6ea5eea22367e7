"""Value objects for the wardrobe domain.

This module provides immutable data types used throughout the wardrobe
layout engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Decoded shape ids
from ._shape_refs import (
    PanelRef,
    PostRef,
    ShapeRef,
    ShapeRole,
    ShelfRef,
    UnknownRef,
)

# Canvas shapes and geometry results
from ._shapes import (
    AlignmentGuide,
    LineShape,
    MeasurementResult,
    Point2D,
    RectShape,
    Shape,
    ShapeBounds,
)

# Carcass configuration and bounds
from ._carcass import (
    DEFAULT_CARCASS_THICKNESS,
    WARDROBE_CARCASS,
    CarcassBounds,
    CarcassPanels,
    ClickTarget,
    ClickTargetType,
    ModuleConfig,
    PanelKey,
    PanelsEnabled,
    SectionBoundary,
    SectionType,
    ShelfBounds,
    WardrobeBounds,
    WardrobeSection,
)

# Production panels and CAD groups
from ._production import (
    CadGroup,
    CadLoftPanel,
    CadShutter,
    GroupLayout,
    PanelOverride,
    PanelOverrides,
    ProductionPanelItem,
    ProductionPanelType,
    ProductionStats,
)

__all__ = [
    # Shape refs
    "PanelRef",
    "PostRef",
    "ShapeRef",
    "ShapeRole",
    "ShelfRef",
    "UnknownRef",
    # Shapes
    "AlignmentGuide",
    "LineShape",
    "MeasurementResult",
    "Point2D",
    "RectShape",
    "Shape",
    "ShapeBounds",
    # Carcass
    "DEFAULT_CARCASS_THICKNESS",
    "WARDROBE_CARCASS",
    "CarcassBounds",
    "CarcassPanels",
    "ClickTarget",
    "ClickTargetType",
    "ModuleConfig",
    "PanelKey",
    "PanelsEnabled",
    "SectionBoundary",
    "SectionType",
    "ShelfBounds",
    "WardrobeBounds",
    "WardrobeSection",
    # Production
    "CadGroup",
    "CadLoftPanel",
    "CadShutter",
    "GroupLayout",
    "PanelOverride",
    "PanelOverrides",
    "ProductionPanelItem",
    "ProductionPanelType",
    "ProductionStats",
]
