"""Domain layer - wardrobe geometry and production layout."""

from .section_resolver import SectionWidthResult, calculate_section_widths
from .services import (
    build_cad_groups,
    calculate_group_layout,
    get_carcass_bounds,
    get_shelf_bounds,
    hit_test_shapes,
)
from .shape_ids import classify, get_center_posts, get_shelves, parse_shelf_id
from .value_objects import (
    CadGroup,
    LineShape,
    ModuleConfig,
    ProductionPanelItem,
    RectShape,
    WardrobeSection,
)

__all__ = [
    "CadGroup",
    "LineShape",
    "ModuleConfig",
    "ProductionPanelItem",
    "RectShape",
    "SectionWidthResult",
    "WardrobeSection",
    "build_cad_groups",
    "calculate_group_layout",
    "calculate_section_widths",
    "classify",
    "get_carcass_bounds",
    "get_center_posts",
    "get_shelf_bounds",
    "get_shelves",
    "hit_test_shapes",
    "parse_shelf_id",
]
