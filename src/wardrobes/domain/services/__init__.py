"""Domain services for the wardrobe layout engine.

This package provides the pure computations behind the design canvas and
the production page:
- Geometry primitives (snapping, intersection, alignment guides)
- Drag bounds for shelves and center posts
- Hit testing and click target detection
- Configuration edits produced by drags and context menus
- CAD group building and gap redistribution
"""

from .bounds import (
    build_section_boundaries,
    get_carcass_bounds,
    get_carcass_panels,
    get_shelf_bounds,
)
from .cad_groups import (
    build_cad_groups,
    get_room_code,
    get_unit_code,
)
from .config_updates import (
    apply_post_drag,
    apply_shelf_drag,
    disable_panel,
    remove_center_post,
    remove_shelf,
    set_posts_below,
    set_shelf_count,
)
from .geometry import (
    calculate_measurements,
    distance,
    find_alignment_guides,
    get_combined_bounds,
    get_shape_bounds,
    point_to_segment_distance,
    round_half_up,
    segment_intersection,
    snap_to_grid,
)
from .group_layout import (
    DEFAULT_GAP_MM,
    GAP_OPTIONS,
    apply_production_sizing,
    calculate_gap_adjusted_dimensions,
    calculate_group_layout,
    calculate_overall_dimension_change,
    calculate_overall_size,
    calculate_production_stats,
    format_mm,
    get_filtered_production_items,
    get_overridden_dimensions,
)
from .hit_testing import (
    detect_edge,
    get_click_target,
    hit_test_shapes,
)

__all__ = [
    # Geometry
    "calculate_measurements",
    "distance",
    "find_alignment_guides",
    "get_combined_bounds",
    "get_shape_bounds",
    "point_to_segment_distance",
    "round_half_up",
    "segment_intersection",
    "snap_to_grid",
    # Bounds
    "build_section_boundaries",
    "get_carcass_bounds",
    "get_carcass_panels",
    "get_shelf_bounds",
    # Hit testing
    "detect_edge",
    "get_click_target",
    "hit_test_shapes",
    # Config edits
    "apply_post_drag",
    "apply_shelf_drag",
    "disable_panel",
    "remove_center_post",
    "remove_shelf",
    "set_posts_below",
    "set_shelf_count",
    # Production
    "DEFAULT_GAP_MM",
    "GAP_OPTIONS",
    "apply_production_sizing",
    "build_cad_groups",
    "calculate_gap_adjusted_dimensions",
    "calculate_group_layout",
    "calculate_overall_dimension_change",
    "calculate_overall_size",
    "calculate_production_stats",
    "format_mm",
    "get_filtered_production_items",
    "get_overridden_dimensions",
    "get_room_code",
    "get_unit_code",
]
