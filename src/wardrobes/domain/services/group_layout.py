"""Group layout and gap redistribution for CAD groups.

Panel overrides are the user's manual corrections; wherever a dimension is
read, an override wins over the computed value. The redistribution
functions never modify the group or the override map they are given, they
return the new override entries for the caller to merge.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import replace
from typing import Iterable, Literal

from ..value_objects import (
    CadGroup,
    GroupLayout,
    PanelOverride,
    PanelOverrides,
    ProductionPanelItem,
    ProductionPanelType,
    ProductionStats,
)
from .cad_groups import column_widths, row_heights
from .geometry import round_half_up

__all__ = [
    "DEFAULT_GAP_MM",
    "GAP_OPTIONS",
    "apply_production_sizing",
    "calculate_gap_adjusted_dimensions",
    "calculate_group_layout",
    "calculate_overall_dimension_change",
    "calculate_overall_size",
    "calculate_production_stats",
    "format_mm",
    "get_filtered_production_items",
    "get_overridden_dimensions",
]

logger = logging.getLogger(__name__)

# Default gap between panels for new units (mm)
DEFAULT_GAP_MM = 2

# Gap choices offered on the production page (mm)
GAP_OPTIONS: tuple[int, ...] = (0, 1, 2, 3, 4, 5, 6, 8, 10)

_TRAILING_ZEROS_RE = re.compile(r"\.0+$")


def get_overridden_dimensions(
    panel_id: str,
    width_mm: float,
    height_mm: float,
    overrides: PanelOverrides,
) -> tuple[float, float]:
    """Return ``(width, height)`` with any override for the panel applied."""
    override = overrides.get(panel_id)
    if override is None:
        return width_mm, height_mm
    return (
        override.width if override.width is not None else width_mm,
        override.height if override.height is not None else height_mm,
    )


def _loft_height(group: CadGroup, overrides: PanelOverrides) -> float:
    heights = [
        get_overridden_dimensions(p.id, p.width_mm, p.height_mm, overrides)[1]
        for p in group.loft_panels
    ]
    return max(heights) if heights else 0


def _shutter_grid(
    group: CadGroup,
    overrides: PanelOverrides,
) -> tuple[tuple[float, ...], tuple[float, ...]]:
    def dims(shutter):
        return get_overridden_dimensions(
            shutter.id, shutter.width_mm, shutter.height_mm, overrides
        )

    cols = column_widths(group.shutters, lambda s: dims(s)[0])
    rows = row_heights(group.shutters, lambda s: dims(s)[1])
    return cols, rows


def calculate_group_layout(
    group: CadGroup,
    gap_mm: float,
    overrides: PanelOverrides,
) -> GroupLayout:
    """Recompute a group's grid with overrides applied.

    Same aggregation as ``build_cad_groups``, reading each panel's
    overridden dimensions. The loft height is the tallest loft panel.
    ``gap_mm`` does not change the grid itself; totals are panel sizes only.
    """
    is_loft_only = not group.shutters and bool(group.loft_panels)

    if is_loft_only:
        cols = column_widths(
            group.loft_panels,
            lambda p: get_overridden_dimensions(p.id, p.width_mm, p.height_mm, overrides)[0],
        )
        rows: tuple[float, ...] = ()
    else:
        cols, rows = _shutter_grid(group, overrides)

    loft_height = _loft_height(group, overrides)

    return GroupLayout(
        col_widths_mm=cols,
        row_heights_mm=rows,
        loft_height_mm=loft_height,
        total_width_mm=sum(cols),
        total_height_mm=sum(rows) + loft_height,
        is_loft_only=is_loft_only,
    )


def calculate_overall_size(layout: GroupLayout, gap_mm: float) -> tuple[float, float]:
    """Outer ``(width, height)`` of a unit: panels plus the gaps between them.

    The loft sits one gap above the shutter grid. This is the total that
    ``calculate_overall_dimension_change`` takes as its target.
    """
    cols = len(layout.col_widths_mm)
    rows = len(layout.row_heights_mm)
    width = layout.total_width_mm + max(0, cols - 1) * gap_mm
    height = layout.total_height_mm + max(0, rows - 1) * gap_mm
    if layout.loft_height_mm > 0 and rows > 0:
        height += gap_mm
    return width, height


def calculate_gap_adjusted_dimensions(
    group: CadGroup,
    old_gap: float,
    new_gap: float,
    overrides: PanelOverrides,
) -> dict[str, PanelOverride]:
    """Resize shutters so the unit keeps its footprint under a new gap.

    The previous extent (panels plus ``(n - 1)`` old gaps) is held constant;
    after subtracting the new gaps the remainder is split evenly over all
    columns, and independently over all rows. Every shutter in the unit gets
    the same new width and height, even if the columns differed before.

    Returns:
        One override per shutter.
    """
    cols, rows = _shutter_grid(group, overrides)
    num_cols = len(cols)
    num_rows = len(rows)

    total_width = sum(cols) + (num_cols - 1) * old_gap
    new_col_width = round_half_up((total_width - (num_cols - 1) * new_gap) / num_cols)

    total_height = sum(rows) + (num_rows - 1) * old_gap
    new_row_height = round_half_up((total_height - (num_rows - 1) * new_gap) / num_rows)

    logger.debug(
        f"Gap {old_gap} -> {new_gap} for {group.key}: "
        f"{num_cols}x{new_col_width} by {num_rows}x{new_row_height}"
    )

    return {
        shutter.id: PanelOverride(width=new_col_width, height=new_row_height)
        for shutter in group.shutters
    }


def calculate_overall_dimension_change(
    group: CadGroup,
    field: Literal["width", "height"],
    new_value: float,
    gap_mm: float,
    overrides: PanelOverrides,
) -> dict[str, PanelOverride]:
    """Resize panels to match a user-entered unit width or height.

    Width: ``(new_value - gaps) / columns`` becomes the width of every
    shutter and loft panel; heights are kept.

    Height: the loft height, plus one gap when there is a loft, is taken off
    first since the loft sits above the shutter grid. The rest is split over
    the rows and given to every shutter; loft panels keep their size.

    Returns:
        One override per shutter and per loft panel.

    Example:
        >>> # two columns, 1200 wide, 2mm gap
        >>> calculate_overall_dimension_change(group, "width", 1200, 2, {})
        {'s1': PanelOverride(width=599, height=2000), ...}
    """
    num_cols = max([1, *(s.col for s in group.shutters)])
    num_rows = max([1, *(s.row for s in group.shutters)])
    new_overrides: dict[str, PanelOverride] = {}

    if field == "width":
        new_col_width = round_half_up((new_value - (num_cols - 1) * gap_mm) / num_cols)
        for panel in (*group.shutters, *group.loft_panels):
            _, height = get_overridden_dimensions(
                panel.id, panel.width_mm, panel.height_mm, overrides
            )
            new_overrides[panel.id] = PanelOverride(width=new_col_width, height=height)
        return new_overrides

    loft_height = _loft_height(group, overrides)
    loft_gap = gap_mm if loft_height > 0 else 0
    available = new_value - (num_rows - 1) * gap_mm - loft_height - loft_gap
    new_row_height = round_half_up(available / num_rows)

    for shutter in group.shutters:
        width, _ = get_overridden_dimensions(
            shutter.id, shutter.width_mm, shutter.height_mm, overrides
        )
        new_overrides[shutter.id] = PanelOverride(width=width, height=new_row_height)

    for panel in group.loft_panels:
        width, height = get_overridden_dimensions(
            panel.id, panel.width_mm, panel.height_mm, overrides
        )
        new_overrides[panel.id] = PanelOverride(width=width, height=height)

    return new_overrides


def calculate_production_stats(items: Iterable[ProductionPanelItem]) -> ProductionStats:
    """Count panels by type."""
    items = list(items)
    return ProductionStats(
        total_panels=len(items),
        shutter_count=sum(1 for i in items if i.panel_type == ProductionPanelType.SHUTTER),
        loft_count=sum(1 for i in items if i.panel_type == ProductionPanelType.LOFT),
    )


def get_filtered_production_items(
    items: Iterable[ProductionPanelItem],
    deleted_panels: Iterable[str],
    overrides: PanelOverrides,
) -> list[ProductionPanelItem]:
    """Drop deleted panels and bake overrides into the remaining items."""
    deleted = set(deleted_panels)
    result: list[ProductionPanelItem] = []
    for item in items:
        if item.id in deleted:
            continue
        if item.id in overrides:
            width, height = get_overridden_dimensions(
                item.id, item.width_mm, item.height_mm, overrides
            )
            item = replace(item, width_mm=width, height_mm=height)
        result.append(item)
    return result


def apply_production_sizing(
    value_mm: float,
    reduction_mm: float,
    rounding_mm: float,
) -> float:
    """Apply the cutting reduction and round to the production step.

    The result is never below 1mm. A non-positive step rounds to whole
    millimetres; a non-finite value yields 0.

    Example:
        >>> apply_production_sizing(1005, 3, 10)
        1000
    """
    if not math.isfinite(value_mm):
        return 0
    if not reduction_mm or math.isnan(reduction_mm):
        reduction_mm = 0
    reduced = max(1, value_mm - max(0, reduction_mm))

    if not rounding_mm or not rounding_mm > 0 or math.isinf(rounding_mm):
        return round_half_up(reduced)
    return round_half_up(reduced / rounding_mm) * rounding_mm


def format_mm(value_mm: float, rounding_mm: float) -> str:
    """Format a millimetre value for display.

    Decimals are only shown for sub-millimetre rounding steps, as many as
    the step has (at most 3), and trailing ``.0`` is dropped.

    Example:
        >>> format_mm(100.5, 0.5)
        '100.5'
        >>> format_mm(100.0, 1)
        '100'
    """
    step = rounding_mm if rounding_mm and rounding_mm > 0 else 0
    decimals = 0
    if 0 < step < 1:
        _, _, fraction = repr(float(step)).partition(".")
        decimals = min(3, len(fraction) or 1)

    if decimals > 0:
        text = f"{value_mm:.{decimals}f}"
    else:
        text = str(round_half_up(value_mm))
    return _TRAILING_ZEROS_RE.sub("", text)
