"""Output formatters for section layouts, drag bounds and CAD groups."""

from __future__ import annotations

import csv
import io
import json
from dataclasses import asdict
from typing import Sequence

from wardrobes.domain.section_resolver import SectionWidthResult
from wardrobes.domain.services.group_layout import (
    DEFAULT_GAP_MM,
    calculate_group_layout,
    calculate_overall_size,
    format_mm,
    get_overridden_dimensions,
)
from wardrobes.domain.value_objects import (
    CadGroup,
    CarcassBounds,
    PanelOverrides,
    ShelfBounds,
)

__all__ = [
    "BoundsJsonExporter",
    "CadGroupFormatter",
    "SectionLayoutFormatter",
]


class SectionLayoutFormatter:
    """Formats a resolved carcass section layout for display."""

    def format(self, result: SectionWidthResult) -> str:
        lines = [
            "SECTION LAYOUT",
            "=" * 40,
            f"Inner width: {format_mm(result.inner_width, 1)} mm",
            f"Sections:    {result.section_count}",
            "-" * 40,
            f"{'Section':<10} {'Width (mm)':<12} {'Post at (mm)'}",
        ]

        for index, width in enumerate(result.section_widths):
            post = (
                format_mm(result.post_positions[index], 1)
                if index < len(result.post_positions)
                else ""
            )
            lines.append(f"{index + 1:<10} {format_mm(width, 1):<12} {post}")

        return "\n".join(lines)


class BoundsJsonExporter:
    """Exports drag bounds as JSON."""

    def export(self, bounds: ShelfBounds | CarcassBounds | None) -> str:
        if bounds is None:
            return json.dumps({"applicable": False}, indent=2)
        return json.dumps({"applicable": True, **asdict(bounds)}, indent=2)


class CadGroupFormatter:
    """Formats CAD groups as a production table or CSV.

    Panel dimensions are shown after overrides. Values are rounded to the
    production step given at construction.
    """

    def __init__(self, rounding_mm: float = 1) -> None:
        """Initialize formatter.

        Args:
            rounding_mm: Display rounding step; sub-millimetre steps show
                decimals.
        """
        self._rounding_mm = rounding_mm

    def _mm(self, value: float) -> str:
        return format_mm(value, self._rounding_mm)

    def format(
        self,
        groups: Sequence[CadGroup],
        overrides: PanelOverrides | None = None,
        gap_mm: float = DEFAULT_GAP_MM,
    ) -> str:
        """Format every unit as a labelled panel table with its grid."""
        if not groups:
            return "No production panels."

        overrides = overrides or {}
        lines = [
            "PRODUCTION PANELS",
            "=" * 60,
        ]

        for group in groups:
            lines.append("")
            lines.extend(self._format_group(group, overrides, gap_mm))

        return "\n".join(lines)

    def _format_group(
        self,
        group: CadGroup,
        overrides: PanelOverrides,
        gap_mm: float,
    ) -> list[str]:
        layout = calculate_group_layout(group, gap_mm, overrides)
        overall_width, overall_height = calculate_overall_size(layout, gap_mm)

        lines = [
            f"{group.prefix}  {group.room_name} / {group.unit_label} ({group.unit_code})",
            "-" * 60,
            f"{'Label':<12} {'Type':<8} {'Row':<4} {'Col':<4} {'Width':<8} {'Height'}",
        ]

        for shutter in group.shutters:
            width, height = get_overridden_dimensions(
                shutter.id, shutter.width_mm, shutter.height_mm, overrides
            )
            lines.append(
                f"{shutter.label:<12} {'SHUTTER':<8} {shutter.row:<4} {shutter.col:<4} "
                f"{self._mm(width):<8} {self._mm(height)}"
            )

        for panel in group.loft_panels:
            width, height = get_overridden_dimensions(
                panel.id, panel.width_mm, panel.height_mm, overrides
            )
            lines.append(
                f"{panel.label:<12} {'LOFT':<8} {'':<4} {panel.col:<4} "
                f"{self._mm(width):<8} {self._mm(height)}"
            )

        lines.append("-" * 60)
        lines.append(
            "Columns: " + " + ".join(self._mm(w) for w in layout.col_widths_mm)
        )
        if layout.row_heights_mm:
            lines.append(
                "Rows:    " + " + ".join(self._mm(h) for h in layout.row_heights_mm)
            )
        if layout.loft_height_mm > 0:
            lines.append(f"Loft:    {self._mm(layout.loft_height_mm)}")
        lines.append(
            f"Overall: {self._mm(overall_width)} x {self._mm(overall_height)} mm "
            f"(gap {self._mm(gap_mm)} mm)"
        )
        return lines

    def format_csv(
        self,
        groups: Sequence[CadGroup],
        overrides: PanelOverrides | None = None,
    ) -> str:
        """Format every panel as one CSV row."""
        overrides = overrides or {}
        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(
            ["Room", "Unit", "Label", "Type", "Row", "Col", "Width (mm)", "Height (mm)"]
        )

        for group in groups:
            for shutter in group.shutters:
                width, height = get_overridden_dimensions(
                    shutter.id, shutter.width_mm, shutter.height_mm, overrides
                )
                writer.writerow(
                    [
                        group.room_name,
                        group.prefix,
                        shutter.label,
                        "SHUTTER",
                        shutter.row,
                        shutter.col,
                        self._mm(width),
                        self._mm(height),
                    ]
                )
            for panel in group.loft_panels:
                width, height = get_overridden_dimensions(
                    panel.id, panel.width_mm, panel.height_mm, overrides
                )
                writer.writerow(
                    [
                        group.room_name,
                        group.prefix,
                        panel.label,
                        "LOFT",
                        "",
                        panel.col,
                        self._mm(width),
                        self._mm(height),
                    ]
                )

        return output.getvalue()
