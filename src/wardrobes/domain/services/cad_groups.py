"""CAD group builder.

Regroups the flat production panel list into one group per physical unit,
labels every panel with a room/unit code and derives the unit's cutting
grid (column widths and row heights).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence, TypeVar

from ..value_objects import (
    CadGroup,
    CadLoftPanel,
    CadShutter,
    ProductionPanelItem,
    ProductionPanelType,
)

__all__ = [
    "DEFAULT_UNIT_CODE",
    "ROOM_CODES",
    "UNIT_CODES",
    "build_cad_groups",
    "column_widths",
    "get_room_code",
    "get_unit_code",
    "row_heights",
]

# Ordered: substring matching walks the table top to bottom, so "master
# bedroom" must precede "bedroom".
ROOM_CODES: tuple[tuple[str, str], ...] = (
    ("master bedroom", "MB"),
    ("master", "MB"),
    ("bedroom", "B"),
    ("kids bedroom", "KB"),
    ("kids", "KB"),
    ("guest bedroom", "GB"),
    ("guest", "GB"),
    ("living", "LR"),
    ("living room", "LR"),
    ("kitchen", "K"),
    ("dining", "DN"),
    ("dining room", "DN"),
    ("study", "ST"),
    ("study room", "ST"),
    ("pooja", "PJ"),
    ("pooja room", "PJ"),
    ("utility", "UT"),
    ("balcony", "BL"),
    ("other", "OT"),
    ("quotation", "Q"),
)

UNIT_CODES: tuple[tuple[str, str], ...] = (
    ("wardrobe", "W"),
    ("kitchen", "K"),
    ("tv_unit", "TV"),
    ("dresser", "D"),
    ("other", "U"),
)

DEFAULT_UNIT_CODE = "U"

P = TypeVar("P")


def _lookup_code(name: str, table: Sequence[tuple[str, str]]) -> str | None:
    """Exact match first, then the first table key contained in ``name``."""
    key = name.lower().strip()
    for candidate, code in table:
        if key == candidate:
            return code
    for candidate, code in table:
        if candidate in key:
            return code
    return None


def get_room_code(room_name: str) -> str:
    """Short code for a room name, e.g. ``"Master Bedroom 2"`` -> ``"MB"``.

    Unknown names fall back to their first two characters, uppercased.
    """
    code = _lookup_code(room_name, ROOM_CODES)
    if code is not None:
        return code
    return room_name[:2].upper()


def get_unit_code(unit_type: str) -> str:
    """Short code for a unit type, ``"U"`` when unknown."""
    return _lookup_code(unit_type, UNIT_CODES) or DEFAULT_UNIT_CODE


def _grid_sizes(
    panels: Iterable[P],
    index_of: Callable[[P], int],
    size_of: Callable[[P], float],
) -> tuple[float, ...]:
    """Largest size per 1-based grid index; gaps in the index are 0."""
    sizes: dict[int, float] = {}
    for panel in panels:
        index = index_of(panel)
        size = size_of(panel)
        sizes[index] = max(sizes[index], size) if index in sizes else size

    count = max([1, *sizes])
    return tuple(sizes.get(i, 0) for i in range(1, count + 1))


def column_widths(
    panels: Iterable[P],
    width_of: Callable[[P], float],
) -> tuple[float, ...]:
    """Width of each grid column: the widest panel in it.

    Panels meant to line up can differ by a fraction of a millimetre; taking
    the maximum reconciles them into one column width.
    """
    return _grid_sizes(panels, lambda p: p.col, width_of)  # type: ignore[attr-defined]


def row_heights(
    panels: Iterable[P],
    height_of: Callable[[P], float],
) -> tuple[float, ...]:
    """Height of each grid row: the tallest panel in it."""
    return _grid_sizes(panels, lambda p: p.row, height_of)  # type: ignore[attr-defined]


@dataclass
class _GroupAccumulator:
    """Mutable state for one unit while the item list is scanned."""

    key: str
    unit_number: int
    item: ProductionPanelItem
    shutters: list[CadShutter] = field(default_factory=list)
    loft_panels: list[CadLoftPanel] = field(default_factory=list)
    loft_height_mm: float = 0

    def build(self) -> CadGroup:
        if not self.shutters and self.loft_panels:
            cols = column_widths(self.loft_panels, lambda p: p.width_mm)
            rows: tuple[float, ...] = ()
        else:
            cols = column_widths(self.shutters, lambda s: s.width_mm)
            rows = row_heights(self.shutters, lambda s: s.height_mm)

        item = self.item
        return CadGroup(
            key=self.key,
            room_index=item.room_index,
            room_name=item.room_name,
            room_code=get_room_code(item.room_name),
            unit_label=item.unit_label,
            unit_code=get_unit_code(item.unit_type),
            unit_number=self.unit_number,
            unit_id=item.unit_id,
            unit_index=item.unit_index,
            col_widths_mm=cols,
            row_heights_mm=rows,
            total_width_mm=sum(cols),
            total_height_mm=sum(rows) + self.loft_height_mm,
            shutters=tuple(self.shutters),
            loft_panels=tuple(self.loft_panels),
            loft_height_mm=self.loft_height_mm,
        )


def build_cad_groups(items: Iterable[ProductionPanelItem]) -> list[CadGroup]:
    """Group production panels by unit and label them.

    Groups are keyed by room index and unit id and come out in order of
    first appearance. Units are numbered per room in the order they are
    first seen, so reordering the input renumbers the units.

    Shutters are labelled ``{room}{unit}-S{n}`` and loft panels
    ``{room}{unit}-L{n}``, numbered in input order within the unit. A
    unit's loft height is that of its last loft panel.

    Args:
        items: Production panels in drawing order.

    Returns:
        One ``CadGroup`` per unit.

    Example:
        >>> groups = build_cad_groups(items)
        >>> [s.label for s in groups[0].shutters]
        ['MB1-S1', 'MB1-S2']
    """
    groups: dict[str, _GroupAccumulator] = {}
    units_per_room: dict[str, int] = {}

    for item in items:
        key = f"{item.room_index}:{item.unit_id}"
        room_code = get_room_code(item.room_name)

        group = groups.get(key)
        if group is None:
            room_key = f"{item.room_index}:{room_code}"
            unit_number = units_per_room.get(room_key, 0) + 1
            units_per_room[room_key] = unit_number
            group = _GroupAccumulator(key=key, unit_number=unit_number, item=item)
            groups[key] = group
        else:
            group.item = item

        prefix = f"{room_code}{group.unit_number}"

        if item.panel_type == ProductionPanelType.SHUTTER:
            group.shutters.append(
                CadShutter(
                    row=item.row,
                    col=item.col,
                    width_mm=item.width_mm,
                    height_mm=item.height_mm,
                    label=f"{prefix}-S{len(group.shutters) + 1}",
                    id=item.id,
                )
            )
        elif item.panel_type == ProductionPanelType.LOFT:
            group.loft_panels.append(
                CadLoftPanel(
                    col=item.col,
                    width_mm=item.width_mm,
                    height_mm=item.height_mm,
                    label=f"{prefix}-L{len(group.loft_panels) + 1}",
                    id=item.id,
                )
            )
            group.loft_height_mm = item.height_mm

    return [group.build() for group in groups.values()]
