"""Production panel items and CAD group aggregates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class ProductionPanelType(str, Enum):
    """Kinds of cut panels emitted for production."""

    SHUTTER = "SHUTTER"
    LOFT = "LOFT"


@dataclass(frozen=True)
class ProductionPanelItem:
    """One physical panel to be cut.

    ``row`` and ``col`` are 1-based positions within the unit's grid.
    Loft panels only use ``col``; they sit in a single row above the
    shutters.
    """

    id: str
    room_index: int
    room_name: str
    unit_index: int
    unit_id: str
    unit_type: str
    unit_label: str
    panel_type: ProductionPanelType
    panel_label: str
    row: int
    col: int
    width_mm: float
    height_mm: float
    laminate_code: str | None = None
    grain_direction: bool = False


@dataclass(frozen=True)
class PanelOverride:
    """Manual width/height correction for one panel."""

    width: float | None = None
    height: float | None = None


PanelOverrides = Mapping[str, PanelOverride]


@dataclass(frozen=True)
class CadShutter:
    """A shutter within a CAD group."""

    row: int
    col: int
    width_mm: float
    height_mm: float
    label: str
    id: str


@dataclass(frozen=True)
class CadLoftPanel:
    """A loft panel within a CAD group."""

    col: int
    width_mm: float
    height_mm: float
    label: str
    id: str


@dataclass(frozen=True)
class CadGroup:
    """All production panels of one unit with its cutting grid.

    Rebuilt from scratch by ``build_cad_groups`` whenever the panel list
    changes; never patched in place.
    """

    key: str
    room_index: int
    room_name: str
    room_code: str
    unit_label: str
    unit_code: str
    unit_number: int
    unit_id: str
    unit_index: int
    col_widths_mm: tuple[float, ...]
    row_heights_mm: tuple[float, ...]
    total_width_mm: float
    total_height_mm: float
    shutters: tuple[CadShutter, ...]
    loft_panels: tuple[CadLoftPanel, ...]
    loft_height_mm: float

    @property
    def is_loft_only(self) -> bool:
        return not self.shutters and bool(self.loft_panels)

    @property
    def prefix(self) -> str:
        """Label prefix shared by every panel of the unit, e.g. ``MB1``."""
        return f"{self.room_code}{self.unit_number}"


@dataclass(frozen=True)
class GroupLayout:
    """Grid of a CAD group after panel overrides are applied."""

    col_widths_mm: tuple[float, ...]
    row_heights_mm: tuple[float, ...]
    loft_height_mm: float
    total_width_mm: float
    total_height_mm: float
    is_loft_only: bool


@dataclass(frozen=True)
class ProductionStats:
    """Panel counts for the production summary."""

    total_panels: int
    shutter_count: int
    loft_count: int
