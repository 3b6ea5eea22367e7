"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from wardrobes.domain.value_objects import CadGroup, PanelOverride, ProductionStats


@dataclass
class ProductionOutput:
    """Output DTO for the production view.

    Attributes:
        groups: One CAD group per unit, in drawing order.
        overrides: Panel overrides still to be applied for display.
        gap_mm: Gap between panels in mm.
        stats: Panel counts after deleted panels were removed.
    """

    groups: list[CadGroup]
    stats: ProductionStats
    gap_mm: float
    overrides: dict[str, PanelOverride] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.groups
