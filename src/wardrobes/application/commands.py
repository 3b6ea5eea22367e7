"""Application commands (use cases) for the production view."""

from __future__ import annotations

import logging
from typing import Iterable

from wardrobes.domain.services import (
    DEFAULT_GAP_MM,
    build_cad_groups,
    calculate_production_stats,
    get_filtered_production_items,
)
from wardrobes.domain.value_objects import PanelOverrides, ProductionPanelItem

from .dtos import ProductionOutput

logger = logging.getLogger(__name__)


class BuildProductionCommand:
    """Command to turn extracted production panels into CAD groups.

    Deleted panels are dropped and overrides are baked into the remaining
    panels before grouping, so the groups and their grids reflect the
    user's corrections.
    """

    def execute(
        self,
        items: Iterable[ProductionPanelItem],
        overrides: PanelOverrides | None = None,
        deleted_panels: Iterable[str] = (),
        gap_mm: float = DEFAULT_GAP_MM,
    ) -> ProductionOutput:
        """Execute the production build.

        Args:
            items: Production panels in drawing order.
            overrides: Manual corrections keyed by panel id.
            deleted_panels: Ids of panels removed from production.
            gap_mm: Gap between panels in mm.

        Returns:
            ProductionOutput with the CAD groups and panel counts.
        """
        overrides = dict(overrides or {})
        filtered = get_filtered_production_items(items, deleted_panels, overrides)
        groups = build_cad_groups(filtered)

        logger.debug(f"Built {len(groups)} CAD groups from {len(filtered)} panels")

        return ProductionOutput(
            groups=groups,
            stats=calculate_production_stats(filtered),
            gap_mm=gap_mm,
            overrides=overrides,
        )
