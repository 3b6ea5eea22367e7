"""Pytest configuration and shared fixtures for wardrobe tests."""

from __future__ import annotations

from typing import Callable, Sequence

import pytest

from wardrobes.domain.value_objects import (
    ModuleConfig,
    ProductionPanelItem,
    ProductionPanelType,
    RectShape,
    Shape,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI")


# =============================================================================
# Carcass canvas fixtures
# =============================================================================

# 1200 x 2100 carcass drawn at the origin with 18mm panels
CARCASS_WIDTH = 1200.0
CARCASS_HEIGHT = 2100.0
THICKNESS = 18.0


@pytest.fixture
def carcass_config() -> ModuleConfig:
    """A plain wardrobe carcass with no posts and no explicit sections."""
    return ModuleConfig(
        width_mm=CARCASS_WIDTH,
        height_mm=CARCASS_HEIGHT,
        carcass_thickness_mm=THICKNESS,
    )


@pytest.fixture
def build_carcass() -> Callable[..., list[Shape]]:
    """Factory for carcass shapes with center posts at the given x positions.

    The back panel is drawn first, followed by the four structural panels,
    the posts and any extra shapes.
    """

    def _build(
        post_xs: Sequence[float] = (),
        extra: Sequence[Shape] = (),
        omit: Sequence[str] = (),
    ) -> list[Shape]:
        shapes: list[Shape] = [
            RectShape("MOD-BACK", 0, 0, CARCASS_WIDTH, CARCASS_HEIGHT),
            RectShape("MOD-TOP", 0, 0, CARCASS_WIDTH, THICKNESS),
            RectShape("MOD-BOTTOM", 0, CARCASS_HEIGHT - THICKNESS, CARCASS_WIDTH, THICKNESS),
            RectShape("MOD-LEFT", 0, 0, THICKNESS, CARCASS_HEIGHT),
            RectShape("MOD-RIGHT", CARCASS_WIDTH - THICKNESS, 0, THICKNESS, CARCASS_HEIGHT),
        ]
        shapes = [s for s in shapes if s.id not in omit]
        for index, x in enumerate(post_xs):
            shapes.append(
                RectShape(
                    f"MOD-POST-{index}",
                    x,
                    THICKNESS,
                    THICKNESS,
                    CARCASS_HEIGHT - 2 * THICKNESS,
                )
            )
        shapes.extend(extra)
        return shapes

    return _build


# =============================================================================
# Production fixtures
# =============================================================================


@pytest.fixture
def panel_item() -> Callable[..., ProductionPanelItem]:
    """Factory for production panel items with master bedroom defaults."""

    def _item(
        panel_id: str,
        *,
        room_index: int = 0,
        room_name: str = "Master Bedroom",
        unit_id: str = "u1",
        unit_index: int = 0,
        unit_type: str = "wardrobe",
        unit_label: str = "Wardrobe",
        panel_type: ProductionPanelType = ProductionPanelType.SHUTTER,
        row: int = 1,
        col: int = 1,
        width_mm: float = 500,
        height_mm: float = 2000,
    ) -> ProductionPanelItem:
        return ProductionPanelItem(
            id=panel_id,
            room_index=room_index,
            room_name=room_name,
            unit_index=unit_index,
            unit_id=unit_id,
            unit_type=unit_type,
            unit_label=unit_label,
            panel_type=panel_type,
            panel_label=panel_id,
            row=row,
            col=col,
            width_mm=width_mm,
            height_mm=height_mm,
        )

    return _item
