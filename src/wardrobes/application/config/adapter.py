"""Adapters from validated schemas to domain objects.

The schemas mirror the JSON documents; these functions turn them into the
frozen domain value objects the layout engine works on.
"""

from wardrobes.application.config.schemas import (
    CanvasSnapshotSchema,
    LineShapeSchema,
    ModuleConfigSchema,
    PanelOverrideSchema,
    ProductionInputSchema,
    RectShapeSchema,
    WardrobeSectionSchema,
)
from wardrobes.domain.value_objects import (
    LineShape,
    ModuleConfig,
    PanelOverride,
    PanelsEnabled,
    ProductionPanelItem,
    RectShape,
    Shape,
    WardrobeSection,
)

__all__ = [
    "config_to_module_config",
    "config_to_overrides",
    "config_to_production_items",
    "config_to_shapes",
]


def _section_to_domain(section: WardrobeSectionSchema) -> WardrobeSection:
    positions = section.shelf_positions
    return WardrobeSection(
        type=section.type,
        width_mm=section.width_mm,
        shelf_count=section.shelf_count,
        drawer_count=section.drawer_count,
        rod_height_pct=section.rod_height_pct,
        shelf_positions=tuple(positions) if positions is not None else None,
        posts_below=section.posts_below,
    )


def config_to_module_config(config: ModuleConfigSchema) -> ModuleConfig:
    """Convert a module configuration schema to a domain ModuleConfig."""
    panels = config.panels_enabled
    positions = config.center_post_positions
    return ModuleConfig(
        unit_type=config.unit_type,
        name=config.name,
        width_mm=config.width_mm,
        height_mm=config.height_mm,
        depth_mm=config.depth_mm,
        carcass_thickness_mm=config.carcass_thickness_mm,
        center_post_count=config.center_post_count,
        center_post_positions=tuple(positions) if positions is not None else None,
        panels_enabled=PanelsEnabled(**panels.model_dump()) if panels else None,
        sections=tuple(_section_to_domain(s) for s in config.sections),
    )


def config_to_shapes(snapshot: CanvasSnapshotSchema) -> list[Shape]:
    """Convert snapshot shapes to domain shapes, keeping drawing order."""
    shapes: list[Shape] = []
    for shape in snapshot.shapes:
        if isinstance(shape, RectShapeSchema):
            shapes.append(RectShape(id=shape.id, x=shape.x, y=shape.y, w=shape.w, h=shape.h))
        elif isinstance(shape, LineShapeSchema):
            shapes.append(
                LineShape(id=shape.id, x1=shape.x1, y1=shape.y1, x2=shape.x2, y2=shape.y2)
            )
    return shapes


def config_to_production_items(production: ProductionInputSchema) -> list[ProductionPanelItem]:
    """Convert production input items to domain panel items."""
    return [ProductionPanelItem(**item.model_dump()) for item in production.items]


def _override_to_domain(override: PanelOverrideSchema) -> PanelOverride:
    return PanelOverride(width=override.width, height=override.height)


def config_to_overrides(production: ProductionInputSchema) -> dict[str, PanelOverride]:
    """Convert production input overrides to domain panel overrides."""
    return {
        panel_id: _override_to_domain(override)
        for panel_id, override in production.overrides.items()
    }
