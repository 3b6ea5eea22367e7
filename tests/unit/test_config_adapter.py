"""Unit tests for schema to domain adapters."""

from wardrobes.application.config import (
    config_to_module_config,
    config_to_overrides,
    config_to_production_items,
    config_to_shapes,
    load_canvas_snapshot_from_dict,
    load_module_config_from_dict,
    load_production_input_from_dict,
)
from wardrobes.domain.value_objects import (
    LineShape,
    PanelOverride,
    PanelRef,
    PanelsEnabled,
    ProductionPanelType,
    RectShape,
    SectionType,
    WardrobeSection,
)


class TestModuleConfigAdapter:
    """Tests for config_to_module_config."""

    def test_sections_become_tuples(self) -> None:
        """Section lists are converted to immutable tuples."""
        schema = load_module_config_from_dict(
            {
                "center_post_count": 1,
                "center_post_positions": [600],
                "sections": [
                    {"type": "short_hang", "shelf_count": 2, "shelf_positions": [60, 80]},
                    {},
                ],
            }
        )
        config = config_to_module_config(schema)

        assert config.center_post_positions == (600,)
        assert config.sections == (
            WardrobeSection(
                type=SectionType.SHORT_HANG, shelf_count=2, shelf_positions=(60, 80)
            ),
            WardrobeSection(),
        )

    def test_panels_enabled(self) -> None:
        """Panel toggles carry over to the domain config."""
        schema = load_module_config_from_dict({"panels_enabled": {"back": False}})
        config = config_to_module_config(schema)
        assert config.panels_enabled == PanelsEnabled(back=False)

    def test_omitted_panels_and_thickness(self) -> None:
        """Omitted panels and thickness stay unset."""
        config = config_to_module_config(load_module_config_from_dict({}))
        assert config.panels_enabled is None
        assert config.effective_panels == PanelsEnabled()
        assert config.thickness == 18


class TestShapesAdapter:
    """Tests for config_to_shapes."""

    def test_shapes_keep_order_and_ref(self) -> None:
        """Shapes keep canvas order and decode their ids."""
        snapshot = load_canvas_snapshot_from_dict(
            {
                "module": {},
                "shapes": [
                    {"type": "line", "id": "l1", "x1": 0, "y1": 0, "x2": 10, "y2": 0},
                    {"type": "rect", "id": "MOD-TOP", "x": 0, "y": 0, "w": 1200, "h": 18},
                ],
            }
        )
        shapes = config_to_shapes(snapshot)

        assert shapes[0] == LineShape("l1", 0, 0, 10, 0)
        assert shapes[1] == RectShape("MOD-TOP", 0, 0, 1200, 18)
        assert isinstance(shapes[1].ref, PanelRef)


class TestProductionAdapter:
    """Tests for production item and override adapters."""

    def test_items(self) -> None:
        """Production items convert to domain panel items."""
        production = load_production_input_from_dict(
            {
                "items": [
                    {
                        "id": "l1",
                        "unit_id": "u1",
                        "room_name": "Kids Room",
                        "panel_type": "LOFT",
                        "col": 2,
                        "width_mm": 600,
                        "height_mm": 400,
                    }
                ]
            }
        )
        [item] = config_to_production_items(production)

        assert item.panel_type == ProductionPanelType.LOFT
        assert item.room_name == "Kids Room"
        assert item.col == 2
        assert item.laminate_code is None

    def test_overrides(self) -> None:
        """Overrides convert to PanelOverride values."""
        production = load_production_input_from_dict({"overrides": {"s1": {"height": 1900}}})
        assert config_to_overrides(production) == {"s1": PanelOverride(height=1900)}
