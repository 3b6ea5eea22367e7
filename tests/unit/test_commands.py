"""Unit tests for application commands."""

from wardrobes.application import BuildProductionCommand, ProductionOutput
from wardrobes.domain.value_objects import PanelOverride, ProductionPanelType


class TestBuildProductionCommand:
    """Tests for BuildProductionCommand."""

    def test_groups_and_stats(self, panel_item) -> None:
        """Items are grouped per unit and counted."""
        items = [
            panel_item("s1", col=1),
            panel_item("s2", col=2),
            panel_item("k1", room_index=1, room_name="Kitchen", unit_id="k"),
        ]
        result = BuildProductionCommand().execute(items)

        assert isinstance(result, ProductionOutput)
        assert [g.prefix for g in result.groups] == ["MB1", "K1"]
        assert result.stats.total_panels == 3
        assert result.gap_mm == 2
        assert not result.is_empty

    def test_deleted_panels_and_overrides(self, panel_item) -> None:
        """Deleted panels are dropped and overrides are applied."""
        items = [
            panel_item("s1", col=1),
            panel_item("s2", col=2),
            panel_item("l1", panel_type=ProductionPanelType.LOFT, height_mm=400),
        ]
        overrides = {"s1": PanelOverride(width=480)}

        result = BuildProductionCommand().execute(items, overrides, ["l1"], gap_mm=4)

        [group] = result.groups
        assert group.col_widths_mm == (480, 500)
        assert group.loft_panels == ()
        assert result.stats.loft_count == 0
        assert result.overrides == overrides
        assert result.gap_mm == 4

    def test_everything_deleted(self, panel_item) -> None:
        """Deleting every panel gives an empty output."""
        result = BuildProductionCommand().execute([panel_item("s1")], deleted_panels=["s1"])
        assert result.is_empty
        assert result.stats.total_panels == 0
