"""Unit tests for the CAD group builder."""

import pytest

from wardrobes.domain.services.cad_groups import (
    build_cad_groups,
    column_widths,
    get_room_code,
    get_unit_code,
    row_heights,
)
from wardrobes.domain.value_objects import CadShutter, ProductionPanelType

LOFT = ProductionPanelType.LOFT


class TestCodes:
    """Tests for room and unit code lookup."""

    @pytest.mark.parametrize(
        ("room_name", "code"),
        [
            ("Master Bedroom", "MB"),
            ("master bedroom 2", "MB"),
            ("Bedroom", "B"),
            ("Kids Bedroom", "KB"),
            ("Kids Room", "KB"),
            ("Guest Bedroom", "GB"),
            ("Living Room", "LR"),
            ("  Kitchen  ", "K"),
            ("Pooja", "PJ"),
        ],
    )
    def test_room_codes(self, room_name: str, code: str) -> None:
        """Known room names map to their codes."""
        assert get_room_code(room_name) == code

    def test_unknown_room_uses_first_two_letters(self) -> None:
        """Unknown rooms use their first two letters uppercased."""
        assert get_room_code("garage") == "GA"

    def test_unit_codes(self) -> None:
        """Known unit types map to their codes."""
        assert get_unit_code("wardrobe") == "W"
        assert get_unit_code("Wardrobe") == "W"
        assert get_unit_code("tv_unit") == "TV"
        assert get_unit_code("sliding wardrobe") == "W"

    def test_unknown_unit_type(self) -> None:
        """Unknown unit types map to U."""
        assert get_unit_code("shoe rack") == "U"


class TestGridSizes:
    """Tests for column and row aggregation."""

    def _shutter(self, row: int, col: int, width: float, height: float) -> CadShutter:
        return CadShutter(row=row, col=col, width_mm=width, height_mm=height, label="", id="")

    def test_widest_panel_per_column(self) -> None:
        """Columns take their widest panel and rows their tallest."""
        shutters = [self._shutter(1, 1, 499.8, 1000), self._shutter(2, 1, 500.2, 900)]
        assert column_widths(shutters, lambda s: s.width_mm) == (500.2,)
        assert row_heights(shutters, lambda s: s.height_mm) == (1000, 900)

    def test_missing_column_is_zero(self) -> None:
        """Columns without panels are zero wide."""
        shutters = [self._shutter(1, 1, 400, 1000), self._shutter(1, 3, 450, 1000)]
        assert column_widths(shutters, lambda s: s.width_mm) == (400, 0, 450)

    def test_empty_grid_has_one_empty_column(self) -> None:
        """An empty grid still reports one column."""
        assert column_widths([], lambda s: s.width_mm) == (0,)


class TestBuildCadGroups:
    """Tests for build_cad_groups."""

    def test_single_unit(self, panel_item) -> None:
        """One unit becomes one group with labelled panels."""
        items = [
            panel_item("s1", col=1),
            panel_item("s2", col=2),
            panel_item("l1", panel_type=LOFT, col=1, width_mm=1000, height_mm=400),
        ]
        [group] = build_cad_groups(items)

        assert group.room_code == "MB"
        assert group.unit_code == "W"
        assert group.prefix == "MB1"
        assert [s.label for s in group.shutters] == ["MB1-S1", "MB1-S2"]
        assert [p.label for p in group.loft_panels] == ["MB1-L1"]
        assert group.col_widths_mm == (500, 500)
        assert group.row_heights_mm == (2000,)
        assert group.total_width_mm == 1000
        assert group.total_height_mm == 2400
        assert group.loft_height_mm == 400
        assert not group.is_loft_only

    def test_groups_keep_first_appearance_order(self, panel_item) -> None:
        """Groups come out in the order units first appear."""
        items = [
            panel_item("a1", unit_id="u2"),
            panel_item("b1", unit_id="u1"),
            panel_item("a2", unit_id="u2", col=2),
        ]
        groups = build_cad_groups(items)
        assert [g.unit_id for g in groups] == ["u2", "u1"]
        assert [s.id for s in groups[0].shutters] == ["a1", "a2"]

    def test_unit_numbers_reset_per_room(self, panel_item) -> None:
        """Unit numbering starts over in each room."""
        items = [
            panel_item("a", room_index=0, unit_id="u1"),
            panel_item("b", room_index=0, unit_id="u2"),
            panel_item("c", room_index=1, room_name="Guest Bedroom", unit_id="u3"),
            panel_item("d", room_index=2, unit_id="u4"),
        ]
        groups = build_cad_groups(items)
        assert [g.prefix for g in groups] == ["MB1", "MB2", "GB1", "MB1"]

    def test_same_unit_id_in_two_rooms(self, panel_item) -> None:
        """A unit id reused in another room is a separate group."""
        items = [
            panel_item("a", room_index=0, unit_id="u1"),
            panel_item("b", room_index=1, unit_id="u1"),
        ]
        assert len(build_cad_groups(items)) == 2

    def test_reordering_renumbers_units(self, panel_item) -> None:
        """Reordering the input changes the unit numbers."""
        first = panel_item("a", unit_id="u1")
        second = panel_item("b", unit_id="u2")

        groups = build_cad_groups([second, first])

        assert groups[0].unit_id == "u2"
        assert groups[0].shutters[0].label == "MB1-S1"

    def test_loft_only_unit(self, panel_item) -> None:
        """A unit with only loft panels has no shutter grid."""
        items = [
            panel_item("l1", panel_type=LOFT, col=1, width_mm=600, height_mm=450),
            panel_item("l2", panel_type=LOFT, col=2, width_mm=600, height_mm=450),
        ]
        [group] = build_cad_groups(items)

        assert group.is_loft_only
        assert group.col_widths_mm == (600, 600)
        assert group.row_heights_mm == ()
        assert group.total_height_mm == 450

    def test_loft_height_from_last_loft(self, panel_item) -> None:
        """The group loft height comes from the last loft panel."""
        items = [
            panel_item("s1"),
            panel_item("l1", panel_type=LOFT, height_mm=450),
            panel_item("l2", panel_type=LOFT, col=2, height_mm=400),
        ]
        [group] = build_cad_groups(items)
        assert group.loft_height_mm == 400

    def test_empty(self) -> None:
        """No items give no groups."""
        assert build_cad_groups([]) == []
