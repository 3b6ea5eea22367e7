"""Unit tests for canvas geometry primitives."""

import math

import pytest

from wardrobes.domain.services.geometry import (
    apply_angle_snap,
    calculate_measurements,
    distance,
    find_alignment_guides,
    get_angle,
    get_combined_bounds,
    get_shape_bounds,
    is_horizontal,
    is_vertical,
    point_to_segment_distance,
    round_half_up,
    segment_intersection,
    snap_angle,
    snap_to_grid,
)
from wardrobes.domain.value_objects import LineShape, Point2D, RectShape


class TestRoundHalfUp:
    """Tests for half-up rounding."""

    def test_half_rounds_up(self) -> None:
        """Halves round up."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_negative_half_rounds_toward_positive(self) -> None:
        """Negative halves round toward positive infinity."""
        assert round_half_up(-0.5) == 0

    def test_non_finite_passes_through(self) -> None:
        """NaN and infinity are returned unchanged."""
        assert math.isnan(round_half_up(float("nan")))
        assert round_half_up(float("inf")) == float("inf")


class TestDistances:
    """Tests for point and segment distances."""

    def test_distance(self) -> None:
        """Euclidean distance between two points."""
        assert distance(Point2D(0, 0), Point2D(3, 4)) == 5

    def test_projection_inside_segment(self) -> None:
        """Point above the middle of a horizontal segment."""
        d = point_to_segment_distance(Point2D(50, 10), Point2D(0, 0), Point2D(100, 0))
        assert d == pytest.approx(10)

    def test_projection_before_start_uses_start(self) -> None:
        """Points behind the start measure to the start."""
        d = point_to_segment_distance(Point2D(-3, 4), Point2D(0, 0), Point2D(100, 0))
        assert d == pytest.approx(5)

    def test_projection_after_end_uses_end(self) -> None:
        """Points past the end measure to the end."""
        d = point_to_segment_distance(Point2D(103, 4), Point2D(0, 0), Point2D(100, 0))
        assert d == pytest.approx(5)

    def test_zero_length_segment(self) -> None:
        """A degenerate segment measures to its single point."""
        d = point_to_segment_distance(Point2D(3, 4), Point2D(0, 0), Point2D(0, 0))
        assert d == pytest.approx(5)


class TestSnapping:
    """Tests for grid and angle snapping."""

    def test_snap_to_grid(self) -> None:
        """Values snap to the nearest grid line."""
        assert snap_to_grid(14, 10) == 10
        assert snap_to_grid(15, 10) == 20

    def test_grid_size_one_rounds(self) -> None:
        """A 1mm grid rounds half up."""
        assert snap_to_grid(12.5, 1) == 13

    def test_non_positive_grid_leaves_value(self) -> None:
        """A zero grid disables snapping."""
        assert snap_to_grid(12.3, 0) == 12.3

    def test_snap_angle(self) -> None:
        """Angles snap to 45 degree steps."""
        assert snap_angle(30) == 45
        assert snap_angle(20) == 0

    def test_get_angle(self) -> None:
        """Angles are measured in degrees."""
        assert get_angle(0, 0, 10, 0) == 0
        assert get_angle(0, 0, 0, 10) == 90

    def test_apply_angle_snap_keeps_length(self) -> None:
        """Snapping the angle keeps the segment length."""
        end = apply_angle_snap(Point2D(0, 0), Point2D(100, 10), should_snap=True)
        assert end.x == pytest.approx(math.hypot(100, 10))
        assert end.y == pytest.approx(0)

    def test_apply_angle_snap_disabled(self) -> None:
        """The end point is unchanged when snapping is off."""
        end = Point2D(100, 10)
        assert apply_angle_snap(Point2D(0, 0), end, should_snap=False) is end

    def test_horizontal_and_vertical(self) -> None:
        """Near-axis angles count as horizontal or vertical."""
        assert is_horizontal(5)
        assert is_horizontal(178)
        assert not is_horizontal(45)
        assert is_vertical(-90)
        assert not is_vertical(0)


class TestSegmentIntersection:
    """Tests for directional segment intersection."""

    def test_crossing_segments(self) -> None:
        """Crossing segments meet at one point."""
        point = segment_intersection(0, 0, 10, 10, 0, 10, 10, 0)
        assert point == Point2D(5, 5)

    def test_parallel_returns_none(self) -> None:
        """Parallel segments never intersect."""
        assert segment_intersection(0, 0, 10, 0, 0, 5, 10, 5) is None

    def test_hit_outside_first_segment_returns_none(self) -> None:
        """The crossing must lie on the first segment."""
        assert segment_intersection(0, 0, 10, 0, 20, -5, 20, 5) is None

    def test_second_segment_is_treated_as_infinite_line(self) -> None:
        """The second segment only supplies a direction."""
        point = segment_intersection(0, 0, 10, 0, 5, 10, 5, 20)
        assert point == Point2D(5, 0)

    def test_snaps_when_grid_given(self) -> None:
        """The crossing point snaps to the grid when one is given."""
        point = segment_intersection(0, 0, 10, 0, 4.6, -1, 4.6, 1, grid_size=1)
        assert point == Point2D(5, 0)


class TestBoundsAndGuides:
    """Tests for shape bounds, alignment guides and measurements."""

    def test_rect_bounds(self) -> None:
        """Rect bounds come from position and size."""
        bounds = get_shape_bounds(RectShape("r", 10, 20, 100, 50))
        assert (bounds.x1, bounds.y1, bounds.x2, bounds.y2) == (10, 20, 110, 70)
        assert (bounds.cx, bounds.cy) == (60, 45)

    def test_line_bounds_are_normalized(self) -> None:
        """Line bounds are normalized regardless of direction."""
        bounds = get_shape_bounds(LineShape("l", 100, 50, 0, 0))
        assert (bounds.x1, bounds.y1, bounds.x2, bounds.y2) == (0, 0, 100, 50)

    def test_combined_bounds(self) -> None:
        """Combined bounds enclose every shape."""
        shapes = [RectShape("a", 0, 0, 10, 10), LineShape("b", 50, 50, 60, 80)]
        bounds = get_combined_bounds(shapes)
        assert (bounds.x1, bounds.y1, bounds.x2, bounds.y2) == (0, 0, 60, 80)

    def test_combined_bounds_empty(self) -> None:
        """No shapes give no bounds."""
        assert get_combined_bounds([]) is None

    def test_alignment_guides_snap_to_first_match(self) -> None:
        """Nearby edges of another shape produce guides and snaps."""
        shapes = [RectShape("a", 100, 100, 50, 50), RectShape("moving", 0, 0, 10, 10)]
        guides, snap_x, snap_y = find_alignment_guides(
            103, 148, shapes, exclude_id="moving", canvas_width=1000, canvas_height=800
        )
        assert snap_x == 100
        assert snap_y == 150
        assert {g.type for g in guides} == {"horizontal", "vertical"}

    def test_alignment_guides_excluded_shape_ignored(self) -> None:
        """The moving shape never aligns to itself."""
        shapes = [RectShape("moving", 100, 100, 50, 50)]
        guides, snap_x, snap_y = find_alignment_guides(
            100, 100, shapes, exclude_id="moving", canvas_width=1000, canvas_height=800
        )
        assert guides == []
        assert snap_x is None and snap_y is None

    def test_measurements(self) -> None:
        """Measurements sum line lengths and report the selected area."""
        shapes = [
            LineShape("l", 0, 0, 30, 40),
            RectShape("r", 0, 0, 10, 20),
            RectShape("other", 0, 0, 99, 99),
        ]
        result = calculate_measurements(shapes, {"l"}, selected_id="r")
        assert result.total_length == 50
        assert result.area == 200
        assert result.perimeter == 60
        assert result.selected_count == 2
