"""Unit tests for section width resolution.

This module tests calculate_section_widths from the domain layer. It covers:
- Zero posts (one section spanning the inner width)
- Equal division between center posts
- Custom post positions, accepted or rejected
- Auto-correction of missing and out-of-range inputs
"""

import pytest

from wardrobes.domain.section_resolver import (
    MIN_INNER_WIDTH,
    MIN_SECTION_WIDTH,
    SectionWidthResult,
    calculate_section_widths,
)


class TestZeroPosts:
    """Tests for carcasses without center posts."""

    def test_single_section_spans_inner_width(self) -> None:
        """One section fills the inner width."""
        result = calculate_section_widths(1200, 18, 0)
        assert result.inner_width == 1164
        assert result.section_widths == (1164,)
        assert result.post_positions == ()
        assert result.section_count == 1

    def test_custom_positions_ignored_without_posts(self) -> None:
        """Positions are ignored when there are no posts."""
        result = calculate_section_widths(1200, 18, 0, [400])
        assert result.section_widths == (1164,)
        assert result.post_positions == ()


class TestEqualDivision:
    """Tests for evenly spaced posts."""

    def test_two_posts(self) -> None:
        """Two posts split a 2400mm carcass into three equal sections."""
        # 2400 - 2*18 = 2364 inner; 2364 - 2*18 = 2328 for three sections
        result = calculate_section_widths(2400, 18, 2)
        assert result.inner_width == 2364
        assert result.section_widths == (776, 776, 776)
        assert result.post_positions == (776, 1570)

    def test_sections_and_posts_sum_to_inner_width(self) -> None:
        """Sections and posts fill the inner width exactly."""
        result = calculate_section_widths(2400, 18, 2)
        total = sum(result.section_widths) + 2 * 18
        assert total == result.inner_width

    def test_section_count_is_post_count_plus_one(self) -> None:
        """There is one more section than posts."""
        for posts in range(0, 5):
            result = calculate_section_widths(3000, 18, posts)
            assert result.section_count == posts + 1
            assert len(result.post_positions) == posts

    def test_widths_are_rounded(self) -> None:
        """Section widths round half up."""
        # 1001 - 36 = 965 inner; (965 - 18) / 2 = 473.5 -> 474
        assert calculate_section_widths(1001, 18, 1).section_widths == (474, 474)

    def test_section_width_floor(self) -> None:
        """Ten posts in a narrow carcass still give 50mm sections."""
        result = calculate_section_widths(200, 18, 10)
        assert all(w == MIN_SECTION_WIDTH for w in result.section_widths)


class TestCustomPositions:
    """Tests for custom post positions."""

    def test_valid_positions_used_verbatim(self) -> None:
        """Valid positions are used as given."""
        result = calculate_section_widths(1200, 18, 2, [400, 800])
        assert result.post_positions == (400, 800)
        assert result.section_widths == (400, 400, 364)

    def test_positions_are_sorted(self) -> None:
        """Positions are sorted."""
        result = calculate_section_widths(1200, 18, 2, [800, 400])
        assert result.post_positions == (400, 800)

    def test_close_positions_keep_minimum_width(self) -> None:
        """Sections never drop below the minimum width."""
        result = calculate_section_widths(1200, 18, 2, [400, 420])
        assert result.section_widths == (400, MIN_SECTION_WIDTH, 744)

    def test_count_mismatch_falls_back_to_equal(self) -> None:
        """Too few positions fall back to equal division."""
        result = calculate_section_widths(2400, 18, 2, [500])
        assert result.post_positions == (776, 1570)

    def test_out_of_range_position_falls_back_to_equal(self) -> None:
        """A position past the inner width falls back to equal division."""
        result = calculate_section_widths(2400, 18, 2, [500, 5000])
        assert result.post_positions == (776, 1570)

    def test_nan_position_falls_back_to_equal(self) -> None:
        """A NaN position falls back to equal division."""
        result = calculate_section_widths(2400, 18, 2, [500, float("nan")])
        assert result.post_positions == (776, 1570)

    def test_boundary_positions_rejected(self) -> None:
        """Positions must lie strictly inside the inner width."""
        result = calculate_section_widths(2400, 18, 2, [0, 1000])
        assert result.post_positions == (776, 1570)

    def test_oversized_integer_position_falls_back_to_equal(self) -> None:
        """An integer too large for a float is not a usable position."""
        result = calculate_section_widths(1200, 18, 1, [10**400])
        assert result.post_positions == (573,)
        assert result.section_widths == (573, 573)


class TestAutoCorrection:
    """Tests for clamping and defaults."""

    def test_missing_values_use_defaults(self) -> None:
        """Missing inputs use the defaults."""
        result = calculate_section_widths(None, None, None)
        assert result == SectionWidthResult(1164, (1164,), ())

    def test_nan_values_use_defaults(self) -> None:
        """NaN inputs use the defaults."""
        nan = float("nan")
        result = calculate_section_widths(nan, nan, nan)
        assert result.inner_width == 1164

    def test_width_clamped(self) -> None:
        """Width is clamped and the inner width has a floor."""
        assert calculate_section_widths(10000, 18, 0).inner_width == 6000 - 36
        assert calculate_section_widths(50, 60, 0).inner_width == MIN_INNER_WIDTH

    def test_thickness_clamped(self) -> None:
        """Thickness is clamped to its range."""
        assert calculate_section_widths(1000, 100, 0).inner_width == 900
        assert calculate_section_widths(1000, 2, 0).inner_width == 984

    def test_post_count_clamped(self) -> None:
        """Post count is clamped to its range."""
        assert calculate_section_widths(6000, 18, 25).section_count == 11
        assert calculate_section_widths(1200, 18, -3).section_count == 1

    def test_bool_is_not_a_number(self) -> None:
        """Booleans are treated as missing."""
        assert calculate_section_widths(True, 18, 0).inner_width == 1164

    @pytest.mark.parametrize("width", [200, 1200, 3600, 6000])
    def test_never_raises_across_range(self, width: float) -> None:
        """Widths across the range give a full layout."""
        result = calculate_section_widths(width, 18, 3)
        assert result.section_count == 4

    def test_oversized_integers_clamped(self) -> None:
        """Integers too large for a float clamp to the nearest limit."""
        assert calculate_section_widths(10**400, 18, 0).inner_width == 6000 - 36
        assert calculate_section_widths(-(10**400), 18, 0).inner_width == 200 - 36
        assert calculate_section_widths(1000, 10**400, 0).inner_width == 900
        assert calculate_section_widths(6000, 18, 10**400).section_count == 11
