"""Section width resolution for wardrobe carcasses.

This module splits the inner width of a carcass into sections separated by
center posts. Posts are either placed at custom positions or spaced evenly.

Inputs are auto-corrected rather than rejected: missing or NaN values take a
default and out-of-range values are clamped, so a caller that skipped
validation still gets a usable layout.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from .services.geometry import round_half_up

__all__ = [
    "MIN_INNER_WIDTH",
    "MIN_SECTION_WIDTH",
    "SectionWidthResult",
    "calculate_section_widths",
]

logger = logging.getLogger(__name__)

# (default, minimum, maximum)
WIDTH_LIMITS = (1200.0, 200.0, 6000.0)
THICKNESS_LIMITS = (18.0, 8.0, 50.0)
POST_COUNT_LIMITS = (0, 0, 10)

MIN_INNER_WIDTH = 100.0
MIN_SECTION_WIDTH = 50.0


@dataclass(frozen=True)
class SectionWidthResult:
    """Resolved carcass sections.

    Attributes:
        inner_width: Width between the left and right panels.
        section_widths: Width of each section, left to right.
        post_positions: X of each post's left face, relative to the inner
            left edge.
    """

    inner_width: float
    section_widths: tuple[float, ...]
    post_positions: tuple[float, ...]

    @property
    def section_count(self) -> int:
        return len(self.section_widths)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_float(value: object) -> float | None:
    """Float view of a numeric input, None for non-numbers and NaN.

    Integers too large for a float become signed infinity.
    """
    if not _is_number(value):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except OverflowError:
        return math.inf if value > 0 else -math.inf  # type: ignore[operator]
    return None if math.isnan(number) else number


def _safe_number(value: object, limits: tuple[float, float, float]) -> float:
    """Return ``value`` clamped to range, or the default if it is unusable."""
    default, minimum, maximum = limits
    number = _as_float(value)
    if number is None:
        return default
    if math.isinf(number):
        return maximum if number > 0 else minimum
    return max(minimum, min(maximum, value))  # type: ignore[type-var]


def calculate_section_widths(
    width_mm: float | None,
    carcass_thickness_mm: float | None,
    center_post_count: int | None,
    custom_post_positions: Sequence[float] | None = None,
) -> SectionWidthResult:
    """Calculate section widths and post positions for a carcass.

    Algorithm:
    1. Clamp width to 200-6000 (default 1200), thickness to 8-50 (default
       18) and post count to 0-10 (default 0).
    2. Inner width = width - 2 * thickness, at least 100.
    3. No posts: a single section spans the inner width.
    4. Custom positions: if exactly ``center_post_count`` positions lie
       strictly inside the inner width, they are used as given (sorted) and
       each section is the gap to the previous position, at least 50.
    5. Otherwise posts are spaced evenly; every section gets the same
       rounded width.

    No residual correction is made after rounding, so the sum of sections
    and posts may differ from the inner width by up to half a millimetre
    per section.

    Args:
        width_mm: Overall carcass width in mm.
        carcass_thickness_mm: Panel thickness in mm.
        center_post_count: Number of full-height center posts.
        custom_post_positions: Optional post positions relative to the inner
            left edge.

    Returns:
        The inner width, the section widths and the post positions.

    Example:
        >>> result = calculate_section_widths(2400, 18, 2)
        >>> result.section_widths
        (776, 776, 776)
        >>> result.post_positions
        (776, 1570)
    """
    width = _safe_number(width_mm, WIDTH_LIMITS)
    thickness = _safe_number(carcass_thickness_mm, THICKNESS_LIMITS)
    post_count = int(_safe_number(center_post_count, POST_COUNT_LIMITS))

    inner_width = max(MIN_INNER_WIDTH, width - thickness * 2)
    section_count = post_count + 1

    if post_count == 0:
        return SectionWidthResult(
            inner_width=inner_width,
            section_widths=(inner_width,),
            post_positions=(),
        )

    if custom_post_positions is not None and len(custom_post_positions) == post_count:
        valid_positions = sorted(
            p
            for p in custom_post_positions
            if (number := _as_float(p)) is not None and 0 < number < inner_width
        )

        if len(valid_positions) == post_count:
            section_widths: list[float] = []
            previous_x = 0.0
            for position in valid_positions:
                section_widths.append(max(MIN_SECTION_WIDTH, position - previous_x))
                previous_x = position
            section_widths.append(max(MIN_SECTION_WIDTH, inner_width - previous_x))

            return SectionWidthResult(
                inner_width=inner_width,
                section_widths=tuple(section_widths),
                post_positions=tuple(valid_positions),
            )

        logger.debug(
            f"Rejected custom post positions {list(custom_post_positions)} "
            f"for inner width {inner_width}; using equal division"
        )

    available_width = inner_width - post_count * thickness
    equal_section_width = max(MIN_SECTION_WIDTH, available_width / section_count)

    post_positions = tuple(
        round_half_up(equal_section_width * i + thickness * (i - 1))
        for i in range(1, post_count + 1)
    )
    section_widths_equal = (round_half_up(equal_section_width),) * section_count

    return SectionWidthResult(
        inner_width=inner_width,
        section_widths=section_widths_equal,
        post_positions=post_positions,
    )
