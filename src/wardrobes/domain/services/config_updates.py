"""Pure edits of a module configuration.

The canvas applies drags and context menu actions by swapping in the
configuration returned from these functions and regenerating its shapes.
Nothing here mutates its input; ``None`` means the edit does not apply.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ..shape_ids import PanelId, get_center_posts, parse_shelf_id
from ..value_objects import (
    ModuleConfig,
    PanelKey,
    RectShape,
    SectionType,
    Shape,
    WardrobeSection,
)
from .bounds import find_rect, get_shelf_bounds
from .geometry import round_half_up

__all__ = [
    "MAX_POSTS_BELOW",
    "apply_post_drag",
    "apply_shelf_drag",
    "default_shelf_positions",
    "disable_panel",
    "remove_center_post",
    "remove_shelf",
    "set_posts_below",
    "set_shelf_count",
]

logger = logging.getLogger(__name__)

MAX_POSTS_BELOW = 9


def default_shelf_positions(
    shelf_count: int,
    section_height: float,
    thickness: float,
) -> tuple[float, ...]:
    """Evenly spaced shelf positions as percentages of the section height."""
    if shelf_count <= 0 or section_height <= 0:
        return ()
    spacing = (section_height - shelf_count * thickness) / (shelf_count + 1)
    return tuple(
        (spacing * (i + 1) + thickness * i) / section_height * 100
        for i in range(shelf_count)
    )


def _replace_section(
    config: ModuleConfig,
    index: int,
    section: WardrobeSection,
) -> ModuleConfig:
    sections = list(config.sections)
    sections[index] = section
    return replace(config, sections=tuple(sections))


def _synthesized_sections(config: ModuleConfig) -> tuple[WardrobeSection, ...]:
    """One empty shelves section per bay, for carcasses without explicit sections."""
    count = max(0, config.center_post_count) + 1
    return tuple(WardrobeSection(type=SectionType.SHELVES) for _ in range(count))


def apply_shelf_drag(
    config: ModuleConfig,
    shapes: Sequence[Shape],
    shelf_id: str,
) -> ModuleConfig | None:
    """Store a dragged shelf's position in its section.

    The shelf's live y is converted to a percentage of the shelf bounds'
    height. A section without custom positions is first seeded with the
    evenly spaced defaults so the other shelves stay where they are.

    Returns:
        The updated configuration, or ``None`` if the shelf, its bounds or
        its section cannot be resolved.
    """
    shelf = parse_shelf_id(shelf_id)
    shape = find_rect(shapes, shelf_id)
    if shelf is None or shape is None:
        return None

    bounds = get_shelf_bounds(config, shapes, shelf_id)
    if bounds is None:
        return None

    section_height = bounds.max_y - bounds.min_y
    if section_height <= 0:
        logger.debug(f"Shelf {shelf_id} has no vertical travel; drag not stored")
        return None

    index = shelf.section_index
    position_index = shelf.shelf_index - 1
    if not 0 <= index < len(config.sections) or position_index < 0:
        return None

    pct = (shape.y - bounds.min_y) / section_height * 100
    section = config.sections[index]

    if section.shelf_positions is not None:
        positions = list(section.shelf_positions)
    else:
        positions = list(
            default_shelf_positions(section.shelf_count, section_height, config.thickness)
        )
    while len(positions) <= position_index:
        positions.append(pct)
    positions[position_index] = pct

    return _replace_section(
        config, index, replace(section, shelf_positions=tuple(positions))
    )


def apply_post_drag(
    config: ModuleConfig,
    shapes: Sequence[Shape],
) -> ModuleConfig | None:
    """Store the live center post positions as custom positions.

    Positions are measured from the inner face of the left panel, rounded to
    whole millimetres and sorted, since a drag may carry one post past
    another.
    """
    if not config.is_wardrobe_carcass or config.center_post_count <= 0:
        return None

    left = find_rect(shapes, PanelId.LEFT.value)
    posts: list[RectShape] = get_center_posts(shapes)
    if left is None or not posts:
        return None

    inner_left = left.x + config.thickness
    positions = sorted(round_half_up(post.x - inner_left) for post in posts)
    return replace(config, center_post_positions=tuple(positions))


def remove_shelf(config: ModuleConfig, shelf_id: str) -> ModuleConfig | None:
    """Remove one shelf from its section, dropping its custom position."""
    shelf = parse_shelf_id(shelf_id)
    if shelf is None or not 0 <= shelf.section_index < len(config.sections):
        return None

    section = config.sections[shelf.section_index]
    if section.shelf_count <= 0:
        return None

    positions = section.shelf_positions
    if positions is not None:
        positions = tuple(
            p for i, p in enumerate(positions) if i != shelf.shelf_index - 1
        )

    return _replace_section(
        config,
        shelf.section_index,
        replace(section, shelf_count=section.shelf_count - 1, shelf_positions=positions),
    )


def set_shelf_count(
    config: ModuleConfig,
    section_index: int,
    count: int,
) -> ModuleConfig | None:
    """Set the shelf count of one section.

    A carcass without explicit sections gets one ``shelves`` section per bay
    first.
    """
    sections = config.sections or _synthesized_sections(config)
    if not 0 <= section_index < len(sections):
        return None

    config = replace(config, sections=sections)
    section = replace(sections[section_index], shelf_count=max(0, count))
    return _replace_section(config, section_index, section)


def set_posts_below(
    config: ModuleConfig,
    section_index: int,
    count: int,
) -> ModuleConfig | None:
    """Set the number of posts hung below a section's shelves (0-9).

    A carcass without explicit sections gets one ``shelves`` section per bay
    first.
    """
    sections = config.sections or _synthesized_sections(config)
    if not 0 <= section_index < len(sections):
        return None

    count = max(0, min(MAX_POSTS_BELOW, count))
    config = replace(config, sections=sections)
    section = replace(sections[section_index], posts_below=count)
    return _replace_section(config, section_index, section)


def disable_panel(config: ModuleConfig, key: PanelKey) -> ModuleConfig:
    """Switch off one structural panel."""
    panels = replace(config.effective_panels, **{key: False})
    return replace(config, panels_enabled=panels)


def remove_center_post(config: ModuleConfig) -> ModuleConfig:
    """Drop one center post; custom positions are kept for the solver to vet."""
    return replace(config, center_post_count=max(0, config.center_post_count - 1))
