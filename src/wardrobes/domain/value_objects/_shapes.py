"""Canvas shape value objects.

Coordinates are millimetres in canvas space with the origin at the top-left
and y growing downward. Shapes are immutable snapshots: a drag produces a new
shape through ``dataclasses.replace`` and the decoded ``ref`` is recomputed
from the id at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from ._shape_refs import ShapeRef


@dataclass(frozen=True)
class Point2D:
    """2D point in canvas coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class RectShape:
    """Axis-aligned rectangle (panels, posts, shelves, decorations)."""

    id: str
    x: float
    y: float
    w: float
    h: float
    ref: ShapeRef = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        from ..shape_ids import classify

        object.__setattr__(self, "ref", classify(self.id))

    @property
    def type(self) -> Literal["rect"]:
        return "rect"

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.w

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.y + self.h


@dataclass(frozen=True)
class LineShape:
    """Line segment between two points."""

    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    ref: ShapeRef = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        from ..shape_ids import classify

        object.__setattr__(self, "ref", classify(self.id))

    @property
    def type(self) -> Literal["line"]:
        return "line"

    @property
    def start(self) -> Point2D:
        return Point2D(self.x1, self.y1)

    @property
    def end(self) -> Point2D:
        return Point2D(self.x2, self.y2)


Shape = Union[RectShape, LineShape]


@dataclass(frozen=True)
class ShapeBounds:
    """Bounding box of one or more shapes, with its center point."""

    x1: float
    y1: float
    x2: float
    y2: float
    cx: float
    cy: float


@dataclass(frozen=True)
class AlignmentGuide:
    """Guide line drawn while a shape is aligned with another shape."""

    type: Literal["horizontal", "vertical"]
    position: float
    start: float
    end: float


@dataclass(frozen=True)
class MeasurementResult:
    """Aggregate measurements of the selected shapes (rounded to mm)."""

    total_length: int
    area: int
    perimeter: int
    selected_count: int
