from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import le, lt
from typing import Final

import numpy as np

from bbox2d.vector import Vector2D, maximal, minimal, pointwise_tuple


class BoundingBox:
    """2-dimensional axis-aligned bounding-box.

    A bounding-box is an immutable value spanned by a lower and an upper corner, with lower <= upper along both axes.
    Boxes may be degenerate (zero width and / or height), but are never inverted.
    Corner naming follows a y-up convention: top is max-y and right is max-x.
    """

    def __init__(self, c1: Vector2D, c2: Vector2D) -> None:
        """Construct a new 2D axis-aligned bounding-box.

        The corners are normalized, so their order does not matter.

        Parameter
        ---------
        c1: Vector2D
            The first corner.

        c2: Vector2D
            The second (diagonally opposite) corner.
        """

        self.lower: Final[Vector2D] = minimal(c1, c2)
        """The lower corner (min-x, min-y)."""

        self.upper: Final[Vector2D] = maximal(c1, c2)
        """The upper corner (max-x, max-y)."""

    # ----------------------------------------------------------------------
    # construction

    @staticmethod
    def from_point(v: Vector2D) -> BoundingBox:
        """Create a degenerate bounding-box covering only the given point."""

        return BoundingBox(v, v)

    @staticmethod
    def from_corners(c1: Vector2D, c2: Vector2D) -> BoundingBox:
        """Create the bounding-box spanned by two arbitrary corners."""

        return BoundingBox(c1, c2)

    @staticmethod
    def from_points(points: Iterable[Vector2D]) -> BoundingBox | None:
        """Create the smallest bounding-box enclosing all given points.

        Parameter
        ---------
        points: Iterable[Vector2D]
            The points to enclose.

        Returns
        -------
        BoundingBox | None
            The bounding-box of the points, or None if no points were given.
        """

        it = iter(points)
        first = next(it, None)
        if first is None:
            return None

        return BoundingBox.from_point(first).insert_many(it)

    @staticmethod
    def from_array(points: np.ndarray) -> BoundingBox | None:
        """Create the smallest bounding-box enclosing all rows of a (n, 2) numpy array.

        Returns None for an empty array.
        """

        points = np.asarray(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 2:
            msg = f'Expected an array of shape (n, 2), got {points.shape}.'
            raise ValueError(msg)

        if points.shape[0] == 0:
            return None

        return BoundingBox(Vector2D.from_array(points.min(axis=0)), Vector2D.from_array(points.max(axis=0)))

    @staticmethod
    def union_all(boxes: Iterable[BoundingBox]) -> BoundingBox | None:
        """Return the union of all given boxes, or None if no boxes were given."""

        it = iter(boxes)
        first = next(it, None)
        if first is None:
            return None

        return reduce(BoundingBox.union, it, first)

    def insert(self, v: Vector2D) -> BoundingBox:
        """Return a bounding-box extended to also enclose the given point."""

        return BoundingBox(minimal(self.lower, v), maximal(self.upper, v))

    def insert_many(self, points: Iterable[Vector2D]) -> BoundingBox:
        """Return a bounding-box extended to also enclose all given points."""

        return reduce(BoundingBox.insert, points, self)

    # ----------------------------------------------------------------------
    # extraction

    def corners(self) -> tuple[Vector2D, Vector2D]:
        """Return the (lower, upper) corners."""

        return self.lower, self.upper

    def top_left(self) -> Vector2D:
        """Return the (min-x, max-y) corner."""

        return Vector2D(self.lower.x, self.upper.y)

    def top_right(self) -> Vector2D:
        """Return the (max-x, max-y) corner."""

        return self.upper

    def bottom_left(self) -> Vector2D:
        """Return the (min-x, min-y) corner."""

        return self.lower

    def bottom_right(self) -> Vector2D:
        """Return the (max-x, min-y) corner."""

        return Vector2D(self.upper.x, self.lower.y)

    def center(self) -> Vector2D:
        """Return the center of the bounding-box."""

        return self.lower + 0.5 * (self.upper - self.lower)

    def width(self) -> float:
        """Return the extent along the x-axis."""

        return self.upper.x - self.lower.x

    def height(self) -> float:
        """Return the extent along the y-axis."""

        return self.upper.y - self.lower.y

    def area(self) -> float:
        """Return the area of the bounding-box."""

        return self.width() * self.height()

    def to_array(self) -> np.ndarray:
        """Return the corners as (2, 2) numpy array [[lower.x, lower.y], [upper.x, upper.y]]."""

        return np.array([self.lower.to_tuple(), self.upper.to_tuple()], dtype=np.float64)

    # ----------------------------------------------------------------------
    # membership

    def contains(self, point: Vector2D) -> bool:
        """Check if the given point is within the bounding-box (boundary included)."""

        return all(pointwise_tuple(le, self.lower, point)) and all(pointwise_tuple(le, point, self.upper))

    def contains_strict(self, point: Vector2D) -> bool:
        """Check if the given point is within the interior of the bounding-box (boundary excluded)."""

        return all(pointwise_tuple(lt, self.lower, point)) and all(pointwise_tuple(lt, point, self.upper))

    def inside(self, outer: BoundingBox) -> bool:
        """Check if this bounding-box lies within the outer box (boundary included)."""

        return outer.contains(self.lower) and outer.contains(self.upper)

    def inside_strict(self, outer: BoundingBox) -> bool:
        """Check if this bounding-box lies within the interior of the outer box."""

        return outer.contains_strict(self.lower) and outer.contains_strict(self.upper)

    def outside(self, other: BoundingBox) -> bool:
        """Check if this bounding-box is separated from the other box along at least one axis.

        Boxes that merely touch along an edge count as outside.
        """

        return (
            self.upper.x <= other.lower.x
            or self.upper.y <= other.lower.y
            or self.lower.x >= other.upper.x
            or self.lower.y >= other.upper.y
        )

    def outside_strict(self, other: BoundingBox) -> bool:
        """Check if this bounding-box is separated from the other box by a gap along at least one axis.

        Boxes that touch along an edge are not strictly outside.
        """

        return (
            self.upper.x < other.lower.x
            or self.upper.y < other.lower.y
            or self.lower.x > other.upper.x
            or self.lower.y > other.upper.y
        )

    def intersects(self, other: BoundingBox) -> bool:
        """Check if any corner of the other bounding-box lies within this box (boundary included).

        The test is not symmetric: an enclosing box intersects the boxes it encloses, but an enclosed box does not intersect its enclosing box.
        """

        return any(self.contains(p) for p in (other.top_left(), other.top_right(), other.bottom_left(), other.bottom_right()))

    # ----------------------------------------------------------------------
    # combination

    def union(self, other: BoundingBox) -> BoundingBox:
        """Return the smallest bounding-box enclosing both boxes."""

        return BoundingBox(minimal(self.lower, other.lower), maximal(self.upper, other.upper))

    def intersection(self, other: BoundingBox) -> BoundingBox | None:
        """Return the overlapping region of both boxes, or None if they do not intersect (see intersects())."""

        if not self.intersects(other):
            return None

        return BoundingBox.from_corners(maximal(self.lower, other.lower), minimal(self.upper, other.upper))

    # ----------------------------------------------------------------------
    # transform

    def translate(self, v: Vector2D) -> BoundingBox:
        """Return the bounding-box moved by the given offset."""

        return BoundingBox.from_corners(self.lower + v, self.upper + v)

    def scale(self, factor: float | Vector2D) -> BoundingBox:
        """Return the bounding-box scaled about the origin.

        Parameter
        ---------
        factor: float | Vector2D
            A uniform scale factor, or a vector of per-axis factors.
            Negative factors mirror the box, which is re-normalized afterwards.
        """

        return BoundingBox.from_corners(self.lower * factor, self.upper * factor)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BoundingBox) and self.lower == other.lower and self.upper == other.upper

    def __hash__(self) -> int:
        return hash((self.lower, self.upper))

    def __str__(self) -> str:
        return f'[{self.lower}, {self.upper}]'

    def __repr__(self) -> str:
        return f'BoundingBox(lower={self.lower!r}, upper={self.upper!r})'
