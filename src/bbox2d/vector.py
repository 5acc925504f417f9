from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypedDict, TypeVar

import numpy as np

T = TypeVar('T')
S = TypeVar('S')


class VectorRecord(TypedDict):
    """Named-field representation of a 2D vector."""

    x: float
    y: float


class Vector2D:
    """Immutable 2-dimensional vector."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        """Construct a new 2D vector.

        Parameter
        ---------
        x: float = 0.0
            The x-component of the vector.

        y: float = 0.0
            The y-component of the vector.
        """

        self.x: Final[float] = x
        """The x-component."""

        self.y: Final[float] = y
        """The y-component."""

    @staticmethod
    def from_tuple(t: tuple[float, float]) -> Vector2D:
        """Create a vector from the given (x, y) tuple."""

        return Vector2D(t[0], t[1])

    def to_tuple(self) -> tuple[float, float]:
        """Return the (x, y) tuple of this vector."""

        return self.x, self.y

    @staticmethod
    def from_record(r: VectorRecord) -> Vector2D:
        """Create a vector from the given {'x': ..., 'y': ...} record."""

        return Vector2D(r['x'], r['y'])

    def to_record(self) -> VectorRecord:
        """Return the {'x': ..., 'y': ...} record of this vector."""

        return {'x': self.x, 'y': self.y}

    @staticmethod
    def from_array(a: np.ndarray) -> Vector2D:
        """Create a vector from a numpy array of shape (2,).

        Parameter
        ---------
        a: np.ndarray
            The array holding the x- and y-component.
        """

        if np.shape(a) != (2,):
            msg = f'Expected an array of shape (2,), got {np.shape(a)}.'
            raise ValueError(msg)

        return Vector2D(float(a[0]), float(a[1]))

    def to_array(self) -> np.ndarray:
        """Return this vector as float64 numpy array of shape (2,)."""

        return np.array([self.x, self.y], dtype=np.float64)

    def __add__(self, other: Vector2D) -> Vector2D:
        return pointwise(lambda a, b: a + b, self, other)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return pointwise(lambda a, b: a - b, self, other)

    def __mul__(self, factor: float | Vector2D) -> Vector2D:
        if isinstance(factor, Vector2D):
            return pointwise(lambda a, b: a * b, self, factor)

        return Vector2D(self.x * factor, self.y * factor)

    def __rmul__(self, factor: float) -> Vector2D:
        return self * factor

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Vector2D) and self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f'({self.x}, {self.y})'

    def __repr__(self) -> str:
        return f'Vector2D(x={self.x}, y={self.y})'


def pointwise(f: Callable[[float, float], float], a: Vector2D, b: Vector2D) -> Vector2D:
    """Combine the x- and y-components of the given vectors independently.

    Parameter
    ---------
    f: Callable[[float, float], float]
        The combining function, applied once per axis.

    a: Vector2D
        The first vector (first argument of f).

    b: Vector2D
        The second vector (second argument of f).

    Returns
    -------
    Vector2D
        The vector (f(a.x, b.x), f(a.y, b.y)).
    """

    return Vector2D(f(a.x, b.x), f(a.y, b.y))


def pointwise_tuple(f: Callable[[float, float], T], a: Vector2D, b: Vector2D) -> tuple[T, T]:
    """Like pointwise(), but collect arbitrary results (e.g. comparisons) in a tuple."""

    return f(a.x, b.x), f(a.y, b.y)


def minimal(a: Vector2D, b: Vector2D) -> Vector2D:
    """Return the componentwise minimum of the given vectors."""

    return pointwise(min, a, b)


def maximal(a: Vector2D, b: Vector2D) -> Vector2D:
    """Return the componentwise maximum of the given vectors."""

    return pointwise(max, a, b)


def fold(f: Callable[[T, S], S], default: S, pair: tuple[T, T]) -> S:
    """Right-fold f over the two elements of pair, seeded with default.

    fold(f, d, (a, b)) == f(a, f(b, d))
    """

    return f(pair[0], f(pair[1], default))
