from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import TextIO

import numpy as np

from bbox2d.error import MalformedPointsError
from bbox2d.vector import Vector2D

logger = logging.getLogger(__name__)


def load_points(source: str | Path | TextIO, delimiter: str | None = None) -> np.ndarray:
    """Read a list of 2D points from the given source.

    Each non-empty line holds the x- and y-coordinate of one point.
    Everything following a '#' is ignored.

    Parameter
    ---------
    source: str | Path | TextIO
        A file path or an open text stream.

    delimiter: str | None = None
        The column delimiter (None splits on whitespace).

    Returns
    -------
    np.ndarray
        A float64 array of shape (n, 2).
    """

    name = str(source) if isinstance(source, (str, Path)) else getattr(source, 'name', '<stream>')

    with warnings.catch_warnings():
        # numpy warns on empty input
        warnings.simplefilter('ignore', UserWarning)
        try:
            data = np.loadtxt(source, dtype=np.float64, comments='#', delimiter=delimiter, ndmin=2)
        except ValueError as e:
            raise MalformedPointsError(name, str(e)) from e

    if data.size == 0:
        logger.warning('No points found in %s.', name)
        return np.empty((0, 2), dtype=np.float64)

    if data.shape[1] != 2:
        raise MalformedPointsError(name, f'expected 2 columns, got {data.shape[1]}')

    logger.debug('Loaded %d points from %s.', data.shape[0], name)

    return data


def to_vectors(points: np.ndarray) -> list[Vector2D]:
    """Convert a (n, 2) point array into a list of vectors."""

    return [Vector2D.from_array(row) for row in points]
