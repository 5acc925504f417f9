from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bbox2d.bounding_box import BoundingBox
from bbox2d.vector import Vector2D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportSettings:
    """Sizing policy for a drawing canvas fitted around a set of points."""

    margin: float = 10
    """The space added on every side of the point bounds."""

    default_width: float = 100
    """The canvas width used if there are no points."""

    default_height: float = 100
    """The canvas height used if there are no points."""

    point_radius: float = 1
    """The radius of the circles drawn for each point."""

    def __post_init__(self) -> None:
        for name in ('margin', 'default_width', 'default_height', 'point_radius'):
            if not getattr(self, name) >= 0:
                msg = f'Viewport setting {name} must be a non-negative number, got {getattr(self, name)}.'
                raise ValueError(msg)


def viewport_box(points: Sequence[Vector2D], settings: ViewportSettings) -> BoundingBox | None:
    """Return the bounds of the given points grown by the configured margin, or None if there are no points."""

    box = BoundingBox.from_points(points)
    if box is None:
        return None

    m = Vector2D(settings.margin, settings.margin)
    return BoundingBox.from_corners(box.lower - m, box.upper + m)


def viewport_size(points: Sequence[Vector2D], settings: ViewportSettings) -> tuple[float, float]:
    """Return the (width, height) of the canvas for the given points.

    Falls back to the default size of the settings if there are no points.
    """

    box = viewport_box(points, settings)
    if box is None:
        logger.debug('No points, using default viewport size.')
        return settings.default_width, settings.default_height

    return box.width(), box.height()


def render_svg(points: Sequence[Vector2D], settings: ViewportSettings) -> str:
    """Render the given points as circles into a SVG document sized to fit them.

    Parameter
    ---------
    points: Sequence[Vector2D]
        The points to draw.

    settings: ViewportSettings
        The viewport sizing policy.
    """

    box = viewport_box(points, settings)
    if box is None:
        box = BoundingBox.from_corners(Vector2D(), Vector2D(settings.default_width, settings.default_height))

    width, height = box.width(), box.height()
    circles = ''.join(f'  <circle cx="{p.x}" cy="{p.y}" r="{settings.point_radius}" />\n' for p in points)

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="{box.lower.x} {box.lower.y} {width} {height}">\n'
        f'{circles}'
        '</svg>\n'
    )
