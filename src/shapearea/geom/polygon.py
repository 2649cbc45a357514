"""Perimeter and outline geometry for shapes.

Outlines are shapely geometries placed with the circle centred on the
origin and the rectangle's lower-left corner on the origin. A circle
outline is a polygonal approximation; use ``shape_area`` for the exact
area.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from shapely.geometry import Point, Polygon, box

from ..config import CIRCLE_QUAD_SEGS
from ..core.errors import ShapeError
from ..core.model import Circle, Rectangle
from .areas import coerce_shape

LOGGER = logging.getLogger(__name__)


def shape_perimeter(obj: Any) -> float:
    """Calculate the perimeter of a circle or rectangle.

    Args:
        obj: A typed shape or a structural value, dispatched on ``radius``.

    Returns:
        2 * pi * radius for a circle, 2 * (height + width) for a rectangle.
    """
    shape = coerce_shape(obj)

    try:
        if isinstance(shape, Circle):
            perimeter = float(2 * math.pi * shape.radius)
        elif isinstance(shape, Rectangle):
            perimeter = float(2 * (shape.height + shape.width))
        else:
            raise ShapeError(f"Unsupported shape type: {type(shape).__name__}")
    except OverflowError as e:
        raise ShapeError(f"Perimeter of {shape!r} is too large: {e}") from e

    LOGGER.debug("Perimeter of %r: %s", shape, perimeter)
    return perimeter


def shape_outline(obj: Any, quad_segs: int = CIRCLE_QUAD_SEGS) -> Polygon:
    """Build the outline of a shape as a Shapely polygon.

    Args:
        obj: A typed shape or a structural value, dispatched on ``radius``.
        quad_segs: Segments per quarter circle for circle outlines.

    Returns:
        Shapely Polygon. Degenerate shapes (zero radius or a zero side)
        yield an empty or zero-area polygon.
    """
    shape = coerce_shape(obj)

    if isinstance(shape, Circle):
        # buffer() of a negative distance is empty, so mirror the radius
        return Point(0.0, 0.0).buffer(abs(shape.radius), quad_segs=quad_segs)
    if isinstance(shape, Rectangle):
        return box(0.0, 0.0, shape.width, shape.height)

    raise ShapeError(f"Unsupported shape type: {type(shape).__name__}")
