"""Area computation for circles and rectangles.

Two entry points are provided:

- ``calculate_shape_area`` accepts any structural value (a mapping such
  as ``{"shape": "circle", "radius": 1}`` or an object with the same
  attributes) and decides the variant by the presence of ``radius``.
  The ``shape`` tag is carried along but never consulted.
- ``shape_area`` accepts a typed ``Circle`` or ``Rectangle`` and
  dispatches on the variant type.

Negative dimensions are not rejected.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping
from typing import Any, Dict

from ..core.errors import ShapeError
from ..core.model import Circle, Rectangle, Shape

LOGGER = logging.getLogger(__name__)

_MISSING = object()


def _get_field(obj: Any, name: str) -> Any:
    """Read a field by key from mappings, by attribute from anything else."""
    if isinstance(obj, Mapping):
        return obj.get(name, _MISSING)
    return getattr(obj, name, _MISSING)


def _has_field(obj: Any, name: str) -> bool:
    return _get_field(obj, name) is not _MISSING


def _dimension(obj: Any, name: str) -> float:
    """Return a numeric dimension of ``obj``.

    Raises:
        ShapeError: If the field is absent or is not a real number.
    """
    value = _get_field(obj, name)
    if value is _MISSING:
        raise ShapeError(f"Missing dimension '{name}' in {obj!r}")
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ShapeError(
            f"Dimension '{name}' must be a real number, got {type(value).__name__}"
        )
    return value


def coerce_shape(obj: Any) -> Shape:
    """Convert a structural value into a ``Circle`` or ``Rectangle``.

    A value carrying a ``radius`` field is a circle, anything else is
    read as a rectangle. The ``shape`` tag is copied verbatim when
    present, so ``{"shape": "rectangle", "radius": 2}`` becomes
    ``Circle(radius=2, shape="rectangle")``.

    Args:
        obj: A typed shape, a mapping, or an object with shape attributes.

    Returns:
        The typed shape variant.

    Raises:
        ShapeError: If a required dimension is missing or not numeric.
    """
    if isinstance(obj, Circle):
        _dimension(obj, "radius")
        return obj
    if isinstance(obj, Rectangle):
        _dimension(obj, "height")
        _dimension(obj, "width")
        return obj

    tag = _get_field(obj, "shape")

    if _has_field(obj, "radius"):
        radius = _dimension(obj, "radius")
        if tag is _MISSING:
            return Circle(radius=radius)
        return Circle(radius=radius, shape=tag)

    height = _dimension(obj, "height")
    width = _dimension(obj, "width")
    if tag is _MISSING:
        return Rectangle(height=height, width=width)
    return Rectangle(height=height, width=width, shape=tag)


def shape_area(shape: Shape) -> float:
    """Calculate the area of a typed shape.

    Args:
        shape: A ``Circle`` or a ``Rectangle``.

    Returns:
        pi * radius**2 for a circle, height * width for a rectangle.

    Raises:
        ShapeError: If ``shape`` is neither variant, a dimension is not
            a real number, or the area does not fit in a float.
    """
    if not isinstance(shape, (Circle, Rectangle)):
        raise ShapeError(f"Unsupported shape type: {type(shape).__name__}")
    coerce_shape(shape)

    try:
        if isinstance(shape, Circle):
            area = float(math.pi * shape.radius * shape.radius)
        else:
            area = float(shape.height * shape.width)
    except OverflowError as e:
        raise ShapeError(f"Area of {shape!r} is too large: {e}") from e

    LOGGER.debug("Area of %r: %s", shape, area)
    return area


def calculate_shape_area(obj: Any) -> float:
    """Calculate the area of a circle or rectangle given structurally.

    Args:
        obj: Anything ``coerce_shape`` accepts.

    Returns:
        The area as a float, without rounding or unit conversion.
    """
    return shape_area(coerce_shape(obj))


def compute_areas(shapes: Mapping[str, Any]) -> Dict[str, float]:
    """Compute the area of every shape in ``shapes``.

    Returns a mapping shape_id -> area in the same order as the input.
    """
    areas: Dict[str, float] = {}
    for shape_id, obj in shapes.items():
        try:
            areas[shape_id] = calculate_shape_area(obj)
        except ShapeError as e:
            raise ShapeError(f"Invalid shape '{shape_id}': {e}") from e

    LOGGER.debug("Computed %d areas", len(areas))
    return areas
