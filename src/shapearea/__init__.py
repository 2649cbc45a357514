"""Shape Area - area calculations for circles and rectangles."""

__version__ = "0.1.0"

from .core.errors import ShapeError
from .core.model import Circle, Rectangle, Shape
from .geom.areas import calculate_shape_area, coerce_shape, compute_areas, shape_area
from .geom.polygon import shape_outline, shape_perimeter

__all__ = [
    "Circle",
    "Rectangle",
    "Shape",
    "ShapeError",
    "calculate_shape_area",
    "coerce_shape",
    "compute_areas",
    "shape_area",
    "shape_outline",
    "shape_perimeter",
]
