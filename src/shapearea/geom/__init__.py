"""Geometry utilities for shapes.

This module provides area, perimeter and outline calculations for
circles and rectangles.
"""

from .areas import calculate_shape_area, coerce_shape, compute_areas, shape_area
from .polygon import shape_outline, shape_perimeter

__all__ = [
    "calculate_shape_area",
    "coerce_shape",
    "compute_areas",
    "shape_area",
    "shape_outline",
    "shape_perimeter",
]
