"""Core data models for shape area calculations.

This module defines the two shape variants understood by the calculator.
Both carry a descriptive ``shape`` tag which is kept for display only;
dispatch never reads it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..config import DEFAULT_CIRCLE_TAG, DEFAULT_RECTANGLE_TAG


@dataclass(frozen=True)
class Circle:
    """Represents a circle.

    Attributes:
        radius: Radius of the circle.
        shape: Descriptive tag, not used for dispatch.
    """

    radius: float
    shape: str = DEFAULT_CIRCLE_TAG


@dataclass(frozen=True)
class Rectangle:
    """Represents an axis-aligned rectangle.

    Attributes:
        height: Height of the rectangle.
        width: Width of the rectangle.
        shape: Descriptive tag, not used for dispatch.
    """

    height: float
    width: float
    shape: str = DEFAULT_RECTANGLE_TAG


Shape = Union[Circle, Rectangle]
