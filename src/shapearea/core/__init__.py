"""Core data models for shape area calculations."""

from .errors import ShapeError
from .model import Circle, Rectangle, Shape

__all__ = ["Circle", "Rectangle", "Shape", "ShapeError"]
