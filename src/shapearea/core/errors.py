"""Exceptions raised by the shape area package."""


class ShapeError(ValueError):
    """Raised when a value cannot be read as a circle or a rectangle."""

    pass
