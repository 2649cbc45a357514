"""
Configuration for the shape area package
"""

# Default tags for shapes built without an explicit one
DEFAULT_CIRCLE_TAG = "circle"
DEFAULT_RECTANGLE_TAG = "rectangle"

# Outline parameters
CIRCLE_QUAD_SEGS = 64  # Segments per quarter circle in shapely outlines

# Output
AREA_DISPLAY_PRECISION = 6  # Decimal places in CLI tables

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
VERBOSE_LOG_LEVEL = "DEBUG"
