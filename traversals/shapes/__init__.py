"""
Geometry domain: points, shapes and images, with traversals over their
centers and contents.
"""

from .image import Image, shapes_of_image
from .point import Point
from .shape import (
    Circle,
    Shape,
    Square,
    center_of_circle,
    center_of_shape,
    center_of_square,
)

__all__ = (
    "Circle",
    "Image",
    "Point",
    "Shape",
    "Square",
    "center_of_circle",
    "center_of_shape",
    "center_of_square",
    "shapes_of_image",
)
