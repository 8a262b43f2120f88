"""Images: ordered collections of shapes."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..traversal import Traversal, identity_for
from .shape import Shape


def _no_shapes() -> list[Shape]:
    return []


@dataclass(slots=True)
class Image:
    shapes: list[Shape] = field(default_factory=_no_shapes)


def shapes_of_image() -> Traversal[Image, Shape]:
    """Every shape of an image, in list order."""
    return identity_for(Image).flat_map(lambda image: image.shapes)


__all__ = ("Image", "shapes_of_image")
