"""
Shapes
======

A closed set of shape variants. Every shape has a center; some store it,
some compute it from other fields and translate on update.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from ..traversal import Traversal, identity_for
from .point import Point


@dataclass(slots=True)
class Circle:
    """Circle around a stored center."""

    center: Point
    radius: float


@dataclass(slots=True)
class Square:
    """Square whose center is derived from its top-left corner and size."""

    top_left: Point
    size: float

    @property
    def center(self) -> Point:
        """Fresh point; mutating it does not move the square."""
        return Point(self.size, self.size).scale(0.5).add(self.top_left)

    @center.setter
    def center(self, new_center: Point) -> None:
        # top_left += new_center - center
        self.top_left.add(self.center.scale(-1).add(new_center))


type Shape = Circle | Square


def center_of_circle() -> Traversal[Circle, Point]:
    """The stored center. Mutations of the part mutate the circle."""
    return identity_for(Circle).map(lambda circle: circle.center)


def _set_center(square: Square, center: Point) -> None:
    square.center = center


def center_of_square() -> Traversal[Square, Point]:
    """The computed center, written back by translating the square."""
    return identity_for(Square).map(lambda square: square.center, _set_center)


def _variant[T](cls: type[T]) -> Traversal[Shape, T]:
    def narrow(shape: Shape) -> T:
        return typing.cast(T, shape)

    shapes: Traversal[Shape, Shape] = identity_for()
    return shapes.filter(lambda shape: isinstance(shape, cls)).map(narrow)


def center_of_shape() -> Traversal[Shape, Point]:
    """Center of any shape variant, readable and writable."""
    return (
        _variant(Circle).compose(center_of_circle())
        .and_also(_variant(Square).compose(center_of_square()))
    )


__all__ = (
    "Circle",
    "Shape",
    "Square",
    "center_of_circle",
    "center_of_shape",
    "center_of_square",
)
