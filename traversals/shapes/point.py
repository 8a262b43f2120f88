"""Points in the plane."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

# Absolute tolerance for coordinate comparison
PRECISION = 1e-10


def _close(a: float, b: float) -> bool:
    return abs(a - b) < PRECISION


@dataclass(slots=True, eq=False)
class Point:
    """
    Mutable 2D point.

    `add` and `scale` mutate in place and return self, so a point handed out
    by a traversal can be moved and the move written back.
    """

    x: float
    y: float

    def add(self, other: Point) -> Point:
        self.x += other.x
        self.y += other.y
        return self

    def scale(self, factor: float) -> Point:
        self.x *= factor
        self.y *= factor
        return self

    def copy(self) -> Point:
        return Point(self.x, self.y)

    @staticmethod
    def centroid(points: Collection[Point]) -> Point | None:
        """Arithmetic mean of `points`; None if there are none."""
        if not points:
            return None
        result = Point(0.0, 0.0)
        for point in points:
            result.add(point)
        return result.scale(1.0 / len(points))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return _close(self.x, other.x) and _close(self.y, other.y)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"({self.x},{self.y})"


__all__ = ("PRECISION", "Point")
