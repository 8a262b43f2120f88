from __future__ import annotations

from traversals.shapes import Circle, Image, Point, Square


def sample_image() -> Image:
    return Image([
        Circle(Point(3, 4), 5),
        Square(Point(0, 0), 2),
        Circle(Point(-1, 1), 0.5),
    ])


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
