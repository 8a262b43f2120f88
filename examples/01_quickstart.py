from __future__ import annotations

from _infra import banner, sample_image

from traversals.shapes import Point, center_of_shape, shapes_of_image


def main() -> None:
    banner("01_quickstart: compose + read + write back")

    image = sample_image()
    centers = shapes_of_image().compose(center_of_shape())

    print("centers:", list(centers.parts_of(image)))
    print("centroid:", Point.centroid(centers.collect(image)))

    # Squares store a corner, not a center: the move is written back for them.
    centers.traverse(image, lambda c: c.add(Point(10, 0)))
    print("moved:", centers.collect(image))

    second = shapes_of_image().only_at(1).compose(center_of_shape())
    print("second shape's center:", second.first(image))


if __name__ == "__main__":
    main()
