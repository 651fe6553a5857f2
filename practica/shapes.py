"""Flat and solid shapes with areas, perimeters and volumes."""

from __future__ import annotations

import argparse
import math
import re
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

SEPARATOR = "___________________________________"


class Shape(ABC):
    """Anything with an area and a volume."""

    @abstractmethod
    def area(self) -> float:
        """Plane area; zero for solids."""

    @abstractmethod
    def volume(self) -> float:
        """Volume; zero for flat shapes."""


class FlatShape(Shape):
    def volume(self) -> float:
        return 0.0

    @abstractmethod
    def perimeter(self) -> float:
        """Length of the boundary."""


class VolumeShape(Shape):
    def area(self) -> float:
        return 0.0

    @abstractmethod
    def surface_area(self) -> float:
        """Total area of the surface."""


@dataclass(frozen=True)
class Polygon(FlatShape):
    """A regular polygon given by side, inradius and number of sides."""

    side: float
    radius: float
    number_of_sides: int

    def area(self) -> float:
        return self.side * self.number_of_sides * self.radius * 0.5

    def perimeter(self) -> float:
        return self.side * self.number_of_sides


@dataclass(frozen=True)
class Circle(FlatShape):
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


@dataclass(frozen=True)
class Parallelepiped(VolumeShape):
    length: float
    width: float
    height: float

    def volume(self) -> float:
        return self.length * self.width * self.height

    def surface_area(self) -> float:
        l, w, h = self.length, self.width, self.height
        return 2 * (l * w + w * h + h * l)


@dataclass(frozen=True)
class Cone(VolumeShape):
    radius: float
    height: float

    def volume(self) -> float:
        return math.pi * self.radius * self.radius * self.height / 3.0

    def surface_area(self) -> float:
        r, h = self.radius, self.height
        return math.pi * r * (r + math.sqrt(h * h + r * r))


def sort_flat_by_area(shapes: Iterable[FlatShape]) -> List[FlatShape]:
    """Flat shapes in descending order of area."""
    return sorted(shapes, key=lambda s: s.area(), reverse=True)


def sort_by_volume(shapes: Iterable[VolumeShape]) -> List[VolumeShape]:
    """Solids in ascending order of volume."""
    return sorted(shapes, key=lambda s: s.volume())


def _match(shape: Shape, value: float) -> Optional[Tuple[str, float]]:
    if isinstance(shape, Circle) and shape.radius == value:
        return "Circle", shape.area()
    if isinstance(shape, Parallelepiped) and shape.height == value:
        return "Paralelepiped", shape.surface_area()
    if isinstance(shape, Cone) and shape.radius == value:
        return "Cone", shape.surface_area()
    if isinstance(shape, Polygon) and shape.side == value:
        return "Polygon", shape.area()
    return None


def find_by_value(shapes: Iterable[Shape], value: float) -> List[Tuple[str, float]]:
    """Shapes whose characteristic size equals ``value``, as (kind, area) pairs.

    Circles and cones are matched by radius, polygons by side and
    parallelepipeds by height.
    """
    return [m for m in (_match(s, value) for s in shapes) if m is not None]


def _figures() -> List[Shape]:
    return [
        Circle(3),
        Circle(2),
        Circle(9),
        Polygon(4, 2, 4),
        Polygon(15, 3, 20),
        Parallelepiped(1, 2, 3),
        Parallelepiped(2, 3, 4),
        Cone(2, 3),
        Cone(10, 20),
        Cone(1, 2),
    ]


def _fmt(value: float) -> str:
    return format(value, "g")


def _parse_int(text: str) -> int:
    found = re.match(r"\s*([+-]?\d+)", text)
    return int(found.group(1)) if found else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Describe a set of shapes.")
    parser.add_argument("value", nargs="?", help="geometric value to search for")
    args = parser.parse_args(argv)

    figures = _figures()
    for number, figure in enumerate(figures, start=1):
        print(f"Figure {number}")
        print(f"Area: {_fmt(figure.area())}")
        print(f"Volume: {_fmt(figure.volume())}")
        if isinstance(figure, FlatShape):
            print(f"Perimeter: {_fmt(figure.perimeter())}")
        if isinstance(figure, VolumeShape):
            print(f"Surface Area: {_fmt(figure.surface_area())}")
        print()

    flat = [f for f in figures if isinstance(f, FlatShape)]
    solid = [f for f in figures if isinstance(f, VolumeShape)]
    print(SEPARATOR + "\n")
    print("Flat shapes in descending order of areas:")
    for shape in sort_flat_by_area(flat):
        print(f"Area: {_fmt(shape.area())}")
    print("\nVolume shapes in ascending order of heights:")
    for shape in sort_by_volume(solid):
        print(f"Volume: {_fmt(shape.volume())}")
    sys.stdout.write(SEPARATOR + "\n\nInput geometric value: ")

    if args.value is not None:
        text = args.value
    else:
        sys.stdout.flush()
        text = sys.stdin.readline()
    value = _parse_int(text)

    matches = find_by_value(figures, value)
    for kind, area in matches:
        print(f"Found {kind}.")
        print(f"Area: {_fmt(area)}\n")
    if not matches:
        print("Shape not found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())