"""Triangles read from a file, ordered by area and filtered by perimeter."""

from __future__ import annotations

import argparse
import math
import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO

MIN_PERIMETER = 10.0
MAX_PERIMETER = 1000.0


@dataclass(frozen=True)
class Triangle:
    """A triangle given by the lengths of its sides."""

    a: float
    b: float
    c: float

    def perimeter(self) -> float:
        return self.a + self.b + self.c

    def area(self) -> float:
        """Heron's formula; NaN when the sides cannot form a triangle."""
        s = self.perimeter() / 2.0
        product = s * (s - self.a) * (s - self.b) * (s - self.c)
        return math.sqrt(product) if product >= 0 else math.nan


class TriangleList:
    """A collection where new triangles go to the front."""

    def __init__(self, triangles: Iterable[Triangle] = ()) -> None:
        self._items: deque = deque()
        for triangle in triangles:
            self.add(triangle)

    def add(self, triangle: Triangle) -> None:
        self._items.appendleft(triangle)

    def remove(self, triangle: Triangle) -> None:
        """Remove the first equal triangle; do nothing if there is none."""
        try:
            self._items.remove(triangle)
        except ValueError:
            pass

    def search(self, triangle: Triangle) -> Optional[Triangle]:
        return next((t for t in self._items if t == triangle), None)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def _numbers(stream: Iterable[str]) -> Iterator[float]:
    for line in stream:
        for token in line.split():
            try:
                yield float(token)
            except ValueError:
                return


def read_triangles(stream: Iterable[str]) -> List[Triangle]:
    """Read whitespace-separated side triples until the first bad token."""
    numbers = _numbers(stream)
    return [Triangle(a, b, c) for a, b, c in zip(numbers, numbers, numbers)]


def filter_by_perimeter(
    triangles: Iterable[Triangle], min_perimeter: float, max_perimeter: float
) -> List[Triangle]:
    """Keep triangles whose perimeter lies in the closed range."""
    return [t for t in triangles if min_perimeter <= t.perimeter() <= max_perimeter]


def _fmt(value: float) -> str:
    return format(value, "g")


def _line(t: Triangle) -> str:
    return f"{_fmt(t.a)} {_fmt(t.b)} {_fmt(t.c)} {_fmt(t.area())}\n"


def format_report(triangles: Iterable[Triangle], perimeter_triangles: Iterable[Triangle]) -> str:
    parts = ["Triangles sorted by area:\n"]
    parts.extend(_line(t) for t in triangles)
    parts.append("\n")
    parts.append("Triangles with perimeter between 10 and 1000:\n")
    parts.extend(_line(t) for t in perimeter_triangles)
    return "".join(parts)


def _load(path: str) -> List[Triangle]:
    try:
        with open(path, encoding="utf-8") as stream:
            return read_triangles(stream)
    except FileNotFoundError:
        return []


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sort triangles by area.")
    parser.add_argument("input", nargs="?", default="triangles.txt")
    parser.add_argument("output", nargs="?", default="output.txt")
    args = parser.parse_args(argv)

    triangles = sorted(_load(args.input), key=Triangle.area)
    by_area = TriangleList(triangles)
    in_range = TriangleList(filter_by_perimeter(triangles, MIN_PERIMETER, MAX_PERIMETER))

    out: TextIO
    with open(args.output, "w", encoding="utf-8") as out:
        out.write(format_report(by_area, in_range))
    return 0


if __name__ == "__main__":
    sys.exit(main())