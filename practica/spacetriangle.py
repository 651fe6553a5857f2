"""Facts about a triangle given by three points in space."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Sequence, TextIO, Tuple

PI = 3.1415926535
GRAD = 180

ERROR_MESSAGE = "Виникла технічна помилка. Будь ласка, спробуйте ще раз через деякий час."
CANNOT_FORM = "Error: трикутник не можливо утворити."
UNDETERMINED_MESSAGE = "Тип трикутника встановити неможливо."


class SideType(Enum):
    ISOSCELES = "рівнобедрений"
    EQUILATERAL = "рівносторонній"
    SCALENE = "різносторонній"


class AngleType(Enum):
    RIGHT = "прямокутний"
    ACUTE = "гострокутний"
    OBTUSE = "тупокутний"
    UNDETERMINED = "невизначений"


@dataclass(frozen=True)
class Point3:
    x: float
    y: float
    z: float

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Point3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        return math.sqrt(self.dot(self))


def _ratio(num: float, den: float) -> float:
    if den == 0:
        return math.nan
    return num / den


@dataclass(frozen=True)
class SpaceTriangle:
    a: Point3
    b: Point3
    c: Point3

    def vectors(self) -> Dict[str, Point3]:
        """The six edge vectors, keyed by their names."""
        a, b, c = self.a, self.b, self.c
        return {"AB": b - a, "BA": a - b, "BC": c - b, "CB": b - c, "AC": c - a, "CA": a - c}

    def side_lengths(self) -> Dict[str, float]:
        return {
            "AB": (self.b - self.a).norm(),
            "BC": (self.c - self.b).norm(),
            "AC": (self.c - self.a).norm(),
        }

    def cosines(self) -> Tuple[float, float, float]:
        """Cosines of the angles at A, B and C."""
        a, b, c = self.a, self.b, self.c
        lengths = self.side_lengths()
        ab, bc, ac = lengths["AB"], lengths["BC"], lengths["AC"]
        cos_a = _ratio((b - a).dot(c - a), ab * ac)
        cos_b = _ratio((c - b).dot(a - b), ab * bc)
        cos_c = _ratio((a - c).dot(b - c), bc * ac)
        return cos_a, cos_b, cos_c

    def exists(self) -> bool:
        """Triangle inequalities hold and the cosines sum to pi."""
        lengths = self.side_lengths()
        ab, bc, ac = lengths["AB"], lengths["BC"], lengths["AC"]
        cos_a, cos_b, cos_c = self.cosines()
        return ac < ab + bc and ab < ac + bc and bc < ab + ac and cos_a + cos_c + cos_b == PI

    def side_type(self) -> SideType:
        lengths = self.side_lengths()
        ab, bc, ac = lengths["AB"], lengths["BC"], lengths["AC"]
        if ab == bc == ac:
            return SideType.EQUILATERAL
        if ab == bc or bc == ac or ac == ab:
            return SideType.ISOSCELES
        return SideType.SCALENE

    def angle_type(self) -> AngleType:
        lengths = self.side_lengths()
        ab, bc, ac = lengths["AB"], lengths["BC"], lengths["AC"]
        for longest, p, q in ((ab, bc, ac), (ac, bc, ab), (bc, ab, ac)):
            if longest > p and longest > q:
                square, others = longest * longest, p * p + q * q
                if square == others:
                    return AngleType.RIGHT
                if square < others:
                    return AngleType.ACUTE
                return AngleType.OBTUSE
        return AngleType.UNDETERMINED

    def angles(self) -> Dict[str, Tuple[float, float]]:
        """Per vertex, the cosine value and that value scaled by 180/pi."""
        return {
            name: (value, value * (GRAD / PI))
            for name, value in zip("ABC", self.cosines())
        }


def _fmt(value: float) -> str:
    return format(value, "g")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Input:
    def __init__(self, stream: TextIO) -> None:
        self._tokens = _tokens(stream)

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError from None

    def number(self) -> float:
        return float(self.word())


def _read_point(source: _Input, name: str, out: TextIO) -> Point3:
    print(f"\n       Введіть координати точки [{name}]", file=out)
    print("\nВведіть координату [x]: ", file=out)
    x = source.number()
    print("Введіть координату [y]: ", file=out)
    y = source.number()
    print("Введіть координату [z]: ", file=out)
    z = source.number()
    return Point3(x, y, z)


def _report(triangle: SpaceTriangle, operation: str, out: TextIO) -> None:
    if operation == "1":
        state = "існує" if triangle.exists() else "не існує"
        print(f"Дійсність трикутника: {state}.", file=out)
    elif operation == "2":
        print("Координати векторів: ", file=out)
        for name, vector in triangle.vectors().items():
            coords = ";".join(_fmt(v) for v in vector)
            tail = " \n" if name in ("BC", "AC") else ""
            print(f"{name} = [{coords}]{tail}", file=out)
    elif operation == "3":
        print("Довжини сторін: ", file=out)
        for name, length in triangle.side_lengths().items():
            print(f"|{name}| = {_fmt(length)}", file=out)
    elif operation == "4":
        if triangle.exists():
            print(f"Тип трикутника: {triangle.side_type().value}.", file=out)
        else:
            print(CANNOT_FORM, file=out)
    elif operation == "5":
        if triangle.exists():
            kind = triangle.angle_type()
            if kind is AngleType.UNDETERMINED:
                print(UNDETERMINED_MESSAGE, file=out)
            else:
                print(f"Тип трикутника: {kind.value}.", file=out)
    elif operation == "6":
        if triangle.exists():
            print("\nГрадусна міра кутів: ", file=out)
            for name, (rad, grad) in triangle.angles().items():
                print(f"{name} = {_fmt(rad)} rad [{_fmt(grad)} grad]", file=out)
        else:
            print(CANNOT_FORM, file=out)
    else:
        print(ERROR_MESSAGE, file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    out = sys.stdout
    source = _Input(sys.stdin)
    out.write("\n       House:\n░░█░░░░░████████████░░░\n")
    print(
        "Вітаю! \n"
        "Ця програма доможе визначити інформацію про трикутник за допомогою обробки координат. \n"
        "Натисніть [!], щоб продовжити...",
        file=out,
    )
    try:
        if source.word() != "!":
            print(ERROR_MESSAGE, file=out)
            return 1
        a, b, c = (_read_point(source, name, out) for name in "ABC")
        print(
            "\nОберіть інформацію, яку хочете дізнатися: \n"
            "№ [1] - дійсність трикутника; \n"
            "№ [2] - координати векторів; \n"
            "№ [3] - довжини сторін; \n"
            "№ [4] - тип трикутника [за сторами]; \n"
            "№ [5] - тип трикутника [за кутами]; \n"
            "№ [6] - градусна міра кутів.",
            file=out,
        )
        operation = source.word()[0]
        print("\nДля початку обробки даних натисніть [+].", file=out)
        source.word()
    except (EOFError, ValueError):
        print(ERROR_MESSAGE, file=out)
        return 1

    print("       Інформація про трикутник", file=out)
    _report(SpaceTriangle(a, b, c), operation, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())