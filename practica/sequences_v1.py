"""Value-driven variant of the integer sequence transformations."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, List, Optional, Sequence

from . import sequences as _base
from .sequences import digit_sum

INCREASE_BY = 5
MULTIPLE = 3
SUM_THRESHOLD = 10
SQUARE = 9
SERIES_COUNT = 10
SERIES_X = 0.5
MIN_COUNT = 10

OPEN_ERROR = "Помилка відкриття файлу!"
TOO_FEW = "Кількість елементів менша за 10!"


def increase_even_values(numbers: Iterable[int], x: int) -> List[int]:
    """Add ``x`` to every even value."""
    return [num + x if num % 2 == 0 else num for num in numbers]


def replace_even_at_multiples(numbers: Sequence[int], multiple: int) -> List[int]:
    """Replace even values at indices divisible by ``multiple`` by the last value."""
    return _base.replace_even_at_multiples(numbers, multiple)


def remove_odd_with_small_digit_sum(numbers: Iterable[int], threshold: int) -> List[int]:
    """Drop odd values whose digit sum is below ``threshold``."""
    return [n for n in numbers if not (n % 2 != 0 and digit_sum(n) < threshold)]


def move_squares_to_front(numbers: Iterable[int], square: int) -> List[int]:
    """Stably move values equal to ``square * square`` to the front."""
    target = square * square
    items = list(numbers)
    return [n for n in items if n == target] + [n for n in items if n != target]


def sort_and_dedupe(numbers: Iterable[int]) -> List[int]:
    """Sort by digit sum, then drop consecutive duplicates."""
    return _base.sort_by_digit_sum_unique(numbers)


def generate_cosine_series(count: int, x: float) -> List[float]:
    """The first ``count`` terms of the Maclaurin series of cos(x)."""
    terms = []
    term = 1.0
    for n in range(count):
        terms.append(term)
        term *= -1.0 * x * x / ((2 * n + 2) * (2 * n + 1))
    return terms


def find_common_by_length(sequence1: Iterable[int], sequence2: Iterable[float]) -> List[int]:
    """Values of ``sequence1`` whose text length matches that of some truncated value of ``sequence2``."""
    lengths = {len(str(int(value))) for value in sequence2}
    return [num for num in sequence1 if len(str(num)) in lengths]


def alternating_square_sum(a: Iterable[int], b: Iterable[int]) -> int:
    """``(a0+b0)^2 - (a1+b1)^2 + ...`` over the paired elements."""
    return sum(
        (x + y) * (x + y) * (1 if i % 2 == 0 else -1)
        for i, (x, y) in enumerate(zip(a, b))
    )


def _integers(stream: Iterable[str]) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                return


def _fmt(value: float) -> str:
    return format(value, "g")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Transform a sequence of integers.")
    parser.add_argument("input", nargs="?", default="input_2.txt")
    parser.add_argument("output", nargs="?", default="output.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as stream:
            numbers = list(_integers(stream))
    except OSError:
        print(OPEN_ERROR)
        return 1

    if len(numbers) < MIN_COUNT:
        print(TOO_FEW)
        return 1

    numbers = increase_even_values(numbers, INCREASE_BY)
    numbers = replace_even_at_multiples(numbers, MULTIPLE)
    numbers = remove_odd_with_small_digit_sum(numbers, SUM_THRESHOLD)
    numbers = move_squares_to_front(numbers, SQUARE)
    numbers = sort_and_dedupe(numbers)

    try:
        with open(args.output, "w", encoding="utf-8") as out:
            out.write("".join(f"{num}\n" for num in numbers))
    except OSError:
        print(OPEN_ERROR)
        return 1

    generated = generate_cosine_series(SERIES_COUNT, SERIES_X)
    common = find_common_by_length(numbers, generated)
    result = alternating_square_sum(numbers, common)

    print("Результати обробки:")
    print("Елементи списку після обробки збережено у файл output.txt.")
    print("Згенерована послідовність: " + "".join(f"{_fmt(v)} " for v in generated))
    print("Елементи, які входять одночасно у дві послідовності: " + "".join(f"{n} " for n in common))
    print(f"Результат обчислення виразу: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())