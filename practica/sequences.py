"""Integer sequence transformations driven by positions and digit sums."""

from __future__ import annotations

import argparse
import itertools
import math
import sys
from typing import Iterable, Iterator, List, Optional, Sequence

INCREASE_BY = 5
MULTIPLE = 3
SUM_THRESHOLD = 10
SQUARE_OF = 4

_END = object()


def digit_sum(num: int) -> int:
    """Sum of the decimal digits; negative for a negative number."""
    total = sum(int(d) for d in str(abs(num)))
    return -total if num < 0 else total


def factorial(num: int) -> int:
    """Product ``2 * 3 * ... * num``; 1 for anything below 2."""
    return math.prod(range(2, num + 1))


def squared_difference(a: int, b: int) -> int:
    return (a - b) * (a - b)


def _digit_count(num: int) -> int:
    return len(str(abs(num))) if num else 0


def same_digit_count(a: int, b: int) -> bool:
    """True when both numbers have as many digits (zero has none)."""
    return _digit_count(a) == _digit_count(b)


def _integers(stream: Iterable[str]) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                return


def read_integers(path: str) -> List[int]:
    """Read whitespace-separated integers up to the first bad token.

    A file that cannot be opened gives an empty list.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            return list(_integers(stream))
    except OSError:
        return []


def write_integers(integers: Iterable[int], path: str) -> None:
    """Write each integer followed by a single space."""
    with open(path, "w", encoding="utf-8") as out:
        out.write("".join(f"{num} " for num in integers))


def increase_odd_positions(sequence: Sequence[int], x: int) -> List[int]:
    """Add ``x`` to the elements at indices 1, 3, 5, ..."""
    return [num + x if i % 2 == 1 else num for i, num in enumerate(sequence)]


def replace_even_at_multiples(sequence: Sequence[int], multiple: int) -> List[int]:
    """Replace even elements whose index is a multiple of ``multiple`` by the last element."""
    if not sequence:
        return []
    last = sequence[-1]
    return [
        last if i % multiple == 0 and num % 2 == 0 else num
        for i, num in enumerate(sequence)
    ]


def remove_odd_positions_below(sequence: Sequence[int], threshold: int) -> List[int]:
    """Drop elements at odd indices whose digit sum is below ``threshold``."""
    return [
        num
        for i, num in enumerate(sequence)
        if not (i % 2 == 1 and digit_sum(num) < threshold)
    ]


def move_equal_to_front(sequence: Iterable[int], value: int) -> List[int]:
    """Stably move the elements equal to ``value`` squared to the front."""
    target = squared_difference(value, 0)
    items = list(sequence)
    return [n for n in items if n == target] + [n for n in items if n != target]


def _unique_consecutive(items: Iterable[int]) -> List[int]:
    return [key for key, _ in itertools.groupby(items)]


def sort_by_digit_sum_unique(sequence: Iterable[int]) -> List[int]:
    """Sort by digit sum, then drop consecutive duplicates."""
    return _unique_consecutive(sorted(sequence, key=digit_sum))


def _series_term(num: int, x: float) -> float:
    term = x**num / factorial(num)
    return term if num % 2 == 0 else -term


def cosine_terms(sequence: Iterable[int], x: float, count: int) -> List[float]:
    """Signed terms ``x**n / n!`` for the first ``count`` elements, padded with zeros."""
    terms = [_series_term(num, x) for num in itertools.islice(sequence, max(count, 0))]
    return terms + [0.0] * (count - len(terms))


def intersect_by_digits(first: Iterable[int], second: Iterable[int]) -> List[int]:
    """Sorted-range intersection using "same digit count" as the ordering."""
    result = []
    it1, it2 = iter(first), iter(second)
    a, b = next(it1, _END), next(it2, _END)
    while a is not _END and b is not _END:
        if same_digit_count(a, b):
            a = next(it1, _END)
        else:
            if not same_digit_count(b, a):
                result.append(a)
                a = next(it1, _END)
            b = next(it2, _END)
    return result


def inner_product_squares(a: Iterable[int], b: Iterable[int]) -> int:
    """Sum of squared differences of paired elements."""
    return sum(squared_difference(x, y) for x, y in zip(a, b))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Transform a sequence of integers.")
    parser.add_argument("input", nargs="?", default="input2.txt")
    parser.add_argument("output", nargs="?", default="output.txt")
    args = parser.parse_args(argv)

    sequence = read_integers(args.input)
    sequence = increase_odd_positions(sequence, INCREASE_BY)
    sequence = replace_even_at_multiples(sequence, MULTIPLE)
    sequence = remove_odd_positions_below(sequence, SUM_THRESHOLD)
    sequence = move_equal_to_front(sequence, SQUARE_OF)
    sequence = sort_by_digit_sum_unique(sequence)
    write_integers(sequence, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())