import math

import pytest

from practica.sequences import digit_sum
from practica.sequences_v1 import (
    alternating_square_sum,
    find_common_by_length,
    generate_cosine_series,
    increase_even_values,
    main,
    move_squares_to_front,
    remove_odd_with_small_digit_sum,
    replace_even_at_multiples,
    sort_and_dedupe,
)


def test_increase_even_values():
    numbers = [1, 2, 3, 4]
    result = increase_even_values(numbers, 5)
    assert [r - n for r, n in zip(result, numbers)] == [0, 5, 0, 5]


def test_replace_even_at_multiples():
    assert replace_even_at_multiples([2, 4, 6, 8, 7], 3) == [7, 4, 6, 7, 7]


def test_remove_odd_with_small_digit_sum():
    assert remove_odd_with_small_digit_sum([11, 2, 99, 13], 10) == [2, 99]


def test_move_squares_to_front():
    assert move_squares_to_front([3, 81, 1, 81], 9) == [81, 81, 3, 1]


def test_sort_and_dedupe():
    assert sort_and_dedupe([5, 5, 14, 1]) == [1, 5, 14]
    result = sort_and_dedupe([19, 28, 3, 3, 100, 55])
    sums = [digit_sum(n) for n in result]
    assert sums == sorted(sums)


def test_generate_cosine_series():
    series = generate_cosine_series(10, 0.5)
    assert len(series) == 10
    assert series[0] == 1.0
    assert sum(series) == pytest.approx(math.cos(0.5))
    assert all(a * b < 0 for a, b in zip(series, series[1:]))
    assert generate_cosine_series(0, 0.5) == []


def test_find_common_by_length():
    assert find_common_by_length([5, 12, 345], [1.5, 99.9]) == [5, 12]
    assert find_common_by_length([-1], [10.0]) == [-1]
    assert find_common_by_length([5], []) == []


def test_alternating_square_sum():
    assert alternating_square_sum([3], [-3]) == 0
    assert alternating_square_sum([1, 2], [1, 0]) == 0
    assert alternating_square_sum([1, 2, 3], [1, 0]) == alternating_square_sum([1, 2], [1, 0])


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")]) == 1
    assert "Помилка відкриття файлу!" in capsys.readouterr().out


def test_main_too_few(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("1 2 3", encoding="utf-8")
    assert main([str(src), str(tmp_path / "out.txt")]) == 1
    assert "Кількість елементів менша за 10!" in capsys.readouterr().out


def test_main_success(tmp_path, capsys):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("81 2 19 4 55 6 77 8 99 10 11 12\n", encoding="utf-8")
    assert main([str(src), str(dst)]) == 0
    values = [int(line) for line in dst.read_text(encoding="utf-8").splitlines()]
    sums = [digit_sum(v) for v in values]
    assert sums == sorted(sums)
    out = capsys.readouterr().out
    assert "Результати обробки:" in out
    assert "Результат обчислення виразу: " in out