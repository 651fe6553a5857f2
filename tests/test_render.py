import pytest

from practica.render import GRADIENT, main, render_frame


def test_frame_has_requested_shape():
    rows = render_frame(12, 5, 0)
    assert len(rows) == 5
    assert all(len(row) == 12 for row in rows)


def test_frame_uses_only_gradient_characters():
    rows = render_frame(16, 8, 3)
    assert set("".join(rows)) <= set(GRADIENT)


def test_frame_is_deterministic():
    first = render_frame(10, 6, 7)
    second = render_frame(10, 6, 7)
    assert [len(row) for row in first] == [10] * 6
    assert first == second


def test_frame_shows_more_than_background():
    rows = render_frame(40, 20, 0)
    assert len(set("".join(rows))) > 1


def test_main_draws_each_frame(capsys):
    assert main(["--width", "8", "--height", "4", "--frames", "2"]) == 0
    out = capsys.readouterr().out
    assert out.count("\x1b[H") == 2


def test_main_rejects_non_positive_size():
    with pytest.raises(SystemExit):
        main(["--width", "0"])