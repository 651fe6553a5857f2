import io

from practica.triangles import (
    Triangle,
    TriangleList,
    filter_by_perimeter,
    format_report,
    main,
    read_triangles,
)


def test_perimeter():
    assert Triangle(3.0, 4.0, 5.0).perimeter() == 12.0


def test_area():
    assert Triangle(3.0, 4.0, 5.0).area() == 6.0


def test_sides():
    t = Triangle(3.0, 4.0, 5.0)
    assert (t.a, t.b, t.c) == (3.0, 4.0, 5.0)


def test_equality():
    assert Triangle(3.0, 4.0, 5.0) == Triangle(3.0, 4.0, 5.0)
    assert not Triangle(3.0, 4.0, 5.0) == Triangle(4.0, 5.0, 6.0)


def test_inequality():
    assert Triangle(3.0, 4.0, 5.0) != Triangle(1.0, 2.0, 3.0)


def test_area_of_impossible_sides_is_nan():
    area = Triangle(1.0, 1.0, 5.0).area()
    assert str(area) == "nan"


def test_filter_by_perimeter():
    triangles = read_triangles(io.StringIO("3 4 5\n4 5 6\n7 8 9\n10 11 12\n"))
    result = filter_by_perimeter(triangles, 9.0, 20.0)
    assert result == [Triangle(3, 4, 5), Triangle(4, 5, 6)]


def test_filter_by_perimeter_no_match():
    triangles = read_triangles(io.StringIO("3 4 5\n4 5 6\n7 8 9\n10 11 12\n"))
    assert filter_by_perimeter(triangles, 100.0, 200.0) == []


def test_read_triangles_stops_at_bad_token():
    triangles = read_triangles(io.StringIO("3 4 5 6 8 x 1 1 1"))
    assert triangles == [Triangle(3, 4, 5)]


def test_list_adds_to_front():
    items = TriangleList()
    items.add(Triangle(3, 4, 5))
    items.add(Triangle(6, 8, 10))
    assert list(items) == [Triangle(6, 8, 10), Triangle(3, 4, 5)]
    assert len(items) == 2


def test_list_remove_and_search():
    items = TriangleList([Triangle(3, 4, 5), Triangle(6, 8, 10)])
    assert items.search(Triangle(3, 4, 5)) == Triangle(3, 4, 5)
    items.remove(Triangle(3, 4, 5))
    assert items.search(Triangle(3, 4, 5)) is None
    assert list(items) == [Triangle(6, 8, 10)]


def test_list_remove_missing_is_ignored():
    items = TriangleList([Triangle(3, 4, 5)])
    items.remove(Triangle(1, 1, 1))
    assert list(items) == [Triangle(3, 4, 5)]


def test_format_report():
    t = Triangle(3, 4, 5)
    assert format_report([t], [t]) == (
        "Triangles sorted by area:\n3 4 5 6\n\n"
        "Triangles with perimeter between 10 and 1000:\n3 4 5 6\n"
    )


def test_main_writes_report(tmp_path):
    source = tmp_path / "triangles.txt"
    target = tmp_path / "output.txt"
    source.write_text("3 4 5\n6 8 10\n1 1 1\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == (
        "Triangles sorted by area:\n"
        "6 8 10 24\n3 4 5 6\n1 1 1 0.433013\n\n"
        "Triangles with perimeter between 10 and 1000:\n"
        "6 8 10 24\n3 4 5 6\n"
    )


def test_main_with_missing_input_writes_empty_report(tmp_path):
    target = tmp_path / "output.txt"
    assert main([str(tmp_path / "absent.txt"), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == (
        "Triangles sorted by area:\n\n"
        "Triangles with perimeter between 10 and 1000:\n"
    )