import io

import pytest

from practica.bookstore_manager import (
    Book,
    Bookstore,
    BookstoreManager,
    main,
    parse_line,
)

SAMPLE = (
    'Kyiv"Knigarnya"Kobzar"Shevchenko" 150 UAH\n'
    'Kyiv"Knigarnya"Eneida"Kotliarevsky" 90 UAH\n'
    'Kyiv"Knigarnya"Zapovit"Shevchenko" 300 UAH\n'
    "\n"
    'Lviv"Bukva"Kobzar"Shevchenko" 120 UAH\n'
    'Lviv"Bukva"Lisova"Ukrainka" 300 UAH\n'
)


@pytest.fixture
def manager(tmp_path):
    path = tmp_path / "stores.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    result = BookstoreManager()
    result.read_file(path)
    return result


def test_parse_line_fields():
    city, name, book = parse_line('Kyiv"Knigarnya"Kobzar"Shevchenko" 150 UAH')
    assert (city, name) == ("Kyiv", "Knigarnya")
    assert book == Book("Kobzar", "Shevchenko", 150.0, "UAH")


def test_parse_line_price_glued_to_currency():
    _, _, book = parse_line('A"B"C"D"12.5EUR\r\n')
    assert book.price == 12.5
    assert book.currency == "EUR"


def test_parse_line_bad_price_reads_zero():
    _, _, book = parse_line('A"B"C"D" abc')
    assert book.price == 0.0
    assert book.currency == ""


def test_read_file_groups_by_blank_line(manager):
    assert [s.name for s in manager.bookstores] == ["Knigarnya", "Bukva"]
    assert [len(s.books) for s in manager.bookstores] == [3, 2]
    assert [s.city for s in manager.bookstores] == ["Kyiv", "Lviv"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        BookstoreManager().read_file(tmp_path / "absent.txt")


def test_find_bookstore(manager):
    assert manager.find_bookstore("Bukva").city == "Lviv"
    assert manager.find_bookstore("Nowhere") is None


def test_total_cost(manager):
    store = manager.find_bookstore("Knigarnya")
    assert manager.total_cost(store) == 150 + 90 + 300


def test_find_min_max_ties():
    books = [
        Book("a", "x", 5, "UAH"),
        Book("b", "x", 1, "UAH"),
        Book("c", "x", 1, "UAH"),
        Book("d", "x", 9, "UAH"),
        Book("e", "x", 9, "UAH"),
    ]
    store = Bookstore("City", "Shop", books)
    cheapest, dearest = BookstoreManager([store]).find_min_max(store)
    assert cheapest.title == "b"
    assert dearest.title == "e"


def test_find_min_max_empty_raises():
    store = Bookstore("City", "Empty")
    with pytest.raises(ValueError):
        BookstoreManager([store]).find_min_max(store)


@pytest.mark.parametrize(
    "limit, names",
    [(1, ["Knigarnya", "Bukva"]), (2, ["Knigarnya"]), (3, [])],
)
def test_find_bookstores_by_num_books(manager, limit, names):
    assert [s.name for s in manager.find_bookstores_by_num_books(limit)] == names


def test_find_books_by_author(manager):
    books = manager.find_books_by_author("Shevchenko")
    assert [(b.title, b.price) for b in books] == [
        ("Kobzar", 150.0),
        ("Zapovit", 300.0),
        ("Kobzar", 120.0),
    ]
    assert manager.find_books_by_author("Nobody") == []


def test_count_in_price_range(manager):
    assert manager.count_books_by_author_and_price_range("Shevchenko", 100, 200) == 2
    assert manager.count_books_by_author_and_price_range("Shevchenko", 150, 150) == 1
    assert manager.count_books_by_author_and_price_range("Nobody", 0, 1000) == 0


def test_write_books_to_file(manager, tmp_path):
    path = manager.write_books_to_file("Shevchenko", tmp_path)
    assert path.name == "books_Shevchenko.txt"
    assert path.read_text(encoding="utf-8") == (
        "Kobzar 150 UAH\nZapovit 300 UAH\nKobzar 120 UAH\n"
    )


def test_main_session(tmp_path, monkeypatch, capsys):
    data = tmp_path / "stores.txt"
    data.write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setattr(
        "sys.stdin", io.StringIO("Knigarnya\n2\nShevchenko\nShevchenko 100 200\n")
    )
    assert main([str(data), "--directory", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Total cost of books at Knigarnya: 540 UAH" in out
    assert "The cheapest book at Knigarnya: Eneida by Kotliarevsky (90 UAH)" in out
    assert "- Knigarnya in Kyiv" in out
    assert "Number of books by Shevchenko with price between 100 and 200: 2" in out
    assert (tmp_path / "books_Shevchenko.txt").exists()


def test_main_unknown_store(tmp_path, monkeypatch, capsys):
    data = tmp_path / "stores.txt"
    data.write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("Nowhere\n5\nNobody\nNobody 1 2\n"))
    assert main([str(data), "--directory", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Bookstore not found." in out
    assert "No bookstores found with more than 5 books." in out
    assert "No books found for author Nobody." in out