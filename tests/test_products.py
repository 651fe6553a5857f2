import io

import pytest

from practica.products import (
    Kefir,
    Meat,
    Milk,
    Sausage,
    main,
    make_product,
    read_products,
    sort_products,
)


@pytest.mark.parametrize(
    "kind, code, expected",
    [("D", 2, Kefir), ("D", 3, Milk), ("M", 4, Sausage), ("M", 5, Meat), ("X", 6, Sausage)],
)
def test_make_product_by_kind_and_parity(kind, code, expected):
    product = make_product("item", code, kind, 1.0, 1)
    assert type(product) is expected
    assert product.code == code


def test_categories():
    assert make_product("a", 3, "D", 1.0, 1) == Milk("a", 3, 1.0, 1)
    assert make_product("a", 2, "D", 1.0, 1).describe().startswith("Kefir a 2 ")
    assert make_product("a", 3, "M", 1.0, 1).describe().startswith("Meat a 3 ")


def test_read_products():
    stream = io.StringIO("Lactel 4 D 12.5 10\nBeef 7 M 99 60\n")
    assert read_products(stream) == [Kefir("Lactel", 4, 12.5, 10), Meat("Beef", 7, 99.0, 60)]


def test_read_products_stops_at_bad_record():
    stream = io.StringIO("A 1 D 2 3\nB x D 2 3\nC 5 M 1 1\n")
    assert read_products(stream) == [Milk("A", 1, 2.0, 3)]


def test_read_products_kind_glued_to_price():
    stream = io.StringIO("Milky 5 D7.5 20\n")
    assert read_products(stream) == [Milk("Milky", 5, 7.5, 20)]


def test_sort_products_descending_and_stable():
    products = [
        make_product("a", 1, "D", 1.0, 1),
        make_product("b", 5, "M", 1.0, 1),
        make_product("c", 3, "D", 1.0, 1),
        make_product("d", 5, "D", 1.0, 1),
    ]
    ordered = sort_products(products)
    assert [p.name for p in ordered] == ["b", "d", "c", "a"]
    codes = [p.code for p in ordered]
    assert codes == sorted(codes, reverse=True)


def test_describe():
    assert Kefir("Lactel", 4, 12.5, 10).describe() == "Kefir Lactel 4 (price: 12.5, stock: 10)"


def test_main(tmp_path, capsys):
    source = tmp_path / "products.txt"
    output = tmp_path / "dairy.txt"
    source.write_text(
        "Lactel 4 D 12.5 10\nCream 3 D 40 5\nBeef 7 M 99 60\nHam 8 M 10 20\n",
        encoding="utf-8",
    )
    assert main([str(source), str(output), "--max-price", "20"]) == 0
    assert output.read_text(encoding="utf-8").splitlines() == ["4 12.5 D Lactel"]
    printed = capsys.readouterr().out.splitlines()
    assert printed == [
        Kefir("Lactel", 4, 12.5, 10).describe(),
        Meat("Beef", 7, 99.0, 60).describe(),
    ]


def test_main_missing_input(tmp_path, capsys):
    output = tmp_path / "dairy.txt"
    assert main([str(tmp_path / "absent.txt"), str(output), "--max-price", "20"]) == 0
    assert output.read_text(encoding="utf-8") == ""
    assert capsys.readouterr().out == ""