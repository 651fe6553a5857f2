"""Dairy and meat products read from a file and filtered by price and stock."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import ClassVar, Iterable, List, Optional, Sequence, TextIO

DEFAULT_MIN_STOCK = 50


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Product:
    name: str
    code: int
    price: float
    stock: int

    KIND: ClassVar[str] = ""
    LABEL: ClassVar[str] = "Product"

    def describe(self) -> str:
        return (
            f"{self.LABEL} {self.name} {self.code} "
            f"(price: {_fmt(self.price)}, stock: {self.stock})"
        )


class DairyProduct(Product):
    KIND = "D"
    LABEL = "Dairy product"


class MeatProduct(Product):
    KIND = "M"
    LABEL = "Meat product"


class Kefir(DairyProduct):
    LABEL = "Kefir"


class Milk(DairyProduct):
    LABEL = "Milk"


class Sausage(MeatProduct):
    LABEL = "Sausage"


class Meat(MeatProduct):
    LABEL = "Meat"


def make_product(name: str, code: int, kind: str, price: float, stock: int) -> Product:
    """Kind ``D`` gives kefir (even code) or milk; anything else sausage (even) or meat."""
    if kind == "D":
        cls = Kefir if code % 2 == 0 else Milk
    else:
        cls = Sausage if code % 2 == 0 else Meat
    return cls(name, code, price, stock)


class _Scanner:
    """Reads words, single characters and numbers from text, skipping whitespace."""

    _WORD = re.compile(r"\s*(\S+)")
    _CHAR = re.compile(r"\s*(\S)")
    _INT = re.compile(r"\s*([+-]?\d+)")
    _FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _take(self, pattern: "re.Pattern[str]") -> str:
        found = pattern.match(self._text, self._pos)
        if found is None:
            raise ValueError(f"unexpected input at offset {self._pos}")
        self._pos = found.end()
        return found.group(1)

    def word(self) -> str:
        return self._take(self._WORD)

    def char(self) -> str:
        return self._take(self._CHAR)

    def integer(self) -> int:
        return int(self._take(self._INT))

    def number(self) -> float:
        return float(self._take(self._FLOAT))


def read_products(stream: TextIO) -> List[Product]:
    """Read ``name code kind price stock`` records up to the first bad one."""
    scanner = _Scanner(stream.read())
    products = []
    while True:
        try:
            name = scanner.word()
            code = scanner.integer()
            kind = scanner.char()
            price = scanner.number()
            stock = scanner.integer()
        except ValueError:
            return products
        products.append(make_product(name, code, kind, price, stock))


def sort_products(products: Iterable[Product]) -> List[Product]:
    """Products in descending order of code; equal codes keep their order."""
    return sorted(products, key=lambda p: p.code, reverse=True)


def _load(path: str) -> List[Product]:
    try:
        with open(path, encoding="utf-8") as stream:
            return read_products(stream)
    except OSError:
        return []


def _ask_max_price() -> float:
    sys.stdout.write("Enter maximum price for dairy products: ")
    sys.stdout.flush()
    line = sys.stdin.readline()
    try:
        return _Scanner(line).number()
    except ValueError:
        return 0.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Filter dairy and meat products.")
    parser.add_argument("input", nargs="?", default="products.txt")
    parser.add_argument("output", nargs="?", default="dairy_products.txt")
    parser.add_argument("--max-price", type=float, default=None)
    parser.add_argument("--min-stock", type=int, default=DEFAULT_MIN_STOCK)
    args = parser.parse_args(argv)

    products = sort_products(_load(args.input))
    max_price = args.max_price if args.max_price is not None else _ask_max_price()

    with open(args.output, "w", encoding="utf-8") as out:
        for product in products:
            if isinstance(product, DairyProduct) and product.price <= max_price:
                print(product.describe())
                out.write(f"{product.code} {_fmt(product.price)} {product.KIND} {product.name}\n")

    for product in products:
        if isinstance(product, MeatProduct) and product.stock > args.min_stock:
            print(product.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())