"""Bookstores grouped by blank lines in a file, queried by price and author."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple, Union

PathLike = Union[str, Path]

_PRICE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(\S*)")
_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Book:
    title: str
    author: str
    price: float
    currency: str


@dataclass
class Bookstore:
    city: str = ""
    name: str = ""
    books: List[Book] = field(default_factory=list)


def parse_line(line: str) -> Tuple[str, str, Book]:
    """Split ``city"name"title"author" price currency`` into its parts.

    Missing text fields are empty; a price that is not a number reads as 0
    and leaves the currency empty.
    """
    parts = line.rstrip("\r\n").split('"', 4)
    parts += [""] * (5 - len(parts))
    city, name, title, author, rest = parts
    found = _PRICE.match(rest)
    if found is None:
        price, currency = 0.0, ""
    else:
        price, currency = float(found.group(1)), found.group(2)
    return city, name, Book(title, author, price, currency)


class BookstoreManager:
    """Holds bookstores and answers questions about their books."""

    def __init__(self, bookstores: Iterable[Bookstore] = ()) -> None:
        self.bookstores: List[Bookstore] = list(bookstores)

    def read_file(self, path: PathLike) -> None:
        """Append the bookstores in ``path``; an empty line ends a bookstore."""
        current = Bookstore()
        with open(path, encoding="utf-8") as stream:
            for raw in stream:
                line = raw.rstrip("\r\n")
                if not line:
                    if current.books:
                        self.bookstores.append(current)
                    current = Bookstore()
                    continue
                city, name, book = parse_line(line)
                current.city, current.name = city, name
                current.books.append(book)
        if current.books:
            self.bookstores.append(current)

    def find_bookstore(self, name: str) -> Optional[Bookstore]:
        return next((store for store in self.bookstores if store.name == name), None)

    def total_cost(self, bookstore: Bookstore) -> float:
        return sum((book.price for book in bookstore.books), 0.0)

    def find_min_max(self, bookstore: Bookstore) -> Tuple[Book, Book]:
        """The first cheapest and the last most expensive book."""
        if not bookstore.books:
            raise ValueError(f"bookstore {bookstore.name!r} has no books")
        cheapest = min(bookstore.books, key=lambda b: b.price)
        dearest = max(reversed(bookstore.books), key=lambda b: b.price)
        return cheapest, dearest

    def find_bookstores_by_num_books(self, num_books: int) -> List[Bookstore]:
        """Bookstores holding more than ``num_books`` books."""
        return [store for store in self.bookstores if len(store.books) > num_books]

    def find_books_by_author(self, author: str) -> List[Book]:
        """The author's books across all bookstores, in store order."""
        return [
            book
            for store in self.bookstores
            for book in store.books
            if book.author == author
        ]

    def count_books_by_author_and_price_range(
        self, author: str, min_price: float, max_price: float
    ) -> int:
        """Number of the author's books priced within the closed range."""
        return sum(
            1
            for book in self.find_books_by_author(author)
            if min_price <= book.price <= max_price
        )

    def write_books_to_file(self, author: str, directory: PathLike = ".") -> Path:
        """Write ``title price currency`` lines to ``books_<author>.txt``."""
        path = Path(directory) / f"books_{author}.txt"
        with open(path, "w", encoding="utf-8") as out:
            out.writelines(
                f"{book.title} {_fmt(book.price)} {book.currency}\n"
                for book in self.find_books_by_author(author)
            )
        return path


class _Answers:
    """Whitespace-separated answers read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._read(stream)

    @staticmethod
    def _read(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def word(self) -> str:
        return next(self._tokens, "")

    def _number(self, pattern: "re.Pattern[str]", convert):
        found = pattern.fullmatch(self.word()) or None
        return convert(found.group(1)) if found else convert("0")

    def integer(self) -> int:
        return self._number(_INT, int)

    def real(self) -> float:
        return self._number(_FLOAT, float)


def _ask(prompt: str) -> None:
    sys.stdout.write(prompt)
    sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Query bookstores interactively.")
    parser.add_argument("input", nargs="?", default="BOOKSTORY.txt")
    parser.add_argument("--directory", default=".", help="where to write the author's list")
    args = parser.parse_args(argv)

    manager = BookstoreManager()
    try:
        manager.read_file(args.input)
    except OSError:
        print(f"Failed to open file {args.input}")

    answers = _Answers(sys.stdin)

    _ask("Enter the name of the bookstore: ")
    name = answers.word()
    store = manager.find_bookstore(name)
    if store is None or not store.books:
        print("Bookstore not found.")
    else:
        print(
            f"Total cost of books at {name}: "
            f"{_fmt(manager.total_cost(store))} {store.books[0].currency}"
        )
        cheapest, dearest = manager.find_min_max(store)
        print(
            f"The cheapest book at {name}: {cheapest.title} by {cheapest.author} "
            f"({_fmt(cheapest.price)} {cheapest.currency})"
        )
        print(
            f"The most expensive book at {name}: {dearest.title} by {dearest.author} "
            f"({_fmt(dearest.price)} {dearest.currency})"
        )

    _ask("Enter the minimum number of books: ")
    num_books = answers.integer()
    big = manager.find_bookstores_by_num_books(num_books)
    if not big:
        print(f"No bookstores found with more than {num_books} books.")
    else:
        print(f"Bookstores with more than {num_books} books:")
        for found in big:
            print(f"- {found.name} in {found.city}")

    _ask("Enter the name of the author: ")
    author = answers.word()
    if not manager.find_books_by_author(author):
        print(f"No books found for author {author}.")
    else:
        try:
            manager.write_books_to_file(author, args.directory)
        except OSError:
            print(f"Failed to open file for writing: books_{author}.txt")
        else:
            print(f"Books by {author} written to file: books_{author}.txt")

    _ask("Enter the name of the author: ")
    author = answers.word()
    _ask("Enter the minimum price: ")
    min_price = answers.real()
    _ask("Enter the maximum price: ")
    max_price = answers.real()
    count = manager.count_books_by_author_and_price_range(author, min_price, max_price)
    print(
        f"Number of books by {author} with price between "
        f"{_fmt(min_price)} and {_fmt(max_price)}: {count}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())