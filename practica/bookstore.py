"""Bookstores holding priced books, compared with one another."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from itertools import pairwise
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

PathLike = Union[str, Path]

BOOKSTORE_NAME = "Knigarnya2"
OTHER_BOOKSTORE_NAME = "Knigarnya"
AUTHOR_NAME = "G.I.Lafcraft"


class NoPairFound(LookupError):
    """No pair of books with the wanted price relation exists."""


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Book:
    title: str
    author: str
    price: float
    currency: str

    def __str__(self) -> str:
        return f"{self.title} by {self.author}, price: {_fmt(self.price)} {self.currency}"


@dataclass
class Bookstore:
    """A named store with its books in the order they were added."""

    name: str
    books: List[Book] = field(default_factory=list)

    def add_book(self, book: Book) -> None:
        self.books.append(book)

    def total_cost(self) -> float:
        return sum((book.price for book in self.books), 0.0)

    def __len__(self) -> int:
        return len(self.books)

    def num_books_by_author(self, author: str) -> int:
        return sum(1 for book in self.books if book.author == author)

    def find_books_by_author(self, author: str) -> List[Book]:
        return [book for book in self.books if book.author == author]

    def write_books_by_author(self, author: str, directory: PathLike = ".") -> Path:
        """Write the author's books, one per line, to ``books_<author>.txt``."""
        path = Path(directory) / f"books_{author}.txt"
        with open(path, "w", encoding="utf-8") as out:
            out.writelines(f"{book}\n" for book in self.find_books_by_author(author))
        return path

    def find_min_price_book(self) -> Book:
        """The first of the cheapest books."""
        if not self.books:
            raise ValueError(f"bookstore {self.name!r} has no books")
        return min(self.books, key=lambda b: b.price)

    def find_max_price_book(self) -> Book:
        """The first of the most expensive books."""
        if not self.books:
            raise ValueError(f"bookstore {self.name!r} has no books")
        return max(self.books, key=lambda b: b.price)

    def has_cheaper_book(self, other: "Bookstore") -> bool:
        """True if some title here costs less than the same title in ``other``."""
        return any(
            book.title == theirs.title and book.price < theirs.price
            for book in self.books
            for theirs in other.books
        )

    def has_neighbor_books_with_double_price(self) -> bool:
        """True if some book costs exactly twice the book before it."""
        return any(nxt.price == cur.price * 2 for cur, nxt in pairwise(self.books))

    def find_first_pair_with_double_price(self, other: "Bookstore") -> Tuple[Book, Book]:
        """First (ours, theirs) pair where ours costs twice theirs."""
        for book in self.books:
            for theirs in other.books:
                if book.price == theirs.price * 2:
                    return book, theirs
        raise NoPairFound("No pair found")

    def has_subsequence(self, other: "Bookstore") -> bool:
        """True if either store's first three books occur in order in the other."""
        if len(self) < 3 or len(other) < 3:
            return False
        return is_subsequence(self.books[:3], other.books) or is_subsequence(
            other.books[:3], self.books
        )


def is_subsequence(seq: Sequence[Book], target: Sequence[Book]) -> bool:
    """True if the books of ``seq`` appear in ``target`` in the same order."""
    if len(seq) > len(target):
        return False
    remaining = iter(target)
    return all(any(book == candidate for candidate in remaining) for book in seq)


def find_bookstore_by_name(bookstores: Iterable[Bookstore], name: str) -> Optional[Bookstore]:
    return next((store for store in bookstores if store.name == name), None)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_bookstores(stream: Iterable[str]) -> List[Bookstore]:
    """Read ``city store title author price currency`` records.

    Books are grouped by store name in order of first appearance; reading
    stops at the first record whose price is not a number.
    """
    stores: List[Bookstore] = []
    tokens = _tokens(stream)
    for _city, name, title, author, price, currency in zip(*[tokens] * 6):
        try:
            value = float(price)
        except ValueError:
            break
        store = find_bookstore_by_name(stores, name)
        if store is None:
            store = Bookstore(name)
            stores.append(store)
        store.add_book(Book(title, author, value, currency))
    return stores


def _load(path: str) -> List[Bookstore]:
    try:
        with open(path, encoding="utf-8") as stream:
            return read_bookstores(stream)
    except OSError:
        return []


def _brief(book: Book) -> str:
    return f"{book.title} by {book.author} ({_fmt(book.price)} {book.currency})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare two bookstores.")
    parser.add_argument("input", nargs="?", default="BOOKSTORES.txt")
    parser.add_argument("--directory", default=".", help="where to write the author's list")
    args = parser.parse_args(argv)

    stores = _load(args.input)
    store = find_bookstore_by_name(stores, BOOKSTORE_NAME)
    if store is None or not store.books:
        print(f"Bookstore {BOOKSTORE_NAME} not found.")
        return 0

    print(f"Name: {store.name}")
    print(f"Number of books: {len(store)}")
    print(f"Total cost of books: {_fmt(store.total_cost())} {store.books[0].currency}")

    print(f"Number of books by {AUTHOR_NAME}: {store.num_books_by_author(AUTHOR_NAME)}")
    for book in store.find_books_by_author(AUTHOR_NAME):
        print(_brief(book))

    cheapest = store.find_min_price_book()
    print(f"Book with minimum price: {_brief(cheapest)}")
    print(f"Book with maximum price: {_brief(store.find_max_price_book())}")

    store.write_books_by_author(AUTHOR_NAME, args.directory)
    print()

    other = find_bookstore_by_name(stores, OTHER_BOOKSTORE_NAME)
    if other is None:
        print(f"Bookstore {OTHER_BOOKSTORE_NAME} not found.")
        return 0

    if store.has_cheaper_book(other):
        print(
            f"There is a book in {store.name} cheaper than in {other.name}: "
            f"{cheapest.title} ({_fmt(cheapest.price)} {cheapest.currency})"
        )
    else:
        print(f"There are no books in {store.name} cheaper than in {other.name}.")

    if store.has_neighbor_books_with_double_price():
        print(f"There are neighboring books with double price in {store.name}")
    else:
        print(f"There are no neighboring books with double price in {store.name}")

    try:
        first, second = store.find_first_pair_with_double_price(other)
        print(
            "The first pair of books with double price is: "
            f"{first.title} by {first.author} and {second.title} by {second.author}"
        )
    except NoPairFound as error:
        print(f"Error: {error}")

    if store.has_subsequence(other):
        print(f"There is a subsequence of three books in {store.name} that is also in {other.name}")
    else:
        print(
            f"There are no subsequences of three books in {store.name} "
            f"that are also in {other.name}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())