"""Bookstores read line by line and queried by author, price and order."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from itertools import pairwise
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Union

PathLike = Union[str, Path]

STORE_NAME = "Knigarnya"
AUTHOR = "G. Lafcraft"
MIN_PRICE = 100
MAX_PRICE = 500
BIG_STORE_SIZE = 5


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Book:
    title: str
    author: str
    price: float
    currency: str

    def __str__(self) -> str:
        return f"{self.title} {self.author} {_fmt(self.price)} {self.currency}"


@dataclass
class Bookstore:
    name: str
    books: List[Book] = field(default_factory=list)


def _same(a: Book, b: Book) -> bool:
    return a.title == b.title and a.author == b.author


def read_bookstores(stream: Iterable[str]) -> List[Bookstore]:
    """Read ``store title author price currency`` lines; malformed lines are skipped."""
    stores: List[Bookstore] = []
    for line in stream:
        tokens = line.split()
        if len(tokens) < 5:
            continue
        name, title, author, price, currency = tokens[:5]
        try:
            book = Book(title, author, float(price), currency)
        except ValueError:
            continue
        store = next((s for s in stores if s.name == name), None)
        if store is None:
            stores.append(Bookstore(name, [book]))
        else:
            store.books.append(book)
    return stores


def find_books_by_author(bookstore: Bookstore, author: str) -> List[Book]:
    return [book for book in bookstore.books if book.author == author]


def total_price(bookstore: Bookstore) -> float:
    return sum((book.price for book in bookstore.books), 0.0)


def find_books_in_range(
    bookstore: Bookstore, author: str, min_price: float, max_price: float
) -> List[Book]:
    """The author's books priced within the closed range."""
    return [
        book
        for book in bookstore.books
        if book.author == author and min_price <= book.price <= max_price
    ]


def write_books(path: PathLike, books: Iterable[Book]) -> None:
    with open(path, "w", encoding="utf-8") as out:
        out.writelines(f"{book}\n" for book in books)


def has_book(bookstore: Bookstore, book: Book) -> bool:
    """True if the store has a book with the same title and author."""
    return any(_same(b, book) for b in bookstore.books)


def has_lower_price(bookstore1: Bookstore, bookstore2: Bookstore, book: Book) -> bool:
    """True if ``bookstore2`` sells ``book`` for less than ``bookstore1`` does."""
    ours = next((b for b in bookstore1.books if _same(b, book)), None)
    if ours is None:
        return False
    return any(_same(b, book) and b.price < ours.price for b in bookstore2.books)


def _adjacent(books: Sequence[Book], pred: Callable[[Book, Book], bool]) -> Optional[Book]:
    return next((first for first, second in pairwise(books) if pred(first, second)), None)


def find_doubled_price(bookstore: Bookstore, book: Optional[Book] = None) -> Optional[Book]:
    """First book followed by one at exactly twice its price.

    The first book of the pair must differ from ``book`` in both title and
    author; without ``book`` both are compared with empty strings.
    """
    title, author = (book.title, book.author) if book is not None else ("", "")
    return _adjacent(
        bookstore.books,
        lambda b1, b2: b2.price == b1.price * 2 and b1.title != title and b1.author != author,
    )


def has_subsequence(bookstore1: Bookstore, bookstore2: Bookstore) -> bool:
    """True if the first three books of ``bookstore1`` appear consecutively in ``bookstore2``."""
    needle = bookstore1.books[:3]
    hay = bookstore2.books
    for start in range(len(hay) - len(needle) + 1):
        if all(_same(a, b) for a, b in zip(hay[start:], needle)):
            return start < len(hay)
    return False


def _find_lower_priced(store: Bookstore, other: Bookstore) -> Optional[Book]:
    for book in store.books:
        if has_lower_price(store, other, book):
            ours = next(b for b in store.books if _same(b, book))
            return next(b for b in other.books if _same(b, book) and b.price < ours.price)
    return None


def _load(path: str) -> List[Bookstore]:
    try:
        with open(path, encoding="utf-8") as stream:
            return read_bookstores(stream)
    except OSError:
        return []


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Query bookstores.")
    parser.add_argument("input", nargs="?", default="BOOKSTORY.txt")
    parser.add_argument("--directory", default=".", help="where to write the author's list")
    args = parser.parse_args(argv)

    stores = _load(args.input)
    store = next((s for s in stores if s.name == STORE_NAME), None)
    if store is None:
        print(f"There is no store with the name {STORE_NAME}")
        return 0

    print(f"Total cost of books in {store.name}: {_fmt(total_price(store))} {store.books[0].currency}")

    write_books(Path(args.directory) / f"{AUTHOR} books.txt", find_books_by_author(store, AUTHOR))

    print(f"Books by {AUTHOR} between {MIN_PRICE} and {MAX_PRICE} UAH:")
    for book in find_books_in_range(store, AUTHOR, MIN_PRICE, MAX_PRICE):
        print(book)

    cheapest = min(store.books, key=lambda b: b.price)
    dearest = max(reversed(store.books), key=lambda b: b.price)
    print(f"Book with minimum cost in {store.name}: {cheapest.title} {cheapest.author}")
    print(f"Book with maximum cost in {store.name}: {dearest.title} {dearest.author}")

    big = next((s for s in stores if len(s.books) > BIG_STORE_SIZE), None)
    if big is None:
        print(f"There is no store with more than {BIG_STORE_SIZE} books")
        return 0
    print(f"Store with more than {BIG_STORE_SIZE} books: {big.name}")

    book = _find_lower_priced(store, big)
    if book is not None:
        print(
            f"The same book as in {store.name} with lower price exists in {big.name}: {book}"
        )
    else:
        print(f"There is no book with lower price in {big.name} than in {store.name}")

    doubled = find_doubled_price(big, book)
    if doubled is not None:
        book = doubled
        print(f"A pair of neighboring books with doubled price exists in {big.name}: {book}")
    else:
        print(f"There is no pair of neighboring books with doubled price in {big.name}")

    title, author = (book.title, book.author) if book is not None else ("", "")
    pairs = list(pairwise(store.books))
    pair = next(
        (
            (b1, b2)
            for b1, b2 in pairs
            if b2.price > b1.price * 2 and b1.title != title and b1.author != author
        ),
        None,
    )
    if pair is not None:
        first, second = pair
        print(
            "The first pair of books where the price of the second is doubled more than "
            f"the first in {store.name}: {first} and {second}"
        )
    else:
        print(
            f"There is no pair of books in {store.name} where the price of the second "
            "is doubled more than the first"
        )

    if has_subsequence(store, big):
        print(
            f"The first three books from the list of books of {store.name} form a "
            f"subsequence in the list of books of {big.name}"
        )
    else:
        print(
            f"The first three books from the list of books of {store.name} do not form a "
            f"subsequence in the list of books of {big.name}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())