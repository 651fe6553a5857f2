"""Phone owners registered with a mobile operator."""

from __future__ import annotations

import argparse
import itertools
import logging
import re
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

TABLE_HEADER = "Street,Number of Owners,Total Cost of Phones"

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class Phone:
    make: str
    model: str
    price: float


@dataclass(frozen=True, order=True)
class Owner:
    """An owner, ordered by name, then address, then phone number."""

    name: str
    address: str
    phone: str


def _fmt(value: float) -> str:
    return format(value, "g")


def _parse_price(text: str) -> float:
    """Parse the leading number of ``text``, ignoring anything after it."""
    found = _NUMBER.match(text)
    if found is None:
        raise ValueError(f"invalid price: {text!r}")
    return float(found.group(1))


class MobileOperator:
    """A registry mapping owners to their phones, kept in owner order."""

    def __init__(self) -> None:
        self._phones: Dict[Owner, Phone] = {}

    @property
    def phones(self) -> Dict[Owner, Phone]:
        """A copy of the registry, ordered by owner."""
        return {owner: self._phones[owner] for owner in sorted(self._phones)}

    def __len__(self) -> int:
        return len(self._phones)

    def add_phone(self, owner: Owner, phone: Phone) -> None:
        self._phones[owner] = phone

    def remove_phones_by_owner(self, name: str) -> Dict[Owner, Phone]:
        """Remove every entry whose owner has ``name`` and return them."""
        removed = {o: p for o, p in self.phones.items() if o.name == name}
        for owner in removed:
            del self._phones[owner]
        return removed

    def find_owner_by_phone(self, phone: str) -> Optional[Owner]:
        return next((o for o in self.phones if o.phone == phone), None)

    def find_owners_by_address(self, address: str) -> List[Owner]:
        return [o for o in self.phones if o.address == address]

    def find_owners_by_manufacturer_and_price(self, manufacturer: str, price: float) -> List[Owner]:
        """Owners of phones by ``manufacturer`` costing more than ``price``."""
        return [
            o
            for o, p in self.phones.items()
            if p.make == manufacturer and p.price > price
        ]

    def write(self, path: PathLike) -> None:
        """Write one comma-separated line per entry."""
        with open(path, "w", encoding="utf-8") as out:
            for o, p in self.phones.items():
                out.write(f"{o.name},{o.address},{o.phone},{p.make},{p.model},{_fmt(p.price)}\n")

    def read(self, path: PathLike) -> List[str]:
        """Load entries from ``path``; return the lines that were rejected.

        A line must hold exactly six comma-separated fields.
        """
        rejected = []
        with open(path, encoding="utf-8") as stream:
            for raw in stream:
                line = raw.rstrip("\n")
                tokens = line.split(",")
                if len(tokens) != 6:
                    logger.error("Invalid input line - %s", line)
                    rejected.append(line)
                    continue
                name, address, number, make, model, price = tokens
                self._phones[Owner(name, address, number)] = Phone(make, model, _parse_price(price))
        return rejected


def count_owners_by_street(owners: Iterable[Owner]) -> Counter:
    """Number of owners per address."""
    return Counter(owner.address for owner in owners)


def total_phone_cost(phones: Iterable[Phone]) -> float:
    return sum((phone.price for phone in phones), 0.0)


def write_table(path: PathLike, street_owners: Mapping[str, int], total_cost: float) -> None:
    """Write a CSV table of owners per street, in street order."""
    with open(path, "w", encoding="utf-8") as out:
        out.write(TABLE_HEADER + "\n")
        for street, count in sorted(street_owners.items()):
            out.write(f"{street},{count},{_fmt(total_cost)}\n")


def _sample_operator() -> MobileOperator:
    operator = MobileOperator()
    operator.add_phone(Owner("John Smith", "123 Main St", "555-1234"), Phone("Apple", "iPhone 12", 999.99))
    operator.add_phone(Owner("Mary Johnson", "456 Elm St", "555-5678"), Phone("Samsung", "Galaxy S21", 899.99))
    operator.add_phone(Owner("Bob Brown", "789 Oak St", "555-2468"), Phone("Google", "Pixel 5", 799.99))
    operator.add_phone(Owner("Alice Green", "123 Main St", "555-1357"), Phone("Apple", "iPhone SE", 399.99))
    return operator


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Query a registry of phone owners.")
    parser.add_argument("--directory", default=".", help="where to write the output files")
    args = parser.parse_args(argv)
    directory = Path(args.directory)

    operator = _sample_operator()
    operator.write(directory / "phones.txt")

    operator.remove_phones_by_owner("John Smith")

    owner = operator.find_owner_by_phone("555-5678")
    if owner is not None:
        print(f"Owner of 555-5678 is {owner.name}")

    for found in operator.find_owners_by_address("123 Main St"):
        print(f"Owner on 123 Main St: {found.name}")

    for found in operator.find_owners_by_manufacturer_and_price("Apple", 500.0):
        print(f"Apple phone owner: {found.name}")

    streets = ("123 Main St", "456 Elm St", "789 Oak St")
    owners = itertools.chain.from_iterable(operator.find_owners_by_address(s) for s in streets)
    street_owners = count_owners_by_street(owners)
    total = total_phone_cost(operator.phones.values())
    write_table(directory / "owner_stats.txt", street_owners, total)
    return 0


if __name__ == "__main__":
    sys.exit(main())