"""Mobile phones and radiotelephones read from files and reported by price."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, TextIO, TypeVar

T = TypeVar("T")


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Phone(ABC):
    name: str
    company: str
    price: float

    @abstractmethod
    def describe(self) -> str:
        """A one-line description of the phone."""


@dataclass(frozen=True)
class MobilePhone(Phone):
    color: str
    memory_capacity: int

    def describe(self) -> str:
        return (
            f"{self.name} ({self.company}): {self.color} mobile phone with "
            f"{self.memory_capacity}GB memory, priced at ${_fmt(self.price)}"
        )


@dataclass(frozen=True)
class Radiotelephone(Phone):
    range: float
    answering_machine: bool

    def describe(self) -> str:
        head = f"{self.name} ({self.company}): {_fmt(self.range)} mile range radiotelephone"
        if self.answering_machine:
            return f"{head} with answering machine, priced at ${_fmt(self.price)}"
        return f"{head}, priced at ${_fmt(self.price)}"


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _records(stream: Iterable[str], width: int, parse: Callable[..., T]) -> List[T]:
    tokens = _tokens(stream)
    result = []
    for fields in zip(*[tokens] * width):
        try:
            result.append(parse(*fields))
        except ValueError:
            break
    return result


def _flag(token: str) -> bool:
    value = int(token)
    if value not in (0, 1):
        raise ValueError(f"not a flag: {token!r}")
    return bool(value)


def _radio(name: str, company: str, price: str, rng: str, machine: str) -> Radiotelephone:
    return Radiotelephone(name, company, float(price), float(rng), _flag(machine))


def _mobile(name: str, company: str, price: str, color: str, memory: str) -> MobilePhone:
    return MobilePhone(name, company, float(price), color, int(memory))


def read_radiotelephones(stream: Iterable[str]) -> List[Radiotelephone]:
    """Read ``name company price range 0|1`` records up to the first bad one."""
    return _records(stream, 5, _radio)


def read_mobile_phones(stream: Iterable[str]) -> List[MobilePhone]:
    """Read ``name company price color memory`` records up to the first bad one."""
    return _records(stream, 5, _mobile)


def write_report(
    radios: Sequence[Radiotelephone], mobiles: Sequence[MobilePhone], out: TextIO
) -> List[Phone]:
    """Write the price list, total and answering-machine section; return phones by price."""
    phones: List[Phone] = sorted([*radios, *mobiles], key=lambda p: p.price)
    for phone in phones:
        out.write(f"{phone.name} ({phone.company}): ${_fmt(phone.price)}\n")
    total = sum((phone.price for phone in phones), 0.0)
    out.write(f"\nTotal amount of all phones: ${_fmt(total)}\n")
    out.write("\nRadiotelephones with answering machines:\n")
    for radio in radios:
        if radio.answering_machine:
            out.write(
                f"Name: {radio.name}\n"
                f"Company: {radio.company}\n"
                f"Price: ${_fmt(radio.price)}\n"
                f"Range: {_fmt(radio.range)} km\n"
                "Answering Machine: Yes\n"
                "\n"
            )
    return phones


def _load(path: str, reader: Callable[[Iterable[str]], List[T]]) -> List[T]:
    try:
        with open(path, encoding="utf-8") as stream:
            return reader(stream)
    except OSError:
        return []


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Report phones ordered by price.")
    parser.add_argument("radios", nargs="?", default="file1.txt")
    parser.add_argument("mobiles", nargs="?", default="file2.txt")
    parser.add_argument("output", nargs="?", default="file3.txt")
    args = parser.parse_args(argv)

    radios = _load(args.radios, read_radiotelephones)
    mobiles = _load(args.mobiles, read_mobile_phones)
    try:
        with open(args.output, "w", encoding="utf-8") as out:
            phones = write_report(radios, mobiles, out)
    except OSError:
        print(f"Unable to open {args.output} for writing")
        return 1
    for phone in phones:
        print(phone.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())