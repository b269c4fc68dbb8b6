"""Filtering a list of people by name length and age."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable, Sequence

MIN_NAME_LENGTH = 4
MIN_AGE = 18


@dataclass(frozen=True)
class Person:
    name: str
    age: int


def fails_requirements(person: Person) -> bool:
    """Return whether ``person`` has too short a name or is under age."""
    return len(person.name) < MIN_NAME_LENGTH or person.age < MIN_AGE


def filter_people(people: Iterable[Person]) -> list[Person]:
    """Return the people that meet the requirements, in their order."""
    return [person for person in people if not fails_requirements(person)]


def main(argv: Sequence[str] | None = None) -> int:
    """Filter a sample list and print who remains."""
    argparse.ArgumentParser(description="Filter a list of people.").parse_args(argv)
    people = [
        Person("Fredi", 28),
        Person("Mari", 26),
        Person("Bella", 1),
        Person("Bob", 30),
    ]
    names = "".join(f" {person.name}" for person in filter_people(people))
    print(f"myList contains:{names}")
    return 0