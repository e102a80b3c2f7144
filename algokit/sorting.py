"""Ordering people by age and numbers in descending order."""

from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Person:
    """A named person; people order by age alone."""

    age: int = 0
    name: str = ""

    def __lt__(self, other: "Person") -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.age < other.age


def sort_people(people: Iterable[Person]) -> list[Person]:
    """People sorted by ascending age; equal ages keep their input order."""
    return sorted(people, key=attrgetter("age"))


def sort_descending(values: Iterable[int]) -> list[int]:
    """Values sorted from largest to smallest."""
    return sorted(values, reverse=True)