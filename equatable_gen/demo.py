"""
Demo — the value the ``demo`` command generates code for.

    python -m equatable_gen.demo
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from equatable_gen.core.services.generators.equatable import adopt_equatable


@dataclass
class Person:
    first_name: str
    last_name: str
    birthday: date
    inches_tall: int


def sample_person() -> Person:
    return Person(
        first_name="Clown",
        last_name="Baby",
        birthday=date.today(),
        inches_tall=18,
    )


if __name__ == "__main__":
    adopt_equatable(sample_person())
