"""Fill an integer array with random values and show its contents and addresses."""

from __future__ import annotations

import random
import sys
from array import array
from collections.abc import Iterable

ARRAY_SIZE = 10
RANDOM_LOW = 0
RANDOM_HIGH = 25


def random_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a random integer between ``low`` and ``high`` inclusive."""
    if high < low:
        raise ValueError("high must not be smaller than low")
    return (rng or random).randint(low, high)


def fill_random(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers between 0 and 25."""
    if size < 0:
        raise ValueError("size must not be negative")
    return [random_int(RANDOM_LOW, RANDOM_HIGH, rng) for _ in range(size)]


def format_values(values: Iterable[int]) -> str:
    """Return the values, each followed by a space."""
    return "".join(f"{value} " for value in values)


def format_addresses(values: Iterable[int]) -> str:
    """Return the memory address of each element of a packed integer array."""
    packed = values if isinstance(values, array) else array("i", values)
    base, _ = packed.buffer_info()
    return "".join(
        f"{base + offset * packed.itemsize:#x} " for offset in range(len(packed))
    )


def main(argv: list[str] | None = None) -> int:
    """Print a random array and the addresses of its elements."""
    values = array("i", fill_random(ARRAY_SIZE, random.Random()))
    report = (
        f"Contenido del array: {format_values(values)}\n"
        f"Direcciones del array: {format_addresses(values)}\n"
    )
    sys.stdout.write(report)
    return 0