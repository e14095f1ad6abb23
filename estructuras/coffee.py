"""Coffee makers of two brands driven by a text menu."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import TextIO

CUP_ART = (
    " (      )\n"
    "  )    (\n"
    " ( (   ) )\n"
    "  ) ) ( (\n"
    "  /____ \n"
    " |     |\n"
    " |_____|\n"
)

MAKER_MENU = (
    "Seleccione cafetera:\n"
    "1. Oster\n"
    "2. Haceb\n"
    "3. Salir\n"
)

DRINK_MENU = (
    "Seleccione una opcion: \n"
    "1. Hacer Capuchino\n"
    "2. Hacer Tinto\n"
    "3. Volver al menu anterior\n"
)

INVALID_OPTION = "Opción no válida. Intente de nuevo.\n"


class CoffeeMaker(ABC):
    """A coffee maker that can brew a cappuccino or a black coffee."""

    @property
    @abstractmethod
    def brand(self) -> str:
        """The maker's brand name."""

    def cappuccino(self) -> str:
        """Return the text shown while making a cappuccino."""
        return f"{self.brand} haciendo capuchino\n{CUP_ART}"

    def black_coffee(self) -> str:
        """Return the text shown while making a black coffee."""
        return f"{self.brand} haciendo tinto\n{CUP_ART}"


class Oster(CoffeeMaker):
    brand = "Oster"


class Haceb(CoffeeMaker):
    brand = "Haceb"


_MAKERS = {1: Oster, 2: Haceb}


def _integers(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for word in line.split():
            try:
                yield int(word)
            except ValueError:
                raise ValueError(f"expected an integer, got {word!r}") from None


def run_menu(lines: Iterable[str], out: TextIO) -> None:
    """Run the coffee menu, reading choices from ``lines`` and writing to ``out``."""
    choices = _integers(lines)
    while True:
        out.write(MAKER_MENU)
        choice = next(choices, None)
        if choice is None or choice == 3:
            return
        maker_class = _MAKERS.get(choice)
        if maker_class is None:
            out.write(INVALID_OPTION)
            continue
        maker = maker_class()
        while True:
            out.write(DRINK_MENU)
            drink = next(choices, None)
            if drink is None:
                return
            if drink == 3:
                break
            if drink == 1:
                out.write(maker.cappuccino())
            elif drink == 2:
                out.write(maker.black_coffee())
            else:
                out.write(INVALID_OPTION)


def main(argv: list[str] | None = None) -> int:
    """Run the coffee menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    return 0