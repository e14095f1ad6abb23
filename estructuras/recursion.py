"""Small recursive exercises on integers and strings, with an interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

MENU = (
    "Seleccione opcion:\n"
    "1. sumaRecursiva\n"
    "2. cuadradosPares\n"
    "3. cuadradosPares2\n"
    "4. fibNumero\n"
    "5. lineal\n"
    "6. Salir\n"
)
EXIT_OPTION = 6


def sum_recursive(n: int) -> int:
    """Return n + (n-1) + ... + 1; values of n up to 1 are returned unchanged."""
    if n <= 1:
        return n
    return sum(range(1, n + 1))


def even_squares(n: int) -> int:
    """Return the sum of k*k for every even k from 1 to n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(k * k for k in range(2, n + 1, 2))


def doubled_squares(n: int) -> int:
    """Return the sum of (2k)**2 for k from 1 to n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum((k + k) ** 2 for k in range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n up to 1 are returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def contains_char(text: str, char: str) -> bool:
    """Return whether the single character ``char`` occurs in ``text``."""
    if len(char) != 1:
        raise ValueError("char must be a single character")
    return char in text


class _Tokens:
    """Whitespace-separated reader over lines of input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._words: Iterator[str] = (word for line in lines for word in line.split())
        self._pending: str | None = None

    def word(self) -> str:
        if self._pending is not None:
            word, self._pending = self._pending, None
            return word
        try:
            return next(self._words)
        except StopIteration:
            raise EOFError("input exhausted") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def char(self) -> str:
        word = self.word()
        if len(word) > 1:
            self._pending = word[1:]
        return word[0]


_NUMERIC_OPTIONS = {
    1: ("Suma", sum_recursive),
    2: ("cuadradosPares", even_squares),
    3: ("cuadradosPares2", doubled_squares),
    4: ("fibNumero", fibonacci),
}


def run_menu(lines: Iterable[str], out: TextIO) -> None:
    """Run the interactive menu, reading answers from ``lines`` and writing to ``out``."""
    tokens = _Tokens(lines)
    try:
        while True:
            out.write(MENU)
            out.write("Ingrese numero de opcion: ")
            option = tokens.integer()
            if option == EXIT_OPTION:
                break
            if option in _NUMERIC_OPTIONS:
                label, function = _NUMERIC_OPTIONS[option]
                out.write("Ingrese numero: ")
                number = tokens.integer()
                out.write(f"{label}: {function(number)}\n")
            elif option == 5:
                out.write("Ingrese Palabra: ")
                word = tokens.word()
                out.write("Ingrese letra: ")
                letter = tokens.char()
                out.write(f"lineal: {int(contains_char(word, letter))}\n")
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Run the menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    return 0