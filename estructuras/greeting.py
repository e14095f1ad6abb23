"""The classic first program."""

from __future__ import annotations

import sys


def greeting() -> str:
    """Return the greeting text."""
    return "Hola Mundo"


def main(argv: list[str] | None = None) -> int:
    """Write the greeting to standard output."""
    text = greeting()
    sys.stdout.write(f"{text}\n")
    sys.stdout.flush()
    return 0