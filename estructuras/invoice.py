"""Capture a customer's details and write an invoice file."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

DEFAULT_INVOICE = "factura.txt"


@dataclass
class Customer:
    """A customer with the total amount of an invoice."""

    name: str
    address: str
    total: float


def read_customer(lines: Iterable[str], out: TextIO) -> Customer:
    """Prompt for and read a customer's name, address and invoice total."""
    source = iter(lines)

    def ask(prompt: str) -> str:
        out.write(prompt)
        try:
            return next(source).rstrip("\r\n")
        except StopIteration:
            raise EOFError("input exhausted") from None

    name = ask("Ingrese el nombre del cliente: ")
    address = ask("Ingrese la dirección del cliente: ")
    amount = ask("Ingrese el monto total de la factura: ").strip()
    try:
        total = float(amount)
    except ValueError:
        raise ValueError(f"invalid amount: {amount!r}") from None
    return Customer(name, address, total)


def render_invoice(customer: Customer) -> str:
    """Return the invoice text for a customer."""
    return (
        "Factura del Cliente\n"
        f"Nombre: {customer.name}\n"
        f"Dirección: {customer.address}\n"
        f"Monto Total: ${customer.total:g}\n"
    )


def write_invoice(customer: Customer, path: str | Path) -> Path:
    """Write the customer's invoice to ``path`` and return the path."""
    target = Path(path)
    target.write_text(render_invoice(customer), encoding="utf-8")
    return target


def main(argv: list[str] | None = None) -> int:
    """Read a customer from standard input and write the invoice file."""
    customer = read_customer(sys.stdin, sys.stdout)
    try:
        write_invoice(customer, DEFAULT_INVOICE)
    except OSError:
        print("No se pudo abrir el archivo.", file=sys.stderr)
        return 1
    print(f"Factura escrita en {DEFAULT_INVOICE}")
    return 0