"""Arithmetic expression trees built from prefix or postfix strings of single characters."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable

from estructuras.bst import inorder, postorder, preorder

OPERATORS = frozenset("+-/*%")

PREFIX_EXAMPLE = "-*/5-7+113-+2+1*43*2-68"
POSTFIX_EXAMPLE = "45+23+*6+87+/12+3*6+23+/*"


def is_operator(char: str) -> bool:
    """Return whether ``char`` is one of ``+ - / * %``."""
    return char in OPERATORS and len(char) == 1


@dataclass(eq=False)
class ExprNode:
    """A node holding one character: an operator or an operand digit."""

    value: str
    left: ExprNode | None = None
    right: ExprNode | None = None

    @property
    def is_operator(self) -> bool:
        """Whether the node holds an operator."""
        return is_operator(self.value)


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return _truncating_divide(left, right)
    # '+' and any other operator, '%' included, add their operands.
    return left + right


class ExpressionTree:
    """A binary tree of operators over single-digit operands."""

    def __init__(self, root: ExprNode | None = None) -> None:
        self.root = root

    def prefix(self) -> list[str]:
        """Return the characters with each operator before its operands."""
        return preorder(self.root)

    def infix(self) -> list[str]:
        """Return the characters with each operator between its operands."""
        if self.root is None:
            raise ValueError("El arbol esta vacio")
        return inorder(self.root)

    def postfix(self) -> list[str]:
        """Return the characters with each operator after its operands."""
        return postorder(self.root)

    def evaluate(self) -> int:
        """Return the integer value of the expression; division truncates toward zero."""
        if self.root is None:
            raise ValueError("El arbol esta vacio")
        return self._evaluate(self.root)

    def _evaluate(self, node: ExprNode) -> int:
        if node.left is None and node.right is None:
            return ord(node.value) - ord("0")
        return _apply(node.value, self._evaluate(node.left), self._evaluate(node.right))


def _build(chars: Iterable[str]) -> ExpressionTree:
    """Build a tree reading ``chars`` in order; each operator takes the top two nodes,
    the first popped becoming its right child and the second its left child."""
    stack: list[ExprNode] = []
    for char in chars:
        node = ExprNode(char)
        if is_operator(char):
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            node.right = stack.pop()
            node.left = stack.pop()
        stack.append(node)
    if not stack:
        raise ValueError("empty expression")
    return ExpressionTree(stack[-1])


def parse_prefix(expression: str) -> ExpressionTree:
    """Build a tree from a prefix string, scanning it from the last character.

    Operands are attached as they come off the stack, so the operands of each
    operator end up in reverse order: ``"-52"`` evaluates as ``2 - 5``.
    """
    return _build(reversed(expression))


def parse_postfix(expression: str) -> ExpressionTree:
    """Build a tree from a postfix string."""
    return _build(expression)


def _spaced(chars: list[str]) -> str:
    return "".join(f"{char} " for char in chars)


def main(argv: list[str] | None = None) -> int:
    """Build, print and evaluate the two example expressions."""
    first = parse_prefix(PREFIX_EXAMPLE)
    second = parse_postfix(POSTFIX_EXAMPLE)
    sys.stdout.write(
        "EJERCICIO 1 \n\n"
        "1. Construir Arbol Expresion: \n"
        f"{PREFIX_EXAMPLE}\n"
        "2. Imprimir Version Posfija=\n"
        f"{_spaced(first.postfix())}\n"
        "3. Imprimir Resultado=\n"
        f"{first.evaluate()}\n"
        "EJERCICIO 2\n\n"
        "1. Construir Arbol Expresion: \n"
        f"{POSTFIX_EXAMPLE}\n"
        "2. Imprimir Version Prefija=\n"
        f"{_spaced(second.prefix())}\n"
        "3. Imprimir Resultado=\n"
        f"{second.evaluate()}\n"
    )
    return 0