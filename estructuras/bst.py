"""Binary search tree built from bare nodes and free functions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any

DEMO_VALUES = range(1, 19)
DEMO_DELETED = 18


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    value: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


def insert(root: BSTNode | None, value: Any) -> BSTNode:
    """Insert ``value`` below ``root`` and return the root; equal values go right."""
    new = BSTNode(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new
                break
            node = node.left
        else:
            if node.right is None:
                node.right = new
                break
            node = node.right
    return root


def min_node(root: BSTNode | None) -> BSTNode | None:
    """Return the leftmost node below ``root``, or None for an empty tree."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def delete(root: BSTNode | None, value: Any) -> BSTNode | None:
    """Remove one node holding ``value`` and return the new root."""
    if root is None:
        return None
    if value < root.value:
        root.left = delete(root.left, value)
    elif value > root.value:
        root.right = delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_node(root.right)
        root.value = successor.value
        root.right = delete(root.right, successor.value)
    return root


def preorder(root: Any) -> list[Any]:
    """Return the values in root, left, right order."""
    values: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def inorder(root: Any) -> list[Any]:
    """Return the values in left, root, right order."""
    values: list[Any] = []
    stack: list[Any] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def postorder(root: Any) -> list[Any]:
    """Return the values in left, right, root order."""
    reversed_values: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_values.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed_values[::-1]


def _chain(values: list[Any]) -> str:
    return "".join(f"{value}->" for value in values)


def main(argv: list[str] | None = None) -> int:
    """Build the demonstration tree, print its traversals and delete a node."""
    root = None
    for value in DEMO_VALUES:
        root = insert(root, value)
    parts = [
        "\n -PreOrden ",
        _chain(preorder(root)),
        "\n -PostOrden ",
        _chain(postorder(root)),
        "\n -InOrden ",
        _chain(inorder(root)),
        "Se elimina el nodo(40)\n",
    ]
    root = delete(root, DEMO_DELETED)
    parts.append(_chain(inorder(root)))
    sys.stdout.write("".join(parts))
    return 0