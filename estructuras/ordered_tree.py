"""Ordered binary tree that keeps each value once."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class OrderedNode:
    """A node of an ordered binary tree."""

    value: Any
    left: OrderedNode | None = None
    right: OrderedNode | None = None


class OrderedBinaryTree:
    """A binary search tree without duplicates."""

    def __init__(self) -> None:
        self.root: OrderedNode | None = None

    def is_empty(self) -> bool:
        """Return whether the tree has no nodes."""
        return self.root is None

    def root_value(self) -> Any:
        """Return the value at the root."""
        if self.root is None:
            raise IndexError("tree is empty")
        return self.root.value

    def _levels(self):
        level = [self.root] if self.root is not None else []
        while level:
            yield level
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

    def height(self) -> int:
        """Return the root's height; a single node has 0 and an empty tree -1."""
        return sum(1 for _ in self._levels()) - 1

    def size(self) -> int:
        """Return the number of nodes."""
        return sum(len(level) for level in self._levels())

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self.root is None:
            self.root = OrderedNode(value)
            return True
        node = self.root
        while True:
            if value == node.value:
                return False
            side = "left" if value < node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, OrderedNode(value))
                return True
            node = child