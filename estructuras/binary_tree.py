"""Binary search tree object that ignores duplicate values."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Any

from estructuras.bst import inorder, postorder, preorder

DEMO_COUNT = 7


@dataclass(eq=False)
class BinaryNode:
    """A node of a binary search tree."""

    value: Any
    left: BinaryNode | None = None
    right: BinaryNode | None = None


class BinarySearchTree:
    """A binary search tree holding each value at most once."""

    def __init__(self) -> None:
        self.root: BinaryNode | None = None

    def is_empty(self) -> bool:
        """Return whether the tree has no nodes."""
        return self.root is None

    def root_value(self) -> Any:
        """Return the value at the root."""
        if self.root is None:
            raise IndexError("tree is empty")
        return self.root.value

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        return sum(1 for _ in self._levels())

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

    def size(self) -> int:
        """Return the number of nodes."""
        return sum(len(level) for level in self._levels())

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self.root is None:
            self.root = BinaryNode(value)
            return True
        node = self.root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = BinaryNode(value)
                    return True
                node = node.right
            elif value < node.value:
                if node.left is None:
                    node.left = BinaryNode(value)
                    return True
                node = node.left
            else:
                return False

    def remove(self, value: Any) -> bool:
        """Remove ``value`` from the tree; return False if it was absent."""
        parent, node = None, self.root
        while node is not None and node.value != value:
            parent, node = node, (node.left if value < node.value else node.right)
        if node is None:
            return False
        if node.left is not None:
            holder, replacement = node, node.left
            while replacement.right is not None:
                holder, replacement = replacement, replacement.right
            node.value = replacement.value
            if holder is node:
                node.left = replacement.left
            else:
                holder.right = replacement.left
        elif node.right is not None:
            holder, replacement = node, node.right
            while replacement.left is not None:
                holder, replacement = replacement, replacement.left
            node.value = replacement.value
            if holder is node:
                node.right = replacement.right
            else:
                holder.left = replacement.right
        elif parent is None:
            self.root = None
        elif parent.left is node:
            parent.left = None
        else:
            parent.right = None
        return True

    def find(self, value: Any) -> BinaryNode | None:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def preorder(self) -> list[Any]:
        """Return the values in root, left, right order."""
        return preorder(self.root)

    def inorder(self) -> list[Any]:
        """Return the values in ascending order."""
        return inorder(self.root)

    def postorder(self) -> list[Any]:
        """Return the values in left, right, root order."""
        return postorder(self.root)

    def level_order(self) -> list[Any]:
        """Return the values level by level, left to right."""
        values: list[Any] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            values.append(node.value)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        return values


def main(argv: list[str] | None = None) -> int:
    """Read seven integers, insert them and print the tree level by level."""
    words = (word for line in sys.stdin for word in line.split())
    tree = BinarySearchTree()
    for word in islice(words, DEMO_COUNT):
        tree.insert(int(word))
    sys.stdout.write("".join(f"\t{value}\n" for value in tree.level_order()))
    return 0