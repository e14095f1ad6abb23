"""General tree whose nodes have any number of ordered children."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

_NO_VALUE = object()


@dataclass(eq=False)
class TreeNode:
    """A node holding a value and a list of children."""

    value: Any
    children: list[TreeNode] = field(default_factory=list)

    def add_child(self, value: Any) -> TreeNode:
        """Append a new child holding ``value`` and return it."""
        child = TreeNode(value)
        self.children.append(child)
        return child

    def remove_child(self, value: Any) -> bool:
        """Remove the first child holding ``value``; return whether one was found."""
        for position, child in enumerate(self.children):
            if child.value == value:
                del self.children[position]
                return True
        return False

    def _walk(self) -> Iterator[TreeNode]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, value: Any) -> TreeNode | None:
        """Return the first node in preorder holding ``value``, or None."""
        return next((node for node in self._walk() if node.value == value), None)

    def height(self) -> int:
        """Return the number of edges on the longest downward path."""
        levels = 0
        level = [self]
        while level:
            levels += 1
            level = [child for node in level for child in node.children]
        return levels - 1

    def size(self) -> int:
        """Return the number of nodes in this subtree."""
        return sum(1 for _ in self._walk())


class Tree:
    """A general tree with an optional root."""

    def __init__(self, value: Any = _NO_VALUE) -> None:
        self.root: TreeNode | None = None if value is _NO_VALUE else TreeNode(value)

    def is_empty(self) -> bool:
        """Return whether the tree has no root."""
        return self.root is None

    def root_value(self) -> Any:
        """Return the value at the root."""
        if self.root is None:
            raise IndexError("tree is empty")
        return self.root.value

    def add_child(self, parent: Any, value: Any) -> bool:
        """Add ``value`` under the node holding ``parent``; False if there is none."""
        node = self.find(parent)
        if node is None:
            return False
        node.add_child(value)
        return True

    def height(self) -> int:
        """Return the root's height; an empty tree has height -1."""
        return -1 if self.root is None else self.root.height()

    def size(self) -> int:
        """Return the number of nodes."""
        return 0 if self.root is None else self.root.size()

    def find(self, value: Any) -> TreeNode | None:
        """Return the first node in preorder holding ``value``, or None."""
        return None if self.root is None else self.root.find(value)

    def remove(self, value: Any) -> bool:
        """Remove the first node holding ``value`` with its subtree."""
        if self.root is None:
            return False
        if self.root.value == value:
            self.root = None
            return True
        return any(node.remove_child(value) for node in self.root._walk())

    def preorder(self) -> list[Any]:
        """Return the values with each node before its children."""
        return [] if self.root is None else [node.value for node in self.root._walk()]

    def postorder(self) -> list[Any]:
        """Return the values with each node after its children."""
        reversed_values: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reversed_values.append(node.value)
            stack.extend(node.children)
        return reversed_values[::-1]

    def level_order(self) -> list[Any]:
        """Return the values level by level."""
        values: list[Any] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            values.append(node.value)
            queue.extend(node.children)
        return values


def main(argv: list[str] | None = None) -> int:
    """Build the demonstration tree and print it in preorder."""
    tree = Tree(5)
    for parent, value in ((5, 6), (5, 7), (5, 8), (6, 9), (6, 10), (7, 11)):
        tree.add_child(parent, value)
    sys.stdout.write("".join(f"\t{value}\n" for value in tree.preorder()))
    return 0