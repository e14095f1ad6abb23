"""Self-balancing binary search tree rebalanced along the path of each change."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from estructuras.bst import inorder, postorder, preorder


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree."""

    value: Any
    left: AVLNode | None = None
    right: AVLNode | None = None


def _height(node: AVLNode | None) -> int:
    """Return the number of edges on the longest downward path; -1 for no node."""
    levels = 0
    level = [node] if node is not None else []
    while level:
        levels += 1
        level = [
            child
            for current in level
            for child in (current.left, current.right)
            if child is not None
        ]
    return levels - 1


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


def _balance(node: AVLNode) -> AVLNode:
    """Rotate ``node`` if its subtrees differ in height by more than one."""
    left_height, right_height = _height(node.left), _height(node.right)
    if left_height - right_height > 1:
        child = node.left
        outer, inner = _height(child.left), _height(child.right)
        if outer > inner:
            return _rotate_right(node)
        if outer < inner:
            node.left = _rotate_left(child)
            return _rotate_right(node)
    elif right_height - left_height > 1:
        child = node.right
        outer, inner = _height(child.right), _height(child.left)
        if outer > inner:
            return _rotate_left(node)
        if outer < inner:
            node.right = _rotate_right(child)
            return _rotate_left(node)
    return node


class AVLTree:
    """A binary search tree that rebalances the nodes on the path of each change."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def is_empty(self) -> bool:
        """Return whether the tree has no nodes."""
        return self.root is None

    def root_value(self) -> Any:
        """Return the value at the root."""
        if self.root is None:
            raise IndexError("tree is empty")
        return self.root.value

    def height(self) -> int:
        """Return the root's height; a single node has 0 and an empty tree -1."""
        return _height(self.root)

    def size(self) -> int:
        """Return the number of nodes."""
        return len(preorder(self.root))

    def _attach(self, parent: AVLNode | None, side: str, node: AVLNode | None) -> None:
        if parent is None:
            self.root = node
        else:
            setattr(parent, side, node)

    def _rebalance_path(self, value: Any) -> None:
        parent: AVLNode | None = None
        side = ""
        node = self.root
        while node is not None:
            balanced = _balance(node)
            self._attach(parent, side, balanced)
            side = "right" if balanced.value < value else "left"
            parent, node = balanced, getattr(balanced, side)

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self.root is None:
            self.root = AVLNode(value)
            return True
        node = self.root
        while True:
            if value == node.value:
                return False
            side = "right" if value > node.value else "left"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, AVLNode(value))
                break
            node = child
        self._rebalance_path(value)
        return True

    def remove(self, value: Any) -> bool:
        """Remove ``value``; return False if it was absent."""
        parent: AVLNode | None = None
        side = ""
        node = self.root
        while node is not None and node.value != value:
            side = "left" if value < node.value else "right"
            parent, node = node, getattr(node, side)
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            holder, holder_side, predecessor = node, "left", node.left
            while predecessor.right is not None:
                holder, holder_side, predecessor = predecessor, "right", predecessor.right
            node.value = predecessor.value
            setattr(holder, holder_side, predecessor.left)
        else:
            self._attach(parent, side, node.left if node.left is not None else node.right)

        self._rebalance_path(value)
        return True

    def contains(self, value: Any) -> bool:
        """Return whether ``value`` is in the tree."""
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.right if value > node.value else node.left
        return False

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


def _commands(lines: Iterable[str]) -> Iterator[tuple[str, int]]:
    words = (word for line in lines for word in line.split())
    for word in words:
        operation, rest = word[0], word[1:]
        if operation not in ("A", "E"):
            return
        if not rest:
            rest = next(words, None)
            if rest is None:
                return
        try:
            yield operation, int(rest)
        except ValueError:
            raise ValueError(f"expected an integer, got {rest!r}") from None


def run_commands(lines: Iterable[str]) -> AVLTree:
    """Apply ``A <n>`` (insert) and ``E <n>`` (remove) commands until any other one."""
    tree = AVLTree()
    for operation, value in _commands(lines):
        if operation == "A":
            tree.insert(value)
        else:
            tree.remove(value)
    return tree


def _spaced(values: list[Any]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and print the tree's traversals."""
    tree = run_commands(sys.stdin)
    sys.stdout.write(
        "\nInorden: \n"
        + _spaced(tree.inorder())
        + "\nPreorden: \n"
        + _spaced(tree.preorder())
        + "\nPosorden: \n"
        + _spaced(tree.postorder())
    )
    return 0