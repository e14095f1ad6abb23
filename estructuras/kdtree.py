"""k-d tree of points that splits on one coordinate per level."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Any

from estructuras.bst import inorder, postorder, preorder

DEMO_COUNT = 15


@dataclass(eq=False)
class KDNode:
    """A node holding a point and the coordinate it splits on."""

    value: tuple
    axis: int = 0
    left: KDNode | None = None
    right: KDNode | None = None


class KDTree:
    """A k-d tree; a point whose splitting coordinate ties an existing node's is dropped."""

    def __init__(self) -> None:
        self.root: KDNode | None = None

    def is_empty(self) -> bool:
        """Return whether the tree has no nodes."""
        return self.root is None

    def root_value(self) -> tuple:
        """Return the point at the root."""
        if self.root is None:
            raise IndexError("El árbol está vacío.")
        return self.root.value

    def _levels(self) -> Iterator[list[KDNode]]:
        level = [self.root] if self.root is not None else []
        while level:
            yield level
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

    def _nodes(self) -> Iterator[KDNode]:
        for level in self._levels():
            yield from level

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        return sum(1 for _ in self._levels())

    def size(self) -> int:
        """Return the number of nodes."""
        return sum(len(level) for level in self._levels())

    def _check(self, point: Sequence[Any]) -> tuple:
        point = tuple(point)
        if not point:
            raise ValueError("a point needs at least one coordinate")
        if self.root is not None and len(point) != len(self.root.value):
            raise ValueError(
                f"expected {len(self.root.value)} coordinates, got {len(point)}"
            )
        return point

    def insert(self, point: Sequence[Any]) -> bool:
        """Insert ``point``; return False if a tie on a splitting coordinate drops it."""
        point = self._check(point)
        if self.root is None:
            self.root = KDNode(point, 0)
            return True
        dimensions = len(point)
        node = self.root
        while True:
            mine, theirs = point[node.axis], node.value[node.axis]
            if mine == theirs:
                return False
            side = "right" if mine > theirs else "left"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, KDNode(point, (node.axis + 1) % dimensions))
                return True
            node = child

    def find(self, point: Sequence[Any]) -> KDNode | None:
        """Return the node holding ``point``, or None."""
        point = self._check(point)
        node = self.root
        while node is not None:
            if node.value == point:
                return node
            node = node.left if point[node.axis] < node.value[node.axis] else node.right
        return None

    def preorder(self) -> list[tuple]:
        """Return the points in root, left, right order."""
        return preorder(self.root)

    def inorder(self) -> list[tuple]:
        """Return the points in left, root, right order."""
        return inorder(self.root)

    def postorder(self) -> list[tuple]:
        """Return the points in left, right, root order."""
        return postorder(self.root)

    def level_order(self) -> list[tuple]:
        """Return the points level by level, left to right."""
        values: list[tuple] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            values.append(node.value)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        return values

    def maximum(self, start: Any) -> Any:
        """Return the largest of ``start`` and each node's splitting coordinate."""
        return max((node.value[node.axis] for node in self._nodes()), default=start, key=None) \
            if start is None else max([start, *(n.value[n.axis] for n in self._nodes())])

    def minimum(self, start: Any) -> Any:
        """Return the smallest of ``start`` and each node's splitting coordinate."""
        return min([start, *(node.value[node.axis] for node in self._nodes())])


def _format_point(point: tuple) -> str:
    return "( " + ", ".join(str(coordinate) for coordinate in point) + " )\n"


def main(argv: list[str] | None = None) -> int:
    """Read fifteen integers as one-dimensional points and print two traversals."""
    out = sys.stdout
    out.write("ARBOL BINARIO ORDENADO\n")
    out.write("*" * 64 + "\n")
    words = (word for line in sys.stdin for word in line.split())
    tree = KDTree()
    for word in islice(words, DEMO_COUNT):
        out.write("Inserte dato: ")
        tree.insert((int(word),))
    out.write("\nPre Orden:\n")
    out.write("".join(_format_point(point) for point in tree.preorder()))
    out.write("\nPos Orden: \n")
    out.write("".join(_format_point(point) for point in tree.postorder()))
    out.write("\n")
    return 0