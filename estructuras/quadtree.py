"""Point quadtree that sends each point into one of four quadrants."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

_NO_VALUE = object()
_QUADRANTS = ("nw", "ne", "sw", "se")


def _quadrant(centre: tuple, point: tuple) -> str | None:
    """Return the quadrant of ``centre`` that ``point`` belongs to.

    A point sharing the centre's first coordinate has no quadrant.
    """
    if centre[0] < point[0]:
        return "ne" if centre[1] < point[1] else "se"
    if centre[0] > point[0]:
        return "nw" if centre[1] < point[1] else "sw"
    return None


def _as_point(point: Any) -> tuple:
    x, y = point
    return (x, y)


@dataclass(eq=False)
class QuadNode:
    """A node holding a point and up to four children, one per quadrant."""

    value: tuple
    nw: QuadNode | None = None
    ne: QuadNode | None = None
    sw: QuadNode | None = None
    se: QuadNode | None = None

    def children(self) -> Iterator[QuadNode]:
        """Yield the present children in NW, NE, SW, SE order."""
        for name in _QUADRANTS:
            child = getattr(self, name)
            if child is not None:
                yield child

    def insert(self, point: Any) -> bool:
        """Place ``point`` below this node; return False if a tie on x drops it."""
        point = _as_point(point)
        node = self
        while True:
            side = _quadrant(node.value, point)
            if side is None:
                return False
            child = getattr(node, side)
            if child is None:
                setattr(node, side, QuadNode(point))
                return True
            node = child

    def find(self, point: Any) -> QuadNode | None:
        """Return the node below this one holding ``point``, or None."""
        point = _as_point(point)
        node: QuadNode | None = self
        while node is not None:
            if node.value == point:
                return node
            side = _quadrant(node.value, point)
            if side is None:
                return None
            node = getattr(node, side)
        return None


class QuadTree:
    """A point quadtree with an optional root."""

    def __init__(self, point: Any = _NO_VALUE) -> None:
        self.root: QuadNode | None = (
            None if point is _NO_VALUE else QuadNode(_as_point(point))
        )

    def _levels(self) -> Iterator[list[QuadNode]]:
        level = [self.root] if self.root is not None else []
        while level:
            yield level
            level = [child for node in level for child in node.children()]

    def is_empty(self) -> bool:
        """Return whether the tree has no root."""
        return self.root is None

    def root_value(self) -> tuple:
        """Return the point at the root."""
        if self.root is None:
            raise IndexError("tree is empty")
        return self.root.value

    def height(self) -> int:
        """Return the number of levels; a single node has 1 and an empty tree 0."""
        return sum(1 for _ in self._levels())

    def size(self) -> int:
        """Return the number of nodes."""
        return sum(len(level) for level in self._levels())

    def insert(self, point: Any) -> bool:
        """Insert ``point``; return False if a tie on x drops it."""
        if self.root is None:
            self.root = QuadNode(_as_point(point))
            return True
        return self.root.insert(point)

    def find(self, point: Any) -> QuadNode | None:
        """Return the node holding ``point``, or None."""
        return None if self.root is None else self.root.find(point)

    def preorder(self) -> list[tuple]:
        """Return the points with each node before its NW, NE, SW, SE subtrees."""
        values: list[tuple] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            values.append(node.value)
            stack.extend(reversed(list(node.children())))
        return values

    def postorder(self) -> list[tuple]:
        """Return the points with each node after its NW, NE, SW, SE subtrees."""
        reversed_values: list[tuple] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reversed_values.append(node.value)
            stack.extend(node.children())
        return reversed_values[::-1]