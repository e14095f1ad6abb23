"""Weighted undirected graph where every edge is stored in both directions."""

from __future__ import annotations

from typing import Any, Hashable

from estructuras.graph import MissingVertexError, Vertex


class UndirectedGraph:
    """An undirected weighted graph keyed by vertex value."""

    def __init__(self) -> None:
        self.vertices: dict[Hashable, Vertex] = {}

    def add_vertex(self, value: Hashable) -> Vertex:
        """Add a fresh vertex for ``value``, replacing any vertex with that value."""
        vertex = Vertex(value)
        self.vertices[value] = vertex
        return vertex

    def add_edge(self, origin: Hashable, target: Hashable, weight: Any) -> None:
        """Join ``origin`` and ``target`` with an edge in both directions."""
        for value in (origin, target):
            if value not in self.vertices:
                raise MissingVertexError(value)
        source, destination = self.vertices[origin], self.vertices[target]
        source.add_edge(destination, weight)
        destination.add_edge(source, weight)

    def describe(self) -> str:
        """Return one description line per vertex."""
        return "".join(f"{vertex.describe()}\n" for vertex in self.vertices.values())


def main(argv: list[str] | None = None) -> int:
    """Build a small triangle graph and print it."""
    graph = UndirectedGraph()
    for name in ("A", "B", "C"):
        graph.add_vertex(name)
    graph.add_edge("A", "B", 5)
    graph.add_edge("A", "C", 10)
    graph.add_edge("B", "C", 2)
    print(graph.describe(), end="")
    return 0