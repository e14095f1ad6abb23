"""Weighted directed graph with vertex and edge editing, driven by a text menu."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Hashable, TextIO

MENU = (
    "Menú:\n"
    "1. Agregar vértice\n"
    "2. Eliminar vértice\n"
    "3. Actualizar vértice\n"
    "4. Agregar arista\n"
    "5. Eliminar arista\n"
    "6. Actualizar arista\n"
    "7. Imprimir grafo\n"
    "8. Salir\n"
    "Elige una opción: "
)
EXIT_OPTION = 8
MISSING_VERTEX_MESSAGE = "Uno de los vértices no existe."


class MissingVertexError(KeyError):
    """Raised when an edge operation names a vertex that is not in the graph."""

    def __init__(self, value: Hashable) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return MISSING_VERTEX_MESSAGE


@dataclass(eq=False)
class Edge:
    """An edge pointing at ``target`` with a weight."""

    target: Vertex
    weight: Any


@dataclass(eq=False)
class Vertex:
    """A vertex holding a value and its outgoing edges."""

    value: Hashable
    edges: list[Edge] = field(default_factory=list)

    def add_edge(self, target: Vertex, weight: Any) -> Edge:
        """Append an edge to ``target`` and return it."""
        edge = Edge(target, weight)
        self.edges.append(edge)
        return edge

    def remove_edge(self, target: Vertex) -> None:
        """Remove every edge pointing at ``target``."""
        self.edges[:] = [edge for edge in self.edges if edge.target is not target]

    def update_edge(self, target: Vertex, weight: Any) -> None:
        """Set the weight of the first edge pointing at ``target``."""
        for edge in self.edges:
            if edge.target is target:
                edge.weight = weight
                break

    def has_edge(self, target: Vertex) -> bool:
        """Return whether an edge points at ``target``."""
        return any(edge.target is target for edge in self.edges)

    def describe(self) -> str:
        """Return a one-line description of the vertex and its edges."""
        listed = "".join(
            f"{edge.target.value} (peso: {edge.weight}), " for edge in self.edges
        )
        return f"Vértice: {self.value} tiene aristas a: {listed}"


class Graph:
    """A directed weighted graph keyed by vertex value."""

    def __init__(self) -> None:
        self.vertices: dict[Hashable, Vertex] = {}

    def _pair(self, origin: Hashable, target: Hashable) -> tuple[Vertex, Vertex]:
        for value in (origin, target):
            if value not in self.vertices:
                raise MissingVertexError(value)
        return self.vertices[origin], self.vertices[target]

    def add_vertex(self, value: Hashable) -> Vertex:
        """Add a fresh vertex for ``value``, replacing any vertex with that value."""
        vertex = Vertex(value)
        self.vertices[value] = vertex
        return vertex

    def remove_vertex(self, value: Hashable) -> None:
        """Remove a vertex and every edge pointing at it; unknown values are ignored."""
        vertex = self.vertices.get(value)
        if vertex is None:
            return
        for other in self.vertices.values():
            other.remove_edge(vertex)
        del self.vertices[value]

    def rename_vertex(self, old: Hashable, new: Hashable) -> None:
        """Give the vertex ``old`` the value ``new``; unknown values are ignored."""
        vertex = self.vertices.get(old)
        if vertex is None or old == new:
            return
        vertex.value = new
        self.vertices[new] = vertex
        del self.vertices[old]

    def add_edge(self, origin: Hashable, target: Hashable, weight: Any) -> Edge:
        """Add an edge from ``origin`` to ``target``."""
        source, destination = self._pair(origin, target)
        return source.add_edge(destination, weight)

    def remove_edge(self, origin: Hashable, target: Hashable) -> None:
        """Remove the edges from ``origin`` to ``target``."""
        source, destination = self._pair(origin, target)
        source.remove_edge(destination)

    def update_edge(self, origin: Hashable, target: Hashable, weight: Any) -> None:
        """Change the weight of the edge from ``origin`` to ``target``."""
        source, destination = self._pair(origin, target)
        source.update_edge(destination, weight)

    def describe(self) -> str:
        """Return one description line per vertex."""
        return "".join(f"{vertex.describe()}\n" for vertex in self.vertices.values())

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self.vertices)

    def edge_count(self) -> int:
        """Return half the number of stored edges, counting each pair once."""
        return sum(len(vertex.edges) for vertex in self.vertices.values()) // 2

    def find_vertex(self, value: Hashable) -> Vertex | None:
        """Return the vertex holding ``value``, or None."""
        return self.vertices.get(value)

    def has_edge(self, origin: Hashable, target: Hashable) -> bool:
        """Return whether both vertices exist and an edge joins them."""
        source = self.find_vertex(origin)
        destination = self.find_vertex(target)
        if source is None or destination is None:
            return False
        return source.has_edge(destination)


def _words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _ask(words: Iterator[str], out: TextIO, prompt: str = "") -> str:
    out.write(prompt)
    try:
        return next(words)
    except StopIteration:
        raise EOFError("input exhausted") from None


def _ask_int(words: Iterator[str], out: TextIO, prompt: str = "") -> int:
    word = _ask(words, out, prompt)
    try:
        return int(word)
    except ValueError:
        raise ValueError(f"expected an integer, got {word!r}") from None


def _menu_step(option: int, graph: Graph, words: Iterator[str], out: TextIO) -> None:
    if option == 1:
        graph.add_vertex(_ask(words, out, "Ingresa el nombre del vértice: "))
    elif option == 2:
        graph.remove_vertex(_ask(words, out, "Ingresa el nombre del vértice a eliminar: "))
    elif option == 3:
        old = _ask(words, out, "Ingresa el vértice que deseas actualizar: ")
        new = _ask(words, out, "Ingresa el nuevo nombre del vértice: ")
        graph.rename_vertex(old, new)
    elif option == 4:
        origin = _ask(words, out, "Ingresa el vértice origen: ")
        target = _ask(words, out, "Ingresa el vértice destino: ")
        weight = _ask_int(words, out, "Ingresa el peso de la arista: ")
        graph.add_edge(origin, target, weight)
    elif option == 5:
        origin = _ask(words, out, "Ingresa el vértice origen de la arista a eliminar: ")
        target = _ask(words, out, "Ingresa el vértice destino de la arista a eliminar: ")
        graph.remove_edge(origin, target)
    elif option == 6:
        origin = _ask(words, out, "Ingresa el vértice origen de la arista a actualizar: ")
        target = _ask(words, out, "Ingresa el vértice destino de la arista a actualizar: ")
        weight = _ask_int(words, out, "Ingresa el nuevo peso de la arista: ")
        graph.update_edge(origin, target, weight)
    elif option == 7:
        out.write(graph.describe())
    elif option == EXIT_OPTION:
        out.write("Saliendo...\n")
    else:
        out.write("Opción inválida. Intenta de nuevo.\n")


def run_menu(lines: Iterable[str], out: TextIO) -> Graph:
    """Run the graph menu on ``lines``, writing to ``out``; return the resulting graph."""
    graph = Graph()
    words = _words(lines)
    try:
        while True:
            out.write(MENU)
            option = _ask_int(words, out)
            try:
                _menu_step(option, graph, words, out)
            except MissingVertexError as error:
                out.write(f"{error}\n")
            out.write("\n")
            if option == EXIT_OPTION:
                break
    except EOFError:
        pass
    return graph


def main(argv: list[str] | None = None) -> int:
    """Run the graph menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    return 0