"""Dijkstra shortest distances over an adjacency matrix."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

INT_MAX = 2**31 - 1
HEADER = "Vertice \t Distancia desde la fuente\n"

EXAMPLE_GRAPH = (
    (0, 2, 4, 0, 0, 0, 0),
    (2, 0, 0, 5, 0, 0, 0),
    (4, 0, 0, 8, 0, 0, 0),
    (0, 5, 8, 0, 10, 6, 15),
    (0, 0, 0, 10, 0, 2, 6),
    (0, 0, 0, 6, 2, 0, 2),
    (0, 0, 0, 15, 6, 2, 0),
)


def shortest_distances(
    matrix: Sequence[Sequence[int]], source: int
) -> list[float]:
    """Return the distance from ``source`` to every vertex; a zero weight means no edge.

    Unreachable vertices get ``math.inf``.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < size:
        raise IndexError("source vertex out of range")

    distance: list[float] = [math.inf] * size
    settled = [False] * size
    distance[source] = 0

    for _ in range(size - 1):
        # Ties go to the highest index, matching a "<=" scan.
        current = max(
            (k for k in range(size) if not settled[k]),
            key=lambda k: (-distance[k], k),
        )
        settled[current] = True
        if distance[current] == math.inf:
            continue
        for target, weight in enumerate(matrix[current]):
            if settled[target] or not weight:
                continue
            candidate = distance[current] + weight
            if candidate < distance[target]:
                distance[target] = candidate
    return distance


def format_distances(distances: Sequence[float]) -> str:
    """Return the distance table, naming vertices A, B, C, ..."""
    rows = "".join(
        f"{chr(ord('A') + index)}\t\t{INT_MAX if value == math.inf else value}\n"
        for index, value in enumerate(distances)
    )
    return HEADER + rows


def main(argv: list[str] | None = None) -> int:
    """Print the distances from vertex A in the example graph."""
    distances = shortest_distances(EXAMPLE_GRAPH, 0)
    table = format_distances(distances)
    sys.stdout.write(table)
    sys.stdout.flush()
    return 0