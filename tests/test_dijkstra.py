import math

import pytest

from estructuras.dijkstra import (
    EXAMPLE_GRAPH,
    format_distances,
    main,
    shortest_distances,
)


def test_example_graph_from_a():
    assert shortest_distances(EXAMPLE_GRAPH, 0) == [0, 2, 4, 7, 15, 13, 15]


def test_source_distance_is_zero():
    for source in range(len(EXAMPLE_GRAPH)):
        assert shortest_distances(EXAMPLE_GRAPH, source)[source] == 0


def test_symmetric_matrix_gives_symmetric_distances():
    size = len(EXAMPLE_GRAPH)
    table = [shortest_distances(EXAMPLE_GRAPH, s) for s in range(size)]
    for i in range(size):
        for j in range(size):
            assert table[i][j] == table[j][i]


def test_no_edge_can_shorten_a_distance():
    for source in range(len(EXAMPLE_GRAPH)):
        dist = shortest_distances(EXAMPLE_GRAPH, source)
        for i, row in enumerate(EXAMPLE_GRAPH):
            for j, weight in enumerate(row):
                if weight:
                    assert dist[j] <= dist[i] + weight


def test_direct_edge_is_upper_bound():
    dist = shortest_distances(EXAMPLE_GRAPH, 0)
    for target, weight in enumerate(EXAMPLE_GRAPH[0]):
        if weight:
            assert dist[target] <= weight


def test_unreachable_is_infinite():
    matrix = [[0, 3, 0], [3, 0, 0], [0, 0, 0]]
    assert shortest_distances(matrix, 0) == [0, 3, math.inf]


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        shortest_distances([[0, 1], [1]], 0)


def test_source_out_of_range():
    with pytest.raises(IndexError):
        shortest_distances(EXAMPLE_GRAPH, 7)


def test_format_distances_layout():
    text = format_distances([0, 4, math.inf])
    assert text.splitlines() == [
        "Vertice \t Distancia desde la fuente",
        "A\t\t0",
        "B\t\t4",
        "C\t\t2147483647",
    ]


def test_main_prints_table(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out == format_distances(shortest_distances(EXAMPLE_GRAPH, 0))
    assert out.startswith("Vertice \t Distancia desde la fuente\nA\t\t0\n")