import io

import pytest

from estructuras.graph import Graph, MissingVertexError, Vertex, run_menu


@pytest.fixture
def graph():
    g = Graph()
    for name in "ABC":
        g.add_vertex(name)
    return g


def test_add_edge_is_directed(graph):
    graph.add_edge("A", "B", 5)
    assert graph.has_edge("A", "B")
    assert not graph.has_edge("B", "A")


def test_add_edge_missing_vertex_raises(graph):
    with pytest.raises(MissingVertexError) as info:
        graph.add_edge("A", "Z", 1)
    assert info.value.value == "Z"
    assert str(info.value) == "Uno de los vértices no existe."


def test_remove_and_update_edge_missing_raise(graph):
    with pytest.raises(MissingVertexError):
        graph.remove_edge("Z", "A")
    with pytest.raises(MissingVertexError):
        graph.update_edge("A", "Q", 3)


def test_remove_edge(graph):
    graph.add_edge("A", "B", 5)
    graph.add_edge("A", "B", 6)
    graph.add_edge("A", "C", 1)
    graph.remove_edge("A", "B")
    assert not graph.has_edge("A", "B")
    assert graph.has_edge("A", "C")


def test_update_edge_changes_first_only(graph):
    first = graph.add_edge("A", "B", 5)
    second = graph.add_edge("A", "B", 6)
    graph.update_edge("A", "B", 9)
    assert first.weight == 9
    assert second.weight == 6


def test_describe_vertex_format(graph):
    graph.add_edge("A", "B", 5)
    assert graph.find_vertex("A").describe() == "Vértice: A tiene aristas a: B (peso: 5), "


def test_describe_graph_has_line_per_vertex(graph):
    lines = graph.describe().splitlines()
    assert len(lines) == graph.vertex_count()
    assert lines[0] == graph.find_vertex("A").describe()


def test_edge_count_halves_stored_edges(graph):
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "A", 1)
    assert graph.edge_count() == 1
    graph.add_edge("C", "A", 2)
    assert graph.edge_count() == 1


def test_remove_vertex_drops_incoming_edges(graph):
    graph.add_edge("A", "B", 1)
    graph.add_edge("C", "B", 2)
    graph.add_edge("A", "C", 3)
    graph.remove_vertex("B")
    assert graph.find_vertex("B") is None
    assert [e.target.value for e in graph.find_vertex("A").edges] == ["C"]
    assert graph.find_vertex("C").edges == []


def test_remove_unknown_vertex_is_ignored(graph):
    graph.remove_vertex("Z")
    assert graph.vertex_count() == 3


def test_rename_vertex_keeps_edges(graph):
    graph.add_edge("A", "B", 4)
    graph.rename_vertex("B", "D")
    assert graph.find_vertex("B") is None
    assert graph.has_edge("A", "D")
    assert graph.find_vertex("D").value == "D"


def test_rename_to_same_name_keeps_vertex(graph):
    graph.rename_vertex("A", "A")
    assert graph.find_vertex("A").value == "A"


def test_add_vertex_replaces_existing(graph):
    old = graph.find_vertex("A")
    new = graph.add_vertex("A")
    assert graph.find_vertex("A") is new
    assert new is not old


def test_has_edge_missing_vertices_false(graph):
    assert graph.has_edge("X", "Y") is False


def test_vertex_remove_edge_uses_identity():
    a, b = Vertex("A"), Vertex("B")
    twin = Vertex("B")
    a.add_edge(b, 1)
    a.add_edge(twin, 2)
    a.remove_edge(b)
    assert [e.target for e in a.edges] == [twin]


def test_run_menu_builds_and_prints():
    out = io.StringIO()
    g = run_menu(io.StringIO("1 A\n1 B\n4 A B 5\n7\n8\n"), out)
    text = out.getvalue()
    assert g.has_edge("A", "B")
    assert "Vértice: A tiene aristas a: B (peso: 5), " in text
    assert "Saliendo..." in text


def test_run_menu_reports_missing_vertex():
    out = io.StringIO()
    run_menu(io.StringIO("1 A\n4 A Z 3\n8\n"), out)
    assert "Uno de los vértices no existe." in out.getvalue()


def test_run_menu_invalid_option_and_eof():
    out = io.StringIO()
    g = run_menu(io.StringIO("9\n1 A\n"), out)
    assert "Opción inválida. Intenta de nuevo." in out.getvalue()
    assert g.vertex_count() == 1


def test_run_menu_update_and_remove():
    out = io.StringIO()
    g = run_menu(io.StringIO("1 A 1 B 4 A B 5 6 A B 7 3 B C 8"), out)
    assert g.find_vertex("A").edges[0].weight == 7
    assert g.has_edge("A", "C")
    g2 = run_menu(io.StringIO("1 A 1 B 4 A B 5 5 A B 2 A 8"), io.StringIO())
    assert g2.find_vertex("A") is None
    assert not g2.has_edge("A", "B")