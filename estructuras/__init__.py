"""Classic data structures (graphs, binary, AVL, general, expression, k-d and quad trees),
Dijkstra shortest distances and small interactive exercises."""

__version__ = "0.1.0"