# estructuras

Classic data structures, a shortest-path routine and a handful of small
interactive exercises, in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `estructuras.recursion` | `sum_recursive`, `even_squares`, `doubled_squares`, `fibonacci`, `contains_char`, and `run_menu` for the text menu |
| `estructuras.arrays` | `random_int`, `fill_random` (integers in 0..25), `format_values`, `format_addresses` |
| `estructuras.invoice` | `Customer`, `read_customer`, `render_invoice`, `write_invoice` |
| `estructuras.coffee` | `CoffeeMaker` with `cappuccino()` and `black_coffee()`, the `Oster` and `Haceb` makers, `run_menu` |
| `estructuras.greeting` | `greeting()` returns `"Hola Mundo"` |
| `estructuras.graph` | directed weighted `Graph` of `Vertex` and `Edge` objects, `MissingVertexError`, `run_menu` |
| `estructuras.undirected` | `UndirectedGraph`, which stores every edge in both directions |
| `estructuras.dijkstra` | `shortest_distances` over an adjacency matrix, `format_distances` |
| `estructuras.bst` | `BSTNode` and free functions `insert`, `delete`, `min_node`, `preorder`, `inorder`, `postorder` |
| `estructuras.binary_tree` | `BinarySearchTree` of `BinaryNode`s, ignoring duplicates |
| `estructuras.general_tree` | n-ary `Tree` of `TreeNode`s |
| `estructuras.avl` | self-balancing `AVLTree` of `AVLNode`s, `run_commands` |
| `estructuras.ordered_tree` | `OrderedBinaryTree` of `OrderedNode`s: insert, size, height |
| `estructuras.expression` | `ExpressionTree`, `parse_prefix`, `parse_postfix`, `is_operator` |
| `estructuras.kdtree` | `KDTree` of `KDNode`s over points of any dimension |
| `estructuras.quadtree` | `QuadTree` of `QuadNode`s over two-dimensional points |

## Library use

```python
from estructuras.graph import Graph, MissingVertexError
from estructuras.dijkstra import shortest_distances
from estructuras.expression import parse_prefix, parse_postfix
from estructuras.avl import AVLTree

graph = Graph()
graph.add_vertex("A")
graph.add_vertex("B")
graph.add_edge("A", "B", 5)
print(graph.has_edge("A", "B"))    # True
try:
    graph.add_edge("A", "Z", 1)
except MissingVertexError as error:
    print(error)                   # Uno de los vértices no existe.

matrix = [
    [0, 2, 4],
    [2, 0, 0],
    [4, 0, 0],
]
print(shortest_distances(matrix, 0))   # [0, 2, 4]

print(parse_prefix("+12").evaluate())  # 3
print(parse_postfix("52-").evaluate()) # 3

tree = AVLTree()
for value in (1, 2, 3):
    tree.insert(value)
print(tree.preorder())             # [2, 1, 3]
```

### Behaviour worth knowing

- **Graphs.** `Graph.add_edge`, `remove_edge` and `update_edge` raise
  `MissingVertexError` (a `KeyError`) when either vertex is absent;
  `remove_vertex` and `rename_vertex` ignore unknown values. `edge_count()`
  returns half the number of stored edges. `describe()` returns one text line
  per vertex. `UndirectedGraph.add_edge` adds the edge to both vertices.
- **Dijkstra.** In the matrix a weight of zero means no edge. Unreachable
  vertices get `math.inf`; `format_distances` prints them as `2147483647`
  and names vertices `A`, `B`, `C`, ...
- **Expression trees.** Operands are single digits; operators are
  `+ - * / %`. Division truncates toward zero and `%` adds its operands.
  `parse_prefix` scans from the last character, so each operator's operands
  come out reversed: `parse_prefix("-52").evaluate()` is `2 - 5 = -3`.
  `infix()` and `evaluate()` raise `ValueError` on an empty tree.
- **Tree heights.** `AVLTree`, `OrderedBinaryTree` and `Tree` count edges
  (a single node has height 0, an empty tree -1). `BinarySearchTree`,
  `KDTree` and `QuadTree` count levels (a single node has height 1, an empty
  tree 0).
- **Duplicates.** `BinarySearchTree`, `AVLTree` and `OrderedBinaryTree`
  return `False` from `insert` for a value already present; the free
  function `bst.insert` sends equal values to the right. `KDTree.insert`
  drops a point whose splitting coordinate equals a node's, and
  `QuadTree.insert` drops a point that shares a node's x coordinate.
- **Root values.** `root_value()` raises `IndexError` on an empty tree.
- **Addresses.** `arrays.format_addresses` shows the memory address of each
  element of a packed `array("i")` built from the values.

## Commands

Each command reads from standard input and writes to standard output:

```
estructuras-recursion      # menu of the recursive functions; option 6 exits
estructuras-arrays         # ten random values and their addresses
estructuras-invoice        # reads name, address and total, writes factura.txt
estructuras-coffee         # choose a coffee maker, then a drink
estructuras-greeting       # prints Hola Mundo
estructuras-graph          # interactive directed graph editor; option 8 exits
estructuras-undirected     # prints a three-vertex undirected graph
estructuras-dijkstra       # distances from A in a seven-vertex sample graph
estructuras-bst            # inserts 1..18, prints traversals, deletes 18
estructuras-binary-tree    # reads seven integers, prints them level by level
estructuras-general-tree   # builds a sample n-ary tree, prints it in preorder
estructuras-avl            # reads "A n" / "E n" commands, prints traversals
estructuras-expression     # builds and evaluates two sample expressions
estructuras-kdtree         # reads fifteen integers, prints pre- and post-order
```

## What it does not do

- `KDTree` and `QuadTree` have no removal; `OrderedBinaryTree` offers only
  insertion, size and height, with no search or traversals.
- The ordered tree and the quadtree have no command.
- Nothing is stored between runs apart from the invoice file that
  `estructuras-invoice` writes.