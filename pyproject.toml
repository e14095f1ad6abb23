[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estructuras"
version = "0.1.0"
description = "Classic data structures and small exercises: recursion, graphs, Dijkstra, binary, AVL, expression, k-d and quad trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "binary search tree",
    "avl",
    "kd-tree",
    "quadtree",
    "graph",
    "dijkstra",
    "expression tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estructuras-recursion = "estructuras.recursion:main"
estructuras-arrays = "estructuras.arrays:main"
estructuras-invoice = "estructuras.invoice:main"
estructuras-coffee = "estructuras.coffee:main"
estructuras-greeting = "estructuras.greeting:main"
estructuras-graph = "estructuras.graph:main"
estructuras-undirected = "estructuras.undirected:main"
estructuras-dijkstra = "estructuras.dijkstra:main"
estructuras-bst = "estructuras.bst:main"
estructuras-binary-tree = "estructuras.binary_tree:main"
estructuras-general-tree = "estructuras.general_tree:main"
estructuras-avl = "estructuras.avl:main"
estructuras-expression = "estructuras.expression:main"
estructuras-kdtree = "estructuras.kdtree:main"

[tool.hatch.build.targets.wheel]
packages = ["estructuras"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
