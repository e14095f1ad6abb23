import pytest

from estructuras.general_tree import Tree, TreeNode, main

EDGES = [(5, 6), (5, 7), (5, 8), (6, 9), (6, 10), (7, 11)]


def sample():
    tree = Tree(5)
    for parent, value in EDGES:
        assert tree.add_child(parent, value)
    return tree


def test_main_worked_example(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "\t5\n\t6\n\t9\n\t10\n\t7\n\t11\n\t8\n"


def test_empty_tree():
    tree = Tree()
    assert tree.is_empty()
    assert tree.size() == 0
    assert tree.find(1) is None
    assert tree.add_child(1, 2) is False
    assert tree.preorder() == []
    assert tree.remove(1) is False
    with pytest.raises(IndexError):
        tree.root_value()


def test_root_value_and_size():
    tree = sample()
    assert tree.root_value() == 5
    assert tree.size() == len(EDGES) + 1


def test_add_child_to_missing_parent():
    tree = sample()
    assert tree.add_child(99, 1) is False
    assert tree.size() == len(EDGES) + 1


def test_level_order():
    assert sample().level_order() == [5, 6, 7, 8, 9, 10, 11]


def test_postorder_children_before_parents():
    tree = sample()
    order = tree.postorder()
    assert order[-1] == 5
    assert sorted(order) == sorted(tree.preorder())
    for parent, child in EDGES:
        assert order.index(child) < order.index(parent)


def test_height():
    assert TreeNode(1).height() == 0
    chain = Tree(0)
    for value in range(1, 5):
        chain.add_child(value - 1, value)
    assert chain.height() == 4
    assert Tree().height() == -1


def test_find_returns_node_with_children():
    node = sample().find(6)
    assert node.value == 6
    assert [child.value for child in node.children] == [9, 10]


def test_remove_child_removes_first_match_only():
    node = TreeNode(0)
    node.add_child(1)
    node.add_child(2)
    node.add_child(1)
    assert node.remove_child(1) is True
    assert [child.value for child in node.children] == [2, 1]
    assert node.remove_child(7) is False


def test_tree_remove_subtree():
    tree = sample()
    assert tree.remove(6) is True
    assert tree.find(6) is None
    assert tree.find(9) is None
    assert tree.size() == len(EDGES) + 1 - 3


def test_tree_remove_root_and_missing():
    tree = sample()
    assert tree.remove(42) is False
    assert tree.remove(5) is True
    assert tree.is_empty()