import io

import pytest

from estructuras.binary_tree import BinarySearchTree, main

BALANCED = [4, 2, 6, 1, 3, 5, 7]


def build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.is_empty()
    assert tree.size() == 0
    assert tree.height() == 0
    assert tree.find(1) is None
    assert tree.remove(1) is False
    assert tree.level_order() == []
    with pytest.raises(IndexError):
        tree.root_value()


def test_root_value_and_not_empty():
    tree = build(BALANCED)
    assert not tree.is_empty()
    assert tree.root_value() == BALANCED[0]


def test_duplicates_are_ignored():
    tree = build(BALANCED)
    assert tree.insert(3) is False
    assert tree.size() == len(BALANCED)


def test_traversals():
    tree = build(BALANCED)
    assert tree.inorder() == sorted(BALANCED)
    assert tree.level_order() == BALANCED
    assert tree.preorder() == [4, 2, 1, 3, 6, 5, 7]
    assert tree.postorder() == [1, 3, 2, 5, 7, 6, 4]


def test_height_of_chain_is_its_length():
    values = [1, 2, 3, 4, 5, 6]
    assert build(values).height() == len(values)
    assert build([9]).height() == 1


def test_find():
    tree = build(BALANCED)
    assert tree.find(5).value == 5
    assert tree.find(42) is None


@pytest.mark.parametrize("victim", BALANCED)
def test_remove_each_value(victim):
    tree = build(BALANCED)
    assert tree.remove(victim) is True
    expected = sorted(BALANCED)
    expected.remove(victim)
    assert tree.inorder() == expected
    assert tree.find(victim) is None
    assert tree.size() == len(BALANCED) - 1


def test_remove_with_right_child_only():
    tree = build([1, 2, 3])
    assert tree.remove(1)
    assert tree.inorder() == [2, 3]
    assert tree.root_value() == 2


def test_remove_last_node_empties_tree():
    tree = build([8])
    assert tree.remove(8)
    assert tree.is_empty()


def test_main_prints_level_order(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 2 6\n1 3 5 7\n"))
    assert main() == 0
    assert capsys.readouterr().out == "\t4\n\t2\n\t6\n\t1\n\t3\n\t5\n\t7\n"