import pytest

from lecturetrees.value_tree import TreeNode, ValueBinaryTree


@pytest.fixture
def seven_tree():
    return ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])


@pytest.fixture
def algebra_tree():
    tree = ValueBinaryTree(["+", "-", "*", "a", "/", "d", "e"])
    slash = tree.root.left.right
    slash.left = TreeNode("b")
    slash.right = TreeNode("c")
    return tree


def test_complete_tree_shape():
    tree = ValueBinaryTree([1, 2, 3, 4])
    assert tree.root.data == 1
    assert tree.root.left.data == 2
    assert tree.root.right.data == 3
    assert tree.root.left.left.data == 4
    assert tree.root.left.right is None
    assert tree.root.right.left is None


def test_pre_order_complete(seven_tree):
    assert list(seven_tree.pre_order(seven_tree.root)) == [1, 2, 4, 5, 3, 6, 7]


def test_in_order_complete(seven_tree):
    assert list(seven_tree.in_order(seven_tree.root)) == [4, 2, 5, 1, 6, 3, 7]


def test_post_order_complete(seven_tree):
    assert list(seven_tree.post_order(seven_tree.root)) == [4, 5, 2, 6, 7, 3, 1]


def test_level_order_round_trips_contents(seven_tree):
    assert list(seven_tree.level_order()) == [1, 2, 3, 4, 5, 6, 7]


def test_algebra_pre_order(algebra_tree):
    result = " ".join(algebra_tree.pre_order(algebra_tree.root))
    assert result == "+ - a / b c * d e"


def test_algebra_in_order(algebra_tree):
    result = " ".join(algebra_tree.in_order(algebra_tree.root))
    assert result == "a - b / c + d * e"


def test_algebra_post_order(algebra_tree):
    result = " ".join(algebra_tree.post_order(algebra_tree.root))
    assert result == "a b c / - d e * +"


def test_traversal_of_none_is_empty(seven_tree):
    assert list(seven_tree.pre_order(None)) == []
    assert list(seven_tree.in_order(None)) == []
    assert list(seven_tree.post_order(None)) == []


def test_traversal_of_subtree(seven_tree):
    assert list(seven_tree.in_order(seven_tree.root.right)) == [6, 3, 7]


def test_empty_contents_gives_empty_tree():
    tree = ValueBinaryTree([])
    assert tree.root is None
    assert list(tree.level_order()) == []


def test_default_tree_is_empty():
    tree = ValueBinaryTree()
    assert tree.root is None


def test_clear_removes_everything(seven_tree):
    seven_tree.clear()
    assert seven_tree.root is None
    assert list(seven_tree.level_order()) == []


def test_create_replaces_previous_contents(seven_tree):
    seven_tree.create_complete_tree(["x", "y"])
    assert list(seven_tree.level_order()) == ["x", "y"]


@pytest.mark.parametrize("size", [1, 2, 5, 15, 100])
def test_traversals_visit_every_value_once(size):
    values = list(range(size))
    tree = ValueBinaryTree(values)
    for traversal in (tree.pre_order, tree.in_order, tree.post_order):
        assert sorted(traversal(tree.root)) == values
    assert list(tree.level_order()) == values


def test_pre_and_post_order_endpoints(seven_tree):
    assert next(seven_tree.pre_order(seven_tree.root)) == seven_tree.root.data
    assert list(seven_tree.post_order(seven_tree.root))[-1] == seven_tree.root.data


def test_deep_chain_does_not_overflow():
    root = TreeNode(0)
    node = root
    for value in range(1, 5000):
        node.right = TreeNode(value)
        node = node.right
    tree = ValueBinaryTree()
    tree.root = root
    assert list(tree.in_order(root)) == list(range(5000))
    assert list(tree.post_order(root))[0] == 4999


def test_stores_copies_of_iterable_items():
    tree = ValueBinaryTree(iter("abc"))
    assert list(tree.level_order()) == ["a", "b", "c"]