"""Unit tests for the score tree."""

import pytest

from social_registry.core.score_tree import ScoreTree


def build(*entries):
    tree = ScoreTree()
    for name, score in entries:
        tree.insert(name, score)
    return tree


@pytest.fixture
def balanced():
    """Tree with three full levels."""
    return build(("m", 50), ("f", 30), ("t", 70), ("c", 20), ("h", 40), ("p", 60), ("x", 80))


def test_empty_tree():
    """Test queries on an empty tree."""
    tree = ScoreTree()
    assert tree.height() == -1
    assert tree.at_depth(0) == []
    assert tree.inorder() == []
    assert tree.is_empty()
    assert len(tree) == 0


def test_single_node_height():
    """Test that a single node has height 0."""
    assert build(("a", 1)).height() == 0


def test_at_depth(balanced):
    """Test breadth-first extraction by depth."""
    assert balanced.at_depth(0) == ["m"]
    assert balanced.at_depth(1) == ["f", "t"]
    assert balanced.at_depth(2) == ["c", "h", "p", "x"]
    assert balanced.at_depth(3) == []
    assert balanced.at_depth(-1) == []
    assert balanced.height() == 2


def test_equal_scores_share_node():
    """Test that ties are appended to the existing node."""
    tree = build(("a", 50), ("b", 30), ("c", 50), ("d", 30))
    assert tree.at_depth(0) == ["a", "c"]
    assert tree.at_depth(1) == ["b", "d"]
    assert tree.height() == 1
    assert len(tree) == 4


def test_shape_depends_on_insertion_order():
    """Test that the same scores in another order give another shape."""
    ascending = build(("a", 10), ("b", 20), ("c", 30))
    mixed = build(("b", 20), ("a", 10), ("c", 30))

    assert ascending.height() == 2
    assert ascending.at_depth(2) == ["c"]
    assert mixed.height() == 1
    assert mixed.at_depth(1) == ["a", "c"]


def test_inorder_is_ascending(balanced):
    """Test in-order traversal."""
    assert balanced.inorder() == ["c", "f", "h", "m", "p", "t", "x"]


def test_ranked_at_depth():
    """Test depth four ranking by follower count, stable on ties."""
    tree = build(("root", 50), ("l1", 40), ("l2", 30), ("l3", 20), ("a", 10), ("b", 10), ("c", 10))
    followers = {"a": 1, "b": 5, "c": 1}

    assert tree.at_depth(4) == ["a", "b", "c"]
    assert tree.level_four_by_followers(followers.get) == ["b", "a", "c"]


def test_remove_leaf_restores_shape(balanced):
    """Test that removing the last inserted leaf undoes its insertion."""
    balanced.insert("z", 90)
    assert balanced.height() == 3

    assert balanced.remove("z", 90) is True
    assert balanced.height() == 2
    assert balanced.inorder() == ["c", "f", "h", "m", "p", "t", "x"]


def test_remove_keeps_shared_node():
    """Test that a node survives while other clients share its score."""
    tree = build(("a", 50), ("b", 50))
    tree.remove("a", 50)
    assert tree.at_depth(0) == ["b"]
    assert len(tree) == 1


def test_remove_node_with_two_children(balanced):
    """Test deletion through the in-order successor."""
    balanced.remove("t", 70)
    assert balanced.inorder() == ["c", "f", "h", "m", "p", "x"]
    assert balanced.at_depth(1) == ["f", "x"]
    assert balanced.at_depth(2) == ["c", "h", "p"]


def test_remove_root():
    """Test removing the root of a small tree."""
    tree = build(("a", 50), ("b", 30))
    tree.remove("a", 50)
    assert tree.at_depth(0) == ["b"]

    tree.remove("b", 30)
    assert tree.is_empty()


def test_remove_missing():
    """Test that removing an unknown name reports False."""
    tree = build(("a", 50))
    assert tree.remove("a", 40) is False
    assert tree.remove("b", 50) is False
    assert len(tree) == 1
