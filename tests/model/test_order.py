"""Tests for dense sibling ordering."""

from taskorium.model.node import Node
from taskorium.model.order import by_order, drop_index, is_dense, place, reindex


def _nodes(*orders):
    return [Node(title=str(i), order=o) for i, o in enumerate(orders)]


def test_reindex_assigns_positions():
    nodes = _nodes(5, 9, 2)
    reindex(nodes)
    assert [n.order for n in nodes] == [0, 1, 2]


def test_reindex_idempotent():
    nodes = _nodes(3, 1, 4)
    reindex(nodes)
    reindex(nodes)
    assert [n.order for n in nodes] == [0, 1, 2]


def test_reindex_skips_unchanged():
    nodes = _nodes(0, 1)
    before = [n._version for n in nodes]
    reindex(nodes)
    assert [n._version for n in nodes] == before


def test_by_order_sorts():
    nodes = _nodes(2, 0, 1)
    assert [n.title for n in by_order(nodes)] == ["1", "2", "0"]


def test_by_order_is_stable_for_ties():
    nodes = _nodes(1, 1, 0)
    assert [n.title for n in by_order(nodes)] == ["2", "0", "1"]


def test_is_dense():
    assert is_dense(_nodes(1, 0, 2))
    assert is_dense([])
    assert not is_dense(_nodes(0, 2))
    assert not is_dense(_nodes(0, 0, 1))
    assert not is_dense(_nodes(1, 2))


def test_drop_index_other_parent():
    assert drop_index(0, 3) == 0
    assert drop_index(3, 3) == 3
    assert drop_index(7, 3) == 3
    assert drop_index(-2, 3) == 0


def test_drop_index_same_parent_above_source():
    # [X, Y, Z]: lift Y (1), drop in front of X (0)
    assert drop_index(0, 2, source_index=1) == 0


def test_drop_index_same_parent_below_source():
    # [X, Y, Z]: lift X (0), drop in front of Z (2) → between Y and Z
    assert drop_index(2, 2, source_index=0) == 1
    # drop after Z
    assert drop_index(3, 2, source_index=0) == 2


def test_drop_index_own_slot():
    # Either gap next to the item puts it back where it was.
    assert drop_index(1, 2, source_index=1) == 1
    assert drop_index(2, 2, source_index=1) == 1


def test_drop_index_clamps_after_adjustment():
    assert drop_index(99, 2, source_index=0) == 2
    assert drop_index(-5, 2, source_index=1) == 0


def test_place_within():
    nodes = by_order(_nodes(0, 1, 2))
    x, y, z = nodes
    assert place(nodes, x, 3) == [y, z, x]
    assert place(nodes, z, 0) == [z, x, y]
    assert place(nodes, y, 1) == [x, y, z]


def test_place_into():
    nodes = by_order(_nodes(0, 1))
    newcomer = Node(title="new", order=0)
    assert place(nodes, newcomer, 1) == [nodes[0], newcomer, nodes[1]]
    assert place(nodes, newcomer, 10)[-1] is newcomer
