"""Tests of module `robdd.table`."""
import copy

import pytest

import robdd.table as _table
from robdd.table import Node, Table


def test_terminals():
    t = Table(3)
    assert len(t) == 2, len(t)
    assert t[0] == _table.FALSE, t[0]
    assert t[1] == _table.TRUE, t[1]
    assert t[0].is_terminal
    assert t[1].is_terminal
    assert t[0].value is False, t[0]
    assert t[1].value is True, t[1]
    # terminals below all variables
    assert t.level(0) == 3, t.level(0)
    assert t.level(1) == 3, t.level(1)
    assert t.succ(1) == (3, None, None), t.succ(1)
    assert t.assert_consistent()
    with pytest.raises(ValueError):
        Table(-1)


def test_mk():
    t = Table(2)
    u = t.mk(Node(1, 0, 1))
    assert u == 2, u
    assert len(t) == 3, len(t)
    # same content, same index
    v = t.mk(Node(1, 0, 1))
    assert v == u, (v, u)
    assert len(t) == 3, len(t)
    # redundant test
    w = t.mk(Node(0, u, u))
    assert w == u, (w, u)
    assert len(t) == 3, len(t)
    r = t.mk(Node(0, 0, u))
    assert r == 3, r
    assert t.succ(r) == (0, 0, u), t.succ(r)
    assert t.root == r, t.root
    assert t.assert_consistent()


def test_find_or_add():
    t = Table(2)
    u = t.find_or_add(1, 0, 1)
    assert t.find_or_add(1, 0, 1) == u
    assert t.find_or_add(0, 1, 1) == 1
    # variable out of range
    with pytest.raises(ValueError):
        t.find_or_add(2, 0, 1)
    with pytest.raises(ValueError):
        t.find_or_add(-1, 0, 1)
    # no such successor
    with pytest.raises(ValueError):
        t.find_or_add(0, 0, 5)
    # successor not below
    with pytest.raises(ValueError):
        t.find_or_add(1, u, 0)
    assert len(t) == 3, len(t)


def test_add_node():
    t = Table(2, max_nodes=3)
    with pytest.raises(ValueError):
        t.add_node(_table.TRUE)
    u = t.add_node(Node(1, 1, 0))
    assert u == 2, u
    assert t.contains(Node(1, 1, 0))
    assert not t.contains(Node(1, 0, 1))
    assert t.index_of(Node(1, 1, 0)) == u
    with pytest.raises(ValueError):
        t.index_of(Node(1, 0, 1))
    # full
    with pytest.raises(RuntimeError):
        t.add_node(Node(0, 0, 2))


def test_root():
    t = Table(1)
    assert t.root == 1, t.root
    u = t.mk(Node(0, 0, 1))
    assert t.root == u, t.root
    t.root = 0
    assert t.root == 0, t.root
    # root stays after more nodes are added
    t.mk(Node(0, 1, 0))
    assert t.root == 0, t.root
    with pytest.raises(ValueError):
        t.root = 10


def test_assert_consistent():
    t = Table(2)
    u = t.add_node(Node(1, 0, 1))
    t.add_node(Node(0, u, 1))
    assert t.assert_consistent()
    # duplicate
    t = Table(2)
    t.add_node(Node(1, 0, 1))
    t.add_node(Node(1, 0, 1))
    with pytest.raises(AssertionError):
        t.assert_consistent()
    # redundant
    t = Table(2)
    t.add_node(Node(1, 0, 0))
    with pytest.raises(AssertionError):
        t.assert_consistent()
    # order
    t = Table(2)
    u = t.add_node(Node(0, 0, 1))
    t.add_node(Node(1, u, 1))
    with pytest.raises(AssertionError):
        t.assert_consistent()
    # variable out of range
    t = Table(1)
    t.add_node(Node(1, 0, 1))
    with pytest.raises(AssertionError):
        t.assert_consistent()


def _x0_and_x1(
        ) -> Table:
    t = Table(2)
    u = t.find_or_add(1, 0, 1)
    t.root = t.find_or_add(0, 0, u)
    return t


def test_insert_inputs():
    t = _x0_and_x1()
    t.insert_inputs(1, 2)
    assert t.num_inputs == 4, t.num_inputs
    assert t[2].var == 3, t[2]
    assert t[3].var == 0, t[3]
    assert t.level(0) == 4, t.level(0)
    assert t.assert_consistent()
    # the index follows the renumbering
    assert t.index_of(Node(3, 0, 1)) == 2
    assert not t.contains(Node(1, 0, 1))
    with pytest.raises(ValueError):
        t.insert_inputs(5, 1)
    with pytest.raises(ValueError):
        t.insert_inputs(0, -1)


def test_concatenate_inputs():
    t = _x0_and_x1()
    t.pre_concatenate_inputs(3)
    assert t.num_inputs == 5, t.num_inputs
    assert t[2].var == 4, t[2]
    assert t[3].var == 3, t[3]
    t.post_concatenate_inputs(2)
    assert t.num_inputs == 7, t.num_inputs
    assert t[2].var == 4, t[2]
    assert t[3].var == 3, t[3]
    assert t.assert_consistent()


def test_collapse_input():
    t = _x0_and_x1()
    t.insert_inputs(1, 1)
    assert t[2].var == 2, t[2]
    t.collapse_input(1)
    assert t.num_inputs == 2, t.num_inputs
    assert t[2].var == 1, t[2]
    assert t[3].var == 0, t[3]
    assert t.assert_consistent()
    # tested inputs cannot be removed
    with pytest.raises(ValueError):
        t.collapse_input(0)
    with pytest.raises(ValueError):
        t.collapse_input(2)
    assert t.num_inputs == 2, t.num_inputs


def test_negated():
    t = _x0_and_x1()
    r = t.negated()
    assert len(r) == len(t), (len(r), len(t))
    assert r.root == t.root, (r.root, t.root)
    assert r[2] == Node(1, 1, 0), r[2]
    assert r[3] == Node(0, 1, 2), r[3]
    assert r.assert_consistent()
    # operand unchanged
    assert t[2] == Node(1, 0, 1), t[2]
    # constant
    t = Table(2)
    t.root = 1
    r = t.negated()
    assert r.root == 0, r.root


def test_descendants():
    t = Table(3)
    u = t.find_or_add(2, 0, 1)
    v = t.find_or_add(1, 1, 0)
    r = t.find_or_add(0, 1, u)
    t.root = r
    assert t.descendants() == {0, 1, u, r}, t.descendants()
    assert t.descendants(v) == {0, 1, v}, t.descendants(v)
    assert t.descendants(1) == {1}, t.descendants(1)


def test_copy():
    t = _x0_and_x1()
    r = copy.copy(t)
    assert r is not t
    assert r.root == t.root, (r.root, t.root)
    r.insert_inputs(0, 1)
    assert t.num_inputs == 2, t.num_inputs
    assert t[2].var == 1, t[2]
    assert r[2].var == 2, r[2]
    r.mk(Node(0, 1, 0))
    assert len(r) == 5, len(r)
    assert len(t) == 4, len(t)
