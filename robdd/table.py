"""Canonical tables of BDD nodes.

A table stores the nodes of one reduced ordered
binary decision diagram. Nodes are addressed by
their index in the table. The indices 0 and 1 are
permanently bound to the terminals `FALSE` and `TRUE`.

Reducedness is maintained incrementally by `Table.mk`:
a node with equal successors is never created,
and a node with the same content as an existing
node is never created twice.


Reference
=========

Henrik R. Andersen
    "An introduction to binary decision diagrams"
    Lecture notes for "Efficient Algorithms and Programs", 1999
    The IT University of Copenhagen
"""
# Copyright 2014 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import collections.abc as _abc
import logging
import sys
import typing as _ty

import robdd._abc


logger = logging.getLogger(__name__)


_Yes: _ty.TypeAlias = robdd._abc.Yes
_Cardinality: _ty.TypeAlias = robdd._abc.Cardinality
_Index: _ty.TypeAlias = robdd._abc.Index
_Level: _ty.TypeAlias = robdd._abc.Level
_Fork: _ty.TypeAlias = tuple[
    _Level,
    _Index | None,
    _Index | None]


class Node(_ty.NamedTuple):
    """Terminal or decision node.

    A terminal has `var`, `low`, `high` equal to `None`,
    and carries its Boolean `value`.
    A decision node tests variable `var`, and continues
    at `low` if the variable is `False`, else at `high`.
    Its `value` is `None`.

    Nodes are compared by content.
    """

    var: _Level | None
    low: _Index | None
    high: _Index | None
    value: bool | None = None

    @property
    def is_terminal(
            self
            ) -> _Yes:
        return self.var is None


FALSE: _ty.Final = Node(None, None, None, False)
TRUE: _ty.Final = Node(None, None, None, True)


class Table:
    """Append-only table of nodes with a distinguished root.

    Attributes:
      - `num_inputs`: number of variables,
        which are numbered `0 .. num_inputs - 1`
      - `max_nodes`: raise `RuntimeError` if this limit
        is reached. The default value is `sys.maxsize`.

    The root index is assigned by the algorithm that
    fills the table. Until assigned, it is the index
    of the last node added.
    """

    def __init__(
            self,
            num_inputs:
                _Cardinality=0,
            max_nodes:
                _Cardinality=sys.maxsize
            ) -> None:
        if num_inputs < 0:
            raise ValueError(
                f'expected `num_inputs >= 0`, but {num_inputs = }')
        self.num_inputs = num_inputs
        self.max_nodes = max_nodes
        # index -> node
        self._nodes: list[Node] = [FALSE, TRUE]
        # node -> index
        self._index: dict[Node, _Index] = {FALSE: 0, TRUE: 1}
        self._root: _Index | None = None

    def __copy__(
            self
            ) -> 'Table':
        table = Table(self.num_inputs, self.max_nodes)
        table._nodes = list(self._nodes)
        table._index = dict(self._index)
        table._root = self._root
        return table

    def copy(
            self
            ) -> 'Table':
        """Return a deep copy."""
        return self.__copy__()

    def __len__(
            self
            ) -> _Cardinality:
        return len(self._nodes)

    def __iter__(
            self
            ) -> _abc.Iterator[_Index]:
        return iter(range(len(self._nodes)))

    def __getitem__(
            self,
            u:
                _Index
            ) -> Node:
        return self._nodes[u]

    def __str__(
            self
            ) -> str:
        return (
            'Table of BDD nodes:\n'
            '-------------------\n'
            f'inputs: {self.num_inputs}\n'
            f'nodes: {len(self)}\n'
            f'root: {self.root}\n')

    @property
    def root(
            self
            ) -> _Index:
        if self._root is None:
            return len(self._nodes) - 1
        return self._root

    @root.setter
    def root(
            self,
            u:
                _Index
            ) -> None:
        if not (0 <= u < len(self._nodes)):
            raise ValueError(
                f'{u} is not the index of a node '
                f'(table has {len(self._nodes)} nodes)')
        self._root = u

    def level(
            self,
            u:
                _Index
            ) -> _Level:
        """Return variable of node `u`.

        Terminals are placed at level `num_inputs`,
        below all variables.
        """
        var = self._nodes[u].var
        if var is None:
            return self.num_inputs
        return var

    def succ(
            self,
            u:
                _Index
            ) -> _Fork:
        """Return `(level, low, high)` for node `u`."""
        node = self._nodes[u]
        return self.level(u), node.low, node.high

    def add_node(
            self,
            node:
                Node
            ) -> _Index:
        """Append `node`, and return its index.

        Does not check for an existing equal node.
        Call `contains` first, or use `mk`.
        """
        if node.is_terminal:
            raise ValueError(
                'terminal nodes are preallocated '
                'at the indices 0 and 1')
        u = len(self._nodes)
        if u >= self.max_nodes:
            raise RuntimeError(
                'full: reached `self.max_nodes` nodes '
                f'({self.max_nodes = }).')
        self._nodes.append(node)
        self._index.setdefault(node, u)
        return u

    def contains(
            self,
            node:
                Node
            ) -> _Yes:
        """Return `True` if a node equal to `node` exists."""
        return node in self._index

    def index_of(
            self,
            node:
                Node
            ) -> _Index:
        """Return index of the node equal to `node`.

        Raise `ValueError` if there is no such node.
        """
        u = self._index.get(node)
        if u is None:
            raise ValueError(
                f'{node} is not in the table')
        return u

    def mk(
            self,
            node:
                Node
            ) -> _Index:
        """Return index of the canonical node for `node`.

        If `node` has equal successors, then return
        that successor. If an equal node exists, then
        return its index. Otherwise, add `node`.
        """
        if node.low == node.high:
            return node.low
        u = self._index.get(node)
        if u is not None:
            return u
        return self.add_node(node)

    def find_or_add(
            self,
            var:
                _Level,
            low:
                _Index,
            high:
                _Index
            ) -> _Index:
        """Return index of node `(var, low, high)`.

        Same as `mk`, after checking the arguments.

        @param var:
            variable in `range(num_inputs)`
        @param low:
            index of successor if `var` is `False`
        @param high:
            index of successor if `var` is `True`
        """
        if not (0 <= var < self.num_inputs):
            raise ValueError(
                f'The given variable: {var = } is not in '
                f'`range({self.num_inputs})`')
        n = len(self._nodes)
        for u in (low, high):
            if not (0 <= u < n):
                raise ValueError(
                    f'{u} is not the index of a node')
            if not (var < self.level(u)):
                raise ValueError(
                    f'successor {u} at level {self.level(u)} '
                    f'is not below variable {var}')
        return self.mk(Node(var, low, high))

    def insert_inputs(
            self,
            position:
                _Level,
            count:
                _Cardinality
            ) -> None:
        """Insert `count` new inputs before input `position`.

        Each variable `>= position` moves up by `count`.
        The new inputs are not tested by any node.
        """
        if not (0 <= position <= self.num_inputs):
            raise ValueError(
                f'expected `0 <= position <= {self.num_inputs}`, '
                f'but {position = }')
        if count < 0:
            raise ValueError(
                f'expected `count >= 0`, but {count = }')
        logger.debug(
            f'insert {count} inputs at {position}')
        self._remap(
            lambda i: i + count if i >= position else i)
        self.num_inputs += count

    def pre_concatenate_inputs(
            self,
            count:
                _Cardinality
            ) -> None:
        """Add `count` inputs before all existing inputs."""
        self.insert_inputs(0, count)

    def post_concatenate_inputs(
            self,
            count:
                _Cardinality
            ) -> None:
        """Add `count` inputs after all existing inputs."""
        self.insert_inputs(self.num_inputs, count)

    def collapse_input(
            self,
            var:
                _Level
            ) -> None:
        """Remove input `var`, which no node may test.

        Each variable `> var` moves down by one.
        """
        if not (0 <= var < self.num_inputs):
            raise ValueError(
                f'The given variable: {var = } is not in '
                f'`range({self.num_inputs})`')
        tested = [
            u for u, node in enumerate(self._nodes)
            if node.var == var]
        if tested:
            raise ValueError(
                f'cannot collapse input {var}, '
                f'because the nodes {tested} test it')
        logger.debug(f'collapse input {var}')
        self._remap(
            lambda i: i - 1 if i > var else i)
        self.num_inputs -= 1

    def _remap(
            self,
            mapping:
                _abc.Callable[[_Level], _Level]
            ) -> None:
        """Replace the variable of each node using `mapping`.

        `mapping` must be increasing, so that
        the variable order is preserved.
        """
        self._nodes = [
            node if node.is_terminal
            else node._replace(var=mapping(node.var))
            for node in self._nodes]
        self._index = dict()
        for u, node in enumerate(self._nodes):
            self._index.setdefault(node, u)

    def negated(
            self
            ) -> 'Table':
        """Return table of the complement.

        Node indices are preserved,
        references to terminals are swapped.
        """
        def flip(u):
            if u is None or u > 1:
                return u
            return 1 - u
        table = Table(self.num_inputs, self.max_nodes)
        for node in self._nodes[2:]:
            table._nodes.append(Node(
                node.var, flip(node.low), flip(node.high)))
        for u, node in enumerate(table._nodes):
            table._index.setdefault(node, u)
        table._root = flip(self.root)
        return table

    def descendants(
            self,
            root:
                _Index |
                None=None
            ) -> set[_Index]:
        """Return nodes reachable from `root`.

        The node `root` is included.
        If `root is None`, then use `self.root`.
        """
        if root is None:
            root = self.root
        visited = set()
        stack = [root]
        while stack:
            u = stack.pop()
            if u in visited:
                continue
            visited.add(u)
            node = self._nodes[u]
            if node.is_terminal:
                continue
            stack.extend([node.low, node.high])
        return visited

    def assert_consistent(
            self
            ) -> _Yes:
        """Raise `AssertionError` if not a valid ROBDD table."""
        if self._nodes[0] != FALSE:
            raise AssertionError(self._nodes[0])
        if self._nodes[1] != TRUE:
            raise AssertionError(self._nodes[1])
        if not (0 <= self.root < len(self._nodes)):
            raise AssertionError(self.root)
        # uniqueness
        decisions = self._nodes[2:]
        n = len(decisions)
        n_ = len(set(decisions))
        if n != n_:
            raise AssertionError(n - n_)
        for u, node in enumerate(decisions, start=2):
            i, v, w, value = node
            if not isinstance(i, int):
                raise TypeError(i)
            if value is not None:
                raise AssertionError((u, value))
            if not (0 <= i < self.num_inputs):
                raise AssertionError((u, i))
            # successors added before `u`
            if not (0 <= v < u and 0 <= w < u):
                raise AssertionError((u, v, w))
            # elimination
            if v == w:
                raise AssertionError((u, v))
            # var order should increase
            for x in (v, w):
                if not (i < self.level(x)):
                    raise AssertionError((u, i))
            # `_index` contains inverse of `_nodes`
            if self._index.get(node) != u:
                raise AssertionError(u)
        if len(self._index) != len(self._nodes):
            raise AssertionError(
                (len(self._index), len(self._nodes)))
        return True
