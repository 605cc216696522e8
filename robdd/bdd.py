"""Reduced ordered binary decision diagrams.

Each `BDD` is a handle around one `robdd.table.Table`,
which it exclusively owns. Every construction
(synthesis, `apply`, `restrict`, `compose`) fills
a fresh table, so operands are never mutated.


References
==========

Randal E. Bryant
    "Graph-based algorithms for Boolean function manipulation"
    IEEE Transactions on Computers
    Volume C-35, No. 8, August, 1986, pages 677--690

Karl S. Brace, Richard L. Rudell, Randal E. Bryant
    "Efficient implementation of a BDD package"
    27th ACM/IEEE Design Automation Conference (DAC), 1990
    pages 40--45

Henrik R. Andersen
    "An introduction to binary decision diagrams"
    Lecture notes for "Efficient Algorithms and Programs", 1999
    The IT University of Copenhagen
"""
# Copyright 2014 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import collections.abc as _abc
import enum
import logging
import sys
import typing as _ty

import robdd._abc
import robdd._utils as _utils
import robdd.table as _table
# inline:
# import networkx
# import pydot


logger = logging.getLogger(__name__)
_config: dict[str, int] = dict(
    max_nodes=sys.maxsize,
    synthesis_warning_inputs=16)


_Yes: _ty.TypeAlias = robdd._abc.Yes
_Cardinality: _ty.TypeAlias = robdd._abc.Cardinality
_Index: _ty.TypeAlias = robdd._abc.Index
_Level: _ty.TypeAlias = robdd._abc.Level
_Inputs: _ty.TypeAlias = robdd._abc.Inputs
_Formula: _ty.TypeAlias = robdd._abc.Formula
_Executable: _ty.TypeAlias = robdd._abc.Executable
Operator = robdd._abc.Operator
_OperatorLike: _ty.TypeAlias = (
    robdd._abc.Operator |
    robdd._abc.OperatorSymbol |
    robdd._abc.BinaryFunction)
_Variables: _ty.TypeAlias = (
    int |
    _abc.Sequence[str])


def configure(
        **kw
        ) -> dict[str, int]:
    """Read and apply parameter values.

    First read parameter values (returned as `dict`),
    then apply `kw`. Available keyword arguments:

    - `'max_nodes'`: raise `RuntimeError` when a table
      under construction reaches this many nodes
    - `'synthesis_warning_inputs'`: log a warning when
      synthesizing from a function with more inputs
    """
    d = dict(_config)
    for k, v in kw.items():
        if k not in _config:
            raise ValueError(
                f'Unknown parameter "{k}"')
        if k == 'max_nodes' and v < 2:
            raise ValueError(
                f'need room for the terminals, but {v = }')
        if v < 0:
            raise ValueError(
                f'expected nonnegative value for "{k}", '
                f'but {v = }')
        _config[k] = v
    return d


def _new_table(
        num_inputs:
            _Cardinality
        ) -> _table.Table:
    return _table.Table(
        num_inputs, max_nodes=_config['max_nodes'])


class Predefined(enum.Enum):
    """Functions with hand-assembled BDDs.

    `TEST2` and `TEST3` are the restriction example,
    `TEST4` and `TEST5` the `apply` example,
    from Andersen's lecture notes.
    """

    TRUE = 'true'
    FALSE = 'false'
    NOT = 'not'
    NAND = 'nand'
    AND = 'and'
    OR = 'or'
    XOR = 'xor'
    SHUNT = 'shunt'
    TEST1 = 'test1'
    TEST2 = 'test2'
    TEST3 = 'test3'
    TEST4 = 'test4'
    TEST5 = 'test5'
    XOR_POSTCAT2 = 'xor_postcat2'
    XOR_PRECAT2 = 'xor_precat2'


# name -> (number of inputs, nodes as `(var, low, high)`)
# The node at position `k` in the list is added
# at index `k + 2`, and the last node is the root.
_PREDEFINED: _ty.Final = {
    Predefined.NOT: (1, [
        (0, 1, 0)]),
    Predefined.SHUNT: (1, [
        (0, 0, 1)]),
    Predefined.NAND: (2, [
        (1, 1, 0),
        (0, 1, 2)]),
    Predefined.AND: (2, [
        (1, 0, 1),
        (0, 0, 2)]),
    Predefined.OR: (2, [
        (1, 0, 1),
        (0, 2, 1)]),
    Predefined.XOR: (2, [
        (1, 0, 1),
        (1, 1, 0),
        (0, 2, 3)]),
    Predefined.TEST1: (2, [
        (1, 0, 1)]),
    Predefined.TEST2: (3, [
        (2, 0, 1),
        (1, 1, 2),
        (1, 2, 1),
        (0, 3, 4)]),
    Predefined.TEST3: (3, [
        (2, 0, 1),
        (0, 1, 2)]),
    Predefined.TEST4: (5, [
        (4, 1, 0),
        (3, 2, 0),
        (3, 0, 2),
        (2, 3, 4),
        (1, 5, 0),
        (1, 0, 5),
        (0, 6, 7)]),
    Predefined.TEST5: (5, [
        (4, 1, 0),
        (2, 2, 0),
        (2, 0, 2),
        (0, 3, 4)]),
    Predefined.XOR_POSTCAT2: (4, [
        (1, 0, 1),
        (1, 1, 0),
        (0, 2, 3)]),
    Predefined.XOR_PRECAT2: (4, [
        (3, 0, 1),
        (3, 1, 0),
        (2, 2, 3)])}


class BooleanFunction:
    """Wrap a Python callable as an `Executable`.

    ```python
    import robdd

    f = robdd.BooleanFunction(
        lambda x, y: x and not y, 2)
    u = robdd.BDD.from_function(f)
    ```

    The callable receives one `bool` argument
    per input, and returns either a `bool`,
    or a sequence of `num_outputs` values.
    """

    def __init__(
            self,
            func:
                _abc.Callable[..., _ty.Any],
            num_inputs:
                _Cardinality,
            num_outputs:
                _Cardinality=1
            ) -> None:
        if num_inputs < 0:
            raise ValueError(
                f'expected `num_inputs >= 0`, but {num_inputs = }')
        if num_outputs < 1:
            raise ValueError(
                f'expected `num_outputs >= 1`, but {num_outputs = }')
        self.func = func
        self.num_inputs = num_inputs
        self.num_outputs = num_outputs

    def execute(
            self,
            inputs:
                _Inputs
            ) -> list[bool]:
        _check_inputs(inputs, self.num_inputs)
        r = self.func(*inputs)
        if isinstance(r, _abc.Iterable):
            outputs = [bool(x) for x in r]
        else:
            outputs = [bool(r)]
        if len(outputs) != self.num_outputs:
            raise ValueError(
                f'expected {self.num_outputs} outputs, '
                f'but the function returned: {outputs}')
        return outputs


def _check_inputs(
        inputs:
            _Inputs,
        num_inputs:
            _Cardinality
        ) -> None:
    """Raise `ValueError` if `inputs` has wrong length."""
    if len(inputs) == num_inputs:
        return
    raise ValueError(
        f'expected {num_inputs} inputs, '
        f'but {len(inputs) = }')


class BDD:
    """Reduced ordered binary decision diagram of one function.

    A `BDD` is a thin handle around the `robdd.table.Table`
    in the attribute `table`, which no other `BDD` shares.

    ```python
    import robdd

    x = robdd.BDD.predefined('nand')
    y = robdd.BDD.predefined('xor')
    u = x & y
    u.truth_table() == [False, True, True, False]
    ```

    Equality (`==`) compares graphs by content,
    which for reduced ordered BDDs over the same
    number of inputs means functional equivalence.

    Construction methods return new `BDD` instances,
    and leave their operands unchanged. The methods
    `insert_inputs`, `pre_concatenate_inputs`,
    `post_concatenate_inputs`, `collapse_input`
    renumber the inputs of `self` in place.
    """

    def __init__(
            self,
            table:
                _table.Table
            ) -> None:
        self.table = table

    @classmethod
    def from_function(
            cls,
            f:
                _Executable,
            output:
                int |
                None=None
            ) -> 'BDD':
        """Return BDD of output `output` of `f`.

        Calls `f.execute` once for each assignment.
        If `output is None`, then `f` must have one output.
        """
        return synthesize(f, output)

    @classmethod
    def predefined(
            cls,
            name:
                Predefined |
                str
            ) -> 'BDD':
        """Return BDD of a hand-assembled function."""
        return predefined(name)

    @classmethod
    def constant(
            cls,
            value:
                _Yes,
            num_inputs:
                _Cardinality=0
            ) -> 'BDD':
        """Return BDD of constant `value`."""
        table = _new_table(num_inputs)
        table.root = 1 if value else 0
        return cls(table)

    @classmethod
    def variable(
            cls,
            var:
                _Level,
            num_inputs:
                _Cardinality
            ) -> 'BDD':
        """Return BDD of the input `var`."""
        table = _new_table(num_inputs)
        table.root = table.find_or_add(var, 0, 1)
        return cls(table)

    def __copy__(
            self
            ) -> 'BDD':
        return BDD(self.table.copy())

    def copy(
            self
            ) -> 'BDD':
        """Return a deep copy."""
        return self.__copy__()

    def __len__(
            self
            ) -> _Cardinality:
        """Return number of reachable nodes."""
        return len(self.table.descendants())

    def __eq__(
            self,
            other
            ) -> _Yes:
        if not isinstance(other, BDD):
            return NotImplemented
        return _isomorphic(self.table, other.table)

    def __hash__(
            self
            ) -> int:
        level, _, _ = self.table.succ(self.table.root)
        return hash((self.num_inputs, level))

    def __str__(
            self
            ) -> str:
        return (
            'Binary decision diagram:\n'
            '------------------------\n'
            f'inputs: {self.num_inputs}\n'
            f'nodes: {len(self)}\n')

    def __repr__(
            self
            ) -> str:
        return (
            f'<robdd.bdd.BDD with {self.num_inputs} inputs '
            f'and {len(self)} nodes>')

    def __invert__(
            self
            ) -> 'BDD':
        return self.negation()

    def __and__(
            self,
            other:
                'BDD'
            ) -> 'BDD':
        return apply(Operator.AND, self, other)

    def __or__(
            self,
            other:
                'BDD'
            ) -> 'BDD':
        return apply(Operator.OR, self, other)

    def __xor__(
            self,
            other:
                'BDD'
            ) -> 'BDD':
        return apply(Operator.XOR, self, other)

    def implies(
            self,
            other:
                'BDD'
            ) -> 'BDD':
        return apply(Operator.IMPLIES, self, other)

    def equiv(
            self,
            other:
                'BDD'
            ) -> 'BDD':
        return apply(Operator.EQUIV, self, other)

    @property
    def num_inputs(
            self
            ) -> _Cardinality:
        return self.table.num_inputs

    @property
    def num_outputs(
            self
            ) -> _Cardinality:
        return 1

    @property
    def is_constant(
            self
            ) -> _Yes:
        return self.table[self.table.root].is_terminal

    def evaluate(
            self,
            inputs:
                _Inputs
            ) -> bool:
        """Return value of the function at `inputs`.

        Walks from the root, branching at each node
        on the input that the node tests.
        """
        _check_inputs(inputs, self.num_inputs)
        table = self.table
        node = table[table.root]
        while not node.is_terminal:
            u = node.high if inputs[node.var] else node.low
            node = table[u]
        return node.value

    def execute(
            self,
            inputs:
                _Inputs
            ) -> list[bool]:
        """Return `[self.evaluate(inputs)]`.

        So a `BDD` is itself an `Executable`.
        """
        return [self.evaluate(inputs)]

    def truth_table(
            self
            ) -> list[bool]:
        """Return values in standard enumeration order.

        Read `robdd._utils.enumerate_inputs`.
        """
        return [
            self.evaluate(inputs)
            for inputs in _utils.enumerate_inputs(
                self.num_inputs)]

    def support(
            self
            ) -> set[_Level]:
        """Return inputs that the function depends on."""
        table = self.table
        return {
            table[u].var
            for u in table.descendants()
            if not table[u].is_terminal}

    def apply(
            self,
            op:
                _OperatorLike,
            other:
                'BDD'
            ) -> 'BDD':
        """Return BDD of `op(self, other)`."""
        return apply(op, self, other)

    def restrict(
            self,
            var:
                _Level,
            value:
                _Yes
            ) -> 'BDD':
        """Return BDD with input `var` fixed to `value`."""
        return restrict(self, var, value)

    def compose(
            self,
            var:
                _Level,
            other:
                'BDD',
            concatenate:
                _Yes=True
            ) -> 'BDD':
        """Return BDD with `other` substituted for input `var`."""
        return compose(var, self, other, concatenate)

    def negation(
            self
            ) -> 'BDD':
        """Return BDD of the complement."""
        return BDD(self.table.negated())

    def reduction(
            self
            ) -> 'BDD':
        """Return copy reduced with respect to the input order.

        The copy contains only the nodes reachable
        from the root. Tables built by the algorithms
        of this module are reduced already, so this is
        useful for tables assembled by hand.
        """
        return reduction(self)

    def insert_inputs(
            self,
            position:
                _Level,
            count:
                _Cardinality
            ) -> None:
        """Insert `count` unused inputs before input `position`."""
        self.table.insert_inputs(position, count)

    def pre_concatenate_inputs(
            self,
            count:
                _Cardinality
            ) -> None:
        """Add `count` unused inputs before the existing ones."""
        self.table.pre_concatenate_inputs(count)

    def post_concatenate_inputs(
            self,
            count:
                _Cardinality
            ) -> None:
        """Add `count` unused inputs after the existing ones."""
        self.table.post_concatenate_inputs(count)

    def collapse_input(
            self,
            var:
                _Level
            ) -> None:
        """Remove input `var`, which the function must not depend on."""
        self.table.collapse_input(var)

    def to_expr(
            self,
            variables:
                _Variables |
                None=None
            ) -> _Formula:
        """Return Boolean formula of the function.

        Nodes are written as `ite(var, high, low)`.
        """
        if variables is None:
            variables = self.num_inputs
        names = _utils.variable_names(variables)
        if len(names) != self.num_inputs:
            raise ValueError(
                f'expected {self.num_inputs} variable names, '
                f'but got: {names}')
        return _to_expr(self.table, self.table.root, names)

    def to_dot(
            self,
            name:
                str='bdd'
            ) -> str:
        """Return graph in DOT language."""
        return to_dot(self, name)

    def dump(
            self,
            filename:
                str,
            filetype:
                str |
                None=None
            ) -> None:
        """Write figure of the graph to file."""
        dump(self, filename, filetype)


def synthesize(
        f:
            _Executable,
        output:
            int |
            None=None
        ) -> BDD:
    """Return BDD of output `output` of `f`.

    Enumerates all assignments to the inputs of `f`,
    assigning `False` before `True` at each input,
    and builds the nodes bottom-up.
    """
    if output is None:
        if f.num_outputs != 1:
            raise ValueError(
                'expected a function with one output, '
                f'but {f.num_outputs = } '
                '(select an output with the argument `output`)')
        output = 0
    elif not (0 <= output < f.num_outputs):
        raise ValueError(
            f'The given output: {output = } is not in '
            f'`range({f.num_outputs})`')
    n = f.num_inputs
    if n > _config['synthesis_warning_inputs']:
        logger.warning(
            f'synthesizing from a function with {n} inputs, '
            f'which requires {2**n} evaluations')
    table = _new_table(n)
    inputs = [False] * n
    table.root = _synthesize(f, output, inputs, 0, table)
    logger.debug(f'synthesized {len(table)} nodes')
    return BDD(table)


def _synthesize(
        f:
            _Executable,
        output:
            int,
        inputs:
            list[bool],
        i:
            _Level,
        table:
            _table.Table
        ) -> _Index:
    """Recurse to build nodes for inputs `i` and below."""
    if i == len(inputs):
        value = f.execute(tuple(inputs))[output]
        return 1 if value else 0
    inputs[i] = False
    p = _synthesize(f, output, inputs, i + 1, table)
    inputs[i] = True
    q = _synthesize(f, output, inputs, i + 1, table)
    return table.mk(_table.Node(i, p, q))


def predefined(
        name:
            Predefined |
            str
        ) -> BDD:
    """Return BDD of function `name`, assembled by hand."""
    if isinstance(name, str):
        try:
            name = Predefined(name.lower())
        except ValueError:
            raise ValueError(
                f'unknown predefined function "{name}"'
                ) from None
    match name:
        case Predefined.TRUE:
            return BDD.constant(True)
        case Predefined.FALSE:
            return BDD.constant(False)
    num_inputs, nodes = _PREDEFINED[name]
    table = _new_table(num_inputs)
    for var, low, high in nodes:
        table.root = table.add_node(
            _table.Node(var, low, high))
    return BDD(table)


def _operator(
        op:
            _OperatorLike
        ) -> robdd._abc.BinaryFunction:
    """Return callable for operator `op`."""
    if isinstance(op, Operator):
        return op
    if isinstance(op, str):
        r = robdd._abc.OPERATOR_SYMBOLS.get(op)
        if r is None:
            raise ValueError(
                f'unknown operator "{op}"')
        return r
    if callable(op):
        return op
    raise TypeError(
        'expected `Operator`, operator symbol, '
        f'or callable, but got: {op!r}')


def apply(
        op:
            _OperatorLike,
        x:
            BDD,
        y:
            BDD
        ) -> BDD:
    """Return BDD of `op(x, y)`.

    @param op:
        `Operator`, symbol like `'and'` or `'&'`,
        or callable that maps two `bool` to a `bool`
    """
    fn = _operator(op)
    if x.num_inputs != y.num_inputs:
        raise ValueError(
            'expected operands with the same inputs, but '
            f'{x.num_inputs = } and {y.num_inputs = }')
    table = _new_table(x.num_inputs)
    cache = dict()
    table.root = _apply(
        fn, x.table, y.table,
        x.table.root, y.table.root,
        table, cache)
    logger.debug(
        f'apply: {len(cache)} pairs, {len(table)} nodes')
    return BDD(table)


def _apply(op, xtable, ytable, u, v, table, cache):
    """Recurse to combine node `u` of `xtable` with `v` of `ytable`.

    @param op:
        callable that maps two `bool` to a `bool`
    @param u, v:
        nodes in `xtable`, `ytable`
    @type xtable, ytable, table:
        `robdd.table.Table`
    @type cache:
        `dict` that maps pairs of old nodes to new nodes
    """
    r = cache.get((u, v))
    if r is not None:
        return r
    x = xtable[u]
    y = ytable[v]
    if x.is_terminal and y.is_terminal:
        r = 1 if op(x.value, y.value) else 0
    else:
        i = xtable.level(u)
        j = ytable.level(v)
        if i == j:
            p = _apply(op, xtable, ytable, x.low, y.low, table, cache)
            q = _apply(op, xtable, ytable, x.high, y.high, table, cache)
        elif i < j:
            # `v` does not depend on variable `i`
            p = _apply(op, xtable, ytable, x.low, v, table, cache)
            q = _apply(op, xtable, ytable, x.high, v, table, cache)
        else:
            p = _apply(op, xtable, ytable, u, y.low, table, cache)
            q = _apply(op, xtable, ytable, u, y.high, table, cache)
        r = table.mk(_table.Node(min(i, j), p, q))
    cache[(u, v)] = r
    return r


def restrict(
        f:
            BDD,
        var:
            _Level,
        value:
            _Yes
        ) -> BDD:
    """Return BDD of `f` with input `var` fixed to `value`.

    The result has the same inputs as `f`,
    and does not depend on `var`.
    """
    if not (0 <= var < f.num_inputs):
        raise ValueError(
            f'The given variable: {var = } is not in '
            f'`range({f.num_inputs})`')
    table = _new_table(f.num_inputs)
    cache = dict()
    table.root = _restrict(
        f.table, f.table.root, var, bool(value),
        table, cache)
    logger.debug(
        f'restrict: {len(cache)} nodes visited, '
        f'{len(table)} nodes')
    return BDD(table)


def _restrict(old, u, var, value, table, cache):
    """Recurse to restrict node `u` of `old`.

    @param u:
        node in `old`
    @type old, table:
        `robdd.table.Table`
    @type cache:
        `dict` that maps old to new nodes
    """
    r = cache.get(u)
    if r is not None:
        return r
    i, v, w = old.succ(u)
    if var < i:
        # `u` does not depend on `var`
        r = _transfer(old, u, table, cache)
    elif i < var:
        p = _restrict(old, v, var, value, table, cache)
        q = _restrict(old, w, var, value, table, cache)
        r = table.mk(_table.Node(i, p, q))
    elif value:
        r = _restrict(old, w, var, value, table, cache)
    else:
        r = _restrict(old, v, var, value, table, cache)
    cache[u] = r
    return r


def _transfer(old, u, table, cache):
    """Recurse to copy node `u` from `old` to `table`.

    @type old, table:
        `robdd.table.Table`
    @type cache:
        `dict`
    """
    if u in (0, 1):
        return u
    r = cache.get(u)
    if r is not None:
        return r
    node = old[u]
    p = _transfer(old, node.low, table, cache)
    q = _transfer(old, node.high, table, cache)
    r = table.mk(_table.Node(node.var, p, q))
    cache[u] = r
    return r


def reduction(
        f:
            BDD
        ) -> BDD:
    """Return copy of `f` rebuilt bottom-up by `mk`."""
    table = _new_table(f.num_inputs)
    cache = dict()
    table.root = _transfer(
        f.table, f.table.root, table, cache)
    return BDD(table)


def compose(
        var:
            _Level,
        f1:
            BDD,
        f2:
            BDD,
        concatenate:
            _Yes=True
        ) -> BDD:
    """Return BDD of `f1` with `f2` substituted for input `var`.

    If `concatenate`, then elementary composition:
    the result has `k1 + k2 - 1` inputs, where
    `k1, k2` are the numbers of inputs of `f1, f2`.
    The inputs of `f2` come first, followed by
    the inputs of `f1` other than `var`:

    `f2[0 .. k2-1], f1[0 .. var-1], f1[var+1 .. k1-1]`

    Otherwise, the inputs of `f1` and `f2` are
    the same inputs, and `f2` is substituted
    without renumbering.
    """
    k1 = f1.num_inputs
    k2 = f2.num_inputs
    if not (0 <= var < k1):
        raise ValueError(
            f'The given variable: {var = } is not in '
            f'`range({k1})`')
    if not concatenate and k1 != k2:
        raise ValueError(
            'composition without concatenation requires '
            f'the same inputs, but {k1 = } and {k2 = }')
    logger.info(
        f'compose at input {var} '
        f'(concatenate: {concatenate}, {k1 = }, {k2 = })')
    # never renumber the operands
    f1 = f1.copy()
    f2 = f2.copy()
    if concatenate:
        f1.pre_concatenate_inputs(k2)
        f2.post_concatenate_inputs(k1)
        var += k2
    r = _compose(var, f1, f2)
    if concatenate:
        r.collapse_input(var)
    return r


def _compose(
        var:
            _Level,
        f1:
            BDD,
        f2:
            BDD
        ) -> BDD:
    r"""Return substitution by Shannon expansion.

    ```
    f1[var := f2] = (f2 /\ f1|var=1) \/ (~ f2 /\ f1|var=0)
    ```
    """
    if f2.is_constant:
        value = f2.table[f2.table.root].value
        return restrict(f1, var, value)
    high = restrict(f1, var, True)
    low = restrict(f1, var, False)
    x = apply(Operator.AND, f2, high)
    y = apply(Operator.AND, f2.negation(), low)
    return apply(Operator.OR, x, y)


def _isomorphic(
        xtable:
            _table.Table,
        ytable:
            _table.Table
        ) -> _Yes:
    """Return `True` if the rooted graphs have equal content."""
    if xtable.num_inputs != ytable.num_inputs:
        return False
    confirmed = set()
    return _equal_nodes(
        xtable, ytable,
        xtable.root, ytable.root,
        confirmed)


def _equal_nodes(xtable, ytable, u, v, confirmed):
    """Recurse to compare node `u` of `xtable` with `v` of `ytable`.

    Pairs found equal are memoized in `confirmed`.
    The first difference ends the comparison,
    so unequal pairs need no memo.

    @type confirmed:
        `set` of pairs of nodes
    """
    if (u, v) in confirmed:
        return True
    x = xtable[u]
    y = ytable[v]
    if x.is_terminal or y.is_terminal:
        return x == y
    if x.var != y.var:
        return False
    equal = (
        _equal_nodes(
            xtable, ytable, x.low, y.low, confirmed) and
        _equal_nodes(
            xtable, ytable, x.high, y.high, confirmed))
    if equal:
        confirmed.add((u, v))
    return equal


def _to_expr(
        table:
            _table.Table,
        u:
            _Index,
        names:
            list[str]
        ) -> _Formula:
    if u == 1:
        return 'TRUE'
    if u == 0:
        return 'FALSE'
    i, v, w = table.succ(u)
    var = names[i]
    p = _to_expr(table, v, names)
    q = _to_expr(table, w, names)
    # pure var ?
    if p == 'FALSE' and q == 'TRUE':
        return var
    if p == 'TRUE' and q == 'FALSE':
        return f'(~ {var})'
    return f'ite({var}, {q}, {p})'


def to_nx(
        f:
            BDD
        ) -> '_utils.MultiDiGraph':
    """Return graph of nodes reachable from the root.

    The resulting `networkx.MultiDiGraph` has:

      - nodes labeled with:
        - `var`: `int` for decision nodes, `None` for terminals
        - `value`: `bool` for terminals, `None` for decision nodes
      - edges labeled with:
        - `value`: `False` for low/"else", `True` for high/"then"
    """
    nx = _utils.import_module('networkx')
    table = f.table
    g = nx.MultiDiGraph()
    for u in table.descendants():
        node = table[u]
        g.add_node(u, var=node.var, value=node.value)
        if node.is_terminal:
            continue
        g.add_edge(u, node.low, value=False)
        g.add_edge(u, node.high, value=True)
    return g


def _dot_body(
        f:
            BDD,
        graph,
        prefix:
            str
        ) -> None:
    """Add to `graph` the nodes and edges of `f`.

    The terminals are two fixed box vertices.
    Each reachable node is added once, and
    one edge is added for each reference.
    Edges to low successors are dashed.
    """
    pydot = _utils.import_module('pydot')
    table = f.table
    names = {
        0: f'{prefix}False',
        1: f'{prefix}True'}
    for u in (0, 1):
        nd = pydot.Node(
            names[u], label=str(table[u].value), shape='box')
        graph.add_node(nd)
    visited = {0, 1}
    stack = [table.root]
    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        node = table[u]
        su = f'{prefix}node{u}'
        nd = pydot.Node(su, label=f'x{node.var}')
        graph.add_node(nd)
        for v, style in ((node.low, 'dashed'), (node.high, 'solid')):
            sv = names.get(v, f'{prefix}node{v}')
            e = pydot.Edge(su, sv, style=style)
            graph.add_edge(e)
            stack.append(v)


def to_pydot(
        f:
            BDD,
        name:
            str='bdd',
        prefix:
            str=''
        ) -> '_utils.Dot':
    """Return `pydot.Dot` graph of `f`.

    @param prefix:
        prepended to the name of each vertex
    """
    pydot = _utils.import_module('pydot')
    g = pydot.Dot(name, graph_type='digraph')
    _dot_body(f, g, prefix)
    return g


def to_subgraph(
        f:
            BDD,
        prefix:
            str
        ):
    """Return `pydot.Cluster` of `f`, to embed in a figure.

    The vertex names start with `prefix`,
    so several BDDs can share one graph.
    """
    pydot = _utils.import_module('pydot')
    h = pydot.Cluster(prefix, label=prefix)
    _dot_body(f, h, prefix)
    return h


def to_dot(
        f:
            BDD,
        name:
            str='bdd'
        ) -> str:
    """Return graph of `f` in DOT language."""
    return to_pydot(f, name).to_string()


def dump(
        f:
            BDD,
        filename:
            str,
        filetype:
            str |
            None=None
        ) -> None:
    """Write figure of `f` to `filename`.

    @param filetype:
        `'pdf'`, `'png'`, or `'svg'`.
        If `None`, then inferred from
        the extension of `filename`.
    """
    if filetype is None:
        name = filename.lower()
        if name.endswith('.pdf'):
            filetype = 'pdf'
        elif name.endswith('.png'):
            filetype = 'png'
        elif name.endswith('.svg'):
            filetype = 'svg'
        else:
            raise ValueError(
                'cannot infer file type '
                'from extension of file '
                f'name "{filename}"')
    if filetype not in ('pdf', 'png', 'svg'):
        raise ValueError(
            f'unknown file type "{filetype}"')
    g = to_pydot(f)
    g.write(filename, format=filetype)
    logger.info(f'wrote figure to "{filename}"')
