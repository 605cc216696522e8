"""Interfaces and type aliases.

These definitions are used by the modules:

- `robdd.table`
- `robdd.bdd`
"""
# Copyright 2017 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import collections.abc as _abc
import enum
import typing as _ty


Yes: _ty.TypeAlias = bool
Nat: _ty.TypeAlias = int
    # ```tla
    # Nat
    # ```
Cardinality: _ty.TypeAlias = Nat
Index: _ty.TypeAlias = Nat
    # position of a node in its table
Level: _ty.TypeAlias = Nat
    # position of a variable in the ordering
Inputs: _ty.TypeAlias = _abc.Sequence[bool]
VariableName: _ty.TypeAlias = str
Formula: _ty.TypeAlias = str
BinaryFunction: _ty.TypeAlias = _abc.Callable[
    [bool, bool],
    bool]
OperatorSymbol: _ty.TypeAlias = _ty.Literal[
    'and', '/\\', '&', '&&',
    'or', r'\/', '|', '||',
    '#', 'xor', '^',
    'nand',
    'nor',
    '=>', '->', 'implies',
    '<=>', '<->', 'equiv',
    'diff', '-']


class Executable(_ty.Protocol):
    """Boolean function with fixed numbers of inputs and outputs.

    The method `execute` must be deterministic and
    free of side effects, because synthesis calls it
    once for each of the `2**num_inputs` assignments.
    """

    num_inputs: Nat
    num_outputs: Nat

    def execute(
            self,
            inputs:
                Inputs
            ) -> _abc.Sequence[bool]:
        """Return `num_outputs` values for `inputs`.

        @param inputs:
            `num_inputs` values,
            ordered by variable index
        """


class Operator(enum.Enum):
    """Binary Boolean operators accepted by `apply`."""

    AND = 'and'
    OR = 'or'
    XOR = 'xor'
    NAND = 'nand'
    NOR = 'nor'
    IMPLIES = 'implies'
    EQUIV = 'equiv'
    DIFF = 'diff'

    def __call__(
            self,
            x:
                bool,
            y:
                bool
            ) -> bool:
        match self:
            case Operator.AND:
                return x and y
            case Operator.OR:
                return x or y
            case Operator.XOR:
                return x != y
            case Operator.NAND:
                return not (x and y)
            case Operator.NOR:
                return not (x or y)
            case Operator.IMPLIES:
                return (not x) or y
            case Operator.EQUIV:
                return x == y
            case Operator.DIFF:
                return x and not y
        raise AssertionError(self)


OPERATOR_SYMBOLS: _ty.Final[
        dict[str, Operator]] = {
    'and': Operator.AND,
    '/\\': Operator.AND,
    '&': Operator.AND,
    '&&': Operator.AND,
    'or': Operator.OR,
    r'\/': Operator.OR,
    '|': Operator.OR,
    '||': Operator.OR,
    '#': Operator.XOR,
    'xor': Operator.XOR,
    '^': Operator.XOR,
    'nand': Operator.NAND,
    'nor': Operator.NOR,
    '=>': Operator.IMPLIES,
    '->': Operator.IMPLIES,
    'implies': Operator.IMPLIES,
    '<=>': Operator.EQUIV,
    '<->': Operator.EQUIV,
    'equiv': Operator.EQUIV,
    'diff': Operator.DIFF,
    '-': Operator.DIFF}
