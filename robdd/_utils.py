"""Convenience functions."""
# Copyright 2017-2018 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
import collections.abc as _abc
import itertools as _itr
import types
import typing as _ty

try:
    import networkx as _nx
except ImportError as error:
    _nx = None
    _nx_error = error
else:
    _nx_error = None
try:
    import pydot as _pydot
except ImportError as error:
    _pydot = None
    _pydot_error = error
else:
    _pydot_error = None


if _nx is not None:
    MultiDiGraph: _ty.TypeAlias = _nx.MultiDiGraph
if _pydot is not None:
    Dot: _ty.TypeAlias = _pydot.Dot


def import_module(
        module_name:
            str
        ) -> types.ModuleType:
    """Return module with `module_name`, if present.

    Raise `ImportError` otherwise.
    """
    modules = dict(
        networkx=(_nx, _nx_error),
        pydot=(_pydot, _pydot_error))
    module, error = modules[module_name]
    if module is None:
        raise error
    return module


def enumerate_inputs(
        n:
            int
        ) -> _abc.Iterator[
            tuple[bool, ...]]:
    """Yield all assignments to `n` inputs.

    Standard enumeration order:
    start with all inputs `True` and count down,
    with input 0 the most significant position.

    ```python
    list(enumerate_inputs(2)) == [
        (True, True), (True, False),
        (False, True), (False, False)]
    ```
    """
    if n < 0:
        raise ValueError(
            f'expected `n >= 0`, but {n = }')
    return _itr.product(
        (True, False), repeat=n)


def variable_names(
        variables:
            int |
            _abc.Sequence[str]
        ) -> list[str]:
    """Return list of variable names, in variable order.

    @param variables:
        - `int` `n`: the names `x0, ..., x{n-1}`
        - sequence of names, whose positions
          are the variable indices
    """
    if isinstance(variables, int):
        if variables < 0:
            raise ValueError(
                f'expected number of variables >= 0, '
                f'but {variables = }')
        return [f'x{i}' for i in range(variables)]
    names = list(variables)
    if len(set(names)) != len(names):
        raise ValueError(
            f'duplicate variable names in: {names}')
    return names
