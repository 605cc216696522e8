"""Tests of module `robdd._utils`."""
import pytest

import robdd._abc
import robdd._utils as _utils


def test_enumerate_inputs():
    r = list(_utils.enumerate_inputs(0))
    assert r == [()], r
    r = list(_utils.enumerate_inputs(1))
    assert r == [(True,), (False,)], r
    r = list(_utils.enumerate_inputs(2))
    expected = [
        (True, True),
        (True, False),
        (False, True),
        (False, False)]
    assert r == expected, r
    r = list(_utils.enumerate_inputs(3))
    assert len(r) == 8, r
    assert r[0] == (True, True, True), r
    assert r[3] == (True, False, False), r
    assert r[-1] == (False, False, False), r
    with pytest.raises(ValueError):
        _utils.enumerate_inputs(-1)


def test_variable_names():
    r = _utils.variable_names(3)
    assert r == ['x0', 'x1', 'x2'], r
    r = _utils.variable_names(0)
    assert r == [], r
    r = _utils.variable_names(('a', 'b'))
    assert r == ['a', 'b'], r
    with pytest.raises(ValueError):
        _utils.variable_names(-1)
    with pytest.raises(ValueError):
        _utils.variable_names(['a', 'b', 'a'])


def test_import_module():
    nx = _utils.import_module('networkx')
    assert hasattr(nx, 'MultiDiGraph')
    pydot = _utils.import_module('pydot')
    assert hasattr(pydot, 'Dot')


def test_operators():
    Operator = robdd._abc.Operator
    table = {
        Operator.AND: [True, False, False, False],
        Operator.OR: [True, True, True, False],
        Operator.XOR: [False, True, True, False],
        Operator.NAND: [False, True, True, True],
        Operator.NOR: [False, False, False, True],
        Operator.IMPLIES: [True, False, True, True],
        Operator.EQUIV: [True, False, False, True],
        Operator.DIFF: [False, True, False, False]}
    for op, expected in table.items():
        r = [op(x, y) for x, y in _utils.enumerate_inputs(2)]
        assert r == expected, (op, r)
    symbols = robdd._abc.OPERATOR_SYMBOLS
    assert symbols['&&'] is Operator.AND, symbols
    assert symbols[r'\/'] is Operator.OR, symbols
    assert symbols['^'] is Operator.XOR, symbols
    assert symbols['->'] is Operator.IMPLIES, symbols
    assert symbols['<=>'] is Operator.EQUIV, symbols
    assert symbols['-'] is Operator.DIFF, symbols
