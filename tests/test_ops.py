'''
Operation registry tests
'''

import math

from calcbrain.ops import (KNOWN_OPS, Operand, UnaryOperation,
                           BinaryOperation, Constant, format_number, resolve)

from pytest import approx, mark, raises


def apply(symbol, *args):
    return resolve(symbol).operation(*args)


@mark.parametrize('symbol, arity', [
    ('×', 2), ('÷', 2), ('+', 2), ('−', 2),
    ('√', 1), ('sin', 1), ('cos', 1),
    ('π', 0),
])
def test_registered(symbol, arity):
    op = resolve(symbol)
    assert op.symbol == symbol
    assert op.arity == arity


def test_unknown_symbol():
    before = dict(KNOWN_OPS)
    assert resolve('tan') is None
    assert dict(KNOWN_OPS) == before


def test_registry_read_only():
    with raises(TypeError):
        KNOWN_OPS['tan'] = UnaryOperation('tan', math.tan)


def test_non_commutative_take_top_first():
    # 6 2 ÷ and 6 2 −: top is 2, second is 6
    assert apply('÷', 2.0, 6.0) == 3.0
    assert apply('−', 2.0, 6.0) == 4.0


def test_commutative():
    assert apply('×', 3.0, 4.0) == 12.0
    assert apply('+', 3.0, 4.0) == 7.0


def test_trigonometry_in_degrees():
    assert apply('sin', 90.0) == approx(1.0)
    assert apply('cos', 180.0) == approx(-1.0)
    assert apply('sin', 0.0) == 0.0


def test_constant():
    assert apply('π') == math.pi


def test_division_by_zero():
    assert apply('÷', 0.0, 6.0) == math.inf
    assert apply('÷', 0.0, -6.0) == -math.inf
    assert apply('÷', -0.0, 6.0) == -math.inf
    assert math.isnan(apply('÷', 0.0, 0.0))


def test_domain_errors_are_nan():
    assert math.isnan(apply('√', -1.0))
    assert math.isnan(apply('sin', math.inf))
    assert math.isnan(apply('cos', -math.inf))


@mark.parametrize('value, text', [
    (2.0, '2'),
    (-3.0, '-3'),
    (0.5, '0.5'),
    (1e300, '1e+300'),
    (math.inf, 'inf'),
    (math.nan, 'nan'),
])
def test_format_number(value, text):
    assert format_number(value) == text


def test_display():
    assert str(Operand(2.0)) == '2'
    assert str(resolve('sin')) == 'sin'
    assert repr(resolve('π')) == "Constant('π')"


def test_operand_equality():
    assert Operand(2.0) == Operand(2.0)
    assert Operand(2.0) != Operand(3.0)
    assert Operand(2.0) != Constant('2', lambda: 2.0)


def test_binary_operation_is_generic():
    power = BinaryOperation('^', lambda top, second: second ** top)
    assert power.operation(3.0, 2.0) == 8.0
