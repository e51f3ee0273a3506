'''
Operation registry: everything that can sit on a brain's op stack.

Operands carry a number; operations carry a display symbol and the function
applied to their arguments. Arguments are handed over most recently pushed
first, so non-commutative operations swap them back themselves.
'''

from functools import wraps
from types import MappingProxyType

import math


def format_number(value):
    '''
    Render a float for display, dropping the ".0" of integral values.
    '''
    text = repr(float(value))
    if text.endswith('.0'):
        return text[:-2]
    return text


class Op:
    '''
    Something on the op stack. Displays as its symbol.
    '''
    arity = None

    def __init__(self, symbol):
        self.symbol = symbol

    def __str__(self):
        return self.symbol

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.symbol)


class Operand(Op):
    def __init__(self, value):
        super().__init__(format_number(value))
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Operand):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)


class UnaryOperation(Op):
    arity = 1

    def __init__(self, symbol, operation):
        super().__init__(symbol)
        self.operation = operation


class BinaryOperation(Op):
    '''
    Two-argument operation; operation(top, second).
    '''
    arity = 2

    def __init__(self, symbol, operation):
        super().__init__(symbol)
        self.operation = operation


class Constant(Op):
    arity = 0

    def __init__(self, symbol, operation):
        super().__init__(symbol)
        self.operation = operation


def _nan_on_domain_error(f):
    '''
    Return NaN where math raises for arguments outside its domain.
    '''
    @wraps(f)
    def wrapper(*args):
        try:
            return f(*args)
        except ValueError:
            return math.nan
    return wrapper


def _divide(divisor, dividend):
    '''
    IEEE 754 division: ±inf or NaN rather than ZeroDivisionError.
    '''
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def _radians(degrees):
    return degrees * math.pi / 180


@_nan_on_domain_error
def _sin(degrees):
    return math.sin(_radians(degrees))


@_nan_on_domain_error
def _cos(degrees):
    return math.cos(_radians(degrees))


def _build(*ops):
    return MappingProxyType({op.symbol: op for op in ops})


KNOWN_OPS = _build(
    BinaryOperation('×', lambda top, second: second * top),
    BinaryOperation('÷', _divide),
    BinaryOperation('+', lambda top, second: second + top),
    BinaryOperation('−', lambda top, second: second - top),
    UnaryOperation('√', _nan_on_domain_error(math.sqrt)),
    UnaryOperation('sin', _sin),
    UnaryOperation('cos', _cos),
    Constant('π', lambda: math.pi),
)


def resolve(symbol, known_ops=KNOWN_OPS):
    '''
    Look up the operation registered under symbol, or None.
    '''
    return known_ops.get(symbol)
