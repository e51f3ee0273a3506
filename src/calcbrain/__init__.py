'''
RPN calculator brain.

Operands and operations go onto an op stack, which is reduced from the top
each time one is pushed: "3 4 +" is 7, "90 sin" is 1 (degrees), "6 2 ÷" is 3.
A running history such as "2+3×4" is kept alongside.

Comes with a small command line front end; run calcbrain -h.
'''

from .ops import (Op, Operand, UnaryOperation, BinaryOperation, Constant,
                  KNOWN_OPS, resolve)
from .brain import CalculatorBrain
from .lexer import Lexer
from .cli import CLI


__all__ = ('CalculatorBrain', 'Lexer', 'CLI', 'Op', 'Operand',
           'UnaryOperation', 'BinaryOperation', 'Constant', 'KNOWN_OPS',
           'resolve')
