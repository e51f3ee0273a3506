'''
RPN calculator brain.

Keeps every operand and operation pressed so far on an op stack and reduces
it from the top whenever asked for a result.
'''

from types import MappingProxyType

import logging

from .ops import (KNOWN_OPS, Operand, UnaryOperation, BinaryOperation,
                  Constant, resolve)


logger = logging.getLogger(__name__)


def _describe(ops):
    return '[' + ', '.join(map(str, ops)) + ']'


class CalculatorBrain:
    '''
    Op stack (RPN) evaluator, plus the running history shown to the user.

    Nothing in here raises on bad input: an operation short of operands
    makes the result None.
    '''

    def __init__(self, known_ops=KNOWN_OPS):
        '''
        Create brain with an empty op stack.

        :param known_ops: Mapping of symbol to operation. Copied; later
                          changes to it are not seen.
        '''
        self.known_ops = MappingProxyType(dict(known_ops))
        self.op_stack = []
        # Parallel tracks for update_display_history, in push order.
        self.operand_track = []
        self.operation_track = []
        self._display_history = ''

    @property
    def display_history(self):
        return self._display_history

    @property
    def description(self):
        '''
        The op stack as RPN text, bottom first.
        '''
        return ' '.join(map(str, self.op_stack))

    def push_operand(self, value):
        '''
        Push operand and return the evaluation of the whole stack.
        '''
        operand = Operand(float(value))
        self.op_stack.append(operand)
        self.operand_track.append(operand)
        return self.evaluate()

    def perform_operation(self, symbol):
        '''
        Push operation registered as symbol, if any, and return the
        evaluation of the whole stack.
        '''
        operation = resolve(symbol, self.known_ops)
        if operation is not None:
            self.op_stack.append(operation)
            self.operation_track.append(operation)
        else:
            logger.debug('Ignoring unknown operation %r', symbol)
        return self.evaluate()

    def evaluate(self):
        '''
        Evaluate the whole op stack. Leftovers are only logged.
        '''
        result, remainder = self.evaluate_ops(self.op_stack)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('%s = %s with %s left over',
                         _describe(self.op_stack), result, _describe(remainder))
        return result

    def evaluate_ops(self, ops):
        '''
        Reduce ops from the top.

        Returns (result, remaining ops). On failure the result is None and
        the remainder is all of ops.
        '''
        ops = tuple(ops)
        result, top = self._reduce(ops, len(ops))
        return result, ops[:top]

    def _reduce(self, ops, top):
        '''
        Reduce ops[:top] from its last element.

        Returns (result, top of what is left over). An operation that runs
        out of operands fails every operation waiting on it, so a failure
        gives back top, unconsumed.

        Operations waiting for operands are kept on a list, not the call
        stack; chain length is not bounded by the recursion limit.
        '''
        # (operation, operands collected so far), innermost last
        pending = []
        rest = top
        while rest:
            op = ops[rest - 1]
            rest -= 1
            if isinstance(op, Operand):
                value = op.value
            elif isinstance(op, Constant):
                value = op.operation()
            elif isinstance(op, (UnaryOperation, BinaryOperation)):
                pending.append((op, []))
                continue
            else:
                break
            while pending:
                operation, operands = pending[-1]
                operands.append(value)
                if len(operands) < operation.arity:
                    break
                pending.pop()
                value = operation.operation(*operands)
            else:
                return value, rest
        return None, top

    def update_display_history(self):
        '''
        Append the latest operation and operand to the history, and return it.

        The first time, the operand before the operation goes in first. Does
        nothing if there is not enough on the tracks.
        '''
        if not self.operation_track:
            return self._display_history
        if not self._display_history:
            if len(self.operand_track) < 2:
                return self._display_history
            self._display_history += str(self.operand_track.pop(-2))
        elif not self.operand_track:
            return self._display_history
        self._display_history += str(self.operation_track.pop())
        self._display_history += str(self.operand_track.pop())
        return self._display_history

    def clear(self):
        '''
        Forget everything: op stack and history.
        '''
        self.op_stack.clear()
        self.operand_track.clear()
        self.operation_track.clear()
        self._display_history = ''
