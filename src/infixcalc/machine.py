from inspect import signature as getsignature, Parameter
import logging
import math

from .tokens import OperatorKind
from .util import ArityError, DomainError, ResultCountError, wrap_user_errors


logger = logging.getLogger(__name__)


def add(left, right):
    return left + right


def subtract(left, right):
    return left - right


def multiply(left, right):
    return left * right


def divide(left, right):
    '''
    IEEE 754 division: dividing by zero gives a signed infinity, or NaN for
    0/0, instead of raising.
    '''
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        # Sign of the zero matters: 1/-0. is -inf.
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def reciprocal(only):
    return divide(1.0, only)


def negate(only):
    return -only


def factorial(only):
    '''
    Factorial of the operand truncated toward zero.

    Negative operands and NaN are rejected; anything whose factorial does
    not fit a float is infinity.
    '''
    if math.isnan(only) or only < 0:
        raise DomainError('Factorial domain error!')
    if only > Machine.FACTORIAL_LIMIT:
        return math.inf
    return float(math.factorial(int(only)))


class Machine:
    '''
    Postfix evaluation machine.

    Takes postfix tokens from the Converter and runs them against a value
    stack, leaving exactly one value: the result.
    '''

    # Largest n for which n! is a finite float.
    FACTORIAL_LIMIT = 170

    # Operator kind to (callable, message if short of operands).
    OPERATIONS = {
        OperatorKind.ADD: (add, 'Addition evaluation error!'),
        OperatorKind.SUBTRACT: (subtract, 'Subtraction evaluation error!'),
        OperatorKind.MULTIPLY: (multiply,
                                'Multiplication evaluation error!'),
        OperatorKind.DIVIDE: (divide, 'Division evaluation error!'),
        OperatorKind.FACTORIAL: (factorial, 'Factorial evaluation error!'),
        OperatorKind.RECIPROCAL: (reciprocal,
                                  'Reciprocal evaluation error!'),
        OperatorKind.NEGATE: (negate, 'Negation evaluation error!'),
    }

    def __init__(self):
        self.stack = []

    def evaluate(self, postfix):
        '''
        Run postfix tokens on a fresh stack and return the single result.

        :raises ArityError: An operator found too few values on the stack.
        :raises ResultCountError: Anything but one value is left at the end.
        '''
        self.stack = []
        for token in postfix:
            self.feed(token)
        if len(self.stack) != 1:
            raise ResultCountError()
        result = self.stack.pop()
        logger.debug('Evaluated %s to %r', ' '.join(map(str, postfix)),
                     result)
        return result

    def feed(self, token):
        '''
        Stack a number, or apply an operator to the stack.
        '''
        if token.isnumber:
            self._pshstack(token.value)
        else:
            self._apply(token.kind)

    def _arity(self, f):
        '''
        Return number of non-default positional arguments.
        '''
        parameters = getsignature(f).parameters.values()
        return len([parameter
                    for parameter
                    in parameters
                    if parameter.kind == Parameter.POSITIONAL_OR_KEYWORD and
                       parameter.default == Parameter.empty])

    def _apply(self, kind):
        '''
        Apply operator to stack, popping arguments as needed.
        '''
        f, message = type(self).OPERATIONS[kind]
        arity = self._arity(f)
        if len(self.stack) < arity:
            raise ArityError(message)
        # If you don't reverse, you'll do 3-5 when you say 5 3 -.
        args = reversed(self._popstack(arity))
        self._pshstack(self._call(f, *args))

    @wrap_user_errors('Cannot evaluate {1.__name__}')
    def _call(self, f, *args):
        return f(*args)

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of values from stack, topmost first.
        '''
        return [self.stack.pop() for _ in range(n)]
