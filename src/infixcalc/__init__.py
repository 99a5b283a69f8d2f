'''
Infix calculator.

Type an arithmetic expression a key at a time, evaluate it, keep going from
the result. Supports + - * / with the usual precedence, parentheses, unary
minus, factorial (!) and reciprocal (1/x). Nothing more: no variables, no
functions, no history.

An expression starting with an operator continues from the previous result,
so `2+3` then `*4` gives 20.

Pipeline: Lexer (text to lexemes), Converter (shunting-yard, lexemes to
postfix tokens), Machine (postfix to a value), driven by the Calculator,
which owns the input buffer and publishes results, errors and input edits on
its channels.
'''

from .calculator import Calculator
from .cli import CLI
from .editor import InputBuffer
from .lexer import Lexer
from .machine import Machine
from .shunting import Converter
from .tokens import OperatorKind, Token
from .util import (CalculatorError, MismatchedParenthesisError, ArityError,
                   ResultCountError, DomainError)


__all__ = ('Calculator', 'CLI', 'InputBuffer', 'Lexer', 'Machine',
           'Converter', 'OperatorKind', 'Token', 'CalculatorError',
           'MismatchedParenthesisError', 'ArityError', 'ResultCountError',
           'DomainError')
