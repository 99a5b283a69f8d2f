from collections import namedtuple
from enum import Enum


class OperatorKind(Enum):
    '''
    Operators known to the converter and the machine.

    Value is (symbol, precedence). Parentheses carry the highest precedence
    but only ever act as a barrier on the operator stack.
    '''
    ADD = ('+', 1)
    SUBTRACT = ('-', 1)
    MULTIPLY = ('*', 2)
    DIVIDE = ('/', 2)
    FACTORIAL = ('!', 3)
    # Postfix forms produced by the lexer: `1/x` and unary minus.
    RECIPROCAL = ('$', 3)
    NEGATE = ('~', 3)
    LEFT_PAREN = ('(', 4)
    RIGHT_PAREN = (')', 4)

    @property
    def symbol(self):
        return self.value[0]

    @property
    def precedence(self):
        return self.value[1]

    @classmethod
    def fromsymbol(cls, symbol):
        '''
        Return the operator for symbol, or None if it isn't one.
        '''
        return _BY_SYMBOL.get(symbol)


_BY_SYMBOL = {kind.symbol: kind for kind in OperatorKind}


class Token(namedtuple('Token', ['kind', 'value'])):
    '''
    Postfix token.

    Numbers have no kind and carry their value; operators carry their
    precedence as value.
    '''
    __slots__ = ()

    @classmethod
    def number(cls, value):
        return cls(None, float(value))

    @classmethod
    def operator(cls, kind):
        return cls(kind, float(kind.precedence))

    @property
    def isnumber(self):
        return self.kind is None

    def __repr__(self):
        if self.isnumber:
            return 'Token.number({!r})'.format(self.value)
        return 'Token.operator({})'.format(self.kind)

    def __str__(self):
        if self.isnumber:
            return format(self.value, 'g')
        return self.kind.symbol
