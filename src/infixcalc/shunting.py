from collections import deque
import logging

from .lexer import Lexer
from .tokens import OperatorKind, Token
from .util import MismatchedParenthesisError


logger = logging.getLogger(__name__)


class Converter:
    '''
    Infix to postfix converter (shunting-yard).

    Takes lexemes and produces postfix tokens for the Machine.
    '''

    def __init__(self, lexer=None):
        self.lexer = lexer or Lexer()

    def parse(self, lexeme):
        '''
        Parse lexeme into a token, or None if it means nothing.
        '''
        if self.lexer.isnumber(lexeme):
            return Token.number(lexeme)
        kind = OperatorKind.fromsymbol(lexeme)
        if kind is None:
            return None
        return Token.operator(kind)

    def convert(self, lexemes, implied=0.0):
        '''
        Convert infix lexemes to a postfix token list.

        :param implied: Operand placed in front of an expression starting
                        with an operator, usually the previous result.
        :raises MismatchedParenthesisError: On either unmatched parenthesis.
        '''
        ops = deque()
        output = []
        for index, lexeme in enumerate(lexemes):
            token = self.parse(lexeme)
            if token is None:
                logger.debug('Skipping unknown lexeme %r', lexeme)
            elif token.isnumber:
                output.append(token)
            elif token.kind is OperatorKind.LEFT_PAREN:
                ops.append(token)
            elif token.kind is OperatorKind.RIGHT_PAREN:
                self._close(ops, output)
            else:
                if index == 0:
                    output.append(Token.number(implied))
                self._push(ops, output, token)

        while ops:
            top = ops.pop()
            if top.kind is OperatorKind.LEFT_PAREN:
                raise MismatchedParenthesisError()
            output.append(top)
        logger.debug('Converted %r into %s', lexemes,
                     ' '.join(map(str, output)))
        return output

    def convert_text(self, raw, implied=0.0):
        '''
        Lex and convert raw input in one go.
        '''
        return self.convert(self.lexer.tokenize(raw), implied)

    def _push(self, ops, output, token):
        # Ties pop too, making equal precedence left associative.
        while ops and ops[-1].kind is not OperatorKind.LEFT_PAREN and \
              ops[-1].value >= token.value:
            output.append(ops.pop())
        ops.append(token)

    def _close(self, ops, output):
        while ops and ops[-1].kind is not OperatorKind.LEFT_PAREN:
            output.append(ops.pop())
        if not ops:
            raise MismatchedParenthesisError()
        # Discard the matching left parenthesis.
        ops.pop()
