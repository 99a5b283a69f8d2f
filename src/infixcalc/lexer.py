from functools import reduce
from string import digits
import logging
import operator

import regex


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for infix calculator input.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.

    Splits raw text into lexemes in a single pass over character classes
    (number, operator or parenthesis, reciprocal macro, anything else), then
    rewrites unary minus into the postfix negation marker.
    '''
    # Number, of any kind supported by grammar: 1, 12, 1.5 but not 1. or .5;
    # a stray dot is a lexeme of its own.
    NUMBER = r'''
              [0-9]+
              (?:
                  \.
                  [0-9]+
              )?
              '''
    SPACE = r'\s+'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    # Macro expanded before numbers are split, so 11/x is 1 followed by the
    # reciprocal of the result so far, not the reciprocal of 11.
    RECIPROCAL = '1/x'
    RECIPROCAL_MARKER = '$'
    NEGATE_MARKER = '~'
    MINUS = '-'
    # Single character lexemes, always split from their neighbours.
    SEPARATED = frozenset('-+*/!()')
    # Lexemes after which a minus negates the number that follows it.
    UNARY_CONTEXT = frozenset('(+*/$-')

    def tokenize(self, raw):
        '''
        Take a raw input line and return its lexemes, in order.

        Never fails: characters that mean nothing to the converter end up in
        lexemes the converter skips.
        '''
        text = regex.sub(type(self).SPACE, '', raw.casefold(),
                         flags=type(self).FLAGS)
        lexemes = self.rewrite_unary(list(self.scan(text)))
        logger.debug('Lexed %r into %r', raw, lexemes)
        return lexemes

    def scan(self, text):
        '''
        Yield lexemes of whitespace-free text.

        Runs of characters outside every class stay glued together.
        '''
        cls = type(self)
        glued = []
        i = 0
        while i < len(text):
            if text.startswith(cls.RECIPROCAL, i):
                lexeme = cls.RECIPROCAL_MARKER
                i += len(cls.RECIPROCAL)
            elif self._isdigit_at(text, i):
                lexeme, i = self._scan_number(text, i)
            elif text[i] in cls.SEPARATED:
                lexeme = text[i]
                i += 1
            else:
                glued.append(text[i])
                i += 1
                continue
            if glued:
                yield ''.join(glued)
                glued.clear()
            yield lexeme
        if glued:
            yield ''.join(glued)

    def _isdigit_at(self, text, i):
        return (i < len(text) and
                text[i] in digits and
                not text.startswith(type(self).RECIPROCAL, i))

    def _scan_digits(self, text, i):
        while self._isdigit_at(text, i):
            i += 1
        return i

    def _scan_number(self, text, start):
        '''
        Return the longest number starting at start, and where it ends.
        '''
        end = self._scan_digits(text, start)
        if end < len(text) and text[end] == '.' and \
           self._isdigit_at(text, end + 1):
            end = self._scan_digits(text, end + 1)
        return text[start:end], end

    def rewrite_unary(self, lexemes):
        '''
        Move unary minus behind its number as the negation marker.

        `<op> - <number>` becomes `<op> <number> ~`, left to right, without
        overlapping rewrites: after a rewrite, scanning resumes past the
        number. A minus leading the whole line is unary too.
        '''
        cls = type(self)
        rewritten = []
        i = 0
        if self._isnegation(lexemes, 0):
            rewritten += [lexemes[1], cls.NEGATE_MARKER]
            i = 2
        while i < len(lexemes):
            lexeme = lexemes[i]
            rewritten.append(lexeme)
            if lexeme in cls.UNARY_CONTEXT and \
               self._isnegation(lexemes, i + 1):
                rewritten += [lexemes[i + 2], cls.NEGATE_MARKER]
                i += 3
            else:
                i += 1
        return rewritten

    def _isnegation(self, lexemes, i):
        return (i + 1 < len(lexemes) and
                lexemes[i] == type(self).MINUS and
                self.isnumber(lexemes[i + 1]))

    def isnumber(self, lexeme):
        '''
        Return True if lexeme is a number in this grammar.
        '''
        return regex.fullmatch(type(self).NUMBER, lexeme,
                               flags=type(self).FLAGS) is not None
