'''
Shunting-yard converter tests
'''

import regex

from infixcalc.shunting import Converter
from infixcalc.tokens import OperatorKind, Token
from infixcalc.util import MismatchedParenthesisError

from pytest import raises


def postfix(expression, implied=0.0):
    return ' '.join(map(str, Converter().convert_text(expression, implied)))


def test_returns_tokens():
    c = Converter()
    assert c.convert(['1', '+', '2']) == [Token.number(1),
                                          Token.number(2),
                                          Token.operator(OperatorKind.ADD)]


def test_single_number():
    c = Converter()
    assert c.convert_text('1', 1.0) == [Token.number(1)]


def test_precedence():
    assert postfix('2+3*4') == '2 3 4 * +'
    assert postfix('2*3+4') == '2 3 * 4 +'
    assert postfix('(2+3)*4') == '2 3 + 4 *'


def test_left_associative():
    assert postfix('8-3-2') == '8 3 - 2 -'
    assert postfix('8/4/2') == '8 4 / 2 /'


def test_postfix_operators():
    assert postfix('2-3!') == '2 3 ! -'
    assert postfix('2*-3') == '2 3 ~ *'
    assert postfix('1--3') == '1 3 ~ -'
    assert postfix('3!!') == '3 ! !'


def test_out_queue_correct_size():
    c = Converter()
    tokens = c.convert_text('(1+2-3)!1/x', 1.0)
    assert len(tokens) == 7
    assert ' '.join(map(str, tokens)) == '1 2 + 3 - ! $'


def test_implied_leading_operand():
    assert postfix('*4', 5.0) == '5 4 *'
    assert postfix('+1', 2.5) == '2.5 1 +'
    assert postfix('1/x', 4.0) == '4 $'


def test_no_implied_operand_before_parenthesis():
    assert postfix('(1+2)', 5.0) == '1 2 +'


def test_unknown_lexemes_skipped():
    assert postfix('2x3') == '2 3'
    assert postfix('1.+2') == '1 2 +'


def test_unmatched_right_parenthesis():
    c = Converter()
    with raises(MismatchedParenthesisError,
                match=regex.escape('Input error - mismatched parenthesis!')):
        c.convert_text('())', 1.0)


def test_unmatched_left_parenthesis():
    c = Converter()
    with raises(MismatchedParenthesisError):
        c.convert_text('(1+2', 0.0)
    with raises(MismatchedParenthesisError):
        c.convert_text('((1)', 0.0)


def test_empty():
    assert Converter().convert([]) == []
