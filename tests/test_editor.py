'''
Input buffer tests
'''

from infixcalc.editor import InputBuffer

from pytest import fixture, mark


@fixture
def payloads():
    return []


@fixture
def buffer(payloads):
    b = InputBuffer()
    b.input_updated.subscribe(payloads.append)
    return b


def filled(buffer, text):
    buffer.chars.extend(text)
    return buffer


def test_append_valid(buffer, payloads):
    assert buffer.append('1')
    assert buffer.text == '1'
    assert payloads == ['1']


@mark.parametrize('char', list(' 1234567890.()Xx!*/+-'))
def test_whole_alphabet_accepted(buffer, char):
    assert buffer.append(char)
    assert buffer.text == char


def test_append_not_valid(buffer, payloads):
    assert not buffer.append('a')
    assert buffer.text == ''
    assert payloads == ['']


def test_append_rejects_mixed_text(buffer, payloads):
    assert not buffer.append('1a')
    assert buffer.text == ''
    assert payloads == ['']


def test_remove_last_char(buffer, payloads):
    filled(buffer, '123')
    buffer.remove_last_char()
    assert buffer.text == '12'
    assert len(payloads) == 1
    assert len(payloads[0]) == 1


def test_remove_last_char_silent_on_empty(buffer, payloads):
    buffer.remove_last_char()
    assert payloads == []


def test_clear_last_number(buffer, payloads):
    filled(buffer, '1+2')
    assert buffer.clear_last_number()
    assert buffer.text == '1'
    assert [len(payload) for payload in payloads] == [2]


@mark.parametrize('text, left', [
    ('12+34', '12'),
    ('1.5*2.25', '1.5'),
    ('(1+2)*', '(1'),
    ('1+2+3', '1+2'),
    ('1*-3', '1'),
])
def test_clear_last_number_removes_operators_around(buffer, payloads,
                                                    text, left):
    filled(buffer, text)
    buffer.clear_last_number()
    assert buffer.text == left
    assert payloads == [' ' * (len(text) - len(left))]


def test_clear_last_number_of_first_number(buffer, payloads):
    filled(buffer, '12')
    buffer.clear_last_number()
    assert buffer.text == ''
    assert payloads == ['  ']


def test_clear_last_number_trailing_operator(buffer, payloads):
    filled(buffer, '1+')
    buffer.clear_last_number()
    assert buffer.text == ''
    assert payloads == ['  ']


def test_clear_last_number_without_number(buffer, payloads):
    filled(buffer, '(+')
    buffer.clear_last_number()
    assert buffer.text == ''
    assert payloads == ['  ']


def test_clear_last_number_empty(buffer, payloads):
    assert not buffer.clear_last_number()
    assert payloads == []


def test_drain(buffer, payloads):
    filled(buffer, '1+2')
    assert buffer.drain() == '1+2'
    assert buffer.text == ''
    assert payloads == ['   ']
