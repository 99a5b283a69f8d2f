import logging

from .editor import InputBuffer
from .events import Channel
from .lexer import Lexer
from .machine import Machine
from .shunting import Converter
from .util import CalculatorError, format_number


logger = logging.getLogger(__name__)


class Calculator:
    '''
    Interactive infix calculator.

    Holds the current result and the input buffer, and runs the buffer
    through the lexer, converter and machine on evaluate. Outcomes are never
    returned nor raised: they are published on the result_updated,
    error_updated and input_updated channels.
    '''

    # Error payload that blanks the error display.
    NO_ERROR = ' '

    def __init__(self, precision=None):
        '''
        Create calculator with an empty buffer and a result of 0.

        :param precision: Decimal places results are rounded to when
                          published. None to publish them as is.
        '''
        self.precision = precision
        self.result_updated = Channel('result_updated')
        self.error_updated = Channel('error_updated')
        self.input_updated = Channel('input_updated')
        self.buffer = InputBuffer(self.input_updated)
        self.lexer = Lexer()
        self.converter = Converter(self.lexer)
        self.machine = Machine()
        self.result = 0.0

    def update_result(self, value):
        '''
        Set and publish the current result.
        '''
        self.result = value
        self.result_updated.publish(format_number(value, self.precision))

    def append_input(self, text):
        self.buffer.append(text)

    def remove_last_char(self):
        self.buffer.remove_last_char()

    def clear_last_number(self):
        '''
        Remove the last number typed; on an empty buffer, reset the result.
        '''
        if not self.buffer.clear_last_number():
            self.update_result(0.0)
            self.input_updated.publish('')

    def clear_all(self):
        '''
        Reset result, input and error display.
        '''
        self.update_result(0.0)
        self.buffer.clear()
        self.error_updated.publish(type(self).NO_ERROR)

    def evaluate(self):
        '''
        Evaluate the buffer, which is emptied whatever the outcome.

        An expression starting with an operator continues from the current
        result. An empty buffer clears everything.
        '''
        if not self.buffer:
            self.clear_all()
            return
        expression = self.buffer.drain()
        self.error_updated.publish(type(self).NO_ERROR)
        try:
            value = self.compute(expression)
        except CalculatorError as e:
            logger.info('Failed to evaluate %r: %s', expression, e.args[0])
            self.error_updated.publish(e.args[0])
            return
        self.update_result(value)

    def compute(self, expression):
        '''
        Return the value of expression, raising CalculatorError on failure.

        Touches neither the buffer nor the current result.
        '''
        lexemes = self.lexer.tokenize(expression)
        postfix = self.converter.convert(lexemes, self.result)
        return self.machine.evaluate(postfix)
