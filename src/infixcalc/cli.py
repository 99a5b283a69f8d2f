from os import isatty
from sys import stdin, stdout, exit
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from .actions import KEYMAP, AppendInput, Evaluate, action_for_key, dispatch
from .calculator import Calculator
from .util import CalculatorError


logger = logging.getLogger(__name__)


class View:
    '''
    Full screen calculator display, one action per key press.

    Mirrors the result and error channels into lines of text; the input line
    shows the calculator's buffer.
    '''

    BANNER = '*' * 80 + '\n' + '*{:^78}*'.format('Calculator') + '\n' + \
             '*' * 80
    RULE = '_' * 80

    def __init__(self, calculator, prompt):
        self.calculator = calculator
        self.prompt = prompt
        self.result = ''
        self.error = ''
        self.rejected = False
        calculator.result_updated.subscribe(self.on_result)
        calculator.error_updated.subscribe(self.on_error)
        calculator.input_updated.subscribe(self.on_input)
        self.application = Application(layout=self._layout(),
                                       key_bindings=self._key_bindings(),
                                       full_screen=True,
                                       mouse_support=False)

    def on_result(self, payload):
        self.result = payload

    def on_error(self, payload):
        self.error = payload.strip()

    def on_input(self, payload):
        # Empty payload: a key was refused.
        self.rejected = not payload

    def _text(self):
        lines = [type(self).BANNER,
                 'Current Result: ' + self.result,
                 self.prompt + self.calculator.buffer.text,
                 '',
                 type(self).RULE,
                 self.error]
        return '\n'.join(lines)

    def _layout(self):
        return Layout(HSplit([
            Window(FormattedTextControl(self._text), wrap_lines=True),
        ]))

    def _key_bindings(self):
        bindings = KeyBindings()

        @bindings.add(Keys.Any)
        def _(event):
            self.press(event, event.data)

        for key in KEYMAP:
            bindings.add(key)(lambda event, key=key: self.press(event, key))

        @bindings.add('c-c')
        @bindings.add('c-d')
        def _(event):
            event.app.exit()

        return bindings

    def press(self, event, key):
        if not dispatch(self.calculator, action_for_key(key)):
            event.app.exit()
        elif self.rejected:
            event.app.output.bell()

    def run(self):
        self.application.run()


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = 'Input: '

    def _calculator(self):
        return Calculator(precision=self.args.precision)

    def dumper(self):
        '''
        Dump lexemes and postfix of every expression.
        '''
        calculator = self._calculator()
        print('<lexemes>\t<postfix>')
        for line in self.args.expressions:
            lexemes = calculator.lexer.tokenize(line)
            try:
                postfix = ' '.join(map(str, calculator.converter.convert(
                    lexemes, calculator.result)))
            except CalculatorError as e:
                postfix = e.args[0]
            print(' '.join(lexemes), postfix, sep='\t')

    def executor(self):
        '''
        Evaluate every expression in turn, printing results or errors.

        Each expression continues from the previous result.
        '''
        calculator = self._calculator()
        calculator.result_updated.subscribe(print)

        @calculator.error_updated.subscribe
        def print_error(payload):
            if payload.strip():
                print(payload, file=sys.stderr)

        for line in self.args.expressions:
            logger.debug('Evaluating %r', line)
            for char in line.rstrip('\n'):
                dispatch(calculator, AppendInput(char))
            dispatch(calculator, Evaluate())

    def interactive(self):
        '''
        Run the full screen calculator until q is pressed.
        '''
        View(self._calculator(),
             self.args.prompt or self.DEFAULT_PROMPT).run()

    def _interactive(self):
        '''
        Return True if interactive, if either:
        - prompt explicitly specified.
        - no expressions given, and both stdin/out are a tty
        '''
        return self.args.prompt is not None or \
            self.args.expressions is stdin and \
            isatty(stdin.fileno()) and isatty(stdout.fileno())

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='decimal places to round '
                                               'results to')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_const',
                                          const=self.dumper,
                                          dest='action')
        self.argument_parser.set_defaults(action=None,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            stream=sys.stderr)
        if self.args.action is None:
            if self._interactive():
                self.args.action = self.interactive
            else:
                self.args.action = self.executor
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    CLI().run()
