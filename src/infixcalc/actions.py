'''
User actions on a Calculator.

One key press is one action; dispatch() routes it to the one calculator
operation it stands for. Variants without fields are empty tuples, so test
them with isinstance(), not truth or equality.
'''

from collections import namedtuple


AppendInput = namedtuple('AppendInput', ['text'])
RemoveLastChar = namedtuple('RemoveLastChar', [])
ClearLastNumber = namedtuple('ClearLastNumber', [])
ClearAll = namedtuple('ClearAll', [])
Evaluate = namedtuple('Evaluate', [])
Quit = namedtuple('Quit', [])

ACTIONS = (AppendInput, RemoveLastChar, ClearLastNumber, ClearAll, Evaluate,
           Quit)

# Keys with a meaning of their own; every other key is typed input.
KEYMAP = {
    'q': Quit(),
    'Q': Quit(),
    'backspace': RemoveLastChar(),
    'enter': Evaluate(),
    'a': ClearAll(),
    'A': ClearAll(),
    'c': ClearLastNumber(),
    'C': ClearLastNumber(),
}

_HANDLERS = {
    AppendInput: lambda calc, action: calc.append_input(action.text),
    RemoveLastChar: lambda calc, action: calc.remove_last_char(),
    ClearLastNumber: lambda calc, action: calc.clear_last_number(),
    ClearAll: lambda calc, action: calc.clear_all(),
    Evaluate: lambda calc, action: calc.evaluate(),
}


def action_for_key(key):
    '''
    Return the action for a key press, named as in KEYMAP or typed text.
    '''
    action = KEYMAP.get(key)
    if action is None:
        action = AppendInput(key)
    return action


def dispatch(calculator, action):
    '''
    Run action on calculator. Return False once the user wants to quit.
    '''
    if isinstance(action, Quit):
        return False
    try:
        handler = _HANDLERS[type(action)]
    except KeyError:
        raise TypeError('Not an action: {!r}'.format(action)) from None
    handler(calculator, action)
    return True
