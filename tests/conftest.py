from functools import partial

from pytest import Item, fixture

from infixcalc.calculator import Calculator


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP and enable_assertion_pass_hook.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


class Recorder:
    '''
    Every notification published by a calculator, in order.
    '''

    def __init__(self, calculator):
        self.events = []
        for channel in (calculator.result_updated,
                        calculator.error_updated,
                        calculator.input_updated):
            channel.subscribe(partial(self.record, channel.name))

    def record(self, name, payload):
        self.events.append((name, payload))

    def payloads(self, name):
        return [payload for channel, payload in self.events if channel == name]

    def clear(self):
        self.events.clear()


@fixture
def calculator():
    return Calculator()


@fixture
def recorder(calculator):
    return Recorder(calculator)
