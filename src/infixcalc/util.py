from functools import wraps
import math


class CalculatorError(Exception):
    '''
    User-visible calculator failure. args[0] is the message to display.
    '''


class MismatchedParenthesisError(CalculatorError):
    def __init__(self, message='Input error - mismatched parenthesis!'):
        super().__init__(message)


class ArityError(CalculatorError):
    pass


class ResultCountError(CalculatorError):
    def __init__(self, message='Input error - too many values!'):
        super().__init__(message)


class DomainError(CalculatorError):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions to CalculatorErrors.

    Passes through CalculatorErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except Exception as e:
                raise CalculatorError(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator


def format_number(value, precision=None):
    '''
    Render a result the way the display shows it.

    Integral values print without a fractional part, non-finite values by
    name.
    '''
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if precision is not None:
        value = round(value, precision)
    if value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return repr(value)
