'''
RPN expression engine.

Push numbers, symbols and operators, postfix style; get back the value of
the stack for given variable values, and the stack written out as infix.
Comes with a line-oriented command line calculator and a sampler for
plotting the stack as a function of x.

    >>> from rpnexpr import Calculator
    >>> calculator = Calculator()
    >>> calculator.push_value(3)
    >>> calculator.push_symbol('x')
    >>> calculator.push_operation('×')
    >>> calculator.description
    '3 × x'
    >>> calculator.evaluate_for_variable_values({'x': 2})
    6.0
'''

from .calculator import Calculator
from .formatter import NumberFormatter
from .lexer import Lexer
from .util import RPNError


__all__ = 'Calculator', 'NumberFormatter', 'Lexer', 'RPNError'
