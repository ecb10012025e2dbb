'''
RPN expression engine.

Holds a stack of values, symbols and operations; evaluates it given values
for its variables, and pretty prints it back as infix.
'''

from types import MappingProxyType
import logging
import math
import operator

from . import ieee
from .formatter import NumberFormatter
from .items import Value, Symbol, UnaryOperation, BinaryOperation


logger = logging.getLogger(__name__)


def strip_outer_parentheses(expression):
    '''
    Drop one leading '(' and trailing ')', if both are there.

    Only looks at the first and last characters; "(1) + (2)" comes out as
    "1) + (2".
    '''
    if expression[:1] == '(' and expression[-1:] == ')':
        return expression[1:-1]
    return expression


class Calculator:
    '''
    Postfix expression stack.

    Pushing never fails loudly: an unknown operator, or one with too few
    operands below it, is simply not pushed. Evaluation works on a copy of
    the stack and reports failure (an unbound symbol somewhere) as None.
    '''

    # Every operation a calculator knows, keyed by symbol on construction.
    OPERATIONS = (
        # Arithmetic
        BinaryOperation('+', operator.__add__),
        BinaryOperation('-', operator.__sub__),
        BinaryOperation('×', operator.__mul__),
        BinaryOperation('÷', ieee.divide),

        # Exponentiation
        UnaryOperation('eˣ', ieee.exp),
        UnaryOperation('ln', ieee.log),
        UnaryOperation('10ˣ', ieee.exp10),
        UnaryOperation('log₁₀', ieee.log10),
        BinaryOperation('pow', ieee.power),
        UnaryOperation('√', ieee.sqrt),

        # Trigonometry
        UnaryOperation('sin', ieee.sin),
        UnaryOperation('cos', ieee.cos),
        UnaryOperation('tan', ieee.tan),
        UnaryOperation('sin⁻¹', ieee.asin),
        UnaryOperation('cos⁻¹', ieee.acos),
        UnaryOperation('tan⁻¹', ieee.atan),
    )
    # Looked up before variables; can't be shadowed.
    CONSTANTS = {
        'π': math.pi,
        'e': math.e,
    }

    PLACEHOLDER = '...'
    SEPARATOR = ', '
    GRAPHING_PREFIX = 'y = '

    # Operators written without parentheses of their own
    JUXTAPOSED = {'×', '÷'}
    POWER = 'pow'
    # Unary exponentials, to the base they're written with
    EXPONENTIALS = {
        'eˣ': 'e',
        '10ˣ': '10',
    }

    def __init__(self, formatter=None):
        '''
        Create calculator with an empty stack.

        :param formatter: NumberFormatter for literals; a default one if None.
        '''
        self.formatter = NumberFormatter() if formatter is None else formatter
        self.operations = MappingProxyType({
            operation.symbol: operation
            for operation
            in type(self).OPERATIONS
        })
        self.constants = MappingProxyType(dict(type(self).CONSTANTS))
        self._stack = []

    def __len__(self):
        return len(self._stack)

    def __repr__(self):
        return '<{} {}>'.format(type(self).__name__, self.stack)

    @property
    def stack(self):
        '''
        Snapshot of the stack, bottom first.
        '''
        return tuple(self._stack)

    @property
    def has_program(self):
        return bool(self._stack)

    # Formatting

    def number_from_string(self, text):
        return self.formatter.number_from_string(text)

    def string_from_number(self, number):
        return self.formatter.string_from_number(number)

    # Stack manipulation

    def push_value(self, value):
        self._stack.append(Value(value))

    def push_symbol(self, name):
        '''
        Push reference to a constant or variable.

        Whether it resolves is only found out on evaluation.
        '''
        self._stack.append(Symbol(name))

    def push_operation(self, symbol):
        '''
        Push known operation, if the stack holds enough operands for it.

        Otherwise, do nothing, like a calculator button would.
        '''
        operation = self.operations.get(symbol)
        if operation is None:
            logger.debug('Ignoring unknown operation %r', symbol)
            return
        if len(self._stack) < operation.operand_count:
            logger.debug('Ignoring %r: needs %d operand(s), stack has %d',
                         symbol, operation.operand_count, len(self._stack))
            return
        self._stack.append(operation)

    def clear(self):
        logger.debug('Clearing %d item(s)', len(self._stack))
        self._stack.clear()

    # Evaluation

    def _evaluate(self, items, variables):
        '''
        Evaluate the topmost complete expression in items.

        Return its result, None if absent, and the items below it. Items of
        a failed subexpression are consumed all the same.
        '''
        if not items:
            return None, items
        item, remaining = items[-1], items[:-1]
        if isinstance(item, Value):
            return item.value, remaining
        elif isinstance(item, Symbol):
            if item.name in self.constants:
                return self.constants[item.name], remaining
            if item.name in variables:
                return ieee.number(variables[item.name]), remaining
            return None, remaining
        elif isinstance(item, UnaryOperation):
            operand, remaining = self._evaluate(remaining, variables)
            if operand is None:
                return None, remaining
            return item(operand), remaining
        elif isinstance(item, BinaryOperation):
            # Right operand was pushed last, so it's on top.
            right, remaining = self._evaluate(remaining, variables)
            left, remaining = self._evaluate(remaining, variables)
            if left is None or right is None:
                return None, remaining
            return item(left, right), remaining
        raise TypeError('Not a stack item: {!r}'.format(item))

    def evaluate_for_variable_values(self, variables):
        '''
        Evaluate the stack with these values for its variables.

        Return None if the stack is empty, or a symbol in the topmost
        expression is neither a constant nor in variables. Domain errors
        are not failures: 1 ÷ 0 is inf.
        '''
        result, _ = self._evaluate(self.stack, variables)
        return result

    def evaluate(self):
        '''
        Evaluate the stack without any variables bound.
        '''
        return self.evaluate_for_variable_values({})

    # Description

    def _pretty_pop(self, items):
        '''
        Render the topmost complete expression in items as infix.

        Return it and the items below it. A missing operand renders empty.
        '''
        if not items:
            return '', items
        item, remaining = items[-1], items[:-1]
        text = item.describe(self.formatter)
        if isinstance(item, UnaryOperation):
            operand, remaining = self._pretty_pop(remaining)
            operand = strip_outer_parentheses(operand)
            base = type(self).EXPONENTIALS.get(item.symbol)
            if base is not None:
                return '{} ^ ({})'.format(base, operand), remaining
            return '{}({})'.format(text, operand), remaining
        elif isinstance(item, BinaryOperation):
            right, remaining = self._pretty_pop(remaining)
            left, remaining = self._pretty_pop(remaining)
            if item.symbol in type(self).JUXTAPOSED:
                return '{} {} {}'.format(left, text, right), remaining
            elif item.symbol == type(self).POWER:
                return '(({}) ^ ({}))'.format(strip_outer_parentheses(left),
                                              strip_outer_parentheses(right)), \
                       remaining
            return '({} {} {})'.format(left, text, right), remaining
        return text, remaining

    @property
    def description(self):
        '''
        Every expression on the stack, topmost first, comma separated.
        '''
        if not self._stack:
            return type(self).PLACEHOLDER
        descriptions = []
        items = self.stack
        while items:
            expression, items = self._pretty_pop(items)
            descriptions.append(strip_outer_parentheses(expression))
        return type(self).SEPARATOR.join(descriptions)

    @property
    def description_for_graphing(self):
        '''
        The topmost expression, as a function of x: "y = ...".
        '''
        if not self._stack:
            return ''
        expression, _ = self._pretty_pop(self.stack)
        return type(self).GRAPHING_PREFIX + strip_outer_parentheses(expression)
