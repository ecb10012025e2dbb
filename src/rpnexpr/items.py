'''
Things that live on a calculator stack.

Literals and symbol references are operands; operations pop as many
operands as their arity says when the stack gets evaluated.
'''

from .ieee import number


class Item:
    '''
    One stack element.
    '''

    OPERAND_COUNT = 0

    @property
    def operand_count(self):
        '''
        Number of items below this one that it consumes.
        '''
        return type(self).OPERAND_COUNT

    def describe(self, formatter):
        '''
        Return display text: formatted literal, name, or operator glyph.
        '''
        raise NotImplementedError

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))

    def __repr__(self):
        return '{}({})'.format(type(self).__name__,
                               ', '.join(map(repr, self._key())))


class Value(Item):
    def __init__(self, value):
        self.value = number(value)

    def describe(self, formatter):
        text = formatter.string_from_number(self.value)
        # inf, nan
        if text is None:
            return str(self.value)
        return text

    def _key(self):
        return self.value,


class Symbol(Item):
    def __init__(self, name):
        self.name = name

    def describe(self, formatter):
        return self.name

    def _key(self):
        return self.name,


class _Operation(Item):
    '''
    Named function of the topmost operand(s).
    '''

    def __init__(self, symbol, function):
        self.symbol = symbol
        self.function = function

    def __call__(self, *operands):
        return self.function(*operands)

    def describe(self, formatter):
        return self.symbol

    def _key(self):
        return self.symbol, self.function


class UnaryOperation(_Operation):
    OPERAND_COUNT = 1


class BinaryOperation(_Operation):
    OPERAND_COUNT = 2
