'''
Decimal style number <-> string conversion.
'''

from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN
from functools import reduce
import operator

import regex


class NumberFormatter:
    '''
    Convert between floats and their display text.

    One decimal separator, optional thousands grouping, and a fixed maximum
    number of fraction digits. Failures come back as None rather than
    raising.
    '''

    DEFAULT_DECIMAL_SEPARATOR = '.'
    DEFAULT_GROUPING_SEPARATOR = ','
    # A double has 15-17 significant digits; anything past this is noise
    # like the 4 in 0.30000000000000004.
    DEFAULT_MAXIMUM_FRACTION_DIGITS = 15

    # Integral part, with separators in the right places only.
    GROUPED = r'''
               [0-9]{{1,3}}
               (?:
                   {grouping}
                   [0-9]{{3}}
               )+
               '''
    UNGROUPED = r'[0-9]*'
    NUMBER = r'''
              \s*
              (?<sign>[-+])?
              (?<integral>
                  {integral}
              )
              (?:
                  {decimal}
                  (?<fractional>[0-9]*)
              )?
              \s*
              '''
    # Where separators go in a run of integral digits
    GROUP_BOUNDARY = r'(?<=[0-9])(?=(?:[0-9]{3})+$)'
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self,
                 decimal_separator=DEFAULT_DECIMAL_SEPARATOR,
                 grouping_separator=DEFAULT_GROUPING_SEPARATOR,
                 maximum_fraction_digits=DEFAULT_MAXIMUM_FRACTION_DIGITS,
                 use_grouping=True):
        if decimal_separator == grouping_separator:
            raise ValueError('Decimal and grouping separator both {}'
                             .format(repr(decimal_separator)))
        if maximum_fraction_digits < 0:
            raise ValueError('Negative maximum fraction digits {}'
                             .format(maximum_fraction_digits))
        self.decimal_separator = decimal_separator
        self.grouping_separator = grouping_separator
        self.maximum_fraction_digits = maximum_fraction_digits
        self.use_grouping = use_grouping

        integral = type(self).UNGROUPED
        if use_grouping:
            grouped = type(self).GROUPED.format(
                grouping=regex.escape(grouping_separator)
            )
            integral = r'(?:' + grouped + r')|' + integral
        self._number = regex.compile(
            type(self).NUMBER.format(integral=integral,
                                     decimal=regex.escape(decimal_separator)),
            flags=type(self).FLAGS
        )

    def number_from_string(self, text):
        '''
        Parse display text into a float, or None if it isn't a number.
        '''
        match = self._number.fullmatch(text)
        if match is None:
            return None
        integral = match.group('integral').replace(self.grouping_separator, '')
        fractional = match.group('fractional')
        if not integral and not fractional:
            # A lone sign and/or separator
            return None
        return float('{}{}.{}'.format(match.group('sign') or '',
                                      integral or '0',
                                      fractional or '0'))

    def string_from_number(self, number):
        '''
        Render a number for display, or None if it can't be.

        Non-finite numbers have no decimal rendering.
        '''
        try:
            number = Decimal(number)
        except (TypeError, ValueError, InvalidOperation):
            return None
        if not number.is_finite():
            return None
        # Enough precision to keep every integral digit of huge numbers.
        context = Context(prec=max(28, number.adjusted() +
                                   self.maximum_fraction_digits + 2),
                          rounding=ROUND_HALF_EVEN)
        number = number.quantize(Decimal(1).scaleb(-self.maximum_fraction_digits),
                                 context=context)
        if number.is_zero():
            # No -0
            number = number.copy_abs()

        sign = '-' if number.is_signed() else ''
        integral, _, fractional = '{:f}'.format(number.copy_abs()).partition('.')
        fractional = fractional.rstrip('0')
        if self.use_grouping:
            integral = regex.sub(type(self).GROUP_BOUNDARY,
                                 lambda _: self.grouping_separator,
                                 integral)
        if fractional:
            return sign + integral + self.decimal_separator + fractional
        return sign + integral
