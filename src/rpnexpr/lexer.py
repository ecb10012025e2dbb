from functools import reduce
import logging
import operator

import regex

from .util import RPNError
from .calculator import Calculator


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for lines of RPN input: numbers, operators, symbols, commands.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Integral part of a number; _ separates thousands
    INTEGRAL = r'''
                (?:
                    # 1, 12, or the 1 in 1_200.
                    [0-9]{1,3}
                    (?:
                        [0-9]
                        |
                        (?:
                            _[0-9]{3}
                        )
                    )*
                )
                '''
    # Fractional part of a number
    FRACTIONAL = r'''
                  (?:
                      [0-9]+
                      (?:
                          _[0-9]{1,3}
                      )*
                  )
                  '''
    # Number, with an optional sign stuck to it. A lone - is subtraction.
    NUMBER = r'''
              -?
              (?:
                  (?:
                      # 1, 1_200, 1_200. (notice trailing dot), 1.3
                      {INTEGRAL}
                      (?:
                          \.
                          {FRACTIONAL}?
                      )?
                  )|(?:
                      # .2
                      \.
                      {FRACTIONAL}
                  )
              )
              '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL)

    # Spellings that are easier to type than the calculator's own.
    ALIASES = {
        '*': '×',
        '/': '÷',
        '^': 'pow',
        'exp': 'eˣ',
        'log': 'log₁₀',
        'sqrt': '√',
        'asin': 'sin⁻¹',
        'acos': 'cos⁻¹',
        'atan': 'tan⁻¹',
    }
    SYMBOL_ALIASES = {
        'pi': 'π',
    }
    COMMANDS = {
        'clear': Calculator.clear,
    }

    # Longest first, so sin⁻¹ isn't lexed as sin and then garbage.
    OPERATOR = r'(?:' + r'|'.join(
        map(regex.escape,
            sorted({operation.symbol
                    for operation
                    in Calculator.OPERATIONS} |
                   ALIASES.keys(),
                   key=len, reverse=True))
    ) + r')'
    # Operators and commands stand alone.
    DELIMITER = r'(?=\s|$)'
    COMMAND = r'(?:' + r'|'.join(map(regex.escape, COMMANDS)) + r')'
    # Identifier-ish: x, π, t0
    SYMBOL = r'[^\W\d_]\w*'
    SPACE = r'\s+'

    # All possible lexemes, in order of precedence.
    LEXEME = r'(?<operator>' + OPERATOR + DELIMITER + r')|' \
             r'(?<number>' + NUMBER + r')|' \
             r'(?<command>' + COMMAND + DELIMITER + r')|' \
             r'(?<symbol>' + SYMBOL + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes.

        Raises RPNError on the first thing that isn't one.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise RPNError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to a calculator.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return lexeme kind(s) mapped to matched text.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def feed(self, calculator, groups):
        '''
        Push lexeme onto calculator, or run it if it's a command.

        :param groups: matchedgroups() of a feedable lexeme.
        '''
        if 'number' in groups:
            calculator.push_value(float(groups['number'].replace('_', '')))
        elif 'operator' in groups:
            symbol = groups['operator']
            calculator.push_operation(type(self).ALIASES.get(symbol, symbol))
        elif 'command' in groups:
            type(self).COMMANDS[groups['command']](calculator)
        elif 'symbol' in groups:
            name = groups['symbol']
            calculator.push_symbol(type(self).SYMBOL_ALIASES.get(name, name))
        else:
            logger.debug('Not feeding %r', groups)
