from os import isatty
import sys
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import math

from prompt_toolkit import PromptSession

from .util import RPNError, wrap_user_errors
from .calculator import Calculator
from .graph import trace
from .lexer import Lexer
from .logging_config import setup_logging


class InteractiveInput:
    def __init__(self, prompt, toolbar=None):
        self.prompt = prompt
        self.toolbar = toolbar

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Current program, as infix
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the RPN expression engine.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexeme matches and their kind.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                matched = match.group(0)  # the lexeme text itself
                groups = lexer.matchedgroups(match)
                print(*groups.keys(),
                      repr(matched),
                      sep='\t')

    def executor(self):
        '''
        Feed input to calculator, showing the program and its value per line.
        '''
        lexer = Lexer()
        for line in self.args.expressions:
            if not line.strip():
                continue
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        lexer.feed(self.calculator, lexer.matchedgroups(match))
            # Abort entire rest of line, makes sense anyway
            except RPNError as e:
                print(e.args[0], file=sys.stderr)
            print(self.calculator.description)
            result = self.calculator.evaluate_for_variable_values(self.variables)
            if result is not None:
                print('=', self.format(result))
        if self.args.graph:
            self.grapher()

    def grapher(self):
        '''
        Print the plottable points of the topmost expression, by segment.
        '''
        start, stop, step = self.args.graph
        print(self.calculator.description_for_graphing)
        for i, segment in enumerate(trace(self.calculator, start, stop, step,
                                          variables=self.variables)):
            if i:
                print()
            for x, y in segment:
                print(self.format(x), self.format(y), sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def format(self, number):
        '''
        Format number for output; inf, -inf and nan as Python spells them.
        '''
        text = self.calculator.string_from_number(number)
        return str(number) if text is None else text

    @wrap_user_errors('Bad variable binding {1}')
    def _binding(self, text):
        '''
        Parse NAME=VALUE.
        '''
        name, value = text.split('=', 1)
        name = name.strip()
        value = self.calculator.number_from_string(value)
        if not name or value is None:
            raise ValueError(text)
        return name, value

    def _check_graph(self):
        '''
        Reject -g arguments that wouldn't plot, or -g without executing.
        '''
        start, stop, step = self.args.graph
        if self.args.action != self.executor:
            self.argument_parser.error("-g can't be combined with -D or -G")
        if not (math.isfinite(start) and math.isfinite(stop)):
            self.argument_parser.error('START and STOP must be finite')
        if not step > 0:
            self.argument_parser.error('STEP must be positive')

    def _prompting_input(self):
        '''
        Return interactive input if prompting, else plain stdin.

        Prompts when asked to, or when both stdin and stdout are ttys.
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    toolbar=lambda: self.calculator.description)
        else:
            return stdin

    def __init__(self, calculator=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.

        :param calculator: Calculator to feed; a fresh one if None.
        '''
        self.calculator = Calculator() if calculator is None else calculator
        self.variables = {}
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log ignored input')
        self.argument_parser.add_argument('-V', '--var',
                                          action='append',
                                          default=[],
                                          metavar='NAME=VALUE',
                                          dest='bindings',
                                          help='variable value')
        self.argument_parser.add_argument('-g', '--graph',
                                          nargs=3,
                                          type=float,
                                          metavar=('START', 'STOP', 'STEP'),
                                          help='print y for x in range')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        setup_logging(logging.DEBUG if self.args.verbose else logging.WARNING)
        try:
            self.variables = dict(map(self._binding, self.args.bindings))
        except RPNError as e:
            self.argument_parser.error(e.args[0])
        if self.args.graph:
            self._check_graph()
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)

