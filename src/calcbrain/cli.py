from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

import logging

from prompt_toolkit import PromptSession

from .util import CalcError
from .ops import format_number
from .brain import CalculatorBrain
from .lexer import Lexer


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    # Nothing is kept across sessions.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator brain.

    Turns typed lines into operands, operations and commands, and shows
    the brain's result after each line.
    '''

    DEFAULT_PROMPT = '> '
    FALLBACK_DISPLAY = '0'
    LOG_FORMAT = '[%(levelname)s - %(funcName)4s() ] %(message)s'

    # Names that are commands rather than operations.
    COMMANDS = {
        'c': 'clear',
        'h': 'printhistory',
        's': 'printstack',
    }

    def dumper(self):
        '''
        Dump all lexemes, the groups they matched, and their arity.
        '''
        brain = CalculatorBrain()
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<arity>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                groups = lexer.matchedgroups(match)
                op = brain.known_ops.get(lexer.canonical(match.group(0)))
                print(*groups.keys(),
                      repr(match.group(0)),
                      op.arity if op is not None else None,
                      sep='\t')

    def executor(self):
        '''
        Run brain (RPN calculator), one line at a time.
        '''
        self.brain = CalculatorBrain()
        self.result = None
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        self.feed(lexer, lexer.matchedgroups(match))
            # Abort entire rest of line
            except CalcError as e:
                print(e.args[0], file=stderr)
            self.display()

    def feed(self, lexer, groups):
        '''
        Hand one lexeme to the brain, or run it if it is a command.
        '''
        if 'number' in groups:
            self.result = self.brain.push_operand(groups['number'])
        elif 'operator' in groups:
            symbol = lexer.canonical(groups['operator'])
            self.result = self.brain.perform_operation(symbol)
            self.brain.update_display_history()
        elif groups['name'] in type(self).COMMANDS:
            getattr(self, type(self).COMMANDS[groups['name']])()
        else:
            self.result = self.brain.perform_operation(groups['name'])

    def render(self, result):
        '''
        Text to display for result; the fallback if there is none.
        '''
        if result is None:
            return type(self).FALLBACK_DISPLAY
        return format_number(result)

    def display(self):
        '''
        Print the current result, with the history if asked for.
        '''
        shown = self.render(self.result)
        if self.args.history and self.brain.display_history:
            print(self.brain.display_history, '=', shown)
        else:
            print(shown)

    def clear(self):
        '''
        Reset brain and display.
        '''
        self.brain.clear()
        self.result = None

    def printhistory(self):
        print(self.brain.display_history)

    def printstack(self):
        print(self.brain.description)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-H', '--history',
                                          action='store_true',
                                          help='show history with result')
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
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's arguments.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(stream=stderr,
                            format=self.LOG_FORMAT,
                            level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
