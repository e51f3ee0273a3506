from functools import reduce
import operator

import regex

from .util import CalcError
from .ops import KNOWN_OPS


def _symbol(symbol):
    '''
    Escape symbol; word symbols must not run into further letters.
    '''
    escaped = regex.escape(symbol)
    if symbol[-1].isalpha():
        escaped += r'(?!\p{L})'
    return escaped


class Lexer:
    '''
    Lexer for the calculator's *regular* grammar.

    Holds no state; the grammar is built once, from the known operations.
    '''
    # ASCII spellings for the keys that are awkward to type.
    ALIASES = {
        '*': '×',
        '/': '÷',
        '-': '−',
        # 'v', like in UNIX dc.
        'v': '√',
        'pi': 'π',
    }

    # Integral part of a number
    INTEGRAL = r'''
                (?:
                    # 1, 12, 1234, or 1_200 with thousands separators
                    \d+
                    (?:
                        _\d{3}
                    )*
                )
                '''
    # Fractional part of a number
    FRACTIONAL = r'''
                  (?:
                      \d+
                      (?:
                          _\d+
                      )*
                  )
                  '''
    # String formatting and regex is a tricky business, because of the braces.
    NUMBER = r'''
              (?:
                  # 1, 1_200, 1. (notice trailing dot), 1.3
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
              '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL)

    # Longest first, so that e.g. pi is not read as v and then i.
    OPERATOR = r'(?:' + r'|'.join(map(_symbol,
                                      sorted({*KNOWN_OPS, *ALIASES},
                                             key=len,
                                             reverse=True))) + r')'
    NAME = r'\p{L}+'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<name>' + NAME + r')|' \
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

        Raises CalcError on the first bad one; lexemes before it have
        already been yielded.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalcError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to a brain.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the groups the lexeme matched, and what they matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def canonical(self, symbol):
        '''
        Return the registry symbol for symbol, resolving aliases.
        '''
        return type(self).ALIASES.get(symbol, symbol)
