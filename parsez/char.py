import json

from parsez import parser as P
from parsez.errors import GrammarError
from parsez.predicates import (eq, ne, one_of as is_one_of, is_digit, is_space, is_alphanum, is_letter,
                               is_unicode_letter, is_upper, is_lower)

Char = str


def many(parser: P.Parser) -> P.Parser[str]:
    """Matches ``parser`` zero or more times and joins the matched characters."""
    return P.many(parser) >> P.map(''.join)


def many1(parser: P.Parser) -> P.Parser[str]:
    """Matches ``parser`` one or more times and joins the matched characters."""
    return P.many1(parser) >> P.map(''.join)


def _single(c: Char) -> Char:
    if not isinstance(c, str) or len(c) != 1:
        raise GrammarError(f'Expected a single character, got {c!r}')
    return c


def char(c: Char) -> P.Parser[Char]:
    return P.expected(P.sat(eq(_single(c))), f'"{c}"')


def not_char(c: Char) -> P.Parser[Char]:
    return P.expected(P.sat(ne(_single(c))), f'anything but "{c}"')


def one_of(s: str) -> P.Parser[Char]:
    return P.expected(P.sat(is_one_of(s)), f'One of "{s}"')


def not_one_of(s: str) -> P.Parser[Char]:
    return P.expected(P.sat(~is_one_of(s)), f'Not one of {json.dumps(s, ensure_ascii=False)}')


def _class(predicate, label: str) -> P.Parser[Char]:
    return P.expected(P.sat(predicate), label)


digit = _class(is_digit, 'a digit')
space = _class(is_space, 'a whitespace')
alphanum = _class(is_alphanum, 'a word character')
letter = _class(is_letter, 'a letter')
unicode_letter = _class(is_unicode_letter, 'an unicode letter')
upper = _class(is_upper, 'an upper case letter')
lower = _class(is_lower, 'a lower case letter')

not_digit = _class(~is_digit, 'a non-digit')
not_space = _class(~is_space, 'a non-whitespace character')
not_alphanum = _class(~is_alphanum, 'a non-word character')
not_letter = _class(~is_letter, 'a non-letter character')
not_upper = _class(~is_upper, 'anything but an upper case letter')
not_lower = _class(~is_lower, 'anything but a lower case letter')
