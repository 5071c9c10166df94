import functools
import json
import typing

from parsez import char as C
from parsez import parser as P
from parsez.monoid import fold as fold_monoid, string_monoid
from parsez.pipe import as_pipeable
from parsez.result import ParseResult, error, success
from parsez.stream import Stream


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


class String(P.Parser[str]):
    """Matches an exact literal.

    On mismatch the failure is reported at the first differing item, which
    lets ``either`` prefer whichever literal matched the longest prefix.
    """

    def __init__(self, string: str):
        self._string = string

    def parse(self, stream: Stream) -> ParseResult:
        buffer, cursor = stream.buffer, stream.cursor
        end = cursor + len(self._string)
        if isinstance(buffer, str) and buffer.startswith(self._string, cursor):
            return success(self._string, Stream(buffer, end), stream)
        for index, c in enumerate(self._string, start=cursor):
            if index >= len(buffer) or buffer[index] != c:
                return error(Stream(buffer, index), [_quote(self._string)])
        return success(self._string, Stream(buffer, end), stream)

    def __repr__(self):
        return _quote(self._string)


def string(s: str) -> P.Parser[str]:
    return String(s)


def not_string(s: str) -> P.Parser[str]:
    """Succeeds with ``''`` without consuming input unless the input continues with ``s``."""
    target = String(s)

    @P.parser
    def inner(stream: Stream) -> ParseResult:
        if target.parse(stream):
            return error(stream, [f'not {_quote(s)}'])
        return success('', stream, stream)

    return inner


def one_of(strings: typing.Iterable[str]) -> P.Parser[str]:
    return functools.reduce(lambda p, s: p | string(s), strings, P.fail())


def fold(parsers: typing.Iterable[P.Parser[str]]) -> P.Parser[str]:
    return fold_monoid(P.get_monoid(string_monoid), parsers)


def maybe(parser: P.Parser[str]) -> P.Parser[str]:
    return parser >> P.maybe(string_monoid)


def many(parser: P.Parser[str]) -> P.Parser[str]:
    return maybe(many1(parser))


def many1(parser: P.Parser[str]) -> P.Parser[str]:
    return P.many1(parser) >> P.map(''.join)


spaces = C.many(C.space)
spaces1 = C.many1(C.space)
not_spaces = C.many(C.not_space)
not_spaces1 = C.many1(C.not_space)


def _to_float(s: str) -> P.Parser[float]:
    try:
        return P.succeed(float(s))
    except ValueError:
        return P.fail()


# stops before a fractional part: "0.1" gives 0
int_ = P.expected(
    fold([maybe(C.char('-')), C.many1(C.digit)]) >> P.map(int),
    'an integer')

float_ = P.expected(
    fold([maybe(C.char('-')), C.many(C.digit), maybe(fold([C.char('.'), C.many1(C.digit)]))]) >> P.chain(_to_float),
    'a float')

# escaped quotes are kept as written
double_quoted_string = many(string('\\"') | C.not_char('"')) >> P.surrounded_by(C.char('"'))


@as_pipeable
def run(parser: P.Parser, source: str) -> ParseResult:
    return parser.parse(Stream(source))
