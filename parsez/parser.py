import logging
import operator
import typing
from abc import abstractmethod, ABC

from parsez.errors import GrammarError
from parsez.fmt import fmt, fmt_call
from parsez.functions import identity
from parsez.monoid import Monoid, Semigroup
from parsez.pipe import as_pipeable, Not
from parsez.result import ParseResult, error, escalate, extend, success, with_expected
from parsez.stream import Stream

log = logging.getLogger(__name__)

A = typing.TypeVar('A')
B = typing.TypeVar('B')

Predicate = typing.Callable[[typing.Any], bool]


class Parser(ABC, typing.Generic[A]):
    """A function from a ``Stream`` to a ``ParseResult``.

    Parsers are immutable once built and may be run any number of times.
    ``p | q`` tries ``q`` when ``p`` fails, ``p + q`` runs both and adds their
    values, and pipeable combinators are applied with ``p >> combinator(...)``.
    """

    @abstractmethod
    def parse(self, stream: Stream) -> ParseResult:
        ...

    def __call__(self, stream: Stream) -> ParseResult:
        return self.parse(stream)

    def alias(self, name: str) -> 'Parser[A]':
        return Alias(self, name)

    def __or__(self, other) -> 'Parser[A]':
        return Either(self, other)

    def __add__(self, other: 'Parser[A]') -> 'Parser[A]':
        return get_semigroup(_additive).concat(self, other)

    def __repr__(self):
        return type(self).__name__


def _force(parser) -> Parser:
    return parser if isinstance(parser, Parser) else parser()


def _check_progress(res, current: Stream, combinator: str):
    if res.next.cursor <= current.cursor:
        raise GrammarError(f'{combinator} applied to a parser that consumed no input at {current.cursor}')


class Alias(Parser[A]):
    def __init__(self, parser: Parser[A], name: str):
        assert isinstance(parser, Parser)
        self._parser = parser
        self._name = name

    def parse(self, stream: Stream) -> ParseResult:
        if not log.isEnabledFor(logging.DEBUG):
            return self._parser.parse(stream)
        log.debug('trying %s at %d', self._name, stream.cursor)
        res = self._parser.parse(stream)
        if res:
            log.debug('%s matched %d..%d: %r', self._name, res.start.cursor, res.next.cursor, res.value)
        else:
            log.debug('%s failed at %d, expected: %s', self._name, res.cursor, ', '.join(res.expected))
        return res

    def __repr__(self):
        return self._name


class FromFunction(Parser[A]):
    def __init__(self, func: typing.Callable[[Stream], ParseResult]):
        self._func = func

    def parse(self, stream: Stream) -> ParseResult:
        return self._func(stream)

    def __repr__(self):
        return fmt(self._func)


def parser(func: typing.Callable[[Stream], ParseResult]) -> Parser:
    """Decorator turning a plain ``stream -> ParseResult`` function into a ``Parser``."""
    return FromFunction(func)


class Succeed(Parser[A]):
    def __init__(self, value: A):
        self._value = value

    def parse(self, stream: Stream) -> ParseResult:
        return success(self._value, stream, stream)

    def __repr__(self):
        return fmt_call('succeed', self._value)


class Fail(Parser):
    def __init__(self, position: typing.Optional[Stream] = None):
        self._position = position

    def parse(self, stream: Stream) -> ParseResult:
        return error(self._position if self._position is not None else stream)


class Item(Parser):
    def parse(self, stream: Stream) -> ParseResult:
        res = stream.advance()
        if res is None:
            return error(stream)
        value, next_stream = res
        return success(value, next_stream, stream)


class Sat(Parser):
    def __init__(self, predicate: Predicate):
        self._predicate = predicate

    def parse(self, stream: Stream) -> ParseResult:
        res = stream.advance()
        if res is not None and self._predicate(res[0]):
            return success(res[0], res[1], stream)
        # reported where the rejected item starts
        return error(stream)

    def __repr__(self):
        return fmt_call('sat', self._predicate)


class Expected(Parser[A]):
    def __init__(self, parser: Parser[A], message: str):
        self._parser = parser
        self._message = message

    def parse(self, stream: Stream) -> ParseResult:
        res = self._parser.parse(stream)
        return res if res else with_expected(res, [self._message])

    def __repr__(self):
        return self._message


class Cut(Parser[A]):
    def __init__(self, parser: Parser[A]):
        self._parser = parser

    def parse(self, stream: Stream) -> ParseResult:
        res = self._parser.parse(stream)
        return res if res else escalate(res)

    def __repr__(self):
        return fmt_call('cut', self._parser)


class Chain(Parser[B]):
    def __init__(self, parser: Parser[A], func: typing.Callable[[A], Parser[B]]):
        self._parser = parser
        self._func = func

    def parse(self, stream: Stream) -> ParseResult:
        first = self._parser.parse(stream)
        if not first:
            return first
        second = self._func(first.value).parse(first.next)
        if not second:
            return second
        return success(second.value, second.next, stream)

    def __repr__(self):
        return fmt_call('chain', self._parser, self._func)


class Map(Parser[B]):
    def __init__(self, parser: Parser[A], func: typing.Callable[[A], B]):
        self._parser = parser
        self._func = func

    def parse(self, stream: Stream) -> ParseResult:
        res = self._parser.parse(stream)
        if not res:
            return res
        return success(self._func(res.value), res.next, res.start)

    def __repr__(self):
        return fmt_call('map', self._parser, self._func)


class Either(Parser[A]):
    def __init__(self, parser: Parser[A], that: typing.Union[Parser[A], typing.Callable[[], Parser[A]]]):
        self._parser = parser
        self._that = that

    def parse(self, stream: Stream) -> ParseResult:
        first = self._parser.parse(stream)
        if first or first.fatal:
            return first
        second = _force(self._that).parse(stream)
        if second:
            return second
        return extend(first, second)

    def __repr__(self):
        return f'({self._parser!r} | {self._that!r})'


class WithStart(Parser):
    def __init__(self, parser: Parser):
        self._parser = parser

    def parse(self, stream: Stream) -> ParseResult:
        res = self._parser.parse(stream)
        if not res:
            return res
        return success((res.value, stream), res.next, res.start)


class Eof(Parser[None]):
    def parse(self, stream: Stream) -> ParseResult:
        if stream.at_end():
            return success(None, stream, stream)
        return error(stream, ['end of file'])

    def __repr__(self):
        return 'eof()'


class Many(Parser[list]):
    """Repeats a parser in a loop, so long inputs do not grow the call stack."""

    def __init__(self, parser: Parser, at_least: int = 0):
        self._parser = parser
        self._at_least = at_least

    def parse(self, stream: Stream) -> ParseResult:
        values = []
        current = stream
        while True:
            res = self._parser.parse(current)
            if not res:
                if res.fatal or len(values) < self._at_least:
                    return res
                return success(values, current, stream)
            _check_progress(res, current, 'many')
            values.append(res.value)
            current = res.next

    def __repr__(self):
        return fmt_call('many1' if self._at_least else 'many', self._parser)


class ManyTill(Parser[list]):
    def __init__(self, parser: Parser, end: Parser, at_least: int = 0):
        self._parser = parser
        self._end = end
        self._at_least = at_least

    def parse(self, stream: Stream) -> ParseResult:
        values = []
        current = stream
        while True:
            end_res = None
            if len(values) >= self._at_least:
                end_res = self._end.parse(current)
                if end_res:
                    return success(values, end_res.next, stream)
                if end_res.fatal:
                    return end_res
            res = self._parser.parse(current)
            if not res:
                if end_res is None or res.fatal:
                    return res
                return extend(end_res, res)
            _check_progress(res, current, 'many_till')
            values.append(res.value)
            current = res.next

    def __repr__(self):
        return fmt_call('many1_till' if self._at_least else 'many_till', self._parser, self._end)


class LookAhead(Parser[A]):
    def __init__(self, parser: Parser[A]):
        self._parser = parser

    def parse(self, stream: Stream) -> ParseResult:
        res = self._parser.parse(stream)
        if not res:
            return res
        return success(res.value, stream, stream)

    def __repr__(self):
        return fmt_call('look_ahead', self._parser)


class Forward(Parser[A]):
    """Stand-in for a parser that is only known later; enables recursive grammars.

    Either give a thunk up front (``lazy``) or call ``define`` once before the
    first run (``forward``).
    """

    def __init__(self, thunk: typing.Optional[typing.Callable[[], Parser[A]]] = None):
        self._thunk = thunk
        self._parser = None

    def define(self, parser: Parser[A]) -> 'Forward[A]':
        if self._parser is not None or self._thunk is not None:
            raise GrammarError('Forward parser is already defined')
        self._parser = parser
        return self

    def parse(self, stream: Stream) -> ParseResult:
        if self._parser is None:
            if self._thunk is None:
                raise GrammarError('Forward parser used before being defined')
            self._parser = self._thunk()
        return self._parser.parse(stream)

    def __repr__(self):
        return 'forward' if self._parser is None else fmt_call('forward', self._parser)


# constructors


def succeed(value: A) -> Parser[A]:
    return Succeed(value)


of = succeed


def fail() -> Parser:
    return Fail()


zero = fail


def fail_at(position: Stream) -> Parser:
    """Fails without consuming anything, reporting ``position`` instead of the current one."""
    return Fail(position)


def item() -> Parser:
    return Item()


def sat(predicate: Predicate) -> Parser:
    return Sat(predicate)


def expected(parser: Parser[A], message: str) -> Parser[A]:
    return Expected(parser, message)


def cut(parser: Parser[A]) -> Parser[A]:
    """Makes every failure of ``parser`` fatal, so enclosing alternatives give up."""
    return Cut(parser)


def cut_with(p1: Parser, p2: Parser[B]) -> Parser[B]:
    """Matches ``p1``, then either ``p2`` or a fatal error."""
    return Chain(p1, lambda _: Cut(p2))


def seq(parser: Parser[A], func: typing.Callable[[A], Parser[B]]) -> Parser[B]:
    return Chain(parser, func)


def either(parser: Parser[A], that) -> Parser[A]:
    """Tries ``parser``, then ``that`` at the same position unless the first failure was fatal.

    ``that`` is a parser or a function returning one, evaluated only when needed.
    """
    return Either(parser, that)


def with_start(parser: Parser[A]) -> Parser[tuple]:
    return WithStart(parser)


def eof() -> Parser[None]:
    return Eof()


def many(parser: Parser[A]) -> Parser[list]:
    """Zero or more matches of ``parser``.

    ``parser`` must consume input whenever it succeeds, otherwise ``GrammarError`` is raised.
    """
    return Many(parser)


def many1(parser: Parser[A]) -> Parser[list]:
    return Many(parser, at_least=1)


def sep_by1(sep: Parser, parser: Parser[A]) -> Parser[list]:
    return parser >> chain(lambda head: many(sep >> ap_second(parser)) >> map(lambda tail: [head] + tail))


def sep_by(sep: Parser, parser: Parser[A]) -> Parser[list]:
    nil = succeed(None) >> map(lambda _: [])
    return Either(sep_by1(sep, parser), nil)


def sep_by_cut(sep: Parser, parser: Parser[A]) -> Parser[list]:
    """Like ``sep_by1``, but a separator not followed by ``parser`` is a fatal error."""
    return parser >> chain(lambda head: many(cut_with(sep, parser)) >> map(lambda tail: [head] + tail))


def look_ahead(parser: Parser[A]) -> Parser[A]:
    return LookAhead(parser)


def take_until(predicate: Predicate) -> Parser[list]:
    return many(sat(Not(predicate)))


def optional(parser: Parser[A], default=None) -> Parser:
    return Either(parser, Succeed(default))


def many_till(parser: Parser[A], end: Parser) -> Parser[list]:
    """Matches ``parser`` until ``end`` matches; ``end`` is consumed but left out of the result."""
    return ManyTill(parser, end)


def many1_till(parser: Parser[A], end: Parser) -> Parser[list]:
    return ManyTill(parser, end, at_least=1)


def lazy(thunk: typing.Callable[[], Parser[A]]) -> Parser[A]:
    return Forward(thunk)


def forward() -> Forward:
    return Forward()


# pipeables


@as_pipeable
def map(fa: Parser[A], func: typing.Callable[[A], B]) -> Parser[B]:
    return Map(fa, func)


@as_pipeable
def chain(ma: Parser[A], func: typing.Callable[[A], Parser[B]]) -> Parser[B]:
    return Chain(ma, func)


@as_pipeable
def chain_first(ma: Parser[A], func: typing.Callable[[A], Parser]) -> Parser[A]:
    return Chain(ma, lambda a: Map(func(a), lambda _: a))


@as_pipeable
def ap(fab: Parser[typing.Callable[[A], B]], fa: Parser[A]) -> Parser[B]:
    return Chain(fab, lambda f: Map(fa, f))


@as_pipeable
def ap_first(fa: Parser[A], fb: Parser) -> Parser[A]:
    return Chain(fa, lambda a: Map(fb, lambda _: a))


@as_pipeable
def ap_second(fa: Parser, fb: Parser[B]) -> Parser[B]:
    return Chain(fa, lambda _: fb)


@as_pipeable
def alt(fa: Parser[A], that) -> Parser[A]:
    return Either(fa, that)


@as_pipeable
def flatten(mma: Parser[Parser[A]]) -> Parser[A]:
    return Chain(mma, identity)


@as_pipeable
def between(parser: Parser[A], left: Parser, right: Parser) -> Parser[A]:
    return left >> ap_second(parser) >> ap_first(right)


@as_pipeable
def surrounded_by(parser: Parser[A], bound: Parser) -> Parser[A]:
    return parser >> between(bound, bound)


@as_pipeable
def maybe(parser: Parser[A], monoid: Monoid[A]) -> Parser[A]:
    """Falls back to ``monoid.empty`` without consuming input when ``parser`` fails."""
    return Either(parser, Succeed(monoid.empty))


# structured binding


def _bind(record: dict, name: str, value) -> dict:
    if name in record:
        raise GrammarError(f'Name {name!r} is already bound')
    return {**record, name: value}


@as_pipeable
def bind_to(fa: Parser[A], name: str) -> Parser[dict]:
    return fa >> map(lambda a: _bind({}, name, a))


@as_pipeable
def bind(fa: Parser[dict], name: str, func: typing.Callable[[dict], Parser]) -> Parser[dict]:
    return fa >> chain(lambda record: func(record) >> map(lambda b: _bind(record, name, b)))


# instances


def get_semigroup(semigroup: Semigroup[A]) -> Semigroup[Parser[A]]:
    return Semigroup(lambda x, y: x >> chain(lambda a: y >> map(lambda b: semigroup.concat(a, b))))


def get_monoid(monoid: Monoid[A]) -> Monoid[Parser[A]]:
    return Monoid(get_semigroup(monoid).concat, succeed(monoid.empty))


_additive = Semigroup(operator.add)
