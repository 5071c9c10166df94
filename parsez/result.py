import dataclasses
import typing

from parsez.stream import Stream

A = typing.TypeVar('A')


@dataclasses.dataclass(frozen=True)
class ParseError:
    """Parsing failed at ``position`` while hoping for one of ``expected``.

    A ``fatal`` error stops alternation from trying sibling branches.
    """
    position: Stream
    expected: list[str] = dataclasses.field(default_factory=list)
    fatal: bool = False

    def __bool__(self):
        return False

    @property
    def cursor(self) -> int:
        return self.position.cursor


@dataclasses.dataclass(frozen=True)
class ParseSuccess(typing.Generic[A]):
    value: A
    next: Stream
    start: Stream

    def __bool__(self):
        return True


ParseResult = typing.Union[ParseSuccess[A], ParseError]


def success(value: A, next: Stream, start: Stream) -> ParseSuccess[A]:
    return ParseSuccess(value=value, next=next, start=start)


def error(position: Stream, expected: typing.Iterable[str] = (), fatal: bool = False) -> ParseError:
    return ParseError(position=position, expected=list(expected), fatal=fatal)


def is_success(result: ParseResult) -> bool:
    return isinstance(result, ParseSuccess)


def with_expected(err: ParseError, expected: typing.Iterable[str]) -> ParseError:
    return dataclasses.replace(err, expected=list(expected))


def escalate(err: ParseError) -> ParseError:
    return dataclasses.replace(err, fatal=True)


def extend(err1: ParseError, err2: ParseError) -> ParseError:
    """Merge the errors of two alternatives tried at the same position.

    The error that got further into the input wins as is. On a tie the labels
    are concatenated and everything else comes from ``err1``.
    """
    if err1.cursor < err2.cursor:
        return err2
    elif err1.cursor > err2.cursor:
        return err1
    else:
        return dataclasses.replace(err1, expected=err1.expected + err2.expected)
