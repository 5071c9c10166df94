import dataclasses
import logging
import re
import typing

from parsez.errors import ParseFailed
from parsez.parser import Parser
from parsez.result import ParseError
from parsez.stream import Stream

log = logging.getLogger(__name__)

A = typing.TypeVar('A')

_LINE_SPLIT = re.compile(r'\r\n|[\n\r\u2028\u2029]')
_LINE_TERMINATORS = '\n\r\u2028\u2029'


@dataclasses.dataclass(frozen=True)
class CodeFrameOptions:
    lines_above: int = 2
    lines_below: int = 3


@dataclasses.dataclass(frozen=True)
class Location:
    line: int
    column: int


def get_location(source: str, cursor: int) -> Location:
    """1-indexed line and column of ``cursor``.

    A line terminator found at the cursor already counts towards the next
    line, so an error reported on a newline points at the start of the line
    that follows it.
    """
    line, column = 1, 1
    for i, c in enumerate(source[:cursor + 1]):
        # "\r\n" breaks the line once
        if c == '\n' and i > 0 and source[i - 1] == '\r':
            continue
        if c in _LINE_TERMINATORS:
            line += 1
            column = 1
        elif i < cursor:
            column += 1
    return Location(line, column)


def code_frame_columns(source: str, location: Location, message: typing.Optional[str] = None,
                       options: typing.Optional[CodeFrameOptions] = None) -> str:
    options = options or CodeFrameOptions()
    lines = _LINE_SPLIT.split(source)
    start = max(location.line - (options.lines_above + 1), 0)
    end = min(len(lines), location.line + options.lines_below)
    width = len(str(end))

    frame = []
    for number in range(start + 1, end + 1):
        line = lines[number - 1]
        gutter = f' {str(number).rjust(width)} |'
        text = f' {line}' if line else ''
        if number == location.line:
            spacing = re.sub(r'[^\t]', ' ', line[:max(location.column - 1, 0)])
            marker = f'\n {re.sub(r"[0-9]", " ", gutter)} {spacing}^'
            if message:
                marker += f' {message}'
            frame.append(f'>{gutter}{text}{marker}')
        else:
            frame.append(f' {gutter}{text}')
    return '\n'.join(frame)


def render(err: ParseError, source: str, options: typing.Optional[CodeFrameOptions] = None) -> str:
    message = 'Expected: ' + ', '.join(err.expected)
    return code_frame_columns(source, get_location(source, err.cursor), message, options)


@dataclasses.dataclass(frozen=True)
class RunResult(typing.Generic[A]):
    """Either the parsed ``value`` or, on failure, the rendered ``message``."""
    value: typing.Optional[A] = None
    message: typing.Optional[str] = None
    error: typing.Optional[ParseError] = None

    def __bool__(self):
        return self.error is None

    def value_or_raise(self) -> A:
        if self:
            return self.value
        raise ParseFailed(self.message, self.error)


def run(parser: Parser[A], source: str, options: typing.Optional[CodeFrameOptions] = None) -> RunResult[A]:
    """Runs ``parser`` on ``source``; failures come back as a pretty printed code frame."""
    res = parser.parse(Stream(source))
    if res:
        return RunResult(value=res.value)
    log.debug('parse failed at %d, expected: %s', res.cursor, ', '.join(res.expected))
    return RunResult(message=render(res, source, options), error=res)
