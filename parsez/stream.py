import typing

from parsez.errors import GrammarError

Item = typing.TypeVar('Item')


class Stream(typing.Generic[Item]):
    """Immutable view of a buffer with a cursor.

    The buffer is shared between all streams derived from it and is never
    modified; moving forward creates a new ``Stream``.
    """

    __slots__ = ('_buffer', '_cursor')

    def __init__(self, buffer: typing.Sequence[Item], cursor: int = 0):
        if not 0 <= cursor <= len(buffer):
            raise GrammarError(f'Cursor {cursor} out of range for buffer of length {len(buffer)}')
        self._buffer = buffer
        self._cursor = cursor

    @property
    def buffer(self) -> typing.Sequence[Item]:
        return self._buffer

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def rest(self) -> typing.Sequence[Item]:
        return self._buffer[self._cursor:]

    def at_end(self) -> bool:
        return self._cursor >= len(self._buffer)

    def __bool__(self):
        return not self.at_end()

    def peek(self) -> typing.Optional[Item]:
        return self._buffer[self._cursor] if self else None

    def advance(self) -> typing.Optional[tuple[Item, 'Stream[Item]']]:
        if not self:
            return None
        return self._buffer[self._cursor], Stream(self._buffer, self._cursor + 1)

    def __eq__(self, other):
        if not isinstance(other, Stream):
            return NotImplemented
        if self._cursor != other._cursor:
            return False
        if self._buffer is other._buffer:
            return True
        return len(self._buffer) == len(other._buffer) and all(a == b for a, b in zip(self._buffer, other._buffer))

    def __hash__(self):
        return hash((self._cursor, len(self._buffer)))

    def __repr__(self):
        return f'Stream({self._buffer!r}, {self._cursor})'


def stream(buffer: typing.Sequence[Item], cursor: int = 0) -> Stream[Item]:
    return Stream(buffer, cursor)
