"""Parses command line statements such as ``foo ./bar -b --baz=qux``.

The statement becomes an ``Ast``::

    Ast(command='foo',
        source='foo ./bar -b --baz=qux',
        args=Args(flags=['b'], named={'baz': 'qux'}, positional=['./bar']))
"""
import dataclasses
import typing

from parsez import char as C
from parsez import code_frame
from parsez import parser as P
from parsez import string as S
from parsez.monoid import dict_monoid, fold_map, last_semigroup, list_monoid, struct_monoid


@dataclasses.dataclass(frozen=True)
class Flag:
    value: str


@dataclasses.dataclass(frozen=True)
class Named:
    name: str
    value: str


@dataclasses.dataclass(frozen=True)
class Positional:
    value: str


Argument = typing.Union[Flag, Named, Positional]


@dataclasses.dataclass(frozen=True)
class Args:
    flags: list[str] = dataclasses.field(default_factory=list)
    named: dict[str, str] = dataclasses.field(default_factory=dict)
    positional: list[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass(frozen=True)
class Ast:
    command: str
    source: str
    args: Args


# a repeated named argument keeps its last value
args_monoid = struct_monoid(Args, flags=list_monoid, named=dict_monoid(last_semigroup), positional=list_monoid)


def to_args(argument: Argument) -> Args:
    if isinstance(argument, Flag):
        return Args(flags=[argument.value])
    elif isinstance(argument, Named):
        return Args(named={argument.name: argument.value})
    elif isinstance(argument, Positional):
        return Args(positional=[argument.value])
    raise TypeError(f'Not an argument: {argument!r}')


whitespace_surrounded = P.surrounded_by(S.spaces)

dash = C.char('-')

double_dash = S.string('--')

equals = C.char('=')

identifier = C.many1(C.alphanum)


def _named(parts: list[str]) -> Named:
    name, *rest = parts
    return Named(name, '='.join(rest))


flag = (dash >> P.ap_second(identifier) >> P.map(Flag)).alias('flag')

named = (double_dash >> P.ap_second(P.sep_by1(equals, identifier)) >> P.map(_named)).alias('named')

positional = (C.many1(C.not_space) >> P.map(Positional)).alias('positional')

argument = flag | named | positional


def statement(cmd: str) -> P.Parser[dict]:
    return (S.string(cmd) >> whitespace_surrounded
            >> P.bind_to('command')
            >> P.bind('args', lambda _: P.many(argument >> whitespace_surrounded)))


def ast(cmd: str, source: str) -> P.Parser[Ast]:
    return statement(cmd) >> P.map(lambda r: Ast(command=r['command'],
                                                 source=source,
                                                 args=fold_map(args_monoid, to_args, r['args'])))


def parse_command(cmd: str, source: str, on_error=None,
                  options: typing.Optional[code_frame.CodeFrameOptions] = None) -> code_frame.RunResult[Ast]:
    """Parses ``source`` as an invocation of ``cmd``.

    On failure the code frame message is replaced by ``on_error(cmd)`` when given.
    """
    res = code_frame.run(ast(cmd, source), source, options)
    if res or on_error is None:
        return res
    return dataclasses.replace(res, message=on_error(cmd))
