from parsez import string as S
from parsez.code_frame import CodeFrameOptions
from parsez.command import Args, Ast, Flag, Named, Positional, argument, args_monoid, ast, parse_command
from parsez.monoid import fold


def test_arguments():
    assert (argument >> S.run('-b')).value == Flag('b')
    assert (argument >> S.run('--baz=qux')).value == Named('baz', 'qux')
    assert (argument >> S.run('--url=a=b')).value == Named('url', 'a=b')
    assert (argument >> S.run('./bar')).value == Positional('./bar')


def test_ast():
    source = 'foo ./bar -b --baz=qux'
    assert (ast('foo', source) >> S.run(source)).value == Ast(
        command='foo',
        source=source,
        args=Args(flags=['b'], named={'baz': 'qux'}, positional=['./bar']))


def test_parse_command():
    res = parse_command('foo', 'foo -v --level=3 --level=4 input.txt')
    assert res
    assert res.value.args == Args(flags=['v'], named={'level': '4'}, positional=['input.txt'])


def test_parse_command_without_arguments():
    assert parse_command('foo', '  foo  ').value.args == Args()


def test_parse_command_failure():
    res = parse_command('foo', 'bar ./baz')
    assert not res
    assert res.message == '> 1 | bar ./baz\n    | ^ Expected: "foo"'
    assert res.error.cursor == 0


def test_parse_command_on_error():
    res = parse_command('foo', 'bar ./baz', on_error=lambda cmd: f'Usage: {cmd} [args]')
    assert res.message == 'Usage: foo [args]'
    assert res.error.expected == ['"foo"']


def test_parse_command_options():
    res = parse_command('foo', 'x\nbar', options=CodeFrameOptions(lines_above=0, lines_below=0))
    assert res.message == '> 1 | x\n    | ^ Expected: "foo"'


def test_args_monoid():
    args = fold(args_monoid, [Args(flags=['a'], named={'x': '1'}),
                              Args(positional=['p']),
                              Args(flags=['b'], named={'x': '2', 'y': '3'})])
    assert args == Args(flags=['a', 'b'], named={'x': '2', 'y': '3'}, positional=['p'])
    assert fold(args_monoid, []) == Args()


def test_aliases():
    assert repr(argument) == '((flag | named) | positional)'
