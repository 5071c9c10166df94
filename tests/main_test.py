from main import main


def write_config(tmp_path, statements):
    path = tmp_path / 'commands.yaml'
    path.write_text('command: foo\nstatements:\n' + ''.join(f'  - "{s}"\n' for s in statements))
    return str(path)


def test_main(tmp_path, capsys):
    path = write_config(tmp_path, ['foo ./bar -b --baz=qux', 'foo -v --level=3 --level=4 input.txt'])
    assert main([path]) == 0
    out = capsys.readouterr().out
    assert 'statement' in out
    assert 'baz=qux' in out
    assert 'level=4' in out
    assert 'level=3' not in out.replace('--level=3', '')


def test_main_reports_failures(tmp_path, capsys, caplog):
    path = write_config(tmp_path, ['foo -b', 'bar ./baz'])
    assert main([path]) == 1
    out = capsys.readouterr().out
    assert 'Expected: "foo"' in out
    assert "could not parse 'bar ./baz'" in caplog.text
