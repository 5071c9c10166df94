import pytest

from parsez import opt
from parsez.code_frame import CodeFrameOptions


def test_map():
    assert {'lines_above': 1} >> opt.map(lambda d: CodeFrameOptions(**d)) == CodeFrameOptions(lines_above=1)
    assert None >> opt.map(lambda d: CodeFrameOptions(**d)) is None


def test_map_unpacks_pairs():
    assert ('a', 1) >> opt.map(lambda k, v: f'{k}={v}') == 'a=1'


def test_value_or():
    assert 9 >> opt.value_or(-1) == 9
    assert 0 >> opt.value_or(-1) == 0
    assert None >> opt.value_or(-1) == -1


def test_value_or_raise():
    assert 9 >> opt.value_or_raise(KeyError('x')) == 9
    with pytest.raises(KeyError):
        None >> opt.value_or_raise(KeyError('x'))
    with pytest.raises(ValueError, match='missing'):
        None >> opt.value_or_raise('missing')
    with pytest.raises(ValueError, match='later'):
        None >> opt.value_or_raise(lambda: 'later')
    with pytest.raises(LookupError):
        None >> opt.value_or_raise(LookupError)
