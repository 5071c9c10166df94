from parsez.pipe import fn
from parsez.seq import seq


def sqr(x):
    return x * x


def test_map():
    assert list(range(5) >> seq.map(sqr)) == [0, 1, 4, 9, 16]


def test_map_unpacks_pairs():
    assert list({'a': 1, 'b': 2}.items() >> seq.map(lambda k, v: f'{k}={v}')) == ['a=1', 'b=2']


def test_all():
    assert [1, 2, 3] >> seq.all()
    assert not [1, 0, 3] >> seq.all()
    assert [] >> seq.all()
    assert range(5) >> seq.all(lambda x: x < 5)


def test_join():
    assert ['a', 'b'] >> seq.join(' ') == 'a b'
    assert [1, 2, 3] >> seq.join() == '123'


def test_to_list():
    assert range(3) >> seq.map(sqr) >> seq.to_list() == [0, 1, 4]


def test_pipeline():
    pipeline = seq.map(sqr) >> seq.to(tuple) >> fn(len)
    assert range(4) >> pipeline == 4
    assert str(seq.join(' ')) == 'join(" ")'
