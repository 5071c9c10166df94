import dataclasses

from parsez.monoid import Monoid, dict_monoid, first_semigroup, fold, fold_map, last_semigroup, list_monoid, \
    string_monoid, struct_monoid


def test_fold():
    assert fold(string_monoid, ['a', 'b', 'c']) == 'abc'
    assert fold(string_monoid, []) == ''
    assert fold(list_monoid, [[1], [], [2, 3]]) == [1, 2, 3]


def test_fold_map():
    assert fold_map(string_monoid, str, [1, 2, 3]) == '123'


def test_first_and_last():
    assert first_semigroup.concat(1, 2) == 1
    assert last_semigroup.concat(1, 2) == 2


def test_dict_monoid():
    assert fold(dict_monoid(first_semigroup), [{'a': 1}, {'a': 2, 'b': 3}]) == {'a': 1, 'b': 3}
    assert fold(dict_monoid(last_semigroup), [{'a': 1}, {'a': 2, 'b': 3}]) == {'a': 2, 'b': 3}
    assert fold(dict_monoid(list_monoid), [{'a': [1]}, {'a': [2]}]) == {'a': [1, 2]}


def test_dict_monoid_does_not_modify_operands():
    x = {'a': 1}
    dict_monoid(last_semigroup).concat(x, {'a': 2})
    assert x == {'a': 1}


@dataclasses.dataclass(frozen=True)
class Point:
    x: int
    y: int


def test_struct_monoid():
    sum_monoid = Monoid(lambda a, b: a + b, 0)
    monoid = struct_monoid(Point, x=sum_monoid, y=sum_monoid)
    assert monoid.empty == Point(0, 0)
    assert fold(monoid, [Point(1, 2), Point(3, 4)]) == Point(4, 6)
