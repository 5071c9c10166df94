import dataclasses
import functools
import operator
import typing

A = typing.TypeVar('A')


@dataclasses.dataclass(frozen=True)
class Semigroup(typing.Generic[A]):
    concat: typing.Callable[[A, A], A]


@dataclasses.dataclass(frozen=True)
class Monoid(Semigroup[A]):
    empty: A = None


def fold(monoid: Monoid[A], items: typing.Iterable[A]) -> A:
    return functools.reduce(monoid.concat, items, monoid.empty)


def fold_map(monoid: Monoid[A], func, items) -> A:
    return fold(monoid, (func(item) for item in items))


string_monoid = Monoid(operator.add, '')

list_monoid = Monoid(operator.add, [])

first_semigroup = Semigroup(lambda x, _: x)

last_semigroup = Semigroup(lambda _, y: y)


def dict_monoid(semigroup: Semigroup) -> Monoid[dict]:
    """Union of dicts; values under the same key are combined with ``semigroup``."""

    def concat(x, y):
        res = dict(x)
        for key, value in y.items():
            res[key] = semigroup.concat(res[key], value) if key in res else value
        return res

    return Monoid(concat, {})


def struct_monoid(cls, **fields: Monoid) -> Monoid:
    """Field-wise monoid for a dataclass ``cls`` whose fields are all listed in ``fields``."""

    def concat(x, y):
        return cls(**{name: m.concat(getattr(x, name), getattr(y, name)) for name, m in fields.items()})

    return Monoid(concat, cls(**{name: m.empty for name, m in fields.items()}))
