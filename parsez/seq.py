import builtins

from parsez.functions import to_unary
from parsez.pipe import as_pipeable


# noinspection PyPep8Naming
class seq:
    """Lazy operations on iterables, applied with ``iterable >> seq.op(...)``."""

    @staticmethod
    @as_pipeable
    def map(iterable, func):
        func = to_unary(func)
        return (func(item) for item in iterable)

    @staticmethod
    @as_pipeable
    def all(iterable, pred=bool):
        pred = to_unary(pred)
        return builtins.all(pred(item) for item in iterable)

    @staticmethod
    @as_pipeable
    def join(iterable, separator=''):
        return separator.join(str(item) for item in iterable)

    @staticmethod
    @as_pipeable
    def to(iterable, factory):
        return factory(iterable)

    @staticmethod
    def to_list():
        return seq.to(list)
