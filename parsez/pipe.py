import functools

from parsez.fmt import fmt


class Pipeable:
    """Base of everything that can sit on the right hand side of ``>>``.

    ``value >> pipeable`` applies the pipeable to the value. Pipeables used as
    predicates also compose with ``&``, ``|`` and ``~``.
    """

    def __rshift__(self, other):
        return Pipeline(self, other)

    def __rrshift__(self, other):
        return self(other)

    def __and__(self, other):
        return All(self, other)

    def __or__(self, other):
        return Any(self, other)

    def __invert__(self):
        return Not(self)


class _Composite(Pipeable):
    symbol = ''

    def __init__(self, *funcs):
        flat = []
        for f in funcs:
            flat.extend(f._funcs if type(f) is type(self) else (f,))
        self._funcs = tuple(flat)

    def __str__(self):
        return '(' + f' {self.symbol} '.join(fmt(f) for f in self._funcs) + ')'

    __repr__ = __str__


class Pipeline(_Composite):
    symbol = '>>'

    def __call__(self, arg):
        for f in self._funcs:
            arg = f(arg)
        return arg


class All(_Composite):
    symbol = '&'

    def __call__(self, arg):
        return all(p(arg) for p in self._funcs)


class Any(_Composite):
    symbol = '|'

    def __call__(self, arg):
        return any(p(arg) for p in self._funcs)


class Not(Pipeable):
    def __init__(self, pred):
        self._pred = pred

    def __call__(self, arg):
        return not self._pred(arg)

    def __invert__(self):
        return self._pred

    def __str__(self):
        return '~' + fmt(self._pred)

    __repr__ = __str__


class Function(Pipeable):
    def __init__(self, func, *args, **kwargs):
        self._func = func
        self._args = args
        self._kwargs = kwargs
        self._name = None

    def __call__(self, arg):
        return self._func(arg, *self._args, **self._kwargs)

    def set_name(self, name):
        self._name = name
        return self

    def __str__(self):
        params = [fmt(a) for a in self._args] + [f'{k}={fmt(v)}' for k, v in self._kwargs.items()]
        if not params and self._name:
            return self._name
        return (self._name or fmt(self._func)) + '(' + ', '.join(params) + ')'

    __repr__ = __str__


def as_pipeable(func=None, *, name=None):
    """Turn ``func(subject, *args)`` into ``func(*args)`` usable as ``subject >> func(*args)``."""
    if func is None:
        return functools.partial(as_pipeable, name=name)
    else:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return Function(func, *args, **kwargs).set_name(name or func.__name__)

        return wrapper


fn = Function
