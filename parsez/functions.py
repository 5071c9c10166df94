import inspect
from inspect import Parameter


def identity(arg):
    return arg


def to_unary(func):
    """Lets a function of several arguments take them packed in one tuple.

    ``{'a': 1}.items() >> seq.map(lambda k, v: ...)`` relies on this.
    """
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return func
    required = [p for p in params if p.kind is Parameter.POSITIONAL_OR_KEYWORD and p.default is p.empty]
    if len(required) < 2:
        return func
    return lambda arg: func(*arg)
