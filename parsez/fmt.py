import json


def fmt(f):
    if isinstance(f, str):
        return json.dumps(f, ensure_ascii=False)
    if hasattr(f, '__name__') and f.__name__ != '<lambda>':
        return f.__name__
    if hasattr(f, '__qualname__'):
        return f.__qualname__
    return repr(f)


def fmt_call(name, *args):
    return name + '(' + ', '.join(fmt(a) for a in args) + ')'
