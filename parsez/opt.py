from parsez.functions import to_unary
from parsez.pipe import as_pipeable


# noinspection PyPep8Naming
class opt:
    """Optional values, where ``None`` means "nothing", used for sparse config data."""

    @staticmethod
    @as_pipeable
    def map(obj, func):
        return to_unary(func)(obj) if obj is not None else None

    @staticmethod
    @as_pipeable
    def value_or(obj, default_value):
        return default_value if obj is None else obj

    @staticmethod
    @as_pipeable
    def value_or_raise(obj, exception):
        """``exception`` is an exception, a message or a function returning either."""
        if obj is None:
            raise to_exception(exception)
        return obj


def to_exception(exception) -> Exception:
    while callable(exception) and not isinstance(exception, Exception):
        exception = exception()
    if isinstance(exception, str):
        return ValueError(exception)
    return exception
