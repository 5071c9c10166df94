class GrammarError(RuntimeError):
    """A grammar was built or used incorrectly.

    Parse failures are never raised; they are returned as ``ParseError`` values.
    This exception is reserved for programming mistakes in the grammar itself.
    """


class ParseFailed(RuntimeError):
    """Raised on request when a parse result is forced into a value."""

    def __init__(self, message, error=None):
        super().__init__(message)
        self.message = message
        self.error = error
