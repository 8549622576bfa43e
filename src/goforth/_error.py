"""Error classes and helpers"""

__all__ = [
    "ForthError",
    "StackError",
    "StackOverflow",
    "StackUnderflow",
    "DictionaryError",
    "DictionaryOverflow",
    "DictionaryUndefinedAccess",
    "DivideByZero",
    "NumeralParseFailure",
    "AccessedUndefinedAtAddr",
    "UnsupportedOperation",
]


class ForthError(Exception):
    """Error raised while evaluating forth code.

    Every error the engine reports is a subclass of this. None of them are
    fatal, the engine that raised it can keep evaluating.

    Args:
        message: (str) Error description

    Attributes:
        message: (str) Error description
        token: (str | None) Token being evaluated when the error surfaced
        column: (int | None) Column of that token in its source line
    """

    def __init__(self, message):
        self.message = message
        self.token = None
        self.column = None
        super().__init__(message)

    @property
    def kind(self):
        """Short name of the error kind, used by shells for reporting."""
        return type(self).__name__

    def attach(self, token):
        """Record the token being evaluated, unless one is already known."""
        if self.token is None:
            self.token = str(token)
            self.column = getattr(token, "column", None)
        return self


class StackError(ForthError):
    """Bounded stack refused an operation."""


class StackOverflow(StackError):
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"stack overflow (capacity {capacity})")


class StackUnderflow(StackError):
    def __init__(self):
        super().__init__("stack underflow")


class DictionaryError(ForthError):
    """Addressable dictionary refused an operation."""


class DictionaryOverflow(DictionaryError):
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"dictionary overflow (capacity {capacity})")


class DictionaryUndefinedAccess(DictionaryError):
    def __init__(self, address):
        self.address = address
        super().__init__(f"no dictionary entry at address {address}")


class DivideByZero(ForthError):
    def __init__(self):
        super().__init__("divide by zero")


class NumeralParseFailure(ForthError):
    """Token is neither a known word nor a valid operand literal."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"undefined word or invalid number: {text!r}")


class AccessedUndefinedAtAddr(ForthError):
    def __init__(self, address):
        self.address = address
        super().__init__(f"nothing to fetch at address {address}")


class UnsupportedOperation(ForthError):
    """Feature is recognized but not implemented."""

    def __init__(self, feature):
        self.feature = feature
        super().__init__(f"{feature} is not yet implemented")
