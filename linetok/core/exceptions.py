"""
linetok.core.exceptions
=======================
All custom exceptions for the linetok token finder.

"No Nth match" is never an exception: selection returns None for that.
Everything below is either a registration failure or a caller-contract
violation and propagates straight to the immediate caller.
"""


class LinetokBaseError(Exception):
    """Base class for all linetok exceptions."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message


class InvalidPatternError(LinetokBaseError):
    """
    Raised by TokenRegistry.register() when a pattern source does not compile.

    The registry is left exactly as it was before the call.
    """
    pass


class UnknownTokenTypeError(LinetokBaseError):
    """Raised when a requested token type is not registered."""
    pass


class InvalidOccurrenceError(LinetokBaseError):
    """
    Raised when the occurrence index is not a positive integer.

    Causes:
      - n == 0 or negative
      - n is a bool, float, str, or None
    """
    pass


class ConfigError(LinetokBaseError):
    """
    Raised when a configuration is invalid, missing required fields,
    or contains unsupported values.
    """
    pass


class LineTooLongError(LinetokBaseError):
    """Raised by the finder when a line exceeds the configured max_line_length."""
    pass
