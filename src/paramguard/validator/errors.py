"""Exception taxonomy for paramguard validation.

Every violation aborts validation and surfaces as one of these errors. They
all derive from ``ValidationError``, so request-handling code can catch the
root and translate it into a protocol-level rejection.
"""

from typing import Any


class ValidationError(ValueError):
    """Base exception for parameter validation failures.

    Attributes:
        param: Name of the offending parameter, when there is one
        value: The offending value, when relevant
    """

    def __init__(self, message: str, param: str | None = None, value: Any = None):
        self.param = param
        self.value = value
        super().__init__(message)


class NoParamsDefined(ValidationError):
    """Raised for a rule set that declares nothing at all."""


class MissingParam(ValidationError):
    """Raised when a required parameter is absent from its container."""


class UnexpectedParam(ValidationError):
    """Raised when parameters that were not declared are present.

    Attributes:
        params: All offending parameter names, in request order
    """

    def __init__(self, message: str, params: list[str]):
        self.params = params
        super().__init__(message, param=params[0] if params else None)


class InvalidParamType(ValidationError):
    """Raised when a value does not match the format of its declared type."""


class InvalidParamValue(ValidationError):
    """Raised for a disallowed null, a value outside the allowed set, a value
    below the minimum, or a value that cannot be cast to a boolean."""
