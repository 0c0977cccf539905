"""
Error taxonomy.

Validation errors subclass ``CoordinateError`` and carry the exact message
returned to the client; the API layer maps all of them to HTTP 400.
``BindFailure`` is only raised at process startup.
"""


class CoordinateError(ValueError):
    """Base class for rejected coordinate query input."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameter(CoordinateError):
    """One or more of the required query parameters is absent or empty."""

    def __init__(self, expected: tuple[str, ...]):
        super().__init__(
            f"Missing query parameters. Expected {', '.join(expected)}."
        )
        self.expected = expected


class InvalidParameter(CoordinateError):
    """A present parameter could not be used as a coordinate component."""

    def __init__(self, field: str):
        super().__init__(f"Invalid value for {field}")
        self.field = field


class BindFailure(OSError):
    """The listening socket could not be acquired."""
