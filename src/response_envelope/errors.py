"""Error hierarchy for the response envelope library.

All library errors extend EnvelopeError. Validation failures raised by the
builder and the paging value object are InvalidArgumentError, raised
synchronously at the offending setter call rather than deferred to build().
"""

from __future__ import annotations


class EnvelopeError(Exception):
    """Base error for all response-envelope errors."""

    message: str = "Response envelope error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class InvalidArgumentError(EnvelopeError, TypeError, ValueError):
    """A setter received a value of the wrong type or outside its bounds.

    Subclasses both TypeError and ValueError so callers that only know the
    builtin categories can still catch it.
    """

    message = "Invalid argument"
