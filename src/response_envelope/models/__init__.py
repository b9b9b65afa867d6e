"""Public models for the response envelope."""

from response_envelope.models.paging import Paging, PagingSnapshot
from response_envelope.models.responses import Response
from response_envelope.models.status import (
    StatusCode,
    is_registered,
    message_for,
    split_structured,
    status_name,
    structured_code,
)

__all__ = [
    "Paging",
    "PagingSnapshot",
    "Response",
    "StatusCode",
    "is_registered",
    "message_for",
    "split_structured",
    "status_name",
    "structured_code",
]
