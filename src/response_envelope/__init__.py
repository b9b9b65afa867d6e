"""Standard response envelopes: status catalog, fluent builder, paging."""

from response_envelope.builder import NAMED_OUTCOMES, ResponseBuilder
from response_envelope.config import (
    EnvelopeSettings,
    LocaleMessages,
    StatusPolicy,
    get_settings,
    load_locale_messages,
)
from response_envelope.errors import EnvelopeError, InvalidArgumentError
from response_envelope.logging_config import configure_logging
from response_envelope.models import (
    Paging,
    PagingSnapshot,
    Response,
    StatusCode,
    is_registered,
    message_for,
    split_structured,
    status_name,
    structured_code,
)

__all__ = [
    "EnvelopeError",
    "EnvelopeSettings",
    "InvalidArgumentError",
    "LocaleMessages",
    "NAMED_OUTCOMES",
    "Paging",
    "PagingSnapshot",
    "Response",
    "ResponseBuilder",
    "StatusCode",
    "StatusPolicy",
    "configure_logging",
    "get_settings",
    "is_registered",
    "load_locale_messages",
    "message_for",
    "split_structured",
    "status_name",
    "structured_code",
]
