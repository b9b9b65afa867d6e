"""Fluent response builder.

A builder accumulates status, message, data, paging and metadata through
chained setters, each validated at call time, then freezes them into a
Response with a single build() call:

    ResponseBuilder.ok().set_data({"message": "Hello World"}).build()

Named constructors are generated from NAMED_OUTCOMES, one per catalog
entry (``ok``, ``not_found``, ``lt_notfound_user`` ...). Builders are
short-lived and owned by one call site; create a fresh one per response.
"""

from __future__ import annotations

import keyword
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Generic, TypeVar

from response_envelope.config.policy import StatusPolicy
from response_envelope.config.settings import get_settings
from response_envelope.errors import InvalidArgumentError
from response_envelope.models.paging import Paging
from response_envelope.models.responses import Response
from response_envelope.models.status import StatusCode, message_for

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _outcome_name(member: StatusCode) -> str:
    name = member.name.lower()
    return f"{name}_" if keyword.iskeyword(name) else name


NAMED_OUTCOMES: Mapping[str, StatusCode] = MappingProxyType(
    {_outcome_name(member): member for member in StatusCode}
)


class ResponseBuilder(Generic[T]):
    """Mutable accumulator that produces an immutable Response."""

    def __init__(
        self,
        status: int | None = None,
        message: str | None = None,
        *,
        policy: StatusPolicy | None = None,
    ) -> None:
        self._policy = policy if policy is not None else get_settings().status_policy
        self._status: int | None = None
        self._message: str | None = None
        self._data: T | None = None
        self._paging: Paging | None = None
        self._metadata: dict[str, Any] | None = None
        self.set_status(status)
        self.set_message(message)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, code: int, *, policy: StatusPolicy | None = None) -> ResponseBuilder[Any]:
        """Builder pre-bound to *code*; the message is resolved at build time."""
        return cls(code, policy=policy)

    @classmethod
    def custom_response(cls, *, policy: StatusPolicy | None = None) -> ResponseBuilder[Any]:
        """Builder with no preset status or message."""
        return cls(policy=policy)

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def set_status(self, status: int | None) -> ResponseBuilder[T]:
        if status is None:
            return self
        if isinstance(status, bool) or not isinstance(status, int):
            raise InvalidArgumentError("Status must be an integer", status=status)
        if not self._policy.accepts(status):
            raise InvalidArgumentError(
                f"Invalid status: status code must be {self._policy.describe()}",
                status=status,
                policy=self._policy.value,
            )
        self._status = int(status)
        return self

    def set_message(self, message: str | None) -> ResponseBuilder[T]:
        if message is None:
            return self
        if not isinstance(message, str):
            raise InvalidArgumentError(
                "Message must be a string", received=type(message).__name__
            )
        self._message = message
        return self

    def set_data(self, data: T) -> ResponseBuilder[T]:
        self._data = data
        return self

    def set_paging(self, paging: Paging | None) -> ResponseBuilder[T]:
        if paging is None:
            return self
        if not isinstance(paging, Paging):
            raise InvalidArgumentError(
                f"Invalid type: expected Paging, received {type(paging).__name__}"
            )
        self._paging = paging
        return self

    def set_metadata(self, metadata: Mapping[str, Any]) -> ResponseBuilder[T]:
        if not isinstance(metadata, Mapping):
            raise InvalidArgumentError(
                "Invalid metadata: metadata must be a non-null mapping",
                received=type(metadata).__name__,
            )
        if not all(isinstance(key, str) for key in metadata):
            raise InvalidArgumentError("Invalid metadata: keys must be strings")
        self._metadata = dict(metadata)
        return self

    # ------------------------------------------------------------------
    # Terminal
    # ------------------------------------------------------------------

    def build(self) -> Response[T]:
        """Freeze the accumulated fields into a Response.

        If no message was set and a status is present, the catalog message
        for that status is used. An unregistered status leaves the message
        unset rather than failing.
        """
        message = self._message
        if message is None and self._status is not None:
            message = message_for(self._status)
            if message is None:
                logger.debug(
                    "No canonical message for status %d",
                    self._status,
                    extra={"status_code": self._status},
                )
        return Response(
            status=self._status,
            message=message,
            data=self._data,
            paging=self._paging,
            metadata=self._metadata,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def policy(self) -> StatusPolicy:
        return self._policy

    @property
    def status(self) -> int | None:
        return self._status

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def data(self) -> T | None:
        return self._data

    @property
    def paging(self) -> Paging | None:
        return self._paging

    @property
    def metadata(self) -> dict[str, Any] | None:
        return self._metadata


def _named_factory(code: StatusCode) -> Callable[..., ResponseBuilder[Any]]:
    def factory(
        cls: type[ResponseBuilder[Any]], *, policy: StatusPolicy | None = None
    ) -> ResponseBuilder[Any]:
        return cls.of(code, policy=policy)

    factory.__doc__ = f"Builder pre-bound to {code.value} ({code.message})."
    return factory


for _name, _code in NAMED_OUTCOMES.items():
    _factory = _named_factory(_code)
    _factory.__name__ = _name
    _factory.__qualname__ = f"ResponseBuilder.{_name}"
    setattr(ResponseBuilder, _name, classmethod(_factory))

del _name, _code, _factory
