"""Generic response envelope model.

Every response built by ResponseBuilder serializes to this shape:
{ status: int, message: str, data: T | None, paging?: {...}, metadata?: {...} }

paging and metadata are emitted only when set; they never appear as null keys.
Both are stored read-only: paging as a PagingSnapshot, metadata behind a
MappingProxyType over a private copy.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_serializer,
)

from response_envelope.models.paging import Paging, PagingSnapshot

T = TypeVar("T")

_OPTIONAL_KEYS = ("paging", "metadata")


class Response(BaseModel, Generic[T]):
    """Immutable, serializable response envelope."""

    model_config = ConfigDict(frozen=True)

    status: int | None = None
    message: str | None = None
    data: T | None = None
    paging: Paging | None = None
    metadata: Mapping[str, Any] | None = None

    @field_validator("paging")
    @classmethod
    def _freeze_paging(cls, value: Paging | None) -> Paging | None:
        return PagingSnapshot.of(value) if value is not None else None

    @field_validator("metadata")
    @classmethod
    def _freeze_metadata(cls, value: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
        return MappingProxyType(dict(value)) if value is not None else None

    @field_serializer("metadata")
    def _metadata_dict(self, value: Mapping[str, Any] | None) -> dict[str, Any] | None:
        return dict(value) if value is not None else None

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        body = handler(self)
        for key in _OPTIONAL_KEYS:
            if body.get(key) is None:
                body.pop(key, None)
        return body

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()
