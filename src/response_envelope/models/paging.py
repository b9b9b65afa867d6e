"""Pagination value object.

Each field is optional and validated on its own: page >= 0, size > 0,
total >= 0. Absent means "not applicable", never zero. There is no
cross-field check (page is not compared against size or total).
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)
from pydantic import ValidationError as PydanticValidationError

from response_envelope.errors import InvalidArgumentError

_RULES = {
    "page": "Page number must be a non-negative integer",
    "size": "Page size must be an integer greater than 0",
    "total": "Total count must be a non-negative integer",
}


class Paging(BaseModel):
    """Page / size / total triple attached to list responses."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    page: int | None = Field(default=None, ge=0)
    size: int | None = Field(default=None, gt=0)
    total: int | None = Field(default=None, ge=0)

    def __init__(
        self,
        page: int | None = None,
        size: int | None = None,
        total: int | None = None,
    ) -> None:
        values = {"page": page, "size": size, "total": total}
        try:
            super().__init__(**values)
        except PydanticValidationError as exc:
            field = str(exc.errors()[0]["loc"][0])
            raise InvalidArgumentError(
                _RULES.get(field, "Invalid paging"), **{field: values.get(field)}
            ) from exc

    @field_validator("page", "size", "total", mode="before")
    @classmethod
    def _require_int(cls, value: Any) -> Any:
        # bool is an int subclass; True must not pass as page 1
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise ValueError("must be an integer")
        return value

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def set_page(self, page: int | None) -> Paging:
        return self._assign("page", page)

    def set_size(self, size: int | None) -> Paging:
        return self._assign("size", size)

    def set_total(self, total: int | None) -> Paging:
        return self._assign("total", total)

    def _assign(self, field: str, value: int | None) -> Paging:
        if value is None:
            return self
        try:
            setattr(self, field, value)
        except PydanticValidationError as exc:
            raise InvalidArgumentError(_RULES[field], **{field: value}) from exc
        return self

    def to_dict(self) -> dict[str, int]:
        """Serialize the fields that are set."""
        return self.model_dump()


class PagingSnapshot(Paging):
    """Read-only copy of a Paging, embedded in a built Response."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def of(cls, paging: Paging) -> PagingSnapshot:
        if isinstance(paging, cls):
            return paging
        return cls(paging.page, paging.size, paging.total)

    def _assign(self, field: str, value: int | None) -> Paging:
        if value is None:
            return self
        raise InvalidArgumentError(
            "Paging of a built response is read-only", **{field: value}
        )
