"""Shared configuration for request and response payloads."""

from __future__ import annotations

from typing import ClassVar, Self

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

_URL_ADAPTER = TypeAdapter(AnyUrl)


class ApiModel(BaseModel):
    """Response payload serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class ApiRequest(BaseModel):
    """Request body accepting camelCase keys and rejecting unknown ones."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")


def validate_url(value: str | None) -> str | None:
    """Require a URI while keeping the submitted spelling."""
    if value is None:
        return value
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        msg = f"{value!r} is not a valid URI"
        raise ValueError(msg) from exc
    return value


class ApiUpdateRequest(ApiRequest):
    """Partial-update body; fields in ``non_nullable`` may be omitted but not nulled."""

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self) -> Self:
        for name in sorted(self.model_fields_set & self.non_nullable):
            if getattr(self, name) is None:
                msg = f"{to_camel(name)} cannot be null"
                raise ValueError(msg)
        return self
