"""Structural JSON-to-model decoding.

Validates raw JSON values against wire models and translates pydantic
validation failures into the library's decode error taxonomy.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..core.exceptions import (
    DecodeError,
    MissingFieldError,
    UnexpectedFieldError,
    WrongFieldTypeError,
)
from ..models.base import STRICT_CONTEXT_KEY, UNEXPECTED_FIELDS_ERROR

M = TypeVar("M", bound=BaseModel)


@lru_cache(maxsize=None)
def _list_adapter(model_cls: type[BaseModel]) -> TypeAdapter:
    return TypeAdapter(list[model_cls])


def decode_model(
    model_cls: type[M], data: Any, *, strict: bool = False, field: str | None = None
) -> M:
    """Decode ``data`` into ``model_cls``.

    Args:
        model_cls: Target model
        data: Raw JSON value
        strict: Reject keys not declared on the target (at any depth)
        field: Name of the field ``data`` was read from, for error messages

    Raises:
        DecodeError: MissingFieldError, WrongFieldTypeError or UnexpectedFieldError
    """
    try:
        return model_cls.model_validate(data, context={STRICT_CONTEXT_KEY: strict})
    except ValidationError as e:
        raise to_decode_error(e, data, field) from e


def decode_model_list(
    model_cls: type[M], data: Any, *, strict: bool = False, field: str | None = None
) -> list[M]:
    """Decode a JSON array of objects into a list of ``model_cls``, keeping order."""
    try:
        return _list_adapter(model_cls).validate_python(
            data, context={STRICT_CONTEXT_KEY: strict}
        )
    except ValidationError as e:
        raise to_decode_error(e, data, field) from e


def to_decode_error(error: ValidationError, raw: Any, field: str | None = None) -> DecodeError:
    """Map the first pydantic error onto the decode error taxonomy."""
    details = error.errors()[0]
    path = [str(part) for part in details.get("loc", ())]
    if field:
        path.insert(0, field)
    location = ".".join(path) or None
    message = f"{location or 'value'}: {details.get('msg', 'invalid value')}"

    error_type = details.get("type")
    if error_type == "missing":
        return MissingFieldError(message, field=location, raw=raw)
    if error_type == UNEXPECTED_FIELDS_ERROR:
        fields = str((details.get("ctx") or {}).get("fields", "")).split(",")
        return UnexpectedFieldError(message, fields=fields, field=location, raw=raw)
    return WrongFieldTypeError(message, field=location, raw=raw, expected=error_type)
