"""Response adapters shared by the endpoint definitions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from ..core.exceptions import MissingFieldError, WrongFieldTypeError
from ..decoding import decode_model, decode_model_list
from ..runtime.pagination import PageResponse
from ..runtime.rest import ResponseAdapter

M = TypeVar("M", bound=BaseModel)


def extract_envelope(response: Any, items_key: str) -> tuple[Any, int]:
    """Split a bulk response into its raw item list and total.

    v2 endpoints wrap items in ``{"data": [...], "total": n, "meta": {}}``,
    v1 endpoints in ``{"items": [...], "total": n}``.
    """
    if not isinstance(response, Mapping):
        raise WrongFieldTypeError(
            f"invalid response format: expected object, got {type(response).__name__}",
            raw=response,
            expected="object",
        )
    if items_key not in response:
        raise MissingFieldError(f"response missing '{items_key}' field", field=items_key, raw=response)
    if not isinstance(response[items_key], list):
        raise WrongFieldTypeError(
            f"response '{items_key}' is no array", field=items_key, raw=response, expected="array"
        )
    total = response.get("total", 0)
    if not isinstance(total, int) or isinstance(total, bool):
        raise WrongFieldTypeError(
            "response 'total' is no integer", field="total", raw=response, expected="integer"
        )
    return response[items_key], total


class ModelAdapter(ResponseAdapter, Generic[M]):
    """Adapter decoding the whole response into one model."""

    def __init__(self, model_cls: type[M], *, strict: bool = False) -> None:
        self._model_cls = model_cls
        self._strict = strict

    def parse(self, response: Any, params: dict[str, Any]) -> M:
        return decode_model(self._model_cls, response, strict=self._strict)


class PageAdapter(ResponseAdapter, Generic[M]):
    """Adapter decoding a bulk response into a page of models."""

    def __init__(self, model_cls: type[M], *, items_key: str, strict: bool = False) -> None:
        self._model_cls = model_cls
        self._items_key = items_key
        self._strict = strict

    def parse(self, response: Any, params: dict[str, Any]) -> PageResponse[M]:
        raw_items, total = extract_envelope(response, self._items_key)
        items = decode_model_list(
            self._model_cls, raw_items, strict=self._strict, field=self._items_key
        )
        return PageResponse(items=items, total=total)


class EmptyAdapter(ResponseAdapter):
    """Adapter for endpoints whose response body carries nothing of interest."""

    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None
