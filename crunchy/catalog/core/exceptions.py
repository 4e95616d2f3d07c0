"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class CatalogError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(CatalogError):
    """Network or HTTP level failure reported by the transport.

    Transport failures may be transient. Callers are free to retry them.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.url = url


class AccountError(CatalogError):
    """Operation requires an account id but none is configured."""

    pass


class DecodeError(CatalogError):
    """A raw JSON value could not be turned into a typed value.

    Decode errors are permanent for a given input: decoding the same bytes
    again fails identically.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        raw: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.raw = raw


class MissingFieldError(DecodeError):
    """A required field is absent."""

    pass


class WrongFieldTypeError(DecodeError):
    """A field is present but holds a value of the wrong type."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        raw: Any = None,
        expected: str | None = None,
    ) -> None:
        super().__init__(message, field=field, raw=raw)
        self.expected = expected


class UnexpectedFieldError(DecodeError):
    """Strict decoding found fields the target type does not declare."""

    def __init__(
        self,
        message: str,
        fields: list[str],
        field: str | None = None,
        raw: Any = None,
    ) -> None:
        super().__init__(message, field=field, raw=raw)
        self.fields = fields


class UnknownVariantError(DecodeError):
    """A discriminator holds a tag outside the known closed set."""

    def __init__(self, tag: str, field: str, raw: Any = None) -> None:
        super().__init__(f"cannot decode {field} '{tag}'", field=field, raw=raw)
        self.tag = tag


class MalformedQueryStringError(DecodeError):
    """An embedded URL query string is not valid form-urlencoded data."""

    def __init__(self, message: str, query: str, field: str | None = None) -> None:
        super().__init__(message, field=field, raw=query)
        self.query = query


class MalformedNumericValueError(DecodeError):
    """A value expected to be a non-negative integer is not one."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"'{field}' is not a valid count: {value!r}", field=field, raw=value)
        self.value = value


class PageFetchError(CatalogError):
    """A page fetch failed.

    Wraps the original error (also available as ``__cause__``) together with
    the offset and context of the request that failed, so the failure can be
    diagnosed and the request retried at the same offset.
    """

    def __init__(self, offset: int, context: Mapping[str, str], error: BaseException) -> None:
        super().__init__(f"page fetch at offset {offset} failed: {error}")
        self.offset = offset
        self.context = dict(context)
        self.error = error
