"""Error hierarchy raised for every non-success and transport-failure outcome."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ._status import describe


class RestfulKitError(Exception):
    """Base exception for all restfulkit errors."""


class ConfigurationError(RestfulKitError):
    """Invalid or missing client configuration."""


class HTTPError(RestfulKitError):
    """A normalized HTTP failure.

    ``data`` keeps the payload as-is when it is a mapping (``is_structured``
    is then True); anything else is coerced to its string form. Fields are
    read-only once constructed.
    """

    def __init__(self, status_code: int, data: Any = None, meta: str = ""):
        if data is None:
            data = {}
        description = describe(status_code)
        super().__init__(description)
        self._status_code = status_code
        self._description = description
        self._is_structured = isinstance(data, Mapping)
        self._data = data if self._is_structured else f"{data}"
        self._meta = meta

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def description(self) -> str:
        return self._description

    @property
    def is_structured(self) -> bool:
        return self._is_structured

    @property
    def data(self) -> Mapping[str, Any] | str:
        return self._data

    @property
    def meta(self) -> str:
        return self._meta

    def to_dict(self) -> dict[str, Any]:
        return {
            "status_code": self._status_code,
            "description": self._description,
            "is_structured": self._is_structured,
            "data": self._data,
            "meta": self._meta,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self._status_code!r}, "
            f"data={self._data!r}, meta={self._meta!r})"
        )


class ValidationError(HTTPError):
    """400/422 — invalid request parameters."""


class AuthenticationError(HTTPError):
    """401 — invalid or missing credentials."""


class PermissionDeniedError(HTTPError):
    """403 — insufficient permissions."""


class NotFoundError(HTTPError):
    """404 — resource does not exist."""


class ConflictError(HTTPError):
    """409 — resource already exists or conflicts."""


class RateLimitError(HTTPError):
    """429 — too many requests."""


class APIError(HTTPError):
    """500+ — server-side error."""


class GatewayTimeoutError(APIError):
    """504 — also raised when the server did not respond at all."""


# Map HTTP status codes to exception classes.
STATUS_MAP: dict[int, type[HTTPError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
    504: GatewayTimeoutError,
}


def error_for_status(status_code: int, data: Any = None, meta: str = "") -> HTTPError:
    """Build the most specific HTTPError subclass for ``status_code``."""
    exc_cls = STATUS_MAP.get(status_code)
    if exc_cls is None:
        exc_cls = APIError if status_code >= 500 else HTTPError
    return exc_cls(status_code, data=data, meta=meta)
