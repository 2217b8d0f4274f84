"""Dataclass descriptors for mock playback and custom endpoints."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
BODY_METHODS = ("POST", "PUT", "PATCH")

UrlPart = Union[str, Callable[[Mapping[str, Any]], str]]

# Accepted spellings of the mock delay, in milliseconds.
_DELAY_KEYS = ("delay", "delay_milliseconds", "delayMilliseconds")


@dataclass(frozen=True)
class MockResponse:
    """Canned response replayed instead of a real exchange."""

    status_code: int
    body: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MockResponse:
        status_code = data["status_code"] if "status_code" in data else data["statusCode"]
        return cls(status_code=int(status_code), body=data.get("body"))


@dataclass(frozen=True)
class Mock:
    """A mock response plus an artificial delay in milliseconds.

    Only honoured when the API is in dev mode.
    """

    response: MockResponse
    delay: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Mock:
        response = data["response"]
        if not isinstance(response, MockResponse):
            response = MockResponse.from_dict(response)
        delay = 0
        for key in _DELAY_KEYS:
            if key in data:
                delay = data[key]
                break
        return cls(response=response, delay=int(delay))

    @classmethod
    def coerce(cls, value: Mock | Mapping[str, Any] | None) -> Mock | None:
        if value is None or isinstance(value, Mock):
            return value
        return cls.from_dict(value)


@dataclass(frozen=True)
class CustomEndpoint:
    """Declarative description of one non-CRUD endpoint of a resource."""

    method: str
    url_part: UrlPart
    is_detail: bool = False

    def __post_init__(self) -> None:
        method = str(self.method).upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method for custom endpoint: {self.method!r}")
        if not isinstance(self.url_part, str) and not callable(self.url_part):
            raise TypeError("url_part must be a string or a callable returning a string")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "method", method)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CustomEndpoint:
        return cls(
            method=data["method"],
            url_part=data["url_part"],
            is_detail=bool(data.get("is_detail", False)),
        )

    def render_url_part(self, params: Mapping[str, Any]) -> str:
        if isinstance(self.url_part, str):
            return self.url_part
        return self.url_part(params)
