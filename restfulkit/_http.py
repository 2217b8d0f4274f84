"""Request dispatch over requests, with response normalization and mock playback."""

from __future__ import annotations

from collections.abc import Callable, Mapping
import json
import logging
import time
from typing import Any

import requests

from ._exceptions import HTTPError, error_for_status
from ._status import GATEWAY_TIMEOUT, NO_CONTENT, is_error, is_successful
from ._types import BODY_METHODS, Mock

logger = logging.getLogger(__name__)

Transport = Callable[..., Any]
Sleep = Callable[[float], Any]
Headers = Mapping[str, str] | None
Payload = Mapping[str, Any] | None
MockArg = Mock | Mapping[str, Any] | None

_JSON_CONTENT_TYPE = "application/json"


class RequestsTransport:
    """Default transport: one ``requests`` exchange per call, no retries."""

    def __init__(self, session: requests.Session | None = None, timeout: float | None = None):
        self._session = session
        self._timeout = timeout

    def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        data: str | None = None,
    ) -> requests.Response:
        send = self._session.request if self._session is not None else requests.request
        return send(method, url, headers=dict(headers), data=data, timeout=self._timeout)


def delay(milliseconds: float, sleep: Sleep = time.sleep) -> None:
    """Wait ``milliseconds``; non-positive values return immediately."""
    if milliseconds <= 0:
        return
    sleep(milliseconds / 1000)


def _timeout_error(location: str) -> HTTPError:
    return error_for_status(
        GATEWAY_TIMEOUT,
        data={"location": location},
        meta="Server did not respond, the data from this error is synthetic",
    )


def throw_timeout(location: str) -> None:
    """Raise the synthetic error used when no response was received."""
    raise _timeout_error(location)


def _content_types(response: Any) -> list[str]:
    header = response.headers.get("content-type") or ""
    return [part.strip().lower() for part in header.split(";")]


def resolve_response(response: Any) -> Any:
    """Turn a transport response into a resolved value or raise HTTPError."""
    status_code = response.status_code
    is_json = _JSON_CONTENT_TYPE in _content_types(response)

    if is_successful(status_code):
        # No body
        if status_code == NO_CONTENT:
            return {}
        if is_json:
            try:
                return response.json()
            except ValueError:
                logger.debug("Failed to parse JSON success body (status %d)", status_code)
                raise error_for_status(
                    status_code,
                    data=response.text,
                    meta="Server returned success, but an error occurred while parsing JSON response",
                ) from None
        return {"text": response.text, "response": response}

    if is_error(status_code):
        if is_json:
            try:
                data = response.json()
            except ValueError:
                logger.debug("Failed to parse JSON error body (status %d)", status_code)
                raise error_for_status(
                    status_code,
                    data=response.text,
                    meta="Server returned a JSON error response, but an error occurred while parsing it",
                ) from None
            raise error_for_status(
                status_code, data=data, meta="Server returned a JSON error response"
            )
        raise error_for_status(
            status_code, data=response.text, meta="Server returned a PLAIN error response"
        )

    # 1xx and 3xx are not handled; resolve to an empty value.
    logger.debug("Unhandled status %d resolved to an empty value", status_code)
    return {}


def play_mock(mock: Mock, sleep: Sleep = time.sleep) -> Any:
    """Replay a mock descriptor without touching the transport."""
    delay(mock.delay, sleep)
    status_code, body = mock.response.status_code, mock.response.body
    if is_successful(status_code):
        # No body
        if status_code == NO_CONTENT:
            return {}
        return body
    raise error_for_status(status_code, data=body, meta="Server returned a JSON error")


class Dispatcher:
    """Builds requests, dispatches them through the transport and resolves the result."""

    def __init__(self, transport: Transport | None = None, sleep: Sleep = time.sleep):
        self._transport = transport if transport is not None else RequestsTransport()
        self._sleep = sleep

    def call(
        self,
        method: str,
        url: str,
        *,
        data: Payload = None,
        headers: Headers = None,
        files: Payload = None,
        mock: MockArg = None,
    ) -> Any:
        """Dispatch one request, or replay ``mock`` when given."""
        if files:
            raise NotImplementedError("File uploads are not supported")

        mock = Mock.coerce(mock)
        if mock is not None:
            logger.debug("Replaying mock %s %s (status %d)", method, url, mock.response.status_code)
            return play_mock(mock, self._sleep)

        request_headers = {"Content-Type": _JSON_CONTENT_TYPE, **(headers or {})}
        body = None
        if method in BODY_METHODS and data is not None:
            body = json.dumps(data)

        logger.debug("%s %s", method, url)
        try:
            response = self._transport(method, url, headers=request_headers, data=body)
        except (requests.RequestException, OSError) as e:
            logger.warning("Request %s %s failed: %s", method, url, e)
            raise _timeout_error(f"{method} {url}") from e
        return resolve_response(response)

    def get(self, url: str, *, headers: Headers = None, mock: MockArg = None) -> Any:
        return self.call("GET", url, headers=headers, mock=mock)

    def post(
        self,
        url: str,
        *,
        data: Payload = None,
        headers: Headers = None,
        files: Payload = None,
        mock: MockArg = None,
    ) -> Any:
        return self.call("POST", url, data=data, headers=headers, files=files, mock=mock)

    def put(
        self,
        url: str,
        *,
        data: Payload = None,
        headers: Headers = None,
        files: Payload = None,
        mock: MockArg = None,
    ) -> Any:
        return self.call("PUT", url, data=data, headers=headers, files=files, mock=mock)

    def patch(
        self,
        url: str,
        *,
        data: Payload = None,
        headers: Headers = None,
        files: Payload = None,
        mock: MockArg = None,
    ) -> Any:
        return self.call("PATCH", url, data=data, headers=headers, files=files, mock=mock)

    def delete(self, url: str, *, headers: Headers = None, mock: MockArg = None) -> Any:
        return self.call("DELETE", url, headers=headers, mock=mock)


default_dispatcher = Dispatcher()


def get(url: str, *, headers: Headers = None, mock: MockArg = None) -> Any:
    return default_dispatcher.get(url, headers=headers, mock=mock)


def post(
    url: str,
    *,
    data: Payload = None,
    headers: Headers = None,
    files: Payload = None,
    mock: MockArg = None,
) -> Any:
    return default_dispatcher.post(url, data=data, headers=headers, files=files, mock=mock)


def put(
    url: str,
    *,
    data: Payload = None,
    headers: Headers = None,
    files: Payload = None,
    mock: MockArg = None,
) -> Any:
    return default_dispatcher.put(url, data=data, headers=headers, files=files, mock=mock)


def patch(
    url: str,
    *,
    data: Payload = None,
    headers: Headers = None,
    files: Payload = None,
    mock: MockArg = None,
) -> Any:
    return default_dispatcher.patch(url, data=data, headers=headers, files=files, mock=mock)


def delete(url: str, *, headers: Headers = None, mock: MockArg = None) -> Any:
    return default_dispatcher.delete(url, headers=headers, mock=mock)
