"""HTTP status table and success/error classification."""

from http import HTTPStatus

NO_CONTENT = HTTPStatus.NO_CONTENT.value
GATEWAY_TIMEOUT = HTTPStatus.GATEWAY_TIMEOUT.value

# Status code -> human readable description.
HTTP_STATUS_DESCRIPTIONS: dict[int, str] = {status.value: status.phrase for status in HTTPStatus}


def is_successful(status_code: int) -> bool:
    """2xx."""
    return 200 <= status_code < 300


def is_error(status_code: int) -> bool:
    """4xx and 5xx. 1xx/3xx are neither successful nor errors."""
    return 400 <= status_code < 600


def describe(status_code: int) -> str:
    return HTTP_STATUS_DESCRIPTIONS.get(
        status_code, f"Unidentified error status code {status_code}"
    )
