"""
restfulkit - declarative REST resource clients

Normalizes HTTP responses into resolved values or typed errors and builds
resource clients with CRUD, custom endpoints and dev-mode mocking.
"""

__version__ = "0.1.0"

from ._api import RESTfulAPI, to_query
from ._exceptions import (
    STATUS_MAP,
    APIError,
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    GatewayTimeoutError,
    HTTPError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    RestfulKitError,
    ValidationError,
    error_for_status,
)
from ._http import (
    Dispatcher,
    RequestsTransport,
    delay,
    delete,
    get,
    patch,
    post,
    put,
    resolve_response,
    throw_timeout,
)
from ._resource import CustomMethod, Resource
from ._status import HTTP_STATUS_DESCRIPTIONS, is_error, is_successful
from ._types import CustomEndpoint, Mock, MockResponse

__all__ = [
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "ConflictError",
    "CustomEndpoint",
    "CustomMethod",
    "Dispatcher",
    "GatewayTimeoutError",
    "HTTPError",
    "HTTP_STATUS_DESCRIPTIONS",
    "Mock",
    "MockResponse",
    "NotFoundError",
    "PermissionDeniedError",
    "RESTfulAPI",
    "RateLimitError",
    "RequestsTransport",
    "Resource",
    "RestfulKitError",
    "STATUS_MAP",
    "ValidationError",
    "delay",
    "delete",
    "error_for_status",
    "get",
    "is_error",
    "is_successful",
    "patch",
    "post",
    "put",
    "resolve_response",
    "throw_timeout",
    "to_query",
]
