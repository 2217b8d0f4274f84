"""Resource clients: CRUD methods plus endpoints declared in a customization map."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ._http import Dispatcher, default_dispatcher
from ._types import CustomEndpoint, Mock

if TYPE_CHECKING:
    from ._api import RESTfulAPI

FIXED_METHODS = frozenset({"list", "create", "detail", "update", "replace", "remove"})

MockArg = Mock | Mapping[str, Any] | None


class CustomMethod:
    """A custom endpoint bound to its resource.

    Detail endpoints are called as ``method(id, ...)`` and hit
    ``{name}/{id}/{url_part}``; collection endpoints hit ``{name}/{url_part}``.
    """

    def __init__(self, resource: Resource, name: str, endpoint: CustomEndpoint):
        self._resource = resource
        self.name = name
        self.endpoint = endpoint

    def __call__(
        self,
        id: Any = None,
        *,
        filters: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        token: str | None = None,
        files: Mapping[str, Any] | None = None,
        url_part_params: Mapping[str, Any] | None = None,
        mock: MockArg = None,
    ) -> Any:
        resource = self._resource
        if self.endpoint.is_detail:
            if id is None:
                raise TypeError(f"{resource.name}.{self.name}() requires an id")
            route = f"{resource.name}/{id}/"
        else:
            route = f"{resource.name}/"
        route += self.endpoint.render_url_part(url_part_params or {})

        return resource.handle_request(
            resource.api.get_url(route),
            resource.api.get_url(route, filters or {}),
            self.endpoint.method,
            data if data is not None else {},
            resource.get_auth_headers(headers or {}, token),
            files,
            mock,
        )

    def __repr__(self) -> str:
        return f"<CustomMethod {self._resource.name}.{self.name} {self.endpoint.method}>"


class Resource:
    """A named REST collection.

    Usage:
        api = RESTfulAPI("https://api.example.com", prefix="v1")
        widgets = Resource(
            "widgets",
            api,
            customization={"activate": {"method": "POST", "url_part": "activate", "is_detail": True}},
        )
        widgets.list({"page": 2}, token="abc")
        widgets.custom["activate"](42)
    """

    def __init__(
        self,
        name: str,
        api: RESTfulAPI,
        *,
        header_key: str = "Authorization",
        header_prefix: str = "JWT",
        customization: Mapping[str, CustomEndpoint | Mapping[str, Any]] | None = None,
        http: Dispatcher | None = None,
    ):
        self.name = name
        self.api = api
        self._header_key = header_key
        self._header_prefix = header_prefix
        self._http = http if http is not None else default_dispatcher

        custom: dict[str, CustomMethod] = {}
        for key, entry in (customization or {}).items():
            if key in FIXED_METHODS:
                raise ValueError(f"Custom method {key!r} collides with a built-in resource method")
            endpoint = entry if isinstance(entry, CustomEndpoint) else CustomEndpoint.from_dict(entry)
            custom[key] = CustomMethod(self, key, endpoint)
        self.custom: Mapping[str, CustomMethod] = MappingProxyType(custom)

    def get_auth_headers(self, headers: Mapping[str, str], token: str | None) -> Mapping[str, str]:
        """Add the auth header when a token is given; otherwise return headers unchanged."""
        if token is None:
            return headers
        return {**headers, self._header_key: f"{self._header_prefix} {token}"}

    def _mock(self, mock: MockArg) -> MockArg:
        return mock if self.api.is_in_dev_mode() else None

    def handle_request(
        self,
        url: str,
        filtered_url: str,
        method: str,
        data: Mapping[str, Any] | None,
        headers: Mapping[str, str],
        files: Mapping[str, Any] | None = None,
        mock: MockArg = None,
    ) -> Any:
        """Route a custom call: body methods use ``url``, GET/DELETE use ``filtered_url``."""
        mock = self._mock(mock)
        if method == "POST":
            return self._http.post(url, data=data, headers=headers, files=files, mock=mock)
        if method == "PUT":
            return self._http.put(url, data=data, headers=headers, files=files, mock=mock)
        if method == "PATCH":
            return self._http.patch(url, data=data, headers=headers, files=files, mock=mock)
        if method == "DELETE":
            return self._http.delete(filtered_url, headers=headers, mock=mock)
        return self._http.get(filtered_url, headers=headers, mock=mock)

    def invoke_custom(self, name: str, /, *args: Any, **params: Any) -> Any:
        """Call the custom method ``name``."""
        try:
            method = self.custom[name]
        except KeyError:
            raise AttributeError(f"{self.name!r} has no custom method {name!r}") from None
        return method(*args, **params)

    def list(
        self,
        filters: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        token: str | None = None,
        mock: MockArg = None,
    ) -> Any:
        """GET the collection, with ``filters`` as query params."""
        return self._http.get(
            self.api.get_url(self.name, filters),
            headers=self.get_auth_headers(headers or {}, token),
            mock=self._mock(mock),
        )

    def create(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
        token: str | None = None,
        mock: MockArg = None,
    ) -> Any:
        """POST to the collection."""
        return self._http.post(
            self.api.get_url(self.name),
            data=data,
            headers=self.get_auth_headers(headers or {}, token),
            files=files,
            mock=self._mock(mock),
        )

    def detail(
        self,
        id: Any,
        *,
        headers: Mapping[str, str] | None = None,
        token: str | None = None,
        mock: MockArg = None,
    ) -> Any:
        return self._http.get(
            self.api.get_url(f"{self.name}/{id}"),
            headers=self.get_auth_headers(headers or {}, token),
            mock=self._mock(mock),
        )

    def update(
        self,
        id: Any,
        data: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
        token: str | None = None,
        mock: MockArg = None,
    ) -> Any:
        """PATCH a single item."""
        return self._http.patch(
            self.api.get_url(f"{self.name}/{id}"),
            data=data if data is not None else {},
            headers=self.get_auth_headers(headers or {}, token),
            files=files,
            mock=self._mock(mock),
        )

    def replace(
        self,
        id: Any,
        data: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
        token: str | None = None,
        mock: MockArg = None,
    ) -> Any:
        """PUT a single item."""
        return self._http.put(
            self.api.get_url(f"{self.name}/{id}"),
            data=data if data is not None else {},
            headers=self.get_auth_headers(headers or {}, token),
            files=files,
            mock=self._mock(mock),
        )

    def remove(
        self,
        id: Any,
        *,
        headers: Mapping[str, str] | None = None,
        token: str | None = None,
        mock: MockArg = None,
    ) -> Any:
        return self._http.delete(
            self.api.get_url(f"{self.name}/{id}"),
            headers=self.get_auth_headers(headers or {}, token),
            mock=self._mock(mock),
        )

    def __repr__(self) -> str:
        return f"<Resource {self.name!r} custom={sorted(self.custom)}>"
