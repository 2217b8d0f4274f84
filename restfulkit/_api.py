"""Endpoint URL building for a REST API root."""

from __future__ import annotations

from collections.abc import Mapping
import os
from typing import Any

from ._exceptions import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


def to_query(params: Mapping[str, Any]) -> str:
    """Join params as ``key=value`` pairs, skipping keys whose value is None."""
    return "&".join(f"{key}={value}" for key, value in params.items() if value is not None)


class RESTfulAPI:
    """Base URL, optional path prefix and dev-mode flag shared by resources.

    Usage:
        api = RESTfulAPI("https://api.example.com", prefix="v1")
        api.get_url("widgets", {"page": 2})  # https://api.example.com/v1/widgets/?page=2
    """

    def __init__(self, base_url: str, prefix: str | None = None, dev: bool = False):
        self._base_url = base_url.rstrip("/")
        self._prefix = prefix
        self._dev = dev

    @classmethod
    def from_env(cls, **overrides: Any) -> RESTfulAPI:
        """Build from RESTFULKIT_BASE_URL, RESTFULKIT_PREFIX and RESTFULKIT_DEV."""
        base_url = overrides.get("base_url") or os.environ.get("RESTFULKIT_BASE_URL")
        if not base_url:
            raise ConfigurationError(
                "No base URL provided. Pass base_url= or set RESTFULKIT_BASE_URL env var."
            )
        prefix = overrides.get("prefix", os.environ.get("RESTFULKIT_PREFIX") or None)
        dev = overrides.get("dev")
        if dev is None:
            dev = os.environ.get("RESTFULKIT_DEV", "").strip().lower() in _TRUTHY
        return cls(base_url, prefix=prefix, dev=bool(dev))

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def prefix(self) -> str | None:
        return self._prefix

    def is_in_dev_mode(self) -> bool:
        return self._dev

    def get_url(
        self, route: str, params: Mapping[str, Any] | None = None, append_slash: bool = True
    ) -> str:
        root = f"/{self._prefix}/" if self._prefix is not None else "/"
        url = f"{self._base_url}{root}{route}{'/' if append_slash else ''}"
        if params:
            return f"{url}?{to_query(params)}"
        return url

    def __repr__(self) -> str:
        return f"RESTfulAPI({self._base_url!r}, prefix={self._prefix!r}, dev={self._dev!r})"
