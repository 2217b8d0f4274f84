"""Tests for endpoint URL building and environment configuration."""

import os

import pytest

from restfulkit._api import RESTfulAPI, to_query
from restfulkit._exceptions import ConfigurationError


class TestGetURL:
    def test_no_prefix(self, base_url):
        assert RESTfulAPI(base_url).get_url("widgets", {}, True) == "https://api.test/widgets/"

    def test_with_prefix(self, base_url):
        api = RESTfulAPI(base_url, prefix="v1")
        assert api.get_url("widgets") == "https://api.test/v1/widgets/"

    def test_without_trailing_slash(self, base_url):
        assert RESTfulAPI(base_url).get_url("widgets", append_slash=False) == (
            "https://api.test/widgets"
        )

    def test_query_skips_none(self, base_url):
        url = RESTfulAPI(base_url).get_url("widgets", {"page": 2, "q": None})
        assert url == "https://api.test/widgets/?page=2"
        assert "q" not in url.split("?")[1]

    def test_query_keeps_other_falsy_values(self, base_url):
        url = RESTfulAPI(base_url).get_url("widgets", {"q": "", "page": 0, "active": False})
        assert url == "https://api.test/widgets/?q=&page=0&active=False"

    def test_query_preserves_order(self, base_url):
        url = RESTfulAPI(base_url).get_url("w", {"b": 1, "a": 2})
        assert url.endswith("?b=1&a=2")

    def test_trailing_slash_on_base_stripped(self):
        assert RESTfulAPI("https://api.test/").get_url("w") == "https://api.test/w/"


class TestToQuery:
    def test_joins_pairs(self):
        assert to_query({"a": 1, "b": "x"}) == "a=1&b=x"

    def test_all_none(self):
        assert to_query({"a": None}) == ""


class TestDevMode:
    def test_default_off(self, base_url):
        assert RESTfulAPI(base_url).is_in_dev_mode() is False

    def test_on(self, base_url):
        assert RESTfulAPI(base_url, dev=True).is_in_dev_mode() is True


class TestFromEnv:
    def test_reads_environment(self):
        os.environ["RESTFULKIT_BASE_URL"] = "https://env.test"
        os.environ["RESTFULKIT_PREFIX"] = "api"
        os.environ["RESTFULKIT_DEV"] = "True"
        api = RESTfulAPI.from_env()
        assert api.get_url("w") == "https://env.test/api/w/"
        assert api.is_in_dev_mode() is True

    def test_dev_defaults_off(self):
        os.environ["RESTFULKIT_BASE_URL"] = "https://env.test"
        api = RESTfulAPI.from_env()
        assert api.is_in_dev_mode() is False
        assert api.prefix is None

    def test_overrides_win(self):
        os.environ["RESTFULKIT_BASE_URL"] = "https://env.test"
        os.environ["RESTFULKIT_DEV"] = "1"
        api = RESTfulAPI.from_env(base_url="https://other.test", dev=False)
        assert api.base_url == "https://other.test"
        assert api.is_in_dev_mode() is False

    def test_missing_base_url(self):
        with pytest.raises(ConfigurationError):
            RESTfulAPI.from_env()
