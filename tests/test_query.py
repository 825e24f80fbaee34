"""Tests for request URL construction."""

from __future__ import annotations

from urllib.parse import quote

import httpx
import pytest
from pydantic import SecretStr

from okashi.config import ApiSettings
from okashi.services.exceptions import EncodingError, URLConstructionError
from okashi.services.query import QueryBuilder


def test_build_matches_wire_format():
    query = QueryBuilder().build("チョコ")

    assert str(query.url) == (
        "https://sysbird.jp/toriko/api/"
        "?apikey=guest&format=json&keyword=%E3%83%81%E3%83%A7%E3%82%B3&max=10&order=r"
    )
    assert query.keyword == "チョコ"


def test_build_keyword_component_is_percent_encoded():
    query = QueryBuilder().build("チョコ")

    assert query.url.params["keyword"] == "チョコ"
    assert f"keyword={quote('チョコ', safe='')}" in query.url.query.decode("ascii")
    for literal in ("apikey=guest", "format=json", "max=10", "order=r"):
        assert literal in query.url.query.decode("ascii")


def test_build_is_deterministic():
    builder = QueryBuilder()
    for keyword in ("ポテト", "pocky", "a b", "100%", ""):
        assert builder.build(keyword).url == builder.build(keyword).url


def test_reserved_characters_stay_inside_keyword():
    query = QueryBuilder().build("milk&max=99#top")

    assert query.url.params["keyword"] == "milk&max=99#top"
    assert query.url.params.get_list("max") == ["10"]
    assert query.url.fragment == ""


def test_empty_keyword_is_sent_as_is():
    query = QueryBuilder().build("")

    assert "keyword=&" in query.url.query.decode("ascii")


def test_unencodable_keyword_raises_encoding_error():
    with pytest.raises(EncodingError):
        QueryBuilder().build("choco\ud800")


def test_non_text_keyword_raises_encoding_error():
    with pytest.raises(EncodingError):
        QueryBuilder().build(None)  # type: ignore[arg-type]


def test_invalid_url_raises_url_construction_error(monkeypatch):
    def _reject(*args, **kwargs):
        raise httpx.InvalidURL("bad")

    monkeypatch.setattr("okashi.services.query.httpx.URL", _reject)
    with pytest.raises(URLConstructionError):
        QueryBuilder().build("choco")


def test_url_without_host_raises_url_construction_error(monkeypatch):
    builder = QueryBuilder()
    monkeypatch.setattr(builder, "_endpoint", lambda: "/toriko/api/")
    with pytest.raises(URLConstructionError):
        builder.build("choco")


def test_build_uses_configured_parameters():
    settings = ApiSettings(
        base_url="https://api.example/search/",
        api_key=SecretStr("secret"),
        max_results=5,
    )
    query = QueryBuilder(settings).build("gum")

    assert query.url.host == "api.example"
    assert query.url.path == "/search/"
    assert query.url.params["apikey"] == "secret"
    assert query.url.params["max"] == "5"
